"""Immutable Go board with group, liberty and capture handling.

A :class:`Board` never changes after construction.  :meth:`Board.place` and
:meth:`Board.remove_stones` return new boards, so earlier positions stay
valid and can be compared against later ones.
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Set, Tuple, Union

MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 25

# up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Position(NamedTuple):
    """Board coordinate, 0-based, ``x`` left to right and ``y`` top to bottom."""

    x: int
    y: int


class StoneColor(Enum):
    """Contents of a single board cell."""

    BLACK = "black"
    WHITE = "white"
    EMPTY = "empty"


class Stone(Enum):
    """Color of a stone that can actually be played."""

    BLACK = "black"
    WHITE = "white"

    @property
    def cell(self) -> StoneColor:
        return StoneColor(self.value)

    @property
    def opponent(self) -> "Stone":
        return Stone.WHITE if self is Stone.BLACK else Stone.BLACK


class BoardSizeError(ValueError):
    """Raised when a board is created with an unsupported size."""


class InvalidColorError(ValueError):
    """Raised for an empty placement color or a cell value that is not a color."""


class IllegalMoveError(ValueError):
    """Base class for placements that break the rules of Go."""

    def __init__(self, message: str, position: Position) -> None:
        super().__init__(message)
        self.position = position


class PositionOutOfRangeError(IllegalMoveError):
    """The target point lies outside the board."""


class OccupiedError(IllegalMoveError):
    """The target point already holds a stone."""


class SuicideError(IllegalMoveError):
    """The placed stone's group would be left without liberties."""


Color = Union[Stone, StoneColor]


class Board:
    """A square Go board of ``size`` x ``size`` points.

    The grid is stored as a flat tuple indexed by ``y * size + x``.
    """

    __slots__ = ("size", "_cells")

    def __init__(self, size: int, cells: Optional[Sequence[StoneColor]] = None) -> None:
        if not isinstance(size, int) or not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            raise BoardSizeError(
                f"Invalid board size: {size}. Must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}"
            )
        if cells is None:
            cells = (StoneColor.EMPTY,) * (size * size)
        elif len(cells) != size * size:
            raise BoardSizeError(f"Expected {size * size} cells for a {size}x{size} board, got {len(cells)}")
        cells = tuple(cells)
        for cell in cells:
            if not isinstance(cell, StoneColor):
                raise InvalidColorError(f"Invalid cell value: {cell!r}. Expected a StoneColor")
        self.size = size
        self._cells: Tuple[StoneColor, ...] = cells

    @classmethod
    def empty(cls, size: int) -> "Board":
        """Return an empty board of ``size``."""
        return cls(size)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_valid(self, position: Tuple[int, int]) -> bool:
        """Return ``True`` if ``position`` lies on the board."""
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def stone_at(self, position: Tuple[int, int]) -> StoneColor:
        """Return the cell color at ``position``; off-board points read as empty."""
        if not self.is_valid(position):
            return StoneColor.EMPTY
        x, y = position
        return self._cells[y * self.size + x]

    def neighbors(self, position: Tuple[int, int]) -> Iterator[Position]:
        """Yield the orthogonal neighbors of ``position`` that are on the board."""
        x, y = position
        for dx, dy in DIRECTIONS:
            candidate = Position(x + dx, y + dy)
            if self.is_valid(candidate):
                yield candidate

    def group(self, position: Tuple[int, int]) -> FrozenSet[Position]:
        """Return the connected same-colored group containing ``position``."""
        color = self.stone_at(position)
        if color is StoneColor.EMPTY:
            return frozenset()
        start = Position(*position)
        group: Set[Position] = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            for neighbor in self.neighbors(current):
                if neighbor not in group and self.stone_at(neighbor) is color:
                    group.add(neighbor)
                    stack.append(neighbor)
        return frozenset(group)

    def liberties(self, group: Iterable[Tuple[int, int]]) -> FrozenSet[Position]:
        """Return every empty point adjacent to a stone of ``group``."""
        libs: Set[Position] = set()
        for position in group:
            for neighbor in self.neighbors(position):
                if self.stone_at(neighbor) is StoneColor.EMPTY:
                    libs.add(neighbor)
        return frozenset(libs)

    def has_liberties(self, group: Iterable[Tuple[int, int]]) -> bool:
        """Return ``True`` if any stone in ``group`` touches an empty point."""
        for position in group:
            for neighbor in self.neighbors(position):
                if self.stone_at(neighbor) is StoneColor.EMPTY:
                    return True
        return False

    def stones(self) -> Iterator[Tuple[Position, StoneColor]]:
        """Yield ``(position, color)`` for every occupied point in row-major order."""
        for index, color in enumerate(self._cells):
            if color is not StoneColor.EMPTY:
                yield Position(index % self.size, index // self.size), color

    def to_rows(self) -> List[List[StoneColor]]:
        """Return a copy of the grid as a list of rows."""
        size = self.size
        return [list(self._cells[y * size:(y + 1) * size]) for y in range(size)]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def place(self, position: Tuple[int, int], color: Color) -> "Board":
        """Return a new board with a ``color`` stone played at ``position``.

        Opponent groups left without liberties are captured before the
        suicide check, so filling the last liberty of an enemy group is legal
        even when the new stone has no liberty of its own beforehand.

        Raises
        ------
        InvalidColorError
            If ``color`` is :attr:`StoneColor.EMPTY`.
        PositionOutOfRangeError
            If ``position`` is not on the board.
        OccupiedError
            If ``position`` already holds a stone.
        SuicideError
            If the placed stone's group has no liberties after captures.
        """
        cell = color.cell if isinstance(color, Stone) else color
        if cell is StoneColor.EMPTY:
            raise InvalidColorError("Cannot place an empty stone")
        target = Position(*position)
        if not self.is_valid(target):
            raise PositionOutOfRangeError(f"Invalid position: {target.x}, {target.y}", target)
        if self.stone_at(target) is not StoneColor.EMPTY:
            raise OccupiedError(f"Position already occupied: {target.x}, {target.y}", target)

        cells = list(self._cells)
        cells[target.y * self.size + target.x] = cell
        board = Board(self.size, cells)

        opponent = StoneColor.WHITE if cell is StoneColor.BLACK else StoneColor.BLACK
        for neighbor in self.neighbors(target):
            if board.stone_at(neighbor) is opponent:
                enemy = board.group(neighbor)
                if not board.has_liberties(enemy):
                    board = board.remove_stones(enemy)

        if not board.has_liberties(board.group(target)):
            raise SuicideError(f"Suicide move not allowed: {target.x}, {target.y}", target)
        return board

    def remove_stones(self, positions: Iterable[Tuple[int, int]]) -> "Board":
        """Return a new board with ``positions`` emptied; off-board points are ignored."""
        cells = list(self._cells)
        for position in positions:
            if self.is_valid(position):
                x, y = position
                cells[y * self.size + x] = StoneColor.EMPTY
        return Board(self.size, cells)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def equals(self, other: "Board") -> bool:
        """Return ``True`` if ``other`` has the same size and stones."""
        return self.size == other.size and self._cells == other._cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.size, self._cells))

    def __repr__(self) -> str:
        return f"Board(size={self.size}, stones={sum(1 for _ in self.stones())})"


__all__ = [
    "Board",
    "BoardSizeError",
    "IllegalMoveError",
    "InvalidColorError",
    "MAX_BOARD_SIZE",
    "MIN_BOARD_SIZE",
    "OccupiedError",
    "Position",
    "PositionOutOfRangeError",
    "Stone",
    "StoneColor",
    "SuicideError",
]
