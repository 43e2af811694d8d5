"""Replay a recorded move sequence onto a :class:`~core.board.Board`.

Besides the final position, :func:`apply_moves` keeps track of which
numbered stones disappeared from the board later on (captured, or their
point reused after a capture) so the diagram caption can mention them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from core.board import Board, IllegalMoveError, Position, Stone, StoneColor

logger = logging.getLogger(__name__)

MoveRange = Tuple[int, int]


class SelectionError(ValueError):
    """Raised for a move range or index limit that selects nothing sensible."""


def check_selection(move_range: Optional[MoveRange] = None, move_index: Optional[int] = None) -> None:
    """Raise :class:`SelectionError` unless ``1 <= start <= end`` and ``move_index >= 0``."""
    if move_range is not None:
        if len(move_range) != 2:
            raise SelectionError(f"Invalid range: {move_range}. Expected (start, end)")
        start, end = move_range
        if start < 1 or end < 1:
            raise SelectionError(
                f"Invalid range values: {start}-{end}. Range values must be positive integers"
            )
        if start > end:
            raise SelectionError(
                f"Invalid range: {start}-{end}. Start value must be less than or equal to end value"
            )
    if move_index is not None and move_index < 0:
        raise SelectionError(f"Invalid move index: {move_index}. Must not be negative")


@dataclass(frozen=True)
class Move:
    """A single move of the main line.

    ``position`` is ``None`` for a pass and ``move_number`` is the 1-based
    index of the move in the game record.
    """

    color: Stone
    position: Optional[Position]
    move_number: int

    @property
    def is_pass(self) -> bool:
        return self.position is None


@dataclass(frozen=True)
class OverwrittenLabel:
    """Stone of ``original_move`` at ``position`` removed or replaced by ``overwritten_by_move``."""

    original_move: int
    overwritten_by_move: int
    position: Position


@dataclass(frozen=True)
class ApplyMovesResult:
    """Final board, the moves that were played and the overwritten labels."""

    board: Board
    applied_moves: List[Move] = field(default_factory=list)
    overwritten_labels: List[OverwrittenLabel] = field(default_factory=list)


def select_moves(
    moves: Sequence[Move],
    move_range: Optional[MoveRange] = None,
    move_index: Optional[int] = None,
) -> List[Move]:
    """Filter ``moves`` by ``move_range`` and then keep the first ``move_index``.

    ``move_range`` is inclusive on both ends and matches ``move_number``.
    """
    check_selection(move_range, move_index)
    selected = list(moves)
    if move_range is not None:
        start, end = move_range
        selected = [move for move in selected if start <= move.move_number <= end]
    if move_index is not None:
        selected = selected[:move_index]
    return selected


def moves_to_replay(
    moves: Sequence[Move],
    move_range: Optional[MoveRange] = None,
    move_index: Optional[int] = None,
) -> List[Move]:
    """Return the moves that have to be played to show ``move_range``.

    A range on its own replays everything from the first move up to the end
    of the range; skipping the earlier moves would leave captures unresolved.
    Only the labels are restricted to the range (see
    :func:`core.labels.labels_for`).  When an index limit is also given the
    plain :func:`select_moves` composition is used, which is what snapshot
    generation relies on.
    """
    check_selection(move_range, move_index)
    if move_range is not None and move_index is None:
        _, end = move_range
        return [move for move in moves if move.move_number <= end]
    return select_moves(moves, move_range, move_index)


def find_captured_positions(before: Board, after: Board) -> List[Position]:
    """Return points occupied in ``before`` and empty in ``after``, row by row."""
    captured: List[Position] = []
    for y in range(before.size):
        for x in range(before.size):
            pos = Position(x, y)
            if before.stone_at(pos) is not StoneColor.EMPTY and after.stone_at(pos) is StoneColor.EMPTY:
                captured.append(pos)
    return captured


def apply_moves(
    board: Board,
    moves: Sequence[Move],
    move_range: Optional[MoveRange] = None,
    move_index: Optional[int] = None,
) -> ApplyMovesResult:
    """Play the selected ``moves`` on ``board`` and return the outcome.

    Illegal moves (occupied point, suicide, off-board) are skipped and left
    out of ``applied_moves``; they never abort the replay.
    """
    current = board
    applied: List[Move] = []
    overwritten: List[OverwrittenLabel] = []
    owners: Dict[Position, int] = {}

    for move in moves_to_replay(moves, move_range, move_index):
        if move.position is None:
            applied.append(move)
            continue

        position = Position(*move.position)
        try:
            after = current.place(position, move.color)
        except IllegalMoveError as exc:
            logger.debug("Skipping move %d: %s", move.move_number, exc)
            continue

        # A rejected move must not report the stone it failed to replace.
        previous = owners.get(position)
        if previous is not None:
            overwritten.append(OverwrittenLabel(previous, move.move_number, position))

        applied.append(move)
        owners[position] = move.move_number
        for captured in find_captured_positions(current, after):
            owner = owners.pop(captured, None)
            if owner is not None:
                overwritten.append(OverwrittenLabel(owner, move.move_number, captured))
        current = after

    return ApplyMovesResult(board=current, applied_moves=applied, overwritten_labels=overwritten)


def apply_moves_with_snapshots(
    board: Board,
    moves: Sequence[Move],
    max_index: Optional[int] = None,
) -> List[ApplyMovesResult]:
    """Return one :class:`ApplyMovesResult` per prefix length ``0..max_index``."""
    end = len(moves) if max_index is None else min(max_index, len(moves))
    return [apply_moves(board, moves, move_index=i) for i in range(end + 1)]


__all__ = [
    "ApplyMovesResult",
    "Move",
    "MoveRange",
    "OverwrittenLabel",
    "SelectionError",
    "apply_moves",
    "apply_moves_with_snapshots",
    "check_selection",
    "find_captured_positions",
    "moves_to_replay",
    "select_moves",
]
