"""SGF reader producing the move list of a game's main line."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from sgfmill import sgf

from core.board import MAX_BOARD_SIZE, MIN_BOARD_SIZE, Position, Stone
from core.moves import Move

logger = logging.getLogger(__name__)


class InvalidSgfError(ValueError):
    """Raised when SGF data cannot be read or describes an unusable game."""


@dataclass
class GameInfo:
    """Game information taken from the root node."""

    black_player: Optional[str] = None
    white_player: Optional[str] = None
    result: Optional[str] = None
    date: Optional[str] = None
    event: Optional[str] = None
    komi: Optional[float] = None


@dataclass
class ParsedGame:
    """Board size, main line moves and game information of one record."""

    board_size: int
    moves: List[Move] = field(default_factory=list)
    game_info: GameInfo = field(default_factory=GameInfo)


def _read_bytes(source: Union[str, bytes, os.PathLike], from_string: bool) -> bytes:
    if isinstance(source, bytes):
        return source
    if from_string:
        return str(source).encode("utf-8")
    try:
        with open(source, "rb") as f:
            return f.read()
    except OSError as exc:
        raise InvalidSgfError(f"Failed to read SGF file {source}: {exc}") from exc


def _text(node: sgf.Tree_node, prop: str) -> Optional[str]:
    if not node.has_property(prop):
        return None
    try:
        return node.get(prop)
    except ValueError:
        logger.warning("Ignoring malformed %s property", prop)
        return None


def _game_info(game: sgf.Sgf_game) -> GameInfo:
    root = game.get_root()
    komi: Optional[float] = None
    if root.has_property("KM"):
        try:
            komi = game.get_komi()
        except ValueError:
            logger.warning("Ignoring malformed KM property")
    return GameInfo(
        black_player=_text(root, "PB"),
        white_player=_text(root, "PW"),
        result=_text(root, "RE"),
        date=_text(root, "DT"),
        event=_text(root, "EV"),
        komi=komi,
    )


def _main_line_moves(game: sgf.Sgf_game, size: int) -> List[Move]:
    """Return the main sequence as :class:`Move` objects numbered from 1.

    ``sgfmill`` reports ``(row, col)`` with row 0 at the bottom; positions
    are converted to ``x=col`` and ``y`` counted from the top.
    """
    moves: List[Move] = []
    for node in game.get_main_sequence():
        try:
            color, point = node.get_move()
        except ValueError as exc:
            raise InvalidSgfError(f"Invalid move in SGF: {exc}") from exc
        if color is None:
            continue
        position = None
        if point is not None:
            row, col = point
            position = Position(col, size - 1 - row)
        stone = Stone.BLACK if color == "b" else Stone.WHITE
        moves.append(Move(stone, position, len(moves) + 1))
    return moves


def parse_sgf(source: Union[str, bytes, os.PathLike], from_string: bool = False) -> ParsedGame:
    """Parse ``source`` and return its :class:`ParsedGame`.

    Parameters
    ----------
    source:
        Path to an SGF file, or SGF content when ``from_string`` is true or
        ``source`` is ``bytes``.
    from_string:
        Treat ``source`` as SGF text instead of a path.

    Only the main line is read; variations are ignored.
    """
    data = _read_bytes(source, from_string)
    try:
        game = sgf.Sgf_game.from_bytes(data)
        size = game.get_size()
    except ValueError as exc:
        raise InvalidSgfError(f"Failed to parse SGF content: {exc}") from exc

    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise InvalidSgfError(
            f"Unsupported board size: {size}. Supported sizes: {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}"
        )

    moves = _main_line_moves(game, size)
    logger.debug("Parsed %d moves on a %dx%d board", len(moves), size, size)
    return ParsedGame(board_size=size, moves=moves, game_info=_game_info(game))


def load_moves(source: Union[str, bytes, os.PathLike], from_string: bool = False) -> Tuple[int, List[Move]]:
    """Return ``(board_size, moves)`` for ``source``."""
    game = parse_sgf(source, from_string=from_string)
    return game.board_size, game.moves


__all__ = ["GameInfo", "InvalidSgfError", "ParsedGame", "load_moves", "parse_sgf"]
