"""Turn a move list and diagram options into everything a renderer needs."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from core.board import Board, Position
from core.labels import filter_overwritten_labels, format_for_caption, labels_for, last_move_position
from core.moves import (
    Move,
    MoveRange,
    OverwrittenLabel,
    SelectionError,
    apply_moves,
    check_selection,
    moves_to_replay,
)

logger = logging.getLogger(__name__)


class DiagramOptionsError(SelectionError):
    """Raised for invalid move ranges or move numbers."""


@dataclass(frozen=True)
class DiagramOptions:
    """Selection and display options of a diagram.

    Parameters
    ----------
    move_range:
        Inclusive ``(start, end)`` move numbers to label, both ``>= 1``.
    move:
        Show the position after this many moves (1-based).  Cannot be
        combined with ``move_range``.
    last_move_label:
        Mark the last played stone.
    show_coordinates:
        Draw coordinates around the board.
    """

    move_range: Optional[MoveRange] = None
    move: Optional[int] = None
    last_move_label: bool = False
    show_coordinates: bool = False

    def __post_init__(self) -> None:
        if self.move_range is not None and self.move is not None:
            raise DiagramOptionsError(
                "Cannot specify both move_range and move options. Use one or the other."
            )
        try:
            check_selection(self.move_range)
        except SelectionError as exc:
            raise DiagramOptionsError(str(exc)) from exc
        if self.move_range is not None:
            start, end = self.move_range
            object.__setattr__(self, "move_range", (int(start), int(end)))
        if self.move is not None and self.move < 1:
            raise DiagramOptionsError("Move number must be a positive integer")

    @property
    def move_index(self) -> Optional[int]:
        """Number of moves to replay when ``move`` is set."""
        return self.move


@dataclass(frozen=True)
class Diagram:
    """Result of :func:`build_diagram`."""

    board: Board
    labels: Dict[Position, int]
    applied_moves: List[Move]
    overwritten_labels: List[OverwrittenLabel]
    caption: List[str]
    total_moves: int
    last_move: Optional[Position] = None
    options: DiagramOptions = field(default_factory=DiagramOptions)

    @property
    def board_size(self) -> int:
        return self.board.size


def build_diagram(
    board_size: int,
    moves: Sequence[Move],
    options: Optional[DiagramOptions] = None,
) -> Diagram:
    """Replay ``moves`` on an empty board and collect labels and caption.

    Invalid board sizes and options fail before any move is played; illegal
    moves in the record are skipped.
    """
    options = options or DiagramOptions()
    board = Board.empty(board_size)

    selected = moves_to_replay(moves, options.move_range, options.move_index)
    result = apply_moves(board, moves, options.move_range, options.move_index)
    skipped = len(selected) - len(result.applied_moves)
    if skipped:
        logger.info("Skipped %d illegal move(s) out of %d", skipped, len(selected))

    labels = labels_for(result.applied_moves, options.move_range)
    visible = filter_overwritten_labels(result.overwritten_labels, labels.values())
    last_move = last_move_position(result.applied_moves) if options.last_move_label else None

    return Diagram(
        board=result.board,
        labels=labels,
        applied_moves=result.applied_moves,
        overwritten_labels=visible,
        caption=format_for_caption(visible),
        total_moves=len(result.applied_moves),
        last_move=last_move,
        options=options,
    )


__all__ = ["Diagram", "DiagramOptions", "DiagramOptionsError", "build_diagram"]
