"""Utility functions to render a Go diagram in a human readable form."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from core.board import Board, Position, StoneColor

if TYPE_CHECKING:  # pragma: no cover
    from core.diagram import Diagram

SYMBOLS = {StoneColor.EMPTY: '.', StoneColor.BLACK: 'X', StoneColor.WHITE: 'O'}
LAST_MOVE_MARK = '#'
COLUMNS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
CELL_WIDTH = 3


def _cell(board: Board, pos: Position, labels: Dict[Position, int], last_move: Optional[Position]) -> str:
    color = board.stone_at(pos)
    if color is not StoneColor.EMPTY:
        if pos == last_move:
            return LAST_MOVE_MARK
        if pos in labels:
            return str(labels[pos])
    return SYMBOLS[color]


def _cell_width(labels: Dict[Position, int]) -> int:
    """Widest label plus one space of padding, never below :data:`CELL_WIDTH`."""
    return max(CELL_WIDTH, len(str(max(labels.values(), default=0))) + 1)


def board_to_string(
    board: Board,
    labels: Optional[Dict[Position, int]] = None,
    last_move: Optional[Position] = None,
    show_coordinates: bool = True,
) -> str:
    """Return a text diagram of ``board``.

    Labeled stones show their move number instead of ``X``/``O``; cells widen
    when a label has more than two digits.  Labels on points that are empty
    on ``board`` are not drawn.
    """
    labels = labels or {}
    width = _cell_width(labels)
    size = board.size
    lines: List[str] = []
    if show_coordinates:
        lines.append('   ' + ''.join(c.rjust(width) for c in COLUMNS[:size]))
    for y in range(size):
        row = ''.join(_cell(board, Position(x, y), labels, last_move).rjust(width) for x in range(size))
        if show_coordinates:
            row = f"{size - y:2d} " + row
        lines.append(row.rstrip())
    return '\n'.join(lines)


def diagram_to_string(diagram: "Diagram", show_coordinates: Optional[bool] = None) -> str:
    """Return the text diagram followed by the overwritten-label caption."""
    if show_coordinates is None:
        show_coordinates = diagram.options.show_coordinates
    text = board_to_string(diagram.board, diagram.labels, diagram.last_move, show_coordinates)
    if diagram.caption:
        text += '\n\nOverwritten: ' + ', '.join(diagram.caption)
    return text


def render_diagram(diagram: "Diagram") -> None:
    """Print the diagram to stdout."""
    print(diagram_to_string(diagram))


__all__ = ["board_to_string", "diagram_to_string", "render_diagram"]
