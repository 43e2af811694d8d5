"""Move labels and the overwritten-label caption of a diagram."""
from __future__ import annotations

from typing import Collection, Dict, Iterable, List, Optional, Sequence

from core.board import Position
from core.moves import Move, MoveRange, OverwrittenLabel


def labels_for(applied_moves: Iterable[Move], move_range: Optional[MoveRange] = None) -> Dict[Position, int]:
    """Map each labeled point to the number of the move played there.

    Labels use the move number of the full game, so moves 16-18 show up as
    ``16, 17, 18``.  With ``move_range`` only moves inside the range are
    labeled.  A later move at the same point replaces the earlier label.
    """
    labels: Dict[Position, int] = {}
    for move in applied_moves:
        if move.position is None:
            continue
        if move_range is not None and not move_range[0] <= move.move_number <= move_range[1]:
            continue
        labels[Position(*move.position)] = move.move_number
    return labels


def filter_overwritten_labels(
    overwritten_labels: Iterable[OverwrittenLabel],
    visible_numbers: Collection[int],
) -> List[OverwrittenLabel]:
    """Keep the records whose original move is among ``visible_numbers``."""
    visible = set(visible_numbers)
    return [label for label in overwritten_labels if label.original_move in visible]


def format_for_caption(overwritten_labels: Iterable[OverwrittenLabel]) -> List[str]:
    """Return caption entries such as ``"4 at 10"``."""
    return [f"{label.original_move} at {label.overwritten_by_move}" for label in overwritten_labels]


def last_move_position(applied_moves: Sequence[Move]) -> Optional[Position]:
    """Return the point of the last applied move that is not a pass."""
    for move in reversed(applied_moves):
        if move.position is not None:
            return Position(*move.position)
    return None


__all__ = ["filter_overwritten_labels", "format_for_caption", "labels_for", "last_move_position"]
