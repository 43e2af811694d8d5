import pathlib
import sys

import pytest

# Add project root
ROOT = pathlib.Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from core.board import BoardSizeError, Position, StoneColor
from core.diagram import DiagramOptions, DiagramOptionsError, build_diagram
from core.moves import OverwrittenLabel


@pytest.mark.parametrize("kwargs", [
    {"move_range": (3, 2)},
    {"move_range": (0, 5)},
    {"move_range": (-1, 2)},
    {"move": 0},
    {"move_range": (1, 2), "move": 3},
], ids=["reversed", "zero_start", "negative", "zero_move", "exclusive"])
def test_invalid_options(kwargs):
    with pytest.raises(DiagramOptionsError):
        DiagramOptions(**kwargs)


def test_valid_options():
    opts = DiagramOptions(move_range=[2, 5])
    assert opts.move_range == (2, 5)
    assert opts.move_index is None
    assert DiagramOptions(move=4).move_index == 4


def test_invalid_board_size_fails_first(sample_moves):
    with pytest.raises(BoardSizeError):
        build_diagram(30, sample_moves)


def test_full_game_diagram(corner_capture_moves):
    diagram = build_diagram(9, corner_capture_moves)
    assert diagram.board_size == 9
    assert diagram.total_moves == 3
    assert diagram.labels == {Position(0, 0): 1, Position(1, 0): 2, Position(0, 1): 3}
    assert diagram.overwritten_labels == [OverwrittenLabel(1, 3, Position(0, 0))]
    assert diagram.caption == ["1 at 3"]
    assert diagram.board.stone_at((0, 0)) is StoneColor.EMPTY
    assert diagram.last_move is None


def test_range_diagram(sample_moves):
    diagram = build_diagram(19, sample_moves, DiagramOptions(move_range=(2, 4)))
    assert diagram.total_moves == 4
    assert sorted(diagram.labels.values()) == [2, 3, 4]
    assert diagram.board.stone_at((3, 3)) is StoneColor.BLACK


def test_range_before_capture(corner_capture_moves):
    diagram = build_diagram(9, corner_capture_moves, DiagramOptions(move_range=(1, 1)))
    assert diagram.total_moves == 1
    assert diagram.caption == []
    assert diagram.board.stone_at((0, 0)) is StoneColor.BLACK


def test_move_option_shows_first_moves(sample_moves):
    diagram = build_diagram(19, sample_moves, DiagramOptions(move=2))
    assert diagram.total_moves == 2
    assert diagram.board.stone_at((5, 5)) is StoneColor.EMPTY


def test_last_move_label(sample_moves):
    diagram = build_diagram(19, sample_moves, DiagramOptions(last_move_label=True))
    assert diagram.last_move == Position(7, 7)


def test_skipped_moves_are_logged(make_moves, caplog):
    moves = make_moves(("B", (3, 3)), ("W", (3, 3)))
    with caplog.at_level("INFO", logger="core.diagram"):
        diagram = build_diagram(9, moves)
    assert diagram.total_moves == 1
    assert "Skipped 1 illegal move" in caplog.text


def test_idempotent(corner_capture_moves):
    assert build_diagram(9, corner_capture_moves) == build_diagram(9, corner_capture_moves)
