"""Root-level pytest configuration and shared fixtures.

This module provides:
- Automatic sys.path configuration for all tests
- Shared fixtures available to all test modules
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

# ---------------------------------------------------------------------------
# Path Configuration (automatically applied to all tests)
# ---------------------------------------------------------------------------

# Add project root to sys.path so imports work from any test directory
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.board import Board, Position, Stone  # noqa: E402
from core.moves import Move  # noqa: E402

MoveSpec = Tuple[str, Optional[Tuple[int, int]]]
"""``("B", (x, y))`` or ``("W", None)`` for a pass."""


# ---------------------------------------------------------------------------
# Board Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_board() -> Callable[[int, Sequence[Tuple[int, int, str]]], Board]:
    """Factory fixture to create boards with stones at specified positions.

    Usage:
        board = make_board(5, [(2, 2, "B"), (0, 0, "W")])

    Stones are written straight into the grid, so positions that could
    never arise in play (e.g. a stone without liberties) can be set up.
    """
    from core.board import StoneColor

    def _make_board(size: int, stones: Sequence[Tuple[int, int, str]] = ()) -> Board:
        rows = Board.empty(size).to_rows()
        for x, y, color in stones:
            rows[y][x] = StoneColor.BLACK if color == "B" else StoneColor.WHITE
        return Board(size, [cell for row in rows for cell in row])
    return _make_board


@pytest.fixture
def empty_board_9x9() -> Board:
    """Return a 9x9 empty board."""
    return Board.empty(9)


@pytest.fixture
def empty_board_19x19() -> Board:
    """Return a 19x19 empty board."""
    return Board.empty(19)


# ---------------------------------------------------------------------------
# Move Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_moves() -> Callable[..., List[Move]]:
    """Factory fixture building numbered moves from ``(color, point)`` pairs.

    Usage:
        moves = make_moves(("B", (0, 0)), ("W", None), start=15)
    """
    def _make_moves(*specs: MoveSpec, start: int = 1) -> List[Move]:
        moves = []
        for offset, (color, point) in enumerate(specs):
            stone = Stone.BLACK if color == "B" else Stone.WHITE
            position = Position(*point) if point is not None else None
            moves.append(Move(stone, position, start + offset))
        return moves
    return _make_moves


@pytest.fixture
def sample_moves(make_moves) -> List[Move]:
    """Six moves on a 19x19 board with a pass at move 5."""
    return make_moves(
        ("B", (3, 3)),
        ("W", (4, 4)),
        ("B", (5, 5)),
        ("W", (6, 6)),
        ("B", None),
        ("W", (7, 7)),
    )


@pytest.fixture
def corner_capture_moves(make_moves) -> List[Move]:
    """Black 1 in the corner is captured by white 3."""
    return make_moves(("B", (0, 0)), ("W", (1, 0)), ("W", (0, 1)))


# ---------------------------------------------------------------------------
# SGF Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_sgf_content() -> str:
    """Return a simple 9x9 SGF game string."""
    return "(;GM[1]FF[4]SZ[9]KM[7.5]PB[Black]PW[White]RE[B+R];B[ee];W[gc];B[cg])"


@pytest.fixture
def capture_sgf_content() -> str:
    """9x9 game where white 3 captures black 1 in the top-left corner."""
    return "(;GM[1]FF[4]SZ[9];B[aa];W[ba];W[ab])"


@pytest.fixture
def temp_sgf_file(tmp_path, simple_sgf_content) -> str:
    """Write :func:`simple_sgf_content` to a file and return its path."""
    path = tmp_path / "game.sgf"
    path.write_text(simple_sgf_content)
    return os.fspath(path)


# ---------------------------------------------------------------------------
# Pytest Configuration
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
