"""Benchmarks for diagram construction.

:class:`DiagramBenchmark` replays synthetic games through
:func:`core.diagram.build_diagram` under a :class:`PerformanceMonitor` and
summarises the timings.  Run ``python -m monitoring.benchmark`` for the
standard 19x19 benchmark.
"""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Optional

from core.board import Position, Stone
from core.diagram import DiagramOptions, build_diagram
from core.moves import Move
from monitoring.performance import PerformanceMonitor

logger = logging.getLogger(__name__)

# average build time, in milliseconds, the standard benchmark must stay under
REQUIREMENT_MS = 150.0


@dataclass
class BenchmarkResult:
    """Metrics of a single timed run."""

    build_time_ms: float
    memory_diff: int
    board_size: int
    move_count: int
    applied_moves: int


@dataclass
class BenchmarkSummary:
    """Aggregated metrics for one benchmark configuration."""

    board_size: int
    move_count: int
    iterations: int
    average_build_time_ms: float
    min_build_time_ms: float
    max_build_time_ms: float


def spiral_positions(board_size: int) -> Iterator[Position]:
    """Yield every point of the board, spiralling outwards from the center."""
    center = board_size // 2
    x = y = center
    dx, dy = 1, 0
    step = 1
    seen = 0
    total = board_size * board_size
    if 0 <= x < board_size and 0 <= y < board_size:
        yield Position(x, y)
        seen += 1
    while seen < total:
        for _ in range(2):
            for _ in range(step):
                x += dx
                y += dy
                if 0 <= x < board_size and 0 <= y < board_size:
                    yield Position(x, y)
                    seen += 1
            dx, dy = -dy, dx
        step += 1


def generate_test_moves(board_size: int, count: int) -> List[Move]:
    """Return ``count`` alternating moves laid out in a spiral."""
    moves: List[Move] = []
    for number, pos in enumerate(spiral_positions(board_size), start=1):
        if number > count:
            break
        color = Stone.BLACK if number % 2 else Stone.WHITE
        moves.append(Move(color, pos, number))
    return moves


class DiagramBenchmark:
    """Time :func:`build_diagram` on synthetic games."""

    def __init__(self, options: Optional[DiagramOptions] = None) -> None:
        self.options = options or DiagramOptions()

    def run_single(self, board_size: int, moves: List[Move]) -> BenchmarkResult:
        with PerformanceMonitor(task="build_diagram") as mon:
            diagram = build_diagram(board_size, moves, self.options)
        return BenchmarkResult(
            build_time_ms=mon.stats.duration_ms,
            memory_diff=mon.stats.memory_diff,
            board_size=board_size,
            move_count=len(moves),
            applied_moves=diagram.total_moves,
        )

    def run(self, board_size: int, move_count: int, iterations: int = 5, warmup_runs: int = 2) -> List[BenchmarkResult]:
        """Run ``warmup_runs`` untimed builds followed by ``iterations`` timed ones."""
        moves = generate_test_moves(board_size, move_count)
        for _ in range(warmup_runs):
            build_diagram(board_size, moves, self.options)
        return [self.run_single(board_size, moves) for _ in range(iterations)]

    @staticmethod
    def summarize(results: List[BenchmarkResult]) -> BenchmarkSummary:
        if not results:
            raise ValueError("No benchmark results to summarize")
        times = [r.build_time_ms for r in results]
        first = results[0]
        return BenchmarkSummary(
            board_size=first.board_size,
            move_count=first.move_count,
            iterations=len(results),
            average_build_time_ms=sum(times) / len(times),
            min_build_time_ms=min(times),
            max_build_time_ms=max(times),
        )

    def run_standard(self, iterations: int = 10, warmup_runs: int = 3) -> Dict[str, Any]:
        """Run the 19x19, 50 move benchmark and check it against the requirement."""
        results = self.run(19, 50, iterations=iterations, warmup_runs=warmup_runs)
        summary = self.summarize(results)
        passes = summary.average_build_time_ms < REQUIREMENT_MS
        logger.info(
            "Standard benchmark: %.2f ms average over %d runs", summary.average_build_time_ms, summary.iterations
        )
        return {
            "summary": asdict(summary),
            "results": [asdict(r) for r in results],
            "passes_requirement": passes,
        }


def main(argv: Optional[List[str]] = None) -> None:
    """Command line entry point for quick benchmarks."""
    parser = argparse.ArgumentParser(description="Diagram build benchmark")
    parser.add_argument("--size", type=int, default=19, help="Board size")
    parser.add_argument("--moves", type=int, default=50, help="Number of moves")
    parser.add_argument("--iterations", type=int, default=10)
    parser.add_argument("--warmup", type=int, default=3)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    bench = DiagramBenchmark()
    results = bench.run(args.size, args.moves, iterations=args.iterations, warmup_runs=args.warmup)
    print(json.dumps(asdict(bench.summarize(results)), indent=2))


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
