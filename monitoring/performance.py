"""Timing and memory measurements for diagram builds.

:class:`PerformanceMonitor` wraps a block of code and records a
:class:`PerformanceStats` for it; :func:`monitor_performance` does the same
for every call of a function.  Stats can be written to ``.json`` or ``.csv``.
"""

from __future__ import annotations

import csv
import functools
import json
import logging
import os
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import psutil

logger = logging.getLogger(__name__)


@dataclass
class PerformanceStats:
    """Resource usage of one monitored task."""

    task: str
    duration_ms: float
    cpu_time: float
    memory_start: int
    memory_end: int

    @property
    def memory_diff(self) -> int:
        return self.memory_end - self.memory_start

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["memory_diff"] = self.memory_diff
        return data


def write_stats(stats: PerformanceStats, path: str) -> None:
    """Write ``stats`` to ``path``; the extension selects JSON or CSV."""
    ext = os.path.splitext(path)[1].lower()
    if ext not in (".json", ".csv"):
        raise ValueError(f"Unsupported output format: {ext}")

    data = stats.to_dict()
    with open(path, "w", newline="", encoding="utf-8") as f:
        if ext == ".json":
            json.dump(data, f, indent=2)
        else:
            writer = csv.writer(f)
            writer.writerow(["metric", "value"])
            writer.writerows(data.items())


class PerformanceMonitor:
    """Context manager measuring wall time, CPU time and RSS of a block.

    Parameters
    ----------
    task : str
        Name stored with the stats.
    output : str, optional
        File the stats are written to when the block exits, even when it
        raised.
    """

    def __init__(self, task: str = "task", output: Optional[str] = None) -> None:
        self.task = task
        self.output = output
        self.stats: Optional[PerformanceStats] = None
        self._process = psutil.Process(os.getpid())
        self._t0 = 0.0
        self._cpu0 = 0.0
        self._rss0 = 0

    def _cpu_seconds(self) -> float:
        times = self._process.cpu_times()
        return times.user + times.system

    def __enter__(self) -> "PerformanceMonitor":
        self._rss0 = self._process.memory_info().rss
        self._cpu0 = self._cpu_seconds()
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        elapsed = time.perf_counter() - self._t0
        self.stats = PerformanceStats(
            task=self.task,
            duration_ms=elapsed * 1000.0,
            cpu_time=self._cpu_seconds() - self._cpu0,
            memory_start=self._rss0,
            memory_end=self._process.memory_info().rss,
        )
        logger.debug("%s took %.3f ms", self.task, self.stats.duration_ms)
        if self.output:
            write_stats(self.stats, self.output)
        return False


def monitor_performance(func=None, *, output: Optional[str] = None):
    """Decorator recording :class:`PerformanceStats` for each call.

    The stats of the latest call are kept on ``wrapper.last_performance``.
    """

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            monitor = PerformanceMonitor(task=fn.__name__, output=output)
            with monitor:
                result = fn(*args, **kwargs)
            wrapper.last_performance = monitor.stats
            return result

        wrapper.last_performance = None  # type: ignore[attr-defined]
        return wrapper

    if callable(func):
        return decorator(func)
    return decorator


__all__ = ["PerformanceMonitor", "PerformanceStats", "monitor_performance", "write_stats"]
