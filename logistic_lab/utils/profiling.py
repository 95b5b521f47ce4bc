"""Wall-clock and CPU timing helpers."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from logistic_lab.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


def elapsed_ms(start: float) -> float:
    """Milliseconds elapsed since a ``time.perf_counter()`` reading."""
    return (time.perf_counter() - start) * 1000.0


@contextmanager
def track_time(name: str, *, warn_budget: float | None = None, error_budget: float | None = None) -> Iterator[Timing]:
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        wall_elapsed = end.wall - start.wall
        cpu_elapsed = end.cpu - start.cpu
        level = None
        if error_budget is not None and wall_elapsed >= error_budget:
            level = "error"
        elif warn_budget is not None and wall_elapsed >= warn_budget:
            level = "warning"
        extra = {
            "segment": name,
            "wall_seconds": round(wall_elapsed, 4),
            "cpu_seconds": round(cpu_elapsed, 4),
            "duration_ms": round(wall_elapsed * 1000.0, 2),
        }
        if level:
            getattr(log, level)("Performance budget exceeded", extra=extra)
        else:
            log.info("Segment timing", extra=extra)
