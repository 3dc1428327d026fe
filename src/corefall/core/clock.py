"""
Timing sources for measuring the cost of an integration run.

A clock is any zero-argument callable returning seconds as a float. The
integrator reads it once before and once after a run, so tests can
script run costs without depending on hardware speed.
"""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Protocol for a monotonic timing source [s]."""
    def __call__(self) -> float:
        ...


class ProcessClock:
    """CPU time of the current process (like C ``clock()``)."""
    def __call__(self) -> float:
        return time.process_time()


class WallClock:
    """High-resolution wall-clock time."""
    def __call__(self) -> float:
        return time.perf_counter()
