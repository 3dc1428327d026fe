"""
Output lines and throughput figures.

Numbers are rendered with ``%g`` (six significant digits), matching the
default formatting of the reference console output.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from corefall.core.integrator import RunResult

SECONDS_PER_MINUTE = 60


def format_number(value: float) -> str:
    return f"{float(value):g}"


@dataclass(frozen=True)
class Throughput:
    """
    People that must pass per unit time for ``population`` to fall in ``fall_time``.

    ``per_minute`` is exactly ``SECONDS_PER_MINUTE * per_second``.
    """
    population: int
    fall_time: float
    per_second: float
    per_minute: float

    @classmethod
    def from_fall_time(cls, population: int, fall_time: float) -> Throughput:
        per_second = population / fall_time
        return cls(
            population=population,
            fall_time=fall_time,
            per_second=per_second,
            per_minute=per_second * SECONDS_PER_MINUTE,
        )


def format_run_line(result: RunResult) -> str:
    """
    One progress line per integration run.

    >>> from corefall.core.integrator import RunResult
    >>> format_run_line(RunResult(1.0, 1359.0, 0.002, 1359, 672))
    'step:1s; result time: 1359s, or 22.65mins >>> [processing time:0.002s]'
    """
    minutes = result.fall_time / SECONDS_PER_MINUTE
    return (
        f"step:{format_number(result.time_increment)}s; "
        f"result time: {format_number(result.fall_time)}s, "
        f"or {format_number(minutes)}mins "
        f">>> [processing time:{format_number(result.wall_time)}s]"
    )


def format_summary_line(throughput: Throughput) -> str:
    """Closing line with the required average throughput."""
    return (
        f"end result: required average of {format_number(throughput.per_second)} "
        f"people per second, or {format_number(throughput.per_minute)} people per minute"
    )
