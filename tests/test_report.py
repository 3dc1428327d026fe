"""
Tests for output formatting and throughput figures.
"""
import numpy as np
import pytest

from corefall.core.integrator import RunResult
from corefall.report import (
    Throughput,
    format_number,
    format_run_line,
    format_summary_line,
)


def test_format_number_uses_six_significant_digits():
    assert format_number(1359.0) == "1359"
    assert format_number(1358.123456) == "1358.12"
    assert format_number(7e9) == "7e+09"
    assert format_number(np.float32(0.1)) == "0.1"
    assert format_number(np.longdouble(22.65)) == "22.65"


def test_run_line():
    result = RunResult(1.0, np.longdouble(1359.0), 0.002, 1359, 672)
    assert format_run_line(result) == (
        "step:1s; result time: 1359s, or 22.65mins >>> [processing time:0.002s]"
    )


def test_run_line_with_fine_step():
    result = RunResult(float(np.float32(0.001)), np.longdouble(1358.4), 0.5, 1358400, 671000)
    line = format_run_line(result)
    assert line.startswith("step:0.001s; result time: 1358.4s, or 22.64mins")
    assert line.endswith(">>> [processing time:0.5s]")


def test_summary_line():
    tp = Throughput.from_fall_time(7_000_000_000, 1000.0)
    assert tp.per_second == 7e6
    assert tp.per_minute == 4.2e8
    assert format_summary_line(tp) == (
        "end result: required average of 7e+06 people per second, "
        "or 4.2e+08 people per minute"
    )


@pytest.mark.parametrize("fall_time", [1358.37, 1104.8, np.longdouble(2000.0), 3.0])
def test_per_minute_exactly_sixty_times_per_second(fall_time):
    tp = Throughput.from_fall_time(7_000_000_000, fall_time)
    assert tp.per_minute == tp.per_second * 60
    assert tp.per_minute == pytest.approx(7_000_000_000 / (fall_time / 60))
