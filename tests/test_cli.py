"""
Tests for the command-line entry point.
"""
import re

from corefall.cli import EXIT_CODE, main
from corefall.config import FallConfig

RUN_LINE = re.compile(
    r"^step:[0-9.e+-]+s; result time: [0-9.e+-]+s, or [0-9.e+-]+mins "
    r">>> \[processing time:[0-9.e+-]+s\]$"
)
SUMMARY_LINE = re.compile(
    r"^end result: required average of [0-9.e+-]+ people per second, "
    r"or [0-9.e+-]+ people per minute$"
)


def test_main_prints_run_lines_and_summary(capsys, scripted_clock):
    code = main(FallConfig(), clock=scripted_clock([0.0, 0.0, 0.0, 1.0]))
    out = capsys.readouterr().out.splitlines()

    assert code == EXIT_CODE == 1
    assert len(out) == 5
    for line in out[:4]:
        assert RUN_LINE.match(line), line
    assert SUMMARY_LINE.match(out[-1]), out[-1]
    assert out[0].startswith("step:1000s; result time: 2000s, or 33.3333mins")
    assert out[3].startswith("step:1s;")


def test_summary_uses_last_run(capsys, scripted_clock):
    main(FallConfig(), clock=scripted_clock([1.0]))
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "step:1000s; result time: 2000s, or 33.3333mins >>> [processing time:1s]",
        "end result: required average of 3.5e+06 people per second, "
        "or 2.1e+08 people per minute",
    ]
