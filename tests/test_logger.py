import csv

import pytest

from corefall.config import FallConfig
from corefall.core.integrator import FallIntegrator, StepRecord
from corefall.logger import TrajectoryLogger


def make_record(index, phase="exterior"):
    return StepRecord(
        index=index,
        time=float(index),
        distance=1000.0 - index,
        velocity=float(index),
        field=9.81,
        phase=phase,
    )


def read_rows(path):
    with open(path, "r", newline="") as f:
        return list(csv.reader(f))


def test_logger_basic_io(tmp_path):
    """Logger creates the file and writes header + data."""
    log_path = tmp_path / "test_basic.csv"

    with TrajectoryLogger(log_path, buffer_size=1) as logger:
        logger.log_step(make_record(1))

    rows = read_rows(log_path)
    assert rows[0] == ["t", "distance", "velocity", "field", "phase"]
    assert len(rows) == 2
    assert float(rows[1][0]) == 1.0
    assert float(rows[1][1]) == 999.0
    assert rows[1][4] == "exterior"


def test_logger_buffering(tmp_path):
    """Rows are only written when the buffer fills or flush is called."""
    log_path = tmp_path / "test_buffer.csv"
    buffer_size = 5

    logger = TrajectoryLogger(log_path, buffer_size=buffer_size)
    for i in range(1, buffer_size):
        logger.log_step(make_record(i))

    with open(log_path, "r") as f:
        assert len(f.readlines()) == 1  # Header only

    logger.log_step(make_record(buffer_size))
    with open(log_path, "r") as f:
        assert len(f.readlines()) == 1 + buffer_size

    logger.close()


def test_logger_custom_fields(tmp_path):
    log_path = tmp_path / "test_custom.csv"
    with TrajectoryLogger(log_path, fields=["distance"]) as logger:
        logger(make_record(3))

    rows = read_rows(log_path)
    assert rows[0] == ["t", "distance"]
    assert len(rows[1]) == 2


def test_logger_every_nth_step(tmp_path):
    log_path = tmp_path / "test_every.csv"
    with TrajectoryLogger(log_path, every=3) as logger:
        for i in range(1, 10):
            logger.log_step(make_record(i))

    rows = read_rows(log_path)
    assert [float(r[0]) for r in rows[1:]] == [3.0, 6.0, 9.0]
    assert logger.rows_logged == 3


def test_logger_rejects_invalid_options(tmp_path):
    with pytest.raises(ValueError, match="Invalid fields"):
        TrajectoryLogger(tmp_path / "x.csv", fields=["mass"])
    with pytest.raises(ValueError, match="every must be at least 1"):
        TrajectoryLogger(tmp_path / "x.csv", every=0)


def test_logger_as_integrator_observer(tmp_path):
    """Every step of a run lands in the log."""
    log_path = tmp_path / "logs" / "fall.csv"
    integrator = FallIntegrator(FallConfig())

    with TrajectoryLogger(log_path) as logger:
        result = integrator.run(10.0, observer=logger)

    rows = read_rows(log_path)
    assert len(rows) == 1 + result.steps
    assert {r[4] for r in rows[1:]} == {"exterior", "interior"}
    assert float(rows[-1][1]) <= 0.0
