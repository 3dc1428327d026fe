"""
CSV logging of per-step fall state.

Buffers rows in memory and writes them in batches. Implements the
context manager protocol and can be passed straight to
``FallIntegrator.run`` as the step observer.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

from corefall.core.integrator import StepRecord

VALID_FIELDS = ("distance", "velocity", "field", "phase")


class TrajectoryLogger:
    """
    Buffered CSV logger for integration steps.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Number of rows to buffer before writing. Fine steps produce
        millions of rows, so keep this in the thousands.
    fields : list[str] | None
        Step fields to log after the time column.
        Default: ["distance", "velocity", "field", "phase"]
    every : int
        Log only every n-th step. The final step of a run is not
        guaranteed to be logged unless ``every`` is 1.

    Examples
    --------
    >>> integrator = FallIntegrator(FallConfig())
    >>> with TrajectoryLogger("fall.csv", every=10) as logger:
    ...     integrator.run(0.1, observer=logger)
    """

    def __init__(
        self,
        filepath: str | Path,
        buffer_size: int = 1000,
        fields: list[str] | None = None,
        every: int = 1,
    ) -> None:
        self.filepath = Path(filepath)
        self.buffer_size = buffer_size
        self.fields = fields if fields is not None else list(VALID_FIELDS)
        self.every = int(every)

        invalid = set(self.fields) - set(VALID_FIELDS)
        if invalid:
            raise ValueError(
                f"Invalid fields: {invalid}. Valid options: {set(VALID_FIELDS)}"
            )
        if self.every < 1:
            raise ValueError(f"every must be at least 1, got {every}")

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header_written = False
        self.rows_logged = 0

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> TrajectoryLogger:
        """Open file for writing."""
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    def __call__(self, record: StepRecord) -> None:
        self.log_step(record)

    def _write_header(self) -> None:
        if self._writer:
            self._writer.writerow(["t", *self.fields])
            if self._file:
                self._file.flush()
        self._header_written = True

    def log_step(self, record: StepRecord) -> None:
        """
        Add one step to the buffer.

        Opens the file on first call if not used as a context manager.
        Writes to disk when the buffer is full.
        """
        if record.index % self.every != 0:
            return

        if self._file is None:
            self.__enter__()

        if not self._header_written:
            self._write_header()

        row = [f"{record.time:.10f}"]
        for name in self.fields:
            val = getattr(record, name)
            row.append(val if isinstance(val, str) else f"{val:.10e}")

        self._buffer.append(row)
        self.rows_logged += 1

        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None
