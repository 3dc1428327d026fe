"""
Step-size refinement bounded by a computation budget.

The driver divides the step by ``refinement_factor`` before every run and
stops after the first run whose measured cost meets or exceeds the
budget. That last, over-budget run is the reported result: it is also
the most refined one.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import numpy as np

from corefall.config import FallConfig
from corefall.errors import RefinementExhausted
from corefall.report import Throughput

from .clock import Clock
from .integrator import FallIntegrator, RunResult

RunCallback = Callable[[RunResult], None]


@dataclass
class RefinementResult:
    """All runs of one refinement, in execution order."""
    config: FallConfig
    runs: list[RunResult] = field(default_factory=list)

    @property
    def final(self) -> RunResult:
        if not self.runs:
            raise RuntimeError("Refinement has not produced any runs yet.")
        return self.runs[-1]

    @property
    def fall_time(self) -> np.longdouble:
        return self.final.fall_time

    @property
    def throughput(self) -> Throughput:
        return Throughput.from_fall_time(self.config.population, self.final.fall_time)

    def estimate_changes(self) -> list[float]:
        """Absolute change of the estimate between consecutive runs [s]."""
        times = [float(r.fall_time) for r in self.runs]
        return [abs(b - a) for a, b in zip(times, times[1:])]


class RefinementDriver:
    """
    Geometric search for the finest affordable time step.

    Parameters
    ----------
    config : FallConfig
        Constants, starting step, budget and refinement factor
    clock : Clock | None
        Timing source handed to the integrator when none is given
    integrator : FallIntegrator | None
        Integrator to drive. Built from ``config`` and ``clock`` if None.
    on_run : RunCallback | None
        Called with every RunResult as soon as it is available
    max_iterations : int | None
        Upper bound on the number of runs. None (default) keeps refining
        until a run meets the budget, however long that takes.

    Notes
    -----
    The step is held in single precision between runs, so after a few
    divisions it differs from the exact decimal value in its last digits
    (e.g. 0.1 is 0.100000001490116).

    Examples
    --------
    >>> driver = RefinementDriver(FallConfig(), on_run=lambda r: print(r.time_increment))
    >>> result = driver.run()
    >>> result.throughput.per_second
    """
    def __init__(
        self,
        config: FallConfig,
        clock: Clock | None = None,
        integrator: FallIntegrator | None = None,
        on_run: RunCallback | None = None,
        max_iterations: int | None = None,
    ) -> None:
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
        self.config = config
        self.integrator = integrator if integrator is not None else FallIntegrator(config, clock=clock)
        self.on_run = on_run
        self.max_iterations = max_iterations

    def increments(self) -> Iterator[float]:
        """Yield the successive step sizes, starting one division below ``initial_step``."""
        step = np.float32(self.config.initial_step)
        factor = np.float32(self.config.refinement_factor)
        while True:
            step = np.float32(step / factor)
            yield float(step)

    def run(self) -> RefinementResult:
        """
        Refine until one run costs at least ``config.budget`` seconds.

        Returns
        -------
        RefinementResult
            Every run performed; ``final`` is the one that met the budget.

        Raises
        ------
        RefinementExhausted
            If ``max_iterations`` runs complete without meeting the budget
        """
        result = RefinementResult(config=self.config)
        budget = self.config.budget

        for dt in self.increments():
            run = self.integrator.run(dt)
            result.runs.append(run)
            if self.on_run is not None:
                self.on_run(run)
            if run.wall_time >= budget:
                break
            if self.max_iterations is not None and len(result.runs) >= self.max_iterations:
                raise RefinementExhausted(len(result.runs), run.wall_time, budget)

        return result
