"""
corefall - fall-time estimates through a spherical body.

A probe is dropped from rest above the surface and falls through an
inverse-square field to the surface, then through a linear interior
field to the centre. Fixed-step runs are refined until one run costs
more than a wall-clock budget.

Core Components
---------------
FallConfig : Immutable constants and refinement settings
FallIntegrator : Fixed-step two-regime integrator
RefinementDriver : Step refinement bounded by a cost budget
TrajectoryLogger : Buffered CSV logging of steps

Examples
--------
>>> from corefall import FallConfig, RefinementDriver
>>> result = RefinementDriver(FallConfig()).run()
>>> result.throughput.per_minute
"""

__version__ = "0.1.0"

from corefall.config import FallConfig, load_config, save_config
from corefall.core.clock import Clock, ProcessClock, WallClock
from corefall.core.integrator import (
    FallIntegrator,
    FallState,
    RunResult,
    StepRecord,
    advance,
    run_fall,
)
from corefall.core.refinement import RefinementDriver, RefinementResult
from corefall.dynamics.analytic import reference_fall_time
from corefall.dynamics.fields import InverseSquareField, LinearInteriorField, PiecewiseField
from corefall.errors import RefinementExhausted
from corefall.logger import TrajectoryLogger
from corefall.report import Throughput, format_run_line, format_summary_line

__all__ = [
    "__version__",
    # Config
    "FallConfig",
    "load_config",
    "save_config",
    # Core
    "Clock",
    "ProcessClock",
    "WallClock",
    "FallIntegrator",
    "FallState",
    "RunResult",
    "StepRecord",
    "advance",
    "run_fall",
    "RefinementDriver",
    "RefinementResult",
    "RefinementExhausted",
    # Fields
    "InverseSquareField",
    "LinearInteriorField",
    "PiecewiseField",
    "reference_fall_time",
    # Output
    "Throughput",
    "format_run_line",
    "format_summary_line",
    "TrajectoryLogger",
]
