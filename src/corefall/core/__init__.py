from .clock import Clock, ProcessClock, WallClock
from .integrator import FallIntegrator, FallState, RunResult, StepRecord, advance, run_fall
from .refinement import RefinementDriver, RefinementResult
