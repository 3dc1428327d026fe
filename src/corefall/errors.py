"""Exceptions raised by corefall."""
from __future__ import annotations


class RefinementExhausted(RuntimeError):
    """Raised when the refinement driver hits its iteration cap before its budget."""

    def __init__(self, iterations: int, last_wall_time: float, budget: float) -> None:
        self.iterations = iterations
        self.last_wall_time = last_wall_time
        self.budget = budget
        super().__init__(
            f"Refinement stopped after {iterations} runs: last run took "
            f"{last_wall_time:.6f}s, budget is {budget}s"
        )
