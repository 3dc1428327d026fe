"""Utility functions for corefall."""

from .io import (
    load_refinement_history,
    load_trajectory,
    refinement_history,
    save_refinement_history,
)
from .validation import (
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_refinement_factor,
    validate_timestep,
)

__all__ = [
    "refinement_history",
    "save_refinement_history",
    "load_refinement_history",
    "load_trajectory",
    "validate_finite",
    "validate_positive",
    "validate_non_negative",
    "validate_refinement_factor",
    "validate_timestep",
]
