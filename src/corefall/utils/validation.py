"""
Validation utilities for physical constants and integration parameters.

Integration and refinement parameters are checked once, at construction,
so the stepping loop itself stays free of checks.
"""
from __future__ import annotations

import math
import warnings


def validate_finite(value: float, name: str) -> None:
    """Validate that a scalar is a finite number."""
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ValueError. If False, issue warning.

    Raises
    ------
    ValueError
        If strict=True and value <= 0
    """
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise ValueError(msg)
        else:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is non-negative."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_timestep(dt: float) -> None:
    """
    Validate an integration time step.

    A non-positive step never advances the probe, so the fall loop
    would not terminate.

    Parameters
    ----------
    dt : float
        Time step [s]

    Raises
    ------
    ValueError
        If timestep is non-finite or not positive
    """
    validate_finite(dt, "Timestep")
    if dt <= 0:
        raise ValueError(f"Timestep must be positive, got {dt}")


def validate_refinement_factor(factor: float) -> None:
    """
    Validate the divisor applied to the step between refinement runs.

    Raises
    ------
    ValueError
        If factor <= 1 (the step would never shrink)
    """
    validate_finite(factor, "Refinement factor")
    if factor <= 1.0:
        raise ValueError(f"Refinement factor must be greater than 1, got {factor}")
    if factor < 2.0:
        warnings.warn(
            f"Refinement factor {factor} shrinks the step slowly; "
            "the driver may need many runs to reach its budget.",
            RuntimeWarning,
            stacklevel=2
        )
