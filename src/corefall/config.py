"""
Immutable configuration for a fall-time estimate.

All physical constants, initial conditions and refinement tuning live in
one frozen dataclass that is passed to the integrator and the driver.
The defaults reproduce the reference problem: a 13 584 km body with
13.73 N/kg surface gravity, a probe released 2000 km above the surface,
and a population of seven billion.

Physical units:
- Lengths: meters [m]
- Field strength: newtons per kilogram [N/kg]
- Times: seconds [s]
"""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from corefall.utils.validation import (
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_refinement_factor,
    validate_timestep,
)

DEFAULT_DIAMETER = 13584.0 * 1000.0
DEFAULT_SURFACE_GRAVITY = 13.73
DEFAULT_ALTITUDE = 2000.0 * 1000.0
DEFAULT_POPULATION = 7_000_000_000
DEFAULT_INITIAL_STEP = 10000.0
DEFAULT_BUDGET = 0.3
DEFAULT_REFINEMENT_FACTOR = 10.0


@dataclass(frozen=True)
class FallConfig:
    """
    Constants for one fall-time estimate.

    Parameters
    ----------
    diameter : float
        Diameter of the spherical body [m]
    surface_gravity : float
        Field strength at the surface [N/kg]
    altitude : float
        Release height above the surface [m]. The probe starts at rest.
    population : int
        Number of people the throughput figures are computed for
    initial_step : float
        Coarse step the refinement driver starts from [s]. The first run
        already uses ``initial_step / refinement_factor``.
    budget : float
        Wall-clock cost of a single run that ends refinement [s]
    refinement_factor : float
        Divisor applied to the step before each run

    Examples
    --------
    >>> cfg = FallConfig()
    >>> cfg.radius
    6792000.0
    >>> small = cfg.with_overrides(diameter=2000.0, altitude=0.0)
    """

    diameter: float = DEFAULT_DIAMETER
    surface_gravity: float = DEFAULT_SURFACE_GRAVITY
    altitude: float = DEFAULT_ALTITUDE
    population: int = DEFAULT_POPULATION
    initial_step: float = DEFAULT_INITIAL_STEP
    budget: float = DEFAULT_BUDGET
    refinement_factor: float = DEFAULT_REFINEMENT_FACTOR

    def __post_init__(self) -> None:
        for name in ("diameter", "surface_gravity", "altitude", "budget"):
            validate_finite(getattr(self, name), name)
        validate_positive(self.diameter, "diameter")
        validate_positive(self.surface_gravity, "surface_gravity")
        validate_non_negative(self.altitude, "altitude")
        validate_positive(self.population, "population")
        validate_timestep(self.initial_step)
        validate_positive(self.budget, "budget")
        validate_refinement_factor(self.refinement_factor)

    # --- Derived quantities ---

    @property
    def radius(self) -> float:
        """Body radius [m]."""
        return self.diameter / 2.0

    @property
    def gm(self) -> float:
        """Gravitational parameter G*M [m³/s²], from g_surface * R²."""
        return self.surface_gravity * self.radius ** 2

    @property
    def initial_distance(self) -> float:
        """Distance from the probe to the body centre at release [m]."""
        return self.altitude + self.radius

    # --- Construction helpers ---

    def with_overrides(self, **changes: Any) -> FallConfig:
        """Return a copy with the given fields replaced (validated again)."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FallConfig:
        """
        Build a config from a mapping, falling back to defaults for missing keys.

        Raises
        ------
        ValueError
            If the mapping holds keys that are not config fields
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown config keys: {sorted(unknown)}. Valid keys: {sorted(known)}"
            )
        return cls(**data)


def load_config(filepath: str | Path) -> FallConfig:
    """
    Load a FallConfig from a JSON file.

    The file holds a single object whose keys are FallConfig field names.
    Missing keys take their default values.
    """
    path = Path(filepath)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return FallConfig.from_dict(data)


def save_config(config: FallConfig, filepath: str | Path) -> Path:
    """Write a FallConfig to a JSON file, creating parent directories."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
