"""
Gravitational field-strength models along the fall axis.

Every model maps the remaining distance to the body centre [m] to the
field strength pulling the probe inward [N/kg == m/s²]. Models are
evaluated once per integration step in closed form.
"""
from __future__ import annotations

from typing import Protocol

from corefall.config import FallConfig

EXTERIOR = "exterior"
INTERIOR = "interior"


class FieldModel(Protocol):
    """Protocol for field strength as a function of distance to the centre."""
    def __call__(self, distance: float) -> float:
        ...


class InverseSquareField:
    """
    Field outside a spherical body.

    g(r) = GM / r²

    Parameters
    ----------
    gm : float
        Gravitational parameter G*M [m³/s²]

    Examples
    --------
    >>> field = InverseSquareField(gm=3.986e14)
    >>> round(field(6.371e6), 2)
    9.82
    """
    def __init__(self, gm: float) -> None:
        self.gm = float(gm)

    def __call__(self, distance: float) -> float:
        return self.gm / distance ** 2


class LinearInteriorField:
    """
    Field inside the body, assumed linear in depth.

    g(r) = g_surface * r / R

    Full strength at the surface, zero at the centre.
    """
    def __init__(self, surface_gravity: float, radius: float) -> None:
        self.surface_gravity = float(surface_gravity)
        self.radius = float(radius)

    def __call__(self, distance: float) -> float:
        return self.surface_gravity * (distance / self.radius)


class PiecewiseField:
    """
    Two-regime field of a spherical body.

    Uses ``exterior`` while the distance exceeds the radius and
    ``interior`` from the surface inward. Both regimes meet at the
    surface with the same strength, g_surface.

    Parameters
    ----------
    radius : float
        Body radius [m]
    exterior : FieldModel
        Model used while distance > radius
    interior : FieldModel
        Model used while distance <= radius
    """
    def __init__(self, radius: float, exterior: FieldModel, interior: FieldModel) -> None:
        self.radius = float(radius)
        self.exterior = exterior
        self.interior = interior

    @classmethod
    def from_config(cls, config: FallConfig) -> PiecewiseField:
        return cls(
            radius=config.radius,
            exterior=InverseSquareField(config.gm),
            interior=LinearInteriorField(config.surface_gravity, config.radius),
        )

    def phase(self, distance: float) -> str:
        return EXTERIOR if distance > self.radius else INTERIOR

    def select(self, distance: float) -> FieldModel:
        """Return the model that applies at ``distance``."""
        return self.exterior if distance > self.radius else self.interior

    def __call__(self, distance: float) -> float:
        return self.select(distance)(distance)
