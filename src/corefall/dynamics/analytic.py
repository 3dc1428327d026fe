"""
Closed-form fall times for the two-regime field.

Used to judge how far a stepped estimate is from the continuous answer.

Exterior (radial Kepler fall from rest at r0 to R, with x = R / r0):

    t_ext = sqrt(r0³ / (2 GM)) * (sqrt(x (1 - x)) + arccos(sqrt(x)))

Interior (harmonic motion with ω² = g_surface / R, entering at speed v_R):

    t_int = arctan2(R ω, v_R) / ω
"""
from __future__ import annotations

import numpy as np

from corefall.config import FallConfig


def surface_speed(config: FallConfig) -> float:
    """Speed at which the probe reaches the surface [m/s]."""
    r0 = config.initial_distance
    R = config.radius
    return float(np.sqrt(2.0 * config.gm * (1.0 / R - 1.0 / r0)))


def exterior_fall_time(config: FallConfig) -> float:
    """Time from release to the surface [s]."""
    r0 = config.initial_distance
    x = config.radius / r0
    scale = np.sqrt(r0 ** 3 / (2.0 * config.gm))
    return float(scale * (np.sqrt(x * (1.0 - x)) + np.arccos(np.sqrt(x))))


def interior_fall_time(config: FallConfig) -> float:
    """Time from the surface to the centre [s]."""
    omega = np.sqrt(config.surface_gravity / config.radius)
    return float(np.arctan2(config.radius * omega, surface_speed(config)) / omega)


def reference_fall_time(config: FallConfig) -> float:
    """
    Total fall time from release to the centre [s].

    Examples
    --------
    >>> from corefall.config import FallConfig
    >>> cfg = FallConfig(altitude=0.0)
    >>> t = reference_fall_time(cfg)  # quarter period of the interior oscillation
    """
    return exterior_fall_time(config) + interior_fall_time(config)
