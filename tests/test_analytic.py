"""
Tests for the closed-form reference fall time.
"""
import numpy as np
import pytest

from corefall.config import FallConfig
from corefall.dynamics.analytic import (
    exterior_fall_time,
    interior_fall_time,
    reference_fall_time,
    surface_speed,
)


def test_drop_from_surface_is_quarter_period():
    cfg = FallConfig(altitude=0.0)
    omega = np.sqrt(cfg.surface_gravity / cfg.radius)
    assert surface_speed(cfg) == pytest.approx(0.0, abs=1e-9)
    assert exterior_fall_time(cfg) == pytest.approx(0.0, abs=1e-9)
    assert reference_fall_time(cfg) == pytest.approx(np.pi / 2 / omega)


def test_surface_speed_matches_energy_balance():
    cfg = FallConfig()
    v = surface_speed(cfg)
    energy = 0.5 * v ** 2 - cfg.gm / cfg.radius
    assert energy == pytest.approx(-cfg.gm / cfg.initial_distance)


def test_reference_scenario_order_of_magnitude():
    cfg = FallConfig()
    total = reference_fall_time(cfg)
    assert 1e3 < total < 1e4
    assert total == pytest.approx(exterior_fall_time(cfg) + interior_fall_time(cfg))


def test_higher_release_takes_longer():
    low = reference_fall_time(FallConfig(altitude=1.0e6))
    high = reference_fall_time(FallConfig(altitude=4.0e6))
    assert high > low
