#!/usr/bin/env python3
"""
Tests for steamtoolbox piping module (pipe sizing, friction factor, Darcy-Weisbach pressure drop).
"""

import sys
import os
import math

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from steamtoolbox.piping import (
    size_by_velocity, pressure_loss, friction_factor, steam_viscosity, ideal_gas_density,
)
from steamtoolbox.if97 import region_props
from steamtoolbox.errors import InvalidInputError, OutOfRangeError


def raises(exc, fn, *args, **kwargs):
    try:
        fn(*args, **kwargs)
    except exc:
        return True
    return False


# ============================================================================
#  Pipe sizing
# ============================================================================

def test_size_by_velocity():
    """3600 kg/hr at 1 kg/m3 and 10 m/s needs 0.1 m2 of flow area."""
    res = size_by_velocity(3600, 1.0, 10.0)
    d = math.sqrt(4 * 0.1 / math.pi)
    assert abs(res.inner_diameter_m - d) < 1e-12, f"{res.inner_diameter_m}"
    assert abs(res.velocity_m_s - 10.0) < 1e-9, f"{res.velocity_m_s}"
    assert abs(res.reynolds - 10.0 * d / 1.2e-5) / res.reynolds < 1e-9, f"{res.reynolds}"


def test_size_by_velocity_invalid():
    """Non-positive flow, density or velocity raise InvalidInputError."""
    assert raises(InvalidInputError, size_by_velocity, 0, 1.0, 10.0)
    assert raises(InvalidInputError, size_by_velocity, 100, 0, 10.0)
    assert raises(InvalidInputError, size_by_velocity, 100, 1.0, -1)


# ============================================================================
#  Friction factor
# ============================================================================

def test_friction_factor_laminar():
    """Laminar flow uses 64/Re for either method."""
    assert abs(friction_factor(1000, 1e-3) - 0.064) < 1e-12
    assert abs(friction_factor(1000, 1e-3, "SERGHIDES") - 0.064) < 1e-12


def test_friction_factor_turbulent_methods_agree():
    """Haaland and Serghides agree within 3 % on a Colebrook value near 0.0185."""
    f_h = friction_factor(1e5, 1e-4, "HAALAND")
    f_s = friction_factor(1e5, 1e-4, "SERGHIDES")
    assert abs(f_s - 0.0185) < 0.0005, f"Serghides {f_s}"
    assert abs(f_h - f_s) / f_s < 0.03, f"Haaland {f_h} vs Serghides {f_s}"


def test_friction_factor_unknown_method():
    """Unknown method strings raise ValueError."""
    assert raises(ValueError, friction_factor, 1e5, 1e-4, "COLEBROOK")


# ============================================================================
#  Pressure loss
# ============================================================================

def test_pressure_loss_laminar():
    """Laminar water flow: f = 64/Re and dp = f (L/D) rho v^2 / 2."""
    res = pressure_loss(36, 0.05, 100, density=1000, viscosity=1e-3)
    area = math.pi * 0.05 ** 2 / 4
    v = 0.01 / (1000 * area)
    re = 1000 * v * 0.05 / 1e-3
    assert abs(res.velocity_m_s - v) < 1e-12
    assert abs(res.reynolds - re) / re < 1e-12
    assert abs(res.friction_factor - 64 / re) < 1e-12
    dp = 64 / re * (100 / 0.05) * 1000 * v ** 2 / 2 / 1e5
    assert abs(res.pressure_drop_bar - dp) / dp < 1e-12, f"{res.pressure_drop_bar} vs {dp}"


def test_pressure_loss_fittings_equivalent_length():
    """A fitting K-sum gives the same drop as its equivalent length K.D/f."""
    base = pressure_loss(5000, 0.1, 50, density=5.0, viscosity=1.5e-5)
    with_k = pressure_loss(5000, 0.1, 50, density=5.0, viscosity=1.5e-5, fittings_k_sum=3.0)
    with_le = pressure_loss(5000, 0.1, 50, density=5.0, viscosity=1.5e-5,
                            equivalent_length_m=3.0 * 0.1 / base.friction_factor)
    assert with_k.pressure_drop_bar > base.pressure_drop_bar
    assert abs(with_k.pressure_drop_bar - with_le.pressure_drop_bar) / with_le.pressure_drop_bar < 1e-12


def test_pressure_loss_mach():
    """Mach is None without a sound speed, v / c with one."""
    res = pressure_loss(5000, 0.1, 50, density=5.0)
    assert res.mach is None
    res = pressure_loss(5000, 0.1, 50, density=5.0, sound_speed=500)
    assert abs(res.mach - res.velocity_m_s / 500) < 1e-12


def test_pressure_loss_from_if97_state():
    """With a state given, density comes from IF97 and viscosity from the vapour correlation."""
    res = pressure_loss(2000, 0.08, 30, state_p_bar_abs=10, state_t_c=250)
    rho = 1 / region_props(10, 250)[1]
    assert abs(res.density - rho) < 1e-12, f"{res.density} vs {rho}"
    assert abs(res.viscosity - steam_viscosity(250, rho)) < 1e-15
    assert 4.0 < res.density < 4.6, f"{res.density}"
    assert res.pressure_drop_bar > 0


def test_pressure_loss_state_errors_propagate():
    """An IF97 failure on the state is raised, not replaced by the caller's values."""
    assert raises(OutOfRangeError, pressure_loss, 2000, 0.08, 30, density=5.0, state_p_bar_abs=10, state_t_c=3000)


def test_pressure_loss_invalid():
    """Non-positive flow, diameter or length, or a missing density, raise InvalidInputError."""
    assert raises(InvalidInputError, pressure_loss, 0, 0.1, 10, density=5.0)
    assert raises(InvalidInputError, pressure_loss, 100, 0, 10, density=5.0)
    assert raises(InvalidInputError, pressure_loss, 100, 0.1, 0, density=5.0)
    assert raises(InvalidInputError, pressure_loss, 100, 0.1, 10)


# ============================================================================
#  Fluid properties
# ============================================================================

def test_steam_viscosity():
    """Sutherland reference 1.3e-5 Pa.s at 300 K, liquid water near 1.0e-3 Pa.s at 20 degC."""
    assert abs(steam_viscosity(26.85, 0.5) - 1.3e-5) < 1e-15
    mu_l = steam_viscosity(20, 998)
    assert abs(mu_l - 1.0e-3) / 1.0e-3 < 0.03, f"{mu_l}"


def test_ideal_gas_density():
    """p / (R T) at 1 barA and 373 K."""
    rho = ideal_gas_density(1.0, 99.85)
    assert abs(rho - 1e5 / (461.526 * 373.0)) < 1e-9, f"{rho}"
    assert raises(InvalidInputError, ideal_gas_density, 0, 100)


if __name__ == '__main__':
    tests = [v for k, v in sorted(globals().items()) if k.startswith('test_') and callable(v)]
    passed, failed = 0, 0
    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")
    print(f"\n{passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
