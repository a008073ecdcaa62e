#!/usr/bin/env python3
"""
Tests for steamtoolbox cooling module (condenser, cooling tower, pump NPSH, drain cooler).
"""

import sys
import os
import math

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from steamtoolbox.cooling import condenser, cooling_tower, pump_npsh, drain_cooler, antoine_vapor_pressure
from steamtoolbox.shared_fns import log_mean_temp_diff, format_warning
from steamtoolbox.if97 import saturation_pressure_from_temp_c
from steamtoolbox.errors import InvalidInputError


def raises(exc, fn, *args, **kwargs):
    try:
        fn(*args, **kwargs)
    except exc:
        return True
    return False


def has_code(warnings, code):
    return any(w.startswith(f"[{code}]") for w in warnings)


# ============================================================================
#  LMTD
# ============================================================================

def test_lmtd():
    """LMTD of 20 and 10 K is 10 / ln 2, equal differences return the difference."""
    assert abs(log_mean_temp_diff(20, 10) - 10 / math.log(2)) < 1e-12
    assert log_mean_temp_diff(7.5, 7.5) == 7.5


def test_lmtd_requires_positive_differences():
    """Zero or negative terminal differences raise InvalidInputError."""
    assert raises(InvalidInputError, log_mean_temp_diff, 0, 10)
    assert raises(InvalidInputError, log_mean_temp_diff, 10, -1)


def test_format_warning():
    """Warnings carry their code, catalogue text and detail."""
    w = format_warning("APPROACH_TIGHT", "1.5 C")
    assert w.startswith("[APPROACH_TIGHT] ") and w.endswith(": 1.5 C"), w


# ============================================================================
#  Condenser
# ============================================================================

def test_condenser_lmtd_positive():
    """0.3 barA condenser with 25 -> 35 degC cooling water."""
    res = condenser(0.3, 25, 35, 100, target_back_pressure_bar_abs=0.35)
    assert res.lmtd_k > 0, f"lmtd={res.lmtd_k} Tsat={res.condensing_temp_c}"
    assert res.condensing_pressure_bar_abs > 0.25
    assert abs(res.condensing_temp_c - 69.1) < 0.1, f"{res.condensing_temp_c}"
    assert res.warnings == []
    q = 100 * 1000 / 3600 * 4.186 * 10
    assert abs(res.heat_duty_kw - q) < 1e-9, f"{res.heat_duty_kw}"


def test_condenser_gauge_input():
    """A vacuum given in barg resolves to the same condenser state."""
    res_abs = condenser(0.3, 25, 35, 100)
    res_g = condenser(0.3 - 1.01325, 25, 35, 100, unit="BAR", mode="GAUGE")
    assert abs(res_g.condensing_temp_c - res_abs.condensing_temp_c) < 1e-9


def test_condenser_from_steam_temperature():
    """Condensing pressure is the saturation pressure at a given steam temperature."""
    res = condenser(0.0, 30, 40, 500, steam_temp_c=50)
    assert abs(res.condensing_pressure_bar_abs - saturation_pressure_from_temp_c(50)) < 1e-12
    assert abs(res.condensing_pressure_bar_abs - 0.12352) < 2e-4, f"{res.condensing_pressure_bar_abs}"


def test_condenser_warnings():
    """Back pressure above target and a UA / water balance mismatch are reported."""
    res = condenser(0.3, 25, 35, 100, ua_kw_k=10, target_back_pressure_bar_abs=0.2)
    assert has_code(res.warnings, "BACK_PRESSURE_HIGH"), res.warnings
    assert has_code(res.warnings, "UA_BALANCE_MISMATCH"), res.warnings
    assert abs(res.heat_duty_kw - 10 * res.lmtd_k) < 1e-9


def test_condenser_area_times_u():
    """Conductance from area and U matches the equivalent UA."""
    res_ua = condenser(0.3, 25, 35, 100, ua_kw_k=30)
    res_au = condenser(0.3, 25, 35, 100, area_m2=15, overall_u_w_m2k=2000)
    assert abs(res_ua.heat_duty_kw - res_au.heat_duty_kw) < 1e-9


def test_condenser_cooling_water_above_saturation():
    """Cooling water leaving above the condensing temperature raises InvalidInputError."""
    assert raises(InvalidInputError, condenser, 0.05, 25, 40, 100)


# ============================================================================
#  Cooling tower
# ============================================================================

def test_cooling_tower_range_approach():
    """Range 10 C and approach 4 C meet the targets without warnings."""
    res = cooling_tower(40, 30, 26, 100, dry_bulb_c=32, target_range_c=8, target_approach_c=4)
    assert abs(res.range_c - 10) < 1e-6
    assert abs(res.approach_c - 4) < 1e-6
    assert abs(res.heat_rejected_kw - 100 * 1000 / 3600 * 4.186 * 10) < 1e-9
    assert res.warnings == []


def test_cooling_tower_warnings():
    """Negative and tight approaches, missed range and approach targets are reported."""
    res = cooling_tower(40, 25, 26, 100)
    assert has_code(res.warnings, "APPROACH_NEGATIVE"), res.warnings
    res = cooling_tower(40, 27, 26, 100, target_range_c=15, target_approach_c=0.5)
    assert has_code(res.warnings, "APPROACH_TIGHT"), res.warnings
    assert has_code(res.warnings, "RANGE_BELOW_TARGET"), res.warnings
    assert has_code(res.warnings, "APPROACH_ABOVE_TARGET"), res.warnings


# ============================================================================
#  Pump NPSH
# ============================================================================

def test_pump_npsh_margin_above_one():
    """0.5 barg suction at 25 degC with 3 m static head and 1 m friction."""
    res = pump_npsh(0.5, 25, 3, 1, 3, density=998)
    assert res.margin_ratio > 1.1, f"{res.margin_ratio}"
    expected = (1.51325 - res.vapor_pressure_bar_abs) * 1e5 / (998 * 9.80665) + 2
    assert abs(res.npsha_m - expected) < 1e-9
    assert res.warnings == []


def test_pump_npsh_antoine_close_to_if97():
    """Antoine and IF97 vapour pressures give nearly the same NPSHa at 25 degC."""
    a = pump_npsh(0.5, 25, 3, 1, 3, vpmethod="ANTOINE")
    b = pump_npsh(0.5, 25, 3, 1, 3, vpmethod="IF97")
    assert abs(a.npsha_m - b.npsha_m) < 0.01, f"{a.npsha_m} vs {b.npsha_m}"
    assert abs(antoine_vapor_pressure(100) - 1.01325) < 2e-3
    assert antoine_vapor_pressure(150) == antoine_vapor_pressure(100)


def test_pump_npsh_low_margin_and_no_requirement():
    """Low margin is warned, no NPSHr gives an infinite margin."""
    res = pump_npsh(0.5, 25, 3, 1, 20)
    assert has_code(res.warnings, "NPSH_MARGIN_LOW"), res.warnings
    res = pump_npsh(0.5, 25, 3, 1, 0)
    assert math.isinf(res.margin_ratio)


# ============================================================================
#  Drain cooler
# ============================================================================

def test_drain_cooler_balanced():
    """Equal flows and temperature changes balance, counter-current LMTD of 20 K."""
    res = drain_cooler(120, 60, 10, 40, 100, 10)
    assert abs(res.lmtd_k - 20) < 1e-9
    assert res.shell_heat_kw < 0 < res.tube_heat_kw
    assert res.imbalance_kw < 1e-9
    assert res.warnings == []
    assert res.ua_duty_kw is None


def test_drain_cooler_imbalance():
    """A tube side flow 20 % low is flagged as a heat imbalance."""
    res = drain_cooler(120, 60, 10, 40, 100, 8, ua_kw_k=5)
    assert has_code(res.warnings, "HEAT_IMBALANCE"), res.warnings
    assert abs(res.ua_duty_kw - 5 * res.lmtd_k) < 1e-9


def test_drain_cooler_temperature_cross():
    """A zero terminal difference raises InvalidInputError."""
    assert raises(InvalidInputError, drain_cooler, 100, 60, 10, 40, 100, 10)


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
