#!/usr/bin/env python3
"""
Tests for steamtoolbox steam module (saturation states, dryness, flash steam, steam tables).
"""

import sys
import os
import math

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))
import tempfile

from steamtoolbox.steam import (
    sat_props_p, sat_props_t, wet_steam_enthalpy,
    dryness_after_reduction, dryness_with_separation, flash_steam_fraction, make_steam_table,
)
from steamtoolbox.errors import InvalidInputError, OutOfRangeError


def raises(exc, fn, *args, **kwargs):
    try:
        fn(*args, **kwargs)
    except exc:
        return True
    return False


# ============================================================================
#  Saturation states
# ============================================================================

def test_sat_props_p_10bar():
    """Saturated liquid and vapour at 10 barA."""
    sat = sat_props_p(10)
    assert abs(sat.t_c - 179.88) < 0.02, f"{sat.t_c}"
    assert abs(sat.h_f / 1000 - 762.7) < 0.5, f"{sat.h_f}"
    assert abs(sat.h_g / 1000 - 2777.1) < 1.5, f"{sat.h_g}"
    assert abs(sat.h_fg - (sat.h_g - sat.h_f)) < 1e-9
    assert sat.v_g > 100 * sat.v_f
    assert sat.s_g > sat.s_f


def test_sat_props_t_matches_p():
    """Saturation state by temperature equals the state at its saturation pressure."""
    by_t = sat_props_t(150)
    by_p = sat_props_p(by_t.p_bar_abs)
    assert abs(by_p.t_c - 150) < 1e-6
    assert abs(by_p.h_f - by_t.h_f) / by_t.h_f < 1e-6
    assert abs(by_p.h_g - by_t.h_g) / by_t.h_g < 1e-6


def test_sat_props_t_near_critical():
    """Saturation state just below the critical temperature."""
    sat = sat_props_t(373.94)
    assert abs(sat.p_bar_abs - 220.62) < 0.05, f"{sat.p_bar_abs}"
    assert sat.h_f <= sat.h_g
    assert sat.h_fg < 150e3, f"{sat.h_fg}"


def test_sat_props_out_of_range():
    """Pressures at or beyond the critical point have no two phase state."""
    assert raises(OutOfRangeError, sat_props_p, 221)
    assert raises(OutOfRangeError, sat_props_t, 380)


# ============================================================================
#  Dryness
# ============================================================================

def test_wet_steam_enthalpy():
    """h = hf + x hfg, and dryness outside 0 - 1 is rejected."""
    sat = sat_props_p(5)
    assert abs(wet_steam_enthalpy(5, 0.9) - (sat.h_f + 0.9 * sat.h_fg)) < 1e-9
    assert raises(InvalidInputError, wet_steam_enthalpy, 5, 1.2)


def test_dryness_after_reduction_improves():
    """Throttling wet steam raises its dryness."""
    h = wet_steam_enthalpy(10, 0.95)
    res = dryness_after_reduction(h, 2)
    assert 0.95 < res.dryness < 1.0, f"{res.dryness}"
    assert not res.clamped


def test_dryness_after_reduction_superheated_clamps():
    """Throttling dry saturated steam superheats it, dryness clamps to 1."""
    h = sat_props_p(10).h_g
    res = dryness_after_reduction(h, 1.01325)
    assert res.dryness == 1.0
    assert res.clamped


def test_dryness_at_same_pressure():
    """No pressure change leaves dryness unchanged."""
    h = wet_steam_enthalpy(8, 0.8)
    assert abs(dryness_after_reduction(h, 8).dryness - 0.8) < 1e-9


def test_dryness_with_separation():
    """An 80 % separator removes 80 % of the moisture."""
    res = dryness_with_separation(0.9, 0.8)
    assert abs(res.dryness - 0.98) < 1e-12
    res = dryness_with_separation(dryness_after_reduction(wet_steam_enthalpy(10, 0.9), 10), 1.0)
    assert abs(res.dryness - 1.0) < 1e-12
    assert raises(InvalidInputError, dryness_with_separation, 0.9, 1.5)


# ============================================================================
#  Flash steam
# ============================================================================

def test_flash_steam_fraction():
    """Condensate at 10 barA flashed to atmospheric gives about 15 % steam."""
    res = flash_steam_fraction(10, 1.01325)
    assert abs(res.flash_fraction - 0.152) < 0.005, f"{res.flash_fraction}"
    assert abs(res.flash_fraction - (res.h_condensate - res.h_f_low) / (res.h_g_low - res.h_f_low)) < 1e-12
    assert not res.clamped


def test_flash_steam_no_flash_upward():
    """No flash steam forms when the vessel pressure is higher."""
    res = flash_steam_fraction(2, 5)
    assert res.flash_fraction == 0.0
    assert res.clamped


# ============================================================================
#  Steam tables
# ============================================================================

def test_make_steam_table_default():
    """Default saturation table is ordered by pressure with increasing Tsat and hf."""
    df = make_steam_table()
    assert len(df) == 17
    assert list(df.columns)[:3] == ["P (barA)", "Tsat (degC)", "hf (kJ/kg)"]
    assert (df["Tsat (degC)"].diff().dropna() > 0).all()
    assert (df["hf (kJ/kg)"].diff().dropna() > 0).all()


def test_make_steam_table_by_temperature():
    """Saturation table by temperature."""
    df = make_steam_table(temperatures=[100, 200])
    assert abs(df["P (barA)"].iloc[0] - 1.0142) < 1e-3
    assert abs(df["Tsat (degC)"].iloc[1] - 200) < 1e-12


def test_make_steam_table_grid():
    """Pressure x temperature grid of single phase states."""
    df = make_steam_table(pressures=[1, 10], temperatures=[20, 200, 300])
    assert len(df) == 6
    regions = list(df["Region"])
    assert regions == [1, 2, 2, 1, 2, 2], f"{regions}"


def test_make_steam_table_export():
    """Export writes an Excel workbook and a text table."""
    cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmp:
        os.chdir(tmp)
        try:
            make_steam_table(pressures=[1, 5], export=True)
            assert os.path.exists("steam_table.xlsx")
            with open("steam_table.txt") as f:
                text = f.read()
            assert text.startswith("STEAM TABLE")
        finally:
            os.chdir(cwd)


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
