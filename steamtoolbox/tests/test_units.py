#!/usr/bin/env python3
"""
Tests for steamtoolbox units module (pressure conversion with gauge / absolute modes).
"""

import sys
import os
import math

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from steamtoolbox.units import convert_pressure_mode, to_absolute_bar, to_gauge_bar
from steamtoolbox.classes import pressure_unit, pressure_mode


def test_mmhg_gauge_zero_is_one_atmosphere():
    """0 mmHg(g) is 1.01325 barA."""
    bar_abs = convert_pressure_mode(0.0, pressure_unit.MMHG, pressure_mode.GAUGE, pressure_unit.BAR, pressure_mode.ABSOLUTE)
    assert abs(bar_abs - 1.01325) < 1e-4, f"{bar_abs}"


def test_mmhg_full_vacuum():
    """-760 mmHg(g) is close to 0 barA."""
    bar_abs = convert_pressure_mode(-760.0, "MMHG", "GAUGE", "BAR", "ABSOLUTE")
    assert abs(bar_abs) < 1e-5, f"{bar_abs}"


def test_mmhg_absolute_to_gauge():
    """760 mmHg(abs) is close to 0 mmHg(g)."""
    mmhg_g = convert_pressure_mode(760.0, "MMHG", "ABSOLUTE", "MMHG", "GAUGE")
    assert abs(mmhg_g) < 5e-2, f"{mmhg_g}"


def test_gauge_absolute_round_trip_all_units():
    """Gauge -> absolute -> gauge recovers the input for every unit."""
    for unit in pressure_unit:
        for value in (-0.5, 0.0, 3.7, 250.0):
            absolute = convert_pressure_mode(value, unit, pressure_mode.GAUGE, unit, pressure_mode.ABSOLUTE)
            back = convert_pressure_mode(absolute, unit, pressure_mode.ABSOLUTE, unit, pressure_mode.GAUGE)
            assert abs(back - value) < 1e-9 * max(abs(value), 1), f"{unit.name}: {value} -> {absolute} -> {back}"


def test_unit_scales():
    """Known equivalences between units, all absolute."""
    cases = [
        (100.0, "KPA", 1.0),
        (1.0, "MPA", 10.0),
        (1e5, "PA", 1.0),
        (1000.0, "MBAR", 1.0),
        (1.0, "ATM", 1.01325),
        (1.0, "KGCM2", 0.980665),
        (14.5038, "PSI", 1.0),
        (2.5, "BARA", 2.5),
    ]
    for value, unit, expected in cases:
        bar = convert_pressure_mode(value, unit, "ABSOLUTE", "BAR", "ABSOLUTE")
        assert abs(bar - expected) / expected < 1e-4, f"{value} {unit} -> {bar} bar, expected {expected}"


def test_to_absolute_and_gauge_bar():
    """Helpers default to gauge input for to_absolute_bar and absolute input for to_gauge_bar."""
    assert abs(to_absolute_bar(0) - 1.01325) < 1e-12
    assert abs(to_absolute_bar(5, "BAR", "ABSOLUTE") - 5) < 1e-12
    assert abs(to_gauge_bar(1.01325)) < 1e-12
    assert abs(to_absolute_bar(0, "PSI", "GAUGE") - 1.01325) < 1e-12


def test_unknown_unit_rejected():
    """An unknown unit string raises ValueError naming the valid choices."""
    try:
        convert_pressure_mode(1.0, "TORR", "GAUGE", "BAR", "ABSOLUTE")
    except ValueError as e:
        assert "MMHG" in str(e), f"{e}"
    else:
        raise AssertionError("TORR was accepted")


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
