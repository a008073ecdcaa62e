#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    steamtoolbox - A collection of Steam & Water Engineering Utilities
              Copyright (C) 2024, The steamtoolbox authors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

import math
from typing import Union

from steamtoolbox.classes import pressure_unit, pressure_mode
from steamtoolbox.validate import validate_methods
from steamtoolbox.constants import ATM_BAR, PA_PER_BAR, MMHG_PER_BAR, KGCM2_TO_BAR, PSI_TO_BAR
from steamtoolbox.errors import InvalidInputError

# Multiplier taking a value in each unit to bar
_TO_BAR = {
    pressure_unit.BAR: 1.0,
    pressure_unit.BARA: 1.0,
    pressure_unit.MBAR: 1e-3,
    pressure_unit.PA: 1.0 / PA_PER_BAR,
    pressure_unit.KPA: 1e-2,
    pressure_unit.MPA: 10.0,
    pressure_unit.KGCM2: KGCM2_TO_BAR,
    pressure_unit.PSI: PSI_TO_BAR,
    pressure_unit.ATM: ATM_BAR,
    pressure_unit.MMHG: 1.0 / MMHG_PER_BAR,
}

def convert_pressure_mode(
    value: float,
    from_unit: Union[pressure_unit, str] = pressure_unit.BAR,
    from_mode: Union[pressure_mode, str] = pressure_mode.ABSOLUTE,
    to_unit: Union[pressure_unit, str] = pressure_unit.BAR,
    to_mode: Union[pressure_mode, str] = pressure_mode.ABSOLUTE,
) -> float:
    """ Returns a pressure converted between units and gauge / absolute reference
        Gauge values are referenced to one standard atmosphere (1.01325 bar)

        value: Pressure to convert, in from_unit
        from_unit: pressure_unit class object or string, e.g. 'BAR', 'KPA', 'MMHG'
        from_mode: pressure_mode class object or string, 'GAUGE' or 'ABSOLUTE'
        to_unit: pressure_unit of the result
        to_mode: pressure_mode of the result
    """
    from_unit, to_unit = validate_methods(["punit", "punit"], [from_unit, to_unit])
    from_mode, to_mode = validate_methods(["pmode", "pmode"], [from_mode, to_mode])
    if not math.isfinite(value):
        raise InvalidInputError(f"Pressure value must be finite (got {value})")

    bar = value * _TO_BAR[from_unit]
    if from_mode == pressure_mode.GAUGE:
        bar += ATM_BAR
    if to_mode == pressure_mode.GAUGE:
        bar -= ATM_BAR
    return bar / _TO_BAR[to_unit]

def to_absolute_bar(value: float, unit: Union[pressure_unit, str] = pressure_unit.BAR, mode: Union[pressure_mode, str] = pressure_mode.GAUGE) -> float:
    """ Returns absolute pressure (barA) from a value in any unit and mode """
    return convert_pressure_mode(value, unit, mode, pressure_unit.BAR, pressure_mode.ABSOLUTE)

def to_gauge_bar(value: float, unit: Union[pressure_unit, str] = pressure_unit.BAR, mode: Union[pressure_mode, str] = pressure_mode.ABSOLUTE) -> float:
    """ Returns gauge pressure (barg) from a value in any unit and mode """
    return convert_pressure_mode(value, unit, mode, pressure_unit.BAR, pressure_mode.GAUGE)
