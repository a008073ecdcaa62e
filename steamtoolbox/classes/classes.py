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

from enum import Enum

class pressure_unit(Enum):  # Pressure units accepted at the API boundary
    BAR = 0
    BARA = 1
    MBAR = 2
    PA = 3
    KPA = 4
    MPA = 5
    KGCM2 = 6
    PSI = 7
    ATM = 8
    MMHG = 9

class pressure_mode(Enum):  # Gauge or absolute pressure reference
    GAUGE = 0
    ABSOLUTE = 1

class f_method(Enum):  # Turbulent friction factor method
    HAALAND = 0
    SERGHIDES = 1

class vp_method(Enum):  # Water vapour pressure method
    IF97 = 0
    ANTOINE = 1

class phase(Enum):  # Region 3 density branch
    LIQUID = 0
    VAPOR = 1

class_dic = {
    "punit": pressure_unit,
    "pmode": pressure_mode,
    "fmethod": f_method,
    "vpmethod": vp_method,
    "phase": phase,
}
