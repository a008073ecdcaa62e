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


# IAPWS-IF97 reference constants
R_WATER = 461.526        # Specific gas constant for water, J/(kg.K)
TC_K = 647.096           # Critical temperature (K)
PC_MPA = 22.064          # Critical pressure (MPa)
PC_BAR = 220.64          # Critical pressure (bar)
RHOC = 322.0             # Critical density (kg/m3)
DEGC2K = 273.15          # Offset to convert degrees C to Kelvin
MPA_PER_BAR = 0.1

# Pressure
ATM_BAR = 1.01325        # Standard atmosphere (bar)
PA_PER_BAR = 100000.0
MMHG_PER_BAR = 750.062
KGCM2_TO_BAR = 0.980665
PSI_TO_BAR = 0.0689476

# Water / engineering defaults
G = 9.80665              # m/s2
CP_WATER = 4.186         # kJ/(kg.K)
WDEN = 1000.0            # Water density used for volumetric -> mass flow, kg/m3
RHO_REF = 1000.0         # Reference density in the Kv definition, kg/m3
CV_TO_KV = 0.865         # Kv = 0.865 * Cv
CHOKE_RATIO = 0.55       # Approximate critical pressure ratio for steam
EFF_MAX = 1.2            # Upper clamp for boiler efficiency
STEAM_MU = 1.2e-5        # Typical steam dynamic viscosity, Pa.s
