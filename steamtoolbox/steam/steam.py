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

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np
import numpy.typing as npt
import pandas as pd
from tabulate import tabulate

from steamtoolbox.classes import phase
from steamtoolbox.errors import InvalidInputError
from steamtoolbox.if97 import (
    saturated_phase_props, region_props, region_of,
    saturation_pressure_from_temp_c, saturation_temp_from_pressure_bar_abs,
)

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PRESSURES = [0.1, 0.5, 1.0, 2.0, 3.0, 5.0, 7.0, 10.0, 15.0, 20.0, 30.0, 40.0, 60.0, 80.0, 100.0, 150.0, 200.0]

@dataclass(frozen=True)
class SaturationState:
    """ Saturated liquid (f) and vapour (g) properties at one point on the saturation line.
        Enthalpies in J/kg, specific volumes in m3/kg, entropies in J/kg.K
    """
    p_bar_abs: float
    t_c: float
    h_f: float
    h_g: float
    v_f: float
    v_g: float
    s_f: float
    s_g: float

    @property
    def h_fg(self) -> float:
        return self.h_g - self.h_f

    @property
    def s_fg(self) -> float:
        return self.s_g - self.s_f

@dataclass(frozen=True)
class DrynessResult:
    dryness: float
    clamped: bool

@dataclass(frozen=True)
class FlashResult:
    flash_fraction: float
    h_condensate: float
    h_f_low: float
    h_g_low: float
    clamped: bool

def _sat_state(p_bar_abs: float, t_c: float) -> SaturationState:
    h_f, v_f, s_f = saturated_phase_props(p_bar_abs, t_c, phase.LIQUID)
    h_g, v_g, s_g = saturated_phase_props(p_bar_abs, t_c, phase.VAPOR)
    return SaturationState(p_bar_abs, t_c, h_f, h_g, v_f, v_g, s_f, s_g)

def sat_props_p(p_bar_abs: float) -> SaturationState:
    """ Returns saturated liquid and vapour properties at pressure p_bar_abs (barA) """
    t_c = saturation_temp_from_pressure_bar_abs(p_bar_abs)
    return _sat_state(float(p_bar_abs), t_c)

def sat_props_t(t_c: float) -> SaturationState:
    """ Returns saturated liquid and vapour properties at temperature t_c (degC) """
    p_bar_abs = saturation_pressure_from_temp_c(t_c)
    return _sat_state(p_bar_abs, float(t_c))

def wet_steam_enthalpy(p_bar_abs: float, dryness: float) -> float:
    """ Returns specific enthalpy (J/kg) of wet steam
        p_bar_abs: Pressure (barA)
        dryness: Dryness fraction, 0 - 1
    """
    if not 0 <= dryness <= 1:
        raise InvalidInputError(f"Dryness fraction must be between 0 and 1 (got {dryness})")
    sat = sat_props_p(p_bar_abs)
    return sat.h_f + dryness * sat.h_fg

def dryness_after_reduction(h_before_j_kg: float, p_after_bar_abs: float) -> DrynessResult:
    """ Returns dryness after an isenthalpic pressure reduction
        h_before_j_kg: Specific enthalpy upstream of the reduction (J/kg)
        p_after_bar_abs: Pressure after the reduction (barA)
    """
    sat = sat_props_p(p_after_bar_abs)
    raw = (h_before_j_kg - sat.h_f) / sat.h_fg
    x = min(max(raw, 0.0), 1.0)
    logger.debug("dryness after reduction to %.4g barA: raw %.5f", p_after_bar_abs, raw)
    return DrynessResult(dryness=x, clamped=x != raw)

def dryness_with_separation(dryness: Union[float, DrynessResult], separator_efficiency: float) -> DrynessResult:
    """ Returns dryness downstream of a separator that removes a fraction of the moisture
        dryness: Upstream dryness fraction, or a DrynessResult
        separator_efficiency: Fraction of moisture removed, 0 - 1
    """
    if isinstance(dryness, DrynessResult):
        dryness = dryness.dryness
    if not 0 <= separator_efficiency <= 1:
        raise InvalidInputError(f"Separator efficiency must be between 0 and 1 (got {separator_efficiency})")
    raw = 1.0 - (1.0 - dryness) * (1.0 - separator_efficiency)
    x = min(max(raw, 0.0), 1.0)
    return DrynessResult(dryness=x, clamped=x != raw)

def flash_steam_fraction(p_high_bar_abs: float, p_low_bar_abs: float) -> FlashResult:
    """ Returns the mass fraction of saturated condensate that flashes to steam when let down
        p_high_bar_abs: Condensate pressure before let down, saturated liquid (barA)
        p_low_bar_abs: Flash vessel pressure (barA)
    """
    h_cond = sat_props_p(p_high_bar_abs).h_f
    low = sat_props_p(p_low_bar_abs)
    raw = (h_cond - low.h_f) / low.h_fg
    frac = min(max(raw, 0.0), 1.0)
    logger.debug("flash %.4g -> %.4g barA: fraction %.5f", p_high_bar_abs, p_low_bar_abs, raw)
    return FlashResult(flash_fraction=frac, h_condensate=h_cond, h_f_low=low.h_f, h_g_low=low.h_g, clamped=frac != raw)

def make_steam_table(
    pressures: npt.ArrayLike = None,
    temperatures: npt.ArrayLike = None,
    export: bool = False,
) -> pd.DataFrame:
    """
    Returns a steam table as a Pandas DataFrame. Enthalpy and entropy are reported in kJ units

    pressures: Pressures (barA). If given alone, returns saturation properties at each pressure
    temperatures: Temperatures (degC). If given alone, returns saturation properties at each temperature
                  If both are given, returns single phase properties on the full pressure x temperature grid
                  If neither is given, a default list of saturation pressures is used
    export: Boolean flag that controls whether to export the table to steam_table.xlsx and steam_table.txt. Default is False
    """
    df = pd.DataFrame()
    if pressures is not None and temperatures is not None:
        rows = []
        for p in np.atleast_1d(pressures):
            for t in np.atleast_1d(temperatures):
                h, v, s = region_props(float(p), float(t))
                rows.append([float(p), float(t), region_of(float(p), float(t)), h / 1000, v, s / 1000])
        df = pd.DataFrame(rows, columns=["P (barA)", "T (degC)", "Region", "h (kJ/kg)", "v (m3/kg)", "s (kJ/kg.K)"])
    else:
        if temperatures is not None:
            states = [sat_props_t(float(t)) for t in np.atleast_1d(temperatures)]
        else:
            if pressures is None:
                pressures = DEFAULT_TABLE_PRESSURES
            states = [sat_props_p(float(p)) for p in np.atleast_1d(pressures)]
        df["P (barA)"] = [st.p_bar_abs for st in states]
        df["Tsat (degC)"] = [st.t_c for st in states]
        df["hf (kJ/kg)"] = [st.h_f / 1000 for st in states]
        df["hg (kJ/kg)"] = [st.h_g / 1000 for st in states]
        df["hfg (kJ/kg)"] = [st.h_fg / 1000 for st in states]
        df["vf (m3/kg)"] = [st.v_f for st in states]
        df["vg (m3/kg)"] = [st.v_g for st in states]
        df["sf (kJ/kg.K)"] = [st.s_f / 1000 for st in states]
        df["sg (kJ/kg.K)"] = [st.s_g / 1000 for st in states]

    if export:
        df.to_excel("steam_table.xlsx", index=False, engine="openpyxl")
        table = df.set_index(df.columns[0])
        headers = ["-- " + df.columns[0]] + list(df.columns[1:])
        fileout = "STEAM TABLE\n" + tabulate(table, headers) + "\n/"
        with open("steam_table.txt", "w") as text_file:
            text_file.write(fileout)
    return df
