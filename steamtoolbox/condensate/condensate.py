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
from typing import Optional

from steamtoolbox.errors import InvalidInputError
from steamtoolbox.steam import sat_props_p

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class StartupCondensateResult:
    required_energy_kj: float
    condensate_kg: float

@dataclass(frozen=True)
class HeatLoadResult:
    heat_load_kw: float
    condensate_kg_h: float

@dataclass(frozen=True)
class StallPointResult:
    is_stall: bool
    available_dp_bar: float
    margin_bar: float       # Negative when stalled

def _latent_heat(latent_kj_kg, steam_p_bar_abs):
    # Explicit latent heat wins, otherwise h_fg of saturated steam at steam_p_bar_abs
    if latent_kj_kg is None:
        if steam_p_bar_abs is None:
            raise InvalidInputError("Either latent_kj_kg or steam_p_bar_abs must be given")
        latent_kj_kg = sat_props_p(steam_p_bar_abs).h_fg / 1000
    if latent_kj_kg <= 0:
        raise InvalidInputError(f"Steam latent heat must be greater than zero (got {latent_kj_kg} kJ/kg)")
    return latent_kj_kg

# ============================================================================
#  Warm-up, process and batch loads
# ============================================================================

def condensate_load_startup(
    pipe_mass_kg: float,
    pipe_cp_kj_kgk: float,
    initial_temp_c: float,
    target_temp_c: float,
    latent_kj_kg: Optional[float] = None,
    steam_p_bar_abs: Optional[float] = None,
) -> StartupCondensateResult:
    """ Returns the energy and condensate needed to bring cold pipework up to steam temperature.
        Only the metal heat capacity is counted, heat lost to the surroundings is ignored.

        pipe_mass_kg: Mass of pipe metal (kg)
        pipe_cp_kj_kgk: Metal specific heat (kJ/kg.K), ~0.49 for carbon steel
        initial_temp_c: Starting metal temperature (degC)
        target_temp_c: Final metal temperature, usually the steam temperature (degC)
        latent_kj_kg: Latent heat released by the condensing steam (kJ/kg)
        steam_p_bar_abs: Steam pressure (barA). Used for latent heat when latent_kj_kg is not given
    """
    latent = _latent_heat(latent_kj_kg, steam_p_bar_abs)
    energy = pipe_mass_kg * pipe_cp_kj_kgk * max(target_temp_c - initial_temp_c, 0.0)
    return StartupCondensateResult(required_energy_kj=energy, condensate_kg=energy / latent)

def condensate_load_continuous(
    mass_flow_kg_h: float,
    cp_kj_kgk: float,
    inlet_temp_c: float,
    outlet_temp_c: float,
    latent_kj_kg: Optional[float] = None,
    steam_p_bar_abs: Optional[float] = None,
) -> HeatLoadResult:
    """ Returns heat load (kW) and condensate rate (kg/hr) of a continuous process heater

        mass_flow_kg_h: Process fluid flow (kg/hr)
        cp_kj_kgk: Process fluid specific heat (kJ/kg.K)
        inlet_temp_c, outlet_temp_c: Process fluid temperatures (degC)
        latent_kj_kg, steam_p_bar_abs: As for condensate_load_startup
    """
    latent = _latent_heat(latent_kj_kg, steam_p_bar_abs)
    heat_kj_h = mass_flow_kg_h * cp_kj_kgk * max(outlet_temp_c - inlet_temp_c, 0.0)
    return HeatLoadResult(heat_load_kw=heat_kj_h / 3600, condensate_kg_h=heat_kj_h / latent)

def condensate_load_batch(
    fluid_mass_kg: float,
    cp_kj_kgk: float,
    initial_temp_c: float,
    target_temp_c: float,
    latent_kj_kg: Optional[float] = None,
    steam_p_bar_abs: Optional[float] = None,
    batch_time_h: float = 1.0,
) -> HeatLoadResult:
    """ Returns mean heat load (kW) and condensate rate (kg/hr) to heat a batch over batch_time_h

        fluid_mass_kg: Batch mass (kg)
        cp_kj_kgk: Batch specific heat (kJ/kg.K)
        initial_temp_c, target_temp_c: Batch temperatures (degC)
        latent_kj_kg, steam_p_bar_abs: As for condensate_load_startup
        batch_time_h: Heating time (hr). Default 1 hr
    """
    if batch_time_h <= 0:
        raise InvalidInputError(f"Batch heating time must be greater than zero (got {batch_time_h} hr)")
    latent = _latent_heat(latent_kj_kg, steam_p_bar_abs)
    heat_kj = fluid_mass_kg * cp_kj_kgk * max(target_temp_c - initial_temp_c, 0.0)
    return HeatLoadResult(heat_load_kw=heat_kj / (3600 * batch_time_h), condensate_kg_h=heat_kj / latent / batch_time_h)

def radiant_heat_loss_condensate(
    heat_loss_w: float,
    latent_kj_kg: Optional[float] = None,
    steam_p_bar_abs: Optional[float] = None,
) -> HeatLoadResult:
    """ Returns condensate rate (kg/hr) formed by surface heat loss from bare pipework

        heat_loss_w: Radiant and convective heat loss (W)
        latent_kj_kg, steam_p_bar_abs: As for condensate_load_startup
    """
    latent = _latent_heat(latent_kj_kg, steam_p_bar_abs)
    heat_kw = heat_loss_w / 1000
    return HeatLoadResult(heat_load_kw=heat_kw, condensate_kg_h=heat_kw * 3600 / latent)

# ============================================================================
#  Stall point
# ============================================================================

def stall_point(coil_dp_bar: float, trap_required_dp_bar: float) -> StallPointResult:
    """ Returns whether a modulating heater stalls, i.e. the differential pressure across
        the coil falls below what the steam trap needs to discharge condensate

        coil_dp_bar: Differential pressure available across the coil and trap (bar)
        trap_required_dp_bar: Minimum differential the trap needs (bar)
    """
    margin = coil_dp_bar - trap_required_dp_bar
    if margin < 0:
        logger.debug("stall: %.3f bar available, %.3f bar required", coil_dp_bar, trap_required_dp_bar)
    return StallPointResult(is_stall=margin < 0, available_dp_bar=coil_dp_bar, margin_bar=margin)
