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

from steamtoolbox.constants import EFF_MAX
from steamtoolbox.errors import InvalidInputError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class BoilerEfficiencyResult:
    efficiency: float       # Clamped to 0 - 1.2
    raw_efficiency: float
    clamped: bool
    fuel_heat_kw: float
    useful_heat_kw: float
    losses_kw: float

def _clamped_result(raw, fuel_kj_h, useful_kj_h, losses_kj_h):
    eff = min(max(raw, 0.0), EFF_MAX)
    if eff != raw:
        logger.debug("boiler efficiency %.4f clamped to %.4f", raw, eff)
    return BoilerEfficiencyResult(
        efficiency=eff,
        raw_efficiency=raw,
        clamped=eff != raw,
        fuel_heat_kw=fuel_kj_h / 3600,
        useful_heat_kw=useful_kj_h / 3600,
        losses_kw=losses_kj_h / 3600,
    )

def _fuel_heat(fuel_flow_h, fuel_lhv_kj):
    fuel_kj_h = fuel_flow_h * fuel_lhv_kj
    if fuel_kj_h <= 0:
        raise InvalidInputError(f"Fuel heat input must be greater than zero (got {fuel_kj_h} kJ/hr)")
    return fuel_kj_h

def boiler_efficiency(
    fuel_flow_h: float,
    fuel_lhv_kj: float,
    steam_flow_kg_h: float,
    steam_h_kj_kg: float,
    feedwater_h_kj_kg: float,
) -> BoilerEfficiencyResult:
    """ Returns direct (input-output) boiler efficiency, useful steam heat / fuel heat

        fuel_flow_h: Fuel flow (units/hr, e.g. kg/hr or Nm3/hr)
        fuel_lhv_kj: Fuel lower heating value (kJ/unit)
        steam_flow_kg_h: Steam flow (kg/hr)
        steam_h_kj_kg: Steam specific enthalpy (kJ/kg)
        feedwater_h_kj_kg: Feedwater specific enthalpy (kJ/kg)
    """
    fuel = _fuel_heat(fuel_flow_h, fuel_lhv_kj)
    useful = steam_flow_kg_h * (steam_h_kj_kg - feedwater_h_kj_kg)
    return _clamped_result(useful / fuel, fuel, useful, fuel - useful)

def boiler_efficiency_ptc(
    fuel_flow_h: float,
    fuel_lhv_kj: float,
    steam_flow_kg_h: float,
    steam_h_kj_kg: float,
    feedwater_h_kj_kg: float,
    flue_gas_flow_kg_h: float,
    flue_gas_cp: float,
    stack_temp_c: float,
    ambient_temp_c: float,
    excess_air_frac: float = 0,
    radiation_loss_frac: float = 0,
    blowdown_frac: float = 0,
    blowdown_h_kj_kg: float = 0,
) -> BoilerEfficiencyResult:
    """ Returns indirect (heat loss) boiler efficiency, 1 - losses / fuel heat

        fuel_flow_h, fuel_lhv_kj, steam_flow_kg_h, steam_h_kj_kg, feedwater_h_kj_kg: As for boiler_efficiency
        flue_gas_flow_kg_h: Flue gas mass flow (kg/hr)
        flue_gas_cp: Flue gas specific heat (kJ/kg.K)
        stack_temp_c: Stack temperature (degC)
        ambient_temp_c: Ambient temperature (degC)
        excess_air_frac: Excess air fraction, scales the stack loss by (1 + excess_air_frac)
        radiation_loss_frac: Radiation and surface loss as a fraction of fuel heat
        blowdown_frac: Blowdown mass as a fraction of steam flow
        blowdown_h_kj_kg: Blowdown water specific enthalpy (kJ/kg)
    """
    fuel = _fuel_heat(fuel_flow_h, fuel_lhv_kj)
    useful = steam_flow_kg_h * (steam_h_kj_kg - feedwater_h_kj_kg)

    stack = flue_gas_flow_kg_h * flue_gas_cp * max(stack_temp_c - ambient_temp_c, 0.0) * (1 + max(excess_air_frac, 0.0))
    radiation = fuel * max(radiation_loss_frac, 0.0)
    blowdown = steam_flow_kg_h * max(blowdown_frac, 0.0) * (blowdown_h_kj_kg - feedwater_h_kj_kg)
    losses = stack + radiation + blowdown
    logger.debug("PTC losses (kJ/hr): stack %.1f, radiation %.1f, blowdown %.1f", stack, radiation, blowdown)
    return _clamped_result((fuel - losses) / fuel, fuel, useful, losses)
