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
import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from steamtoolbox.boiler import BoilerEfficiencyResult
from steamtoolbox.condensate.condensate import _latent_heat
from steamtoolbox.errors import InvalidInputError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class EnergyUnitCostResult:
    cost_per_kj: float
    cost_per_mj: float

@dataclass(frozen=True)
class SteamUnitCostResult:
    cost_per_kg: float
    cost_per_ton: float

@dataclass(frozen=True)
class RecoveryEconomicsResult:
    payback_years: float    # math.inf when the net saving is not positive
    npv: float
    net_saving_per_year: float

def energy_unit_cost(
    fuel_price_per_unit: float,
    fuel_lhv_kj: float,
    boiler_eff: Union[float, BoilerEfficiencyResult],
) -> EnergyUnitCostResult:
    """ Returns the cost of useful heat delivered by the boiler, per kJ and per MJ

        fuel_price_per_unit: Fuel price (currency per fuel unit, e.g. per kg or per Nm3)
        fuel_lhv_kj: Fuel lower heating value (kJ per fuel unit)
        boiler_eff: Boiler efficiency fraction, or a BoilerEfficiencyResult
    """
    if isinstance(boiler_eff, BoilerEfficiencyResult):
        boiler_eff = boiler_eff.efficiency
    useful_kj = fuel_lhv_kj * max(boiler_eff, 0.0)
    if useful_kj <= 0:
        raise InvalidInputError(f"Useful heat per fuel unit must be greater than zero (got {useful_kj} kJ)")
    cost_per_kj = fuel_price_per_unit / useful_kj
    return EnergyUnitCostResult(cost_per_kj=cost_per_kj, cost_per_mj=cost_per_kj * 1000)

def steam_unit_cost(
    energy_cost_per_kj: Union[float, EnergyUnitCostResult],
    latent_kj_kg: Optional[float] = None,
    steam_p_bar_abs: Optional[float] = None,
    loss_factor: float = 0.0,
) -> SteamUnitCostResult:
    """ Returns the cost of raising steam, per kg and per metric ton

        energy_cost_per_kj: Cost of useful heat (currency/kJ), or an EnergyUnitCostResult
        latent_kj_kg: Heat charged per kg of steam (kJ/kg)
        steam_p_bar_abs: Steam pressure (barA). Used for latent heat when latent_kj_kg is not given
        loss_factor: Blowdown and condensate loss allowance, 0.1 adds 10 % to the heat per kg
    """
    if isinstance(energy_cost_per_kj, EnergyUnitCostResult):
        energy_cost_per_kj = energy_cost_per_kj.cost_per_kj
    heat_kj_kg = _latent_heat(latent_kj_kg, steam_p_bar_abs) * (1 + max(loss_factor, 0.0))
    cost_per_kg = energy_cost_per_kj * heat_kj_kg
    return SteamUnitCostResult(cost_per_kg=cost_per_kg, cost_per_ton=cost_per_kg * 1000)

def recovery_economics(
    capex: float,
    opex_per_year: float,
    saving_per_year: float,
    discount_rate: float,
    years: int,
) -> RecoveryEconomicsResult:
    """ Returns simple payback and net present value of a condensate recovery project

        capex: Initial investment (currency)
        opex_per_year: Annual running and maintenance cost (currency/yr)
        saving_per_year: Annual fuel and water saving (currency/yr)
        discount_rate: Annual discount rate as a fraction, e.g. 0.08
        years: Analysis period (yr). Cash flows fall at the end of years 1 .. years
    """
    if years < 0:
        raise InvalidInputError(f"Analysis period cannot be negative (got {years} yr)")
    if discount_rate <= -1:
        raise InvalidInputError(f"Discount rate must be greater than -1 (got {discount_rate})")
    net = saving_per_year - opex_per_year
    payback = capex / net if net > 0 else math.inf
    t = np.arange(1, years + 1)
    npv = -capex + float(np.sum(net / (1 + discount_rate) ** t))
    logger.debug("recovery: net %.2f/yr, payback %.2f yr, NPV %.2f over %d yr", net, payback, npv, years)
    return RecoveryEconomicsResult(payback_years=payback, npv=npv, net_saving_per_year=net)
