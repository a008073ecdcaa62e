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
from typing import Union, Optional

from steamtoolbox.classes import f_method
from steamtoolbox.validate import validate_methods
from steamtoolbox.constants import R_WATER, DEGC2K, PA_PER_BAR, STEAM_MU
from steamtoolbox.errors import InvalidInputError, DivergentError
from steamtoolbox.if97 import region_props

logger = logging.getLogger(__name__)

RE_LAMINAR = 2300.0
VAPOR_DENSITY_LIMIT = 50.0  # kg/m3. Above this the fluid is treated as liquid water for viscosity

# ============================================================================
#  Fluid Property Helpers
# ============================================================================

def steam_viscosity(t_c: float, density: float) -> float:
    """ Returns approximate dynamic viscosity (Pa.s) of steam or water
        Sutherland law for vapour (density <= 50 kg/m3), Vogel type correlation for liquid water
        t_c: Temperature (degC)
        density: Fluid density (kg/m3)
    """
    if density > VAPOR_DENSITY_LIMIT:
        return 2.414e-5 * 10 ** (247.8 / (t_c + 133.15))
    t_k = t_c + DEGC2K
    mu0, t0, s = 1.3e-5, 300.0, 111.0
    return mu0 * (t_k / t0) ** 1.5 * (t0 + s) / (t_k + s)

def ideal_gas_density(p_bar_abs: float, t_c: float) -> float:
    """ Returns ideal gas steam density (kg/m3)
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    t_k = t_c + DEGC2K
    if p_bar_abs <= 0 or t_k <= 0:
        raise InvalidInputError("Pressure and absolute temperature must be greater than zero")
    return p_bar_abs * PA_PER_BAR / (R_WATER * t_k)

# ============================================================================
#  Friction Factor
# ============================================================================

def _haaland_darcy(re, eps_d):
    inv_sqrt_f = -1.8 * math.log10((eps_d / 3.7) ** 1.11 + 6.9 / re)
    return 1.0 / inv_sqrt_f ** 2

def _serghides_darcy(re, eps_d):
    a = -2.0 * math.log10(eps_d / 3.7 + 12.0 / re)
    b = -2.0 * math.log10(eps_d / 3.7 + 2.51 * a / re)
    c = -2.0 * math.log10(eps_d / 3.7 + 2.51 * b / re)
    diff = c - 2.0 * b + a
    if abs(diff) < 1e-30:
        return c ** -2
    return (a - (b - a) ** 2 / diff) ** -2

def friction_factor(re: float, eps_d: float, fmethod: Union[f_method, str] = f_method.HAALAND) -> float:
    """ Returns Darcy friction factor
        re: Reynolds number
        eps_d: Relative roughness (roughness / diameter)
        fmethod: f_method class object or string. 'HAALAND' or 'SERGHIDES'. Defaults to 'HAALAND'
    """
    fmethod = validate_methods(["fmethod"], [fmethod])
    if re <= 0:
        raise InvalidInputError(f"Reynolds number must be greater than zero (got {re})")
    if re < RE_LAMINAR:
        return 64.0 / re
    if fmethod == f_method.SERGHIDES:
        return _serghides_darcy(re, eps_d)
    return _haaland_darcy(re, eps_d)

# ============================================================================
#  Calculators
# ============================================================================

@dataclass(frozen=True)
class PipeSizingResult:
    inner_diameter_m: float
    velocity_m_s: float
    reynolds: float

@dataclass(frozen=True)
class PressureLossResult:
    velocity_m_s: float
    pressure_drop_bar: float
    reynolds: float
    friction_factor: float
    mach: Optional[float]
    density: float
    viscosity: float

def size_by_velocity(mass_flow_kg_h: float, density: float, target_velocity: float, viscosity: float = STEAM_MU) -> PipeSizingResult:
    """ Returns the inner diameter that carries a mass flow at a target velocity
        mass_flow_kg_h: Mass flow (kg/hr)
        density: Fluid density (kg/m3)
        target_velocity: Target velocity (m/s)
        viscosity: Dynamic viscosity for the Reynolds number (Pa.s). Defaults to 1.2e-5, typical of steam
    """
    if mass_flow_kg_h <= 0:
        raise InvalidInputError(f"Mass flow must be greater than zero (got {mass_flow_kg_h})")
    if density <= 0 or target_velocity <= 0:
        raise InvalidInputError("Density and target velocity must be greater than zero")
    q = mass_flow_kg_h / 3600 / density
    d = math.sqrt(4 * q / (math.pi * target_velocity))
    v = q / (math.pi * d * d / 4)
    re = density * v * d / viscosity
    return PipeSizingResult(inner_diameter_m=d, velocity_m_s=v, reynolds=re)

def pressure_loss(
    mass_flow_kg_h: float,
    diameter_m: float,
    length_m: float,
    density: float = None,
    viscosity: float = None,
    fittings_k_sum: float = 0,
    equivalent_length_m: float = 0,
    roughness_m: float = 4.5e-5,
    sound_speed: float = 0,
    state_p_bar_abs: float = None,
    state_t_c: float = None,
    fmethod: Union[f_method, str] = f_method.HAALAND,
) -> PressureLossResult:
    """ Returns Darcy-Weisbach pressure drop through a straight pipe plus fittings

        mass_flow_kg_h: Mass flow (kg/hr)
        diameter_m: Pipe inner diameter (m)
        length_m: Straight pipe length (m)
        density: Fluid density (kg/m3). Not required when state_p_bar_abs and state_t_c are given
        viscosity: Dynamic viscosity (Pa.s). Defaults to 1.2e-5 when neither it nor a state is given
        fittings_k_sum: Sum of fitting resistance coefficients, converted to equivalent length K.D/f
        equivalent_length_m: Additional equivalent length (m)
        roughness_m: Absolute pipe roughness (m). Defaults to 4.5e-5 (commercial steel)
        sound_speed: Speed of sound (m/s). Mach is reported only when this is > 0
        state_p_bar_abs, state_t_c: Optional IF97 state (barA, degC). When both are given, density comes
                                    from IF97 and viscosity from steam_viscosity
        fmethod: f_method class object or string. 'HAALAND' or 'SERGHIDES'. Defaults to 'HAALAND'
    """
    if mass_flow_kg_h <= 0 or diameter_m <= 0 or length_m <= 0:
        raise InvalidInputError("Mass flow, diameter and length must be greater than zero")

    if state_p_bar_abs is not None and state_t_c is not None:
        h, v, s = region_props(state_p_bar_abs, state_t_c)
        if v <= 0:
            raise DivergentError(f"IF97 returned non-positive specific volume {v}")
        density = 1 / v
        viscosity = steam_viscosity(state_t_c, density)
    else:
        if density is None or density <= 0:
            raise InvalidInputError("A positive density, or a state pressure and temperature, is required")
        if viscosity is None:
            viscosity = STEAM_MU
    if viscosity <= 0:
        raise InvalidInputError(f"Viscosity must be greater than zero (got {viscosity})")

    area = math.pi * diameter_m ** 2 / 4
    vel = mass_flow_kg_h / 3600 / (density * area)
    re = density * vel * diameter_m / viscosity
    f = friction_factor(re, roughness_m / diameter_m, fmethod)

    total_length = length_m + equivalent_length_m + fittings_k_sum * diameter_m / f
    dp_bar = f * (total_length / diameter_m) * density * vel ** 2 / 2 / PA_PER_BAR
    mach = vel / sound_speed if sound_speed > 0 else None
    logger.debug("pressure_loss: rho=%.4g mu=%.4g v=%.4g Re=%.4g f=%.5f dp=%.5g bar", density, viscosity, vel, re, f, dp_bar)
    return PressureLossResult(
        velocity_m_s=vel,
        pressure_drop_bar=dp_bar,
        reynolds=re,
        friction_factor=f,
        mach=mach,
        density=density,
        viscosity=viscosity,
    )
