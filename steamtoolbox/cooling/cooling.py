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
from dataclasses import dataclass, field
from typing import List, Optional, Union

from steamtoolbox.classes import pressure_unit, pressure_mode, vp_method
from steamtoolbox.validate import validate_methods
from steamtoolbox.constants import CP_WATER, WDEN, G, PA_PER_BAR, MMHG_PER_BAR
from steamtoolbox.errors import InvalidInputError
from steamtoolbox.shared_fns import log_mean_temp_diff, format_warning
from steamtoolbox.units import to_absolute_bar
from steamtoolbox.if97 import saturation_pressure_from_temp_c, saturation_temp_from_pressure_bar_abs

logger = logging.getLogger(__name__)

BALANCE_TOL = 0.05       # Fractional duty disagreement that triggers a warning
TIGHT_APPROACH_C = 2.0
NPSH_MARGIN_MIN = 1.1

def _water_kg_s(flow_m3_h):
    return flow_m3_h * WDEN / 3600

def _resolve_ua(ua_kw_k, area_m2, overall_u_w_m2k):
    if ua_kw_k is not None:
        return ua_kw_k
    if area_m2 is not None and overall_u_w_m2k is not None:
        return area_m2 * overall_u_w_m2k / 1000
    return None

# ============================================================================
#  Condenser
# ============================================================================

@dataclass(frozen=True)
class CondenserResult:
    condensing_temp_c: float
    condensing_pressure_bar_abs: float
    lmtd_k: float
    heat_duty_kw: float
    cw_heat_kw: float
    warnings: List[str] = field(default_factory=list)

def condenser(
    steam_pressure: float,
    cw_inlet_c: float,
    cw_outlet_c: float,
    cw_flow_m3_h: float,
    unit: Union[pressure_unit, str] = pressure_unit.BAR,
    mode: Union[pressure_mode, str] = pressure_mode.ABSOLUTE,
    steam_temp_c: Optional[float] = None,
    ua_kw_k: Optional[float] = None,
    area_m2: Optional[float] = None,
    overall_u_w_m2k: Optional[float] = None,
    target_back_pressure_bar_abs: Optional[float] = None,
) -> CondenserResult:
    """ Returns the heat balance of a surface condenser

        steam_pressure: Condensing pressure in the given unit and mode
        cw_inlet_c, cw_outlet_c: Cooling water inlet / outlet temperature (degC)
        cw_flow_m3_h: Cooling water flow (m3/hr)
        unit: pressure_unit class object or string. Defaults to 'BAR'
        mode: pressure_mode class object or string. Defaults to 'ABSOLUTE'
        steam_temp_c: Condensing temperature (degC). If given, the condensing pressure is
                      taken from saturation at this temperature and steam_pressure is ignored
        ua_kw_k: Overall conductance (kW/K). If None, area_m2 * overall_u_w_m2k / 1000 is used when both are given
        area_m2: Heat transfer area (m2)
        overall_u_w_m2k: Overall heat transfer coefficient (W/m2.K)
        target_back_pressure_bar_abs: Warn when the condensing pressure exceeds this (barA)

        Duty is UA x LMTD when a conductance is available, otherwise the cooling water sensible heat
    """
    if steam_temp_c is not None:
        tsat = steam_temp_c
        psat = saturation_pressure_from_temp_c(steam_temp_c)
    else:
        psat = to_absolute_bar(steam_pressure, unit, mode)
        tsat = saturation_temp_from_pressure_bar_abs(psat)

    d1 = tsat - cw_outlet_c
    d2 = tsat - cw_inlet_c
    if d1 <= 0 or d2 <= 0:
        raise InvalidInputError(format_warning("CW_ABOVE_TSAT", f"Tsat {tsat:.2f} C, CW {cw_inlet_c:.2f} -> {cw_outlet_c:.2f} C"))
    lmtd = log_mean_temp_diff(d1, d2)

    q_water = _water_kg_s(cw_flow_m3_h) * CP_WATER * (cw_outlet_c - cw_inlet_c)
    ua = _resolve_ua(ua_kw_k, area_m2, overall_u_w_m2k)
    q = ua * lmtd if ua is not None else q_water

    warnings = []
    if target_back_pressure_bar_abs is not None and psat > target_back_pressure_bar_abs:
        warnings.append(format_warning("BACK_PRESSURE_HIGH", f"{psat:.3f} barA > {target_back_pressure_bar_abs:.3f} barA"))
    if ua is not None and abs(q - q_water) > BALANCE_TOL * abs(q_water):
        warnings.append(format_warning("UA_BALANCE_MISMATCH", f"UA {q:.1f} kW vs water {q_water:.1f} kW"))
    logger.debug("condenser: Tsat=%.3f C psat=%.4f barA LMTD=%.3f K Q=%.1f kW", tsat, psat, lmtd, q)
    return CondenserResult(
        condensing_temp_c=tsat,
        condensing_pressure_bar_abs=psat,
        lmtd_k=lmtd,
        heat_duty_kw=q,
        cw_heat_kw=q_water,
        warnings=warnings,
    )

# ============================================================================
#  Cooling Tower
# ============================================================================

@dataclass(frozen=True)
class CoolingTowerResult:
    range_c: float
    approach_c: float
    heat_rejected_kw: float
    warnings: List[str] = field(default_factory=list)

def cooling_tower(
    water_in_c: float,
    water_out_c: float,
    wet_bulb_c: float,
    water_flow_m3_h: float,
    dry_bulb_c: Optional[float] = None,
    target_range_c: Optional[float] = None,
    target_approach_c: Optional[float] = None,
) -> CoolingTowerResult:
    """ Returns cooling tower range, approach and heat rejected

        water_in_c, water_out_c: Hot water in / cold water out temperature (degC)
        wet_bulb_c: Ambient wet bulb temperature (degC)
        water_flow_m3_h: Circulating water flow (m3/hr)
        dry_bulb_c: Ambient dry bulb temperature (degC). Informational only
        target_range_c, target_approach_c: Optional design targets (C) to check against
    """
    if water_flow_m3_h < 0:
        raise InvalidInputError(f"Water flow cannot be negative (got {water_flow_m3_h})")
    rng = water_in_c - water_out_c
    approach = water_out_c - wet_bulb_c
    heat = _water_kg_s(water_flow_m3_h) * CP_WATER * rng

    warnings = []
    if approach < 0:
        warnings.append(format_warning("APPROACH_NEGATIVE", f"{approach:.1f} C"))
    elif approach < TIGHT_APPROACH_C:
        warnings.append(format_warning("APPROACH_TIGHT", f"{approach:.1f} C"))
    if target_range_c is not None and rng < target_range_c:
        warnings.append(format_warning("RANGE_BELOW_TARGET", f"{rng:.1f} C < {target_range_c:.1f} C"))
    if target_approach_c is not None and approach > target_approach_c:
        warnings.append(format_warning("APPROACH_ABOVE_TARGET", f"{approach:.1f} C > {target_approach_c:.1f} C"))
    return CoolingTowerResult(range_c=rng, approach_c=approach, heat_rejected_kw=heat, warnings=warnings)

# ============================================================================
#  Pump NPSH
# ============================================================================

@dataclass(frozen=True)
class PumpNpshResult:
    npsha_m: float
    margin_ratio: float
    vapor_pressure_bar_abs: float
    warnings: List[str] = field(default_factory=list)

def antoine_vapor_pressure(t_c: float) -> float:
    """ Returns water vapour pressure (barA) from the Antoine equation, valid 1 - 100 degC
        Temperatures outside that span are clamped to it
    """
    t = min(max(t_c, 1.0), 100.0)
    p_mmhg = 10 ** (8.07131 - 1730.63 / (233.426 + t))
    return p_mmhg / MMHG_PER_BAR

def pump_npsh(
    suction_pressure: float,
    liquid_temp_c: float,
    static_head_m: float,
    friction_loss_m: float,
    npshr_m: float,
    density: float = WDEN,
    unit: Union[pressure_unit, str] = pressure_unit.BAR,
    mode: Union[pressure_mode, str] = pressure_mode.GAUGE,
    vpmethod: Union[vp_method, str] = vp_method.IF97,
) -> PumpNpshResult:
    """ Returns net positive suction head available and margin over NPSH required

        suction_pressure: Pressure at the suction vessel surface in the given unit and mode
        liquid_temp_c: Pumped liquid temperature (degC)
        static_head_m: Liquid level above pump centreline (m). Negative for suction lift
        friction_loss_m: Suction line friction loss (m)
        npshr_m: NPSH required by the pump (m). Margin is infinite when this is <= 0
        density: Liquid density (kg/m3). Defaults to 1000
        unit: pressure_unit class object or string. Defaults to 'BAR'
        mode: pressure_mode class object or string. Defaults to 'GAUGE'
        vpmethod: vp_method class object or string. 'IF97' (default) or 'ANTOINE'
    """
    vpmethod = validate_methods(["vpmethod"], [vpmethod])
    if density <= 0:
        raise InvalidInputError(f"Density must be greater than zero (got {density})")
    p_abs = to_absolute_bar(suction_pressure, unit, mode)
    if vpmethod == vp_method.ANTOINE:
        pv = antoine_vapor_pressure(liquid_temp_c)
    else:
        pv = saturation_pressure_from_temp_c(liquid_temp_c)

    npsha = (p_abs - pv) * PA_PER_BAR / (density * G) + static_head_m - friction_loss_m
    margin = npsha / npshr_m if npshr_m > 0 else math.inf

    warnings = []
    if margin < NPSH_MARGIN_MIN:
        warnings.append(format_warning("NPSH_MARGIN_LOW", f"margin {margin:.2f}"))
    logger.debug("pump_npsh: p=%.4f barA pv=%.5f barA NPSHa=%.3f m", p_abs, pv, npsha)
    return PumpNpshResult(npsha_m=npsha, margin_ratio=margin, vapor_pressure_bar_abs=pv, warnings=warnings)

# ============================================================================
#  Drain Cooler
# ============================================================================

@dataclass(frozen=True)
class DrainCoolerResult:
    lmtd_k: float
    shell_heat_kw: float
    tube_heat_kw: float
    imbalance_kw: float
    ua_duty_kw: Optional[float]
    warnings: List[str] = field(default_factory=list)

def drain_cooler(
    shell_in_c: float,
    shell_out_c: float,
    shell_flow_m3_h: float,
    tube_in_c: float,
    tube_out_c: float,
    tube_flow_m3_h: float,
    ua_kw_k: Optional[float] = None,
    area_m2: Optional[float] = None,
    overall_u_w_m2k: Optional[float] = None,
) -> DrainCoolerResult:
    """ Returns the shell / tube heat balance of a drain cooler (counter-current)

        shell_in_c, shell_out_c: Shell side (drain) inlet / outlet temperature (degC)
        shell_flow_m3_h: Shell side flow (m3/hr)
        tube_in_c, tube_out_c: Tube side (feedwater) inlet / outlet temperature (degC)
        tube_flow_m3_h: Tube side flow (m3/hr)
        ua_kw_k, area_m2, overall_u_w_m2k: Optional conductance, reported as ua_duty_kw = UA x LMTD

        Duties are sensible heat gains, so the cooled shell side is negative
    """
    shell_q = _water_kg_s(shell_flow_m3_h) * CP_WATER * (shell_out_c - shell_in_c)
    tube_q = _water_kg_s(tube_flow_m3_h) * CP_WATER * (tube_out_c - tube_in_c)
    lmtd = log_mean_temp_diff(abs(shell_in_c - tube_out_c), abs(shell_out_c - tube_in_c))

    imbalance = abs(abs(shell_q) - abs(tube_q))
    warnings = []
    if imbalance > BALANCE_TOL * max(abs(shell_q), abs(tube_q)):
        warnings.append(format_warning("HEAT_IMBALANCE", f"shell {abs(shell_q):.1f} kW vs tube {abs(tube_q):.1f} kW"))
    ua = _resolve_ua(ua_kw_k, area_m2, overall_u_w_m2k)
    return DrainCoolerResult(
        lmtd_k=lmtd,
        shell_heat_kw=shell_q,
        tube_heat_kw=tube_q,
        imbalance_kw=imbalance,
        ua_duty_kw=ua * lmtd if ua is not None else None,
        warnings=warnings,
    )
