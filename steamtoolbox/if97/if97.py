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

"""
IAPWS-IF97 water and steam properties.

Public entry points take pressure in bar absolute and temperature in degC, and
return (h [J/kg], v [m3/kg], s [J/(kg*K)]).
"""

import math
from typing import Tuple, Union

import numpy as np
import numpy.typing as npt

from steamtoolbox.constants import TC_K, PC_MPA, PC_BAR, DEGC2K, MPA_PER_BAR
from steamtoolbox.classes import phase
from steamtoolbox.validate import validate_methods
from steamtoolbox.errors import OutOfRangeError, DivergentError, NonConvergentError
from steamtoolbox.shared_fns import convert_to_numpy, process_output
from steamtoolbox.if97._lib_regions import (
    _region1, _region2, _region3, _region5,
    _psat_mpa, _sat_series, _sat_series_dtheta, _p_b23, _t_b23,
)

T_MIN_K = 273.15
T_R13_K = 623.15         # Region 1/3 and 2/3 lower temperature limit
T_R23_K = 863.15         # Upper end of the B23 boundary
T_R25_K = 1073.15
T_MAX_K = 2273.15
P_MAX_MPA = 100.0
P_MAX_R5_MPA = 50.0

SAT_RTOL = 1e-6
SAT_MAX_ITER = 30
SAT_STEP_TOL = 1e-8      # K
SAT_T_SEED_K = 373.15

Props = Tuple[float, float, float]


def _to_mpa_k(p_bar_abs: float, t_c: float) -> Tuple[float, float]:
    if not (math.isfinite(p_bar_abs) and math.isfinite(t_c)):
        raise OutOfRangeError(f"Non-finite state p={p_bar_abs} barA, T={t_c} degC")
    return p_bar_abs * MPA_PER_BAR, t_c + DEGC2K


def _check_finite(props: Props, region: int) -> Props:
    if not all(math.isfinite(x) for x in props):
        raise DivergentError(f"Region {region} evaluation returned non-finite properties {props}")
    return tuple(float(x) for x in props)


def _out_of_range(region: int, p: float, T: float):
    return OutOfRangeError(f"State p={p / MPA_PER_BAR:g} barA, T={T - DEGC2K:g} degC is outside Region {region}")


def p_b23_bar(t_c: float) -> float:
    """ Returns the Region 2/3 boundary pressure (barA) at temperature t_c (degC) """
    return _p_b23(t_c + DEGC2K) / MPA_PER_BAR


def t_b23_c(p_bar_abs: float) -> float:
    """ Returns the Region 2/3 boundary temperature (degC) at pressure p_bar_abs (barA) """
    return _t_b23(p_bar_abs * MPA_PER_BAR) - DEGC2K


def region1_props(p_bar_abs: float, t_c: float) -> Props:
    """ Returns (h, v, s) in (J/kg, m3/kg, J/kg.K) for compressed liquid water (Region 1)
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    p, T = _to_mpa_k(p_bar_abs, t_c)
    if not (T_MIN_K <= T <= T_R13_K) or not (0 < p <= P_MAX_MPA):
        raise _out_of_range(1, p, T)
    if p < _psat_mpa(T) * (1 - SAT_RTOL):
        raise _out_of_range(1, p, T)
    return _check_finite(_region1(p, T), 1)


def region2_props(p_bar_abs: float, t_c: float) -> Props:
    """ Returns (h, v, s) in (J/kg, m3/kg, J/kg.K) for superheated steam (Region 2)
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    p, T = _to_mpa_k(p_bar_abs, t_c)
    if not (T_MIN_K <= T <= T_R25_K) or not (0 < p <= P_MAX_MPA):
        raise _out_of_range(2, p, T)
    if T <= T_R13_K:
        limit = _psat_mpa(T)
    elif T <= T_R23_K:
        limit = _p_b23(T)
    else:
        limit = P_MAX_MPA
    if p > limit * (1 + SAT_RTOL):
        raise _out_of_range(2, p, T)
    return _check_finite(_region2(p, T), 2)


def region3_props(p_bar_abs: float, t_c: float) -> Props:
    """ Returns (h, v, s) in (J/kg, m3/kg, J/kg.K) for the near-critical dense fluid (Region 3)
        Density is found by inverting the Helmholtz p(rho, T) relation.
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    p, T = _to_mpa_k(p_bar_abs, t_c)
    if not (T_R13_K <= T <= T_R23_K) or not (0 < p <= P_MAX_MPA):
        raise _out_of_range(3, p, T)
    if p < _p_b23(T) * (1 - SAT_RTOL):
        raise _out_of_range(3, p, T)
    return _check_finite(_region3(p, T), 3)


def region5_props(p_bar_abs: float, t_c: float) -> Props:
    """ Returns (h, v, s) in (J/kg, m3/kg, J/kg.K) for high temperature steam (Region 5)
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    p, T = _to_mpa_k(p_bar_abs, t_c)
    if not (T_R25_K < T <= T_MAX_K) or not (0 < p <= P_MAX_R5_MPA):
        raise _out_of_range(5, p, T)
    return _check_finite(_region5(p, T), 5)


def region_of(p_bar_abs: float, t_c: float) -> int:
    """ Returns the IF97 region number (1, 2, 3 or 5) that owns the state
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    p, T = _to_mpa_k(p_bar_abs, t_c)
    if p <= 0 or p > P_MAX_MPA or T < T_MIN_K or T > T_MAX_K:
        raise OutOfRangeError(f"State p={p_bar_abs:g} barA, T={t_c:g} degC is outside IF97 validity")
    if T > T_R25_K:
        if p > P_MAX_R5_MPA:
            raise OutOfRangeError(f"Region 5 is limited to {P_MAX_R5_MPA / MPA_PER_BAR:g} barA")
        return 5
    if T <= T_R13_K:
        return 1 if p >= _psat_mpa(T) else 2
    if T <= T_R23_K:
        return 3 if p > _p_b23(T) else 2
    return 2


def region_props(p_bar_abs: float, t_c: float) -> Props:
    """ Returns (h, v, s) in (J/kg, m3/kg, J/kg.K) at any valid IF97 state, selecting the region
        p_bar_abs: Pressure (barA)
        t_c: Temperature (degC)
    """
    region = region_of(p_bar_abs, t_c)
    p, T = p_bar_abs * MPA_PER_BAR, t_c + DEGC2K
    if region == 1:
        props = _region1(p, T)
    elif region == 2:
        props = _region2(p, T)
    elif region == 3:
        props = _region3(p, T)
    else:
        props = _region5(p, T)
    return _check_finite(props, region)


def _sat_p_bar(t_c: float) -> float:
    T = t_c + DEGC2K
    if not math.isfinite(T) or T <= 0 or T > TC_K:
        raise OutOfRangeError(f"Saturation temperature {t_c:g} degC is outside (-273.15, 373.946] degC")
    p = _psat_mpa(T) / MPA_PER_BAR
    if not math.isfinite(p):
        raise DivergentError(f"Saturation pressure at {t_c:g} degC is not finite")
    return p


def _sat_t_c(p_bar_abs: float) -> float:
    if not math.isfinite(p_bar_abs) or p_bar_abs <= 0 or p_bar_abs > PC_BAR:
        raise OutOfRangeError(f"Saturation pressure {p_bar_abs:g} barA is outside (0, 220.64] barA")
    target = math.log(p_bar_abs / PC_BAR)

    # Newton on ln(p/pc) = (Tc/T) * S(theta)
    t_k = SAT_T_SEED_K
    for _ in range(SAT_MAX_ITER):
        theta = 1.0 - t_k / TC_K
        series = _sat_series(theta)
        f = TC_K / t_k * series - target
        dfdt = -TC_K / t_k ** 2 * series - _sat_series_dtheta(theta) / t_k
        step = f / dfdt
        if not math.isfinite(step):
            raise DivergentError(f"Saturation temperature iteration diverged at p={p_bar_abs:g} barA")
        t_new = t_k - step
        if t_new > TC_K:
            t_new = TC_K
        elif t_new <= 0:
            t_new = t_k / 2
        if abs(step) < SAT_STEP_TOL:
            return t_new - DEGC2K
        t_k = t_new
    raise NonConvergentError(f"Saturation temperature did not converge in {SAT_MAX_ITER} iterations at p={p_bar_abs:g} barA")


def saturation_pressure_from_temp_c(t_c: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation pressure (barA) from the Wagner-Pruss vapour pressure equation
        t_c: Temperature (degC). Float, list or array
    """
    t_c, is_list = convert_to_numpy(t_c)
    p = np.array([_sat_p_bar(t) for t in t_c])
    return process_output(p, is_list)


def saturation_temp_from_pressure_bar_abs(p_bar_abs: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation temperature (degC) by Newton inversion of the vapour pressure equation
        p_bar_abs: Pressure (barA). Float, list or array
    """
    p_bar_abs, is_list = convert_to_numpy(p_bar_abs)
    t = np.array([_sat_t_c(p) for p in p_bar_abs])
    return process_output(t, is_list)


def saturated_phase_props(p_bar_abs: float, t_c: float, ph: Union[phase, str] = phase.LIQUID) -> Props:
    """ Returns (h, v, s) in (J/kg, m3/kg, J/kg.K) of saturated liquid or saturated vapour
        Below 350 degC the liquid comes from Region 1 and the vapour from Region 2,
        above it both come from the matching Region 3 density branch.

        p_bar_abs: Saturation pressure (barA)
        t_c: Saturation temperature (degC)
        ph: phase class object or string, 'LIQUID' or 'VAPOR'
    """
    ph = validate_methods(["phase"], [ph])
    p, T = _to_mpa_k(p_bar_abs, t_c)
    if not (T_MIN_K <= T < TC_K) or not (0 < p < PC_MPA):
        raise OutOfRangeError(f"Saturated state p={p_bar_abs:g} barA, T={t_c:g} degC is outside the two phase range")
    liquid = ph == phase.LIQUID
    if T <= T_R13_K:
        if liquid:
            return _check_finite(_region1(p, T), 1)
        return _check_finite(_region2(p, T), 2)
    return _check_finite(_region3(p, T, liquid), 3)
