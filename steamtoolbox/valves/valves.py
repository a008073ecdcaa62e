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

from steamtoolbox.constants import CV_TO_KV, RHO_REF, CHOKE_RATIO
from steamtoolbox.errors import InvalidInputError, ChokedFlowError

def kv_from_cv(cv: float) -> float:
    """ Returns Kv (m3/hr at 1 bar) from Cv (US gpm at 1 psi) """
    return cv * CV_TO_KV

def cv_from_kv(kv: float) -> float:
    """ Returns Cv (US gpm at 1 psi) from Kv (m3/hr at 1 bar) """
    return kv / CV_TO_KV

def _check_positive(**kwargs):
    for name, value in kwargs.items():
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError(f"{name} must be greater than zero (got {value})")

def check_choked(delta_p_bar: float, upstream_bar_abs: float = None):
    """ Raises ChokedFlowError when the downstream / upstream pressure ratio falls below 0.55,
        where the incompressible valve equation no longer holds for steam
        delta_p_bar: Pressure drop across the valve (bar)
        upstream_bar_abs: Upstream pressure (barA). No check is made if None
    """
    if upstream_bar_abs is None:
        return
    if upstream_bar_abs <= 0:
        raise InvalidInputError(f"Upstream pressure must be greater than zero (got {upstream_bar_abs})")
    downstream = max(upstream_bar_abs - delta_p_bar, 0.0)
    ratio = downstream / upstream_bar_abs
    if ratio < CHOKE_RATIO:
        raise ChokedFlowError(f"Pressure ratio {ratio:.3f} is below {CHOKE_RATIO}, flow is likely choked (sonic)")

def required_kv(flow_m3_h: float, delta_p_bar: float, density: float, upstream_bar_abs: float = None) -> float:
    """ Returns the Kv required to pass a volumetric flow
        Kv = Q * sqrt(rho_ref / (rho * dP)), rho_ref = 1000 kg/m3

        flow_m3_h: Volumetric flow (m3/hr)
        delta_p_bar: Pressure drop across the valve (bar)
        density: Fluid density (kg/m3)
        upstream_bar_abs: Optional upstream pressure (barA) for choked flow detection
    """
    _check_positive(flow=flow_m3_h, delta_p=delta_p_bar, density=density)
    check_choked(delta_p_bar, upstream_bar_abs)
    return flow_m3_h * math.sqrt(RHO_REF / (density * delta_p_bar))

def required_cv(flow_m3_h: float, delta_p_bar: float, density: float, upstream_bar_abs: float = None) -> float:
    """ Returns the Cv required to pass a volumetric flow. Arguments as for required_kv """
    return cv_from_kv(required_kv(flow_m3_h, delta_p_bar, density, upstream_bar_abs))

def flow_from_kv(kv: float, delta_p_bar: float, density: float, upstream_bar_abs: float = None) -> float:
    """ Returns volumetric flow (m3/hr) through a valve of given Kv
        kv: Valve flow coefficient (m3/hr at 1 bar)
        delta_p_bar: Pressure drop across the valve (bar)
        density: Fluid density (kg/m3)
        upstream_bar_abs: Optional upstream pressure (barA) for choked flow detection
    """
    _check_positive(kv=kv, delta_p=delta_p_bar, density=density)
    check_choked(delta_p_bar, upstream_bar_abs)
    return kv * math.sqrt(delta_p_bar * density / RHO_REF)

def flow_from_cv(cv: float, delta_p_bar: float, density: float, upstream_bar_abs: float = None) -> float:
    """ Returns volumetric flow (m3/hr) through a valve of given Cv. Arguments as for flow_from_kv """
    return flow_from_kv(kv_from_cv(cv), delta_p_bar, density, upstream_bar_abs)

def mass_flow_from_kv(kv: float, delta_p_bar: float, density: float, upstream_bar_abs: float = None) -> float:
    """ Returns mass flow (kg/hr) through a valve of given Kv. Arguments as for flow_from_kv """
    return flow_from_kv(kv, delta_p_bar, density, upstream_bar_abs) * density
