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
import numpy as np
import numpy.typing as npt
from typing import Union, Tuple

from steamtoolbox.errors import InvalidInputError

def convert_to_numpy(input_data: npt.ArrayLike) -> Tuple[np.ndarray, bool]:
    # Returns input as a numpy array, with a flag recording whether a list / array was passed in
    if isinstance(input_data, np.ndarray):
        return np.atleast_1d(input_data.astype(float)), input_data.ndim > 0
    if isinstance(input_data, (list, tuple)):
        return np.array(input_data, dtype=float), True
    return np.atleast_1d(float(input_data)), False

def process_output(output_data: np.ndarray, is_list: bool) -> Union[float, np.ndarray]:
    # Returns a single float if a scalar was originally passed in, otherwise the array
    if is_list:
        return output_data
    return float(output_data[0])

def log_mean_temp_diff(dt1: float, dt2: float) -> float:
    """ Returns the log-mean temperature difference (K)
        dt1, dt2: Terminal temperature differences (K). Both must be strictly positive
    """
    if dt1 <= 0 or dt2 <= 0:
        raise InvalidInputError(f"LMTD requires both temperature differences > 0 (got {dt1}, {dt2})")
    if abs(dt1 - dt2) < 1e-9:
        return dt1
    return (dt1 - dt2) / math.log(dt1 / dt2)

# Advisory messages returned in result records
WARNING_MESSAGES = {
    "CW_ABOVE_TSAT": "Cooling water temperature at or above saturation temperature",
    "BACK_PRESSURE_HIGH": "Condenser back pressure above target",
    "UA_BALANCE_MISMATCH": "UA based duty differs from cooling water balance by more than 5%",
    "APPROACH_NEGATIVE": "Negative approach, cooling below wet bulb is not possible",
    "APPROACH_TIGHT": "Approach below 2 C is difficult to achieve in practice",
    "RANGE_BELOW_TARGET": "Range below target",
    "APPROACH_ABOVE_TARGET": "Approach above target",
    "NPSH_MARGIN_LOW": "NPSH margin below 1.1, cavitation risk",
    "HEAT_IMBALANCE": "Shell / tube heat balance differs by more than 5%",
}

def format_warning(code: str, detail: Union[str, None] = None) -> str:
    """ Returns a formatted warning string with catalogue lookup """
    base = WARNING_MESSAGES.get(code, code)
    if detail:
        return f"[{code}] {base}: {detail}"
    return f"[{code}] {base}"
