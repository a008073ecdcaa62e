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

"""Exception types raised by steamtoolbox calculations."""


class SteamToolboxError(ValueError):
    """Base class for all steamtoolbox calculation failures."""


class OutOfRangeError(SteamToolboxError):
    """State lies outside every IF97 region, or outside the saturation curve."""


class DivergentError(SteamToolboxError):
    """A correlation produced a non-finite value."""


class NonConvergentError(SteamToolboxError):
    """An iterative solve did not meet its tolerance within the iteration cap."""


class InvalidInputError(SteamToolboxError):
    """A required argument violates a positivity or definition precondition."""


class ChokedFlowError(SteamToolboxError):
    """Valve pressure ratio indicates critical flow; the incompressible equation does not apply."""
