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

from steamtoolbox.classes import class_dic

def validate_methods(names, variables):
    """ Resolves method / unit strings to their Enum members.
        Enum members are passed through unchanged
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            enum_class = class_dic[method]
            try:
                variables[m] = enum_class[variables[m].upper()]
            except KeyError:
                valid = ", ".join(e.name for e in enum_class)
                raise ValueError(f"An incorrect {method} '{variables[m]}' was specified. Choose from {valid}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
