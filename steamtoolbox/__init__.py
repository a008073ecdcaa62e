"""
steamtoolbox
===================================

-----------------------------------------------
A collection of Steam & Water Engineering Utilities
-----------------------------------------------

This set of functions covers the steam and water calculations that come up again and again in plant and utility work.
Water and steam properties follow the IAPWS Industrial Formulation 1997 (IF97), and the engineering calculators are built on top of them.

Note: Functions live in topic modules, requiring separate imports, e.g. from steamtoolbox import if97

Includes functions to perform simple calculations including;

- IF97 enthalpy, specific volume and entropy for Regions 1, 2, 3 and 5
- Saturation pressure / temperature, saturated liquid and vapour properties
- Steam dryness after pressure reduction and separation, flash steam fraction
- Creation of steam tables, with export to Excel
- Pipe sizing by velocity and Darcy-Weisbach pressure drop
- Control valve Kv / Cv sizing with choked flow detection
- Boiler efficiency by direct and heat loss methods
- Condenser, cooling tower, pump NPSH and drain cooler heat balances
- Condensate loads, stall point and steam, energy and recovery project costs
- Pressure unit conversion between gauge and absolute

"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

submodules = [
    'boiler',
    'classes',
    'condensate',
    'constants',
    'cooling',
    'economics',
    'errors',
    'if97',
    'piping',
    'shared_fns',
    'steam',
    'units',
    'validate',
    'valves'
]

__all__ = submodules 

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'steamtoolbox.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'steamtoolbox' has no attribute '{name}'"
            )
