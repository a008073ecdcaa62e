from .steam import (
    SaturationState, DrynessResult, FlashResult,
    sat_props_p, sat_props_t, wet_steam_enthalpy,
    dryness_after_reduction, dryness_with_separation,
    flash_steam_fraction, make_steam_table,
)
