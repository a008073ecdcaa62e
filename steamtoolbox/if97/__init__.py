from .if97 import (
    region1_props, region2_props, region3_props, region5_props,
    region_props, region_of,
    saturation_pressure_from_temp_c, saturation_temp_from_pressure_bar_abs,
    p_b23_bar, t_b23_c, saturated_phase_props,
)
