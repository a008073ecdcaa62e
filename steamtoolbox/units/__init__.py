from .units import convert_pressure_mode, to_absolute_bar, to_gauge_bar
