from .piping import (
    PipeSizingResult, PressureLossResult,
    size_by_velocity, pressure_loss, friction_factor,
    steam_viscosity, ideal_gas_density,
)
