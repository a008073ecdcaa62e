from .cooling import (
    CondenserResult, CoolingTowerResult, PumpNpshResult, DrainCoolerResult,
    condenser, cooling_tower, pump_npsh, drain_cooler, antoine_vapor_pressure,
)
