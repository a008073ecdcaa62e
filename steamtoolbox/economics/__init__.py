from .economics import (
    EnergyUnitCostResult, SteamUnitCostResult, RecoveryEconomicsResult,
    energy_unit_cost, steam_unit_cost, recovery_economics,
)
