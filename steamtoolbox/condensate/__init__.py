from .condensate import (
    StartupCondensateResult, HeatLoadResult, StallPointResult,
    condensate_load_startup, condensate_load_continuous, condensate_load_batch,
    radiant_heat_loss_condensate, stall_point,
)
