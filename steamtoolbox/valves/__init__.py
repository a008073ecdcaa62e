from .valves import (
    kv_from_cv, cv_from_kv, check_choked,
    required_kv, required_cv,
    flow_from_kv, flow_from_cv, mass_flow_from_kv,
)
