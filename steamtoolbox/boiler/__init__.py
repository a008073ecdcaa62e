from .boiler import BoilerEfficiencyResult, boiler_efficiency, boiler_efficiency_ptc
