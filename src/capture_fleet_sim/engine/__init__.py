"""Engine: deployment, revenue, cost and yearly cash flow computation.

The simulate-and-solve entry point lives in ``engine.orchestrator``.
"""

from capture_fleet_sim.engine.deployment import DeploymentSchedule, build_schedule, compute_capex_unit1
from capture_fleet_sim.engine.revenue import compute_year_revenue
from capture_fleet_sim.engine.opex import compute_year_opex
from capture_fleet_sim.engine.cashflow import CashFlowRun, run_simulation

__all__ = [
    "DeploymentSchedule",
    "build_schedule",
    "compute_capex_unit1",
    "compute_year_revenue",
    "compute_year_opex",
    "CashFlowRun",
    "run_simulation",
]
