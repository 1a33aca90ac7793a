"""Result models: simulation output contracts."""

from capture_fleet_sim.models.results import (
    ModelResult,
    OpexBreakdown,
    RevenueBreakdown,
    RevenuePerTonne,
    YearRecord,
)

__all__ = [
    "ModelResult",
    "OpexBreakdown",
    "RevenueBreakdown",
    "RevenuePerTonne",
    "YearRecord",
]
