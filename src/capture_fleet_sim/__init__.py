"""Fleet economics simulator for modular gas-capture units."""

from capture_fleet_sim.config.scenario import Scenario
from capture_fleet_sim.engine.orchestrator import simulate
from capture_fleet_sim.errors import DegenerateParameterError
from capture_fleet_sim.finance.sensitivity import (
    SensitivityEntry,
    SensitivityResult,
    analyze_sensitivity,
    run_sensitivity,
)
from capture_fleet_sim.models.results import ModelResult

__all__ = [
    "Scenario",
    "simulate",
    "analyze_sensitivity",
    "run_sensitivity",
    "SensitivityEntry",
    "SensitivityResult",
    "ModelResult",
    "DegenerateParameterError",
]
