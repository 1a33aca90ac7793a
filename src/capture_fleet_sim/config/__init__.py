"""Configuration models: every simulation input."""

from capture_fleet_sim.config.capture import CaptureConfig
from capture_fleet_sim.config.incentive import IncentiveConfig
from capture_fleet_sim.config.markets import ComplianceConfig, MarketStreamConfig, OfftakeConfig
from capture_fleet_sim.config.capex import CapexConfig
from capture_fleet_sim.config.opex import OpExConfig
from capture_fleet_sim.config.finance import FinanceConfig
from capture_fleet_sim.config.deployment import DeploymentConfig
from capture_fleet_sim.config.scenario import Scenario, apply_overrides
from capture_fleet_sim.config.presets import PRESETS, get_preset

__all__ = [
    "CaptureConfig",
    "IncentiveConfig",
    "MarketStreamConfig",
    "OfftakeConfig",
    "ComplianceConfig",
    "CapexConfig",
    "OpExConfig",
    "FinanceConfig",
    "DeploymentConfig",
    "Scenario",
    "apply_overrides",
    "PRESETS",
    "get_preset",
]
