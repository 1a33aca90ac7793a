"""Top-level scenario: bundles every model input."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from capture_fleet_sim.config.capture import CaptureConfig
from capture_fleet_sim.config.incentive import IncentiveConfig
from capture_fleet_sim.config.markets import ComplianceConfig, MarketStreamConfig, OfftakeConfig
from capture_fleet_sim.config.capex import CapexConfig
from capture_fleet_sim.config.opex import OpExConfig
from capture_fleet_sim.config.finance import FinanceConfig
from capture_fleet_sim.config.deployment import DeploymentConfig


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    capture: CaptureConfig = Field(default_factory=CaptureConfig)
    incentive: IncentiveConfig = Field(default_factory=IncentiveConfig)
    market: MarketStreamConfig = Field(default_factory=MarketStreamConfig)
    offtake: OfftakeConfig = Field(default_factory=OfftakeConfig)
    compliance: ComplianceConfig = Field(default_factory=ComplianceConfig)
    capex: CapexConfig = Field(default_factory=CapexConfig)
    opex: OpExConfig = Field(default_factory=OpExConfig)
    finance: FinanceConfig = Field(default_factory=FinanceConfig)
    deployment: DeploymentConfig = Field(default_factory=DeploymentConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Scenario:
        """Load a (possibly partial) scenario from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def apply_overrides(scenario: Scenario, overrides: dict[str, Any]) -> Scenario:
    """Return a new Scenario with nested ``overrides`` merged on top.

    The input scenario is left untouched and the result is re-validated.
    """
    data = scenario.model_dump()
    _deep_merge(data, overrides)
    return Scenario(**data)
