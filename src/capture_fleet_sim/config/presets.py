"""Named scenario presets.

Each preset is a partial override of the defaults; anything it does not
mention keeps its default value.
"""

from __future__ import annotations

from typing import Any

from capture_fleet_sim.config.scenario import Scenario, apply_overrides


PRESETS: dict[str, dict[str, Any]] = {
    "conservative": {
        "incentive": {"rate_per_t": 50.0, "fraction": 0.0, "alternate_enabled": False},
        "market": {"price_per_t": 15.0, "fraction": 0.0},
        "offtake": {"price_per_t": 50.0, "fraction": 1.0},
        "capture": {"availability": 0.80},
        "capex": {"install_factor": 0.25},
        "opex": {"electricity_price_per_kwh": 0.12},
        "deployment": {"fleet_size": 1},
        "finance": {"discount_rate": 0.12},
    },
    "base": {
        "incentive": {"rate_per_t": 85.0, "fraction": 0.5, "alternate_enabled": False},
        "market": {"price_per_t": 40.0, "fraction": 0.0},
        "offtake": {"price_per_t": 70.0, "fraction": 0.5},
        "capture": {"availability": 0.90},
        "capex": {"install_factor": 0.20},
        "opex": {"electricity_price_per_kwh": 0.08},
        "deployment": {"fleet_size": 4},
        "finance": {"discount_rate": 0.10},
    },
    "optimistic": {
        "incentive": {"rate_per_t": 120.0, "fraction": 0.8, "alternate_enabled": True},
        "market": {"price_per_t": 80.0, "fraction": 0.0},
        "offtake": {"price_per_t": 100.0, "fraction": 0.2},
        "capture": {"availability": 0.95},
        "capex": {"install_factor": 0.15},
        "opex": {"electricity_price_per_kwh": 0.05},
        "deployment": {"fleet_size": 10},
        "finance": {"discount_rate": 0.08},
    },
}


def get_preset(name: str, base: Scenario | None = None) -> Scenario:
    """Apply preset ``name`` on top of ``base`` (defaults when None).

    Raises KeyError for an unknown preset name.
    """
    if name not in PRESETS:
        raise KeyError(f"Unknown preset {name!r}; choose from {sorted(PRESETS)}")
    return apply_overrides(base if base is not None else Scenario(), PRESETS[name])
