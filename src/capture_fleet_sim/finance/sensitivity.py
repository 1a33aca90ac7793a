"""Sensitivity / tornado analysis.

One-factor-at-a-time sweep: each parameter is set to 0.8× and 1.2× of its
base value with everything else held, the full model is re-run, and the
NPV at both ends is recorded.  Bars are sorted by NPV swing, largest first.

A perturbed run that fails (e.g. a degenerate parameter) falls back to the
base NPV for that side, so the tornado always has one bar per parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel

from capture_fleet_sim.config.scenario import Scenario, apply_overrides
from capture_fleet_sim.engine.orchestrator import simulate

logger = logging.getLogger(__name__)

LOW_FACTOR = 0.8
HIGH_FACTOR = 1.2


@dataclass(frozen=True)
class SensitivityEntry:
    """One bar in the tornado chart."""

    key: str
    """Dot-path into Scenario (e.g. 'opex.electricity_price_per_kwh')."""

    label: str
    unit: str

    base_value: float
    low_value: float
    high_value: float

    npv_low: float
    """NPV when the parameter is at low_value."""

    npv_high: float

    delta: float
    """Total swing width, abs(npv_high − npv_low)."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_npv: float
    entries: list[SensitivityEntry] = field(default_factory=list)
    """Sorted by delta (descending)."""


# (path, label, unit)
DEFAULT_SWEEPS: list[tuple[str, str, str]] = [
    ("incentive.rate_per_t", "Incentive credit rate", "$/t"),
    ("capture.capture_rate_tpd", "Capture rate", "t/day"),
    ("capture.availability", "Availability", ""),
    ("offtake.price_per_t", "Offtake price", "$/t"),
    ("opex.electricity_price_per_kwh", "Electricity price", "$/kWh"),
    ("finance.discount_rate", "Discount rate", ""),
    ("deployment.fleet_size", "Fleet size", "units"),
    ("opex.adsorbent_life_years", "Adsorbent life", "years"),
]


def _get_nested_attr(obj: object, path: str) -> float:
    """Get a nested attribute via dot-path string."""
    current = obj
    for part in path.split("."):
        current = getattr(current, part)
    return float(current)


def _is_int_field(scenario: Scenario, path: str) -> bool:
    *parents, name = path.split(".")
    current: object = scenario
    for part in parents:
        current = getattr(current, part)
    if not isinstance(current, BaseModel):
        return False
    field_info = type(current).model_fields.get(name)
    return field_info is not None and field_info.annotation is int


def _nested_override(path: str, value: float) -> dict:
    override: dict = {}
    node = override
    *parents, name = path.split(".")
    for part in parents:
        node = node.setdefault(part, {})
    node[name] = value
    return override


def _perturbed_npv(scenario: Scenario, path: str, value: float, base_npv: float) -> float:
    """NPV with one parameter replaced; base NPV if the run fails."""
    try:
        return simulate(apply_overrides(scenario, _nested_override(path, value))).npv
    except (ValueError, ArithmeticError) as exc:
        logger.warning("Sensitivity run %s=%r failed, using base NPV: %s", path, value, exc)
        return base_npv


def analyze_sensitivity(
    scenario: Scenario,
    base_npv: float,
    sweeps: list[tuple[str, str, str]] | None = None,
) -> list[SensitivityEntry]:
    """Tornado entries for ``scenario``, largest NPV swing first.

    Parameters
    ----------
    scenario : Scenario
        Base scenario; never modified.
    base_npv : float
        NPV of the base scenario, used when a perturbed run fails.
    sweeps : list[tuple[path, label, unit]] | None
        Parameters to perturb. None = DEFAULT_SWEEPS.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    entries: list[SensitivityEntry] = []
    for path, label, unit in sweeps:
        base_val = _get_nested_attr(scenario, path)
        low_val = base_val * LOW_FACTOR
        high_val = base_val * HIGH_FACTOR

        # Int fields must stay int to pass validation
        if _is_int_field(scenario, path):
            low_val = round(low_val)
            high_val = round(high_val)

        npv_low = _perturbed_npv(scenario, path, low_val, base_npv)
        npv_high = _perturbed_npv(scenario, path, high_val, base_npv)

        entries.append(SensitivityEntry(
            key=path,
            label=label,
            unit=unit,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            npv_low=npv_low,
            npv_high=npv_high,
            delta=abs(npv_high - npv_low),
        ))

    # Stable: ties keep sweep order
    entries.sort(key=lambda e: e.delta, reverse=True)
    return entries


def run_sensitivity(
    scenario: Scenario,
    sweeps: list[tuple[str, str, str]] | None = None,
) -> SensitivityResult:
    """Simulate the base scenario, then sweep around it."""
    base_npv = simulate(scenario).npv
    return SensitivityResult(
        base_npv=base_npv,
        entries=analyze_sensitivity(scenario, base_npv, sweeps),
    )
