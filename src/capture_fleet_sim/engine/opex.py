"""Operating cost calculator.

OPEX(y) = [electricity + adsorbent replacement + fixed per-unit items
           + insurance + general maintenance] × (1 + esc)^y

Insurance and maintenance are percentages of the capital deployed so far,
so they step up as units come online.
"""

from __future__ import annotations

from capture_fleet_sim.config.capture import CaptureConfig
from capture_fleet_sim.config.capex import CapexConfig
from capture_fleet_sim.config.opex import OpExConfig
from capture_fleet_sim.errors import DegenerateParameterError
from capture_fleet_sim.models.results import OpexBreakdown

HOURS_PER_YEAR = 8_760


def compute_year_opex(
    opex: OpExConfig,
    capture: CaptureConfig,
    capex: CapexConfig,
    units: int,
    cumulative_capex: float,
    year_offset: int,
) -> OpexBreakdown:
    """Operating cost for ``units`` live units in ``year_offset``."""
    if opex.adsorbent_life_years <= 0:
        raise DegenerateParameterError(
            "opex.adsorbent_life_years",
            "service life must be positive to amortise replacements",
        )

    electricity = (
        units * capture.rated_power_kw * HOURS_PER_YEAR
        * capture.availability * opex.electricity_price_per_kwh
    )
    consumable = units * capex.adsorbent / opex.adsorbent_life_years
    fixed_items = units * (
        opex.valve_maintenance_per_unit + opex.calibration_per_unit + opex.monitoring_per_unit
    )

    return OpexBreakdown(
        electricity=electricity,
        consumable=consumable,
        fixed_items=fixed_items,
        insurance=cumulative_capex * opex.insurance_pct / 100,
        maintenance=cumulative_capex * opex.maintenance_pct / 100,
        escalation_factor=(1 + opex.escalation_rate) ** year_offset,
    )
