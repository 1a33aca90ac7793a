"""Yearly cash flow simulation.

Drives the scheduler, revenue and cost calculators across
y = 0..horizon_years inclusive:

  CF(y)  = revenue(y) − OPEX(y) − capex_spent(y)
  DCF(y) = CF(y) / (1 + r)^y

Payback years are the first y > 0 where the running (discounted or simple)
cumulative cash flow reaches zero.  Year 0 is never reported as payback.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from capture_fleet_sim.config.scenario import Scenario
from capture_fleet_sim.engine.deployment import DeploymentSchedule, build_schedule
from capture_fleet_sim.engine.opex import compute_year_opex
from capture_fleet_sim.engine.revenue import compute_year_revenue, is_eligible
from capture_fleet_sim.errors import DegenerateParameterError
from capture_fleet_sim.models.results import YearRecord

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class CashFlowRun:
    """Output of one pass over the horizon."""

    schedule: DeploymentSchedule
    annual_output_per_unit: float
    years: list[YearRecord]
    payback_simple_year: int | None
    payback_discounted_year: int | None


def annual_output_per_unit(scenario: Scenario) -> float:
    """Tonnes captured by one unit in a year."""
    return scenario.capture.capture_rate_tpd * DAYS_PER_YEAR * scenario.capture.availability


def _check_finite(record: YearRecord) -> None:
    for name in (
        "total_revenue", "total_opex", "capex_spent", "net_cash_flow",
        "discounted_cash_flow", "cumulative_cash_flow", "cumulative_dcf",
    ):
        if not math.isfinite(getattr(record, name)):
            raise DegenerateParameterError(name, f"non-finite value in year offset {record.year_offset}")


def run_simulation(scenario: Scenario) -> CashFlowRun:
    """Simulate every year of the horizon for one scenario.

    Raises DegenerateParameterError when an input makes a year's cash flow
    undefined.
    """
    fin = scenario.finance
    schedule = build_schedule(scenario.capex, scenario.deployment)
    per_unit = annual_output_per_unit(scenario)

    years: list[YearRecord] = []
    cumulative_cf = 0.0
    cumulative_dcf = 0.0
    payback_simple: int | None = None
    payback_disc: int | None = None

    for y in range(fin.horizon_years + 1):
        calendar_year = fin.start_year + y
        units = schedule.deployed(y)
        fleet_output = units * per_unit
        cumulative_capex = schedule.cumulative_capex(y)

        try:
            revenue = compute_year_revenue(scenario, fleet_output, y, calendar_year)
            opex = compute_year_opex(
                scenario.opex, scenario.capture, scenario.capex, units, cumulative_capex, y,
            )
            capex_spent = schedule.capex_spent(y)
            total_revenue = revenue.total
            total_opex = opex.total
            net_cf = total_revenue - total_opex - capex_spent
            discount_factor = (1 + fin.discount_rate) ** y
            dcf = net_cf / discount_factor
        except OverflowError as exc:
            raise DegenerateParameterError("cash_flow", f"overflow in year offset {y}") from exc

        cumulative_cf += net_cf
        cumulative_dcf += dcf

        if payback_disc is None and cumulative_dcf >= 0 and y > 0:
            payback_disc = y
        if payback_simple is None and cumulative_cf >= 0 and y > 0:
            payback_simple = y

        record = YearRecord(
            year_offset=y,
            calendar_year=calendar_year,
            units_deployed=units,
            new_units=units - schedule.deployed(y - 1),
            fleet_output_t=fleet_output,
            incentive_eligible=is_eligible(scenario.incentive, fleet_output),
            revenue=revenue,
            total_revenue=total_revenue,
            opex=opex,
            total_opex=total_opex,
            capex_spent=capex_spent,
            cumulative_capex_deployed=cumulative_capex,
            net_cash_flow=net_cf,
            cumulative_cash_flow=cumulative_cf,
            discount_factor=discount_factor,
            discounted_cash_flow=dcf,
            cumulative_dcf=cumulative_dcf,
            revenue_per_t=total_revenue / fleet_output if fleet_output > 0 else 0.0,
            opex_per_t=total_opex / fleet_output if fleet_output > 0 else 0.0,
        )
        _check_finite(record)
        years.append(record)

    return CashFlowRun(
        schedule=schedule,
        annual_output_per_unit=per_unit,
        years=years,
        payback_simple_year=payback_simple,
        payback_discounted_year=payback_disc,
    )
