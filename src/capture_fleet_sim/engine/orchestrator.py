"""Simulate-and-solve entry point.

``simulate(scenario)`` runs the yearly cash flow engine, derives the
financial metrics from its records, and attaches advisory warnings.  It is
a pure function of the scenario.
"""

from __future__ import annotations

import logging

from capture_fleet_sim.config.scenario import Scenario
from capture_fleet_sim.engine.cashflow import CashFlowRun, run_simulation
from capture_fleet_sim.finance.breakeven import compute_breakeven_price
from capture_fleet_sim.finance.dcf import compute_irr
from capture_fleet_sim.finance.levelized import compute_lccc
from capture_fleet_sim.models.results import ModelResult, RevenuePerTonne, YearRecord

logger = logging.getLogger(__name__)

ALLOCATION_LIMIT = 1.01


def _year1(years: list[YearRecord]) -> YearRecord:
    return years[1] if len(years) > 1 else years[0]


def _revenue_per_tonne(yr: YearRecord) -> RevenuePerTonne:
    q = yr.fleet_output_t
    if q <= 0:
        return RevenuePerTonne(incentive=0.0, market=0.0, offtake=0.0, compliance=0.0)
    return RevenuePerTonne(
        incentive=yr.revenue.incentive / q,
        market=yr.revenue.market / q,
        offtake=yr.revenue.offtake / q,
        compliance=yr.revenue.compliance / q,
    )


def collect_warnings(scenario: Scenario, run: CashFlowRun, npv: float) -> list[str]:
    """Advisory messages; none of these stop the computation."""
    warnings: list[str] = []
    inc = scenario.incentive

    if (
        inc.eligibility_mode == "threshold_gated"
        and inc.fraction > 0
        and not any(yr.incentive_eligible for yr in run.years)
    ):
        max_output = scenario.deployment.fleet_size * run.annual_output_per_unit
        warnings.append(
            f"Fleet never reaches the incentive threshold "
            f"({inc.eligibility_threshold_tpy:,.0f} t/yr). Max: {max_output:,.0f} t/yr."
        )

    fractions = {
        "incentive": inc.fraction,
        "market": scenario.market.fraction,
        "offtake": scenario.offtake.fraction,
        "compliance": scenario.compliance.fraction,
    }
    if sum(fractions.values()) > ALLOCATION_LIMIT:
        warnings.append("Revenue allocation exceeds 100%. Reduce fractions.")
    for stream, fraction in fractions.items():
        if not 0 <= fraction <= 1:
            warnings.append(f"{stream.capitalize()} fraction {fraction:g} is outside 0–1.")

    if npv < 0:
        warnings.append(
            f"Project NPV is negative at {scenario.finance.discount_rate:.1%} discount rate."
        )
    return warnings


def simulate(scenario: Scenario) -> ModelResult:
    """Run the full model for one scenario.

    Raises DegenerateParameterError if an input makes the cash flows undefined.
    """
    run = run_simulation(scenario)
    years = run.years
    fin = scenario.finance

    npv = years[-1].cumulative_dcf
    irr = compute_irr([yr.net_cash_flow for yr in years])
    lccc = compute_lccc(
        run.schedule.total_capex,
        [yr.total_opex for yr in years],
        fin.discount_rate,
        fin.horizon_years,
        scenario.deployment.fleet_size,
        run.annual_output_per_unit,
    )
    breakeven = compute_breakeven_price(years, scenario.incentive, fin.discount_rate)

    yr1 = _year1(years)
    eligibility_year = next((yr.calendar_year for yr in years if yr.incentive_eligible), None)

    warnings = collect_warnings(scenario, run, npv)
    for msg in warnings:
        logger.info("Model warning: %s", msg)

    return ModelResult(
        annual_output_per_unit_t=run.annual_output_per_unit,
        fleet_output_year1_t=yr1.fleet_output_t,
        capex_unit1=run.schedule.unit_capex[0],
        total_fleet_capex=run.schedule.total_capex,
        unit_capex=list(run.schedule.unit_capex),
        npv=npv,
        irr=irr,
        payback_simple_year=run.payback_simple_year,
        payback_discounted_year=run.payback_discounted_year,
        lccc=lccc,
        breakeven_incentive_price=breakeven,
        revenue_per_t_year1=_revenue_per_tonne(yr1),
        year1_revenue=yr1.total_revenue,
        year1_opex=yr1.total_opex,
        eligibility_year=eligibility_year,
        years=years,
        warnings=warnings,
    )
