"""Breakeven incentive price: the flat credit rate that sets NPV to zero.

Only incentive revenue is recomputed at each candidate price; every other
stream, OPEX and capital spend keep their simulated values.  Candidate
prices are flat (no inflation indexing) and apply to eligible years inside
the credit window.
"""

from __future__ import annotations

from collections.abc import Sequence

from capture_fleet_sim.config.incentive import IncentiveConfig
from capture_fleet_sim.engine.revenue import incentive_active
from capture_fleet_sim.finance.bisection import bisect
from capture_fleet_sim.finance.dcf import compute_npv
from capture_fleet_sim.models.results import YearRecord

PRICE_LOW = 0.0
PRICE_HIGH = 300.0
MAX_ITER = 80
PRICE_TOL = 0.5


def npv_at_incentive_price(
    years: Sequence[YearRecord],
    incentive: IncentiveConfig,
    price: float,
    discount_rate: float,
) -> float:
    """NPV with each year's incentive revenue replaced by ``price`` per tonne."""
    flows = []
    for yr in years:
        credited = (
            yr.fleet_output_t * incentive.fraction * price
            if incentive_active(incentive, yr.year_offset, yr.incentive_eligible)
            else 0.0
        )
        other = yr.revenue.market + yr.revenue.offtake + yr.revenue.compliance
        flows.append(credited + other - yr.total_opex - yr.capex_spent)
    return compute_npv(flows, discount_rate)


def compute_breakeven_price(
    years: Sequence[YearRecord],
    incentive: IncentiveConfig,
    discount_rate: float,
) -> float:
    """Bisect the credit price on [0, 300]; always returns the bracket midpoint."""
    bracket = bisect(
        lambda p: -npv_at_incentive_price(years, incentive, p, discount_rate),
        PRICE_LOW, PRICE_HIGH, MAX_ITER, PRICE_TOL,
    )
    return bracket.midpoint
