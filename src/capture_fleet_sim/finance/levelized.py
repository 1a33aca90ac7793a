"""Levelized cost of capture (LCCC).

  CRF  = r(1+r)^N / ((1+r)^N − 1),   or 1/N when r = 0
  LCCC = (total_capex × CRF + mean annual OPEX) / (fleet_size × t/yr per unit)
"""

from __future__ import annotations

from collections.abc import Sequence


def capital_recovery_factor(rate: float, horizon_years: int) -> float:
    """Equal annual payment per dollar of capital over ``horizon_years``.

    A zero-year horizon has no payment stream and returns 0.
    """
    if horizon_years <= 0:
        return 0.0
    if rate > 0:
        growth = (1 + rate) ** horizon_years
        return rate * growth / (growth - 1)
    return 1 / horizon_years


def compute_lccc(
    total_capex: float,
    annual_opex: Sequence[float],
    rate: float,
    horizon_years: int,
    fleet_size: int,
    output_per_unit: float,
) -> float:
    """Cost per tonne captured; 0 when there is no output or no horizon."""
    capacity = fleet_size * output_per_unit
    if capacity <= 0 or horizon_years <= 0 or not annual_opex:
        return 0.0
    annualized_capital = total_capex * capital_recovery_factor(rate, horizon_years)
    mean_opex = sum(annual_opex) / len(annual_opex)
    return (annualized_capital + mean_opex) / capacity
