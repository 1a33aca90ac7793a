"""Result types: the contract between engine, finance, and callers.

Year records are created once per simulation in increasing year order and
never mutated afterwards; ``ModelResult`` is handed to the caller as-is.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Per-year breakdowns
# ═══════════════════════════════════════════════════════════════════════════

class RevenueBreakdown(BaseModel):
    """Revenue by stream for one year ($)."""

    model_config = ConfigDict(frozen=True)

    incentive: float
    market: float
    offtake: float
    compliance: float

    @property
    def total(self) -> float:
        return self.incentive + self.market + self.offtake + self.compliance


class OpexBreakdown(BaseModel):
    """Operating cost components for one year.

    Components are in year-0 dollars; ``total`` applies the escalation
    factor to their sum.
    """

    model_config = ConfigDict(frozen=True)

    electricity: float
    consumable: float
    fixed_items: float
    insurance: float
    maintenance: float
    escalation_factor: float
    """(1 + opex_escalation)^y."""

    @property
    def total(self) -> float:
        return (
            self.electricity + self.consumable + self.fixed_items
            + self.insurance + self.maintenance
        ) * self.escalation_factor


class RevenuePerTonne(BaseModel):
    """Year-1 revenue per captured tonne, by stream ($/t)."""

    incentive: float
    market: float
    offtake: float
    compliance: float


# ═══════════════════════════════════════════════════════════════════════════
# Yearly record
# ═══════════════════════════════════════════════════════════════════════════

class YearRecord(BaseModel):
    """One simulated year."""

    model_config = ConfigDict(frozen=True)

    year_offset: int
    """y = 0..horizon_years."""
    calendar_year: int
    units_deployed: int
    new_units: int
    fleet_output_t: float
    incentive_eligible: bool
    """Eligibility gate result for this year (ignores window and fraction)."""

    revenue: RevenueBreakdown
    total_revenue: float
    opex: OpexBreakdown
    total_opex: float
    capex_spent: float
    cumulative_capex_deployed: float

    net_cash_flow: float
    cumulative_cash_flow: float
    discount_factor: float
    """(1 + r)^y, the divisor, not its reciprocal."""
    discounted_cash_flow: float
    cumulative_dcf: float

    revenue_per_t: float
    """total_revenue / fleet_output_t, 0 when nothing is captured."""
    opex_per_t: float


# ═══════════════════════════════════════════════════════════════════════════
# Aggregate result
# ═══════════════════════════════════════════════════════════════════════════

class ModelResult(BaseModel):
    """Everything one ``simulate`` call produces."""

    annual_output_per_unit_t: float
    fleet_output_year1_t: float
    capex_unit1: float
    total_fleet_capex: float
    unit_capex: list[float]
    """Learning-curve cost of unit n at index n−1."""

    npv: float
    irr: float | None
    """None when the bisection bracket holds no sign change."""
    payback_simple_year: int | None
    payback_discounted_year: int | None
    lccc: float
    """Levelized cost of capture ($/t)."""
    breakeven_incentive_price: float

    revenue_per_t_year1: RevenuePerTonne
    year1_revenue: float
    year1_opex: float
    eligibility_year: int | None
    """First calendar year the incentive gate passes, None if never."""

    years: list[YearRecord]
    warnings: list[str]
