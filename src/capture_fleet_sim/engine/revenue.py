"""Revenue calculator: four independent per-tonne streams.

Each stream sees the same fleet output Q for year offset y:

  incentive  = credit on Q × fraction × (1 − alt) [+ Q × alt if alternate enabled]
  market     = Q × fraction × P₀ × (1 + esc)^y
  offtake    = Q × max(0, fraction − alt) × P₀ × (1 + esc)^y
             + Q × alt × P_alt × (1 + esc)^y
  compliance = Q × fraction × P₀ × (1 + revenue_esc)^y

The alternate pathway is a tagged sub-allocation (``PathwaySplit``) shared by
the incentive and offtake streams; without one a stream is flat.
"""

from __future__ import annotations

from dataclasses import dataclass

from capture_fleet_sim.config.scenario import Scenario
from capture_fleet_sim.config.incentive import IncentiveConfig
from capture_fleet_sim.models.results import RevenueBreakdown


@dataclass(frozen=True)
class FlatAllocation:
    """A fixed share of output sold at an escalating price."""

    fraction: float
    price: float
    escalation_rate: float

    def revenue(self, fleet_output: float, year_offset: int) -> float:
        price_y = self.price * (1 + self.escalation_rate) ** year_offset
        return fleet_output * self.fraction * price_y


@dataclass(frozen=True)
class PathwaySplit:
    """Share of output routed to the alternate pathway and its offtake price."""

    alternate_fraction: float
    alternate_price: float


def pathway_split(incentive: IncentiveConfig) -> PathwaySplit | None:
    """The scenario's alternate-pathway carve-out, None when unused."""
    if incentive.alternate_fraction <= 0:
        return None
    return PathwaySplit(incentive.alternate_fraction, incentive.alternate_price_per_t)


# ── Incentive ────────────────────────────────────────────────────────────

def is_eligible(incentive: IncentiveConfig, fleet_output: float) -> bool:
    """Eligibility gate for one year, independent of window and fraction."""
    if incentive.eligibility_mode == "unconditional":
        return True
    return fleet_output >= incentive.eligibility_threshold_tpy


def incentive_active(incentive: IncentiveConfig, year_offset: int, eligible: bool) -> bool:
    return incentive.fraction > 0 and year_offset <= incentive.window_years and eligible


def effective_credit_rate(incentive: IncentiveConfig, calendar_year: int) -> float:
    """Credit rate for a calendar year.  Indexing is never retroactive."""
    if calendar_year < incentive.inflation_start_year:
        return incentive.rate_per_t
    years_indexed = calendar_year - incentive.inflation_start_year
    return incentive.rate_per_t * (1 + incentive.inflation_rate) ** years_indexed


def incentive_volume(incentive: IncentiveConfig, fleet_output: float) -> float:
    """Tonnes that earn the credit in an active year."""
    split = pathway_split(incentive)
    if split is None:
        return fleet_output * incentive.fraction
    standard = fleet_output * incentive.fraction * (1 - split.alternate_fraction)
    if incentive.alternate_enabled:
        return standard + fleet_output * split.alternate_fraction
    return standard


def incentive_revenue(
    incentive: IncentiveConfig,
    fleet_output: float,
    year_offset: int,
    calendar_year: int,
) -> float:
    if not incentive_active(incentive, year_offset, is_eligible(incentive, fleet_output)):
        return 0.0
    return incentive_volume(incentive, fleet_output) * effective_credit_rate(incentive, calendar_year)


# ── Offtake ──────────────────────────────────────────────────────────────

def offtake_revenue(
    standard: FlatAllocation,
    split: PathwaySplit | None,
    fleet_output: float,
    year_offset: int,
) -> float:
    if split is None:
        return standard.revenue(fleet_output, year_offset)
    remainder = FlatAllocation(
        max(0.0, standard.fraction - split.alternate_fraction),
        standard.price,
        standard.escalation_rate,
    )
    alternate = FlatAllocation(split.alternate_fraction, split.alternate_price, standard.escalation_rate)
    return remainder.revenue(fleet_output, year_offset) + alternate.revenue(fleet_output, year_offset)


# ── All streams ──────────────────────────────────────────────────────────

def compute_year_revenue(
    scenario: Scenario,
    fleet_output: float,
    year_offset: int,
    calendar_year: int,
) -> RevenueBreakdown:
    """Revenue by stream for one year."""
    inc = scenario.incentive
    market = FlatAllocation(scenario.market.fraction, scenario.market.price_per_t, scenario.market.escalation_rate)
    offtake = FlatAllocation(scenario.offtake.fraction, scenario.offtake.price_per_t, scenario.offtake.escalation_rate)
    compliance = FlatAllocation(
        scenario.compliance.fraction,
        scenario.compliance.price_per_t,
        scenario.finance.revenue_escalation_rate,
    )

    return RevenueBreakdown(
        incentive=incentive_revenue(inc, fleet_output, year_offset, calendar_year),
        market=market.revenue(fleet_output, year_offset),
        offtake=offtake_revenue(offtake, pathway_split(inc), fleet_output, year_offset),
        compliance=compliance.revenue(fleet_output, year_offset),
    )
