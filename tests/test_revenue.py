"""Tests for engine/revenue.py: the four revenue streams."""

from __future__ import annotations

import pytest

from capture_fleet_sim.config import IncentiveConfig, Scenario
from capture_fleet_sim.engine.revenue import (
    FlatAllocation,
    PathwaySplit,
    compute_year_revenue,
    effective_credit_rate,
    incentive_revenue,
    is_eligible,
    offtake_revenue,
    pathway_split,
)


def _incentive(**overrides) -> IncentiveConfig:
    base = dict(
        rate_per_t=85, fraction=0.5, window_years=12,
        inflation_start_year=2027, inflation_rate=0.025,
        eligibility_mode="unconditional",
    )
    base.update(overrides)
    return IncentiveConfig(**base)


# ── Eligibility ─────────────────────────────────────────────────────────────

class TestEligibility:
    def test_unconditional_always_eligible(self):
        assert is_eligible(_incentive(), 0.0)

    def test_threshold_gate(self):
        inc = _incentive(eligibility_mode="threshold_gated", eligibility_threshold_tpy=12_500)
        assert not is_eligible(inc, 12_499.9)
        assert is_eligible(inc, 12_500)
        assert is_eligible(inc, 20_000)


# ── Credit rate indexing ────────────────────────────────────────────────────

class TestCreditRate:
    def test_base_rate_before_start(self):
        assert effective_credit_rate(_incentive(), 2026) == 85

    def test_start_year_is_unindexed(self):
        assert effective_credit_rate(_incentive(), 2027) == pytest.approx(85)

    def test_compounds_after_start(self):
        assert effective_credit_rate(_incentive(), 2029) == pytest.approx(85 * 1.025 ** 2)

    def test_never_reduces_rate(self):
        inc = _incentive()
        for year in range(2000, 2040):
            assert effective_credit_rate(inc, year) >= 85


# ── Incentive stream ────────────────────────────────────────────────────────

class TestIncentiveRevenue:
    def test_flat_claim(self):
        """1000 t × 0.5 × $85 in a pre-indexing year."""
        assert incentive_revenue(_incentive(), 1_000, 0, 2026) == pytest.approx(42_500)

    def test_zero_fraction_earns_nothing(self):
        inc = _incentive(fraction=0.0, rate_per_t=500, alternate_enabled=True, alternate_fraction=0.3)
        for y in range(20):
            assert incentive_revenue(inc, 5_000, y, 2026 + y) == 0.0

    def test_window_is_inclusive(self):
        inc = _incentive(inflation_rate=0.0)
        assert incentive_revenue(inc, 1_000, 12, 2038) == pytest.approx(42_500)
        assert incentive_revenue(inc, 1_000, 13, 2039) == 0.0

    def test_below_threshold_earns_nothing(self):
        inc = _incentive(eligibility_mode="threshold_gated", eligibility_threshold_tpy=12_500)
        assert incentive_revenue(inc, 4_599, 3, 2029) == 0.0
        assert incentive_revenue(inc, 12_500, 3, 2029) > 0

    def test_alternate_share_excluded_when_disabled(self):
        inc = _incentive(alternate_fraction=0.2, alternate_enabled=False)
        # 1000 × 0.5 × (1 − 0.2) = 400 t credited
        assert incentive_revenue(inc, 1_000, 0, 2026) == pytest.approx(400 * 85)

    def test_alternate_share_included_when_enabled(self):
        inc = _incentive(alternate_fraction=0.2, alternate_enabled=True)
        # 400 t standard + 1000 × 0.2 = 200 t alternate
        assert incentive_revenue(inc, 1_000, 0, 2026) == pytest.approx(600 * 85)


# ── Market / offtake / compliance ───────────────────────────────────────────

class TestFlatAllocation:
    def test_escalation(self):
        alloc = FlatAllocation(fraction=0.25, price=40, escalation_rate=0.03)
        assert alloc.revenue(1_000, 0) == pytest.approx(10_000)
        assert alloc.revenue(1_000, 1) == pytest.approx(10_300)

    def test_zero_fraction(self):
        assert FlatAllocation(0.0, 999, 0.5).revenue(1_000, 5) == 0.0


class TestOfftake:
    def test_no_split_is_flat(self):
        std = FlatAllocation(0.5, 70, 0.02)
        assert offtake_revenue(std, None, 1_000, 2) == pytest.approx(std.revenue(1_000, 2))

    def test_split_prices(self):
        std = FlatAllocation(0.5, 70, 0.0)
        split = PathwaySplit(alternate_fraction=0.2, alternate_price=100)
        # 1000 × 0.3 × 70 + 1000 × 0.2 × 100
        assert offtake_revenue(std, split, 1_000, 0) == pytest.approx(41_000)

    def test_alternate_escalates_with_offtake(self):
        std = FlatAllocation(0.5, 70, 0.02)
        split = PathwaySplit(0.2, 100)
        assert offtake_revenue(std, split, 1_000, 1) == pytest.approx(41_000 * 1.02)

    def test_remainder_floored_at_zero(self):
        std = FlatAllocation(0.1, 70, 0.0)
        split = PathwaySplit(0.2, 100)
        assert offtake_revenue(std, split, 1_000, 0) == pytest.approx(20_000)

    def test_pathway_split_absent_without_fraction(self):
        assert pathway_split(_incentive(alternate_fraction=0.0)) is None
        assert pathway_split(_incentive(alternate_fraction=0.1, alternate_price_per_t=90)) == PathwaySplit(0.1, 90)


class TestYearRevenue:
    def test_compliance_uses_generic_escalation(self, scenario: Scenario):
        s = scenario.model_copy(update={
            "compliance": scenario.compliance.model_copy(update={"price_per_t": 20, "fraction": 0.5}),
        })
        rev = compute_year_revenue(s, 1_000, 2, 2028)
        assert rev.compliance == pytest.approx(1_000 * 0.5 * 20 * 1.02 ** 2)

    def test_total_is_sum(self, unconditional_scenario: Scenario):
        rev = compute_year_revenue(unconditional_scenario, 3_449.25, 1, 2027)
        assert rev.total == pytest.approx(rev.incentive + rev.market + rev.offtake + rev.compliance)
        assert rev.incentive > 0
        assert rev.offtake > 0

    def test_all_fractions_zero(self, scenario: Scenario):
        s = scenario.model_copy(update={
            "incentive": scenario.incentive.model_copy(update={"fraction": 0.0}),
            "market": scenario.market.model_copy(update={"fraction": 0.0}),
            "offtake": scenario.offtake.model_copy(update={"fraction": 0.0}),
            "compliance": scenario.compliance.model_copy(update={"fraction": 0.0}),
        })
        for y in range(5):
            assert compute_year_revenue(s, 10_000, y, 2026 + y).total == 0.0
