"""Tests for input bounds and degenerate-parameter errors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from capture_fleet_sim import DegenerateParameterError, simulate
from capture_fleet_sim.config import (
    DeploymentConfig,
    FinanceConfig,
    IncentiveConfig,
    OpExConfig,
    Scenario,
    apply_overrides,
)


class TestFieldBounds:
    def test_fleet_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            DeploymentConfig(fleet_size=0)

    def test_learning_rate_must_be_positive(self):
        with pytest.raises(ValidationError):
            DeploymentConfig(learning_rate=0)

    def test_negative_discount_rate_rejected(self):
        with pytest.raises(ValidationError):
            FinanceConfig(discount_rate=-0.05)

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValidationError):
            FinanceConfig(horizon_years=-1)

    def test_unknown_eligibility_mode_rejected(self):
        with pytest.raises(ValidationError):
            IncentiveConfig(eligibility_mode="sometimes")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            apply_overrides(Scenario(), {"offtake": {"price_per_t": -1}})

    def test_zero_life_is_valid_config(self):
        """Zero life passes validation; the engine rejects it."""
        assert OpExConfig(adsorbent_life_years=0).adsorbent_life_years == 0


class TestDegenerateParameters:
    def test_zero_adsorbent_life_raises(self):
        scenario = apply_overrides(Scenario(), {"opex": {"adsorbent_life_years": 0}})
        with pytest.raises(DegenerateParameterError) as exc_info:
            simulate(scenario)
        assert exc_info.value.parameter == "opex.adsorbent_life_years"

    def test_error_is_a_value_error(self):
        err = DegenerateParameterError("cash_flow", "overflow")
        assert isinstance(err, ValueError)
        assert str(err) == "cash_flow: overflow"

    def test_zero_horizon_runs(self):
        result = simulate(apply_overrides(Scenario(), {"finance": {"horizon_years": 0}}))
        assert len(result.years) == 1
        assert result.lccc == 0.0
        assert result.irr is None

    def test_fraction_above_one_warns_not_raises(self):
        result = simulate(apply_overrides(Scenario(), {"offtake": {"fraction": 1.2}}))
        assert any("outside 0–1" in w for w in result.warnings)
        assert any("exceeds 100%" in w for w in result.warnings)

    def test_negative_fraction_warns_not_raises(self):
        result = simulate(apply_overrides(Scenario(), {"market": {"fraction": -0.1}}))
        assert "Market fraction -0.1 is outside 0–1." in result.warnings
        assert result.years[1].revenue.market < 0

    def test_negative_availability_accepted(self):
        scenario = apply_overrides(Scenario(), {"capture": {"availability": -0.1}})
        assert scenario.capture.availability == -0.1
