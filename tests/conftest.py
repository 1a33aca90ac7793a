"""Shared test fixtures: default scenario plus common variants."""

from __future__ import annotations

import pytest

from capture_fleet_sim.config import (
    CaptureConfig,
    CapexConfig,
    ComplianceConfig,
    DeploymentConfig,
    FinanceConfig,
    IncentiveConfig,
    MarketStreamConfig,
    OfftakeConfig,
    OpExConfig,
    Scenario,
)


@pytest.fixture
def capture() -> CaptureConfig:
    return CaptureConfig(
        capture_rate_tpd=3.5,
        availability=0.90,
        specific_energy_kwh_per_t=1_200,
        rated_power_kw=65,
    )


@pytest.fixture
def incentive() -> IncentiveConfig:
    return IncentiveConfig(
        rate_per_t=85,
        fraction=0.5,
        window_years=12,
        inflation_start_year=2027,
        inflation_rate=0.025,
        eligibility_mode="threshold_gated",
        eligibility_threshold_tpy=12_500,
        alternate_enabled=False,
        alternate_fraction=0.0,
        alternate_price_per_t=70,
    )


@pytest.fixture
def capex() -> CapexConfig:
    return CapexConfig(
        vessels=60_000,
        adsorbent=20_000,
        heat_exchanger=20_000,
        blower=15_000,
        valves=35_000,
        compressor=5_000,
        pretreatment=15_000,
        controls=25_000,
        electrical=12_000,
        piping=18_000,
        container=12_000,
        install_factor=0.20,
        engineering_factor=0.15,
    )


@pytest.fixture
def opex() -> OpExConfig:
    return OpExConfig(
        electricity_price_per_kwh=0.08,
        adsorbent_life_years=7,
        valve_maintenance_per_unit=5_000,
        calibration_per_unit=5_000,
        monitoring_per_unit=3_000,
        insurance_pct=1.5,
        maintenance_pct=3.0,
        escalation_rate=0.02,
    )


@pytest.fixture
def finance() -> FinanceConfig:
    return FinanceConfig(discount_rate=0.10, horizon_years=20, start_year=2026, revenue_escalation_rate=0.02)


@pytest.fixture
def deployment() -> DeploymentConfig:
    return DeploymentConfig(fleet_size=4, learning_rate=0.85, units_per_year=2)


@pytest.fixture
def scenario(
    capture: CaptureConfig,
    incentive: IncentiveConfig,
    capex: CapexConfig,
    opex: OpExConfig,
    finance: FinanceConfig,
    deployment: DeploymentConfig,
) -> Scenario:
    return Scenario(
        capture=capture,
        incentive=incentive,
        market=MarketStreamConfig(price_per_t=40, fraction=0.0, escalation_rate=0.03),
        offtake=OfftakeConfig(price_per_t=70, fraction=0.5, escalation_rate=0.02),
        compliance=ComplianceConfig(price_per_t=0, fraction=0.0),
        capex=capex,
        opex=opex,
        finance=finance,
        deployment=deployment,
    )


@pytest.fixture
def unconditional_scenario(scenario: Scenario) -> Scenario:
    """Same fleet, but every year inside the window earns the credit."""
    return scenario.model_copy(update={
        "incentive": scenario.incentive.model_copy(update={"eligibility_mode": "unconditional"}),
    })


@pytest.fixture
def profitable_scenario(unconditional_scenario: Scenario) -> Scenario:
    """Credit over the whole horizon at a rate that clears the capital."""
    return unconditional_scenario.model_copy(update={
        "incentive": unconditional_scenario.incentive.model_copy(update={
            "rate_per_t": 150, "window_years": 20,
        }),
    })
