"""Operating expenditure inputs."""

from pydantic import BaseModel, Field


class OpExConfig(BaseModel):
    """Annual operating cost inputs, per unit or as percent of deployed capital."""

    electricity_price_per_kwh: float = Field(default=0.08, ge=0, description="Electricity tariff ($/kWh)")
    adsorbent_life_years: float = Field(
        default=7.0, ge=0,
        description="Adsorbent service life. Replacement cost is amortised "
                    "straight-line over this period; 0 is rejected by the engine.",
    )
    valve_maintenance_per_unit: float = Field(default=5_000.0, ge=0, description="Valve service per unit per year ($)")
    calibration_per_unit: float = Field(default=5_000.0, ge=0, description="Analyser calibration per unit per year ($)")
    monitoring_per_unit: float = Field(default=3_000.0, ge=0, description="MRV monitoring per unit per year ($)")
    insurance_pct: float = Field(default=1.5, ge=0, description="Insurance, % of deployed capital per year")
    maintenance_pct: float = Field(default=3.0, ge=0, description="General maintenance, % of deployed capital per year")
    escalation_rate: float = Field(default=0.02, description="Annual OPEX escalation")
