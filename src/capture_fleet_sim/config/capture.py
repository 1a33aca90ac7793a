"""Capture unit performance inputs."""

from pydantic import BaseModel, Field


class CaptureConfig(BaseModel):
    """Output and power draw of one capture unit."""

    capture_rate_tpd: float = Field(default=3.5, ge=0, description="Tonnes captured per unit per day")
    availability: float = Field(
        default=0.90,
        description="Fraction of the year the unit is running (0–1). "
                    "Scales both annual output and electricity use.",
    )
    specific_energy_kwh_per_t: float = Field(
        default=1_200.0, ge=0,
        description="Specific energy per tonne. Reference only; electricity "
                    "cost is driven by rated_power_kw.",
    )
    rated_power_kw: float = Field(default=65.0, ge=0, description="Continuous electrical draw per unit (kW)")
