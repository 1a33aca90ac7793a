"""Discounting and horizon inputs."""

from pydantic import BaseModel, Field


class FinanceConfig(BaseModel):
    """Discount rate, project horizon and calendar anchoring.

    Year offsets run ``0..horizon_years`` inclusive, so a 20-year horizon
    produces 21 yearly records.
    """

    discount_rate: float = Field(default=0.10, ge=0, description="Annual discount rate (e.g. 0.10 = 10%)")
    horizon_years: int = Field(default=20, ge=0, description="Last year offset simulated (T_project)")
    start_year: int = Field(default=2026, description="Calendar year of offset 0")
    revenue_escalation_rate: float = Field(
        default=0.02,
        description="Generic revenue escalation. Applied to the compliance price.",
    )
