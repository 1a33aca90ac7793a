"""Fleet deployment inputs."""

from pydantic import BaseModel, Field


class DeploymentConfig(BaseModel):
    """Fleet size, learning curve and build-out pace."""

    fleet_size: int = Field(default=4, ge=1, description="Total units deployed (N_units)")
    learning_rate: float = Field(
        default=0.85, gt=0,
        description="Unit cost multiplier per doubling of cumulative units. "
                    "Values ≥ 1 are applied as-is (no cost reduction).",
    )
    units_per_year: float = Field(
        default=2.0, ge=0,
        description="Deployment pace. Unit 1 is always live in year 0.",
    )
