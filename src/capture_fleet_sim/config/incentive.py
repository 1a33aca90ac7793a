"""Government incentive credit inputs."""

from typing import Literal

from pydantic import BaseModel, Field


class IncentiveConfig(BaseModel):
    """Per-tonne incentive credit with window, indexing and eligibility rules.

    The alternate pathway carves a share of the fleet output out of the
    standard incentive claim.  That share earns the incentive rate only when
    ``alternate_enabled`` is set, and is sold to offtake at
    ``alternate_price_per_t`` either way.
    """

    rate_per_t: float = Field(default=85.0, ge=0, description="Base credit per tonne ($/t)")
    fraction: float = Field(
        default=0.5,
        description="Share of captured output claimed under the incentive.",
    )
    window_years: int = Field(
        default=12, ge=0,
        description="Last year offset that earns the credit (y ≤ window_years).",
    )

    # --- Inflation indexing ---
    inflation_start_year: int = Field(
        default=2027,
        description="First calendar year the credit rate is indexed. "
                    "Earlier years use the base rate.",
    )
    inflation_rate: float = Field(default=0.025, ge=0, description="Annual indexing rate (e.g. 0.025 = 2.5%)")

    # --- Eligibility gate ---
    eligibility_mode: Literal["unconditional", "threshold_gated"] = Field(
        default="threshold_gated",
        description="'unconditional' = every year in the window is eligible; "
                    "'threshold_gated' = fleet output must reach "
                    "eligibility_threshold_tpy that year.",
    )
    eligibility_threshold_tpy: float = Field(
        default=12_500.0, ge=0,
        description="Minimum fleet tonnes per year for the credit. "
                    "Ignored when eligibility_mode='unconditional'.",
    )

    # --- Alternate pathway ---
    alternate_enabled: bool = Field(
        default=False,
        description="Whether output on the alternate pathway also earns the credit.",
    )
    alternate_fraction: float = Field(
        default=0.0,
        description="Share of captured output routed to the alternate pathway.",
    )
    alternate_price_per_t: float = Field(
        default=70.0, ge=0,
        description="Offtake price for the alternate-pathway share ($/t).",
    )
