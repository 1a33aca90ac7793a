"""Market, offtake and compliance revenue streams."""

from pydantic import BaseModel, Field


class MarketStreamConfig(BaseModel):
    """Voluntary market credits sold at an escalating spot price."""

    price_per_t: float = Field(default=40.0, ge=0, description="Year-0 market price ($/t)")
    fraction: float = Field(default=0.0, description="Share of output sold to the market")
    escalation_rate: float = Field(default=0.03, description="Annual price escalation")


class OfftakeConfig(BaseModel):
    """Contracted offtake.  Shares its escalation with the alternate-pathway price."""

    price_per_t: float = Field(default=70.0, ge=0, description="Year-0 contract price ($/t)")
    fraction: float = Field(default=0.5, description="Share of output under contract")
    escalation_rate: float = Field(default=0.02, description="Annual contract escalation")


class ComplianceConfig(BaseModel):
    """Compliance-market sales, escalated at the generic revenue rate."""

    price_per_t: float = Field(default=0.0, ge=0, description="Year-0 compliance price ($/t)")
    fraction: float = Field(default=0.0, description="Share of output sold for compliance")
