"""Capital cost of the first unit."""

from pydantic import BaseModel, Field


class CapexConfig(BaseModel):
    """Equipment line items for unit 1, before learning-curve reduction."""

    vessels: float = Field(default=60_000.0, ge=0, description="Adsorber vessels ($)")
    adsorbent: float = Field(
        default=20_000.0, ge=0,
        description="Initial adsorbent charge ($). Also the replacement cost per change-out.",
    )
    heat_exchanger: float = Field(default=20_000.0, ge=0, description="Heat exchangers ($)")
    blower: float = Field(default=15_000.0, ge=0, description="Blower ($)")
    valves: float = Field(default=35_000.0, ge=0, description="Switching valves ($)")
    compressor: float = Field(default=5_000.0, ge=0, description="Product compressor ($)")
    pretreatment: float = Field(default=15_000.0, ge=0, description="Gas pretreatment ($)")
    controls: float = Field(default=25_000.0, ge=0, description="Controls and instrumentation ($)")
    electrical: float = Field(default=12_000.0, ge=0, description="Electrical ($)")
    piping: float = Field(default=18_000.0, ge=0, description="Piping ($)")
    container: float = Field(default=12_000.0, ge=0, description="Skid / container ($)")

    install_factor: float = Field(default=0.20, ge=0, description="Installation as a fraction of equipment")
    engineering_factor: float = Field(default=0.15, ge=0, description="Engineering as a fraction of equipment")

    @property
    def equipment_total(self) -> float:
        return (
            self.vessels + self.adsorbent + self.heat_exchanger + self.blower
            + self.valves + self.compressor + self.pretreatment + self.controls
            + self.electrical + self.piping + self.container
        )
