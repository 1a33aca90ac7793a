"""Deployment scheduler: fleet build-out and learning-curve capital cost.

Key formulas:
  CAPEX_unit1 = Σ equipment × (1 + install_factor + engineering_factor)
  cost(n)     = CAPEX_unit1 × n^(log2 LR)
  N(y)        = min(N_units, floor(y × units_per_year) + 1),  N(−1) = 0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from capture_fleet_sim.config.capex import CapexConfig
from capture_fleet_sim.config.deployment import DeploymentConfig


def compute_capex_unit1(capex: CapexConfig) -> float:
    """Installed cost of the first unit."""
    return capex.equipment_total * (1 + capex.install_factor + capex.engineering_factor)


def compute_unit_capex(capex_unit1: float, fleet_size: int, learning_rate: float) -> list[float]:
    """Cost of each unit in deployment order under the learning curve.

    The exponent is applied verbatim, so a learning rate ≥ 1 yields flat or
    rising unit costs.
    """
    lr_exp = math.log2(learning_rate)
    return [capex_unit1 * n ** lr_exp for n in range(1, fleet_size + 1)]


def units_deployed(year_offset: int, fleet_size: int, units_per_year: float) -> int:
    """Units live in year ``year_offset``.  Year −1 has none."""
    if year_offset < 0:
        return 0
    return min(fleet_size, math.floor(year_offset * units_per_year) + 1)


@dataclass(frozen=True)
class DeploymentSchedule:
    """Per-unit capital costs plus the build-out pace that consumes them."""

    unit_capex: tuple[float, ...]
    units_per_year: float

    @property
    def fleet_size(self) -> int:
        return len(self.unit_capex)

    @property
    def total_capex(self) -> float:
        return sum(self.unit_capex)

    def deployed(self, year_offset: int) -> int:
        return units_deployed(year_offset, self.fleet_size, self.units_per_year)

    def capex_spent(self, year_offset: int) -> float:
        """Capital for units first deployed in ``year_offset``."""
        prev = self.deployed(year_offset - 1)
        return sum(self.unit_capex[prev:self.deployed(year_offset)])

    def cumulative_capex(self, year_offset: int) -> float:
        """Capital of every unit live by ``year_offset``."""
        return sum(self.unit_capex[:self.deployed(year_offset)])


def build_schedule(capex: CapexConfig, deployment: DeploymentConfig) -> DeploymentSchedule:
    """Compute the unit capex schedule once for a scenario."""
    unit1 = compute_capex_unit1(capex)
    return DeploymentSchedule(
        unit_capex=tuple(compute_unit_capex(unit1, deployment.fleet_size, deployment.learning_rate)),
        units_per_year=deployment.units_per_year,
    )
