"""DCF metrics: NPV and IRR over yearly cash flows.

Cash flows are indexed by year offset: element 0 is year 0 and is not
discounted.

  NPV(r) = Σ CF_y / (1 + r)^y
  IRR    = r where NPV(r) = 0, found by bisection on [−50%, 200%]
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from capture_fleet_sim.finance.bisection import bisect

IRR_LOW = -0.50
IRR_HIGH = 2.00
IRR_MAX_ITER = 100
IRR_TOL = 1e-4
IRR_MOVE_TOL = 0.01
"""Bracket ends closer than this to their start count as unmoved."""


def compute_npv(cash_flows: Sequence[float], annual_rate: float) -> float:
    """Net present value of yearly cash flows at ``annual_rate``."""
    if len(cash_flows) == 0:
        return 0.0
    flows = np.asarray(cash_flows, dtype=float)
    factors = (1 + annual_rate) ** np.arange(len(flows))
    return float(np.sum(flows / factors))


def compute_irr(cash_flows: Sequence[float]) -> float | None:
    """Internal rate of return by bisection.

    Returns None if either end of the bracket is still at its starting
    value: the bracket never held a sign change, and reporting a bound as
    the IRR would be misleading. Also None if any trial NPV is non-finite,
    which happens on very long horizons near the −50% bound.
    """
    if len(cash_flows) == 0:
        return None

    trials: list[float] = []

    def npv_at(rate: float) -> float:
        value = compute_npv(cash_flows, rate)
        trials.append(value)
        return value

    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        bracket = bisect(npv_at, IRR_LOW, IRR_HIGH, IRR_MAX_ITER, IRR_TOL)
    if not np.all(np.isfinite(trials)):
        return None
    if abs(bracket.low - IRR_LOW) > IRR_MOVE_TOL and abs(bracket.high - IRR_HIGH) > IRR_MOVE_TOL:
        return bracket.midpoint
    return None
