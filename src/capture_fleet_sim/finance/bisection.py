"""Bracketing bisection shared by the IRR and breakeven solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Bracket:
    """Final search interval after bisection."""

    low: float
    high: float
    iterations: int

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    @property
    def width(self) -> float:
        return abs(self.high - self.low)


def bisect(
    objective: Callable[[float], float],
    low: float,
    high: float,
    max_iter: int,
    tol: float,
) -> Bracket:
    """Narrow ``[low, high]`` toward the sign change of a decreasing objective.

    A positive objective at the midpoint moves ``low`` up, anything else moves
    ``high`` down.  Stops after ``max_iter`` evaluations or once the bracket is
    narrower than ``tol``.  Never raises on non-convergence; callers decide
    what an unmoved bracket means.
    """
    iterations = 0
    for iterations in range(1, max_iter + 1):
        mid = (low + high) / 2
        if objective(mid) > 0:
            low = mid
        else:
            high = mid
        if abs(high - low) < tol:
            break
    return Bracket(low=low, high=high, iterations=iterations)
