"""
Shared Newton-Raphson infrastructure for the tension solvers.

Provides the search configuration, the parabolic seed and iterate checks.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

from ..common.errors import NonConvergentSolveError

# Errors the geometry can raise when an iterate wanders off (exp overflow,
# asinh/sqrt domain, exp(L/c) == 1)
GEOMETRY_FAILURES = (OverflowError, ZeroDivisionError, ValueError)


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the tension Newton-Raphson loops.

    Attributes:
        tolerance: Stop once the Newton step is at most this (N)
        max_iterations: Give up after this many steps
        max_step_halvings: Times a step may be halved to keep the tension positive
    """

    tolerance: float = 0.001
    max_iterations: int = 100
    max_step_halvings: int = 30

    def __post_init__(self) -> None:
        if self.tolerance <= 0.0:
            raise ValueError("tolerance must be positive")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.max_step_halvings < 0:
            raise ValueError("max_step_halvings cannot be negative")


def parabolic_seed(
    *,
    solver: str,
    linear_force: float,
    span_length: float,
    elevation: float,
    wire_length: float,
    inputs: dict[str, Any],
) -> float:
    """
    Seed tension from the small-sag parabola.

    Slack S_w - S = 8*D^2/(3*S) gives the sag estimate D, then H = w*S^2/(8*D),
    with S the chord length and S_w the wire length at design temperature.
    """
    chord = math.sqrt(span_length**2 + elevation**2)
    sag_estimate = math.sqrt(3.0 * chord * abs(wire_length - chord) / 8.0)
    if sag_estimate <= 0.0:
        raise NonConvergentSolveError(
            "Wire length equals the chord length; parabolic seed is unbounded",
            solver=solver,
            iterations=0,
            last_tension=math.inf,
            inputs=inputs,
        )
    return linear_force * chord**2 / (8.0 * sag_estimate)


def damp_step(tension: float, step: float, *, max_halvings: int) -> float:
    """
    Halve a Newton step until `tension - step` stays positive.

    Far from the root (a nearly taut wire gives a huge parabolic seed) the
    full step can jump past zero. After `max_halvings` attempts the step is
    returned as is and `check_iterate` rejects the result.
    """
    for _ in range(max_halvings):
        if tension - step > 0.0:
            break
        step /= 2.0
    return step


def check_iterate(tension: float, *, solver: str, iterations: int, inputs: dict[str, Any]) -> None:
    """Reject non-finite or non-positive tension estimates."""
    if not math.isfinite(tension) or tension <= 0.0:
        raise NonConvergentSolveError(
            "Tension estimate left the physical range",
            solver=solver,
            iterations=iterations,
            last_tension=tension,
            inputs=inputs,
        )


__all__ = [
    "GEOMETRY_FAILURES",
    "SolverConfig",
    "parabolic_seed",
    "damp_step",
    "check_iterate",
]
