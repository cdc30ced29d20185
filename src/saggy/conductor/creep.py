"""
Creep state and the unstretched-length collaborator.

The tension solvers only see this module through `calculate_original_length`
and `calculate_creep_strain`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

import numpy as np

from ..catenary import calculate_arc_length
from .wire import Wire

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Creep:
    """Stringing condition and creep law for a wire.

    The wire is assumed strung bare, at `Wire.starting_temp`, to a horizontal
    tension `stringing_tension` over the given span. Creep strain follows

        strain(%) = coefficient * sigma_MPa**stress_exponent * hours**time_exponent

    with sigma the stringing stress on the total cross section.

    Attributes:
        stringing_tension: Horizontal stringing tension (N)
        span_length: Stringing span length (m)
        elevation: Stringing elevation difference (m)
        coefficient: Creep law coefficient (0 disables creep)
        stress_exponent: Exponent on stress in MPa
        time_exponent: Exponent on time in hours
        hours: Creep duration (default ten years)
    """

    stringing_tension: float
    span_length: float
    elevation: float = 0.0
    coefficient: float = 0.0
    stress_exponent: float = 1.0
    time_exponent: float = 0.16
    hours: float = 87600.0

    def __post_init__(self) -> None:
        if self.stringing_tension <= 0.0:
            raise ValueError("stringing_tension must be positive")
        if self.span_length <= 0.0:
            raise ValueError("Stringing span_length must be positive")
        if self.coefficient < 0.0:
            raise ValueError("Creep coefficient cannot be negative")
        if self.hours < 0.0:
            raise ValueError("Creep hours cannot be negative")


def _stringing_stress(creep: Creep, wire: Wire) -> float:
    return creep.stringing_tension / wire.total_cross_section


def calculate_creep_strain(creep: Creep, wire: Wire) -> float:
    """Long-term creep strain (dimensionless, not percent)."""
    if creep.coefficient == 0.0 or creep.hours == 0.0:
        return 0.0
    stress_mpa = _stringing_stress(creep, wire) / 1e6
    percent = creep.coefficient * stress_mpa**creep.stress_exponent * creep.hours**creep.time_exponent
    return percent / 100.0


def _initial_strain_percent(wire: Wire, stress: float) -> float:
    """Smallest non-negative percent strain on the initial curve at `stress`."""
    k0, k1, k2, k3, k4 = wire.stress_strain_coefficients
    # np.roots wants the highest degree first; leading zeros are stripped
    roots = np.roots([k4, k3, k2, k1, k0 - stress])
    real = [float(r.real) for r in roots if abs(r.imag) <= 1e-9 * max(1.0, abs(r.real))]
    candidates = sorted(r for r in real if r >= 0.0)
    if not candidates:
        raise ValueError(
            f"Initial stress-strain curve never reaches stress {stress:.6g} Pa at non-negative strain"
        )
    return candidates[0]


def calculate_original_length(wire: Wire, creep: Creep) -> float:
    """
    Unstretched wire length at `Wire.starting_temp`.

    The stringing arc length (bare wire at the stringing tension) with the
    initial-curve strain at the stringing stress removed.
    """
    if wire.final_linear_weight <= 0.0:
        raise ValueError("Wire final_linear_weight must be positive to derive the stringing geometry")
    catenary_constant = creep.stringing_tension / wire.final_linear_weight
    arc_length = calculate_arc_length(creep.span_length, creep.elevation, catenary_constant)
    strain_percent = _initial_strain_percent(wire, _stringing_stress(creep, wire))
    original = arc_length / (1.0 + strain_percent / 100.0)
    logger.debug(
        f"Original length {original:.6f} m (stringing arc {arc_length:.6f} m, strain {strain_percent:.6f}%)"
    )
    if not math.isfinite(original) or original <= 0.0:
        raise ValueError(f"Original wire length must be positive, got {original}")
    return original


__all__ = [
    "Creep",
    "calculate_creep_strain",
    "calculate_original_length",
]
