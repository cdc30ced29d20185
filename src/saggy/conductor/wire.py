"""
Wire (conductor) definition.

This module contains *input* data only. The stress-strain polynomials are in
percent strain and give stress referred to the total cross section, so the
outer (e.g. aluminium) and core (e.g. steel) curves simply add.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Sequence

STRESS_STRAIN_TERMS = 5  # degree-0 through degree-4 coefficients


def _as_coefficients(values: Sequence[float], label: str) -> tuple[float, ...]:
    coeffs = tuple(float(v) for v in values)
    if len(coeffs) != STRESS_STRAIN_TERMS:
        raise ValueError(
            f"{label} stress-strain curve needs exactly {STRESS_STRAIN_TERMS} coefficients, got {len(coeffs)}"
        )
    if not all(math.isfinite(v) for v in coeffs):
        raise ValueError(f"{label} stress-strain coefficients must be finite")
    return coeffs


@dataclass(frozen=True)
class Wire:
    """Conductor properties (SI units).

    Attributes:
        starting_temp: Temperature at which the wire was strung (degC)
        total_cross_section: Total load-bearing area (m^2)
        final_diameter: Outer diameter (m)
        final_linear_weight: Bare weight per unit length (N/m, positive)
        outer_stress_strain: Initial curve coefficients K0..K4 of the outer strands (Pa)
        core_stress_strain: Initial curve coefficients K0..K4 of the core (Pa)
        outer_final_modulus: Final modulus of the outer strands, total-area basis (Pa)
        core_final_modulus: Final modulus of the core, total-area basis (Pa)
        outer_thermal_coefficient: Outer strand expansion coefficient (1/degC)
        core_thermal_coefficient: Core expansion coefficient (1/degC)
        name: Optional label
    """

    starting_temp: float
    total_cross_section: float
    final_diameter: float
    final_linear_weight: float
    outer_stress_strain: Sequence[float]
    outer_final_modulus: float
    outer_thermal_coefficient: float
    core_stress_strain: Sequence[float] = (0.0, 0.0, 0.0, 0.0, 0.0)
    core_final_modulus: float = 0.0
    core_thermal_coefficient: float = 0.0
    name: str = ""

    stress_strain_coefficients: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.total_cross_section <= 0.0:
            raise ValueError("Wire total_cross_section must be positive")
        if self.final_diameter <= 0.0:
            raise ValueError("Wire final_diameter must be positive")
        if self.final_linear_weight < 0.0:
            raise ValueError("Wire final_linear_weight cannot be negative")

        outer = _as_coefficients(self.outer_stress_strain, "Outer")
        core = _as_coefficients(self.core_stress_strain, "Core")
        object.__setattr__(self, "outer_stress_strain", outer)
        object.__setattr__(self, "core_stress_strain", core)
        object.__setattr__(
            self,
            "stress_strain_coefficients",
            tuple(o + c for o, c in zip(outer, core)),
        )

        if self.outer_final_modulus < 0.0 or self.core_final_modulus < 0.0:
            raise ValueError("Final moduli cannot be negative")
        if self.outer_final_modulus + self.core_final_modulus <= 0.0:
            raise ValueError("Wire must have a positive final modulus")

    @property
    def radius(self) -> float:
        return self.final_diameter / 2.0


def calculate_elasticity(wire: Wire) -> float:
    """Composite final elastic modulus (Pa), total-area basis."""
    return wire.outer_final_modulus + wire.core_final_modulus


def calculate_thermal_coefficient(wire: Wire) -> float:
    """Composite thermal expansion coefficient, weighted by component stiffness."""
    outer = wire.outer_thermal_coefficient * wire.outer_final_modulus
    core = wire.core_thermal_coefficient * wire.core_final_modulus
    return (outer + core) / calculate_elasticity(wire)


__all__ = [
    "STRESS_STRAIN_TERMS",
    "Wire",
    "calculate_elasticity",
    "calculate_thermal_coefficient",
]
