"""
Blown (wind-deflected) span geometry and forces on the support structure.

Under transverse wind the loaded wire swings out of the vertical plane through
its supports. The catenary is solved in that swung-out plane, then the wire
forces are resolved back into structure axes:

- vertical: along gravity (negative is downward on the structure)
- longitudinal: along the original span direction
- tangential: horizontal and perpendicular to the span (wind direction)
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

from .catenary import calculate_xc
from .conductor.wire import Wire
from .weather import Weather, calculate_final_linear_force, calculate_weight_linear_force


def blown_vertical_angle(weather: Weather, wire: Wire) -> float:
    """Angle (rad) between the loaded wire plane and vertical. Zero without wind."""
    ratio = -calculate_weight_linear_force(weather, wire) / calculate_final_linear_force(weather, wire)
    ratio = min(max(ratio, -1.0), 1.0)
    return math.acos(ratio)


def blown_horizontal_angle(weather: Weather, wire: Wire, elevation: float, span_length: float) -> float:
    """Horizontal deflection angle (rad) from the elevation difference tilted by the wind."""
    return math.atan(-elevation * math.sin(blown_vertical_angle(weather, wire)) / span_length)


def blown_span_elevation(weather: Weather, wire: Wire, elevation: float) -> float:
    """Elevation difference as seen within the blown plane."""
    return elevation * math.cos(blown_vertical_angle(weather, wire))


def blown_span_length(weather: Weather, wire: Wire, elevation: float, span_length: float) -> float:
    """Span length as seen within the blown plane."""
    return span_length / math.cos(blown_horizontal_angle(weather, wire, elevation, span_length))


def calculate_vertical_force(
    weather: Weather,
    wire: Wire,
    blown_span_length: float,
    blown_elevation: float,
    tension: float,
) -> float:
    """
    Vertical component of wire tension at the x = 0 support, in the frame it
    is given (normally the blown plane).

    Uses the half-span form: sn = 2c*sinh(L/2c) is the level-span arc length,
    s the inclined arc length and ub the low point position.
    """
    catenary_constant = tension / calculate_final_linear_force(weather, wire)

    sn = 2.0 * catenary_constant * math.sinh(blown_span_length / (2.0 * catenary_constant))
    s = math.sqrt(sn**2 + blown_elevation**2)
    ub = blown_span_length / 2.0 - catenary_constant * math.log((s + blown_elevation) / sn)
    return tension * math.sinh(ub / catenary_constant)


def calculate_direct_vertical_force(
    weather: Weather,
    wire: Wire,
    blown_span_length: float,
    blown_elevation: float,
    tension: float,
) -> float:
    """Vertical force from the low point directly: -sinh(Xc/c)*H (wire-on-support sign)."""
    catenary_constant = tension / calculate_final_linear_force(weather, wire)
    xc = calculate_xc(blown_span_length, blown_elevation, catenary_constant)
    return -math.sinh(xc / catenary_constant) * tension


def _blown_vertical_force(weather: Weather, wire: Wire, elevation: float, span_length: float, tension: float) -> float:
    return calculate_vertical_force(
        weather,
        wire,
        blown_span_length(weather, wire, elevation, span_length),
        blown_span_elevation(weather, wire, elevation),
        tension,
    )


def structure_vertical_force(
    weather: Weather, wire: Wire, elevation: float, span_length: float, tension: float
) -> float:
    """Vertical force on the structure (negative is downward)."""
    vertical_force = _blown_vertical_force(weather, wire, elevation, span_length, tension)
    vertical_angle = blown_vertical_angle(weather, wire)
    horizontal_angle = blown_horizontal_angle(weather, wire, elevation, span_length)
    return -(
        vertical_force * math.cos(vertical_angle)
        + tension * math.sin(horizontal_angle) * math.sin(vertical_angle)
    )


def structure_longitudinal_force(
    weather: Weather, wire: Wire, elevation: float, span_length: float, tension: float
) -> float:
    """Force along the original span axis."""
    return tension * math.cos(blown_horizontal_angle(weather, wire, elevation, span_length))


def structure_tangential_force(
    weather: Weather, wire: Wire, elevation: float, span_length: float, tension: float
) -> float:
    """Wind force on the structure, horizontal and perpendicular to the span."""
    vertical_force = _blown_vertical_force(weather, wire, elevation, span_length, tension)
    vertical_angle = blown_vertical_angle(weather, wire)
    horizontal_angle = blown_horizontal_angle(weather, wire, elevation, span_length)
    return (
        vertical_force * math.sin(vertical_angle)
        - tension * math.sin(horizontal_angle) * math.cos(vertical_angle)
    )


@dataclass(frozen=True)
class StructureForces:
    """Wire forces resolved into structure axes at the x = 0 support."""

    vertical: float
    longitudinal: float
    tangential: float

    @property
    def resultant(self) -> float:
        return math.sqrt(self.vertical**2 + self.longitudinal**2 + self.tangential**2)

    @property
    def info(self) -> dict[str, Any]:
        return {
            "vertical_N": self.vertical,
            "longitudinal_N": self.longitudinal,
            "tangential_N": self.tangential,
            "resultant_N": self.resultant,
        }


def calculate_structure_forces(
    weather: Weather, wire: Wire, tension: float
) -> StructureForces:
    """All three structure force components for the weather case's span."""
    elevation = weather.elevation
    span_length = weather.span_length
    return StructureForces(
        vertical=structure_vertical_force(weather, wire, elevation, span_length, tension),
        longitudinal=structure_longitudinal_force(weather, wire, elevation, span_length, tension),
        tangential=structure_tangential_force(weather, wire, elevation, span_length, tension),
    )


__all__ = [
    "blown_vertical_angle",
    "blown_horizontal_angle",
    "blown_span_elevation",
    "blown_span_length",
    "calculate_vertical_force",
    "calculate_direct_vertical_force",
    "structure_vertical_force",
    "structure_longitudinal_force",
    "structure_tangential_force",
    "StructureForces",
    "calculate_structure_forces",
]
