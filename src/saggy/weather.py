"""Weather case definition and the per-unit-length load model."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

from .common.constants import GRAVITY, ICE_DENSITY
from .common.errors import DegenerateLoadError, InvalidGeometryError

if TYPE_CHECKING:
    from .conductor.wire import Wire


@dataclass(frozen=True)
class Weather:
    """One loading scenario for a single span.

    Attributes:
        temperature: Wire temperature (degC)
        span_length: Final horizontal span length (m)
        elevation: Final elevation difference (m), far support minus near support
        ice_radius: Radial ice thickness (m)
        wind_pressure: Wind pressure on the projected iced diameter (Pa)
        name: Optional label used in tables and plots

    Notes:
        - Wind is assumed to act perpendicular to the span
        - Use SI units throughout (m, N, Pa)
    """

    temperature: float
    span_length: float
    elevation: float = 0.0
    ice_radius: float = 0.0
    wind_pressure: float = 0.0
    name: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.span_length) or self.span_length <= 0.0:
            raise InvalidGeometryError(f"Span length must be positive, got {self.span_length}")
        if not math.isfinite(self.elevation):
            raise InvalidGeometryError(f"Elevation must be finite, got {self.elevation}")
        if self.ice_radius < 0.0:
            raise ValueError("ice_radius cannot be negative")
        if self.wind_pressure < 0.0:
            raise ValueError("wind_pressure cannot be negative")

    @property
    def chord_length(self) -> float:
        """Straight-line distance between the attachment points."""
        return math.hypot(self.span_length, self.elevation)


def calculate_weight_linear_force(weather: Weather, wire: Wire) -> float:
    """
    Downward force per unit length: ice annulus plus bare wire weight.

    Ice is a cylindrical shell of radial thickness `ice_radius` around the
    wire. Returned negative (downward).
    """
    outer_radius = wire.radius + weather.ice_radius
    wire_radius = wire.radius
    ice_area = math.pi * outer_radius**2 - math.pi * wire_radius**2
    return -(ice_area * ICE_DENSITY * GRAVITY + wire.final_linear_weight)


def calculate_wind_linear_force(weather: Weather, wire: Wire) -> float:
    """Transverse wind force per unit length on the iced projected diameter."""
    return (wire.final_diameter + weather.ice_radius * 2.0) * weather.wind_pressure


def calculate_final_linear_force(weather: Weather, wire: Wire) -> float:
    """
    Resultant transverse load per unit length (wind and weight combined).

    Raises:
        DegenerateLoadError: If the combined load is zero or not finite
    """
    wind = calculate_wind_linear_force(weather, wire)
    weight = calculate_weight_linear_force(weather, wire)
    force = math.sqrt(wind**2 + weight**2)
    if not math.isfinite(force) or force <= 0.0:
        raise DegenerateLoadError(
            f"Combined linear force must be positive and finite, got {force} "
            f"(wind={wind}, weight={weight})"
        )
    return force


__all__ = [
    "Weather",
    "calculate_weight_linear_force",
    "calculate_wind_linear_force",
    "calculate_final_linear_force",
]
