"""LoadedSpan: a wire over one span under one weather case, with solved tension."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Iterable, Literal

from .catenary import calculate_arc_length, calculate_sag, calculate_xc, calculate_yc
from .conductor import Creep, Wire
from .solvers import SolverConfig, calculate_elastic_tension, calculate_initial_tension
from .structure import StructureForces, calculate_structure_forces
from .weather import Weather, calculate_final_linear_force

logger = logging.getLogger(__name__)

Condition = Literal["initial", "final"]


@dataclass
class LoadedSpan:
    """
    A `Wire` over the span of a `Weather` case, with the horizontal tension
    solved for the requested condition.

    Attributes:
        weather: Weather case (temperature, span, ice, wind)
        wire: Conductor properties
        creep: Stringing condition and creep law
        condition: "initial" (initial stress-strain curve) or "final" (after creep)
        config: Newton-Raphson settings

    Example:
        >>> span = LoadedSpan(weather, wire, creep, condition="final")
        >>> print(f"H = {span.horizontal_tension:.0f} N, sag = {span.sag:.2f} m")
    """

    weather: Weather
    wire: Wire
    creep: Creep
    condition: Condition = "final"
    config: SolverConfig = field(default_factory=SolverConfig)

    horizontal_tension: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.condition == "initial":
            self.horizontal_tension = calculate_initial_tension(self.weather, self.wire, self.creep, self.config)
        elif self.condition == "final":
            self.horizontal_tension = calculate_elastic_tension(self.weather, self.wire, self.creep, self.config)
        else:
            raise ValueError("condition must be 'initial' or 'final'")

        label = self.weather.name or f"{self.weather.temperature:g} degC"
        logger.info(f"{label} ({self.condition}): H = {self.horizontal_tension:.1f} N, sag = {self.sag:.3f} m")

    @property
    def span_length(self) -> float:
        return self.weather.span_length

    @property
    def elevation(self) -> float:
        return self.weather.elevation

    @property
    def linear_force(self) -> float:
        return calculate_final_linear_force(self.weather, self.wire)

    @property
    def catenary_constant(self) -> float:
        # Always derived from the solved tension
        return self.horizontal_tension / self.linear_force

    @property
    def sag(self) -> float:
        return calculate_sag(self.catenary_constant, self.span_length, self.elevation)

    @property
    def arc_length(self) -> float:
        return calculate_arc_length(self.span_length, self.elevation, self.catenary_constant)

    @property
    def low_point(self) -> tuple[float, float]:
        """(Xc, Yc) of the catenary low point."""
        c = self.catenary_constant
        xc = calculate_xc(self.span_length, self.elevation, c)
        return xc, calculate_yc(c, xc)

    @property
    def is_uplift(self) -> bool:
        """True when the low point lies outside the span (the lower support is pulled up)."""
        xc, _ = self.low_point
        return xc < 0.0 or xc > self.span_length

    @property
    def structure_forces(self) -> StructureForces:
        return calculate_structure_forces(self.weather, self.wire, self.horizontal_tension)

    @property
    def info(self) -> dict[str, Any]:
        xc, yc = self.low_point
        out = {
            "weather": self.weather.name,
            "condition": self.condition,
            "temperature_C": self.weather.temperature,
            "span_length_m": self.span_length,
            "elevation_m": self.elevation,
            "ice_radius_m": self.weather.ice_radius,
            "wind_pressure_Pa": self.weather.wind_pressure,
            "linear_force_N_per_m": self.linear_force,
            "horizontal_tension_N": self.horizontal_tension,
            "catenary_constant_m": self.catenary_constant,
            "sag_m": self.sag,
            "arc_length_m": self.arc_length,
            "low_point_x_m": xc,
            "low_point_y_m": yc,
            "uplift": self.is_uplift,
        }
        out.update({f"structure_{k}": v for k, v in self.structure_forces.info.items()})
        return out

    def plot(
        self,
        *,
        chord: bool = True,
        low_point: bool = True,
        n_points: int = 201,
        ax=None,
        show: bool = True,
        save_path: str | None = None,
        length_unit: str = "m",
    ):
        from .plotting import plot_span_profile

        return plot_span_profile(
            self,
            chord=chord,
            low_point=low_point,
            n_points=n_points,
            ax=ax,
            show=show,
            save_path=save_path,
            length_unit=length_unit,
        )


def analyze_span(
    weather: Weather,
    wire: Wire,
    creep: Creep,
    *,
    condition: Condition = "final",
    config: SolverConfig | None = None,
) -> LoadedSpan:
    """Solve one weather case. Thin wrapper around `LoadedSpan`."""
    return LoadedSpan(
        weather=weather,
        wire=wire,
        creep=creep,
        condition=condition,
        config=config if config is not None else SolverConfig(),
    )


def sag_tension_table(
    weathers: Iterable[Weather],
    wire: Wire,
    creep: Creep,
    *,
    config: SolverConfig | None = None,
) -> list[dict[str, Any]]:
    """
    Initial and final tension and sag for each weather case.

    Each weather case is solved independently; a failing case raises.
    """
    rows: list[dict[str, Any]] = []
    for weather in weathers:
        initial = analyze_span(weather, wire, creep, condition="initial", config=config)
        final = analyze_span(weather, wire, creep, condition="final", config=config)
        rows.append(
            {
                "weather": weather.name,
                "temperature_C": weather.temperature,
                "ice_radius_m": weather.ice_radius,
                "wind_pressure_Pa": weather.wind_pressure,
                "initial_tension_N": initial.horizontal_tension,
                "initial_sag_m": initial.sag,
                "final_tension_N": final.horizontal_tension,
                "final_sag_m": final.sag,
            }
        )
    return rows


__all__ = ["Condition", "LoadedSpan", "analyze_span", "sag_tension_table"]
