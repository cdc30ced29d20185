"""Weather case validation and the linear load model."""

import math
from dataclasses import replace

import numpy as np
import pytest

from saggy import (
    DegenerateLoadError,
    InvalidGeometryError,
    Weather,
    Wire,
    calculate_final_linear_force,
    calculate_weight_linear_force,
    calculate_wind_linear_force,
)
from saggy.common import GRAVITY, ICE_DENSITY


def test_bare_wire_weight(wire: Wire, stringing_weather: Weather) -> None:
    assert calculate_weight_linear_force(stringing_weather, wire) == pytest.approx(-15.97)


def test_ice_annulus_weight(wire: Wire, ice_weather: Weather) -> None:
    r = ice_weather.ice_radius
    # Annulus area pi*r*(D + r)
    ice = math.pi * r * (wire.final_diameter + r) * ICE_DENSITY * GRAVITY
    assert calculate_weight_linear_force(ice_weather, wire) == pytest.approx(-(ice + wire.final_linear_weight), rel=1e-12)


def test_wind_on_iced_diameter(wire: Wire, wind_weather: Weather) -> None:
    expected = (wire.final_diameter + 2.0 * wind_weather.ice_radius) * wind_weather.wind_pressure
    assert calculate_wind_linear_force(wind_weather, wire) == pytest.approx(expected)


def test_final_force_without_wind_is_weight(wire: Wire, ice_weather: Weather) -> None:
    weight = calculate_weight_linear_force(ice_weather, wire)
    assert calculate_final_linear_force(ice_weather, wire) == pytest.approx(abs(weight), rel=1e-12)


def test_final_force_is_vector_sum(wire: Wire, wind_weather: Weather) -> None:
    wind = calculate_wind_linear_force(wind_weather, wire)
    weight = calculate_weight_linear_force(wind_weather, wire)
    assert calculate_final_linear_force(wind_weather, wire) == pytest.approx(math.hypot(wind, weight))


def test_final_force_increases_with_wind(wire: Wire, ice_weather: Weather) -> None:
    forces = [
        calculate_final_linear_force(replace(ice_weather, wind_pressure=p), wire)
        for p in [0.0, 100.0, 200.0, 400.0, 800.0]
    ]
    assert np.all(np.diff(forces) > 0.0)


def test_final_force_increases_with_ice(wire: Wire, wind_weather: Weather) -> None:
    forces = [
        calculate_final_linear_force(replace(wind_weather, ice_radius=r), wire)
        for r in [0.0, 0.005, 0.01, 0.02, 0.04]
    ]
    assert np.all(np.diff(forces) > 0.0)


def test_zero_load_is_degenerate(wire: Wire) -> None:
    weightless = replace(wire, final_linear_weight=0.0)
    calm = Weather(temperature=15.0, span_length=300.0)

    with pytest.raises(DegenerateLoadError):
        calculate_final_linear_force(calm, weightless)


def test_weightless_wire_with_wind_is_loaded(wire: Wire) -> None:
    weightless = replace(wire, final_linear_weight=0.0)
    windy = Weather(temperature=15.0, span_length=300.0, wind_pressure=100.0)
    assert calculate_final_linear_force(windy, weightless) == pytest.approx(wire.final_diameter * 100.0)


class TestWeatherValidation:
    def test_zero_span_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            Weather(temperature=15.0, span_length=0.0)

    def test_nan_elevation_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            Weather(temperature=15.0, span_length=300.0, elevation=float("nan"))

    def test_negative_ice_rejected(self) -> None:
        with pytest.raises(ValueError, match="ice_radius"):
            Weather(temperature=15.0, span_length=300.0, ice_radius=-0.01)

    def test_negative_wind_rejected(self) -> None:
        with pytest.raises(ValueError, match="wind_pressure"):
            Weather(temperature=15.0, span_length=300.0, wind_pressure=-1.0)

    def test_chord_length(self) -> None:
        assert Weather(temperature=0.0, span_length=300.0, elevation=40.0).chord_length == pytest.approx(
            math.hypot(300.0, 40.0)
        )

    def test_weather_is_immutable(self, stringing_weather: Weather) -> None:
        with pytest.raises(AttributeError):
            stringing_weather.temperature = 30.0  # type: ignore[misc]
