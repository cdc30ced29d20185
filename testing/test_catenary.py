"""Closed-form catenary geometry."""

import math

import numpy as np
import pytest

from saggy import (
    InvalidGeometryError,
    calculate_arc_length,
    calculate_arc_length_prime,
    calculate_catenary_profile,
    calculate_catenary_y,
    calculate_sag,
    calculate_xc,
    calculate_xd,
    calculate_yc,
)


@pytest.mark.parametrize("span", [100.0, 300.0, 600.0])
@pytest.mark.parametrize("c", [500.0, 1500.0, 5000.0])
def test_level_span_sag_matches_symmetric_formula(span: float, c: float) -> None:
    expected = c * (math.cosh(span / (2.0 * c)) - 1.0)
    assert calculate_sag(c, span, 0.0) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize("span", [100.0, 300.0, 600.0])
@pytest.mark.parametrize("c", [500.0, 1500.0, 5000.0])
def test_level_span_arc_length(span: float, c: float) -> None:
    expected = 2.0 * c * math.sinh(span / (2.0 * c))
    assert calculate_arc_length(span, 0.0, c) == pytest.approx(expected, rel=1e-12)


def test_level_span_low_point_is_midspan() -> None:
    xc = calculate_xc(300.0, 0.0, 1500.0)
    assert xc == pytest.approx(150.0)
    assert calculate_xd(xc, 1500.0, 0.0, 300.0) == pytest.approx(xc)
    assert calculate_yc(1500.0, xc) < 0.0


@pytest.mark.parametrize(
    "span, elevation, linear_force",
    [
        (300.0, 0.0, 15.97),
        (300.0, 30.0, 30.6),
        (450.0, -60.0, 20.0),
        (150.0, 10.0, 45.0),
    ],
)
def test_arc_length_prime_matches_central_difference(span: float, elevation: float, linear_force: float) -> None:
    tension = 25_000.0
    step = tension * 1e-4

    def arc(h: float) -> float:
        return calculate_arc_length(span, elevation, h / linear_force)

    numeric = (arc(tension + step) - arc(tension - step)) / (2.0 * step)
    analytic = calculate_arc_length_prime(tension, span, linear_force, elevation)

    assert analytic < 0.0
    assert analytic == pytest.approx(numeric, rel=1e-6)


@pytest.mark.parametrize("elevation", [-40.0, 0.0, 25.0, 80.0])
def test_curve_passes_through_both_supports(elevation: float) -> None:
    span, c = 300.0, 1200.0
    assert calculate_catenary_y(0.0, span, elevation, c) == pytest.approx(0.0, abs=1e-8)
    assert calculate_catenary_y(span, span, elevation, c) == pytest.approx(elevation, abs=1e-8)


@pytest.mark.parametrize("elevation", [-40.0, 0.0, 25.0, 80.0])
def test_sag_is_max_separation_from_chord(elevation: float) -> None:
    span, c = 300.0, 1200.0
    x, y = calculate_catenary_profile(span, elevation, c, n_points=20001)
    chord = elevation / span * x

    sampled = float(np.max(chord - y))
    assert calculate_sag(c, span, elevation) == pytest.approx(sampled, rel=1e-6)


def test_sag_point_differs_from_low_point_on_inclined_span() -> None:
    span, elevation, c = 300.0, 40.0, 1200.0
    xc = calculate_xc(span, elevation, c)
    xd = calculate_xd(xc, c, elevation, span)
    # Far support is higher, so the low point moves toward x = 0
    assert xc < span / 2.0
    assert xd > xc


def test_arc_length_exceeds_chord() -> None:
    span, elevation, c = 300.0, 40.0, 1200.0
    assert calculate_arc_length(span, elevation, c) > math.hypot(span, elevation)


def test_uplift_low_point_outside_span() -> None:
    # Steep, tight span: low point falls behind the lower support
    assert calculate_xc(100.0, 50.0, 2000.0) < 0.0


def test_profile_shapes() -> None:
    x, y = calculate_catenary_profile(300.0, 10.0, 1000.0, n_points=11)
    assert x.shape == (11,)
    assert y.shape == (11,)
    assert x[0] == 0.0
    assert x[-1] == pytest.approx(300.0)


def test_profile_requires_two_points() -> None:
    with pytest.raises(ValueError):
        calculate_catenary_profile(300.0, 0.0, 1000.0, n_points=1)


class TestDegenerateGeometry:
    """Inputs that cannot describe a catenary."""

    def test_zero_span_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            calculate_xc(0.0, 0.0, 1000.0)

    def test_negative_span_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            calculate_arc_length(-10.0, 0.0, 1000.0)

    def test_zero_catenary_constant_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            calculate_sag(0.0, 300.0, 0.0)

    def test_straight_level_span_falls_back_to_midspan(self) -> None:
        # exp(L/c) rounds to exactly 1
        assert calculate_xc(300.0, 0.0, 1e300) == 150.0

    def test_straight_inclined_span_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError, match="Degenerate span"):
            calculate_xc(300.0, 5.0, 1e300)

    def test_overflow_propagates(self) -> None:
        with pytest.raises(OverflowError):
            calculate_xc(300.0, 0.0, 0.1)
