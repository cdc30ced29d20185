"""
Closed-form catenary geometry for a single span.

Coordinates: x runs along the span from the support at x = 0 to the support
at x = span_length; y is measured up from the x = 0 support, so the far
support sits at y = elevation. The catenary constant is c = H / w
(horizontal tension over transverse load per unit length).

All functions are pure. Geometry that cannot describe a catenary raises
`InvalidGeometryError`; `math.exp` overflow for extreme span/constant ratios
propagates as `OverflowError`.
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from .common.errors import InvalidGeometryError


def _check_span(span_length: float, catenary_constant: float) -> None:
    if not math.isfinite(span_length) or span_length <= 0.0:
        raise InvalidGeometryError(f"Span length must be positive, got {span_length}")
    if not math.isfinite(catenary_constant) or catenary_constant == 0.0:
        raise InvalidGeometryError(
            f"Catenary constant must be finite and nonzero, got {catenary_constant}"
        )


def calculate_xc(span_length: float, span_elevation: float, catenary_constant: float) -> float:
    """
    x-coordinate of the catenary low point, measured from the x = 0 support.

    Negative (or beyond the span) for uplift conditions, where the low point
    lies outside the span.

    Args:
        span_length: Horizontal distance between supports
        span_elevation: Height of the far support above the x = 0 support
        catenary_constant: H / w

    Returns:
        Low point x-coordinate
    """
    _check_span(span_length, catenary_constant)
    elevation = float(span_elevation)

    exp_term = math.exp(span_length / catenary_constant)
    denom = catenary_constant * (1.0 - exp_term)
    if denom == 0.0:
        # exp(L/c) rounded to 1: the chord is effectively straight
        if elevation == 0.0:
            return span_length / 2.0
        raise InvalidGeometryError(
            f"Degenerate span: exp(L/c) == 1 for span_length={span_length}, "
            f"elevation={elevation}, catenary_constant={catenary_constant}"
        )

    z = elevation * math.sqrt(exp_term) / denom
    # asinh(z) == log(z + sqrt(1 + z^2))
    return span_length / 2.0 + catenary_constant * math.asinh(z)


def calculate_yc(catenary_constant: float, xc: float) -> float:
    """y-coordinate of the low point. Always <= 0 unless in uplift."""
    return -catenary_constant * (math.cosh(-xc / catenary_constant) - 1.0)


def calculate_xd(xc: float, catenary_constant: float, span_elevation: float, span_length: float) -> float:
    """Distance to the sag point (max separation from the chord). Equals Xc on level spans."""
    return xc + catenary_constant * math.asinh(span_elevation / span_length)


def calculate_arc_length(span_length: float, span_elevation: float, catenary_constant: float) -> float:
    """Total suspended wire length between the supports."""
    xc = calculate_xc(span_length, span_elevation, catenary_constant)
    return catenary_constant * (
        math.sinh((span_length - xc) / catenary_constant) + math.sinh(xc / catenary_constant)
    )


def calculate_arc_length_prime(
    tension: float,
    span_length: float,
    linear_force: float,
    span_elevation: float,
) -> float:
    """
    Derivative of arc length with respect to horizontal tension, dS/dH.

    Newton-Raphson slope term for both tension solvers. With c = H/w the arc
    length is c*(sinh(u1) + sinh(u2)), u1 = w*(L/2 - H*xi)/H and
    u2 = w*(L/2 + H*xi)/H, where xi = asinh(g)/w and
    g = sqrt(e)*h*w / ((1 - e)*H), e = exp(L*w/H). `tau` and `upsilon` are
    the derivatives of the two half-lengths.

    Args:
        tension: Horizontal tension H
        span_length: Span length L
        linear_force: Transverse load per unit length w
        span_elevation: Elevation difference h

    Returns:
        dS/dH (negative: more tension, less wire)
    """
    H = float(tension)
    L = float(span_length)
    w = float(linear_force)
    h = float(span_elevation)

    iota = math.exp(L * w / H)
    one_minus = 1.0 - iota

    kappa = iota**1.5 * h * L * w**2 / (one_minus**2 * H**3)
    eta = math.sqrt(iota) * h * L * w**2 / (2.0 * one_minus * H**3)
    mu = math.sqrt(iota) * h * w / (one_minus * H**2)
    nu = w * math.sqrt(1.0 + (iota * h**2 * w**2) / (one_minus**2 * H**2))
    xi = math.asinh((math.sqrt(iota) * h * w) / (one_minus * H)) / w

    # d(H*xi)/dH terms for each half of the span
    omikron = w * (-1.0 * (-kappa - eta - mu) * H / nu - xi) / H
    chi = w * ((-kappa - eta - mu) * H / nu + xi) / H

    u1 = w * (L / 2.0 - H * xi) / H
    u2 = w * (L / 2.0 + H * xi) / H

    tau = (H / w) * (omikron - (w / H**2) * (L / 2.0 - H * xi)) * math.cosh(u1) + math.sinh(u1) / w
    upsilon = (H / w) * (chi - (w / H**2) * (L / 2.0 + H * xi)) * math.cosh(u2) + math.sinh(u2) / w

    return tau + upsilon


def calculate_sag(catenary_constant: float, span_length: float, span_elevation: float) -> float:
    """
    Sag: the largest vertical separation between the wire and the straight
    chord joining the attachment points.
    """
    xc = calculate_xc(span_length, span_elevation, catenary_constant)
    yc = calculate_yc(catenary_constant, xc)
    xd = calculate_xd(xc, catenary_constant, span_elevation, span_length)

    chord_height = (span_elevation / span_length) * xd
    wire_height = yc + catenary_constant * (
        math.sqrt(span_length**2 + span_elevation**2) - span_length
    ) / span_length

    return chord_height - wire_height


def calculate_catenary_y(
    x: float | npt.ArrayLike,
    span_length: float,
    span_elevation: float,
    catenary_constant: float,
) -> float | npt.NDArray[np.float64]:
    """Wire height above the x = 0 support at horizontal position(s) `x`."""
    xc = calculate_xc(span_length, span_elevation, catenary_constant)
    yc = calculate_yc(catenary_constant, xc)
    y = yc + catenary_constant * (np.cosh((np.asarray(x, dtype=float) - xc) / catenary_constant) - 1.0)
    if np.ndim(y) == 0:
        return float(y)
    return y


def calculate_catenary_profile(
    span_length: float,
    span_elevation: float,
    catenary_constant: float,
    n_points: int = 101,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Sample the wire curve between the supports. Returns (x, y) arrays."""
    if n_points < 2:
        raise ValueError("n_points must be at least 2")
    x = np.linspace(0.0, span_length, num=n_points)
    y = calculate_catenary_y(x, span_length, span_elevation, catenary_constant)
    return x, np.asarray(y, dtype=float)


__all__ = [
    "calculate_xc",
    "calculate_yc",
    "calculate_xd",
    "calculate_arc_length",
    "calculate_arc_length_prime",
    "calculate_sag",
    "calculate_catenary_y",
    "calculate_catenary_profile",
]
