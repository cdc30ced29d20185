"""
Initial (stringing) tension from the initial stress-strain curve.

No permanent elongation has happened yet, but the wire is not linear-elastic.
Substituting stress = H/A and percent strain = (S(H)/L0 - 1)*100 into the
degree-4 stress-strain polynomial leaves one unknown, the horizontal tension
H, which is found with Newton-Raphson.
"""

from __future__ import annotations

import logging

import numpy as np

from ..catenary import calculate_arc_length, calculate_arc_length_prime
from ..common.errors import NonConvergentSolveError
from ..conductor import Creep, Wire, calculate_original_length, calculate_thermal_coefficient
from ..weather import Weather, calculate_final_linear_force
from .base import GEOMETRY_FAILURES, SolverConfig, check_iterate, damp_step, parabolic_seed

logger = logging.getLogger(__name__)

SOLVER_NAME = "initial"


def calculate_initial_tension(
    weather: Weather,
    wire: Wire,
    creep: Creep,
    config: SolverConfig = SolverConfig(),
) -> float:
    """
    Horizontal tension on the initial stress-strain curve (1-hour creep /
    stringing tension).

    Args:
        weather: Weather case (temperature, span, ice, wind)
        wire: Conductor properties
        creep: Stringing condition used to derive the unstretched length
        config: Newton-Raphson tolerance and iteration cap

    Returns:
        Horizontal tension (N)

    Raises:
        DegenerateLoadError: Zero combined load
        NonConvergentSolveError: No convergence within `config.max_iterations`
            or a non-physical iterate
    """
    linear_force = calculate_final_linear_force(weather, wire)
    span_length = weather.span_length
    elevation = weather.elevation
    area = wire.total_cross_section

    original_length = calculate_original_length(wire, creep)
    length = original_length + calculate_thermal_coefficient(wire) * original_length * (
        weather.temperature - wire.starting_temp
    )

    inputs = {
        "span_length": span_length,
        "elevation": elevation,
        "linear_force": linear_force,
        "temperature": weather.temperature,
        "wire_length": length,
    }

    tension = parabolic_seed(
        solver=SOLVER_NAME,
        linear_force=linear_force,
        span_length=span_length,
        elevation=elevation,
        wire_length=length,
        inputs=inputs,
    )
    logger.debug(f"Initial tension seed {tension:.3f} N (wire length {length:.6f} m)")

    stress = np.polynomial.Polynomial(wire.stress_strain_coefficients)
    stress_slope = stress.deriv()

    for iteration in range(1, config.max_iterations + 1):
        check_iterate(tension, solver=SOLVER_NAME, iterations=iteration - 1, inputs=inputs)
        try:
            arc_length = calculate_arc_length(span_length, elevation, tension / linear_force)
            arc_length_prime = calculate_arc_length_prime(tension, span_length, linear_force, elevation)

            strain = (arc_length / length - 1.0) * 100.0
            strain_prime = arc_length_prime / length * 100.0

            function = -tension / area + float(stress(strain))
            function_prime = -1.0 / area + float(stress_slope(strain)) * strain_prime

            newton_diff = function / function_prime
        except GEOMETRY_FAILURES as exc:
            logger.warning(f"Initial tension solve failed at iteration {iteration}: {exc}")
            raise NonConvergentSolveError(
                f"Geometry evaluation failed: {exc}",
                solver=SOLVER_NAME,
                iterations=iteration,
                last_tension=tension,
                inputs=inputs,
            ) from exc

        step = damp_step(tension, newton_diff, max_halvings=config.max_step_halvings)
        if step != newton_diff:
            logger.debug(f"Initial tension step damped from {newton_diff:.3f} N to {step:.3f} N")
        tension = tension - step

        if abs(newton_diff) <= config.tolerance:
            check_iterate(tension, solver=SOLVER_NAME, iterations=iteration, inputs=inputs)
            logger.debug(f"Initial tension converged to {tension:.3f} N in {iteration} iterations")
            return tension

    logger.warning(f"Initial tension did not converge in {config.max_iterations} iterations")
    raise NonConvergentSolveError(
        f"No convergence within {config.max_iterations} iterations",
        solver=SOLVER_NAME,
        iterations=config.max_iterations,
        last_tension=tension,
        inputs=inputs,
    )


__all__ = ["calculate_initial_tension"]
