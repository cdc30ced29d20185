"""
Final (elastic) tension after long-term creep.

All plastic elongation is assumed complete before the weather case, with
creep as the controlling elongation, and the wire responds linearly with the
final modulus. The residual psi + H*beta - S(H) is driven to zero.
"""

from __future__ import annotations

import logging

from ..catenary import calculate_arc_length, calculate_arc_length_prime
from ..common.errors import NonConvergentSolveError
from ..conductor import (
    Creep,
    Wire,
    calculate_creep_strain,
    calculate_elasticity,
    calculate_original_length,
    calculate_thermal_coefficient,
)
from ..weather import Weather, calculate_final_linear_force
from .base import GEOMETRY_FAILURES, SolverConfig, check_iterate, damp_step, parabolic_seed

logger = logging.getLogger(__name__)

SOLVER_NAME = "elastic"


def solve_for_difference(
    tension: float,
    span_length: float,
    linear_force: float,
    elevation: float,
    psi: float,
    beta: float,
) -> float:
    """Newton step for the residual psi + H*beta - S(H)."""
    arc_length_prime = calculate_arc_length_prime(tension, span_length, linear_force, elevation)
    arc_length = calculate_arc_length(span_length, elevation, tension / linear_force)
    return (psi + tension * beta - arc_length) / (beta - arc_length_prime)


def calculate_elastic_tension(
    weather: Weather,
    wire: Wire,
    creep: Creep,
    config: SolverConfig = SolverConfig(),
) -> float:
    """
    Horizontal tension for the final (post-creep) condition.

    Args:
        weather: Weather case (temperature, span, ice, wind)
        wire: Conductor properties
        creep: Stringing condition and creep law
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

    original_length = calculate_original_length(wire, creep)
    starting_length = original_length + original_length * calculate_creep_strain(creep, wire)

    # psi: crept length at design temperature; beta: elastic compliance
    psi = starting_length + calculate_thermal_coefficient(wire) * starting_length * (
        weather.temperature - wire.starting_temp
    )
    beta = starting_length / (calculate_elasticity(wire) * wire.total_cross_section)

    inputs = {
        "span_length": span_length,
        "elevation": elevation,
        "linear_force": linear_force,
        "temperature": weather.temperature,
        "psi": psi,
        "beta": beta,
    }

    tension = parabolic_seed(
        solver=SOLVER_NAME,
        linear_force=linear_force,
        span_length=span_length,
        elevation=elevation,
        wire_length=psi,
        inputs=inputs,
    )
    logger.debug(f"Elastic tension seed {tension:.3f} N (psi {psi:.6f} m, beta {beta:.6g} m/N)")

    for iteration in range(1, config.max_iterations + 1):
        check_iterate(tension, solver=SOLVER_NAME, iterations=iteration - 1, inputs=inputs)
        try:
            difference = solve_for_difference(tension, span_length, linear_force, elevation, psi, beta)
        except GEOMETRY_FAILURES as exc:
            logger.warning(f"Elastic tension solve failed at iteration {iteration}: {exc}")
            raise NonConvergentSolveError(
                f"Geometry evaluation failed: {exc}",
                solver=SOLVER_NAME,
                iterations=iteration,
                last_tension=tension,
                inputs=inputs,
            ) from exc

        step = damp_step(tension, difference, max_halvings=config.max_step_halvings)
        if step != difference:
            logger.debug(f"Elastic tension step damped from {difference:.3f} N to {step:.3f} N")
        tension = tension - step

        if abs(difference) <= config.tolerance:
            check_iterate(tension, solver=SOLVER_NAME, iterations=iteration, inputs=inputs)
            logger.debug(f"Elastic tension converged to {tension:.3f} N in {iteration} iterations")
            return tension

    logger.warning(f"Elastic tension did not converge in {config.max_iterations} iterations")
    raise NonConvergentSolveError(
        f"No convergence within {config.max_iterations} iterations",
        solver=SOLVER_NAME,
        iterations=config.max_iterations,
        last_tension=tension,
        inputs=inputs,
    )


__all__ = ["calculate_elastic_tension", "solve_for_difference"]
