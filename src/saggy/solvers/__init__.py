"""Horizontal tension solvers (initial and final/elastic conditions)."""

from .base import SolverConfig
from .elastic import calculate_elastic_tension, solve_for_difference
from .initial import calculate_initial_tension

__all__ = [
    "SolverConfig",
    "calculate_initial_tension",
    "calculate_elastic_tension",
    "solve_for_difference",
]
