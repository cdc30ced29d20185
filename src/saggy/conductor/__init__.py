"""Conductor material collaborators: wire properties, creep and unstretched length."""

from .creep import Creep, calculate_creep_strain, calculate_original_length
from .wire import (
    STRESS_STRAIN_TERMS,
    Wire,
    calculate_elasticity,
    calculate_thermal_coefficient,
)

__all__ = [
    "STRESS_STRAIN_TERMS",
    "Wire",
    "Creep",
    "calculate_elasticity",
    "calculate_thermal_coefficient",
    "calculate_creep_strain",
    "calculate_original_length",
]
