"""
Saggy - Overhead Conductor Sag-Tension Package

Calculate horizontal tension, sag and structure loads for a single span of
overhead conductor under a weather case (temperature, wind pressure, radial
ice), for both the initial (stringing) and final (post-creep) conditions.

Example usage:
    from saggy import Weather, Wire, Creep, LoadedSpan

    # 1. Define the conductor (SI units, stress-strain in Pa per % strain)
    wire = Wire(
        starting_temp=15.0,
        total_cross_section=4.684e-4,
        final_diameter=0.02814,
        final_linear_weight=15.97,
        outer_stress_strain=(0.0, 4.5e8, 0.0, 0.0, 0.0),
        outer_final_modulus=4.5e10,
        outer_thermal_coefficient=2.3e-5,
        core_stress_strain=(0.0, 2.0e8, 0.0, 0.0, 0.0),
        core_final_modulus=2.0e10,
        core_thermal_coefficient=1.15e-5,
    )

    # 2. Stringing condition (and optional creep law)
    creep = Creep(stringing_tension=25_000.0, span_length=300.0)

    # 3. Weather case
    weather = Weather(temperature=-5.0, span_length=300.0, ice_radius=0.0127, wind_pressure=190.0)

    # 4. Solve
    span = LoadedSpan(weather, wire, creep, condition="final")
    print(f"H = {span.horizontal_tension:.0f} N, sag = {span.sag:.2f} m")
    print(span.structure_forces.info)

    # 5. Plot
    span.plot()
"""

from .analysis import Condition, LoadedSpan, analyze_span, sag_tension_table
from .catenary import (
    calculate_arc_length,
    calculate_arc_length_prime,
    calculate_catenary_profile,
    calculate_catenary_y,
    calculate_sag,
    calculate_xc,
    calculate_xd,
    calculate_yc,
)
from .common import (
    DegenerateLoadError,
    InvalidGeometryError,
    NonConvergentSolveError,
    SaggyError,
)
from .conductor import (
    Creep,
    Wire,
    calculate_creep_strain,
    calculate_elasticity,
    calculate_original_length,
    calculate_thermal_coefficient,
)
from .logging_config import setup_logging
from .plotting import plot_span_profile
from .solvers import SolverConfig, calculate_elastic_tension, calculate_initial_tension
from .structure import (
    StructureForces,
    blown_horizontal_angle,
    blown_span_elevation,
    blown_span_length,
    blown_vertical_angle,
    calculate_structure_forces,
    calculate_vertical_force,
    structure_longitudinal_force,
    structure_tangential_force,
    structure_vertical_force,
)
from .weather import (
    Weather,
    calculate_final_linear_force,
    calculate_weight_linear_force,
    calculate_wind_linear_force,
)

__all__ = [
    # Inputs
    "Weather",
    "Wire",
    "Creep",
    "SolverConfig",
    # Results
    "Condition",
    "LoadedSpan",
    "StructureForces",
    "analyze_span",
    "sag_tension_table",
    # Errors
    "SaggyError",
    "InvalidGeometryError",
    "DegenerateLoadError",
    "NonConvergentSolveError",
    # Catenary geometry
    "calculate_xc",
    "calculate_yc",
    "calculate_xd",
    "calculate_arc_length",
    "calculate_arc_length_prime",
    "calculate_sag",
    "calculate_catenary_y",
    "calculate_catenary_profile",
    # Loads
    "calculate_weight_linear_force",
    "calculate_wind_linear_force",
    "calculate_final_linear_force",
    # Conductor
    "calculate_creep_strain",
    "calculate_elasticity",
    "calculate_original_length",
    "calculate_thermal_coefficient",
    # Solvers
    "calculate_initial_tension",
    "calculate_elastic_tension",
    # Structure
    "blown_vertical_angle",
    "blown_horizontal_angle",
    "blown_span_elevation",
    "blown_span_length",
    "calculate_vertical_force",
    "structure_vertical_force",
    "structure_longitudinal_force",
    "structure_tangential_force",
    "calculate_structure_forces",
    # Plotting / logging
    "plot_span_profile",
    "setup_logging",
]

__version__ = "0.1.0"
