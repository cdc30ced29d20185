import matplotlib

matplotlib.use("Agg")  # non-interactive backend for tests/CI

import pytest

from saggy import Creep, Weather, Wire

STRINGING_TENSION = 25_000.0  # N
SPAN = 300.0  # m


@pytest.fixture
def wire() -> Wire:
    """Drake-like ACSR with a linear initial curve matching its final modulus."""
    return Wire(
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
        name="Drake",
    )


@pytest.fixture
def creep() -> Creep:
    """Strung level at 25 kN over 300 m, no creep."""
    return Creep(stringing_tension=STRINGING_TENSION, span_length=SPAN)


@pytest.fixture
def stringing_weather() -> Weather:
    """Same span, temperature and (bare) loading as the stringing condition."""
    return Weather(temperature=15.0, span_length=SPAN, name="Stringing")


@pytest.fixture
def ice_weather() -> Weather:
    """12.7 mm radial ice, no wind."""
    return Weather(temperature=0.0, span_length=SPAN, ice_radius=0.0127, name="Heavy ice")


@pytest.fixture
def wind_weather() -> Weather:
    """Light ice with transverse wind."""
    return Weather(temperature=-5.0, span_length=SPAN, ice_radius=0.00635, wind_pressure=190.0, name="Ice + wind")
