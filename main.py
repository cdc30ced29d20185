"""
Saggy Example: Final sag and structure loads for an iced, wind-blown span.

This example demonstrates:
1. Defining a conductor and its stringing condition
2. Solving one weather case for initial and final tension
3. Reading the structure forces
4. Plotting the span profile
"""
from saggy import Creep, LoadedSpan, Weather, Wire


def main() -> None:
    # 1. Conductor (Drake 26/7 ACSR, SI units)
    wire = Wire(
        starting_temp=15.0,
        total_cross_section=4.684e-4,
        final_diameter=0.02814,
        final_linear_weight=15.97,
        outer_stress_strain=(0.0, 4.2e8, 0.0, 0.0, 0.0),
        outer_final_modulus=4.5e10,
        outer_thermal_coefficient=2.3e-5,
        core_stress_strain=(0.0, 1.9e8, 0.0, 0.0, 0.0),
        core_final_modulus=2.0e10,
        core_thermal_coefficient=1.15e-5,
        name="Drake",
    )

    # 2. Strung at 25 kN over a 300 m span, 10 years of creep
    creep = Creep(stringing_tension=25_000.0, span_length=300.0, coefficient=2.5e-4)

    print(f"Wire: {wire.name}")
    print(f"Stringing tension: {creep.stringing_tension / 1000:.1f} kN")

    # 3. Weather case: 6.35 mm radial ice with 190 Pa wind at -5 degC
    weather = Weather(
        temperature=-5.0,
        span_length=300.0,
        ice_radius=0.00635,
        wind_pressure=190.0,
        name="Ice + wind",
    )

    # 4. Solve both conditions
    initial = LoadedSpan(weather, wire, creep, condition="initial")
    final = LoadedSpan(weather, wire, creep, condition="final")

    print(f"\nResults ({weather.name}):")
    print(f"  Linear load: {final.linear_force:.2f} N/m")
    print(f"  Initial: H = {initial.horizontal_tension / 1000:.2f} kN, sag = {initial.sag:.2f} m")
    print(f"  Final:   H = {final.horizontal_tension / 1000:.2f} kN, sag = {final.sag:.2f} m")

    forces = final.structure_forces
    print(f"\nStructure forces (final):")
    print(f"  Vertical: {forces.vertical / 1000:.2f} kN")
    print(f"  Longitudinal: {forces.longitudinal / 1000:.2f} kN")
    print(f"  Tangential: {forces.tangential / 1000:.2f} kN")

    # 5. Plot the span
    print("\nGenerating plot...")
    final.plot(save_path="span_profile_example.svg")


if __name__ == "__main__":
    main()
