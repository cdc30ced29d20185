"""End-to-end sag-tension example: setup, table, structure loads and plots.

Outputs (created under `gallery/sag_tension/`):
- 01_setup.txt
- 02_sag_tension_table.txt
- 03_structure_forces.txt
- span_<case>.svg (one per weather case, final condition)
"""

from __future__ import annotations

from pathlib import Path
import logging

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for scripts/CI

import matplotlib.pyplot as plt

from saggy import Creep, Weather, Wire, analyze_span, sag_tension_table, setup_logging

SPAN = 350.0  # m
ELEVATION = 20.0  # m


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _out_dir() -> Path:
    out_dir = _project_root() / "gallery" / "sag_tension"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _write_text(path: Path, text: str) -> None:
    path.write_text(text.rstrip() + "\n", encoding="utf-8")
    print(f"Saved: {path}")


def _slug(name: str) -> str:
    return "".join(ch if ch.isalnum() else "_" for ch in name.lower()).strip("_")


def _drake() -> Wire:
    # 26/7 ACSR, initial curve as a degree-4 polynomial in percent strain
    return Wire(
        starting_temp=15.0,
        total_cross_section=4.684e-4,
        final_diameter=0.02814,
        final_linear_weight=15.97,
        outer_stress_strain=(-1.0e6, 3.8e8, -2.5e7, 0.0, 0.0),
        outer_final_modulus=4.5e10,
        outer_thermal_coefficient=2.3e-5,
        core_stress_strain=(0.0, 1.9e8, 0.0, 0.0, 0.0),
        core_final_modulus=2.0e10,
        core_thermal_coefficient=1.15e-5,
        name="Drake",
    )


def _weathers() -> list[Weather]:
    return [
        Weather(temperature=-20.0, span_length=SPAN, elevation=ELEVATION, name="Cold"),
        Weather(temperature=15.0, span_length=SPAN, elevation=ELEVATION, name="Everyday"),
        Weather(temperature=0.0, span_length=SPAN, elevation=ELEVATION, ice_radius=0.0127, name="Heavy ice"),
        Weather(
            temperature=-5.0,
            span_length=SPAN,
            elevation=ELEVATION,
            ice_radius=0.00635,
            wind_pressure=190.0,
            name="Ice + wind",
        ),
        Weather(temperature=15.0, span_length=SPAN, elevation=ELEVATION, wind_pressure=900.0, name="High wind"),
        Weather(temperature=75.0, span_length=SPAN, elevation=ELEVATION, name="Hot"),
    ]


def _format_setup(wire: Wire, creep: Creep) -> str:
    lines: list[str] = []
    lines.append("SAG-TENSION EXAMPLE - SETUP")
    lines.append("=" * 80)
    lines.append("Units: SI (m, N, Pa, degC)")
    lines.append("")
    lines.append(
        f"Wire: {wire.name}, A={wire.total_cross_section:.4e}, D={wire.final_diameter:.5f}, "
        f"w={wire.final_linear_weight:.2f} N/m"
    )
    lines.append(f"  stress-strain (Pa per % strain): {wire.stress_strain_coefficients}")
    lines.append(f"  final modulus: outer={wire.outer_final_modulus:.3e}, core={wire.core_final_modulus:.3e}")
    lines.append("")
    lines.append(
        f"Stringing: H={creep.stringing_tension:.0f} N over L={creep.span_length:.1f} m, "
        f"h={creep.elevation:.1f} m at {wire.starting_temp:g} degC"
    )
    lines.append(
        f"Creep: coefficient={creep.coefficient}, stress exponent={creep.stress_exponent}, "
        f"time exponent={creep.time_exponent}, hours={creep.hours:.0f}"
    )
    return "\n".join(lines)


def _format_table(rows: list[dict]) -> str:
    lines: list[str] = []
    lines.append("SAG-TENSION TABLE")
    lines.append("=" * 80)
    lines.append("  case           T(C)   ice(mm)  wind(Pa)   H_init(N)  sag_init(m)  H_final(N)  sag_final(m)")
    for row in rows:
        lines.append(
            f"  {row['weather']:<13} {row['temperature_C']:>5.1f}  {row['ice_radius_m'] * 1000:>7.2f}  "
            f"{row['wind_pressure_Pa']:>8.1f}  {row['initial_tension_N']:>10.0f}  {row['initial_sag_m']:>11.3f}  "
            f"{row['final_tension_N']:>10.0f}  {row['final_sag_m']:>12.3f}"
        )
    return "\n".join(lines)


def main() -> None:
    setup_logging(level=logging.INFO)
    out_dir = _out_dir()

    wire = _drake()
    creep = Creep(
        stringing_tension=28_000.0,
        span_length=SPAN,
        elevation=ELEVATION,
        coefficient=2.5e-4,
        stress_exponent=1.3,
    )
    weathers = _weathers()

    _write_text(out_dir / "01_setup.txt", _format_setup(wire, creep))
    _write_text(out_dir / "02_sag_tension_table.txt", _format_table(sag_tension_table(weathers, wire, creep)))

    lines: list[str] = ["STRUCTURE FORCES (final condition, x = 0 support)", "=" * 80]
    for weather in weathers:
        span = analyze_span(weather, wire, creep, condition="final")
        forces = span.structure_forces
        lines.append(
            f"  {weather.name:<13} V={forces.vertical:>10.0f}  L={forces.longitudinal:>10.0f}  "
            f"T={forces.tangential:>9.0f}  R={forces.resultant:>10.0f}  uplift={span.is_uplift}"
        )

        svg_path = out_dir / f"span_{_slug(weather.name)}.svg"
        ax = span.plot(show=False, save_path=svg_path)
        plt.close(ax.figure)
        print(f"Saved: {svg_path}")

    _write_text(out_dir / "03_structure_forces.txt", "\n".join(lines))


if __name__ == "__main__":
    main()
