"""
Plotting helpers for loaded spans.

All save outputs are forced to `.svg` when `save_path` is provided.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np

from .catenary import calculate_catenary_profile, calculate_catenary_y, calculate_xc, calculate_xd

if TYPE_CHECKING:
    from .analysis import LoadedSpan


def plot_span_profile(
    result: "LoadedSpan",
    *,
    chord: bool = True,
    low_point: bool = True,
    n_points: int = 201,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    length_unit: str = "m",
) -> plt.Axes:
    """Plot the wire curve in its loaded plane with the chord and sag."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    L = result.span_length
    h = result.elevation
    c = result.catenary_constant

    x, y = calculate_catenary_profile(L, h, c, n_points=n_points)
    ax.plot(x, y, color="black", linewidth=2.0, label="Wire")

    if chord:
        ax.plot([0.0, L], [0.0, h], color="gray", linestyle="--", linewidth=1.0, label="Chord")

        xc = calculate_xc(L, h, c)
        xd = calculate_xd(xc, c, h, L)
        if 0.0 <= xd <= L:
            y_wire = calculate_catenary_y(xd, L, h, c)
            y_chord = h / L * xd
            ax.plot([xd, xd], [y_wire, y_chord], color="darkred", linewidth=1.5)
            ax.annotate(
                f"sag = {result.sag:.2f} {length_unit}",
                xy=(xd, (y_wire + y_chord) / 2.0),
                xytext=(8, 0),
                textcoords="offset points",
                color="darkred",
                fontsize=9,
                va="center",
            )

    if low_point:
        xc, yc = result.low_point
        if 0.0 <= xc <= L:
            ax.plot([xc], [yc], marker="o", color="tab:blue", zorder=3, label="Low point")

    ax.plot([0.0, L], [0.0, h], linestyle="none", marker="s", markersize=8, color="dimgray", zorder=4)

    y_all = np.append(y, [0.0, h])
    pad = 0.1 * max(float(np.ptp(y_all)), 1.0)
    ax.set_ylim(float(np.min(y_all)) - pad, float(np.max(y_all)) + pad)

    name = result.weather.name or f"{result.weather.temperature:g} degC"
    ax.set_title(
        f"{name} ({result.condition}) - H = {result.horizontal_tension:.0f} N, sag = {result.sag:.2f} {length_unit}"
    )
    ax.set_xlabel(f"x ({length_unit})")
    ax.set_ylabel(f"y ({length_unit})")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best", fontsize=8)

    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()

    return ax


__all__ = ["plot_span_profile"]
