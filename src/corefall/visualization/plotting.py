from __future__ import annotations

import os
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from corefall.utils.io import load_trajectory

if TYPE_CHECKING:
    from corefall.core.refinement import RefinementResult


def plot_convergence(
    result: RefinementResult,
    reference: float | None = None,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot the fall-time estimate and run cost against the step size.

    Parameters
    ----------
    result : RefinementResult
        Finished refinement.
    reference : float | None
        Closed-form fall time, drawn as a horizontal line if given.
    save_path : str | None
        If given, save the figure to this path (png/svg).
    show : bool
        Whether to call plt.show().

    Returns
    -------
    fig : Figure
    """
    dt = np.array([r.time_increment for r in result.runs], dtype=float)
    est = np.array([float(r.fall_time) for r in result.runs], dtype=float)
    cost = np.array([r.wall_time for r in result.runs], dtype=float)

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True)

    axes[0].semilogx(dt, est, "o-", color="#1a73e8", lw=2, label="estimate")
    if reference is not None:
        axes[0].axhline(reference, color="#ea4335", ls="--", label="closed form")
    axes[0].set_ylabel("fall time [s]")
    axes[0].grid(True, alpha=0.3)
    axes[0].legend(loc="best")
    axes[0].set_title("Fall time vs step size")

    axes[1].loglog(dt, np.maximum(cost, 1e-9), "o-", color="#34a853", lw=2, label="run cost")
    axes[1].axhline(result.config.budget, color="#fbbc05", ls="--", label="budget")
    axes[1].set_xlabel("step [s]"); axes[1].set_ylabel("cost [s]")
    axes[1].grid(True, alpha=0.3)
    axes[1].legend(loc="best")
    axes[1].invert_xaxis()

    fig.tight_layout()
    if save_path:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def plot_trajectory(
    csv_path: str,
    radius: float | None = None,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot distance to centre and speed over time from a TrajectoryLogger CSV.

    Parameters
    ----------
    csv_path : str
        Path to logger CSV (needs 'distance' and 'velocity' columns).
    radius : float | None
        Body radius; marks the surface crossing if given.
    save_path : str | None
    show : bool

    Returns
    -------
    fig : Figure
    """
    df = load_trajectory(csv_path)
    for name in ("distance", "velocity"):
        if name not in df.columns:
            raise KeyError(f"Column '{name}' not found in CSV.")
    t = df["t"].to_numpy()

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True)

    axes[0].plot(t, df["distance"].to_numpy() / 1000.0, color="#1a73e8", lw=2)
    if radius is not None:
        axes[0].axhline(radius / 1000.0, color="#34a853", ls="--", label="surface")
        axes[0].legend(loc="best")
    axes[0].set_ylabel("distance to centre [km]")
    axes[0].grid(True, alpha=0.3)
    axes[0].set_title("Fall to centre")

    axes[1].plot(t, df["velocity"].to_numpy(), color="#ea4335", lw=2)
    axes[1].set_xlabel("t [s]"); axes[1].set_ylabel("speed [m/s]")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    if save_path:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig
