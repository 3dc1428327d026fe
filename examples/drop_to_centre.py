"""
Example: refine a drop to the centre and save logs and plots.

Runs the refinement with a smaller budget than the command-line tool,
compares the result to the closed-form fall time, writes the per-run
history and one logged trajectory, and plots both.
"""
import sys
from pathlib import Path

# Setup path for local development (not needed if installed via pip)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from corefall import (
    FallConfig,
    FallIntegrator,
    RefinementDriver,
    TrajectoryLogger,
    format_run_line,
    format_summary_line,
    reference_fall_time,
)
from corefall.utils.io import save_refinement_history
from corefall.visualization.plotting import plot_convergence, plot_trajectory

OUTPUT_DIR = Path("output") / "drop_to_centre"


def run_example():
    config = FallConfig(budget=0.1)

    driver = RefinementDriver(config, on_run=lambda run: print(format_run_line(run)))
    result = driver.run()
    print(format_summary_line(result.throughput))

    reference = reference_fall_time(config)
    error = float(result.fall_time) - reference
    print(f"[Example] Closed-form fall time: {reference:.3f}s (estimate off by {error:+.3f}s)")

    save_refinement_history(result, OUTPUT_DIR / "logs" / "refinement.csv")

    trajectory_csv = OUTPUT_DIR / "logs" / "trajectory.csv"
    with TrajectoryLogger(trajectory_csv, every=10) as logger:
        FallIntegrator(config).run(1.0, observer=logger)
    print(f"[Example] Trajectory logged: {trajectory_csv}")

    plot_convergence(
        result,
        reference=reference,
        save_path=str(OUTPUT_DIR / "plots" / "convergence.png"),
        show=False,
    )
    plot_trajectory(
        str(trajectory_csv),
        radius=config.radius,
        save_path=str(OUTPUT_DIR / "plots" / "trajectory.png"),
        show=False,
    )
    print(f"[Example] Plots saved to: {OUTPUT_DIR / 'plots'}")


if __name__ == "__main__":
    run_example()
