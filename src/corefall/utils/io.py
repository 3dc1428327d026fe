# src/corefall/utils/io.py
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List

import pandas as pd

if TYPE_CHECKING:
    from corefall.core.refinement import RefinementResult


def refinement_history(result: RefinementResult) -> List[Dict[str, Any]]:
    """
    One dict per run: step, estimate, cost and step counts.

    The estimate column is converted to a plain float.
    """
    return [
        {
            "time_increment": run.time_increment,
            "fall_time": float(run.fall_time),
            "wall_time": run.wall_time,
            "steps": run.steps,
            "exterior_steps": run.exterior_steps,
            "interior_steps": run.interior_steps,
        }
        for run in result.runs
    ]


def save_refinement_history(result: RefinementResult, filepath: str | Path) -> Path:
    """
    Saves the runs of a refinement to a CSV file.

    Args:
        result: Finished refinement
        filepath: Destination path (e.g., 'results/refinement.csv')
    """
    history = refinement_history(result)
    if not history:
        raise ValueError("Refinement history is empty. Nothing to save.")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(history)
    df.to_csv(path, index=False)
    print(f"[Refine] History saved to {path.absolute()}")
    return path


def load_refinement_history(filepath: str | Path) -> pd.DataFrame:
    """Read a CSV written by save_refinement_history."""
    return pd.read_csv(filepath)


def load_trajectory(filepath: str | Path) -> pd.DataFrame:
    """Read a CSV written by TrajectoryLogger."""
    df = pd.read_csv(filepath)
    if df.columns[0] != "t":
        raise ValueError("First column must be time 't'.")
    return df
