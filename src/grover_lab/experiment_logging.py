"""Experiment utilities for collecting search trial metrics into pandas DataFrames."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .classical import expected_classical_attempts
from .config import DEFAULT_REPEATS, DEFAULT_SIZES, SimulatorConfig
from .core import GroverSearchSimulator, optimal_iterations


def sweep_trials(
    sizes: Sequence[int] = DEFAULT_SIZES,
    repeats: int = DEFAULT_REPEATS,
    config: Optional[SimulatorConfig] = None,
) -> pd.DataFrame:
    """Run classical and quantum searches repeatedly and collect attempt counts.

    Parameters
    ----------
    sizes : Sequence[int]
        Search space sizes evaluated for the sweep.
    repeats : int
        How many fresh targets to draw per size.
    config : SimulatorConfig
        Randomness settings shared by every simulator in the sweep.
        A seeded config makes the whole sweep reproducible.
    """

    _validate_sweep(sizes, repeats)
    config = config or SimulatorConfig()
    random_source = config.make_random_source()

    records: list[dict] = []

    for size in sizes:
        simulator = GroverSearchSimulator(size, SimulatorConfig(random_source=random_source))
        for repeat in range(repeats):
            simulator.set_new_target()
            comparison = simulator.run()
            records.append(
                {
                    "size": comparison.size,
                    "repeat": repeat,
                    "target": comparison.target,
                    "classical_attempts": comparison.classical_attempts,
                    "quantum_attempts": comparison.quantum_attempts,
                    "speedup": comparison.speedup,
                }
            )

    return pd.DataFrame.from_records(records)


def summarize_attempts(df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate mean attempts per search space size."""

    if df.empty:
        return df

    summary = df.groupby("size", as_index=False).agg(
        trials=("repeat", "count"),
        classical_mean=("classical_attempts", "mean"),
        classical_max=("classical_attempts", "max"),
        quantum_mean=("quantum_attempts", "mean"),
    )
    summary["classical_expected"] = summary["size"].map(expected_classical_attempts)
    summary["speedup"] = summary["classical_mean"] / summary["quantum_mean"]
    return summary


def scaling_table(sizes: Sequence[int] = DEFAULT_SIZES) -> pd.DataFrame:
    """Deterministic attempt counts per size, without drawing targets.

    ``quantum_per_sqrt_n`` stays near pi/4 while ``classical_worst``
    grows linearly.
    """

    _validate_sweep(sizes, 1)
    size_arr = np.asarray(sizes, dtype=int)
    quantum = np.array([optimal_iterations(int(n)) for n in size_arr])

    return pd.DataFrame(
        {
            "size": size_arr,
            "classical_worst": size_arr,
            "classical_expected": (size_arr + 1) / 2,
            "quantum_attempts": quantum,
            "quantum_per_sqrt_n": quantum / np.sqrt(size_arr),
            "speedup": size_arr / quantum,
        }
    )


def _validate_sweep(sizes: Sequence[int], repeats: int) -> None:
    if len(sizes) == 0:
        raise ValueError("At least one search space size is required.")
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
