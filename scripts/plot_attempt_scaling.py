#!/usr/bin/env python3
"""Plot classical vs quantum attempt counts against search space size.

Usage:
    python scripts/plot_attempt_scaling.py
    python scripts/plot_attempt_scaling.py --max-qubits 10 --repeats 200 --seed 42
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from grover_lab import SimulatorConfig, scaling_table, summarize_attempts, sweep_trials


def main():
    parser = argparse.ArgumentParser(description="Classical vs quantum attempt scaling figure")
    parser.add_argument(
        "--max-qubits", type=int, default=8,
        help="Largest search space is 2^max_qubits (default: 8)"
    )
    parser.add_argument(
        "--repeats", type=int, default=100,
        help="Random targets per size for the classical mean (default: 100)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--output", type=Path, default=project_root / "docs" / "figures" / "attempt_scaling.png",
        help="Output image path"
    )
    args = parser.parse_args()

    sizes = [2 ** k for k in range(1, args.max_qubits + 1)]
    table = scaling_table(sizes)
    summary = summarize_attempts(
        sweep_trials(sizes, repeats=args.repeats, config=SimulatorConfig(seed=args.seed))
    )

    fig, ax = plt.subplots(figsize=(6, 4))

    ax.plot(table["size"], table["classical_worst"], "o--", color="#7f8c8d", label="Classical (worst)")
    ax.plot(summary["size"], summary["classical_mean"], "o-", color="#e67e22", label="Classical (mean)")
    ax.plot(table["size"], table["quantum_attempts"], "s-", color="#8e44ad", label="Quantum (Grover)")

    # Reference curve
    n = np.linspace(min(sizes), max(sizes), 200)
    ax.plot(n, np.pi / 4 * np.sqrt(n), ":", color="#8e44ad", alpha=0.6, label=r"$\frac{\pi}{4}\sqrt{N}$")

    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xlabel("Search space size $N$", fontsize=12)
    ax.set_ylabel("Attempts", fontsize=12)
    ax.set_title("Classical vs Quantum Search Attempts", fontsize=12)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left", fontsize=10)

    plt.tight_layout()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(args.output, dpi=300, bbox_inches="tight")
    print(f"Saved: {args.output}")


if __name__ == "__main__":
    main()
