"""Grover Search Lab - classical vs quantum search toolkit.

This package provides tools for:
- A simulated Grover search over a small fixed search space
- Classical linear search for comparison
- Trial sweeps collected into pandas DataFrames

Modules:
- grover_lab.core: GroverSearchSimulator and the iteration formula
- grover_lab.classical: Linear scan model
- grover_lab.session: Presentation-side search state
- grover_lab.experiment_logging: Sweeps and summaries
- grover_lab.cli: Typer command line interface
"""

__all__ = [
    # Core model
    "GroverSearchSimulator",
    "SearchComparison",
    "SimulatorState",
    "SearchSpace",
    "optimal_iterations",
    # Classical search
    "ClassicalSearchResult",
    "linear_search",
    "expected_classical_attempts",
    # Configuration
    "SimulatorConfig",
    "DEFAULT_SIZE",
    # Presentation state
    "SearchSession",
    # Experiments
    "sweep_trials",
    "summarize_attempts",
    "scaling_table",
]

from .classical import ClassicalSearchResult, expected_classical_attempts, linear_search
from .config import DEFAULT_SIZE, SimulatorConfig
from .core import GroverSearchSimulator, SearchComparison, SimulatorState, optimal_iterations
from .experiment_logging import scaling_table, summarize_attempts, sweep_trials
from .session import SearchSession
from .space import SearchSpace
