"""Grover search simulator core.

The simulator does not evolve a quantum state. It models Grover's quadratic
speedup with the closed-form optimal iteration count and reports that count
as the number of quantum attempts:

- Classical: O(N) comparisons, (N + 1) / 2 on average
- Quantum: about (pi/4) * sqrt(N) iterations for a single marked item
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .classical import ClassicalSearchResult, linear_search
from .config import SimulatorConfig
from .space import SearchSpace

logger = logging.getLogger(__name__)


class SimulatorState(str, Enum):
    UNINITIALIZED = "uninitialized"
    TARGET_SET = "target_set"


@dataclass
class SearchComparison:
    """Classical and quantum attempt counts for one target."""
    size: int
    target: int
    classical_attempts: int
    quantum_attempts: int

    @property
    def speedup(self) -> float:
        return self.classical_attempts / self.quantum_attempts


def optimal_iterations(size: int) -> int:
    """Calculate the modelled number of Grover iterations.

    The optimal number is approximately (pi/4) * sqrt(N) for a single
    marked item among N. The result is rounded, floored to 1 and capped
    at the classical worst case N.

    Args:
        size: Search space size N

    Returns:
        Number of iterations in [1, N]
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
        raise ValueError(f"Search space size must be a positive integer, got {size!r}")
    size = operator.index(size)
    estimate = int(round(math.pi / 4 * math.sqrt(size)))
    return max(1, min(size, estimate))


class GroverSearchSimulator:
    """Simulated Grover search over a small fixed search space.

    Example:
        >>> sim = GroverSearchSimulator(8, SimulatorConfig(seed=7))
        >>> sim.set_new_target()
        >>> found = sim.quantum_search()
        >>> found == sim.get_target(), sim.quantum_attempts
        (True, 2)
    """

    def __init__(self, size: int, config: Optional[SimulatorConfig] = None):
        """Initialize the simulator.

        Args:
            size: Number of candidate indices N (must be positive)
            config: Randomness settings. Defaults to an unseeded generator.
        """
        self.space = SearchSpace(size)
        self.config = config or SimulatorConfig()
        self._random = self.config.make_random_source()
        self._target: int | None = None
        self._quantum_attempts = 0

    @property
    def size(self) -> int:
        return self.space.size

    @property
    def quantum_attempts(self) -> int:
        return self._quantum_attempts

    @property
    def state(self) -> SimulatorState:
        if self._target is None:
            return SimulatorState.UNINITIALIZED
        return SimulatorState.TARGET_SET

    def set_new_target(self) -> None:
        """Draw a new hidden target uniformly from [0, N).

        Each draw is independent of the previous target. The quantum
        attempt counter is cleared.
        """
        value = self._random()
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Random source must return a float in [0, 1), got {value!r}")

        # floor(value * N) can round up to N for values just below 1.0
        target = min(int(value * self.size), self.size - 1)

        self._target = target
        self._quantum_attempts = 0
        logger.debug("new target drawn: %d (size=%d)", target, self.size)

    def get_target(self) -> int | None:
        """Return the current target, or None if no target has been drawn."""
        return self._target

    def quantum_search(self) -> int | None:
        """Run the simulated quantum search.

        Amplitude amplification is assumed to converge, so the returned
        value is always the current target. Calling this before a target
        exists is a no-op that returns None.
        """
        if self._target is None:
            logger.warning("quantum_search() called before set_new_target(); ignoring")
            return None

        self._quantum_attempts = optimal_iterations(self.size)
        logger.debug(
            "quantum search: size=%d target=%d attempts=%d",
            self.size, self._target, self._quantum_attempts,
        )
        return self._target

    def classical_search(self) -> ClassicalSearchResult:
        """Run the classical linear scan against the current target."""
        return linear_search(self.space, self._target)

    def run(self) -> SearchComparison:
        """Run both searches for the current target.

        Raises:
            RuntimeError: If no target has been drawn yet
        """
        if self._target is None:
            raise RuntimeError("No target set. Call set_new_target() first.")

        classical = self.classical_search()
        self.quantum_search()

        return SearchComparison(
            size=self.size,
            target=self._target,
            classical_attempts=classical.attempts,
            quantum_attempts=self._quantum_attempts,
        )

    def __repr__(self) -> str:
        return (
            f"GroverSearchSimulator(size={self.size}, state={self.state.value}, "
            f"quantum_attempts={self._quantum_attempts})"
        )
