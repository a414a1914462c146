"""Presentation-side search session.

A session owns one simulator for its lifetime and keeps the state a front
end needs to render: which cells have been checked, which search ran last
and the attempt counts of each search.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from .classical import Probe, iter_probes
from .config import DEFAULT_SIZE, SimulatorConfig
from .core import GroverSearchSimulator

logger = logging.getLogger(__name__)

CheckCallback = Callable[[Probe], None]


class SearchType(str, Enum):
    CLASSICAL = "classical"
    QUANTUM = "quantum"


class CellStatus(str, Enum):
    UNCHECKED = "unchecked"
    CHECKED_CLASSICAL = "checked_classical"
    CHECKED_QUANTUM = "checked_quantum"
    FOUND = "found"


class SearchSession:
    """State of one classical-vs-quantum search round.

    Example:
        >>> session = SearchSession(config=SimulatorConfig(seed=1))
        >>> session.start_new_search()
        >>> session.run_classical_search() == session.target + 1
        True

    When ``simulator`` is given it is used as is, including any target it
    already holds, and ``size`` and ``config`` are ignored.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        config: Optional[SimulatorConfig] = None,
        simulator: Optional[GroverSearchSimulator] = None,
    ):
        self.simulator = simulator or GroverSearchSimulator(size, config)
        self.classical_attempts = 0
        self.quantum_attempts = 0
        self.search_type: SearchType | None = None
        self.checked: List[int] = []
        self.is_searching = False

    @property
    def size(self) -> int:
        return self.simulator.size

    @property
    def target(self) -> int | None:
        return self.simulator.get_target()

    def start_new_search(self) -> None:
        """Draw a new target and clear all per-round state."""
        self.simulator.set_new_target()
        self.classical_attempts = 0
        self.quantum_attempts = 0
        self.search_type = None
        self.checked = []
        self.is_searching = False
        logger.debug("new search round: size=%d", self.size)

    def run_classical_search(self, on_check: Optional[CheckCallback] = None) -> int:
        """Probe cells one by one until the target is found.

        Args:
            on_check: Called after each probe, e.g. to redraw and pause

        Returns:
            Number of classical attempts (0 if no target is set)
        """
        self.is_searching = True
        self.search_type = SearchType.CLASSICAL
        self.checked = []

        try:
            for probe in iter_probes(self.simulator.space, self.target):
                self.checked.append(probe.index)
                if on_check is not None:
                    on_check(probe)
                if probe.is_match:
                    self.classical_attempts = probe.index + 1
        finally:
            self.is_searching = False

        return self.classical_attempts

    def run_quantum_search(self) -> int | None:
        """Mark every cell as examined at once and run the quantum model.

        Returns:
            The found target, or None if no target is set
        """
        self.search_type = SearchType.QUANTUM
        self.checked = self.simulator.space.indices()

        found = self.simulator.quantum_search()
        self.quantum_attempts = self.simulator.quantum_attempts
        return found

    def cell_status(self, index: int) -> CellStatus:
        """Return how a grid cell should be rendered."""
        if index not in self.checked:
            return CellStatus.UNCHECKED
        if index == self.target and not self.is_searching:
            return CellStatus.FOUND
        if self.search_type is SearchType.QUANTUM:
            return CellStatus.CHECKED_QUANTUM
        return CellStatus.CHECKED_CLASSICAL
