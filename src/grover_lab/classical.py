"""Classical linear search over a search space.

The classical probe checks indices one by one in ascending order and stops
at the first match. Its attempt count is the 1-based position of the
target, so the expected cost is (N + 1) / 2 and the worst case is N.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .space import SearchSpace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Probe:
    """A single comparison made by the classical search."""
    index: int
    is_match: bool


@dataclass
class ClassicalSearchResult:
    """Result of a classical linear search."""
    size: int
    target: int | None
    found: int | None
    attempts: int
    checked: List[int] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.found is not None


def iter_probes(space: SearchSpace, target: Optional[int]) -> Iterator[Probe]:
    """Yield probes in index order, stopping after the first match.

    With no target (``None``) every index is probed and none matches.
    """
    for index in space:
        is_match = index == target
        yield Probe(index=index, is_match=is_match)
        if is_match:
            return


def linear_search(space: SearchSpace, target: Optional[int]) -> ClassicalSearchResult:
    """Run the classical search to completion.

    Args:
        space: Domain to enumerate
        target: Hidden index, or None when no target has been drawn

    Returns:
        ClassicalSearchResult with the number of comparisons performed
    """
    checked: List[int] = []
    found = None
    for probe in iter_probes(space, target):
        checked.append(probe.index)
        if probe.is_match:
            found = probe.index

    attempts = len(checked) if found is not None else 0
    logger.debug("classical search: size=%d target=%s attempts=%d", space.size, target, attempts)

    return ClassicalSearchResult(
        size=space.size,
        target=target,
        found=found,
        attempts=attempts,
        checked=checked,
    )


def expected_classical_attempts(size: int) -> float:
    """Average comparisons for a uniformly placed target: (N + 1) / 2."""
    if size <= 0:
        raise ValueError(f"Search space size must be positive, got {size}")
    return (size + 1) / 2
