"""Search space model: the fixed domain of candidate indices."""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class SearchSpace:
    """Ordered range of integer indices ``[0, size)``.

    Example:
        >>> space = SearchSpace(8)
        >>> list(space)
        [0, 1, 2, 3, 4, 5, 6, 7]
        >>> space.label(0)
        1
    """
    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, numbers.Integral):
            raise ValueError(f"Search space size must be an integer, got {self.size!r}")
        # numpy integers are stored as plain int
        object.__setattr__(self, "size", operator.index(self.size))
        if self.size <= 0:
            raise ValueError(f"Search space size must be positive, got {self.size}")

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.size))

    def __contains__(self, index: object) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < self.size

    def indices(self) -> List[int]:
        return list(range(self.size))

    def label(self, index: int) -> int:
        """Return the 1-based label shown to users for ``index``."""
        if index not in self:
            raise ValueError(f"Index {index} is outside [0, {self.size})")
        return index + 1
