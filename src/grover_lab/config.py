"""Configuration defaults for the Grover search lab."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

DEFAULT_SIZE = 8  # 検索空間の大きさ (デモでは 1..8 を表示)
DEFAULT_SIZES = (4, 8, 16, 64)
DEFAULT_REPEATS = 100
DEFAULT_CHECK_DELAY = 0.3  # 古典探索の1ステップごとの表示間隔 [s]

RandomSource = Callable[[], float]


@dataclass(frozen=True)
class SimulatorConfig:
    """Settings for a simulator instance.

    Parameters
    ----------
    seed : int, optional
        Seed for the internal ``random.Random`` generator.
    random_source : callable, optional
        Function returning a float in [0, 1). Takes precedence over ``seed``.
    """

    seed: Optional[int] = None
    random_source: Optional[RandomSource] = None

    def make_random_source(self) -> RandomSource:
        if self.random_source is not None:
            return self.random_source
        return random.Random(self.seed).random
