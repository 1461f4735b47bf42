"""
Random sources for ant movement and placement.

The engine only ever needs one operation: pick an index uniformly from
n candidates. Anything implementing RandomSource can be plugged in, which
keeps runs reproducible under a fixed seed.
"""

from __future__ import annotations
from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    """Protocol for uniform index pickers."""

    def pick(self, n: int) -> int:
        """
        Return an integer drawn uniformly from [0, n).

        Args:
            n: Number of candidates (n >= 1)
        """
        ...


class NumpyRandomSource:
    """RandomSource backed by numpy's default generator (PCG64)."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def pick(self, n: int) -> int:
        return int(self._rng.integers(n))


def create_default_random_source(seed: int | None = None) -> NumpyRandomSource:
    """
    Factory for the default random source.

    Args:
        seed: Seed for reproducible runs. None draws fresh OS entropy.
    """
    return NumpyRandomSource(seed)
