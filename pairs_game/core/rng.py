"""Seeded random number generator for reproducible layouts."""
from __future__ import annotations

import random
from typing import Optional


class SeededRNG:
    """Wrapper around random.Random for deterministic shuffles.

    A ``None`` seed draws from system entropy (interactive play).
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def choice(self, seq):
        return self._rng.choice(seq)

    def random(self) -> float:
        return self._rng.random()

    def fork(self) -> SeededRNG:
        """Create a child RNG with a derived seed for one game."""
        child_seed = self._rng.randint(0, 2**31 - 1)
        return SeededRNG(child_seed)
