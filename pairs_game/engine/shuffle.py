"""Board layout shuffling."""
from __future__ import annotations

from typing import Any

from pairs_game.core.rng import SeededRNG


def fisher_yates(seq: list[Any], rng: SeededRNG) -> None:
    """Shuffle *seq* in place with an unbiased Fisher-Yates permutation.

    For ``i`` from the last index down to 1 a position ``rnd`` is drawn
    uniformly from ``[0, i]`` and the two elements are swapped.
    """
    for i in range(len(seq) - 1, 0, -1):
        rnd = rng.randint(0, i)
        if rnd != i:
            seq[i], seq[rnd] = seq[rnd], seq[i]
