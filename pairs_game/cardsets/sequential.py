"""Numeric deck of any size: pair k is items 2k and 2k+1."""
from __future__ import annotations

from pairs_game.cardsets.base import ItemSetProvider
from pairs_game.core.errors import InvalidInput
from pairs_game.core.types import ItemDescriptor


class SequentialCardSet(ItemSetProvider):

    def __init__(self, pairs_count=8):
        if isinstance(pairs_count, bool) or not isinstance(pairs_count, (int, float)):
            raise InvalidInput(
                f"pairs_count must be a number, got {pairs_count!r}"
            )
        # keep the integer part only
        pairs_count = int(pairs_count)
        if pairs_count <= 0:
            raise InvalidInput(
                f"pairs_count must be greater than zero, got {pairs_count}"
            )
        self.pairs_count = pairs_count

    @property
    def name(self) -> str:
        return "sequential"

    def get_descriptors(self) -> list[ItemDescriptor]:
        descriptors: list[ItemDescriptor] = []
        for pair_id in range(self.pairs_count):
            descriptors.append(ItemDescriptor(2 * pair_id, pair_id))
            descriptors.append(ItemDescriptor(2 * pair_id + 1, pair_id))
        return descriptors
