"""Eight-colour card deck."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pairs_game.cardsets.base import ItemSetProvider
from pairs_game.core.errors import InvalidInput
from pairs_game.core.types import ItemDescriptor

COLORS = [
    "#ff0000",
    "#ffff6e",
    "#00ff00",
    "#00ffff",
    "#0000ff",
    "#ff00ff",
    "#5c4508",
    "#808080",
]


@dataclass(frozen=True)
class ColorCard:
    id: int
    pair_id: int
    color: str


class ColorCardSet(ItemSetProvider):
    """Two cards per colour, ids numbered consecutively through the deck.

    *pairs* keeps only the first n colours.
    """

    def __init__(self, pairs: Optional[int] = None):
        if pairs is None:
            pairs = len(COLORS)
        if not isinstance(pairs, int) or not 0 < pairs <= len(COLORS):
            raise InvalidInput(
                f"Colour deck holds 1 to {len(COLORS)} pairs, got {pairs!r}"
            )
        self._cards: list[ColorCard] = []
        for pair_id, color in enumerate(COLORS[:pairs]):
            self._cards.append(ColorCard(2 * pair_id, pair_id, color))
            self._cards.append(ColorCard(2 * pair_id + 1, pair_id, color))
        self._by_id = {card.id: card for card in self._cards}

    @property
    def name(self) -> str:
        return "colors"

    def get_cards(self) -> list[ColorCard]:
        return list(self._cards)

    def get_descriptors(self) -> list[ItemDescriptor]:
        return [ItemDescriptor(c.id, c.pair_id) for c in self._cards]

    def color_of(self, item_id: int) -> str:
        return self._by_id[item_id].color
