"""Card set lookup by configured name."""
from __future__ import annotations

from pairs_game.cardsets.base import ItemSetProvider
from pairs_game.cardsets.colors import ColorCardSet
from pairs_game.cardsets.sequential import SequentialCardSet
from pairs_game.core.config import CardSetConfig

CARD_SETS = ("colors", "sequential")


def create_card_set(config: CardSetConfig) -> ItemSetProvider:
    if config.name == "colors":
        return ColorCardSet(pairs=config.pairs)
    if config.name == "sequential":
        if config.pairs is None:
            return SequentialCardSet()
        return SequentialCardSet(config.pairs)
    raise ValueError(f"Unknown card set: {config.name}")
