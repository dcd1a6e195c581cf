"""Abstract base class for item set providers."""
from __future__ import annotations

from abc import ABC, abstractmethod

from pairs_game.core.types import ItemDescriptor


class ItemSetProvider(ABC):
    """Every card set must implement *get_descriptors* and expose *name*.

    Descriptors come two per ``pair_id`` with unique ids.
    """

    @abstractmethod
    def get_descriptors(self) -> list[ItemDescriptor]:
        """Return a fresh list of the playable items."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """A short identifier for this card set."""
        ...
