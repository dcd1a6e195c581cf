"""Abstract base class for automated players."""
from __future__ import annotations

from abc import ABC, abstractmethod

from pairs_game.core.types import BoardView


class BasePlayer(ABC):
    """Every player must implement *choose* and expose *player_type*."""

    def start(self, layout: list[int], win_strategy: list[int]) -> None:
        """Called once after the board has been dealt."""

    def observe(self, item_id: int, pair_id: int) -> None:
        """Called whenever an item is turned face-up."""

    @abstractmethod
    def choose(self, view: BoardView) -> int:
        """Return the id of the next item to reveal."""
        ...

    @property
    @abstractmethod
    def player_type(self) -> str:
        """A short identifier for this player class."""
        ...
