"""Exceptions raised by the game engine and card sets."""
from __future__ import annotations


class PairsGameError(Exception):
    """Base class for all game errors."""


class InvalidInput(PairsGameError, ValueError):
    """Item descriptors or card-set parameters are unusable."""


class UnknownItem(PairsGameError, LookupError):
    """An id that is not part of the current game was selected."""

    def __init__(self, item_id):
        super().__init__(f"Unknown item id {item_id!r} for the current game")
        self.item_id = item_id


class GameNotStarted(PairsGameError, RuntimeError):
    """An accessor was used before the first ``new_game`` call."""
