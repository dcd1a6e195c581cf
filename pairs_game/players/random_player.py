"""Player that reveals face-down items at random and remembers nothing."""
from __future__ import annotations

from pairs_game.core.rng import SeededRNG
from pairs_game.core.types import BoardView
from pairs_game.players.base import BasePlayer


class RandomPlayer(BasePlayer):

    def __init__(self, rng: SeededRNG):
        self._rng = rng

    @property
    def player_type(self) -> str:
        return "random"

    def choose(self, view: BoardView) -> int:
        return self._rng.choice(list(view.face_down))
