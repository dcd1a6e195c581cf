"""Player that follows the engine's win strategy."""
from __future__ import annotations

from pairs_game.core.types import BoardView
from pairs_game.players.base import BasePlayer


class SolverPlayer(BasePlayer):
    """Never mismatches: picks items in (pair_id, id) order."""

    def __init__(self):
        self._strategy: list[int] = []
        self._partner: dict[int, int] = {}

    @property
    def player_type(self) -> str:
        return "solver"

    def start(self, layout: list[int], win_strategy: list[int]) -> None:
        self._strategy = list(win_strategy)
        self._partner = {}
        for i in range(0, len(win_strategy), 2):
            a, b = win_strategy[i], win_strategy[i + 1]
            self._partner[a] = b
            self._partner[b] = a

    def choose(self, view: BoardView) -> int:
        if view.pending is not None:
            return self._partner[view.pending]
        face_down = set(view.face_down)
        for item_id in self._strategy:
            if item_id in face_down:
                return item_id
        raise RuntimeError("No face-down item left to choose")
