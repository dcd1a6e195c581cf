"""Player with a bounded memory of revealed items."""
from __future__ import annotations

from collections import OrderedDict
from typing import Optional

from pairs_game.core.rng import SeededRNG
from pairs_game.core.types import BoardView
from pairs_game.players.base import BasePlayer


class MemoryStore:
    """Remembers the pair ids of the *k* most recently revealed items.

    ``k=None`` never forgets.
    """

    def __init__(self, k: Optional[int] = None):
        self.k = k
        self._seen: OrderedDict[int, int] = OrderedDict()

    def add(self, item_id: int, pair_id: int) -> None:
        self._seen.pop(item_id, None)
        self._seen[item_id] = pair_id
        if self.k is not None:
            while len(self._seen) > self.k:
                self._seen.popitem(last=False)

    def pair_of(self, item_id: int) -> Optional[int]:
        return self._seen.get(item_id)

    def known(self) -> dict[int, int]:
        return dict(self._seen)

    def clear(self) -> None:
        self._seen.clear()


class MemoryPlayer(BasePlayer):
    """Completes pairs it remembers, otherwise explores unseen items.

    On a second pick the player takes the remembered partner of the
    pending item if there is one. On a first pick it opens a pair whose
    two items it remembers. Failing that it reveals an item it has not
    seen, and only picks a seen one when nothing unseen is left.
    """

    def __init__(self, rng: SeededRNG, memory_k: Optional[int] = None):
        self._rng = rng
        self._memory = MemoryStore(k=memory_k)

    @property
    def player_type(self) -> str:
        return "memory"

    def start(self, layout: list[int], win_strategy: list[int]) -> None:
        self._memory.clear()

    def observe(self, item_id: int, pair_id: int) -> None:
        self._memory.add(item_id, pair_id)

    def choose(self, view: BoardView) -> int:
        face_down = list(view.face_down)
        known = {i: p for i, p in self._memory.known().items() if i in face_down}

        if view.pending is not None:
            pending_pair = self._memory.pair_of(view.pending)
            for item_id, pair_id in known.items():
                if pair_id == pending_pair:
                    return item_id
        else:
            by_pair: dict[int, list[int]] = {}
            for item_id, pair_id in known.items():
                by_pair.setdefault(pair_id, []).append(item_id)
            for ids in by_pair.values():
                if len(ids) == 2:
                    return ids[0]

        unseen = [i for i in face_down if i not in known]
        if unseen:
            return self._rng.choice(unseen)
        return self._rng.choice(face_down)
