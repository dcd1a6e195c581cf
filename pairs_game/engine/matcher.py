"""The pairs-matching engine.

One :class:`PairsMatcher` owns one game at a time: the shuffled layout,
the selection state machine, pair-completion tracking, statistics and
the win strategy.

Usage:
    matcher = PairsMatcher(rng=SeededRNG(7))
    layout = matcher.new_game(ColorCardSet().get_descriptors())
    matcher.on(EventKind.PAIR_MATCHED, handler)
    matcher.select_item(layout[0])
"""
from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, Callable, Optional, Union

from pairs_game.core.errors import GameNotStarted, InvalidInput, UnknownItem
from pairs_game.core.rng import SeededRNG
from pairs_game.core.types import (
    EventKind,
    GameOver,
    GameStats,
    Item,
    ItemActivated,
    ItemDescriptor,
    ItemState,
    PairMatched,
    PairMismatched,
)
from pairs_game.engine.events import EventBus, Handler
from pairs_game.engine.scheduler import DeferredQueue, Scheduler
from pairs_game.engine.shuffle import fisher_yates

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_POLICIES = ("raise", "ignore")


def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_descriptor(raw: Any) -> ItemDescriptor:
    if isinstance(raw, ItemDescriptor):
        return raw
    if isinstance(raw, Mapping):
        pair_id = raw.get("pair_id", raw.get("pairId"))
        item_id = raw.get("id")
        if _is_id(item_id) and _is_id(pair_id):
            return ItemDescriptor(id=item_id, pair_id=pair_id)
    raise InvalidInput(f"Not an item descriptor: {raw!r}")


def validate_descriptors(descriptors: Any) -> list[ItemDescriptor]:
    """Check *descriptors* and return them as ``ItemDescriptor`` objects.

    Raises :class:`InvalidInput` for a non-sequence, an empty or
    odd-length sequence, unreadable elements or duplicate ids.
    """
    if isinstance(descriptors, (str, bytes)) or not isinstance(descriptors, Sequence):
        raise InvalidInput(
            f"Item descriptors must be a sequence, got {type(descriptors).__name__}"
        )
    if len(descriptors) == 0:
        raise InvalidInput("Item descriptors must not be empty")
    if len(descriptors) % 2 != 0:
        raise InvalidInput(
            f"Items come in pairs, got an odd count of {len(descriptors)}"
        )

    result = [_coerce_descriptor(d) for d in descriptors]
    seen: set[int] = set()
    for d in result:
        if d.id in seen:
            raise InvalidInput(f"Duplicate item id {d.id}")
        seen.add(d.id)
    return result


class PairsMatcher:
    """Game engine for a single player revealing items two at a time.

    Attributes:
        rng: source of randomness for the layout shuffle.
        scheduler: delivers ``GameOver`` one tick after the final match.
        clock: returns the current time in seconds.
        unknown_item_policy: ``"raise"`` to fail with :class:`UnknownItem`
            on ids outside the current game, ``"ignore"`` to skip them.
    """

    def __init__(
        self,
        rng: Optional[SeededRNG] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.time,
        unknown_item_policy: str = "raise",
    ):
        if unknown_item_policy not in UNKNOWN_ITEM_POLICIES:
            raise ValueError(f"Unknown item policy: {unknown_item_policy!r}")
        self.rng = rng or SeededRNG()
        self.scheduler = scheduler or DeferredQueue()
        self.clock = clock
        self.unknown_item_policy = unknown_item_policy

        self._bus = EventBus()

        # ── session state ─────────────────────────────────────────────────
        self._items: dict[int, Item] = {}
        self._layout: list[int] = []
        self._win_strategy: list[int] = []
        self._selected_id: Optional[int] = None
        self._pairs_remaining: int = 0
        self._stats: Optional[GameStats] = None
        self._generation: int = 0

    # ── subscriptions ─────────────────────────────────────────────────────

    def on(self, kind: Union[EventKind, str], handler: Handler) -> Handler:
        return self._bus.on(kind, handler)

    def off(self, kind: Union[EventKind, str], handler: Handler) -> bool:
        return self._bus.off(kind, handler)

    # ── game lifecycle ────────────────────────────────────────────────────

    def new_game(self, descriptors: Sequence[Any]) -> list[int]:
        """Start a new game and return the shuffled board order of ids.

        Any previous game is discarded, including a ``GameOver`` that
        has not been delivered yet.
        """
        checked = validate_descriptors(descriptors)

        items = [Item(d.id, d.pair_id) for d in checked]
        win_strategy = [
            i.id for i in sorted(items, key=lambda i: (i.pair_id, i.id))
        ]
        fisher_yates(items, self.rng)

        self._items = {item.id: item for item in items}
        self._layout = [item.id for item in items]
        self._win_strategy = win_strategy
        self._selected_id = None
        self._pairs_remaining = len(items) // 2
        self._stats = GameStats(start_time=self.clock())
        self._generation += 1

        logger.info(
            "New game %d with %d pairs", self._generation, self._pairs_remaining,
        )
        return list(self._layout)

    def select_item(self, item_id: int) -> None:
        """Reveal *item_id* and resolve the turn if it is the second pick."""
        item = self._lookup(item_id)
        if item is None:
            if self.unknown_item_policy == "ignore":
                logger.debug("Ignoring unknown item id %r", item_id)
                return
            raise UnknownItem(item_id)

        if item.state != ItemState.INACTIVE:
            logger.debug(
                "Item %d is already %s, nothing to do", item_id, item.state.value,
            )
            return

        # ── first pick ────────────────────────────────────────────────────
        if self._selected_id is None:
            item.state = ItemState.ACTIVE
            self._selected_id = item.id
            self._stats = replace(self._stats, attempts=self._stats.attempts + 1)
            self._bus.emit(ItemActivated(item.id))
            return

        # ── second pick: resolve ──────────────────────────────────────────
        prior = self._items[self._selected_id]
        self._selected_id = None
        pair = (prior.id, item.id)

        if prior.pair_id == item.pair_id:
            # state settles before any handler runs
            prior.state = item.state = ItemState.MATCHED
            self._pairs_remaining -= 1
            if self._pairs_remaining == 0:
                self._finish()
            self._bus.emit(ItemActivated(item.id))
            self._bus.emit(PairMatched(pair))
        else:
            prior.state = item.state = ItemState.INACTIVE
            self._bus.emit(ItemActivated(item.id))
            self._bus.emit(PairMismatched(pair))

    def _finish(self) -> None:
        end_time = self.clock()
        self._stats = replace(
            self._stats,
            end_time=end_time,
            elapsed=end_time - self._stats.start_time,
        )
        logger.info(
            "Game %d won in %d attempts (%.2fs)",
            self._generation, self._stats.attempts, self._stats.elapsed,
        )
        self.scheduler.call_soon(self._emit_game_over, self._generation, self._stats)

    def _emit_game_over(self, generation: int, stats: GameStats) -> None:
        if generation != self._generation:
            logger.debug("Dropping game over for replaced game %d", generation)
            return
        self._bus.emit(GameOver(stats))

    # ── accessors ─────────────────────────────────────────────────────────

    def _require_game(self) -> None:
        if self._stats is None:
            raise GameNotStarted("No game has been started yet")

    def get_game_stats(self) -> GameStats:
        self._require_game()
        return replace(self._stats)

    def get_win_strategy(self) -> list[int]:
        """Ids ordered by (pair_id, id): selecting them in order never mismatches."""
        self._require_game()
        return list(self._win_strategy)

    @property
    def layout(self) -> list[int]:
        return list(self._layout)

    @property
    def pair_count(self) -> int:
        return len(self._layout) // 2

    @property
    def pairs_remaining(self) -> int:
        return self._pairs_remaining

    @property
    def is_over(self) -> bool:
        return self._stats is not None and self._pairs_remaining == 0

    def _lookup(self, item_id: Any) -> Optional[Item]:
        if not _is_id(item_id):
            return None
        return self._items.get(item_id)

    def item_state(self, item_id: int) -> ItemState:
        item = self._lookup(item_id)
        if item is None:
            raise UnknownItem(item_id)
        return item.state

    def face_down_ids(self) -> list[int]:
        """Ids still selectable, in board order."""
        return [
            i for i in self._layout
            if self._items[i].state == ItemState.INACTIVE
        ]
