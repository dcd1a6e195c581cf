"""A single automated game, from dealing the board to the game-over event.

Usage:
    session = GameSession(matcher, MemoryPlayer(rng), ColorCardSet())
    result = session.run()
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from pairs_game.core.types import (
    BoardView,
    EventKind,
    GameEvent,
    GameOver,
    GameResult,
    GameStats,
    ItemActivated,
    ItemState,
)
from pairs_game.engine.give_up import give_up
from pairs_game.engine.matcher import PairsMatcher
from pairs_game.engine.scheduler import DeferredQueue

if TYPE_CHECKING:
    from pairs_game.cardsets.base import ItemSetProvider
    from pairs_game.core.logging import EventLogger
    from pairs_game.players.base import BasePlayer

logger = logging.getLogger(__name__)


class GameSession:
    """Plays one game of *card_set* on *matcher* with an automated player.

    The matcher must use a :class:`DeferredQueue` scheduler; the session
    flushes it after every selection so ``GameOver`` arrives one tick
    after the final match.

    Attributes:
        mismatches: number of ``PairMismatched`` events seen.
        final_stats: stats delivered with ``GameOver`` (None until then).
        gave_up: True once the solution has been replayed.
    """

    def __init__(
        self,
        matcher: PairsMatcher,
        player: BasePlayer,
        card_set: ItemSetProvider,
        event_logger: Optional[EventLogger] = None,
        game_index: int = 0,
        give_up_after: Optional[int] = None,
        give_up_delay_sec: float = 0.0,
        max_selections: Optional[int] = None,
    ):
        if not isinstance(matcher.scheduler, DeferredQueue):
            raise TypeError("GameSession needs a matcher with a DeferredQueue scheduler")
        self.matcher = matcher
        self.player = player
        self.card_set = card_set
        self.event_logger = event_logger
        self.game_index = game_index
        self.give_up_after = give_up_after
        self.give_up_delay_sec = give_up_delay_sec
        self.max_selections = max_selections

        # ── session state ─────────────────────────────────────────────────
        self.mismatches: int = 0
        self.selections: int = 0
        self.gave_up: bool = False
        self.final_stats: Optional[GameStats] = None
        self._pair_of: dict[int, int] = {}
        self._result: Optional[GameResult] = None

    # ── event handlers ────────────────────────────────────────────────────

    def _on_event(self, event: GameEvent) -> None:
        if self.event_logger:
            self.event_logger.log_event(self.game_index, event)
        if isinstance(event, ItemActivated):
            self.player.observe(event.item_id, self._pair_of[event.item_id])
        elif event.kind == EventKind.PAIR_MISMATCHED:
            self.mismatches += 1
        elif isinstance(event, GameOver):
            self.final_stats = event.stats

    # ── main loop ─────────────────────────────────────────────────────────

    def run(self) -> GameResult:
        """Play the game to the end and return the result."""
        descriptors = self.card_set.get_descriptors()
        self._pair_of = {d.id: d.pair_id for d in descriptors}

        for kind in EventKind:
            self.matcher.on(kind, self._on_event)
        try:
            layout = self.matcher.new_game(descriptors)
            if self.event_logger:
                self.event_logger.log_game_start(
                    self.game_index, self.card_set.name, layout,
                )
            self.player.start(layout, self.matcher.get_win_strategy())
            self._play()
            self.matcher.scheduler.run_pending()
        finally:
            for kind in EventKind:
                self.matcher.off(kind, self._on_event)

        stats = self.final_stats or self.matcher.get_game_stats()
        self._result = GameResult(
            game_index=self.game_index,
            player_type=self.player.player_type,
            card_set=self.card_set.name,
            pair_count=self.matcher.pair_count,
            attempts=stats.attempts,
            mismatches=self.mismatches,
            elapsed=stats.elapsed,
            gave_up=self.gave_up,
            completed=self.final_stats is not None,
            layout=layout,
        )
        if self.event_logger:
            self.event_logger.log_result(self._result)
        return self._result

    def _play(self) -> None:
        matcher = self.matcher
        while not matcher.is_over:
            pending = self._pending_item()
            attempts = matcher.get_game_stats().attempts

            if (
                self.give_up_after is not None
                and pending is None
                and attempts >= self.give_up_after
            ):
                self._give_up(attempts)
                return

            if self.max_selections is not None and self.selections >= self.max_selections:
                raise RuntimeError(
                    f"Game {self.game_index} not finished after "
                    f"{self.selections} selections"
                )

            view = BoardView(
                face_down=tuple(matcher.face_down_ids()),
                pending=pending,
                attempts=attempts,
            )
            matcher.select_item(self.player.choose(view))
            self.selections += 1
            matcher.scheduler.run_pending()

    def _give_up(self, attempts: int) -> None:
        logger.info(
            "Game %d: giving up after %d attempts", self.game_index, attempts,
        )
        made = give_up(self.matcher, delay_sec=self.give_up_delay_sec)
        self.selections += made
        self.gave_up = True
        if self.event_logger:
            self.event_logger.log_give_up(self.game_index, attempts, made)

    def _pending_item(self) -> Optional[int]:
        for item_id in self.matcher.layout:
            if self.matcher.item_state(item_id) == ItemState.ACTIVE:
                return item_id
        return None

    @property
    def result(self) -> Optional[GameResult]:
        """The session result, or None if not yet complete."""
        return self._result
