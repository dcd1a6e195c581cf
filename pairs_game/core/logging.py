"""Event-level JSONL logging and run output management."""
from __future__ import annotations

import json
import os
import time
from typing import Any

from pairs_game.core.types import (
    GameEvent,
    GameOver,
    GameResult,
    ItemActivated,
    PairMatched,
    PairMismatched,
)


class EventLogger:
    """Writes structured game events as newline-delimited JSON."""

    def __init__(self, run_dir: str):
        self.run_dir = run_dir
        os.makedirs(run_dir, exist_ok=True)
        self._events_path = os.path.join(run_dir, "events.jsonl")
        self._file = open(self._events_path, "a")

    @property
    def path(self) -> str:
        return self._events_path

    def _write(self, record: dict[str, Any]) -> None:
        record.setdefault("timestamp", time.time())
        self._file.write(json.dumps(record) + "\n")

    def log_game_start(
        self,
        game_index: int,
        card_set: str,
        layout: list[int],
    ) -> None:
        self._write({
            "event": "game_start",
            "game": game_index,
            "card_set": card_set,
            "pair_count": len(layout) // 2,
            "layout": list(layout),
        })

    def log_event(self, game_index: int, event: GameEvent) -> None:
        record: dict[str, Any] = {
            "event": event.kind.value,
            "game": game_index,
        }
        if isinstance(event, ItemActivated):
            record["item_id"] = event.item_id
        elif isinstance(event, (PairMatched, PairMismatched)):
            record["item_ids"] = list(event.item_ids)
        elif isinstance(event, GameOver):
            record["attempts"] = event.stats.attempts
            record["elapsed"] = event.stats.elapsed
        self._write(record)

    def log_give_up(self, game_index: int, attempts: int, selections: int) -> None:
        self._write({
            "event": "give_up",
            "game": game_index,
            "attempts": attempts,
            "selections": selections,
        })

    def log_result(self, result: GameResult) -> None:
        self._write({
            "event": "result",
            "game": result.game_index,
            "player_type": result.player_type,
            "card_set": result.card_set,
            "pair_count": result.pair_count,
            "attempts": result.attempts,
            "mismatches": result.mismatches,
            "elapsed": result.elapsed,
            "gave_up": result.gave_up,
            "completed": result.completed,
        })

    def close(self) -> None:
        self._file.flush()
        self._file.close()
