"""Write summary JSON and games CSV to the run directory."""
from __future__ import annotations

import csv
import json
import os
from typing import Any

from pairs_game.core.types import GameResult


def write_summary(metrics: dict[str, Any], run_dir: str) -> str:
    """Write aggregate metrics as ``summary.json``."""
    path = os.path.join(run_dir, "summary.json")
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)
    return path


_GAME_FIELDS = [
    "game_index",
    "player_type",
    "card_set",
    "pair_count",
    "attempts",
    "mismatches",
    "elapsed",
    "gave_up",
    "completed",
]


def write_games_csv(results: list[GameResult], run_dir: str) -> str:
    """Write per-game rows as ``games.csv``."""
    path = os.path.join(run_dir, "games.csv")
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=_GAME_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow({
                "game_index": r.game_index,
                "player_type": r.player_type,
                "card_set": r.card_set,
                "pair_count": r.pair_count,
                "attempts": r.attempts,
                "mismatches": r.mismatches,
                "elapsed": round(r.elapsed, 6),
                "gave_up": r.gave_up,
                "completed": r.completed,
            })
    return path
