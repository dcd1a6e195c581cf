"""Compute aggregate evaluation metrics from game results."""
from __future__ import annotations

import statistics
from typing import Any

from pairs_game.core.types import GameResult


def compute_metrics(results: list[GameResult]) -> dict[str, Any]:
    """Return a flat dict of summary metrics suitable for JSON serialisation."""
    if not results:
        return _empty_metrics()

    total = len(results)
    completed = [r for r in results if r.completed]
    gave_up = sum(1 for r in results if r.gave_up)

    attempts = [r.attempts for r in results]
    mismatches = [r.mismatches for r in results]
    # pairs found per attempt; 1.0 is a perfect game
    efficiency = [r.pair_count / r.attempts for r in results if r.attempts]
    elapsed = [r.elapsed for r in completed]

    return {
        "total_games": total,
        "completed_games": len(completed),
        "give_up_rate": round(gave_up / total, 4),
        "avg_attempts": round(statistics.mean(attempts), 2),
        "median_attempts": round(statistics.median(attempts), 2),
        "attempts_std": (
            round(statistics.stdev(attempts), 2) if len(attempts) > 1 else 0
        ),
        "min_attempts": min(attempts),
        "max_attempts": max(attempts),
        "avg_mismatches": round(statistics.mean(mismatches), 2),
        "avg_efficiency": (
            round(statistics.mean(efficiency), 4) if efficiency else 0
        ),
        "avg_elapsed_sec": round(statistics.mean(elapsed), 4) if elapsed else 0,
    }


def _empty_metrics() -> dict[str, Any]:
    return {
        "total_games": 0,
        "completed_games": 0,
        "give_up_rate": 0,
        "avg_attempts": 0,
        "median_attempts": 0,
        "attempts_std": 0,
        "min_attempts": 0,
        "max_attempts": 0,
        "avg_mismatches": 0,
        "avg_efficiency": 0,
        "avg_elapsed_sec": 0,
    }
