"""Tests for aggregate game metrics."""
import unittest

from pairs_game.core.types import GameResult
from pairs_game.evaluation.metrics import compute_metrics


def _result(attempts, mismatches, pair_count=8, elapsed=10.0, gave_up=False):
    return GameResult(
        game_index=0,
        player_type="memory",
        card_set="colors",
        pair_count=pair_count,
        attempts=attempts,
        mismatches=mismatches,
        elapsed=elapsed,
        gave_up=gave_up,
    )


class TestComputeMetrics(unittest.TestCase):

    def test_basic(self):
        metrics = compute_metrics([
            _result(8, 0, elapsed=4.0),
            _result(12, 4, elapsed=6.0),
            _result(16, 8, elapsed=8.0, gave_up=True),
        ])
        self.assertEqual(metrics["total_games"], 3)
        self.assertEqual(metrics["completed_games"], 3)
        self.assertAlmostEqual(metrics["give_up_rate"], 1 / 3, places=3)
        self.assertEqual(metrics["avg_attempts"], 12)
        self.assertEqual(metrics["median_attempts"], 12)
        self.assertEqual(metrics["min_attempts"], 8)
        self.assertEqual(metrics["max_attempts"], 16)
        self.assertEqual(metrics["avg_mismatches"], 4)
        self.assertAlmostEqual(
            metrics["avg_efficiency"], (1 + 8 / 12 + 0.5) / 3, places=3,
        )
        self.assertEqual(metrics["avg_elapsed_sec"], 6.0)
        self.assertGreater(metrics["attempts_std"], 0)

    def test_single_game_has_no_spread(self):
        metrics = compute_metrics([_result(8, 0)])
        self.assertEqual(metrics["attempts_std"], 0)
        self.assertEqual(metrics["avg_efficiency"], 1.0)

    def test_empty(self):
        metrics = compute_metrics([])
        self.assertEqual(metrics["total_games"], 0)
        self.assertEqual(metrics["avg_attempts"], 0)


if __name__ == "__main__":
    unittest.main()
