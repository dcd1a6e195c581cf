"""Tests for the Fisher-Yates layout shuffle."""
import unittest
from itertools import permutations

from pairs_game.core.rng import SeededRNG
from pairs_game.engine.shuffle import fisher_yates


class _ScriptedRNG:
    """Returns preset draws and records the requested ranges."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.ranges = []

    def randint(self, a, b):
        self.ranges.append((a, b))
        return self._draws.pop(0)


class TestFisherYates(unittest.TestCase):

    def test_is_permutation(self):
        seq = list(range(16))
        fisher_yates(seq, SeededRNG(5))
        self.assertEqual(sorted(seq), list(range(16)))

    def test_deterministic_for_seed(self):
        a, b = list(range(10)), list(range(10))
        fisher_yates(a, SeededRNG(11))
        fisher_yates(b, SeededRNG(11))
        self.assertEqual(a, b)

    def test_draw_ranges_descend_from_last_index(self):
        rng = _ScriptedRNG([0, 0, 0])
        seq = ["a", "b", "c", "d"]
        fisher_yates(seq, rng)
        self.assertEqual(rng.ranges, [(0, 3), (0, 2), (0, 1)])
        # i=3 swaps with 0, i=2 swaps with 0, i=1 swaps with 0
        self.assertEqual(seq, ["b", "c", "d", "a"])

    def test_draw_equal_to_index_leaves_element(self):
        rng = _ScriptedRNG([3, 2, 1])
        seq = [1, 2, 3, 4]
        fisher_yates(seq, rng)
        self.assertEqual(seq, [1, 2, 3, 4])

    def test_all_orders_reachable(self):
        rng = SeededRNG(0)
        seen = set()
        for _ in range(600):
            seq = [0, 1, 2]
            fisher_yates(seq, rng)
            seen.add(tuple(seq))
        self.assertEqual(seen, set(permutations([0, 1, 2])))

    def test_short_sequences(self):
        empty, single = [], [7]
        fisher_yates(empty, SeededRNG(0))
        fisher_yates(single, SeededRNG(0))
        self.assertEqual(empty, [])
        self.assertEqual(single, [7])


if __name__ == "__main__":
    unittest.main()
