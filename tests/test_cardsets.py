"""Tests for the item set providers."""
import unittest
from collections import Counter

from pairs_game.cardsets.catalog import create_card_set
from pairs_game.cardsets.colors import COLORS, ColorCardSet
from pairs_game.cardsets.sequential import SequentialCardSet
from pairs_game.core.config import CardSetConfig
from pairs_game.core.errors import InvalidInput


def _assert_well_formed(test, descriptors):
    ids = [d.id for d in descriptors]
    test.assertEqual(len(ids), len(set(ids)))
    test.assertTrue(all(n == 2 for n in Counter(d.pair_id for d in descriptors).values()))


class TestColorCardSet(unittest.TestCase):

    def test_full_deck(self):
        deck = ColorCardSet()
        descriptors = deck.get_descriptors()
        self.assertEqual(len(descriptors), 16)
        self.assertEqual([d.id for d in descriptors], list(range(16)))
        _assert_well_formed(self, descriptors)
        self.assertEqual(deck.name, "colors")

    def test_pairs_share_a_colour(self):
        deck = ColorCardSet()
        for card in deck.get_cards():
            self.assertEqual(card.color, COLORS[card.pair_id])
        self.assertEqual(deck.color_of(0), deck.color_of(1))
        self.assertEqual(deck.color_of(15), "#808080")

    def test_subset(self):
        descriptors = ColorCardSet(pairs=3).get_descriptors()
        self.assertEqual(len(descriptors), 6)
        _assert_well_formed(self, descriptors)

    def test_bad_pairs(self):
        for bad in (0, 9, "4"):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInput):
                    ColorCardSet(pairs=bad)

    def test_descriptors_are_fresh_lists(self):
        deck = ColorCardSet()
        deck.get_descriptors().clear()
        self.assertEqual(len(deck.get_descriptors()), 16)


class TestSequentialCardSet(unittest.TestCase):

    def test_layout(self):
        descriptors = SequentialCardSet(3).get_descriptors()
        self.assertEqual(
            [(d.id, d.pair_id) for d in descriptors],
            [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)],
        )

    def test_float_truncated(self):
        self.assertEqual(SequentialCardSet(2.9).pairs_count, 2)

    def test_invalid(self):
        for bad in (0, -1, 0.5, "8", None, True):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInput):
                    SequentialCardSet(bad)


class TestCatalog(unittest.TestCase):

    def test_create(self):
        self.assertIsInstance(create_card_set(CardSetConfig()), ColorCardSet)
        seq = create_card_set(CardSetConfig(name="sequential", pairs=12))
        self.assertIsInstance(seq, SequentialCardSet)
        self.assertEqual(len(seq.get_descriptors()), 24)
        self.assertEqual(
            len(create_card_set(CardSetConfig(name="sequential")).get_descriptors()),
            16,
        )

    def test_unknown(self):
        with self.assertRaises(ValueError):
            create_card_set(CardSetConfig(name="emoji"))


if __name__ == "__main__":
    unittest.main()
