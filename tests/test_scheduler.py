"""Tests for deferred delivery of game-over notifications."""
import asyncio
import unittest

from pairs_game.core.rng import SeededRNG
from pairs_game.core.types import EventKind, ItemDescriptor
from pairs_game.engine.matcher import PairsMatcher
from pairs_game.engine.scheduler import AsyncioScheduler, DeferredQueue

ONE_PAIR = [ItemDescriptor(0, 0), ItemDescriptor(1, 0)]


class TestDeferredQueue(unittest.TestCase):

    def test_runs_in_fifo_order(self):
        queue = DeferredQueue()
        calls = []
        queue.call_soon(calls.append, 1)
        queue.call_soon(calls.append, 2)
        self.assertEqual(queue.pending, 2)
        self.assertEqual(calls, [])
        self.assertEqual(queue.run_pending(), 2)
        self.assertEqual(calls, [1, 2])
        self.assertEqual(queue.pending, 0)

    def test_callbacks_queued_while_running_wait_a_tick(self):
        queue = DeferredQueue()
        calls = []

        def first():
            calls.append("first")
            queue.call_soon(calls.append, "second")

        queue.call_soon(first)
        self.assertEqual(queue.run_pending(), 1)
        self.assertEqual(calls, ["first"])
        self.assertEqual(queue.run_pending(), 1)
        self.assertEqual(calls, ["first", "second"])

    def test_empty_queue(self):
        self.assertEqual(DeferredQueue().run_pending(), 0)


class TestAsyncioScheduler(unittest.TestCase):

    def test_game_over_arrives_after_one_loop_iteration(self):
        async def scenario():
            matcher = PairsMatcher(rng=SeededRNG(0), scheduler=AsyncioScheduler())
            seen = []
            for kind in EventKind:
                matcher.on(kind, lambda e: seen.append(e.kind))
            matcher.new_game(ONE_PAIR)
            matcher.select_item(0)
            matcher.select_item(1)
            before = list(seen)
            await asyncio.sleep(0)
            return before, seen

        before, after = asyncio.run(scenario())
        self.assertEqual(
            before,
            [EventKind.ITEM_ACTIVATED, EventKind.ITEM_ACTIVATED,
             EventKind.PAIR_MATCHED],
        )
        self.assertEqual(after[-1], EventKind.GAME_OVER)

    def test_explicit_loop(self):
        loop = asyncio.new_event_loop()
        try:
            matcher = PairsMatcher(
                rng=SeededRNG(0), scheduler=AsyncioScheduler(loop),
            )
            seen = []
            matcher.on(EventKind.GAME_OVER, seen.append)
            matcher.new_game(ONE_PAIR)
            matcher.select_item(1)
            matcher.select_item(0)
            self.assertEqual(seen, [])
            loop.run_until_complete(asyncio.sleep(0))
            self.assertEqual(len(seen), 1)
            self.assertEqual(seen[0].stats.attempts, 1)
        finally:
            loop.close()


if __name__ == "__main__":
    unittest.main()
