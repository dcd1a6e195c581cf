"""Give up: finish a game by replaying the win strategy."""
from __future__ import annotations

import asyncio
import time
from typing import Callable

from pairs_game.core.types import ItemState
from pairs_game.engine.matcher import PairsMatcher


def _solution_order(matcher: PairsMatcher) -> list[int]:
    """Remaining face-down ids in an order that only ever matches.

    The win strategy holds each pair in adjacent slots. A pair whose
    first item is already revealed goes first, so the pending turn is
    completed by its partner.
    """
    strategy = matcher.get_win_strategy()
    pairs = [strategy[i:i + 2] for i in range(0, len(strategy), 2)]
    pending = [
        p for p in pairs
        if any(matcher.item_state(i) == ItemState.ACTIVE for i in p)
    ]
    rest = [p for p in pairs if p not in pending]
    return [
        item_id
        for pair in pending + rest
        for item_id in pair
        if matcher.item_state(item_id) == ItemState.INACTIVE
    ]


def give_up(
    matcher: PairsMatcher,
    delay_sec: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Select every remaining item in solving order.

    Sleeps *delay_sec* between selections so a display can follow along.
    Returns the number of selections made.
    """
    order = _solution_order(matcher)
    for n, item_id in enumerate(order):
        if n and delay_sec > 0:
            sleep(delay_sec)
        matcher.select_item(item_id)
    return len(order)


async def give_up_async(matcher: PairsMatcher, delay_sec: float = 0.0) -> int:
    """Coroutine version of :func:`give_up`."""
    order = _solution_order(matcher)
    for n, item_id in enumerate(order):
        if n:
            await asyncio.sleep(delay_sec)
        matcher.select_item(item_id)
    return len(order)
