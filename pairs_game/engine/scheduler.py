"""Deferred delivery of engine notifications.

The engine never emits ``GameOver`` inline with the selection that
finished the game; it hands the emission to a :class:`Scheduler`, which
runs it on the next tick.

``DeferredQueue`` is the default and is flushed explicitly by the caller
(the simulator does this after every selection). ``AsyncioScheduler``
defers to an event loop, for callers that drive the engine from
coroutines.
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Optional


class Scheduler(ABC):
    """Interface for one-tick deferral."""

    @abstractmethod
    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        """Arrange for ``callback(*args)`` to run on the next tick."""
        ...


class DeferredQueue(Scheduler):
    """FIFO of callbacks flushed by :meth:`run_pending`."""

    def __init__(self):
        self._queue: deque[tuple[Callable[..., Any], tuple]] = deque()

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        self._queue.append((callback, args))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """Run the callbacks queued so far and return how many ran.

        Callbacks queued while this runs belong to the next tick.
        """
        count = len(self._queue)
        for _ in range(count):
            callback, args = self._queue.popleft()
            callback(*args)
        return count


class AsyncioScheduler(Scheduler):
    """Schedules callbacks on an asyncio event loop.

    Without an explicit loop, the loop running at ``call_soon`` time is
    used, so the engine must then be driven from inside a coroutine.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(callback, *args)
