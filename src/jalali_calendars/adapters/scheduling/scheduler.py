# src/jalali_calendars/adapters/scheduling/scheduler.py
"""
Scheduler - Deferred Callbacks for Settle Delays and Debouncing

The synchronization layer never sleeps or blocks. Work that has to happen
"a little later" (the initial list alignment after layout settles, the
debounced visible-section handling) is handed to a Scheduler, which returns a
handle that can be cancelled.

- AsyncioScheduler runs callbacks on an asyncio event loop (production use).
- ManualScheduler keeps a virtual clock that tests advance explicitly.

Files that USE this module:
- jalali_calendars.application.sync_coordinator (settle delay and debounce)
- jalali_calendars.app (CalendarProvider injects a scheduler)
- tests.* (ManualScheduler drives virtual time)

Files that this module USES:
- asyncio (event loop timers)
"""
from __future__ import annotations

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple


class ScheduledHandle(ABC):
    """Handle of a scheduled callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the callback; cancelling twice or after it ran is a no-op."""
        raise NotImplementedError


class Scheduler(ABC):
    """Capability to run a callback after a delay on the event thread."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        """
        Schedule callback to run once after delay seconds.

        Args:
            delay: Delay in seconds (>= 0)
            callback: Zero-argument callable

        Returns:
            Handle that cancels the callback
        """
        raise NotImplementedError


class _AsyncioHandle(ScheduledHandle):
    def __init__(self, timer: asyncio.TimerHandle):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop's call_later."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Args:
            loop: Event loop to schedule on (default: the loop running now)

        Raises:
            RuntimeError: no loop was given and none is running
        """
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise RuntimeError(
                    "AsyncioScheduler needs an event loop: create it inside a coroutine or pass loop="
                ) from e
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        return _AsyncioHandle(self._loop.call_later(max(0.0, delay), callback))


class _ManualHandle(ScheduledHandle):
    def __init__(self):
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler with a virtual clock.

    Callbacks run only when advance() moves the clock past their due time,
    in due-time order (ties in scheduling order). Callbacks scheduled by a
    running callback are picked up within the same advance() if they are due.
    """

    def __init__(self, start: float = 0.0):
        self.now = start
        self._queue: List[Tuple[float, int, _ManualHandle, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        handle = _ManualHandle()
        heapq.heappush(self._queue, (self.now + max(0.0, delay), next(self._counter), handle, callback))
        return handle

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the virtual clock forward and run every callback that became due.

        Args:
            seconds: Amount of virtual time to advance

        Returns:
            Number of callbacks that ran
        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            self.now = max(self.now, due)
            if handle.cancelled:
                continue
            handle.done = True
            callback()
            ran += 1
        self.now = target
        return ran

    def run_all(self) -> int:
        """Run every pending callback regardless of its due time."""
        if not self._queue:
            return 0
        return self.advance(max(due for due, _, _, _ in self._queue) - self.now)
