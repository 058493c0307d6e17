"""
Schedulers for one-shot delayed callbacks.

Every timer in the package (breathing phases, focus countdowns) is armed
through a Scheduler: run a callback once after a delay, with the option
to cancel it before it fires. Two implementations are provided:

- AsyncioScheduler: wall-clock timers on an asyncio event loop
- VirtualScheduler: deterministic virtual clock advanced explicitly,
  used by tests and simulations
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Optional

import structlog

logger = structlog.get_logger(__name__)


class ScheduledCall:
    """Handle for a pending one-shot callback."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self._cancelled = False
        self._fired = False
        self._timer_handle: Optional[asyncio.TimerHandle] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._fired)

    def cancel(self) -> None:
        """Cancel the callback. Safe to call more than once or after firing."""
        if not self.pending:
            return
        self._cancelled = True
        if self._timer_handle is not None:
            self._timer_handle.cancel()

    def _run(self) -> None:
        if not self.pending:
            return
        self._fired = True
        self.callback()


class Scheduler(ABC):
    """Base class for one-shot timer facilities."""

    @abstractmethod
    def now(self) -> float:
        """Current scheduler time in seconds."""
        pass

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Run callback once, no earlier than delay seconds from now.

        Args:
            delay: Delay in seconds, must not be negative
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the pending call
        """
        pass


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop's call_later."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        # Resolved lazily so the scheduler can be built outside a running loop
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")

        call = ScheduledCall(self.now() + delay, callback)
        call._timer_handle = self.loop.call_later(delay, call._run)
        return call


class VirtualScheduler(Scheduler):
    """
    Deterministic scheduler driven by an explicit virtual clock.

    Nothing fires until advance() is called. Calls due at the same instant
    fire in the order they were scheduled, and calls scheduled from inside
    a callback fire in the same advance() if they fall due within it.
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._queue: list[tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._now

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")

        call = ScheduledCall(self._now + delay, callback)
        heapq.heappush(self._queue, (call.due, next(self._counter), call))
        return call

    @property
    def pending_count(self) -> int:
        """Number of calls still waiting to fire."""
        return sum(1 for _, _, call in self._queue if call.pending)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing every call that falls due.

        Args:
            seconds: Amount of virtual time to advance, must not be negative

        Returns:
            Number of callbacks fired

        If a callback raises, the exception propagates after the clock has
        moved to the target; due calls not yet run stay queued and fire on
        the next advance().
        """
        if seconds < 0:
            raise ValueError(f"cannot advance by a negative amount: {seconds}")

        target = self._now + seconds
        fired = 0

        try:
            while self._queue and self._queue[0][0] <= target:
                due, _, call = heapq.heappop(self._queue)
                if not call.pending:
                    continue
                self._now = due
                fired += 1
                call._run()
        finally:
            # A raising callback propagates, but the clock still lands on
            # target; calls still queued stay pending for the next advance()
            self._now = target

        if fired:
            logger.debug("Virtual clock advanced", now=self._now, fired=fired)

        return fired

    def advance_to(self, when: float) -> int:
        """Advance the clock to an absolute virtual time."""
        return self.advance(max(0.0, when - self._now))
