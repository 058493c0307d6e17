"""Tick-based countdown shared by the focus timers."""

from functools import partial
from typing import Callable, Optional

from ..errors import TimerConfigurationError
from ..timing import ScheduledCall, Scheduler


class Countdown:
    """
    Counts time_remaining down by tick_seconds on every tick.

    on_expire fires once when time_remaining reaches zero; the countdown
    is stopped at that point and must be reset() before reuse.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        duration_seconds: int,
        tick_seconds: int = 1,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None,
    ):
        _require_positive("duration_seconds", duration_seconds)
        _require_positive("tick_seconds", tick_seconds)

        self.scheduler = scheduler
        self.duration_seconds = duration_seconds
        self.tick_seconds = tick_seconds
        self.on_tick = on_tick
        self.on_expire = on_expire

        self.time_remaining = duration_seconds
        self._timer: Optional[ScheduledCall] = None
        self._generation = 0

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    @property
    def expired(self) -> bool:
        return self.time_remaining <= 0

    def start(self) -> None:
        if self.is_running or self.expired:
            return
        self._arm()

    def pause(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def reset(self, duration_seconds: Optional[int] = None) -> None:
        """Stop and refill the countdown, optionally with a new duration."""
        self.pause()
        if duration_seconds is not None:
            _require_positive("duration_seconds", duration_seconds)
            self.duration_seconds = duration_seconds
        self.time_remaining = self.duration_seconds

    def _arm(self) -> None:
        self._timer = self.scheduler.schedule(
            self.tick_seconds, partial(self._on_timer, self._generation)
        )

    def _on_timer(self, generation: int) -> None:
        if generation != self._generation:
            return

        self._timer = None
        self.time_remaining = max(0, self.time_remaining - self.tick_seconds)

        if self.on_tick is not None:
            self.on_tick(self.time_remaining)
            if generation != self._generation:
                return

        if self.time_remaining == 0:
            if self.on_expire is not None:
                self.on_expire()
            return

        self._arm()


def _require_positive(field: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise TimerConfigurationError(
            f"{field} must be a positive integer, got {value!r}",
            field=field,
            value=value
        )
