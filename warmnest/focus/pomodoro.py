"""
Pomodoro focus timer.

Alternates work periods with breaks: a short break after each work
period and a long break after every ``cycles_before_long_break`` work
periods. Once started, the timer rolls from one period into the next
without stopping until it is paused or reset.
"""

from enum import Enum
from typing import Callable, Optional

from ..config.defaults import PomodoroParams
from ..config.validation import ConfigValidator
from ..errors import TimerConfigurationError
from ..logging.config import get_focus_logger, log_mode_change
from ..timing import Scheduler
from ..utils.time import format_clock, progress_percent
from .countdown import Countdown

logger = get_focus_logger(__name__)


class FocusMode(str, Enum):
    """Pomodoro timer modes."""
    IDLE = "idle"
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class PomodoroTimer:
    """Work/break cycling timer."""

    def __init__(
        self,
        scheduler: Scheduler,
        params: Optional[PomodoroParams] = None,
        on_mode_change: Optional[Callable[[FocusMode], None]] = None,
    ):
        self.params = params or PomodoroParams()
        errors = ConfigValidator.validate_pomodoro_params(vars(self.params))
        if errors:
            raise TimerConfigurationError(
                f"Invalid Pomodoro parameters: {errors[0].field}: {errors[0].message}",
                field=errors[0].field,
                value=errors[0].value
            )

        self.on_mode_change = on_mode_change
        self.logger = logger
        self.mode = FocusMode.IDLE
        self.pomodoros_this_cycle = 0
        self.total_pomodoros = 0

        self._countdown = Countdown(
            scheduler,
            self.params.work_seconds,
            tick_seconds=self.params.tick_seconds,
            on_expire=self._handle_period_end,
        )

    @property
    def is_running(self) -> bool:
        return self._countdown.is_running

    @property
    def time_remaining(self) -> int:
        return self._countdown.time_remaining

    @property
    def current_mode_duration(self) -> int:
        if self.mode == FocusMode.SHORT_BREAK:
            return self.params.short_break_seconds
        if self.mode == FocusMode.LONG_BREAK:
            return self.params.long_break_seconds
        return self.params.work_seconds

    @property
    def progress_percent(self) -> float:
        if self.mode == FocusMode.IDLE:
            return 0.0
        return progress_percent(self.current_mode_duration, self.time_remaining)

    @property
    def formatted_time(self) -> str:
        return format_clock(self.time_remaining)

    def start_pause(self) -> None:
        """Start from idle, otherwise toggle between running and paused."""
        if self.mode == FocusMode.IDLE:
            self._enter_mode(FocusMode.WORK, trigger="start")
            self._countdown.start()
            return

        if self.is_running:
            self._countdown.pause()
            self.logger.info("Pomodoro paused", mode=self.mode.value,
                             time_remaining=self.time_remaining)
        else:
            self._countdown.start()
            self.logger.info("Pomodoro resumed", mode=self.mode.value,
                             time_remaining=self.time_remaining)

    def reset(self) -> None:
        self._countdown.reset(self.params.work_seconds)
        self.mode = FocusMode.IDLE
        self.pomodoros_this_cycle = 0
        self.total_pomodoros = 0
        self.logger.info("Pomodoro reset")

    def _enter_mode(self, mode: FocusMode, trigger: str) -> None:
        from_mode = self.mode
        self.mode = mode
        self._countdown.reset(self.current_mode_duration)

        log_mode_change(
            self.logger,
            timer_name="pomodoro",
            from_mode=from_mode.value,
            to_mode=mode.value,
            trigger=trigger,
            context={
                "pomodoros_this_cycle": self.pomodoros_this_cycle,
                "total_pomodoros": self.total_pomodoros,
            }
        )
        if self.on_mode_change is not None:
            self.on_mode_change(mode)

    def _handle_period_end(self) -> None:
        if self.mode == FocusMode.WORK:
            self.total_pomodoros += 1
            self.pomodoros_this_cycle += 1
            if self.pomodoros_this_cycle % self.params.cycles_before_long_break == 0:
                self._enter_mode(FocusMode.LONG_BREAK, trigger="countdown")
            else:
                self._enter_mode(FocusMode.SHORT_BREAK, trigger="countdown")
        else:
            if self.mode == FocusMode.LONG_BREAK:
                self.pomodoros_this_cycle = 0
            self._enter_mode(FocusMode.WORK, trigger="countdown")

        self._countdown.start()
