"""
Two-minute rule timer.

If a task takes less than two minutes, do it now: a single countdown for
one named task that ends either when time runs out or when the task is
marked done by hand.
"""

from typing import Callable, Optional

from ..config.defaults import TwoMinuteParams
from ..config.validation import ConfigValidator
from ..errors import TimerConfigurationError
from ..logging.config import get_focus_logger
from ..timing import Scheduler
from ..utils.time import format_clock, progress_percent
from .countdown import Countdown

logger = get_focus_logger(__name__)


class TwoMinuteTimer:
    """Countdown for one quick task."""

    def __init__(
        self,
        scheduler: Scheduler,
        params: Optional[TwoMinuteParams] = None,
        on_done: Optional[Callable[[str], None]] = None,
    ):
        self.params = params or TwoMinuteParams()
        errors = ConfigValidator.validate_two_minute_params(vars(self.params))
        if errors:
            raise TimerConfigurationError(
                f"Invalid two-minute parameters: {errors[0].field}: {errors[0].message}",
                field=errors[0].field,
                value=errors[0].value
            )

        self.on_done = on_done
        self.task = ""
        self.is_done = False

        self._countdown = Countdown(
            scheduler,
            self.params.duration_seconds,
            tick_seconds=self.params.tick_seconds,
            on_expire=self._handle_expire,
        )

    @property
    def is_running(self) -> bool:
        return self._countdown.is_running

    @property
    def time_remaining(self) -> int:
        return self._countdown.time_remaining

    @property
    def progress_percent(self) -> float:
        return progress_percent(self.params.duration_seconds, self.time_remaining)

    @property
    def formatted_time(self) -> str:
        return format_clock(self.time_remaining)

    def start(self, task: str = "") -> None:
        """Start a fresh two-minute countdown, restarting any current one."""
        self.task = task
        self.is_done = False
        self._countdown.reset()
        self._countdown.start()
        logger.info("Two-minute timer started", task=task or None)

    def mark_done(self) -> None:
        """Stop early and mark the task as done."""
        self._countdown.pause()
        self._complete(trigger="user")

    def reset(self) -> None:
        self._countdown.reset()
        self.task = ""
        self.is_done = False
        logger.info("Two-minute timer reset")

    def _handle_expire(self) -> None:
        self._complete(trigger="countdown")

    def _complete(self, trigger: str) -> None:
        self.is_done = True
        logger.info("Task completed", task=self.task or None, trigger=trigger,
                    time_remaining=self.time_remaining)
        if self.on_done is not None:
            self.on_done(self.task)
