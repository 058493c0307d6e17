"""
Focus-mode timers.

Pomodoro work/break cycling and the two-minute rule countdown, both built
on a one-second Countdown driven by a Scheduler.
"""
from .countdown import Countdown
from .pomodoro import FocusMode, PomodoroTimer
from .two_minute import TwoMinuteTimer

__all__ = ["Countdown", "FocusMode", "PomodoroTimer", "TwoMinuteTimer"]
