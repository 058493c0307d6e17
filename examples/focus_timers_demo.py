#!/usr/bin/env python3
"""
Focus Timers Demo - WarmNest Timing Core

Simulates a Pomodoro set and a two-minute-rule task on a virtual clock.

Run: python examples/focus_timers_demo.py
"""

from warmnest.config.loader import ConfigLoader
from warmnest.focus import FocusMode, PomodoroTimer, TwoMinuteTimer
from warmnest.logging.config import configure_logging
from warmnest.timing import VirtualScheduler
from warmnest.utils.time import format_clock


def demonstrate_pomodoro(loader: ConfigLoader):
    """Run one full set of four pomodoros and the long break."""
    print("🍅 POMODORO")
    print("=" * 50)

    params = loader.load().pomodoro
    scheduler = VirtualScheduler()

    def announce(mode: FocusMode):
        print(f"  {format_clock(scheduler.now())}  → {mode.value}")

    timer = PomodoroTimer(scheduler, params, on_mode_change=announce)
    timer.start_pause()

    set_seconds = (params.cycles_before_long_break * params.work_seconds
                   + (params.cycles_before_long_break - 1) * params.short_break_seconds
                   + params.long_break_seconds)
    scheduler.advance(set_seconds)

    print(f"  Total pomodoros: {timer.total_pomodoros}, "
          f"this set: {timer.pomodoros_this_cycle}, remaining {timer.formatted_time}")
    timer.reset()
    print()


def demonstrate_two_minute_rule():
    """Mark one task done early, let another run out."""
    print("⏱️  TWO-MINUTE RULE")
    print("=" * 50)

    scheduler = VirtualScheduler()
    timer = TwoMinuteTimer(
        scheduler,
        on_done=lambda task: print(f"  ✓ {task} ({timer.formatted_time} left)")
    )

    timer.start("Reply to Sam")
    scheduler.advance(45)
    timer.mark_done()

    timer.start("Water the plants")
    scheduler.advance(120)
    print()


def main():
    """Main demonstration function."""
    loader = ConfigLoader.create()
    configure_logging(loader.load().logging, level="WARNING")

    print("🎯 WARMNEST FOCUS DEMO")
    print("=" * 60)
    print()

    demonstrate_pomodoro(loader)
    demonstrate_two_minute_rule()

    print("✅ Focus demo completed!")


if __name__ == "__main__":
    main()
