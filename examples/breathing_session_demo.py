#!/usr/bin/env python3
"""
Breathing Session Demo - WarmNest Timing Core

Runs catalog exercises on a virtual clock, showing how the session
controller drives the phase sequencer:
- inhale → hold → exhale → hold phase ring
- cycle counting against the session target
- pause/resume and replay after completion
- sessions too short for a single cycle

Run: python examples/breathing_session_demo.py
"""

from warmnest.breathing.catalog import ExerciseCatalog
from warmnest.breathing.models import Cycle, Phase, PhaseState
from warmnest.breathing.session import BreathingSession
from warmnest.config.loader import ConfigLoader
from warmnest.logging.config import configure_logging
from warmnest.timing import VirtualScheduler
from warmnest.utils.time import format_clock


def demonstrate_box_breathing(catalog: ExerciseCatalog):
    """Walk through the first two cycles of box breathing."""
    print("📦 BOX BREATHING")
    print("=" * 50)

    scheduler = VirtualScheduler()

    def show_phase(phase: Phase, index: int):
        print(f"  {format_clock(scheduler.now())}  phase {index}: "
              f"{phase.state.instruction_key:<7} ({phase.duration_seconds}s)")

    exercise = catalog.get("box-breathing")
    session = BreathingSession.for_exercise(exercise, scheduler, on_phase_change=show_phase)
    print(f"  Cycle: {exercise.cycle.duration_seconds}s, "
          f"session: {exercise.duration_minutes} min, target: {session.total_cycles} cycles")

    session.play()
    scheduler.advance(2 * exercise.cycle.duration_seconds)
    print(f"  Completed {session.completed_cycles} / {session.total_cycles} "
          f"({session.progress_percent:.0f}%)")

    session.pause()
    print(f"  Paused at {format_clock(scheduler.now())}, running={session.is_running}")
    print()


def demonstrate_full_session(catalog: ExerciseCatalog):
    """Run 4-7-8 breathing to completion, then replay."""
    print("🌙 4-7-8 BREATHING TO COMPLETION")
    print("=" * 50)

    scheduler = VirtualScheduler()
    exercise = catalog.get("4-7-8-breathing")
    session = BreathingSession.for_exercise(
        exercise, scheduler,
        on_session_complete=lambda: print(f"  ✓ Finished at {format_clock(scheduler.now())}")
    )

    session.play()
    scheduler.advance(exercise.total_session_seconds)
    print(f"  Completed {session.completed_cycles} / {session.total_cycles}, "
          f"finished={session.is_finished}")

    session.play()
    print(f"  Replay: completed reset to {session.completed_cycles}, running={session.is_running}")
    session.reset()
    print()


def demonstrate_inapplicable_session():
    """A cycle longer than the session never completes."""
    print("⏳ SESSION SHORTER THAN ONE CYCLE")
    print("=" * 50)

    scheduler = VirtualScheduler()
    cycle = Cycle.of((PhaseState.INHALE, 40), (PhaseState.EXHALE, 40))
    session = BreathingSession(cycle, 60, scheduler, slug="too-long")

    session.play()
    scheduler.advance(600)
    print(f"  total_cycles={session.total_cycles}, applicable={session.is_applicable}, "
          f"finished={session.is_finished}, running={session.is_running}")
    print()


def main():
    """Main demonstration function."""
    configure_logging(ConfigLoader.create().load().logging, level="WARNING")

    print("🫁 WARMNEST BREATHING DEMO")
    print("=" * 60)
    print()

    catalog = ExerciseCatalog.load()
    demonstrate_box_breathing(catalog)
    demonstrate_full_session(catalog)
    demonstrate_inapplicable_session()

    print("✅ Breathing demo completed!")


if __name__ == "__main__":
    main()
