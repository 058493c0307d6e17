"""
Breathing session controller.

Bounds a run of an exercise's cycle to ``total_cycles`` loops, owns the
play/pause/reset actions and exposes the observable state the
presentation layer renders.
"""

from typing import Callable, Optional

from ..errors import CycleConfigurationError
from ..logging.config import get_sequencer_logger
from ..timing import Scheduler
from .models import BreathingExercise, Cycle, Phase, SessionSnapshot
from .sequencer import CycleLike, PhaseSequencer, coerce_cycle

logger = get_sequencer_logger(__name__)


class BreathingSession:
    """
    Controller for one exercise session.

    Pausing stops the sequencer outright, so play() after pause() begins
    again from the first phase of the cycle; completed cycles are kept.
    """

    def __init__(
        self,
        cycle: CycleLike,
        total_session_seconds: float,
        scheduler: Scheduler,
        slug: Optional[str] = None,
        on_session_complete: Optional[Callable[[], None]] = None,
        on_phase_change: Optional[Callable[[Phase, int], None]] = None,
    ):
        if total_session_seconds < 0:
            raise CycleConfigurationError(
                f"Session length must not be negative, got {total_session_seconds}",
                value=total_session_seconds
            )

        self.cycle: Cycle = coerce_cycle(cycle)
        self.total_session_seconds = total_session_seconds
        self.slug = slug
        self.on_session_complete = on_session_complete
        self.logger = logger.bind(exercise=slug)

        self.total_cycles = self.cycle.cycles_in(total_session_seconds)
        self.completed_cycles = 0
        self._finished = False

        self.sequencer = PhaseSequencer(
            scheduler,
            on_cycle_complete=self._handle_cycle_complete,
            on_phase_change=on_phase_change,
            name=slug or "session",
        )

        if not self.is_applicable:
            self.logger.warning(
                "Cycle is longer than the session; no full cycle fits",
                cycle_seconds=self.cycle.duration_seconds,
                total_session_seconds=total_session_seconds
            )

    @classmethod
    def for_exercise(
        cls,
        exercise: BreathingExercise,
        scheduler: Scheduler,
        **kwargs
    ) -> "BreathingSession":
        """Create a session for a catalog exercise."""
        return cls(
            exercise.cycle,
            exercise.total_session_seconds,
            scheduler,
            slug=exercise.slug,
            **kwargs
        )

    @property
    def is_running(self) -> bool:
        return self.sequencer.is_running

    @property
    def is_applicable(self) -> bool:
        """False when not even one cycle fits in the session."""
        return self.total_cycles > 0

    @property
    def is_finished(self) -> bool:
        # An inapplicable session has nothing left to do
        return self._finished or not self.is_applicable

    @property
    def progress_percent(self) -> float:
        if self.total_cycles == 0:
            return 0.0
        return min(100.0, self.completed_cycles / self.total_cycles * 100)

    def current_phase(self) -> Optional[Phase]:
        """Current phase, or None while the session is not running."""
        if not self.sequencer.is_running:
            return None
        return self.sequencer.current_phase()

    def play(self) -> None:
        """Start or resume the session; replays from zero once finished."""
        if not self.is_applicable:
            self.logger.info("Session not applicable; ignoring play", total_cycles=0)
            return

        if self.is_running:
            return

        if self._finished:
            self.completed_cycles = 0
            self._finished = False
            self.logger.info("Replaying finished session")

        self.sequencer.start(self.cycle)
        self.logger.info(
            "Session playing",
            completed_cycles=self.completed_cycles,
            total_cycles=self.total_cycles
        )

    def pause(self) -> None:
        if not self.is_running:
            return
        self.sequencer.stop()
        self.logger.info("Session paused", completed_cycles=self.completed_cycles)

    def toggle(self) -> None:
        """Play when paused, pause when playing."""
        if self.is_running:
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        self.sequencer.stop()
        self.completed_cycles = 0
        self._finished = False
        self.logger.info("Session reset")

    def snapshot(self) -> SessionSnapshot:
        running = self.is_running
        return SessionSnapshot(
            total_cycles=self.total_cycles,
            completed_cycles=self.completed_cycles,
            is_running=running,
            is_finished=self.is_finished,
            current_phase=self.sequencer.current_phase() if running else None,
            current_phase_index=self.sequencer.current_phase_index,
            phase_remaining_seconds=self.sequencer.phase_remaining() if running else None,
        )

    def _handle_cycle_complete(self) -> None:
        self.completed_cycles += 1
        self.logger.debug(
            "Cycle completed",
            completed_cycles=self.completed_cycles,
            total_cycles=self.total_cycles
        )

        if self.completed_cycles >= self.total_cycles > 0:
            self.sequencer.stop()
            self._finished = True
            self.logger.info("Session finished", completed_cycles=self.completed_cycles)
            if self.on_session_complete is not None:
                self.on_session_complete()
