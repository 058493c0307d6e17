"""
Breathing phase sequencer.

Advances through the phases of a cycle on one-shot timers, looping until
stopped, and reports every completed loop to the caller. States are
``idle`` and ``in_phase(i)``; from ``in_phase(i)`` the only transition is
to ``in_phase((i + 1) % n)`` once phase i's duration has elapsed.
"""

from enum import Enum
from functools import partial
from typing import Any, Callable, Iterable, Optional, Union

from ..errors import CycleConfigurationError, SequencerStateError
from ..logging.config import get_sequencer_logger, log_phase_transition
from ..timing import ScheduledCall, Scheduler
from .models import Cycle, Phase

logger = get_sequencer_logger(__name__)

CycleLike = Union[Cycle, Iterable[Phase], Iterable[dict[str, Any]]]


class SequencerStatus(str, Enum):
    """Coarse sequencer state."""
    IDLE = "idle"
    IN_PHASE = "in_phase"


def coerce_cycle(cycle: Optional[CycleLike]) -> Cycle:
    """Turn a Cycle, a list of Phases or a list of phase mappings into a Cycle."""
    if isinstance(cycle, Cycle):
        return cycle
    if cycle is None:
        raise CycleConfigurationError("No cycle given")

    entries = list(cycle)
    if entries and all(isinstance(entry, dict) for entry in entries):
        return Cycle.from_config(entries)
    return Cycle(tuple(entries))


class PhaseSequencer:
    """
    Ring state machine over the phases of a breathing cycle.

    Calling start() on a sequencer that is already running is rejected
    with SequencerStateError; stop() it first to restart. stop() is safe
    in any state and guarantees that no pending transition fires
    afterwards.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_cycle_complete: Optional[Callable[[], None]] = None,
        on_phase_change: Optional[Callable[[Phase, int], None]] = None,
        name: str = "sequencer",
    ):
        self.scheduler = scheduler
        self.on_cycle_complete = on_cycle_complete
        self.on_phase_change = on_phase_change
        self.logger = logger.bind(sequencer=name)

        self._cycle: Optional[Cycle] = None
        self._index: Optional[int] = None
        self._timer: Optional[ScheduledCall] = None
        self._phase_started_at: Optional[float] = None
        self._cycles_completed = 0
        # Bumped on every start/stop so a timer armed earlier can tell it is stale
        self._generation = 0

    @property
    def status(self) -> SequencerStatus:
        return SequencerStatus.IDLE if self._cycle is None else SequencerStatus.IN_PHASE

    @property
    def is_running(self) -> bool:
        return self._cycle is not None

    @property
    def cycle(self) -> Optional[Cycle]:
        return self._cycle

    @property
    def current_phase_index(self) -> Optional[int]:
        return self._index

    @property
    def cycles_completed(self) -> int:
        """Full loops completed since the last start()."""
        return self._cycles_completed

    def start(self, cycle: CycleLike) -> None:
        """
        Enter the first phase of cycle and start timing it.

        Raises:
            CycleConfigurationError: cycle is empty or has a phase with a
                non-positive duration
            SequencerStateError: the sequencer is already running
        """
        if self.is_running:
            raise SequencerStateError(
                "Sequencer is already running; stop() it before starting again",
                operation="start",
                current_state=self._describe_state()
            )

        validated = coerce_cycle(cycle)

        self._generation += 1
        self._cycle = validated
        self._cycles_completed = 0
        self._enter_phase(0)

        self.logger.info(
            "Sequencer started",
            phase_count=len(validated),
            cycle_seconds=validated.duration_seconds
        )
        log_phase_transition(
            self.logger,
            from_index=None,
            to_index=0,
            phase_state=validated[0].state.value,
            duration_seconds=validated[0].duration_seconds
        )
        self._notify_phase_change()

    def stop(self) -> None:
        """Cancel any pending transition and return to idle."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        was_running = self.is_running
        self._generation += 1
        self._cycle = None
        self._index = None
        self._phase_started_at = None

        if was_running:
            self.logger.info("Sequencer stopped", cycles_completed=self._cycles_completed)

    def current_phase(self) -> Phase:
        """
        Phase the sequencer is currently in.

        Raises:
            SequencerStateError: the sequencer is idle
        """
        if self._cycle is None or self._index is None:
            raise SequencerStateError(
                "Sequencer is idle; there is no current phase",
                operation="current_phase",
                current_state=SequencerStatus.IDLE.value
            )
        return self._cycle[self._index]

    def phase_elapsed(self) -> float:
        """Seconds spent in the current phase, 0.0 when idle."""
        if self._phase_started_at is None:
            return 0.0
        return self.scheduler.now() - self._phase_started_at

    def phase_remaining(self) -> float:
        """Seconds left in the current phase, 0.0 when idle."""
        if self._cycle is None or self._index is None:
            return 0.0
        return max(0.0, self._cycle[self._index].duration_seconds - self.phase_elapsed())

    def _describe_state(self) -> str:
        if self._index is None:
            return SequencerStatus.IDLE.value
        return f"{SequencerStatus.IN_PHASE.value}({self._index})"

    def _enter_phase(self, index: int) -> None:
        self._index = index
        self._phase_started_at = self.scheduler.now()
        self._arm()

    def _arm(self) -> None:
        phase = self._cycle[self._index]
        self._timer = self.scheduler.schedule(
            phase.duration_seconds,
            partial(self._on_timer, self._generation)
        )

    def _on_timer(self, generation: int) -> None:
        if generation != self._generation or self._cycle is None:
            self.logger.warning("Ignoring stale phase timer", generation=generation)
            return

        self._timer = None
        from_index = self._index
        next_index = (from_index + 1) % len(self._cycle)
        self._index = next_index
        self._phase_started_at = self.scheduler.now()

        if next_index == 0:
            self._cycles_completed += 1
            self.logger.debug("Cycle complete", cycles_completed=self._cycles_completed)
            if self.on_cycle_complete is not None:
                try:
                    self.on_cycle_complete()
                except Exception:
                    self.logger.error("Cycle completion callback failed", exc_info=True)
                    self.stop()
                    raise
                if generation != self._generation:
                    # Callback stopped (or restarted) the sequencer
                    return

        self._arm()

        phase = self._cycle[next_index]
        log_phase_transition(
            self.logger,
            from_index=from_index,
            to_index=next_index,
            phase_state=phase.state.value,
            duration_seconds=phase.duration_seconds
        )
        self._notify_phase_change()

    def _notify_phase_change(self) -> None:
        if self.on_phase_change is None or self._cycle is None:
            return
        self.on_phase_change(self._cycle[self._index], self._index)
