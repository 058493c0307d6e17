"""
Breathing data models.

Immutable structures describing breathing phases, the cycles they form,
catalog exercises and the observable state of a session.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from ..errors import CycleConfigurationError


class PhaseState(str, Enum):
    """Breathing state of a single phase."""
    INHALE = "inhale"
    HOLD_AFTER_INHALE = "hold_after_inhale"
    EXHALE = "exhale"
    HOLD_AFTER_EXHALE = "hold_after_exhale"

    @property
    def is_hold(self) -> bool:
        return self in (PhaseState.HOLD_AFTER_INHALE, PhaseState.HOLD_AFTER_EXHALE)

    @property
    def instruction_key(self) -> str:
        """Translation key for the on-screen instruction."""
        return "hold" if self.is_hold else self.value

    @classmethod
    def parse(cls, value: Any) -> "PhaseState":
        """Parse a state tag, accepting hyphenated and legacy spellings."""
        if isinstance(value, PhaseState):
            return value
        if not isinstance(value, str):
            raise CycleConfigurationError(
                f"Phase state must be a string, got {type(value).__name__}",
                value=value
            )

        tag = value.strip().lower().replace("-", "_")
        tag = _STATE_ALIASES.get(tag, tag)
        try:
            return cls(tag)
        except ValueError:
            raise CycleConfigurationError(
                f"Unknown phase state: {value!r}",
                value=value
            ) from None


_STATE_ALIASES = {
    "hold_inhaled": PhaseState.HOLD_AFTER_INHALE.value,
    "hold_exhaled": PhaseState.HOLD_AFTER_EXHALE.value,
}


@dataclass(frozen=True)
class Phase:
    """One step of a breathing pattern."""

    state: PhaseState
    duration_seconds: int

    def __post_init__(self) -> None:
        if not isinstance(self.state, PhaseState):
            object.__setattr__(self, "state", PhaseState.parse(self.state))

        duration = self.duration_seconds
        if not isinstance(duration, int) or isinstance(duration, bool):
            raise CycleConfigurationError(
                f"Phase duration must be an integer number of seconds, got {duration!r}",
                value=duration
            )
        if duration <= 0:
            raise CycleConfigurationError(
                f"Phase duration must be positive, got {duration}",
                value=duration
            )


@dataclass(frozen=True)
class Cycle:
    """Ordered, non-empty sequence of phases forming one breathing pattern."""

    phases: tuple[Phase, ...]

    def __post_init__(self) -> None:
        phases = tuple(self.phases)
        object.__setattr__(self, "phases", phases)

        if not phases:
            raise CycleConfigurationError("Cycle must contain at least one phase")

        for index, phase in enumerate(phases):
            if not isinstance(phase, Phase):
                raise CycleConfigurationError(
                    f"Cycle entry {index} is not a Phase",
                    phase_index=index,
                    value=phase
                )

    @classmethod
    def of(cls, *phases: tuple[Any, int]) -> "Cycle":
        """Build a cycle from (state, duration_seconds) pairs."""
        return cls.from_pairs(phases)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, int]]) -> "Cycle":
        built = []
        for index, (state, duration) in enumerate(pairs):
            built.append(_build_phase(index, state, duration))
        return cls(tuple(built))

    @classmethod
    def from_config(cls, entries: Iterable[dict[str, Any]]) -> "Cycle":
        """
        Build a cycle from catalog-style mappings.

        Each entry needs a ``state`` and a ``duration`` (or
        ``duration_seconds``) key.
        """
        if entries is None:
            raise CycleConfigurationError("Cycle configuration is missing")

        built = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise CycleConfigurationError(
                    f"Phase {index} must be a mapping",
                    phase_index=index,
                    value=entry
                )
            if "state" not in entry:
                raise CycleConfigurationError(
                    f"Phase {index} is missing 'state'",
                    phase_index=index,
                    value=entry
                )
            duration = entry.get("duration", entry.get("duration_seconds"))
            built.append(_build_phase(index, entry["state"], duration))
        return cls(tuple(built))

    def to_config(self) -> list[dict[str, Any]]:
        return [{"state": p.state.value, "duration": p.duration_seconds} for p in self.phases]

    @property
    def duration_seconds(self) -> int:
        """Length of one full cycle."""
        return sum(phase.duration_seconds for phase in self.phases)

    def cycles_in(self, total_seconds: float) -> int:
        """Number of whole cycles that fit in total_seconds."""
        if total_seconds <= 0:
            return 0
        return int(total_seconds // self.duration_seconds)

    def __len__(self) -> int:
        return len(self.phases)

    def __getitem__(self, index: int) -> Phase:
        return self.phases[index]

    def __iter__(self) -> Iterator[Phase]:
        return iter(self.phases)


def _build_phase(index: int, state: Any, duration: Any) -> Phase:
    try:
        return Phase(PhaseState.parse(state), duration)
    except CycleConfigurationError as e:
        raise CycleConfigurationError(
            f"Invalid phase {index}: {e}",
            phase_index=index,
            value=e.value
        ) from e


@dataclass(frozen=True)
class InstructionStep:
    """One step of an exercise's how-to screen."""
    text_key: str
    diagram_hint: str = ""


@dataclass(frozen=True)
class BreathingExercise:
    """Catalog entry describing a guided breathing exercise."""

    slug: str
    name_key: str
    description_key: str
    duration_minutes: float
    cycle: Cycle
    instruction_steps: tuple[InstructionStep, ...] = field(default_factory=tuple)

    @property
    def total_session_seconds(self) -> float:
        return self.duration_minutes * 60

    @property
    def total_cycles(self) -> int:
        """floor(total_session_seconds / cycle duration)."""
        return self.cycle.cycles_in(self.total_session_seconds)


@dataclass(frozen=True)
class SessionSnapshot:
    """Observable state of a breathing session for the presentation layer."""

    total_cycles: int
    completed_cycles: int
    is_running: bool
    is_finished: bool
    current_phase: Optional[Phase] = None
    current_phase_index: Optional[int] = None
    phase_remaining_seconds: Optional[float] = None

    @property
    def progress_percent(self) -> float:
        if self.total_cycles == 0:
            return 0.0
        return min(100.0, self.completed_cycles / self.total_cycles * 100)
