"""
Guided breathing module.

Phase/cycle models, the phase sequencer, the exercise catalog and the
session controller that bounds an exercise run.
Phases advance in a ring: inhale → hold → exhale → hold → inhale ...
"""
from .catalog import ExerciseCatalog
from .models import BreathingExercise, Cycle, Phase, PhaseState, SessionSnapshot
from .sequencer import PhaseSequencer
from .session import BreathingSession

__all__ = [
    "BreathingExercise",
    "BreathingSession",
    "Cycle",
    "ExerciseCatalog",
    "Phase",
    "PhaseSequencer",
    "PhaseState",
    "SessionSnapshot",
]
