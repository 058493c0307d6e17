"""
Error classification for the breathing and focus timing core.

Configuration errors describe bad caller-supplied data (cycles, catalog
entries, timer durations). Misuse errors describe operations invoked in a
state that does not allow them. Neither category is retried.
"""

from .configuration import (
    ConfigurationError,
    CycleConfigurationError,
    UnknownExerciseError,
    TimerConfigurationError,
)
from .misuse import (
    MisuseError,
    SequencerStateError,
)

__all__ = [
    # Configuration Errors
    "ConfigurationError",
    "CycleConfigurationError",
    "UnknownExerciseError",
    "TimerConfigurationError",
    # Misuse Errors
    "MisuseError",
    "SequencerStateError",
]
