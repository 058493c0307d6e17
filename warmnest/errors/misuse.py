"""
Misuse error classifications.

Raised when an operation is called in a state that does not support it,
e.g. starting a sequencer that is already running.
"""

from typing import Optional, Dict, Any


class MisuseError(Exception):
    """Base class for operations invoked in an invalid state."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 current_state: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.operation = operation
        self.current_state = current_state
        self.context = context or {}
        self.recoverable = False


class SequencerStateError(MisuseError):
    """Phase sequencer operation not allowed in its current state."""
    pass
