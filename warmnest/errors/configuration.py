"""
Configuration error classifications.

Raised synchronously when a cycle, catalog entry or timer is built from
invalid data. These are programmer/config mistakes and are never retried.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Base class for invalid caller-supplied configuration."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class CycleConfigurationError(ConfigurationError):
    """Empty cycle, non-positive phase duration or unknown phase state."""

    def __init__(self, message: str, phase_index: Optional[int] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.phase_index = phase_index
        self.value = value


class UnknownExerciseError(ConfigurationError):
    """Requested exercise slug is not in the catalog."""

    def __init__(self, message: str, slug: Optional[str] = None,
                 available: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.slug = slug
        self.available = available or []


class TimerConfigurationError(ConfigurationError):
    """Focus timer built with a non-positive duration or interval."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
