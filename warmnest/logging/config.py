"""
Centralized logging configuration for the WarmNest timing core.

All components log through structlog on top of the standard library
logging module, so one call to configure_logging() controls level and
output format for the sequencer, sessions, catalog and focus timers.
The ``logging`` section of config/warmnest.yaml is applied with:

    configure_logging(ConfigLoader.create().load().logging)
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams

# Shared by every output format; renderer and optional stages are appended
_BASE_PROCESSORS = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)


def configure_logging(
    params: Optional[LoggingParams] = None,
    *,
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
    include_timestamp: Optional[bool] = None,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        params: Logging section of the loaded configuration; defaults to
            LoggingParams() when omitted
        level: Overrides params.level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Overrides params.format_json (JSON vs console output)
        include_timestamp: Overrides params.include_timestamp
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    params = params or LoggingParams()
    if level is None:
        level = params.level
    if format_json is None:
        format_json = params.format_json
    if include_timestamp is None:
        include_timestamp = params.include_timestamp

    log_level = getattr(logging, level.upper())
    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s")
    # basicConfig is a no-op once handlers exist; reconfiguring must still move the level
    logging.getLogger().setLevel(log_level)

    processors: list[Any] = list(_BASE_PROCESSORS)
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))
    processors.extend(extra_processors or [])
    processors.append(
        structlog.processors.JSONRenderer() if format_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Module-level structlog logger (name is typically __name__)."""
    return structlog.get_logger(name)


def get_sequencer_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the breathing subsystem.

    Used by the phase sequencer and the session controller so their
    records can be filtered together.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for breathing components
    """
    logger = get_logger(name)

    return logger.bind(subsystem="breathing")


def get_focus_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the focus-mode subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for focus timers
    """
    logger = get_logger(name)

    return logger.bind(subsystem="focus")


def log_phase_transition(
    logger: FilteringBoundLogger,
    from_index: Optional[int],
    to_index: int,
    phase_state: str,
    duration_seconds: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a breathing phase transition with standardized format.

    Args:
        logger: Structlog logger instance
        from_index: Phase index being left (None when starting)
        to_index: Phase index being entered
        phase_state: State tag of the phase being entered
        duration_seconds: Duration of the phase being entered
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_index=from_index,
        to_index=to_index,
        phase_state=phase_state,
        duration_seconds=duration_seconds,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Phase transition")


def log_mode_change(
    logger: FilteringBoundLogger,
    timer_name: str,
    from_mode: str,
    to_mode: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a focus timer mode change with standardized format.

    Args:
        logger: Structlog logger instance
        timer_name: Which timer changed mode
        from_mode: Current mode
        to_mode: Target mode
        trigger: What triggered the change (countdown, user action)
        context: Additional context data
    """
    bound_logger = logger.bind(
        timer=timer_name,
        from_mode=from_mode,
        to_mode=to_mode,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Mode change")
