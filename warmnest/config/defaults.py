"""Default configuration parameters for the WarmNest timing core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PomodoroParams:
    """Pomodoro timer parameters."""
    work_seconds: int = 25 * 60                      # Focus period
    short_break_seconds: int = 5 * 60                # Break after a work period
    long_break_seconds: int = 15 * 60                # Break after a full set
    cycles_before_long_break: int = 4                # Work periods per set
    tick_seconds: int = 1                            # Countdown resolution


@dataclass(frozen=True)
class TwoMinuteParams:
    """Two-minute-rule timer parameters."""
    duration_seconds: int = 2 * 60
    tick_seconds: int = 1


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    pomodoro: PomodoroParams
    two_minute: TwoMinuteParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        pomodoro=PomodoroParams(),
        two_minute=TwoMinuteParams(),
        logging=LoggingParams(),
    )
