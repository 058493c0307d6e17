"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; True is not a duration
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_pomodoro_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Pomodoro timer parameters."""
        errors = []

        for field in ("work_seconds", "short_break_seconds", "long_break_seconds",
                      "cycles_before_long_break", "tick_seconds"):
            if field in params and not _is_positive_int(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_two_minute_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate two-minute-rule timer parameters."""
        errors = []

        for field in ("duration_seconds", "tick_seconds"):
            if field in params and not _is_positive_int(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        for field in ("format_json", "include_timestamp"):
            if field in params and not isinstance(params[field], bool):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a boolean",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_exercise_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate one exercise catalog entry (shape only, not phase contents)."""
        errors = []

        if "duration_minutes" in params:
            value = params["duration_minutes"]
            if (not isinstance(value, (int, float)) or isinstance(value, bool)
                    or not math.isfinite(value) or value <= 0):
                errors.append(ValidationError(
                    field="duration_minutes",
                    message="Must be a positive finite number",
                    value=value
                ))

        if "cycle" in params:
            value = params["cycle"]
            if not isinstance(value, list) or not value:
                errors.append(ValidationError(
                    field="cycle",
                    message="Must be a non-empty list of phases",
                    value=value
                ))

        if "instruction_steps" in params:
            value = params["instruction_steps"]
            if not isinstance(value, list):
                errors.append(ValidationError(
                    field="instruction_steps",
                    message="Must be a list",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "pomodoro" in config:
            errors.extend(ConfigValidator.validate_pomodoro_params(config["pomodoro"]))

        if "two_minute" in config:
            errors.extend(ConfigValidator.validate_two_minute_params(config["two_minute"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
