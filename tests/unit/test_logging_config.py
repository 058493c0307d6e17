"""Tests for logging configuration helpers."""

import logging
from unittest.mock import Mock

import pytest
import structlog
import yaml

from warmnest.config.defaults import LoggingParams
from warmnest.config.loader import ConfigLoader
from warmnest.logging.config import (
    configure_logging,
    get_focus_logger,
    get_sequencer_logger,
    log_mode_change,
    log_phase_transition,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test configure_logging output."""

    def test_json_renderer_selected(self):
        configure_logging(level="DEBUG", format_json=True, include_timestamp=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_console_renderer_with_timestamp(self):
        configure_logging(level="INFO")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_applies_logging_params(self):
        configure_logging(LoggingParams(level="ERROR", format_json=True, include_timestamp=False))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert logging.getLogger().level == logging.ERROR

    def test_keyword_arguments_override_params(self):
        configure_logging(LoggingParams(level="ERROR", format_json=True), level="debug",
                          format_json=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.DEBUG

    def test_loaded_config_section(self, config_dir):
        with open(config_dir / "warmnest.yaml", "w") as f:
            yaml.safe_dump({"logging": {"level": "WARNING", "include_timestamp": False}}, f)

        configure_logging(ConfigLoader.create(config_dir).load().logging)

        processors = structlog.get_config()["processors"]
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert logging.getLogger().level == logging.WARNING

    def test_subsystem_loggers_are_bound(self):
        assert get_sequencer_logger("x") is not None
        assert get_focus_logger("y") is not None


class TestLogHelpers:
    """Test standardized transition log helpers."""

    def test_log_phase_transition(self):
        logger = Mock()
        bound = logger.bind.return_value

        log_phase_transition(logger, from_index=0, to_index=1,
                             phase_state="hold_after_inhale", duration_seconds=7)

        logger.bind.assert_called_once_with(
            from_index=0, to_index=1,
            phase_state="hold_after_inhale", duration_seconds=7
        )
        bound.debug.assert_called_once_with("Phase transition")

    def test_log_mode_change_with_context(self):
        logger = Mock()
        bound = logger.bind.return_value
        rebound = bound.bind.return_value

        log_mode_change(logger, timer_name="pomodoro", from_mode="work",
                        to_mode="short_break", trigger="countdown",
                        context={"total_pomodoros": 1})

        bound.bind.assert_called_once_with(context={"total_pomodoros": 1})
        rebound.info.assert_called_once_with("Mode change")
