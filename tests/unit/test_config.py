"""Unit tests for configuration management."""

import pytest
import yaml
from pathlib import Path

from warmnest.config.defaults import get_default_config
from warmnest.config.loader import ConfigLoader
from warmnest.config.validation import ConfigValidator
from warmnest.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config is not None
        assert config.pomodoro.work_seconds == 1500
        assert config.pomodoro.cycles_before_long_break == 4
        assert config.two_minute.duration_seconds == 120
        assert config.logging.level == "INFO"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert loader is not None
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, config_dir) -> None:
        """Test config merging with no YAML present."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config()

        assert config["pomodoro"]["short_break_seconds"] == 300
        assert config["two_minute"]["tick_seconds"] == 1

    def test_yaml_overrides_defaults(self, config_dir) -> None:
        """Test that warmnest.yaml values win over defaults."""
        with open(config_dir / "warmnest.yaml", "w") as f:
            yaml.safe_dump({"pomodoro": {"work_seconds": 3000}}, f)

        config = ConfigLoader.create(config_dir).merge_config()

        assert config["pomodoro"]["work_seconds"] == 3000
        # Other defaults should remain
        assert config["pomodoro"]["long_break_seconds"] == 900

    def test_call_overrides_win(self, config_dir) -> None:
        """Test that per-call overrides win over YAML."""
        with open(config_dir / "warmnest.yaml", "w") as f:
            yaml.safe_dump({"pomodoro": {"work_seconds": 3000}}, f)

        config = ConfigLoader.create(config_dir).merge_config(
            {"pomodoro": {"work_seconds": 600}}
        )

        assert config["pomodoro"]["work_seconds"] == 600

    def test_empty_yaml_file(self, config_dir) -> None:
        (config_dir / "warmnest.yaml").write_text("")

        config = ConfigLoader.create(config_dir).merge_config()

        assert config["logging"]["level"] == "INFO"

    def test_load_builds_typed_config(self, config_dir) -> None:
        config = ConfigLoader.create(config_dir).load(
            {"two_minute": {"duration_seconds": 90}, "logging": {"unknown_key": 1}}
        )

        assert config.two_minute.duration_seconds == 90
        assert config.pomodoro.work_seconds == 1500

    def test_load_rejects_invalid_values(self, config_dir) -> None:
        loader = ConfigLoader.create(config_dir)

        with pytest.raises(ConfigurationError, match="work_seconds"):
            loader.load({"pomodoro": {"work_seconds": -1}})

    def test_shipped_config_is_valid(self) -> None:
        config = ConfigLoader.create().load()

        assert config.pomodoro.work_seconds == 1500

    def test_exercise_overrides_missing_file(self, config_dir) -> None:
        assert ConfigLoader.create(config_dir).load_exercise_overrides() == {}


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_pomodoro_params(self) -> None:
        params = {"work_seconds": 1500, "cycles_before_long_break": 4}

        errors = ConfigValidator.validate_pomodoro_params(params)
        assert len(errors) == 0

    @pytest.mark.parametrize("value", [0, -5, 2.5, True, "25"])
    def test_invalid_work_seconds(self, value) -> None:
        errors = ConfigValidator.validate_pomodoro_params({"work_seconds": value})

        assert len(errors) == 1
        assert errors[0].field == "work_seconds"

    def test_invalid_two_minute(self) -> None:
        errors = ConfigValidator.validate_two_minute_params({"duration_seconds": 0})

        assert errors[0].field == "duration_seconds"

    def test_invalid_logging(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})

        assert [e.field for e in errors] == ["level", "format_json"]

    def test_exercise_params(self) -> None:
        assert ConfigValidator.validate_exercise_params(
            {"duration_minutes": 5, "cycle": [{"state": "inhale", "duration": 4}]}
        ) == []

        errors = ConfigValidator.validate_exercise_params(
            {"duration_minutes": 0, "cycle": [], "instruction_steps": "none"}
        )
        assert [e.field for e in errors] == ["duration_minutes", "cycle", "instruction_steps"]

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_exercise_length_must_be_finite(self, value) -> None:
        errors = ConfigValidator.validate_exercise_params({"duration_minutes": value})

        assert len(errors) == 1
        assert errors[0].field == "duration_minutes"

    def test_include_timestamp_must_be_bool(self) -> None:
        errors = ConfigValidator.validate_logging_params({"include_timestamp": "no"})

        assert [e.field for e in errors] == ["include_timestamp"]

    def test_validate_config(self) -> None:
        errors = ConfigValidator.validate_config({
            "pomodoro": {"tick_seconds": 0},
            "two_minute": {"tick_seconds": 0},
            "logging": {"level": "INFO"},
        })

        assert len(errors) == 2
