"""Tests for breathing data models."""

import pytest

from warmnest.breathing.models import (
    BreathingExercise, Cycle, Phase, PhaseState, SessionSnapshot
)
from warmnest.errors import CycleConfigurationError


class TestPhaseState:
    """Test PhaseState parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("inhale", PhaseState.INHALE),
        ("EXHALE", PhaseState.EXHALE),
        ("hold_after_inhale", PhaseState.HOLD_AFTER_INHALE),
        ("hold-after-exhale", PhaseState.HOLD_AFTER_EXHALE),
        ("hold-inhaled", PhaseState.HOLD_AFTER_INHALE),
        ("hold-exhaled", PhaseState.HOLD_AFTER_EXHALE),
    ])
    def test_parse(self, raw, expected):
        assert PhaseState.parse(raw) == expected

    def test_parse_unknown(self):
        with pytest.raises(CycleConfigurationError, match="Unknown phase state"):
            PhaseState.parse("sigh")

    def test_parse_non_string(self):
        with pytest.raises(CycleConfigurationError, match="must be a string"):
            PhaseState.parse(4)

    def test_instruction_keys(self):
        assert PhaseState.INHALE.instruction_key == "inhale"
        assert PhaseState.EXHALE.instruction_key == "exhale"
        assert PhaseState.HOLD_AFTER_INHALE.instruction_key == "hold"
        assert PhaseState.HOLD_AFTER_EXHALE.instruction_key == "hold"


class TestPhase:
    """Test Phase invariants."""

    def test_valid_phase(self):
        phase = Phase(PhaseState.INHALE, 4)
        assert phase.duration_seconds == 4

    def test_state_string_is_parsed(self):
        assert Phase("exhale", 8).state == PhaseState.EXHALE

    @pytest.mark.parametrize("duration", [0, -1])
    def test_non_positive_duration(self, duration):
        with pytest.raises(CycleConfigurationError, match="must be positive"):
            Phase(PhaseState.INHALE, duration)

    @pytest.mark.parametrize("duration", [1.5, "4", True, None])
    def test_non_integer_duration(self, duration):
        with pytest.raises(CycleConfigurationError, match="integer"):
            Phase(PhaseState.INHALE, duration)


class TestCycle:
    """Test Cycle construction and arithmetic."""

    def test_duration(self, box_cycle, four_seven_eight_cycle):
        assert box_cycle.duration_seconds == 16
        assert four_seven_eight_cycle.duration_seconds == 19
        assert len(box_cycle) == 4

    def test_empty_cycle_rejected(self):
        with pytest.raises(CycleConfigurationError, match="at least one phase"):
            Cycle(())

    def test_from_config(self):
        cycle = Cycle.from_config([
            {"state": "inhale", "duration": 4},
            {"state": "hold-inhaled", "duration_seconds": 7},
        ])

        assert cycle[1] == Phase(PhaseState.HOLD_AFTER_INHALE, 7)

    def test_from_config_reports_phase_index(self):
        with pytest.raises(CycleConfigurationError) as exc_info:
            Cycle.from_config([
                {"state": "inhale", "duration": 4},
                {"state": "exhale", "duration": 0},
            ])

        assert exc_info.value.phase_index == 1
        assert exc_info.value.value == 0

    def test_from_config_missing_state(self):
        with pytest.raises(CycleConfigurationError, match="missing 'state'"):
            Cycle.from_config([{"duration": 4}])

    def test_from_config_missing_duration(self):
        with pytest.raises(CycleConfigurationError, match="integer"):
            Cycle.from_config([{"state": "inhale"}])

    def test_to_config(self, four_seven_eight_cycle):
        assert four_seven_eight_cycle.to_config() == [
            {"state": "inhale", "duration": 4},
            {"state": "hold_after_inhale", "duration": 7},
            {"state": "exhale", "duration": 8},
        ]

    def test_cycles_in_session(self, four_seven_eight_cycle):
        assert four_seven_eight_cycle.cycles_in(300) == 15

    def test_cycles_in_short_session(self, four_seven_eight_cycle):
        assert four_seven_eight_cycle.cycles_in(18) == 0
        assert four_seven_eight_cycle.cycles_in(0) == 0


class TestBreathingExercise:
    """Test exercise-derived values."""

    def test_total_cycles(self, four_seven_eight_cycle):
        exercise = BreathingExercise(
            slug="4-7-8-breathing",
            name_key="fourSevenEightBreathing",
            description_key="fourSevenEightBreathingDesc",
            duration_minutes=5,
            cycle=four_seven_eight_cycle,
        )

        assert exercise.total_session_seconds == 300
        assert exercise.total_cycles == 15


class TestSessionSnapshot:
    """Test snapshot progress."""

    def test_progress(self):
        snapshot = SessionSnapshot(total_cycles=4, completed_cycles=1,
                                   is_running=True, is_finished=False)
        assert snapshot.progress_percent == 25.0

    def test_progress_without_cycles(self):
        snapshot = SessionSnapshot(total_cycles=0, completed_cycles=0,
                                   is_running=False, is_finished=True)
        assert snapshot.progress_percent == 0.0


class TestPackageExports:
    """Test the breathing package's public API."""

    def test_public_names(self):
        import warmnest.breathing as breathing
        from warmnest.breathing.sequencer import PhaseSequencer
        from warmnest.breathing.session import BreathingSession

        assert breathing.PhaseSequencer is PhaseSequencer
        assert breathing.BreathingSession is BreathingSession
        for name in breathing.__all__:
            assert hasattr(breathing, name)
