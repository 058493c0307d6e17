"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from unittest.mock import Mock

from warmnest.breathing.catalog import ExerciseCatalog
from warmnest.breathing.models import Cycle, PhaseState
from warmnest.breathing.sequencer import PhaseSequencer
from warmnest.timing import VirtualScheduler


@pytest.fixture
def scheduler() -> VirtualScheduler:
    """Virtual clock starting at t=0."""
    return VirtualScheduler()


@pytest.fixture
def box_cycle() -> Cycle:
    """Box breathing: 4s inhale, hold, exhale, hold (16s)."""
    return Cycle.of(
        (PhaseState.INHALE, 4),
        (PhaseState.HOLD_AFTER_INHALE, 4),
        (PhaseState.EXHALE, 4),
        (PhaseState.HOLD_AFTER_EXHALE, 4),
    )


@pytest.fixture
def four_seven_eight_cycle() -> Cycle:
    """4-7-8 breathing (19s)."""
    return Cycle.of(
        (PhaseState.INHALE, 4),
        (PhaseState.HOLD_AFTER_INHALE, 7),
        (PhaseState.EXHALE, 8),
    )


@pytest.fixture
def on_cycle_complete() -> Mock:
    return Mock()


@pytest.fixture
def sequencer(scheduler, on_cycle_complete) -> PhaseSequencer:
    return PhaseSequencer(scheduler, on_cycle_complete=on_cycle_complete)


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return ExerciseCatalog.builtin()


@pytest.fixture
def config_dir(tmp_path) -> Path:
    """Empty configuration directory."""
    path = tmp_path / "config"
    path.mkdir()
    return path
