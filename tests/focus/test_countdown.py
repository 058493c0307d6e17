"""Tests for the shared focus countdown."""

import pytest
from unittest.mock import Mock

from warmnest.errors import TimerConfigurationError
from warmnest.focus import Countdown


class TestCountdown:
    """Test ticking, pausing and expiry."""

    def test_counts_down_each_tick(self, scheduler):
        ticks = Mock()
        countdown = Countdown(scheduler, 5, on_tick=ticks)

        countdown.start()
        scheduler.advance(3)

        assert countdown.time_remaining == 2
        assert [c.args[0] for c in ticks.call_args_list] == [4, 3, 2]

    def test_expires_once(self, scheduler):
        on_expire = Mock()
        countdown = Countdown(scheduler, 5, on_expire=on_expire)

        countdown.start()
        scheduler.advance(60)

        on_expire.assert_called_once_with()
        assert countdown.expired is True
        assert countdown.is_running is False
        assert scheduler.pending_count == 0

    def test_pause_holds_time(self, scheduler):
        countdown = Countdown(scheduler, 10)
        countdown.start()
        scheduler.advance(4)

        countdown.pause()
        scheduler.advance(100)

        assert countdown.time_remaining == 6
        countdown.start()
        scheduler.advance(6)
        assert countdown.expired is True

    def test_start_when_expired_is_noop(self, scheduler):
        countdown = Countdown(scheduler, 1)
        countdown.start()
        scheduler.advance(1)

        countdown.start()

        assert countdown.is_running is False

    def test_reset_with_new_duration(self, scheduler):
        countdown = Countdown(scheduler, 10)
        countdown.start()
        scheduler.advance(3)

        countdown.reset(30)

        assert countdown.is_running is False
        assert countdown.time_remaining == 30

    def test_tick_larger_than_remaining(self, scheduler):
        countdown = Countdown(scheduler, 5, tick_seconds=2)
        countdown.start()
        scheduler.advance(6)

        assert countdown.time_remaining == 0

    @pytest.mark.parametrize("field,kwargs", [
        ("duration_seconds", {"duration_seconds": 0}),
        ("tick_seconds", {"duration_seconds": 10, "tick_seconds": -1}),
    ])
    def test_invalid_configuration(self, scheduler, field, kwargs):
        with pytest.raises(TimerConfigurationError) as exc_info:
            Countdown(scheduler, **kwargs)

        assert exc_info.value.field == field
