"""
Unit tests for settle waits.
"""

from unittest.mock import Mock, call

import pytest

from translitqa.core.interaction.waits import (
    FixedDelay,
    StableOutputWait,
    create_settle_wait,
)
from translitqa.types.configuration import TimingConfig


@pytest.fixture
def page():
    return Mock()


class TestFixedDelay:

    def test_waits_full_interval(self, page):
        read_output = Mock()

        FixedDelay().settle(page, read_output, 3000)

        page.wait_for_timeout.assert_called_once_with(3000)
        read_output.assert_not_called()

    def test_zero_interval_skips_wait(self, page):
        FixedDelay().settle(page, Mock(), 0)
        page.wait_for_timeout.assert_not_called()


class TestStableOutputWait:

    def test_returns_once_output_stops_changing(self, page):
        read_output = Mock(side_effect=["", "m", "මම", "මම", "මම", "never read"])
        wait = StableOutputWait(poll_interval_ms=100, stable_for_ms=200)

        wait.settle(page, read_output, 3000)

        assert page.wait_for_timeout.call_count == 4
        assert read_output.call_count == 5

    def test_empty_output_waits_until_cap(self, page):
        wait = StableOutputWait(poll_interval_ms=250, stable_for_ms=250)

        wait.settle(page, Mock(return_value=""), 1000)

        assert page.wait_for_timeout.call_args_list == [call(250)] * 4

    def test_empty_output_allowed_settles_early(self, page):
        wait = StableOutputWait(poll_interval_ms=250, stable_for_ms=500)

        wait.settle(page, Mock(return_value=""), 1000, allow_empty=True)

        assert page.wait_for_timeout.call_count == 2

    def test_never_exceeds_max(self, page):
        counter = iter(range(1000))
        wait = StableOutputWait(poll_interval_ms=250, stable_for_ms=250)

        wait.settle(page, lambda: str(next(counter)), 600)

        assert page.wait_for_timeout.call_args_list == [call(250), call(250), call(100)]

    def test_rejects_non_positive_poll_interval(self):
        with pytest.raises(ValueError):
            StableOutputWait(poll_interval_ms=0)


class TestCreateSettleWait:

    def test_fixed(self):
        assert isinstance(create_settle_wait(TimingConfig()), FixedDelay)

    def test_stable(self):
        wait = create_settle_wait(
            TimingConfig(settle_mode="stable", poll_interval_ms=50, stable_for_ms=150)
        )
        assert isinstance(wait, StableOutputWait)
        assert wait.poll_interval_ms == 50
        assert wait.stable_for_ms == 150

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown settle mode"):
            create_settle_wait(TimingConfig(settle_mode="event"))
