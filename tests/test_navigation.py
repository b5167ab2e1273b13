"""Tests for the month window controller."""
from datetime import date

import pytest

from shiftboard.exceptions import NavigationLimitError
from shiftboard.models.month import MonthKey
from shiftboard.navigation import MonthWindow


@pytest.fixture
def window(today):
    return MonthWindow(forward_month_limit=2, clock=lambda: today)


class TestMonthWindow:
    def test_starts_at_real_month(self, window):
        assert window.current == MonthKey(2026, 10)

    def test_max_month(self, window):
        assert window.max_month() == MonthKey(2026, 12)

    def test_forward_within_limit(self, window):
        assert window.shift(1) == MonthKey(2026, 11)
        assert window.shift(1) == MonthKey(2026, 12)

    def test_forward_past_limit_rejected(self, window):
        with pytest.raises(NavigationLimitError) as exc:
            window.shift(3)
        assert window.current == MonthKey(2026, 10)
        assert exc.value.target == MonthKey(2027, 1)
        assert exc.value.max_month == MonthKey(2026, 12)
        assert "2ヶ月先" in str(exc.value)

    def test_stepwise_past_limit_rejected(self, window):
        window.shift(1)
        window.shift(1)
        with pytest.raises(NavigationLimitError):
            window.shift(1)
        assert window.current == MonthKey(2026, 12)

    def test_backward_unrestricted(self, window):
        assert window.shift(-24) == MonthKey(2024, 10)

    def test_zero_offset_is_noop(self, window):
        assert window.shift(0) == MonthKey(2026, 10)

    def test_back_then_forward_from_past(self, window):
        window.shift(-6)
        assert window.shift(5) == MonthKey(2026, 9)

    def test_limit_follows_real_date(self, window):
        """The cap is relative to the real month, not the displayed one."""
        assert not window.can_shift(3)
        assert window.can_shift(3, today=date(2026, 11, 1))
        assert window.shift(3, today=date(2026, 11, 1)) == MonthKey(2027, 1)

    def test_can_shift(self, window):
        assert window.can_shift(2)
        assert not window.can_shift(3)
        assert window.can_shift(-100)

    def test_zero_limit(self, today):
        window = MonthWindow(forward_month_limit=0, clock=lambda: today)
        with pytest.raises(NavigationLimitError):
            window.shift(1)

    def test_rejection_logged(self, window, caplog):
        with caplog.at_level("WARNING"):
            with pytest.raises(NavigationLimitError):
                window.shift(5)
        assert "rejected" in caplog.text

    def test_explicit_start(self, today):
        window = MonthWindow(current=MonthKey(2025, 1), clock=lambda: today)
        assert window.current == MonthKey(2025, 1)
