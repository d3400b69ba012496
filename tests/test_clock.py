"""Tests for clocks and window arithmetic."""

from datetime import date

import pytest

from bank_analytics.clock import FixedClock, SystemClock, days_before, months_before


class TestClocks:
    """Tests for SystemClock and FixedClock."""

    def test_fixed_clock(self) -> None:
        """FixedClock always returns its date."""
        clock = FixedClock(date(2024, 6, 30))

        assert clock.today() == date(2024, 6, 30)
        assert clock.today() == clock.today()

    def test_fixed_clock_repr(self) -> None:
        """Repr shows the pinned date."""
        assert repr(FixedClock(date(2024, 1, 2))) == "FixedClock(2024-01-02)"

    def test_system_clock(self) -> None:
        """SystemClock follows the local date."""
        assert SystemClock().today() == date.today()
        assert repr(SystemClock()) == "SystemClock()"


class TestDaysBefore:
    """Tests for days_before."""

    def test_zero_days(self) -> None:
        """Zero days is the anchor itself."""
        assert days_before(date(2024, 6, 30), 0) == date(2024, 6, 30)

    def test_crosses_leap_day(self) -> None:
        """365 days back from mid-2024 lands on 1 July 2023."""
        assert days_before(date(2024, 6, 30), 365) == date(2023, 7, 1)


class TestMonthsBefore:
    """Tests for months_before."""

    @pytest.mark.parametrize(
        "anchor,months,expected",
        [
            (date(2024, 6, 30), 0, date(2024, 6, 30)),
            (date(2024, 6, 30), 6, date(2023, 12, 30)),
            (date(2024, 6, 30), 12, date(2023, 6, 30)),
            (date(2024, 1, 15), 1, date(2023, 12, 15)),
            (date(2024, 3, 10), 26, date(2022, 1, 10)),
        ],
    )
    def test_keeps_day(self, anchor: date, months: int, expected: date) -> None:
        """Day of month is kept when the target month has it."""
        assert months_before(anchor, months) == expected

    def test_clamps_to_month_end(self) -> None:
        """31 May minus 3 months is the last day of February."""
        assert months_before(date(2024, 5, 31), 3) == date(2024, 2, 29)
        assert months_before(date(2023, 5, 31), 3) == date(2023, 2, 28)

    def test_clamps_thirty_day_month(self) -> None:
        """31 December minus 6 months is 30 June."""
        assert months_before(date(2024, 12, 31), 6) == date(2024, 6, 30)


class TestOversizedWindows:
    """Windows reaching back before year 1 cover the whole history."""

    def test_days_clamped(self) -> None:
        """Huge day windows stop at date.min."""
        assert days_before(date(2024, 6, 30), 1_000_000) == date.min
        assert days_before(date(2024, 6, 30), 10**9) == date.min

    def test_days_exactly_to_first_date(self) -> None:
        """A window ending on date.min itself is not clamped early."""
        anchor = date(1, 1, 31)

        assert days_before(anchor, 30) == date.min
        assert days_before(anchor, 29) == date(1, 1, 2)

    def test_months_clamped(self) -> None:
        """Huge month windows stop at date.min."""
        assert months_before(date(2024, 6, 30), 30_000) == date.min
        assert months_before(date(2024, 6, 30), 10**12) == date.min

    def test_months_to_year_one(self) -> None:
        """January of year 1 is still representable."""
        assert months_before(date(2, 3, 31), 14) == date(1, 1, 31)
