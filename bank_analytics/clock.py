"""Time sources and calendar arithmetic for trailing report windows.

Every trailing-window report ("last 30 days", "last 6 months") is anchored
on a ``Clock`` handed to the reporter, never on the process wall clock, so
that a report run is reproducible for a given snapshot and date::

    clock = FixedClock(date(2024, 6, 30))
    months_before(clock.today(), 6)   # date(2023, 12, 30)
"""

import calendar
from datetime import date, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current business date."""

    def today(self) -> date:
        ...


class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock pinned to a single date (tests, back-dated report runs)."""

    def __init__(self, current: date) -> None:
        self._current = current

    def today(self) -> date:
        return self._current

    def __repr__(self) -> str:
        return f"FixedClock({self._current.isoformat()})"


def days_before(anchor: date, days: int) -> date:
    """Return the date ``days`` calendar days before ``anchor``.

    A window reaching back past ``date.min`` is clamped to it, so an
    oversized window covers the whole history.
    """
    if days > (anchor - date.min).days:
        return date.min
    return anchor - timedelta(days=days)


def months_before(anchor: date, months: int) -> date:
    """Return the date ``months`` calendar months before ``anchor``.

    The day of month is kept when it exists in the target month and
    clamped to the month's last day otherwise (31 May minus 3 months is
    28 or 29 February), the same rule SQL ``ADD_MONTHS`` applies.

    Parameters
    ----------
    anchor : date
        Date to count back from.
    months : int
        Number of calendar months to subtract.

    Returns
    -------
    date
        The shifted date, or ``date.min`` when the target month is
        before year 1.
    """
    month_index = anchor.year * 12 + (anchor.month - 1) - months
    year, month = divmod(month_index, 12)
    if year < date.min.year:
        return date.min
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(anchor.day, last_day))
