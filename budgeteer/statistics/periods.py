"""
Calendar periods and lookback windows.

A period is one calendar bucket: an ISO-8601 week, a calendar month or a
single day. Weeks use ``date.isocalendar()``: they start on Monday, week 1
is the week containing the year's first Thursday, and the period's year is
the ISO week-year (so 2024-12-30 belongs to 2025-W01). Months are 1-based.

A window is the list of the last N periods, oldest first, whose final
element is the period containing "today".
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional, Type, Union


class PeriodUnit(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True, order=True)
class Week:
    year: int
    week: int

    @classmethod
    def of(cls, day: date) -> "Week":
        iso = day.isocalendar()
        return cls(iso[0], iso[1])

    def first_day(self) -> date:
        return date.fromisocalendar(self.year, self.week, 1)

    def shift(self, weeks: int) -> "Week":
        return Week.of(self.first_day() + timedelta(weeks=weeks))

    def next(self) -> "Week":
        return self.shift(1)

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}"


@dataclass(frozen=True, order=True)
class Month:
    year: int
    month: int

    @classmethod
    def of(cls, day: date) -> "Month":
        return cls(day.year, day.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def shift(self, months: int) -> "Month":
        year, month_index = divmod(self.year * 12 + self.month - 1 + months, 12)
        return Month(year, month_index + 1)

    def next(self) -> "Month":
        return self.shift(1)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


@dataclass(frozen=True, order=True)
class Day:
    day: date

    @classmethod
    def of(cls, day: date) -> "Day":
        return cls(day)

    def first_day(self) -> date:
        return self.day

    def shift(self, days: int) -> "Day":
        return Day(self.day + timedelta(days=days))

    def next(self) -> "Day":
        return self.shift(1)

    def __str__(self) -> str:
        return self.day.isoformat()


Period = Union[Day, Week, Month]

_PERIOD_TYPES = {
    PeriodUnit.DAY: Day,
    PeriodUnit.WEEK: Week,
    PeriodUnit.MONTH: Month,
}


def period_type(unit: PeriodUnit) -> Type[Period]:
    return _PERIOD_TYPES[PeriodUnit(unit)]


def period_of(unit: PeriodUnit, day: date) -> Period:
    """The period of the given unit that contains ``day``."""
    return period_type(unit).of(day)


def build_window(
    unit: PeriodUnit, count: int, today: Optional[date] = None
) -> List[Period]:
    """
    Build the last ``count`` periods ending with the one containing today.

    Each element is the successor of the previous one. A count of zero
    gives an empty window.

    Raises:
        ValueError: if count is negative
    """
    if count < 0:
        raise ValueError(f"Number of periods must not be negative, got {count}")
    if count == 0:
        return []

    current = period_of(unit, today or date.today())
    window = [current.shift(-(count - 1))]
    while len(window) < count:
        window.append(window[-1].next())
    return window


def window_start(unit: PeriodUnit, count: int, today: Optional[date] = None) -> date:
    """First calendar day covered by a window of ``count`` periods.

    Used as the lower bound when querying records for the window. An empty
    window starts at the current period so the query returns nothing older.
    """
    current = period_of(unit, today or date.today())
    return current.shift(-max(count - 1, 0)).first_day()


def weeks_ago(count: int, today: Optional[date] = None) -> date:
    """Monday of the first week in a window of ``count`` weeks."""
    return window_start(PeriodUnit.WEEK, count, today)


def months_ago(count: int, today: Optional[date] = None) -> date:
    """First day of the first month in a window of ``count`` months."""
    return window_start(PeriodUnit.MONTH, count, today)


def days_ago(count: int, today: Optional[date] = None) -> date:
    """First day in a window of ``count`` days."""
    return window_start(PeriodUnit.DAY, count, today)
