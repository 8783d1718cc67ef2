# src/jalali_calendars/application/date_utils.py
"""
Date Utilities - Calendar-agnostic Date Arithmetic

This module layers day arithmetic on top of the converter. Every comparison
and every step goes through the epoch day, so results never depend on which
calendar system a date is written in, and walking a range never skips or
repeats a day at a Gregorian or Jalali month boundary.

It also provides the month helpers the calendar grid needs: the weeks of a
month padded to whole weeks, and the list of months to materialize around
today.

Files that USE this module:
- jalali_calendars.application.sections (walk_range builds sections)
- jalali_calendars.application.sync_coordinator (today for section titles)
- jalali_calendars.app (today, months_around, month_grid)
- tests.test_date_utils (unit tests)

Files that this module USES:
- jalali_calendars.application.converter (coerce)
- jalali_calendars.domain.calendar_rules (from_ordinal, days_in_month)
- jalali_calendars.domain.models (CalendarDate)
"""
from __future__ import annotations

import datetime as dt
from typing import Iterator, List, Optional

from jalali_calendars.application.converter import DateLike, coerce
from jalali_calendars.domain.calendar_rules import days_in_month, from_ordinal, weekday
from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.domain.models import CalendarDate


def to_epoch_day(date: CalendarDate) -> int:
    """System independent day number of a date (proleptic Gregorian ordinal)."""
    return date.epoch_day


def from_epoch_day(epoch_day: int, system: CalendarSystem) -> CalendarDate:
    """
    Build the date of an epoch day in the given system.

    Raises:
        InvalidDateError: epoch day is not representable in that system
    """
    year, month, day = from_ordinal(epoch_day, system)
    return CalendarDate(system, year, month, day)


def compare(a: CalendarDate, b: CalendarDate) -> int:
    """
    Compare two dates across calendar systems.

    Returns:
        -1 if a is earlier than b, 0 if they are the same day, 1 otherwise
    """
    if a.epoch_day < b.epoch_day:
        return -1
    if a.epoch_day > b.epoch_day:
        return 1
    return 0


def today(system: CalendarSystem, now: Optional[dt.date] = None) -> CalendarDate:
    """
    Today's date in the given system.

    Args:
        system: Calendar system to express today in
        now: Gregorian date to treat as today (default: datetime.date.today())
    """
    return coerce(now or dt.date.today(), system)


def is_today(date: CalendarDate, system: CalendarSystem, now: Optional[dt.date] = None) -> bool:
    """True if date is the same day as today expressed in system."""
    return date.epoch_day == today(system, now).epoch_day


def days_between(a: CalendarDate, b: CalendarDate) -> int:
    """Signed number of days from a to b."""
    return b.epoch_day - a.epoch_day


def add_days(date: CalendarDate, days: int) -> CalendarDate:
    """Date days after (or before, when negative) date, in date's system."""
    return from_epoch_day(date.epoch_day + days, date.system)


def day_of_week(date: CalendarDate) -> int:
    """Day of week, 0 = Sunday .. 6 = Saturday."""
    return weekday(date.epoch_day)


def first_of_month(date: CalendarDate) -> CalendarDate:
    return CalendarDate(date.system, date.year, date.month, 1)


def add_months(date: CalendarDate, months: int) -> CalendarDate:
    """
    Move by whole months within date's own system.

    The day is clamped to the target month's length (Esfand 30 + 12 months
    gives Esfand 29 in a common year).
    """
    index = date.year * 12 + (date.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(date.day, days_in_month(year, month, date.system))
    return CalendarDate(date.system, year, month, day)


class DateRange:
    """
    Inclusive ascending range of days.

    Iterating restarts from the first day every time, so the same range can
    feed several consumers.
    """

    def __init__(self, start: CalendarDate, end: CalendarDate, system: CalendarSystem):
        self.start = start
        self.end = end
        self.system = system

    def __iter__(self) -> Iterator[CalendarDate]:
        for epoch_day in range(self.start.epoch_day, self.end.epoch_day + 1):
            yield from_epoch_day(epoch_day, self.system)

    def __len__(self) -> int:
        return max(0, self.end.epoch_day - self.start.epoch_day + 1)

    def __contains__(self, date: object) -> bool:
        if not isinstance(date, CalendarDate):
            return False
        return self.start.epoch_day <= date.epoch_day <= self.end.epoch_day

    def __repr__(self) -> str:
        return f"DateRange({self.start.key}..{self.end.key}, {self.system.value})"


def walk_range(start: DateLike, end: DateLike, system: CalendarSystem) -> DateRange:
    """
    Walk every day from start to end inclusive.

    Args:
        start: First day (CalendarDate, or a date key in system)
        end: Last day (CalendarDate, or a date key in system)
        system: Calendar system of the produced dates

    Returns:
        Restartable DateRange (empty when end is before start)

    Raises:
        InvalidDateError: start or end cannot be parsed
        OutOfRangeError: a CalendarDate must be converted outside the supported range
    """
    return DateRange(coerce(start, system), coerce(end, system), system)


def month_grid(year: int, month: int, system: CalendarSystem, first_day_of_week: int = 0) -> List[List[CalendarDate]]:
    """
    Days of a month arranged in whole weeks for a calendar grid.

    Leading and trailing cells are filled with days of the neighbouring months.

    Args:
        year: Year in system
        month: Month in system (1-12)
        system: Calendar system of the month
        first_day_of_week: Weekday shown in the first column (0 = Sunday .. 6 = Saturday)

    Returns:
        List of weeks, each a list of seven CalendarDate values
    """
    first = CalendarDate(system, year, month, 1)
    last = CalendarDate(system, year, month, days_in_month(year, month, system))
    lead = (day_of_week(first) - first_day_of_week) % 7
    trail = (first_day_of_week + 6 - day_of_week(last)) % 7
    days = list(DateRange(add_days(first, -lead), add_days(last, trail), system))
    return [days[i:i + 7] for i in range(0, len(days), 7)]


def months_around(center: CalendarDate, past_range: int, future_range: int) -> List[CalendarDate]:
    """
    First days of the months to materialize around a date.

    Args:
        center: Date whose month is in the middle
        past_range: Number of months before center's month
        future_range: Number of months after center's month

    Returns:
        Ascending first-of-month dates in center's system
    """
    start = first_of_month(center)
    return [add_months(start, offset) for offset in range(-past_range, future_range + 1)]
