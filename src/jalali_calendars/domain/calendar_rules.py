# src/jalali_calendars/domain/calendar_rules.py
"""
Calendar Rules - Leap Years, Month Lengths and Epoch Days

This module holds the primitive calendar arithmetic every other part of the
package is built on. Jalali arithmetic is delegated to jdatetime (33-year
arithmetic cycle); the Jalali leap rule is derived from that same conversion
so that month lengths and conversions can never disagree.

The epoch day is the proleptic Gregorian ordinal (0001-01-01 == 1), which is
independent of the calendar system a date is expressed in.

Files that USE this module:
- jalali_calendars.domain.models (CalendarDate validation and epoch day)
- jalali_calendars.application.converter (re-exports is_leap_year, days_in_month)
- jalali_calendars.application.date_utils (epoch day arithmetic)

Files that this module USES:
- jdatetime (Jalali <-> Gregorian conversion)
- jalali_calendars.domain.enums (CalendarSystem)
- jalali_calendars.domain.errors (InvalidDateError)
"""
from __future__ import annotations

import calendar  # Gregorian leap years and month lengths
from datetime import MAXYEAR, date
from functools import lru_cache
from typing import Tuple

import jdatetime  # Jalali calendar arithmetic

from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.domain.errors import InvalidDateError

_JALALI_MONTH_LENGTHS = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Jalali leap years are derived from the start of the following year
JALALI_MAX_YEAR = jdatetime.MAXYEAR - 1
GREGORIAN_MAX_YEAR = MAXYEAR


def max_year(system: CalendarSystem) -> int:
    """Largest year representable in the given calendar system."""
    if system is CalendarSystem.JALALI:
        return JALALI_MAX_YEAR
    return GREGORIAN_MAX_YEAR


def validate_year(year: int, system: CalendarSystem) -> None:
    """
    Reject years outside 1..max_year(system).

    Raises:
        InvalidDateError: year is not an int, is zero/negative or too large
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDateError(f"Year must be an integer, got {year!r}")
    if year < 1 or year > max_year(system):
        raise InvalidDateError(
            f"Year {year} is outside 1..{max_year(system)} for {system.value} calendar"
        )


def validate_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be in 1..12, got {month!r}")


@lru_cache(maxsize=1024)
def _jalali_year_length(year: int) -> int:
    start = jdatetime.date(year, 1, 1).togregorian()
    next_start = jdatetime.date(year + 1, 1, 1).togregorian()
    return (next_start - start).days


def is_leap_year(year: int, system: CalendarSystem) -> bool:
    """
    Check whether a year is a leap year in the given calendar system.

    Args:
        year: Year number (>= 1)
        system: Calendar system the year belongs to

    Returns:
        True for 366-day years
    """
    validate_year(year, system)
    if system is CalendarSystem.GREGORIAN:
        return calendar.isleap(year)
    return _jalali_year_length(year) == 366


def days_in_month(year: int, month: int, system: CalendarSystem) -> int:
    """
    Number of days in a month.

    Jalali months 1-6 have 31 days, 7-11 have 30 and Esfand has 30 days in
    leap years, 29 otherwise.
    """
    validate_year(year, system)
    validate_month(month)
    if system is CalendarSystem.GREGORIAN:
        return calendar.monthrange(year, month)[1]
    if month == 12:
        return 30 if is_leap_year(year, system) else 29
    return _JALALI_MONTH_LENGTHS[month - 1]


def validate_date(year: int, month: int, day: int, system: CalendarSystem) -> None:
    """
    Validate a full date, checking year and month before the day.

    Raises:
        InvalidDateError: any component is outside its range
    """
    length = days_in_month(year, month, system)
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= length:
        raise InvalidDateError(
            f"Day must be in 1..{length} for {system.value} {year}-{month:02d}, got {day!r}"
        )


def to_ordinal(system: CalendarSystem, year: int, month: int, day: int) -> int:
    """Epoch day of an already validated date."""
    if system is CalendarSystem.GREGORIAN:
        return date(year, month, day).toordinal()
    return jdatetime.date(year, month, day).togregorian().toordinal()


def from_ordinal(ordinal: int, system: CalendarSystem) -> Tuple[int, int, int]:
    """
    Split an epoch day into (year, month, day) of the given system.

    Raises:
        InvalidDateError: ordinal is outside the representable range
    """
    try:
        gregorian = date.fromordinal(ordinal)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Epoch day {ordinal} is not representable") from e
    if system is CalendarSystem.GREGORIAN:
        return gregorian.year, gregorian.month, gregorian.day
    try:
        jalali = jdatetime.date.fromgregorian(date=gregorian)
    except ValueError as e:
        raise InvalidDateError(f"Epoch day {ordinal} precedes the Jalali calendar") from e
    return jalali.year, jalali.month, jalali.day


def weekday(ordinal: int) -> int:
    """Day of week of an epoch day, 0 = Sunday .. 6 = Saturday (epoch day 1 is a Monday)."""
    return ordinal % 7
