# src/jalali_calendars/application/converter.py
"""
Date Converter - Gregorian <-> Jalali Conversion, Parsing and Formatting

This module is the stateless conversion library of the package. Conversion
uses jdatetime, which implements the 33-year arithmetic Jalali cycle. The
supported range is Jalali 1178-01-01 (Gregorian 1799-03-21) through Gregorian
2100-12-31 (Jalali 1479-10-10); conversions outside it raise OutOfRangeError.

Files that USE this module:
- jalali_calendars.application.date_utils (parse/coerce for range walking)
- jalali_calendars.application.sections (parse section titles)
- jalali_calendars.application.sync_coordinator (parse date keys)
- jalali_calendars.app (CalendarProvider.format)
- tests.test_converter (unit tests)

Files that this module USES:
- jdatetime (Jalali calendar arithmetic)
- jalali_calendars.domain.calendar_rules (is_leap_year, days_in_month)
- jalali_calendars.domain.models (CalendarDate)
- jalali_calendars.shared.validators (split_date_key)
- jalali_calendars.shared.locale (default locale tables)
- jalali_calendars.adapters.formatting.formatter (formatting strategies)
"""
from __future__ import annotations

import datetime as dt
from typing import Optional, Union

import jdatetime

from jalali_calendars.adapters.formatting.formatter import DateFormatter, get_formatter
from jalali_calendars.domain.calendar_rules import days_in_month, is_leap_year
from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.domain.errors import InvalidDateError, OutOfRangeError
from jalali_calendars.domain.models import CalendarDate, LocaleTable
from jalali_calendars.shared.locale import get_locale
from jalali_calendars.shared.validators import split_date_key

__all__ = [
    "MIN_SUPPORTED",
    "MAX_SUPPORTED",
    "to_jalali",
    "to_gregorian",
    "convert",
    "parse",
    "coerce",
    "format_date",
    "is_leap_year",
    "days_in_month",
]

DateLike = Union[CalendarDate, str, dt.date, jdatetime.date]

MIN_SUPPORTED = CalendarDate(CalendarSystem.JALALI, 1178, 1, 1)
MAX_SUPPORTED = CalendarDate(CalendarSystem.GREGORIAN, 2100, 12, 31)


def _check_supported(date: CalendarDate) -> None:
    if not MIN_SUPPORTED.epoch_day <= date.epoch_day <= MAX_SUPPORTED.epoch_day:
        raise OutOfRangeError(
            f"{date.system.value} date {date.key} is outside the supported range "
            f"(Gregorian 1799-03-21 .. 2100-12-31)"
        )


def to_jalali(gregorian: CalendarDate) -> CalendarDate:
    """
    Convert a date to the Jalali calendar.

    Args:
        gregorian: Date to convert (a Jalali date is returned unchanged)

    Returns:
        The same day as a Jalali CalendarDate

    Raises:
        OutOfRangeError: date is outside the supported range
    """
    _check_supported(gregorian)
    if gregorian.system is CalendarSystem.JALALI:
        return gregorian
    j = jdatetime.date.fromgregorian(date=dt.date(gregorian.year, gregorian.month, gregorian.day))
    return CalendarDate(CalendarSystem.JALALI, j.year, j.month, j.day)


def to_gregorian(jalali: CalendarDate) -> CalendarDate:
    """
    Convert a date to the Gregorian calendar.

    Exact inverse of to_jalali: to_gregorian(to_jalali(d)) reproduces d.

    Raises:
        OutOfRangeError: date is outside the supported range
    """
    _check_supported(jalali)
    if jalali.system is CalendarSystem.GREGORIAN:
        return jalali
    g = jdatetime.date(jalali.year, jalali.month, jalali.day).togregorian()
    return CalendarDate(CalendarSystem.GREGORIAN, g.year, g.month, g.day)


def convert(date: CalendarDate, system: CalendarSystem) -> CalendarDate:
    """Express date in the given calendar system."""
    if system is CalendarSystem.JALALI:
        return to_jalali(date)
    return to_gregorian(date)


def parse(key: str, system: CalendarSystem) -> CalendarDate:
    """
    Parse a date key in the given calendar system.

    Args:
        key: "YYYY-MM-DD" (also "YYYY/MM/DD", Persian digits allowed)
        system: Calendar system the key is written in

    Returns:
        Validated CalendarDate

    Raises:
        InvalidDateError: key is malformed or names a non-existent day
    """
    parts = split_date_key(key)
    if parts is None:
        raise InvalidDateError(f"Malformed date key: {key!r}")
    year, month, day = parts
    return CalendarDate(system, year, month, day)


def coerce(value: DateLike, system: CalendarSystem) -> CalendarDate:
    """
    Turn a date-like value into a CalendarDate expressed in system.

    Accepts CalendarDate (converted), date keys (parsed in system),
    datetime.date/datetime (Gregorian) and jdatetime.date (Jalali).
    """
    if isinstance(value, CalendarDate):
        return value if value.system is system else convert(value, system)
    if isinstance(value, str):
        return parse(value, system)
    if isinstance(value, (jdatetime.date, jdatetime.datetime)):
        native = CalendarDate(CalendarSystem.JALALI, value.year, value.month, value.day)
    elif isinstance(value, dt.date):
        native = CalendarDate(CalendarSystem.GREGORIAN, value.year, value.month, value.day)
    else:
        raise InvalidDateError(f"Cannot interpret {value!r} as a date")
    return native if native.system is system else convert(native, system)


def format_date(
    date: CalendarDate,
    pattern: str,
    locale: Optional[LocaleTable] = None,
    formatter: Optional[DateFormatter] = None,
) -> str:
    """
    Format a date with day and month names of its own calendar system.

    Args:
        date: Date to format
        pattern: Pattern understood by the formatter ("dddd, MMM d" for the default)
        locale: Locale table (default: the table registered for date.system)
        formatter: Formatting strategy (default: token formatter)

    Returns:
        Formatted text; unknown tokens are copied literally
    """
    table = locale or get_locale(date.system)
    return (formatter or get_formatter()).format(date, pattern, table)
