# src/jalali_calendars/adapters/formatting/formatter.py
"""
Date Formatter - Text Formatting of Calendar Dates

This module turns CalendarDate values into display text. Two formatting
strategies are available and selected by configuration:

- TokenFormatter: pattern tokens such as "dddd, MMM d" (default)
- StrftimeFormatter: strftime-style directives such as "%A, %b %-d", rendered
  by jdatetime (Jalali) or datetime (Gregorian)

Both read day and month names from a LocaleTable, so the same pattern renders
Gregorian and Jalali dates with the right names.

Files that USE this module:
- jalali_calendars.application.converter (format delegates here)
- jalali_calendars.application.sync_coordinator (section header titles)
- tests.test_formatter (unit tests)

Files that this module USES:
- jdatetime (strftime of Jalali dates)
- jalali_calendars.domain.calendar_rules (weekday)
- jalali_calendars.domain.models (CalendarDate, LocaleTable)
- jalali_calendars.shared.locale (to_persian_digits)
"""
from __future__ import annotations

import datetime as dt
import re
from abc import ABC, abstractmethod
from typing import Optional, Union

import jdatetime

from jalali_calendars.domain.calendar_rules import weekday
from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.domain.models import CalendarDate, LocaleTable
from jalali_calendars.shared.locale import to_persian_digits

_TOKEN_PATTERN = re.compile(r"'[^']*'|dddd|ddd|dd|d|MMMM|MMM|MM|M|yyyy|yy")
_DIRECTIVE_PATTERN = re.compile(r"%(-?)([A-Za-z%])")


class DateFormatter(ABC):
    """Strategy that renders a date according to a pattern."""

    @abstractmethod
    def format(self, date: CalendarDate, pattern: str, locale: LocaleTable) -> str:
        """Return the formatted date; unknown tokens are copied literally."""
        raise NotImplementedError


class TokenFormatter(DateFormatter):
    """
    Pattern formatter with day/month/year tokens.

    Tokens: dddd (day name), ddd (short day name), dd (zero-padded day),
    d (day), MMMM (month name), MMM (short month name), MM (zero-padded
    month), M (month), yyyy (year), yy (two-digit year). Text in single
    quotes is emitted without the quotes.
    """

    def format(self, date: CalendarDate, pattern: str, locale: LocaleTable) -> str:
        dow = weekday(date.epoch_day)

        def replace(match: re.Match) -> str:
            token = match.group(0)
            if token.startswith("'"):
                return token[1:-1]
            if token == "dddd":
                return locale.day_names[dow]
            if token == "ddd":
                return locale.day_names_short[dow]
            if token == "dd":
                return f"{date.day:02d}"
            if token == "d":
                return str(date.day)
            if token == "MMMM":
                return locale.month_names[date.month - 1]
            if token == "MMM":
                return locale.month_names_short[date.month - 1]
            if token == "MM":
                return f"{date.month:02d}"
            if token == "M":
                return str(date.month)
            if token == "yyyy":
                return f"{date.year:04d}"
            return f"{date.year % 100:02d}"  # yy

        return _TOKEN_PATTERN.sub(replace, pattern)


def _native(date: CalendarDate) -> Union[dt.date, jdatetime.date]:
    if date.system is CalendarSystem.JALALI:
        return jdatetime.date(date.year, date.month, date.day)
    return dt.date(date.year, date.month, date.day)


class StrftimeFormatter(DateFormatter):
    """
    strftime-style formatter.

    Name directives (%A %a %B %b) are taken from the locale table and the
    unpadded %-d and %-m are filled in here. The rest of the pattern is
    rendered by jdatetime.date.strftime for Jalali dates and by
    datetime.date.strftime for Gregorian dates.
    """

    def format(self, date: CalendarDate, pattern: str, locale: LocaleTable) -> str:
        dow = weekday(date.epoch_day)

        def replace(match: re.Match) -> str:
            no_pad, directive = match.group(1), match.group(2)
            if no_pad:
                if directive == "d":
                    return str(date.day)
                if directive == "m":
                    return str(date.month)
                return match.group(0)
            if directive == "A":
                text = locale.day_names[dow]
            elif directive == "a":
                text = locale.day_names_short[dow]
            elif directive == "B":
                text = locale.month_names[date.month - 1]
            elif directive == "b":
                text = locale.month_names_short[date.month - 1]
            else:
                return match.group(0)
            # names are literal text for strftime
            return text.replace("%", "%%")

        return _native(date).strftime(_DIRECTIVE_PATTERN.sub(replace, pattern))


_PRIMARY = TokenFormatter()
_SECONDARY = StrftimeFormatter()


def get_formatter(use_secondary: bool = False) -> DateFormatter:
    """
    Select the formatting strategy.

    Args:
        use_secondary: True for the strftime-style formatter

    Returns:
        Shared formatter instance
    """
    return _SECONDARY if use_secondary else _PRIMARY


def format_section_title(
    date: CalendarDate,
    pattern: str,
    locale: LocaleTable,
    today: Optional[CalendarDate] = None,
    formatter: Optional[DateFormatter] = None,
    persian_digits: bool = False,
) -> str:
    """
    Format an agenda section header.

    Args:
        date: Section date, already in the display system
        pattern: Day format pattern
        locale: Names for the display system
        today: Today's date; when equal to date the locale's today label is prefixed
        formatter: Formatting strategy (default: TokenFormatter)
        persian_digits: Render digits as Persian digits

    Returns:
        Title such as "Today, Wednesday, Mar 20"
    """
    text = (formatter or _PRIMARY).format(date, pattern, locale)
    if today is not None and date == today:
        text = f"{locale.today_label}, {text}"
    if persian_digits:
        text = to_persian_digits(text)
    return text
