# src/jalali_calendars/domain/models.py
"""
Domain Models - Calendar Value Objects

This module contains the value objects the rest of the package passes around:
- Calendar dates in either calendar system
- Agenda list sections
- Locale tables used for day and month names
- Context change events

Files that USE this module:
- jalali_calendars.application.* (conversion, arithmetic, context, synchronization)
- jalali_calendars.adapters.formatting.formatter (formats CalendarDate values)
- jalali_calendars.shared.locale (builds LocaleTable instances)
- tests.* (tests use domain models for test data)

Files that this module USES:
- jalali_calendars.domain.calendar_rules (validation and epoch day)
- jalali_calendars.domain.enums (CalendarSystem, UpdateSource)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from functools import total_ordering  # Derive ordering from __lt__ and __eq__
from typing import Any, Optional, Tuple  # Type hints

from jalali_calendars.domain import calendar_rules
from jalali_calendars.domain.enums import CalendarSystem, UpdateSource
from jalali_calendars.domain.errors import InvalidDateError


@total_ordering
@dataclass(frozen=True, eq=False)
class CalendarDate:
    """
    One calendar day expressed in a given calendar system.

    Instances are validated on construction and never mutated. Equality,
    hashing and ordering use the epoch day, so the same day expressed in the
    Gregorian and the Jalali calendar compares equal. Use ``as_tuple()`` when
    the representation itself matters.

    Attributes:
        system: Calendar system of year/month/day
        year: Year number (>= 1)
        month: Month number (1-12)
        day: Day of month (1-31 depending on month and year)
        epoch_day: System independent day number (proleptic Gregorian ordinal)
    """
    system: CalendarSystem
    year: int
    month: int
    day: int
    epoch_day: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            system = CalendarSystem(self.system)
        except ValueError as e:
            raise InvalidDateError(f"Unknown calendar system: {self.system!r}") from e
        calendar_rules.validate_date(self.year, self.month, self.day, system)
        object.__setattr__(self, "system", system)
        object.__setattr__(
            self, "epoch_day", calendar_rules.to_ordinal(system, self.year, self.month, self.day)
        )

    @property
    def key(self) -> str:
        """Date key (YYYY-MM-DD) in this date's own calendar system."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_tuple(self) -> Tuple[CalendarSystem, int, int, int]:
        return self.system, self.year, self.month, self.day

    def __str__(self) -> str:
        return self.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.epoch_day == other.epoch_day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.epoch_day < other.epoch_day

    def __hash__(self) -> int:
        return hash(self.epoch_day)


@dataclass(frozen=True)
class Section:
    """
    A group of agenda items under one date key.

    Attributes:
        title: Date key of the section (YYYY-MM-DD in the display system)
        data: Items listed under that date
    """
    title: str
    data: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class LocaleTable:
    """
    Day and month names for one calendar system.

    Attributes:
        day_names: Seven day names, Sunday first
        month_names: Twelve month names, first month of the system first
        today_label: Label prefixed to today's section title
        day_names_short: Optional abbreviations (first three letters by default)
        month_names_short: Optional abbreviations (first three letters by default)
    """
    day_names: Tuple[str, ...]
    month_names: Tuple[str, ...]
    today_label: str
    day_names_short: Optional[Tuple[str, ...]] = None
    month_names_short: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "day_names", tuple(self.day_names))
        object.__setattr__(self, "month_names", tuple(self.month_names))
        if len(self.day_names) != 7:
            raise ValueError(f"day_names must have 7 entries, got {len(self.day_names)}")
        if len(self.month_names) != 12:
            raise ValueError(f"month_names must have 12 entries, got {len(self.month_names)}")
        if self.day_names_short is None:
            object.__setattr__(self, "day_names_short", tuple(n[:3] for n in self.day_names))
        elif len(self.day_names_short) != 7:
            raise ValueError("day_names_short must have 7 entries")
        if self.month_names_short is None:
            object.__setattr__(self, "month_names_short", tuple(n[:3] for n in self.month_names))
        elif len(self.month_names_short) != 12:
            raise ValueError("month_names_short must have 12 entries")


@dataclass(frozen=True)
class ContextEvent:
    """
    Notification delivered to calendar context subscribers.

    Attributes:
        kind: "date" when the selected date changed, "disabled" when the
              interactions-disabled flag changed
        date: Selected date key after the change
        previous_date: Selected date key before the change
        source: Update source of the latest date write
        disabled: Interactions-disabled flag after the change
    """
    kind: str
    date: str
    previous_date: str
    source: UpdateSource
    disabled: bool

    DATE = "date"
    DISABLED = "disabled"
