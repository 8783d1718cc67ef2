# src/jalali_calendars/domain/__init__.py
"""
Domain Layer - Pure Calendar Objects

This package contains calendar value objects, enums, calendar rules and
domain errors. No dependencies on rendering or scheduling.
"""

from jalali_calendars.domain.enums import CalendarSystem, UpdateSource
from jalali_calendars.domain.models import (
    CalendarDate,
    ContextEvent,
    LocaleTable,
    Section,
)
from jalali_calendars.domain.errors import (
    DomainError,
    InvalidDateError,
    OutOfRangeError,
    SectionNotFoundError,
)

__all__ = [
    "CalendarSystem",
    "UpdateSource",
    "CalendarDate",
    "ContextEvent",
    "LocaleTable",
    "Section",
    "DomainError",
    "InvalidDateError",
    "OutOfRangeError",
    "SectionNotFoundError",
]
