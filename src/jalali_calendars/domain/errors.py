# src/jalali_calendars/domain/errors.py
"""
Domain Errors - Calendar Exceptions

This module defines domain-specific exceptions raised by date parsing,
conversion and section lookup.

Files that USE this module:
- jalali_calendars.domain.calendar_rules (InvalidDateError for bad year/month/day)
- jalali_calendars.application.converter (InvalidDateError, OutOfRangeError)
- jalali_calendars.application.sections (SectionNotFoundError)
- jalali_calendars.application.sync_coordinator (catches SectionNotFoundError)
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidDateError(DomainError, ValueError):
    """Raised when a year, month or day is malformed or outside its nominal range."""
    pass


class OutOfRangeError(DomainError):
    """Raised when a conversion is requested outside the supported calendar range."""
    pass


class SectionNotFoundError(DomainError, LookupError):
    """Raised when a date key cannot be resolved to a list section."""

    def __init__(self, date_key: str):
        super().__init__(f"No section found for date {date_key!r}")
        self.date_key = date_key
