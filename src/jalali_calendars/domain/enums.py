# src/jalali_calendars/domain/enums.py
"""
Domain Enums - Calendar Systems and Update Sources

Files that USE this module:
- jalali_calendars.domain.* (models and calendar rules)
- jalali_calendars.application.* (conversion, context and synchronization)
"""
from enum import Enum


class CalendarSystem(str, Enum):
    """Calendar system a date is expressed in."""
    GREGORIAN = "gregorian"
    JALALI = "jalali"


class UpdateSource(str, Enum):
    """
    Actor that caused a change of the selected date.

    Consumers of the calendar context look at the source to decide whether
    they should react to a change or whether they produced it themselves.
    """
    LIST_DRAG = "listDrag"
    CALENDAR_INIT = "calendarInit"
    PROGRAMMATIC = "programmatic"
    TOUCH = "touch"
