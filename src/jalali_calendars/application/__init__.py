# src/jalali_calendars/application/__init__.py
"""
Application Layer - Conversion, Arithmetic and Synchronization

This package contains the stateless date library (converter, date utilities,
sections) and the stateful coordination objects (calendar context and the
list/grid synchronizers).
"""

from jalali_calendars.application.calendar_context import CalendarContext, Subscription
from jalali_calendars.application.grid_sync import CalendarGridSync
from jalali_calendars.application.sections import SectionIndex, build_sections
from jalali_calendars.application.sync_coordinator import SyncCoordinator, SyncState

__all__ = [
    "CalendarContext",
    "Subscription",
    "CalendarGridSync",
    "SectionIndex",
    "build_sections",
    "SyncCoordinator",
    "SyncState",
]
