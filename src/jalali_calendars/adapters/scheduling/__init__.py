# src/jalali_calendars/adapters/scheduling/__init__.py
"""
Scheduling Adapters

Provides the deferred-callback capability used for settle delays and debouncing.
"""

from jalali_calendars.adapters.scheduling.scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    ScheduledHandle,
    Scheduler,
)

__all__ = ["AsyncioScheduler", "ManualScheduler", "ScheduledHandle", "Scheduler"]
