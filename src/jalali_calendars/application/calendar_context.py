# src/jalali_calendars/application/calendar_context.py
"""
Calendar Context - Shared Selected-Date State

This module provides the single authoritative holder of the selected date
shared by the calendar grid and the agenda list of one mounted widget tree.
Every write carries an UpdateSource so each consumer can recognise its own
echoes, and writes that do not change the date are dropped, which ends any
update cycle between the two views as soon as they agree.

A context is created explicitly by whoever mounts the widgets and is passed
to the consumers; there is no module-level instance.

Files that USE this module:
- jalali_calendars.application.sync_coordinator (list side reads/writes the context)
- jalali_calendars.application.grid_sync (grid side reads/writes the context)
- jalali_calendars.app (CalendarProvider owns one context per mount)

Files that this module USES:
- jalali_calendars.domain.models (ContextEvent, CalendarDate)
- jalali_calendars.shared.validators (split_date_key)
"""
from __future__ import annotations

import logging
from typing import Callable, List, Union

from jalali_calendars.domain.enums import UpdateSource
from jalali_calendars.domain.errors import InvalidDateError
from jalali_calendars.domain.models import CalendarDate, ContextEvent
from jalali_calendars.shared.validators import split_date_key

logger = logging.getLogger(__name__)

Listener = Callable[[ContextEvent], None]


class Subscription:
    """Handle returned by CalendarContext.subscribe; calling it unsubscribes."""

    def __init__(self, context: CalendarContext, listener: Listener):
        self._context = context
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._context.unsubscribe(self._listener)

    __call__ = unsubscribe


def _as_key(date: Union[str, CalendarDate]) -> str:
    """Canonical zero-padded YYYY-MM-DD key of a date key or CalendarDate."""
    if isinstance(date, CalendarDate):
        return date.key
    parts = split_date_key(date)
    if parts is None:
        raise InvalidDateError(f"Malformed date key: {date!r}")
    year, month, day = parts
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise InvalidDateError(f"Date key out of range: {date!r}")
    return f"{year:04d}-{month:02d}-{day:02d}"


class CalendarContext:
    """
    Selected date, its update source and the interactions-disabled flag.

    All calls are synchronous and expected on the UI/event thread.
    Subscribers are notified in registration order before set_date returns.
    """

    def __init__(
        self,
        date: Union[str, CalendarDate],
        source: UpdateSource = UpdateSource.CALENDAR_INIT,
        disabled: bool = False,
    ):
        """
        Initialize the context.

        Args:
            date: Initial selected date key (or CalendarDate)
            source: Source recorded for the initial date
            disabled: Initial interactions-disabled flag
        """
        self._date = _as_key(date)
        self._source = source
        self._disabled = disabled
        self._listeners: List[Listener] = []

    def get_date(self) -> str:
        """
        Get the selected date.

        Returns:
            Date key of the selected day
        """
        return self._date

    def get_source(self) -> UpdateSource:
        """Source of the latest date write."""
        return self._source

    def is_disabled(self) -> bool:
        return self._disabled

    def set_date(self, date: Union[str, CalendarDate], source: UpdateSource) -> None:
        """
        Select a date and notify subscribers.

        Keys are stored in canonical YYYY-MM-DD form, so "2024/3/20" selects
        "2024-03-20". Writing the currently selected date is a no-op: nothing
        changes and no subscriber is notified.

        Args:
            date: Date key (or CalendarDate) to select
            source: Actor causing the change

        Raises:
            InvalidDateError: date is malformed or its month or day is out of range
        """
        key = _as_key(date)
        if key == self._date:
            logger.debug("set_date(%s, %s) ignored: already selected", key, source.value)
            return

        previous = self._date
        self._date = key
        self._source = source
        logger.debug("Selected date %s -> %s (source=%s)", previous, key, source.value)
        self._notify(ContextEvent(
            kind=ContextEvent.DATE,
            date=key,
            previous_date=previous,
            source=source,
            disabled=self._disabled,
        ))

    def set_disabled(self, flag: bool) -> None:
        """
        Suspend or resume interactions.

        Subscribers are notified only when the flag actually changes.
        """
        flag = bool(flag)
        if flag == self._disabled:
            return
        self._disabled = flag
        self._notify(ContextEvent(
            kind=ContextEvent.DISABLED,
            date=self._date,
            previous_date=self._date,
            source=self._source,
            disabled=flag,
        ))

    def subscribe(self, listener: Listener) -> Subscription:
        """
        Register a listener for context events.

        Args:
            listener: Callable receiving a ContextEvent

        Returns:
            Subscription handle; unsubscribe() (or calling it) is idempotent
        """
        if listener not in self._listeners:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def close(self) -> None:
        """Drop every listener (widget tree unmounted)."""
        self._listeners.clear()

    def _notify(self, event: ContextEvent) -> None:
        # Snapshot: listeners may (un)subscribe or write the context while notified
        for listener in list(self._listeners):
            if listener not in self._listeners:
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Calendar context listener %r failed on %s event", listener, event.kind)
