# src/jalali_calendars/application/grid_sync.py
"""
Grid Sync - Calendar Grid <-> Calendar Context Synchronization

The grid side of the synchronization: the grid highlights whatever date the
context holds and follows it to another month when needed, and writes the
context when the user taps a day. Taps are ignored while the context has
interactions disabled (the agenda list is flinging).

Files that USE this module:
- jalali_calendars.app (CalendarProvider.attach_grid)
- tests.test_grid_sync (unit tests)

Files that this module USES:
- jalali_calendars.application.calendar_context (CalendarContext)
- jalali_calendars.application.converter (parse)
- jalali_calendars.adapters.rendering.base (GridSurface)
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from jalali_calendars.adapters.rendering.base import GridSurface
from jalali_calendars.application.calendar_context import CalendarContext, Subscription
from jalali_calendars.application.converter import parse
from jalali_calendars.domain.enums import CalendarSystem, UpdateSource
from jalali_calendars.domain.errors import InvalidDateError
from jalali_calendars.domain.models import ContextEvent

logger = logging.getLogger(__name__)


class CalendarGridSync:
    """Keeps one calendar grid in step with one calendar context."""

    def __init__(
        self,
        context: CalendarContext,
        surface: GridSurface,
        system: CalendarSystem = CalendarSystem.GREGORIAN,
    ):
        self.context = context
        self.surface = surface
        self.system = system
        self._subscription: Optional[Subscription] = None
        self._visible_month: Optional[Tuple[int, int]] = None

    @property
    def visible_month(self) -> Optional[Tuple[int, int]]:
        """(year, month) the grid was last asked to show."""
        return self._visible_month

    def mount(self) -> None:
        if self._subscription is not None:
            return
        self._subscription = self.context.subscribe(self._on_context_event)
        self._follow(self.context.get_date())

    def unmount(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def initialize(self, date_key: str) -> None:
        """Set the grid's initial date without moving the agenda list."""
        self.context.set_date(date_key, UpdateSource.CALENDAR_INIT)

    def on_day_press(self, date_key: str) -> bool:
        """
        The user tapped a day.

        Args:
            date_key: Date key of the tapped day

        Returns:
            True if the tap was written to the context, False if ignored
        """
        if self.context.is_disabled():
            logger.debug("Day press on %s ignored: interactions disabled", date_key)
            return False
        self.context.set_date(date_key, UpdateSource.TOUCH)
        return True

    def on_month_visible(self, year: int, month: int) -> None:
        """The user paged the grid to another month."""
        self._visible_month = (year, month)

    def _on_context_event(self, event: ContextEvent) -> None:
        if event.kind == ContextEvent.DATE:
            self._follow(event.date)

    def _follow(self, date_key: str) -> None:
        self.surface.highlight(date_key)
        try:
            date = parse(date_key, self.system)
        except InvalidDateError as e:
            logger.warning("Grid cannot show month of %s: %s", date_key, e)
            return
        month = (date.year, date.month)
        if month != self._visible_month:
            self._visible_month = month
            self.surface.show_month(date.year, date.month)
