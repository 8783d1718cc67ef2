# src/jalali_calendars/application/sync_coordinator.py
"""
Sync Coordinator - Agenda List <-> Calendar Context Synchronization

This module keeps an independently scrolling agenda list in step with the
shared calendar context without feedback loops:

- When another actor (a grid tap, a "today" button) selects a date, the list
  is scrolled programmatically to that date's section. While that scroll is
  in flight, the visible-section changes it produces are suppressed, so the
  list never writes the date back.
- When the user drags the list, the top-most visible section (debounced) is
  written to the context tagged LIST_DRAG, which the list itself then ignores.
- On mount, if the context's date is not the first rendered section, a
  one-time alignment scroll is scheduled after a settle delay so layout can
  complete. It is cancelled if the list unmounts first.

States:
    IDLE                -> no scroll in flight
    PROGRAMMATIC_SCROLL -> scroll issued by the coordinator; visible changes suppressed
    USER_SCROLLING      -> drag-originated scroll, from first frame to momentum end

Files that USE this module:
- jalali_calendars.app (CalendarProvider.attach_agenda)
- tests.test_sync_coordinator (state machine tests)

Files that this module USES:
- jalali_calendars.application.calendar_context (CalendarContext)
- jalali_calendars.application.sections (SectionIndex)
- jalali_calendars.adapters.rendering.base (ListSurface)
- jalali_calendars.adapters.scheduling.scheduler (Scheduler)
- jalali_calendars.adapters.formatting.formatter (section titles)
"""
from __future__ import annotations

import datetime as dt
import logging
from enum import Enum
from typing import Any, Optional, Sequence

from jalali_calendars.adapters.formatting.formatter import DateFormatter, format_section_title
from jalali_calendars.adapters.rendering.base import ListSurface
from jalali_calendars.adapters.scheduling.scheduler import ScheduledHandle, Scheduler
from jalali_calendars.application import date_utils
from jalali_calendars.application.calendar_context import CalendarContext, Subscription
from jalali_calendars.application.converter import parse
from jalali_calendars.application.sections import SectionIndex
from jalali_calendars.domain.enums import CalendarSystem, UpdateSource
from jalali_calendars.domain.errors import SectionNotFoundError
from jalali_calendars.domain.models import ContextEvent, LocaleTable, Section
from jalali_calendars.shared.locale import get_locale

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY = 0.5  # seconds
DEFAULT_VISIBLE_DEBOUNCE = 0.05  # seconds

# Context writes from these sources never move the list
_PASSIVE_SOURCES = (UpdateSource.LIST_DRAG, UpdateSource.CALENDAR_INIT)


class SyncState(str, Enum):
    IDLE = "idle"
    PROGRAMMATIC_SCROLL = "programmaticScroll"
    USER_SCROLLING = "userScrolling"


class SyncCoordinator:
    """Synchronizes one agenda list with one calendar context."""

    def __init__(
        self,
        context: CalendarContext,
        surface: ListSurface,
        sections: Sequence[Section],
        scheduler: Scheduler,
        system: CalendarSystem = CalendarSystem.GREGORIAN,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        visible_debounce: float = DEFAULT_VISIBLE_DEBOUNCE,
        day_format: str = "dddd, MMM d",
        locale: Optional[LocaleTable] = None,
        formatter: Optional[DateFormatter] = None,
        persian_digits: bool = False,
    ):
        """
        Initialize the coordinator (call mount() to start it).

        Args:
            context: Shared calendar context
            surface: List surface to scroll
            sections: Sections in the order the list renders them
            scheduler: Scheduler for the settle delay and debounce
            system: Calendar system of section titles and date keys
            settle_delay: Seconds to wait before the initial alignment scroll
            visible_debounce: Seconds to debounce visible-section changes (0 = immediate)
            day_format: Section title pattern
            locale: Names used in section titles (default: locale of system)
            formatter: Formatting strategy for section titles
            persian_digits: Render section title digits as Persian digits
        """
        self.context = context
        self.surface = surface
        self.scheduler = scheduler
        self.system = system
        self.settle_delay = settle_delay
        self.visible_debounce = visible_debounce
        self.day_format = day_format
        self.locale = locale
        self.formatter = formatter
        self.persian_digits = persian_digits

        self._index = SectionIndex(sections, system)
        self._state = SyncState.IDLE
        self._did_scroll = False
        self._last_synced: Optional[str] = self._index.first_title
        self._header_height = 0.0
        self._subscription: Optional[Subscription] = None
        self._init_handle: Optional[ScheduledHandle] = None
        self._debounce_handle: Optional[ScheduledHandle] = None
        self._pending_top: Optional[str] = None

    # ----- introspection -----

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def last_synced(self) -> Optional[str]:
        """Title of the section the list was last aligned to."""
        return self._last_synced

    @property
    def mounted(self) -> bool:
        return self._subscription is not None

    # ----- lifecycle -----

    def mount(self) -> None:
        """
        Start listening to the context.

        Schedules the initial alignment scroll when the selected date is not
        the first rendered section.
        """
        if self.mounted:
            return
        self._subscription = self.context.subscribe(self._on_context_event)
        date = self.context.get_date()
        if date != self._last_synced:
            logger.debug("Scheduling initial agenda alignment to %s in %.2fs", date, self.settle_delay)
            self._init_handle = self.scheduler.call_later(self.settle_delay, self._align_initial)

    def unmount(self) -> None:
        """Stop listening, cancel pending callbacks and reset to IDLE."""
        if self._init_handle is not None:
            self._init_handle.cancel()
            self._init_handle = None
        self._cancel_debounce()
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._state = SyncState.IDLE
        self._did_scroll = False

    def set_sections(self, sections: Sequence[Section]) -> None:
        """Replace the section list (the host regenerated its sections)."""
        self._index = SectionIndex(sections, self.system)
        logger.debug("Agenda sections replaced: %d sections", len(self._index))

    # ----- context side -----

    def _on_context_event(self, event: ContextEvent) -> None:
        if event.kind != ContextEvent.DATE:
            return
        if event.source in _PASSIVE_SOURCES:
            logger.debug("Context date %s from %s: list stays put", event.date, event.source.value)
            return
        self._scroll_to_date(event.date)

    def _align_initial(self) -> None:
        self._init_handle = None
        self._scroll_to_date(self.context.get_date())

    def _scroll_to_date(self, date_key: str) -> None:
        try:
            index = self._index.index_of(date_key)
        except SectionNotFoundError as e:
            logger.warning("Agenda not scrolled: %s", e)
            return
        if self._index.title_at(index) == self._last_synced:
            logger.debug("Agenda already aligned to %s", date_key)
            return
        self.scroll_to_section(index)

    def scroll_to_section(self, section_index: int) -> None:
        """
        Scroll the list so a section is at the top, suppressing its echoes.

        Args:
            section_index: Index of the target section
        """
        self._state = SyncState.PROGRAMMATIC_SCROLL
        self._last_synced = self._index.title_at(section_index)
        self._cancel_debounce()
        logger.debug("Scrolling agenda to section %d (%s)", section_index, self._last_synced)
        self.surface.scroll_to_section(section_index, 0, self._header_height)

    # ----- list side -----

    def on_scroll(self) -> None:
        """A scroll frame was rendered."""
        self._did_scroll = True
        if self._state is SyncState.IDLE:
            self._state = SyncState.USER_SCROLLING

    def on_visible_items_changed(self, top_section: Optional[str]) -> None:
        """
        The top-most visible section changed.

        Args:
            top_section: Title of the top-most visible section, if any
        """
        if not top_section:
            return
        if self._state is SyncState.PROGRAMMATIC_SCROLL:
            return
        if self.visible_debounce <= 0:
            self._handle_visible(top_section)
            return
        self._pending_top = top_section
        self._cancel_debounce()
        self._debounce_handle = self.scheduler.call_later(self.visible_debounce, self._flush_visible)

    def _flush_visible(self) -> None:
        self._debounce_handle = None
        top, self._pending_top = self._pending_top, None
        if top:
            self._handle_visible(top)

    def _handle_visible(self, top_section: str) -> None:
        if self._state is SyncState.PROGRAMMATIC_SCROLL:
            logger.debug("Visible section %s suppressed during programmatic scroll", top_section)
            return
        if top_section == self._last_synced:
            return
        self._last_synced = top_section
        if not self._did_scroll:
            # initial layout, not a user change
            return
        self.context.set_date(top_section, UpdateSource.LIST_DRAG)

    def on_momentum_scroll_begin(self) -> None:
        self.context.set_disabled(True)

    def on_momentum_scroll_end(self) -> None:
        """Fires when a fling or a programmatic scroll comes to rest."""
        self._state = SyncState.IDLE
        self.context.set_disabled(False)

    def on_scroll_to_section_failed(self, info: Any) -> None:
        logger.warning("Agenda scroll to section failed: %s", info)
        if self._state is SyncState.PROGRAMMATIC_SCROLL:
            self._state = SyncState.IDLE

    def on_section_header_layout(self, height: float) -> None:
        """Record the sticky section header height used as scroll offset."""
        self._header_height = height

    # ----- titles -----

    def section_title(self, date_key: str, now: Optional[dt.date] = None) -> str:
        """
        Display title of a section header.

        Args:
            date_key: Section title (date key in the coordinator's system)
            now: Gregorian date to treat as today (default: the real today)

        Returns:
            Formatted title, prefixed with the today label for today's section
        """
        date = parse(date_key, self.system)
        return format_section_title(
            date,
            self.day_format,
            self.locale or get_locale(self.system),
            today=date_utils.today(self.system, now),
            formatter=self.formatter,
            persian_digits=self.persian_digits,
        )

    def _cancel_debounce(self) -> None:
        if self._debounce_handle is not None:
            self._debounce_handle.cancel()
            self._debounce_handle = None
        self._pending_top = None
