# src/jalali_calendars/app.py
"""
Calendar Provider - Composition Root for One Mounted Widget Tree

This module wires the pieces for hosts: one CalendarProvider owns one
CalendarContext for the lifetime of a mounted calendar + agenda tree, creates
the list and grid synchronizers against it with options taken from settings,
and tears everything down on unmount.

Files that USE this module:
- Host applications (create a CalendarProvider per mounted widget tree)
- tests.test_app (integration tests)

Files that this module USES:
- jalali_calendars.shared.logging_conf (setup_logging for configure_logging)
- jalali_calendars.config (Settings for display and timing options)
- jalali_calendars.application.* (context, synchronizers, date utilities)
- jalali_calendars.adapters.* (formatters, scheduler, surfaces)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import datetime as dt  # Gregorian "today" for the initial selection
import logging  # Standard library for logging messages and errors
from typing import List, Optional, Sequence, Union  # Type hints

from jalali_calendars.adapters.formatting.formatter import get_formatter  # Formatting strategy selection
from jalali_calendars.adapters.rendering.base import GridSurface, ListSurface  # Host surfaces
from jalali_calendars.adapters.scheduling.scheduler import Scheduler  # Deferred callbacks
from jalali_calendars.application import date_utils  # Today and month ranges
from jalali_calendars.application.calendar_context import CalendarContext  # Shared selected date
from jalali_calendars.application.converter import coerce, format_date  # Conversion and formatting
from jalali_calendars.application.grid_sync import CalendarGridSync  # Grid side synchronization
from jalali_calendars.application.sections import build_sections  # Section generation
from jalali_calendars.application.sync_coordinator import SyncCoordinator  # List side synchronization
from jalali_calendars.config.settings import Settings  # Configuration model
from jalali_calendars.domain.enums import UpdateSource  # Update source tags
from jalali_calendars.domain.models import CalendarDate, LocaleTable, Section  # Value objects
from jalali_calendars.shared.locale import get_locale  # Locale tables
from jalali_calendars.shared.logging_conf import setup_logging  # Configure logging with file rotation

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None, level=logging.INFO) -> None:
    """Apply the logging options of settings through setup_logging."""
    if settings is None:
        from jalali_calendars.config import settings
    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_to_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )


class CalendarProvider:
    """
    Owner of the calendar context shared by a grid and an agenda list.

    Example:
        # inside a coroutine on the UI event loop
        provider = CalendarProvider(AsyncioScheduler())
        agenda = provider.attach_agenda(list_surface, provider.default_sections())
        grid = provider.attach_grid(grid_surface)
        provider.mount()
        ...
        provider.unmount()
    """

    def __init__(
        self,
        scheduler: Scheduler,
        settings: Optional[Settings] = None,
        initial_date: Optional[Union[str, CalendarDate, dt.date]] = None,
        today: Optional[dt.date] = None,
    ):
        """
        Initialize the provider.

        Args:
            scheduler: Scheduler for settle delays and debounce (AsyncioScheduler
                on an event loop, ManualScheduler in tests)
            settings: Display and timing options (default: global settings)
            initial_date: Initially selected date (default: today)
            today: Gregorian date to treat as today (default: datetime.date.today())
        """
        if settings is None:
            from jalali_calendars.config import settings
        self.settings = settings
        self.system = settings.calendar_system
        self.scheduler = scheduler
        self._today = today
        self.formatter = get_formatter(settings.use_secondary_formatter)
        self.locale: LocaleTable = get_locale(self.system, settings.language)

        start = coerce(initial_date, self.system) if initial_date is not None else self.today()
        self.context = CalendarContext(start.key, UpdateSource.CALENDAR_INIT)
        self._agendas: List[SyncCoordinator] = []
        self._grids: List[CalendarGridSync] = []
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    def today(self) -> CalendarDate:
        return date_utils.today(self.system, self._today)

    def default_sections(self) -> List[Section]:
        """
        One empty section per day over the configured range.

        Covers past_range months before today's month through the end of the
        month future_range months after it.
        """
        months = date_utils.months_around(self.today(), self.settings.past_range, self.settings.future_range)
        end = date_utils.add_days(date_utils.add_months(months[-1], 1), -1)
        return build_sections(months[0], end, self.system)

    def attach_agenda(self, surface: ListSurface, sections: Sequence[Section]) -> SyncCoordinator:
        """Create the synchronizer for an agenda list (mounted with the provider)."""
        agenda = SyncCoordinator(
            self.context,
            surface,
            sections,
            self.scheduler,
            system=self.system,
            settle_delay=self.settings.settle_delay_seconds,
            visible_debounce=self.settings.visible_debounce_seconds,
            day_format=self.settings.effective_day_format,
            locale=self.locale,
            formatter=self.formatter,
            persian_digits=self.settings.persian_digits,
        )
        self._agendas.append(agenda)
        if self._mounted:
            agenda.mount()
        return agenda

    def attach_grid(self, surface: GridSurface) -> CalendarGridSync:
        """Create the synchronizer for a calendar grid (mounted with the provider)."""
        grid = CalendarGridSync(self.context, surface, self.system)
        self._grids.append(grid)
        if self._mounted:
            grid.mount()
        return grid

    def month_grid(self, year: int, month: int):
        """Weeks of a display-system month, starting on the configured first day."""
        return date_utils.month_grid(year, month, self.system, self.settings.first_day_of_week)

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        for grid in self._grids:
            grid.mount()
        for agenda in self._agendas:
            agenda.mount()
        logger.info(
            "Calendar mounted: system=%s date=%s agendas=%d grids=%d",
            self.system.value, self.context.get_date(), len(self._agendas), len(self._grids),
        )

    def unmount(self) -> None:
        """Tear down every synchronizer and the context."""
        if not self._mounted:
            return
        for agenda in self._agendas:
            agenda.unmount()
        for grid in self._grids:
            grid.unmount()
        self.context.close()
        self._mounted = False
        logger.info("Calendar unmounted")

    def go_to_today(self) -> None:
        """Select today; the agenda list scrolls to it."""
        self.context.set_date(self.today().key, UpdateSource.PROGRAMMATIC)

    def format(self, date: Union[str, CalendarDate], pattern: Optional[str] = None) -> str:
        """Format a date (or date key in the display system) with the configured options."""
        value = coerce(date, self.system)
        return format_date(value, pattern or self.settings.effective_day_format, self.locale, self.formatter)
