# tests/test_grid_sync.py
"""
Grid Sync Tests - Calendar Grid <-> Calendar Context

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- jalali_calendars.application.grid_sync (CalendarGridSync)
- jalali_calendars.application.calendar_context (CalendarContext)
- jalali_calendars.adapters.rendering.base (GridSurface spec for mocks)
- unittest.mock (Mock surfaces)
"""
from unittest.mock import Mock, call  # Mock grid surface

from jalali_calendars.adapters.rendering.base import GridSurface
from jalali_calendars.application.calendar_context import CalendarContext
from jalali_calendars.application.grid_sync import CalendarGridSync
from jalali_calendars.domain import CalendarSystem, UpdateSource


class TestCalendarGridSync:
    def setup_method(self):
        self.context = CalendarContext("1403-01-01")
        self.surface = Mock(spec=GridSurface)
        self.grid = CalendarGridSync(self.context, self.surface, CalendarSystem.JALALI)
        self.grid.mount()

    def test_mount_shows_selected_month(self):
        self.surface.highlight.assert_called_once_with("1403-01-01")
        self.surface.show_month.assert_called_once_with(1403, 1)
        assert self.grid.visible_month == (1403, 1)

    def test_day_press_writes_touch(self):
        assert self.grid.on_day_press("1403-01-05") is True
        assert self.context.get_date() == "1403-01-05"
        assert self.context.get_source() is UpdateSource.TOUCH

    def test_day_press_ignored_while_disabled(self):
        self.context.set_disabled(True)
        assert self.grid.on_day_press("1403-01-05") is False
        assert self.context.get_date() == "1403-01-01"

    def test_follows_context_to_other_month(self):
        self.context.set_date("1403-02-10", UpdateSource.LIST_DRAG)
        self.surface.highlight.assert_called_with("1403-02-10")
        assert self.surface.show_month.call_args_list == [call(1403, 1), call(1403, 2)]

    def test_same_month_does_not_page(self):
        self.context.set_date("1403-01-20", UpdateSource.PROGRAMMATIC)
        self.surface.show_month.assert_called_once_with(1403, 1)

    def test_user_paging_tracked(self):
        self.grid.on_month_visible(1403, 3)
        self.context.set_date("1403-03-02", UpdateSource.LIST_DRAG)
        self.surface.show_month.assert_called_once_with(1403, 1)

    def test_initialize_uses_calendar_init(self):
        self.grid.initialize("1403-01-10")
        assert self.context.get_source() is UpdateSource.CALENDAR_INIT

    def test_unmount_stops_following(self):
        self.grid.unmount()
        self.context.set_date("1403-05-01", UpdateSource.TOUCH)
        self.surface.highlight.assert_called_once_with("1403-01-01")
        assert self.context.subscriber_count == 0
