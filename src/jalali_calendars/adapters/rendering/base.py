# src/jalali_calendars/adapters/rendering/base.py
"""
Base Rendering Interfaces for List and Grid Surfaces

This module defines the abstract base classes the host UI toolkit implements
to let the synchronization layer drive its widgets. Rendering itself (cells,
rows, styling, gestures) stays on the host side.

Files that USE this module:
- jalali_calendars.application.sync_coordinator (drives a ListSurface)
- jalali_calendars.application.grid_sync (drives a GridSurface)
- tests.* (Mock(spec=...) surfaces)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod


class ListSurface(ABC):
    """Scrollable list of date sections (the agenda)."""

    @abstractmethod
    def scroll_to_section(self, section_index: int, item_index: int, top_offset: float) -> None:
        """
        Scroll so the given item of the given section is aligned to the top.

        The surface reports back through the coordinator's on_scroll,
        on_visible_items_changed, on_momentum_scroll_* and
        on_scroll_to_section_failed callbacks.
        """
        raise NotImplementedError


class GridSurface(ABC):
    """Calendar grid or header showing one month at a time."""

    @abstractmethod
    def highlight(self, date_key: str) -> None:
        """Mark the day identified by date_key as selected."""
        raise NotImplementedError

    @abstractmethod
    def show_month(self, year: int, month: int) -> None:
        """Bring the given month (in the display system) into view."""
        raise NotImplementedError
