# src/jalali_calendars/application/sections.py
"""
Sections - Agenda Section Building and Lookup

This module builds the date-keyed sections an agenda list renders and resolves
date keys back to section indexes. Lookup goes through the epoch day, so
"1403-1-1" and "1403-01-01" resolve to the same section.

Files that USE this module:
- jalali_calendars.application.sync_coordinator (SectionIndex for scroll targets)
- jalali_calendars.app (build_sections for hosts without their own sections)
- tests.test_sections (unit tests)

Files that this module USES:
- jalali_calendars.application.converter (parse)
- jalali_calendars.application.date_utils (walk_range)
- jalali_calendars.domain.models (Section)
- jalali_calendars.domain.errors (SectionNotFoundError)
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from jalali_calendars.application.converter import DateLike, parse
from jalali_calendars.application.date_utils import walk_range
from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.domain.errors import InvalidDateError, SectionNotFoundError
from jalali_calendars.domain.models import Section

logger = logging.getLogger(__name__)


def build_sections(
    start: DateLike,
    end: DateLike,
    system: CalendarSystem,
    items_by_key: Optional[Mapping[str, Iterable[Any]]] = None,
    include_empty: bool = True,
) -> List[Section]:
    """
    Build one section per day from start to end.

    Args:
        start: First day (CalendarDate or date key in system)
        end: Last day (CalendarDate or date key in system)
        system: Calendar system used for section titles
        items_by_key: Items per date key (keys in system)
        include_empty: Whether days without items get a section

    Returns:
        Sections in ascending date order
    """
    items_by_key = items_by_key or {}
    sections = []
    for day in walk_range(start, end, system):
        items = tuple(items_by_key.get(day.key, ()))
        if items or include_empty:
            sections.append(Section(title=day.key, data=items))
    return sections


class SectionIndex:
    """Resolves date keys to indexes of a section list."""

    def __init__(self, sections: Sequence[Section], system: CalendarSystem):
        self.system = system
        self._sections = list(sections)
        self._by_epoch: Dict[int, int] = {}
        for index, section in enumerate(self._sections):
            try:
                epoch_day = parse(section.title, system).epoch_day
            except InvalidDateError as e:
                logger.warning("Skipping section %d with unparseable title %r: %s", index, section.title, e)
                continue
            self._by_epoch.setdefault(epoch_day, index)

    def __len__(self) -> int:
        return len(self._sections)

    @property
    def first_title(self) -> Optional[str]:
        return self._sections[0].title if self._sections else None

    def title_at(self, index: int) -> str:
        return self._sections[index].title

    def index_of(self, date_key: str) -> int:
        """
        Index of the section holding date_key.

        Raises:
            SectionNotFoundError: the key is malformed or no section has that date
        """
        try:
            epoch_day = parse(date_key, self.system).epoch_day
        except InvalidDateError as e:
            raise SectionNotFoundError(date_key) from e
        index = self._by_epoch.get(epoch_day)
        if index is None:
            raise SectionNotFoundError(date_key)
        return index
