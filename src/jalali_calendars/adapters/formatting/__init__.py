# src/jalali_calendars/adapters/formatting/__init__.py
"""
Formatting Adapters

Provides text formatting of calendar dates and agenda section titles.
"""

from jalali_calendars.adapters.formatting.formatter import (
    DateFormatter,
    StrftimeFormatter,
    TokenFormatter,
    format_section_title,
    get_formatter,
)

__all__ = [
    "DateFormatter",
    "StrftimeFormatter",
    "TokenFormatter",
    "format_section_title",
    "get_formatter",
]
