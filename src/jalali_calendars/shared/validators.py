# src/jalali_calendars/shared/validators.py
"""
Input Validation Utilities - Date Keys and Options

This module provides validation helpers for date keys and configuration
options so malformed input is rejected before any calendar arithmetic runs.

Files that USE this module:
- jalali_calendars.config.settings (Settings field validators)
- jalali_calendars.application.converter (parse splits date keys)
- jalali_calendars.application.calendar_context (canonical date keys)

Files that this module USES:
- jalali_calendars.shared.locale (digit normalization)
"""
import re
from typing import Optional, Tuple

from jalali_calendars.shared.locale import SUPPORTED_LANGUAGES, to_latin_digits

# YYYY-MM-DD, also accepting YYYY/MM/DD and single-digit month/day
_DATE_KEY_PATTERN = re.compile(r"^(\d{1,4})[-/](\d{1,2})[-/](\d{1,2})$")


def split_date_key(key: str) -> Optional[Tuple[int, int, int]]:
    """
    Split a date key into integer components.

    Args:
        key: Date key such as "2024-03-20", "1403/01/01" or "۱۴۰۳-۰۱-۰۱"

    Returns:
        (year, month, day) tuple, or None if the key is malformed.
        Component ranges are not checked here.
    """
    if not isinstance(key, str):
        return None
    match = _DATE_KEY_PATTERN.match(to_latin_digits(key.strip()))
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    return year, month, day


def validate_first_day(value: int) -> bool:
    """First day of week: 0 (Sunday) to 6 (Saturday)."""
    return isinstance(value, int) and 0 <= value <= 6


def validate_language(lang: str) -> bool:
    return lang in SUPPORTED_LANGUAGES


def validate_day_format(pattern: Optional[str]) -> bool:
    """
    Validate a section title pattern.

    Args:
        pattern: Format pattern, or None to use the system default

    Returns:
        True if the pattern is None or a non-blank string
    """
    if pattern is None:
        return True
    return isinstance(pattern, str) and not pattern.isspace() and len(pattern) > 0
