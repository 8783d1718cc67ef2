# src/jalali_calendars/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Locale tables and digit conversion
- Logging configuration
"""

from jalali_calendars.shared.validators import (
    split_date_key,
    validate_day_format,
    validate_first_day,
    validate_language,
)
from jalali_calendars.shared.locale import (
    get_locale,
    register_locale,
    to_latin_digits,
    to_persian_digits,
    LANG_ENGLISH,
    LANG_FARSI,
)

__all__ = [
    "split_date_key",
    "validate_day_format",
    "validate_first_day",
    "validate_language",
    "get_locale",
    "register_locale",
    "to_latin_digits",
    "to_persian_digits",
    "LANG_ENGLISH",
    "LANG_FARSI",
]
