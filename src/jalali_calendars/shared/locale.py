# src/jalali_calendars/shared/locale.py
"""
Locale Tables - Day and Month Names per Calendar System

This module provides the locale tables used when formatting dates: day names,
month names and the "today" label for each calendar system, in English and
Persian. Tables can be replaced or added at runtime with register_locale().

Files that USE this module:
- jalali_calendars.application.converter (default locale for format)
- jalali_calendars.adapters.formatting.formatter (section titles, digits)
- jalali_calendars.app (CalendarProvider picks the display locale)

Files that this module USES:
- jalali_calendars.domain.models (LocaleTable)
- jalali_calendars.config (settings.language when no language is given)
"""
import logging
from typing import Dict, Optional, Tuple

from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.domain.models import LocaleTable

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"
LANG_FARSI = "fa"
SUPPORTED_LANGUAGES = (LANG_ENGLISH, LANG_FARSI)

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")
_LATIN_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")

_DAYS_EN = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_DAYS_FA = ("یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه")
_DAYS_FA_SHORT = ("ی", "د", "س", "چ", "پ", "ج", "ش")

_GREGORIAN_MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_GREGORIAN_MONTHS_FA = (
    "ژانویه", "فوریه", "مارس", "آوریل", "مه", "ژوئن",
    "ژوئیه", "اوت", "سپتامبر", "اکتبر", "نوامبر", "دسامبر",
)
_JALALI_MONTHS_EN = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)
_JALALI_MONTHS_FA = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

LOCALES: Dict[Tuple[CalendarSystem, str], LocaleTable] = {
    (CalendarSystem.GREGORIAN, LANG_ENGLISH): LocaleTable(
        day_names=_DAYS_EN,
        month_names=_GREGORIAN_MONTHS_EN,
        today_label="Today",
    ),
    (CalendarSystem.GREGORIAN, LANG_FARSI): LocaleTable(
        day_names=_DAYS_FA,
        month_names=_GREGORIAN_MONTHS_FA,
        today_label="امروز",
        day_names_short=_DAYS_FA_SHORT,
        month_names_short=_GREGORIAN_MONTHS_FA,
    ),
    (CalendarSystem.JALALI, LANG_ENGLISH): LocaleTable(
        day_names=_DAYS_EN,
        month_names=_JALALI_MONTHS_EN,
        today_label="Today",
    ),
    (CalendarSystem.JALALI, LANG_FARSI): LocaleTable(
        day_names=_DAYS_FA,
        month_names=_JALALI_MONTHS_FA,
        today_label="امروز",
        day_names_short=_DAYS_FA_SHORT,
        month_names_short=_JALALI_MONTHS_FA,
    ),
}


def _default_language() -> str:
    # Lazy import to avoid circular dependency
    from jalali_calendars.config import settings
    return settings.language


def get_locale(system: CalendarSystem, language: Optional[str] = None) -> LocaleTable:
    """
    Get the locale table for a calendar system.

    Args:
        system: Calendar system whose names are needed
        language: Language code ('en' or 'fa'); defaults to settings.language

    Returns:
        Matching LocaleTable, or the system's English table when the
        language has no table registered
    """
    lang = language or _default_language()
    table = LOCALES.get((system, lang))
    if table is None:
        logger.warning("No %s locale for language '%s', using English", system.value, lang)
        table = LOCALES[(system, LANG_ENGLISH)]
    return table


def register_locale(system: CalendarSystem, language: str, table: LocaleTable) -> None:
    """Install or replace the locale table for (system, language)."""
    LOCALES[(system, language)] = table
    logger.info("Registered %s locale for language '%s'", system.value, language)


def to_persian_digits(text: str) -> str:
    """Replace ASCII digits with Persian digits."""
    return text.translate(_PERSIAN_DIGITS)


def to_latin_digits(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""
    return text.translate(_LATIN_DIGITS)
