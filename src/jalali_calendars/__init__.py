# src/jalali_calendars/__init__.py
"""
Jalali Calendars - Dual Gregorian/Jalali Date Picker Core

Conversion and formatting of Gregorian and Jalali (Persian) dates, plus the
synchronization protocol that keeps an agenda list and a calendar grid in
step through a shared calendar context.
"""

__version__ = "1.0.0"
