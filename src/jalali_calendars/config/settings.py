# src/jalali_calendars/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration for the calendar widgets using Pydantic
Settings. Values come from environment variables (or a .env file) and are
validated on load.

Files that USE this module:
- jalali_calendars.app (CalendarProvider reads display and timing options)
- jalali_calendars.shared.locale (default language)

Files that this module USES:
- jalali_calendars.shared.validators (validation functions for settings)
- jalali_calendars.domain.enums (CalendarSystem)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from jalali_calendars.domain.enums import CalendarSystem
from jalali_calendars.shared.validators import (
    validate_day_format,  # Validate section title pattern
    validate_first_day,  # Validate first day of week
    validate_language,  # Validate language code
)

DEFAULT_GREGORIAN_DAY_FORMAT = "dddd, MMM d"
DEFAULT_JALALI_DAY_FORMAT = "dddd dd MMMM"
DEFAULT_GREGORIAN_STRFTIME_FORMAT = "%A, %b %-d"
DEFAULT_JALALI_STRFTIME_FORMAT = "%A %d %B"


class Settings(BaseSettings):
    """Calendar settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Display ---
    jalali: bool = Field(default=True, alias="CALENDAR_JALALI")
    first_day_of_week: int = Field(default=6, alias="CALENDAR_FIRST_DAY", ge=0, le=6)  # 6 = Saturday
    day_format: Optional[str] = Field(default=None, alias="CALENDAR_DAY_FORMAT")
    use_secondary_formatter: bool = Field(default=False, alias="CALENDAR_USE_SECONDARY_FORMATTER")
    language: str = Field(default="fa", alias="CALENDAR_LANGUAGE")
    persian_digits: bool = Field(default=False, alias="CALENDAR_PERSIAN_DIGITS")

    # --- Materialized range (months before/after today) ---
    past_range: int = Field(default=12, alias="CALENDAR_PAST_RANGE", ge=0, le=1200)
    future_range: int = Field(default=12, alias="CALENDAR_FUTURE_RANGE", ge=0, le=1200)

    # --- Synchronization timing (seconds) ---
    settle_delay_seconds: float = Field(default=0.5, alias="CALENDAR_SETTLE_DELAY_SECONDS", ge=0.0)
    visible_debounce_seconds: float = Field(
        default=0.05, alias="CALENDAR_VISIBLE_DEBOUNCE_SECONDS", ge=0.0
    )

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def calendar_system(self) -> CalendarSystem:
        """Display calendar system selected by the jalali flag."""
        return CalendarSystem.JALALI if self.jalali else CalendarSystem.GREGORIAN

    @property
    def effective_day_format(self) -> str:
        """
        Section title pattern to use.

        Returns the configured day_format, or the default pattern for the
        display system and the selected formatter when none is configured.
        """
        if self.day_format:
            return self.day_format
        if self.use_secondary_formatter:
            return DEFAULT_JALALI_STRFTIME_FORMAT if self.jalali else DEFAULT_GREGORIAN_STRFTIME_FORMAT
        return DEFAULT_JALALI_DAY_FORMAT if self.jalali else DEFAULT_GREGORIAN_DAY_FORMAT

    @field_validator("first_day_of_week")
    @classmethod
    def validate_first_day_of_week(cls, v: int) -> int:
        if not validate_first_day(v):
            raise ValueError("CALENDAR_FIRST_DAY must be between 0 (Sunday) and 6 (Saturday)")
        return v

    @field_validator("day_format")
    @classmethod
    def validate_day_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate section title pattern."""
        if not validate_day_format(v):
            raise ValueError("CALENDAR_DAY_FORMAT must not be blank")
        return v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        if not validate_language(v):
            raise ValueError("CALENDAR_LANGUAGE must be 'en' or 'fa'")
        return v


# Global settings instance
settings = Settings()
