# tests/test_settings.py
"""
Settings Tests - Configuration Loading and Validation

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- jalali_calendars.config.settings (Settings)
- pydantic (ValidationError)
- pytest (testing framework, monkeypatch for environment variables)
"""
import pytest  # Testing framework for writing and running tests

from pydantic import ValidationError  # Raised for invalid settings

from jalali_calendars.config.settings import Settings
from jalali_calendars.domain.enums import CalendarSystem


class TestSettingsDefaults:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.jalali is True
        assert s.calendar_system is CalendarSystem.JALALI
        assert s.first_day_of_week == 6
        assert s.past_range == 12
        assert s.future_range == 12
        assert s.settle_delay_seconds == 0.5
        assert s.visible_debounce_seconds == 0.05

    def test_effective_day_format(self):
        assert Settings(_env_file=None).effective_day_format == "dddd dd MMMM"
        assert Settings(_env_file=None, jalali=False).effective_day_format == "dddd, MMM d"
        assert Settings(_env_file=None, jalali=False, use_secondary_formatter=True).effective_day_format == "%A, %b %-d"
        assert Settings(_env_file=None, day_format="d MMMM").effective_day_format == "d MMMM"


class TestSettingsEnvironment:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_JALALI", "false")
        monkeypatch.setenv("CALENDAR_LANGUAGE", "en")
        monkeypatch.setenv("CALENDAR_FIRST_DAY", "0")
        monkeypatch.setenv("CALENDAR_VISIBLE_DEBOUNCE_SECONDS", "0")

        s = Settings(_env_file=None)

        assert s.calendar_system is CalendarSystem.GREGORIAN
        assert s.language == "en"
        assert s.first_day_of_week == 0
        assert s.visible_debounce_seconds == 0.0


class TestSettingsValidation:
    @pytest.mark.parametrize("kwargs", [
        {"first_day_of_week": 7},
        {"language": "de"},
        {"day_format": "   "},
        {"past_range": -1},
        {"settle_delay_seconds": -0.1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **kwargs)
