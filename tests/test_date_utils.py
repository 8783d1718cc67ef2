# tests/test_date_utils.py
"""
Date Utilities Tests - Unit Tests for Calendar-agnostic Arithmetic

This module contains unit tests for epoch-day arithmetic, comparison,
"today" checks, range walking across month boundaries of both calendar
systems, month grids and month ranges.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- jalali_calendars.application.date_utils (functions under test)
- jalali_calendars.domain (CalendarDate, CalendarSystem, InvalidDateError)
- pytest (testing framework)
"""
import datetime as dt

import pytest  # Testing framework for writing and running tests

from jalali_calendars.application.date_utils import (
    add_days,
    add_months,
    compare,
    day_of_week,
    days_between,
    from_epoch_day,
    is_today,
    month_grid,
    months_around,
    to_epoch_day,
    today,
    walk_range,
)
from jalali_calendars.domain import CalendarDate, CalendarSystem, InvalidDateError

G = CalendarSystem.GREGORIAN
J = CalendarSystem.JALALI


class TestEpochDay:
    def test_same_day_same_epoch_day(self):
        assert to_epoch_day(CalendarDate(G, 2024, 3, 20)) == to_epoch_day(CalendarDate(J, 1403, 1, 1))

    def test_epoch_day_is_gregorian_ordinal(self):
        assert to_epoch_day(CalendarDate(G, 2024, 3, 20)) == dt.date(2024, 3, 20).toordinal()

    def test_from_epoch_day(self):
        epoch_day = dt.date(2024, 3, 20).toordinal()
        assert from_epoch_day(epoch_day, J).as_tuple() == (J, 1403, 1, 1)
        assert from_epoch_day(epoch_day, G).as_tuple() == (G, 2024, 3, 20)

    def test_from_epoch_day_rejects_unrepresentable(self):
        with pytest.raises(InvalidDateError):
            from_epoch_day(0, G)


class TestCompare:
    def test_compare_across_systems(self):
        a = CalendarDate(G, 2024, 3, 19)
        b = CalendarDate(J, 1403, 1, 1)
        assert compare(a, b) == -1
        assert compare(b, a) == 1
        assert compare(b, CalendarDate(G, 2024, 3, 20)) == 0

    def test_compare_is_monotonic_in_epoch_day(self):
        start = CalendarDate(J, 1402, 12, 20)
        days = [add_days(start, n) for n in range(0, 40, 3)]
        for earlier, later in zip(days, days[1:]):
            assert to_epoch_day(earlier) < to_epoch_day(later)
            assert compare(earlier, later) == -1

    def test_sorting_mixed_systems(self):
        dates = [CalendarDate(J, 1403, 1, 2), CalendarDate(G, 2024, 3, 19), CalendarDate(G, 2024, 3, 20)]
        assert [d.key for d in sorted(dates)] == ["2024-03-19", "2024-03-20", "1403-01-02"]


class TestArithmetic:
    def test_add_days_preserves_system(self):
        result = add_days(CalendarDate(J, 1403, 12, 30), 1)
        assert result.as_tuple() == (J, 1404, 1, 1)

    def test_add_negative_days(self):
        assert add_days(CalendarDate(G, 2024, 3, 1), -1).as_tuple() == (G, 2024, 2, 29)

    def test_days_between(self):
        assert days_between(CalendarDate(G, 2024, 3, 20), CalendarDate(J, 1404, 1, 1)) == 366
        assert days_between(CalendarDate(G, 2024, 3, 20), CalendarDate(G, 2024, 3, 18)) == -2

    def test_day_of_week_sunday_first(self):
        assert day_of_week(CalendarDate(G, 2024, 3, 20)) == 3  # Wednesday
        assert day_of_week(CalendarDate(J, 1403, 1, 4)) == 6  # Saturday

    def test_add_months_clamps_day(self):
        assert add_months(CalendarDate(J, 1403, 12, 30), 12).as_tuple() == (J, 1404, 12, 29)
        assert add_months(CalendarDate(G, 2024, 1, 31), 1).as_tuple() == (G, 2024, 2, 29)
        assert add_months(CalendarDate(J, 1403, 1, 15), -2).as_tuple() == (J, 1402, 11, 15)


class TestToday:
    def test_today_in_system(self):
        assert today(J, dt.date(2024, 3, 20)).as_tuple() == (J, 1403, 1, 1)

    def test_is_today(self):
        now = dt.date(2024, 3, 20)
        assert is_today(CalendarDate(J, 1403, 1, 1), J, now)
        assert is_today(CalendarDate(G, 2024, 3, 20), J, now)
        assert not is_today(CalendarDate(G, 2024, 3, 21), G, now)

    def test_is_today_defaults_to_real_today(self):
        real = dt.date.today()
        assert is_today(CalendarDate(G, real.year, real.month, real.day), G)


class TestWalkRange:
    def test_walk_gregorian_keys(self):
        keys = [str(d) for d in walk_range("2024-03-01", "2024-03-03", G)]
        assert keys == ["2024-03-01", "2024-03-02", "2024-03-03"]

    def test_range_is_restartable(self):
        days = walk_range("2024-03-01", "2024-03-03", G)
        assert list(days) == list(days)
        assert len(days) == 3
        assert CalendarDate(J, 1402, 12, 11) in days

    def test_empty_when_end_before_start(self):
        assert list(walk_range("2024-03-03", "2024-03-01", G)) == []

    def test_gregorian_leap_february(self):
        keys = [d.key for d in walk_range("2024-02-28", "2024-03-01", G)]
        assert keys == ["2024-02-28", "2024-02-29", "2024-03-01"]

    def test_jalali_month_boundaries(self):
        keys = [d.key for d in walk_range("1403-06-30", "1403-07-02", J)]
        assert keys == ["1403-06-30", "1403-06-31", "1403-07-01", "1403-07-02"]
        keys = [d.key for d in walk_range("1403-12-29", "1404-01-01", J)]
        assert keys == ["1403-12-29", "1403-12-30", "1404-01-01"]

    def test_walk_gregorian_bounds_in_jalali(self):
        days = walk_range(CalendarDate(G, 2024, 3, 19), CalendarDate(G, 2024, 3, 21), J)
        assert [d.key for d in days] == ["1402-12-29", "1403-01-01", "1403-01-02"]
        assert all(d.system is J for d in days)

    def test_malformed_bound_raises(self):
        with pytest.raises(InvalidDateError):
            walk_range("2024-3", "2024-03-05", G)


class TestMonthHelpers:
    def test_month_grid_starts_on_first_day_of_week(self):
        weeks = month_grid(1403, 1, J, first_day_of_week=6)
        assert len(weeks) == 5
        assert all(len(week) == 7 for week in weeks)
        assert all(day_of_week(week[0]) == 6 for week in weeks)
        assert weeks[0][0].key == "1402-12-26"
        assert weeks[0][4].key == "1403-01-01"
        assert weeks[-1][-1].key == "1403-01-31"

    def test_month_grid_gregorian_sunday_first(self):
        weeks = month_grid(2024, 3, G, first_day_of_week=0)
        assert weeks[0][0].key == "2024-02-25"
        assert weeks[-1][-1].key == "2024-04-06"

    def test_months_around(self):
        months = months_around(CalendarDate(J, 1403, 1, 15), 2, 1)
        assert [m.key for m in months] == ["1402-11-01", "1402-12-01", "1403-01-01", "1403-02-01"]
