# tests/test_calendar_context.py
"""
Calendar Context Tests - Unit Tests for Shared Selected-Date State

This module tests the selected-date holder: no-op writes, notification order,
subscription handles, the interactions-disabled flag and listener failures.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- jalali_calendars.application.calendar_context (CalendarContext)
- jalali_calendars.domain (ContextEvent, UpdateSource, InvalidDateError)
- unittest.mock (Mock listeners)
- pytest (testing framework)
"""
import logging

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock listeners

from jalali_calendars.application.calendar_context import CalendarContext
from jalali_calendars.domain import CalendarDate, CalendarSystem, ContextEvent, InvalidDateError, UpdateSource


class TestSetDate:
    def test_initial_state(self):
        context = CalendarContext("2024-03-20")
        assert context.get_date() == "2024-03-20"
        assert context.get_source() is UpdateSource.CALENDAR_INIT
        assert context.is_disabled() is False

    def test_set_date_notifies_with_event(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        context.subscribe(listener)

        context.set_date("2024-03-21", UpdateSource.TOUCH)

        listener.assert_called_once()
        event = listener.call_args[0][0]
        assert event.kind == ContextEvent.DATE
        assert event.date == "2024-03-21"
        assert event.previous_date == "2024-03-20"
        assert event.source is UpdateSource.TOUCH
        assert context.get_source() is UpdateSource.TOUCH

    def test_same_date_is_noop(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        context.subscribe(listener)

        context.set_date("2024-03-20", UpdateSource.TOUCH)

        listener.assert_not_called()
        assert context.get_source() is UpdateSource.CALENDAR_INIT

    def test_accepts_calendar_date(self):
        context = CalendarContext(CalendarDate(CalendarSystem.JALALI, 1403, 1, 1))
        assert context.get_date() == "1403-01-01"

    def test_equivalent_key_is_noop_and_stored_canonically(self):
        context = CalendarContext("2024/3/20")
        listener = Mock()
        context.subscribe(listener)

        context.set_date("2024-03-20", UpdateSource.TOUCH)
        context.set_date("۲۰۲۴-۰۳-۲۰", UpdateSource.TOUCH)

        listener.assert_not_called()
        assert context.get_date() == "2024-03-20"

    def test_changed_key_is_stored_canonically(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        context.subscribe(listener)

        context.set_date("2024/3/21", UpdateSource.TOUCH)
        context.set_date("2024-03-21", UpdateSource.TOUCH)

        listener.assert_called_once()
        assert listener.call_args[0][0].date == "2024-03-21"
        assert context.get_date() == "2024-03-21"

    @pytest.mark.parametrize("key", ["2024-3", "", "tomorrow", "2024-13-45", "2024-00-10", "2024-03-00"])
    def test_malformed_key_rejected(self, key):
        context = CalendarContext("2024-03-20")
        with pytest.raises(InvalidDateError):
            context.set_date(key, UpdateSource.TOUCH)
        assert context.get_date() == "2024-03-20"

    def test_listeners_notified_in_registration_order(self):
        context = CalendarContext("2024-03-20")
        calls = []
        context.subscribe(lambda e: calls.append("first"))
        context.subscribe(lambda e: calls.append("second"))

        context.set_date("2024-03-21", UpdateSource.PROGRAMMATIC)

        assert calls == ["first", "second"]

    def test_reentrant_write_converges(self):
        context = CalendarContext("2024-03-20")
        seen = []

        def echo(event):
            seen.append(event.date)
            context.set_date(event.date, UpdateSource.LIST_DRAG)

        context.subscribe(echo)
        context.set_date("2024-03-21", UpdateSource.TOUCH)

        assert seen == ["2024-03-21"]
        assert context.get_source() is UpdateSource.TOUCH


class TestSubscriptions:
    def test_unsubscribe_is_idempotent(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        subscription = context.subscribe(listener)

        subscription.unsubscribe()
        subscription()
        context.unsubscribe(listener)
        context.set_date("2024-03-21", UpdateSource.TOUCH)

        listener.assert_not_called()
        assert subscription.active is False
        assert context.subscriber_count == 0

    def test_duplicate_subscription_registered_once(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        context.subscribe(listener)
        context.subscribe(listener)

        context.set_date("2024-03-21", UpdateSource.TOUCH)

        assert listener.call_count == 1

    def test_listener_removed_during_dispatch_is_skipped(self):
        context = CalendarContext("2024-03-20")
        second = Mock()
        context.subscribe(lambda e: context.unsubscribe(second))
        context.subscribe(second)

        context.set_date("2024-03-21", UpdateSource.TOUCH)

        second.assert_not_called()

    def test_failing_listener_does_not_stop_dispatch(self, caplog):
        context = CalendarContext("2024-03-20")
        after = Mock()
        context.subscribe(Mock(side_effect=RuntimeError("boom")))
        context.subscribe(after)

        with caplog.at_level(logging.ERROR):
            context.set_date("2024-03-21", UpdateSource.TOUCH)

        after.assert_called_once()
        assert "listener" in caplog.text
        assert context.get_date() == "2024-03-21"

    def test_close_drops_listeners(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        context.subscribe(listener)
        context.close()

        context.set_date("2024-03-21", UpdateSource.TOUCH)

        listener.assert_not_called()


class TestDisabled:
    def test_notifies_only_on_change(self):
        context = CalendarContext("2024-03-20")
        listener = Mock()
        context.subscribe(listener)

        context.set_disabled(True)
        context.set_disabled(True)
        context.set_disabled(False)

        assert listener.call_count == 2
        first = listener.call_args_list[0][0][0]
        assert first.kind == ContextEvent.DISABLED
        assert first.disabled is True
        assert context.is_disabled() is False

    def test_disabled_does_not_change_date(self):
        context = CalendarContext("2024-03-20", UpdateSource.TOUCH)
        context.set_disabled(True)
        assert context.get_date() == "2024-03-20"
        assert context.get_source() is UpdateSource.TOUCH
