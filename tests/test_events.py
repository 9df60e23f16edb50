#!/usr/bin/env python3
"""Tests for rental event notifications."""

import logging

from rental import Customer, EventAction, Notifier, RentalEvent, Vehicle, log_event


class TestRentalEventMessage:
    """Tests for RentalEvent.message."""

    def test_rented_message(self):
        event = RentalEvent(
            EventAction.RENTED,
            Vehicle.car("C1", "Civic", 30),
            customer=Customer("U1", "Alice"),
            days=3,
        )
        assert event.message == "Car rented by Alice for 3 days."

    def test_returned_message(self):
        event = RentalEvent(EventAction.RETURNED, Vehicle.truck("T1", "F-150", 80, 10))
        assert event.message == "Truck has been returned."


class TestNotifier:
    """Tests for Notifier fan-out."""

    def test_defaults_to_logging_observer(self):
        assert Notifier().observers == [log_event]

    def test_explicit_empty_list_silences(self):
        assert Notifier([]).observers == []

    def test_notifies_observers_in_order(self):
        calls = []
        notifier = Notifier([lambda e: calls.append(("a", e.action))])
        notifier.subscribe(lambda e: calls.append(("b", e.action)))
        notifier.notify(RentalEvent(EventAction.RETURNED, Vehicle.car("C1", "Civic", 30)))
        assert calls == [("a", EventAction.RETURNED), ("b", EventAction.RETURNED)]

    def test_log_event_writes_message(self, caplog):
        event = RentalEvent(EventAction.RETURNED, Vehicle.motorcycle("M1", "Ural", 25))
        with caplog.at_level(logging.INFO, logger="rental.events"):
            log_event(event)
        assert "Motorcycle has been returned." in caplog.text

    def test_str_is_message(self):
        event = RentalEvent(EventAction.RETURNED, Vehicle.car("C1", "Civic", 30))
        assert str(event) == "Car has been returned."

    def test_log_event_skips_formatting_when_info_disabled(self, caplog):
        """Message is only built when the record is emitted."""
        incomplete = RentalEvent(EventAction.RENTED, Vehicle.car("C1", "Civic", 30))
        with caplog.at_level(logging.WARNING, logger="rental.events"):
            log_event(incomplete)
        assert caplog.text == ""
