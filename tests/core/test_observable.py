"""
Unit Tests for Observable.
"""
import pytest
from unittest.mock import MagicMock

from databind.core.logging import Log
from databind.core.observable import Observable


class TestObservable:
    """Tests for value storage and notification."""

    def test_get_returns_initial_value(self):
        assert Observable(5).get() == 5

    def test_set_notifies_subscriber(self):
        """Observable(5) -> set(7) -> subscriber receives 7."""
        obs = Observable(5)
        callback = MagicMock()
        obs.subscribe(callback)

        obs.set(7)

        callback.assert_called_once_with(7)
        assert obs.get() == 7

    def test_subscribe_does_not_call_immediately(self):
        obs = Observable("x")
        callback = MagicMock()
        obs.subscribe(callback)

        callback.assert_not_called()

    def test_same_value_still_notifies(self):
        obs = Observable(1)
        callback = MagicMock()
        obs.subscribe(callback)

        obs.set(1)
        obs.set(1)

        assert callback.call_count == 2

    def test_notification_order(self):
        obs = Observable(0)
        order = []
        obs.subscribe(lambda v: order.append(("first", v)))
        obs.subscribe(lambda v: order.append(("second", v)))
        obs.subscribe(lambda v: order.append(("third", v)))

        obs.set(9)

        assert order == [("first", 9), ("second", 9), ("third", 9)]

    def test_failing_subscriber_does_not_stop_others(self):
        log = MagicMock()
        obs = Observable(0, log=log)
        after = MagicMock()

        def broken(value):
            raise RuntimeError("boom")

        obs.subscribe(broken)
        obs.subscribe(after)

        obs.set(3)

        after.assert_called_once_with(3)
        assert obs.get() == 3
        log.error.assert_called_once()

    def test_failing_subscriber_reported_to_injected_log(self):
        class ListLog:
            def __init__(self):
                self.messages = []

            def debug(self, message):
                self.messages.append(("debug", message))

            def warning(self, message):
                self.messages.append(("warning", message))

            def error(self, message):
                self.messages.append(("error", message))

        log = ListLog()
        assert isinstance(log, Log)
        obs = Observable(0, log=log)
        after = MagicMock()

        def broken(value):
            raise ValueError("bad value")

        obs.subscribe(broken)
        obs.subscribe(after)

        obs.set(8)

        after.assert_called_once_with(8)
        assert len(log.messages) == 1
        assert log.messages[0][0] == "error"
        assert "bad value" in log.messages[0][1]

    def test_value_property(self):
        obs = Observable("a")
        callback = MagicMock()
        obs.subscribe(callback)

        obs.value = "b"

        assert obs.value == "b"
        callback.assert_called_once_with("b")


class TestSubscription:
    """Tests for the disposal handle."""

    def test_dispose_stops_notifications(self):
        obs = Observable(0)
        callback = MagicMock()
        sub = obs.subscribe(callback)

        sub.dispose()
        obs.set(1)

        callback.assert_not_called()
        assert not sub.active
        assert obs.subscriber_count == 0

    def test_dispose_twice_is_noop(self):
        obs = Observable(0)
        keep = MagicMock()
        sub = obs.subscribe(keep)
        obs.subscribe(keep)

        sub.dispose()
        sub.dispose()

        assert obs.subscriber_count == 1

    def test_dispose_during_notification(self):
        obs = Observable(0)
        later = MagicMock()
        subs = []

        def first(value):
            subs[0].dispose()

        subs.append(obs.subscribe(first))
        obs.subscribe(later)

        obs.set(4)
        obs.set(5)

        assert later.call_count == 2
        assert obs.subscriber_count == 1
