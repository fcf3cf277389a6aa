"""Tests for Observable."""

from unittest.mock import MagicMock

from cloud_agents.utils.observable import Observable


class TestObservable:
    """Test change notification."""

    def test_notifies_on_change(self) -> None:
        """Test subscribers get the new and old value."""
        value = Observable("a")
        subscriber = MagicMock()
        value.subscribe(subscriber)

        value.set("b")

        subscriber.assert_called_once_with("b", "a")
        assert value.value == "b"

    def test_equal_value_not_notified(self) -> None:
        """Test setting the current value is silent."""
        value = Observable("a")
        subscriber = MagicMock()
        value.subscribe(subscriber)

        value.set("a")

        subscriber.assert_not_called()

    def test_subscription_order(self) -> None:
        """Test subscribers are called in the order they subscribed."""
        value = Observable(0)
        calls = []
        value.subscribe(lambda new, old: calls.append("first"))
        value.subscribe(lambda new, old: calls.append("second"))

        value.set(1)

        assert calls == ["first", "second"]

    def test_unsubscribe(self) -> None:
        """Test an unsubscribed callback is no longer called."""
        value = Observable(0)
        subscriber = MagicMock()
        unsubscribe = value.subscribe(subscriber)

        unsubscribe()
        unsubscribe()
        value.set(1)

        subscriber.assert_not_called()
