"""Observable values for fields whose changes drive other state."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T, T], None]


class Observable(Generic[T]):
    """A value that notifies subscribers synchronously when it changes.

    Subscribers receive ``(new, old)`` and are called in subscription
    order. Setting a value equal to the current one notifies nobody.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        old = self._value
        if value == old:
            return
        self._value = value
        for subscriber in list(self._subscribers):
            subscriber(value, old)

    def subscribe(self, subscriber: Subscriber[T]) -> Callable[[], None]:
        """Register a subscriber.

        Returns:
            A callable that removes the subscription.
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
