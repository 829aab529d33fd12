"""
Observable value primitive.

A mutable single-value holder that notifies its subscribers synchronously
every time the value is replaced.

Usage:
    count = Observable(0)
    count.subscribe(lambda v: print("count is", v))
    count.set(3)        # prints "count is 3"
"""
from typing import Any, Callable, Generic, List, Optional, TypeVar

from loguru import logger

from databind.core.logging import Log

T = TypeVar('T')


class Subscription:
    """
    Handle returned by ``Observable.subscribe``.

    Dropping the handle keeps the subscription alive for the lifetime of the
    observable; call ``dispose()`` to detach the callback.
    """

    def __init__(self, observable: "Observable", callback: Callable[[Any], None]):
        self._observable = observable
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def dispose(self) -> None:
        """Detach the callback. Calling it twice is a no-op."""
        if not self._active:
            return
        self._active = False
        self._observable._unsubscribe(self._callback)


class Observable(Generic[T]):
    """
    Value holder with change notification.

    Subscribers are called in subscription order on every ``set``, even when
    the new value equals the old one. They are never called on construction
    or on ``subscribe``.

    Args:
        value: Initial value.
        log: Receives ``error`` reports for failing subscribers.
            Defaults to the loguru logger.
    """

    def __init__(self, value: T, log: Optional[Log] = None):
        self._value = value
        self._subscribers: List[Callable[[T], None]] = []
        self._log = log if log is not None else logger

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Store ``value`` and notify every subscriber with it."""
        self._value = value
        # Snapshot, so a subscription disposed mid-notification does not skip others
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception as e:
                self._log.error(f"Observable subscriber '{callback}' failed: {e}")

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        """Append ``callback`` to the subscribers. It is not called now."""
        self._subscribers.append(callback)
        return Subscription(self, callback)

    def _unsubscribe(self, callback: Callable[[T], None]) -> None:
        # Identity match: the same function may be subscribed more than once
        for index, existing in enumerate(self._subscribers):
            if existing is callback:
                del self._subscribers[index]
                return

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
