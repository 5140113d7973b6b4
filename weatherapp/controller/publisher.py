"""Observable state cell with explicit subscription handles."""

import itertools
import logging
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Observer = Callable[[T], None]


class Subscription:
    """Handle returned by StatePublisher.subscribe. Unsubscribing is idempotent."""

    def __init__(self, publisher: "StatePublisher", handle: int):
        self._publisher = publisher
        self.handle = handle

    @property
    def active(self) -> bool:
        return self._publisher._is_registered(self.handle)

    def unsubscribe(self) -> None:
        self._publisher._remove(self.handle)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.unsubscribe()


class StatePublisher(Generic[T]):
    """Holds one value and notifies observers synchronously on every publish.

    Observers are called in registration order. An observer that raises is
    logged and skipped; delivery to the rest continues.

    Publishing from inside an observer does not recurse: the value becomes
    current at once but is queued and delivered after the running pass, so
    every observer sees values in publish order and ends on the latest.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._observers: dict[int, Observer] = {}
        self._handles = itertools.count(1)
        self._pending: deque[T] = deque()
        self._delivering = False

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, observer: Observer) -> Subscription:
        handle = next(self._handles)
        self._observers[handle] = observer
        logger.debug("Subscribed observer %d", handle)
        return Subscription(self, handle)

    def publish(self, value: T) -> None:
        self._value = value
        self._pending.append(value)
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._pending:
                self._deliver(self._pending.popleft())
        finally:
            self._delivering = False

    def _deliver(self, value: T) -> None:
        for handle, observer in list(self._observers.items()):
            # Removed by an earlier observer during this delivery
            if handle not in self._observers:
                continue
            try:
                observer(value)
            except Exception:
                logger.exception("Observer %d failed", handle)

    def _is_registered(self, handle: int) -> bool:
        return handle in self._observers

    def _remove(self, handle: int) -> None:
        if self._observers.pop(handle, None) is not None:
            logger.debug("Unsubscribed observer %d", handle)
