"""Single-shot expectation flags shared between waiters and producers."""
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from .notifications import Notification, NotificationCenter, Subscription

logger = logging.getLogger(__name__)

Observer = Callable[["Expectation"], None]


class Expectation:
    """A flag that moves from unfulfilled to fulfilled at most once."""

    needs_polling = False

    def __init__(self, subject: str, description: Optional[str] = None) -> None:
        self.subject = subject
        self.description = description or subject
        self._lock = threading.Lock()
        self._fulfilled = False
        self._observers: List[Observer] = []
        self._subscription: Optional[Subscription] = None
        self._center: Optional[NotificationCenter] = None

    @property
    def fulfilled(self) -> bool:
        with self._lock:
            return self._fulfilled

    def fulfill(self) -> bool:
        """Mark the expectation fulfilled; only the first call returns ``True``."""

        with self._lock:
            if self._fulfilled:
                return False
            self._fulfilled = True
            observers = list(self._observers)
        logger.debug("expectation %r fulfilled", self.description)
        for observer in observers:
            observer(self)
        return True

    def poll(self) -> bool:
        return self.fulfilled

    def add_observer(self, observer: Observer) -> None:
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def listen(self, center: NotificationCenter) -> None:
        """Fulfill this expectation when ``subject`` is posted on ``center``."""

        with self._lock:
            if self._subscription is not None:
                return
            self._center = center
            self._subscription = center.subscribe(self.subject, self._on_notification)

    def release(self) -> None:
        """Drop the notification subscription, if any."""

        with self._lock:
            subscription, center = self._subscription, self._center
            self._subscription = None
            self._center = None
        if subscription is not None and center is not None:
            center.unsubscribe(subscription)

    def _on_notification(self, notification: Notification) -> None:
        self.fulfill()

    def __repr__(self) -> str:
        state = "fulfilled" if self.fulfilled else "pending"
        return f"<{type(self).__name__} {self.description!r} {state}>"


class PredicateExpectation(Expectation):
    """Fulfilled once ``predicate()`` is observed to be true."""

    needs_polling = True

    def __init__(self, predicate: Callable[[], bool], description: Optional[str] = None) -> None:
        name = description or getattr(predicate, "__name__", "predicate")
        super().__init__(subject=name, description=name)
        self._predicate = predicate

    def poll(self) -> bool:
        if self.fulfilled:
            return True
        if self._predicate():
            self.fulfill()
            return True
        return False
