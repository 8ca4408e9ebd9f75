"""Injectable publish/subscribe channel keyed by notification name."""
from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    name: str
    payload: Any = None


NotificationCallback = Callable[[Notification], None]


@dataclass(frozen=True)
class Subscription:
    """Token returned by :meth:`NotificationCenter.subscribe`."""

    name: str
    token: int
    callback: NotificationCallback = field(compare=False, repr=False)


class NotificationCenter:
    """Thread-safe registry of callbacks fired by :meth:`post`.

    Producers and waiters only share the notification name; callbacks run on
    the posting thread after the internal lock has been released.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscriptions: Dict[str, Dict[int, Subscription]] = {}
        self._tokens = itertools.count(1)

    def subscribe(self, name: str, callback: NotificationCallback) -> Subscription:
        if not name:
            raise ValueError("Notification name cannot be empty")
        with self._lock:
            subscription = Subscription(name=name, token=next(self._tokens), callback=callback)
            self._subscriptions.setdefault(name, {})[subscription.token] = subscription
        logger.debug("subscribed token=%s to %r", subscription.token, name)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        with self._lock:
            bucket = self._subscriptions.get(subscription.name)
            if not bucket or subscription.token not in bucket:
                return False
            del bucket[subscription.token]
            if not bucket:
                del self._subscriptions[subscription.name]
        return True

    def post(self, name: str, payload: Any = None) -> int:
        """Deliver a notification; returns the number of callbacks invoked."""

        with self._lock:
            targets: List[Subscription] = list(self._subscriptions.get(name, {}).values())
        notification = Notification(name=name, payload=payload)
        for subscription in targets:
            try:
                subscription.callback(notification)
            except Exception:
                logger.exception("subscriber token=%s for %r raised", subscription.token, name)
        logger.debug("posted %r to %d subscriber(s)", name, len(targets))
        return len(targets)

    def subscriber_count(self, name: str) -> int:
        with self._lock:
            return len(self._subscriptions.get(name, {}))
