"""Expectation, notification and waiting primitives."""
from .expectations import Expectation, PredicateExpectation
from .notifications import Notification, NotificationCenter, Subscription
from .waiter import ALL_FULFILLED, TIMED_OUT, Waiter, WaitOutcome

__all__ = [
    "ALL_FULFILLED",
    "TIMED_OUT",
    "Expectation",
    "Notification",
    "NotificationCenter",
    "PredicateExpectation",
    "Subscription",
    "WaitOutcome",
    "Waiter",
]
