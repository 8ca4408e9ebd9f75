"""Blocking wait on a set of expectations with a timeout."""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .expectations import Expectation, PredicateExpectation
from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

ALL_FULFILLED = "all_fulfilled"
TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class WaitOutcome:
    status: str
    unfulfilled: Tuple[Expectation, ...] = tuple()
    elapsed_s: float = 0.0

    @property
    def all_fulfilled(self) -> bool:
        return self.status == ALL_FULFILLED

    @property
    def timed_out(self) -> bool:
        return self.status == TIMED_OUT

    def describe(self) -> str:
        if self.all_fulfilled:
            return "all expectations fulfilled"
        names = ", ".join(f"'{expectation.description}'" for expectation in self.unfulfilled)
        return f"with unfulfilled expectations: [{names}]"


class Waiter:
    """Creates expectations and blocks until they are fulfilled.

    Expectations wake the waiting thread through a condition variable as soon
    as they are fulfilled. Predicate expectations have no producer to signal
    them, so they are re-checked every ``poll_interval`` seconds.
    """

    def __init__(self, notifications: Optional[NotificationCenter] = None, *, poll_interval: float = 0.05) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self._notifications = notifications
        self._poll_interval = poll_interval

    @property
    def notifications(self) -> Optional[NotificationCenter]:
        return self._notifications

    def create_expectation(self, subject: str, description: Optional[str] = None) -> Expectation:
        expectation = Expectation(subject, description)
        if self._notifications is not None:
            expectation.listen(self._notifications)
        return expectation

    def expect_predicate(self, predicate: Callable[[], bool], description: Optional[str] = None) -> Expectation:
        return PredicateExpectation(predicate, description)

    def fulfill(self, expectation: Expectation) -> bool:
        return expectation.fulfill()

    def wait(self, expectations: Iterable[Expectation], timeout: float) -> WaitOutcome:
        pending = _unique(expectations)
        start = time.perf_counter()
        if not pending:
            return WaitOutcome(status=ALL_FULFILLED, elapsed_s=0.0)
        condition = threading.Condition()

        def _wake(_: Expectation) -> None:
            with condition:
                condition.notify_all()

        for expectation in pending:
            expectation.add_observer(_wake)
        deadline = start + max(timeout, 0.0)
        try:
            with condition:
                while True:
                    remaining = [expectation for expectation in pending if not expectation.poll()]
                    if not remaining:
                        outcome = WaitOutcome(status=ALL_FULFILLED, elapsed_s=time.perf_counter() - start)
                        break
                    left = deadline - time.perf_counter()
                    if left <= 0:
                        outcome = WaitOutcome(
                            status=TIMED_OUT,
                            unfulfilled=tuple(remaining),
                            elapsed_s=time.perf_counter() - start,
                        )
                        break
                    if any(expectation.needs_polling for expectation in remaining):
                        left = min(left, self._poll_interval)
                    condition.wait(left)
        finally:
            for expectation in pending:
                expectation.remove_observer(_wake)
                expectation.release()
        logger.debug("wait resolved status=%s elapsed=%.3fs", outcome.status, outcome.elapsed_s)
        return outcome


def _unique(expectations: Iterable[Expectation]) -> List[Expectation]:
    seen: set[int] = set()
    ordered: List[Expectation] = []
    for expectation in expectations:
        if id(expectation) in seen:
            continue
        seen.add(id(expectation))
        ordered.append(expectation)
    return ordered
