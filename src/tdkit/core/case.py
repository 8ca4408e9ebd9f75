"""Class-based cases grouping test methods behind shared setup and teardown."""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from tdkit.waiting import Expectation, NotificationCenter, Waiter, WaitOutcome

from .errors import WaitTimeoutError
from .suite import TestSuite

DEFAULT_TIMEOUT = 5.0
DEFAULT_POLL_INTERVAL = 0.05


class Case:
    """Base class for test methods sharing ``set_up``/``tear_down`` hooks.

    Every method whose name starts with ``test`` becomes a case of
    :meth:`default_suite`, each bound to its own instance. Subclasses override
    :meth:`set_up` and :meth:`tear_down` to build and discard per-case fixtures.
    The ``tags`` class attribute is attached to every discovered case.
    """

    __test__ = False

    tags: Tuple[str, ...] = ()

    def __init__(
        self,
        method_name: str,
        *,
        notifications: Optional[NotificationCenter] = None,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        if not callable(getattr(self, method_name, None)):
            raise AttributeError(f"{type(self).__name__} has no test method '{method_name}'")
        self.method_name = method_name
        self.notifications = notifications if notifications is not None else NotificationCenter()
        self.timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self.poll_interval = DEFAULT_POLL_INTERVAL if poll_interval is None else poll_interval
        self.waiter = Waiter(self.notifications, poll_interval=self.poll_interval)
        self._pending: List[Expectation] = []

    @classmethod
    def discover_method_names(cls) -> List[str]:
        names: List[str] = []
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if name.startswith("test") and callable(value) and name not in names:
                    names.append(name)
        return [name for name in names if callable(getattr(cls, name, None))]

    @classmethod
    def default_suite(
        cls,
        notifications: Optional[NotificationCenter] = None,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> TestSuite:
        suite = TestSuite(cls.__name__)
        for name in cls.discover_method_names():
            instance = cls(name, notifications=notifications, timeout=timeout, poll_interval=poll_interval)
            suite.register_case(
                f"{cls.__name__}.{name}",
                getattr(instance, name),
                setup=instance._run_set_up,
                teardown=instance._run_tear_down,
                tags=cls.tags,
            )
        return suite

    def set_up(self) -> None:
        """Prepare per-case fixtures."""

    def tear_down(self) -> None:
        """Release per-case fixtures."""

    def expectation(self, subject: str, description: Optional[str] = None) -> Expectation:
        expectation = self.waiter.create_expectation(subject, description)
        self._pending.append(expectation)
        return expectation

    def expectation_for_predicate(self, predicate: Callable[[], bool], description: Optional[str] = None) -> Expectation:
        expectation = self.waiter.expect_predicate(predicate, description)
        self._pending.append(expectation)
        return expectation

    def wait_for_expectations(
        self,
        expectations: Optional[Iterable[Expectation]] = None,
        timeout: Optional[float] = None,
    ) -> WaitOutcome:
        """Block until the expectations are fulfilled.

        Without ``expectations`` every expectation created since setup is
        waited on. Raises :class:`WaitTimeoutError` when the timeout elapses.
        """

        targets = list(self._pending) if expectations is None else list(expectations)
        limit = self.timeout if timeout is None else timeout
        outcome = self.waiter.wait(targets, limit)
        self._pending = [expectation for expectation in self._pending if expectation not in targets]
        if outcome.timed_out:
            raise WaitTimeoutError(outcome, limit)
        return outcome

    def _run_set_up(self) -> None:
        self._pending = []
        self.set_up()

    def _run_tear_down(self) -> None:
        try:
            self.tear_down()
        finally:
            for expectation in self._pending:
                expectation.release()
            self._pending = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method_name}>"
