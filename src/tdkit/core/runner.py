"""Test runner driving the setup -> body -> teardown lifecycle."""
from __future__ import annotations

import datetime as dt
import logging
import time
from typing import TYPE_CHECKING, List, Optional

from .errors import AssertionFailure, SetupFailure, TeardownFailure, WaitTimeoutError, describe_exception
from .models import TestCase
from .results import FAILED, PASSED, TIMED_OUT, SuiteResult, TestResult
from .suite import TestSuite

if TYPE_CHECKING:  # pragma: no cover
    from tdkit.reporting.base import Reporter

logger = logging.getLogger(__name__)


class TestRunner:
    """Executes the cases of a suite sequentially, in registration order."""

    __test__ = False

    def __init__(self, reporter: Optional["Reporter"] = None) -> None:
        self._reporter = reporter

    def run(self, suite: TestSuite) -> SuiteResult:
        cases = suite.cases
        total = len(cases)
        started_at = dt.datetime.now(dt.timezone.utc)
        start = time.perf_counter()
        logger.debug("running suite %r with %d case(s)", suite.name, total)
        if self._reporter:
            self._reporter.on_start(suite)
        results: List[TestResult] = []
        for index, case in enumerate(cases, start=1):
            if self._reporter:
                self._reporter.on_case_start(case, index, total)
            result = self._execute_case(case)
            results.append(result)
            if self._reporter:
                self._reporter.on_case_result(result, index, total)
        suite_result = SuiteResult(
            name=suite.name,
            results=tuple(results),
            duration_s=time.perf_counter() - start,
            started_at=started_at,
        )
        logger.debug(
            "suite %r finished: total=%d failed=%d", suite.name, suite_result.total, suite_result.failed
        )
        if self._reporter:
            self._reporter.on_complete(suite_result)
        return suite_result

    def _execute_case(self, case: TestCase) -> TestResult:
        start = time.perf_counter()
        failure: Optional[BaseException] = None
        try:
            if case.setup is not None:
                try:
                    case.setup()
                except Exception as exc:
                    logger.warning("setup of %r raised: %s", case.name, exc)
                    raise SetupFailure(exc) from exc
            case.body()
        except Exception as exc:
            failure = exc
        finally:
            teardown_failure = self._tear_down(case)
        duration = time.perf_counter() - start
        return _build_result(case, duration, failure, teardown_failure)

    def _tear_down(self, case: TestCase) -> Optional[TeardownFailure]:
        if case.teardown is None:
            return None
        try:
            case.teardown()
        except Exception as exc:
            logger.warning("teardown of %r raised: %s", case.name, exc)
            return TeardownFailure(exc)
        return None


def _build_result(
    case: TestCase,
    duration: float,
    failure: Optional[BaseException],
    teardown_failure: Optional[TeardownFailure],
) -> TestResult:
    if failure is None:
        if teardown_failure is None:
            return TestResult(case_name=case.name, outcome=PASSED, duration_s=duration)
        return TestResult(case_name=case.name, outcome=FAILED, duration_s=duration, reason=teardown_failure.reason)
    outcome = TIMED_OUT if isinstance(failure, WaitTimeoutError) else FAILED
    reason = _failure_reason(failure)
    if teardown_failure is not None:
        reason = f"{reason}; {teardown_failure.reason}"
    if isinstance(failure, AssertionFailure):
        return TestResult(
            case_name=case.name,
            outcome=outcome,
            duration_s=duration,
            reason=reason,
            expected=failure.expected,
            actual=failure.actual,
            location=failure.location,
        )
    return TestResult(case_name=case.name, outcome=outcome, duration_s=duration, reason=reason)


def _failure_reason(failure: BaseException) -> str:
    if isinstance(failure, (AssertionFailure, WaitTimeoutError, SetupFailure)):
        return failure.reason
    if isinstance(failure, AssertionError):
        text = str(failure)
        return f"assertion failed: {text}" if text else "assertion failed"
    return f"unexpected error: {describe_exception(failure)}"
