"""Result data structures produced by the test runner."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Optional, Tuple

PASSED = "passed"
FAILED = "failed"
TIMED_OUT = "timed_out"

FAILURE_OUTCOMES = frozenset({FAILED, TIMED_OUT})


@dataclass(frozen=True)
class TestResult:
    """Outcome of executing a single test case."""

    __test__ = False

    case_name: str
    outcome: str
    duration_s: float
    reason: Optional[str] = None
    expected: Any = None
    actual: Any = None
    location: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.outcome == PASSED

    @property
    def failed(self) -> bool:
        return self.outcome in FAILURE_OUTCOMES


@dataclass(frozen=True)
class SuiteResult:
    """Aggregated results of one suite run, in registration order."""

    name: str
    results: Tuple[TestResult, ...]
    duration_s: float
    started_at: dt.datetime

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if result.failed)

    @property
    def timed_out(self) -> int:
        return sum(1 for result in self.results if result.outcome == TIMED_OUT)

    @property
    def succeeded(self) -> bool:
        return self.failed == 0

    def failures(self) -> Tuple[TestResult, ...]:
        return tuple(result for result in self.results if result.failed)

    def result_for(self, case_name: str) -> TestResult:
        for result in self.results:
            if result.case_name == case_name:
                return result
        raise KeyError(case_name)
