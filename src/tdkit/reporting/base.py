"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from tdkit.core.models import TestCase
from tdkit.core.results import SuiteResult, TestResult
from tdkit.core.suite import TestSuite


class Reporter:
    """Interface for output renderers."""

    def on_start(self, suite: TestSuite) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_start(self, case: TestCase, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_case_result(self, result: TestResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, suite_result: SuiteResult) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager(Reporter):
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def on_start(self, suite: TestSuite) -> None:
        for reporter in self._reporters:
            reporter.on_start(suite)

    def on_case_start(self, case: TestCase, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_start(case, index, total)

    def on_case_result(self, result: TestResult, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result, index, total)

    def on_complete(self, suite_result: SuiteResult) -> None:
        for reporter in self._reporters:
            reporter.on_complete(suite_result)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
