"""Reporter forwarding results to the standard logging system."""
from __future__ import annotations

import logging
from typing import Optional

from tdkit.core.models import TestCase
from tdkit.core.results import SuiteResult, TestResult
from tdkit.core.suite import TestSuite

from .base import Reporter


class LogReporter(Reporter):
    """Emits one record per case and one for the suite totals."""

    LOGGER_NAME = "tdkit.report"

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(self.LOGGER_NAME)

    def on_start(self, suite: TestSuite) -> None:
        self._logger.info("suite=%s event=started cases=%d", suite.name, len(suite))

    def on_case_start(self, case: TestCase, index: int, total: int) -> None:
        self._logger.debug("case=%s event=started index=%d total=%d", case.name, index, total)

    def on_case_result(self, result: TestResult, index: int, total: int) -> None:
        level = logging.INFO if result.passed else logging.WARNING
        message = "case=%s outcome=%s duration_s=%.3f"
        args: tuple = (result.case_name, result.outcome, result.duration_s)
        if result.reason:
            message += " reason=%r"
            args += (result.reason,)
        self._logger.log(level, message, *args)

    def on_complete(self, suite_result: SuiteResult) -> None:
        level = logging.INFO if suite_result.succeeded else logging.WARNING
        self._logger.log(
            level,
            "suite=%s event=completed total=%d passed=%d failed=%d timed_out=%d duration_s=%.3f",
            suite_result.name,
            suite_result.total,
            suite_result.passed,
            suite_result.failed,
            suite_result.timed_out,
            suite_result.duration_s,
        )
