"""Exception taxonomy for registration errors and per-case failures."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover
    from tdkit.waiting.waiter import WaitOutcome


class TdkitError(Exception):
    """Base class for programmer and configuration errors."""


class DuplicateNameError(TdkitError, ValueError):
    """Raised when a case name is registered twice within a suite."""

    def __init__(self, suite_name: str, case_name: str) -> None:
        super().__init__(f"Case '{case_name}' is already registered in suite '{suite_name}'")
        self.suite_name = suite_name
        self.case_name = case_name


class ConfigError(TdkitError, ValueError):
    """Raised when a settings file cannot be loaded or validated."""


class CaseFailure(AssertionError):
    """Base class for failures recorded against a single case."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class AssertionFailure(CaseFailure):
    """An assertion primitive found a mismatch between expected and actual."""

    def __init__(
        self,
        assertion: str,
        *,
        expected: Any = None,
        actual: Any = None,
        location: Optional[str] = None,
        detail: str,
        message: str = "",
    ) -> None:
        reason = f"{assertion} failed: {detail}"
        if message:
            reason = f"{reason} - {message}"
        super().__init__(reason)
        self.assertion = assertion
        self.expected = expected
        self.actual = actual
        self.location = location
        self.message = message


class WaitTimeoutError(CaseFailure):
    """A wait for expectations did not resolve before its timeout."""

    def __init__(self, outcome: "WaitOutcome", timeout: float) -> None:
        super().__init__(f"Exceeded timeout of {timeout:g} seconds, {outcome.describe()}")
        self.outcome = outcome
        self.timeout = timeout


class SetupFailure(CaseFailure):
    """The setup hook of a case raised."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"setup failed: {describe_exception(cause)}")
        self.__cause__ = cause


class TeardownFailure(CaseFailure):
    """The teardown hook of a case raised."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"teardown failed: {describe_exception(cause)}")
        self.__cause__ = cause


def describe_exception(exc: BaseException) -> str:
    if isinstance(exc, CaseFailure):
        return exc.reason
    text = str(exc)
    if text:
        return f"{type(exc).__name__}: {text}"
    return type(exc).__name__
