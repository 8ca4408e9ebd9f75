"""Core models, runner and assertions exposed at the package level."""
from .assertions import (
    assert_equal,
    assert_false,
    assert_greater,
    assert_greater_equal,
    assert_less,
    assert_less_equal,
    assert_nil,
    assert_none,
    assert_not_equal,
    assert_not_none,
    assert_raises,
    assert_true,
    fail,
)
from .case import Case
from .errors import (
    AssertionFailure,
    CaseFailure,
    ConfigError,
    DuplicateNameError,
    SetupFailure,
    TdkitError,
    TeardownFailure,
    WaitTimeoutError,
)
from .models import TestCase
from .results import FAILED, PASSED, TIMED_OUT, SuiteResult, TestResult
from .runner import TestRunner
from .suite import TestSuite

__all__ = [
    "AssertionFailure",
    "Case",
    "CaseFailure",
    "ConfigError",
    "DuplicateNameError",
    "FAILED",
    "PASSED",
    "SetupFailure",
    "SuiteResult",
    "TIMED_OUT",
    "TdkitError",
    "TeardownFailure",
    "TestCase",
    "TestResult",
    "TestRunner",
    "TestSuite",
    "WaitTimeoutError",
    "assert_equal",
    "assert_false",
    "assert_greater",
    "assert_greater_equal",
    "assert_less",
    "assert_less_equal",
    "assert_nil",
    "assert_none",
    "assert_not_equal",
    "assert_not_none",
    "assert_raises",
    "assert_true",
    "fail",
]
