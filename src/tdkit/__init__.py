"""tdkit package initialization."""
from __future__ import annotations

import importlib
import os

from .core import (
    AssertionFailure,
    Case,
    DuplicateNameError,
    SuiteResult,
    TestCase,
    TestResult,
    TestRunner,
    TestSuite,
    WaitTimeoutError,
)
from .version import __version__
from .waiting import Expectation, NotificationCenter, Waiter, WaitOutcome

__all__ = [
    "__version__",
    "bootstrap",
    "AssertionFailure",
    "Case",
    "DuplicateNameError",
    "Expectation",
    "NotificationCenter",
    "SuiteResult",
    "TestCase",
    "TestResult",
    "TestRunner",
    "TestSuite",
    "WaitOutcome",
    "WaitTimeoutError",
    "Waiter",
]

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Initialize tdkit (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    _load_plugins()
    _BOOTSTRAPPED = True


def _load_plugins() -> None:
    plugin_env = os.environ.get("TDKIT_PLUGINS")
    if not plugin_env:
        return
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            register()
