"""Resolve import paths into runnable suites."""
from __future__ import annotations

import inspect
from typing import Optional, Sequence

from tdkit.utils.importing import import_string

from .case import Case
from .suite import TestSuite

ALL_TESTS = "All tests"


def load_suite(
    target: str,
    *,
    timeout: Optional[float] = None,
    poll_interval: Optional[float] = None,
) -> TestSuite:
    """Build a suite from a ``Case`` subclass, a suite, or a suite factory."""

    obj = import_string(target)
    if inspect.isclass(obj) and issubclass(obj, Case):
        return obj.default_suite(timeout=timeout, poll_interval=poll_interval)
    if isinstance(obj, TestSuite):
        return obj
    if callable(obj):
        suite = obj()
        if isinstance(suite, TestSuite):
            return suite
        raise TypeError(f"'{target}' returned {type(suite).__name__}, expected TestSuite")
    raise TypeError(f"'{target}' is not a Case subclass, TestSuite or suite factory")


def load_suites(
    targets: Sequence[str],
    *,
    timeout: Optional[float] = None,
    poll_interval: Optional[float] = None,
) -> TestSuite:
    """Load every target; several targets are merged into one suite."""

    if not targets:
        raise ValueError("At least one target is required")
    suites = [load_suite(target, timeout=timeout, poll_interval=poll_interval) for target in targets]
    if len(suites) == 1:
        return suites[0]
    merged = TestSuite(ALL_TESTS)
    for suite in suites:
        merged.extend(suite)
    return merged
