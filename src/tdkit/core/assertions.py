"""Assertion primitives raising :class:`AssertionFailure` on mismatch.

Arguments follow the ``(actual, expected)`` order used throughout the
tutorial transcripts, e.g. ``assert_equal(loader.count, 24)`` fails with
``assert_equal failed: (0) is not equal to (24) - expected 24, actual 0``.
"""
from __future__ import annotations

import contextlib
import os
import sys
from typing import Any, Iterator, Optional, Tuple, Type, Union

from .errors import AssertionFailure

_THIS_FILE = os.path.normcase(os.path.abspath(__file__))
_SKIPPED_FILES = {_THIS_FILE, os.path.normcase(os.path.abspath(contextlib.__file__))}

ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def _caller_location() -> Optional[str]:
    frame = sys._getframe(1)
    while frame is not None:
        filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
        if filename not in _SKIPPED_FILES:
            return f"{frame.f_code.co_filename}:{frame.f_lineno}"
        frame = frame.f_back
    return None


def _raise(assertion: str, detail: str, message: str, *, expected: Any = None, actual: Any = None) -> None:
    raise AssertionFailure(
        assertion,
        expected=expected,
        actual=actual,
        location=_caller_location(),
        detail=detail,
        message=message,
    )


def fail(message: str = "") -> None:
    _raise("fail", "explicit failure", message)


def assert_equal(actual: Any, expected: Any, message: str = "") -> None:
    if actual == expected:
        return
    _raise(
        "assert_equal",
        f"({actual!r}) is not equal to ({expected!r}) - expected {expected!r}, actual {actual!r}",
        message,
        expected=expected,
        actual=actual,
    )


def assert_not_equal(actual: Any, expected: Any, message: str = "") -> None:
    if actual != expected:
        return
    _raise(
        "assert_not_equal",
        f"({actual!r}) is equal to ({expected!r})",
        message,
        expected=expected,
        actual=actual,
    )


def assert_none(value: Any, message: str = "") -> None:
    if value is None:
        return
    _raise("assert_none", f"({value!r}) is not None", message, expected=None, actual=value)


assert_nil = assert_none


def assert_not_none(value: Any, message: str = "") -> None:
    if value is not None:
        return
    _raise("assert_not_none", "expression is None", message, actual=None)


def assert_true(value: Any, message: str = "") -> None:
    if value:
        return
    _raise("assert_true", f"({value!r}) is not true", message, expected=True, actual=value)


def assert_false(value: Any, message: str = "") -> None:
    if not value:
        return
    _raise("assert_false", f"({value!r}) is not false", message, expected=False, actual=value)


def assert_greater(actual: Any, bound: Any, message: str = "") -> None:
    if actual > bound:
        return
    _raise("assert_greater", f"({actual!r}) is not greater than ({bound!r})", message, expected=bound, actual=actual)


def assert_greater_equal(actual: Any, bound: Any, message: str = "") -> None:
    if actual >= bound:
        return
    _raise(
        "assert_greater_equal",
        f"({actual!r}) is less than ({bound!r})",
        message,
        expected=bound,
        actual=actual,
    )


def assert_less(actual: Any, bound: Any, message: str = "") -> None:
    if actual < bound:
        return
    _raise("assert_less", f"({actual!r}) is not less than ({bound!r})", message, expected=bound, actual=actual)


def assert_less_equal(actual: Any, bound: Any, message: str = "") -> None:
    if actual <= bound:
        return
    _raise(
        "assert_less_equal",
        f"({actual!r}) is greater than ({bound!r})",
        message,
        expected=bound,
        actual=actual,
    )


@contextlib.contextmanager
def assert_raises(expected: ExceptionTypes, message: str = "") -> Iterator[None]:
    """Fail unless the block raises one of ``expected``."""

    try:
        yield
    except expected:
        return
    name = getattr(expected, "__name__", None) or ", ".join(exc.__name__ for exc in expected)  # type: ignore[union-attr]
    _raise("assert_raises", f"{name} was not raised", message, expected=name)
