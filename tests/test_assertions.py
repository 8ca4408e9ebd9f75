from __future__ import annotations

import pytest

from tdkit.core import (
    AssertionFailure,
    assert_equal,
    assert_false,
    assert_greater,
    assert_less_equal,
    assert_nil,
    assert_none,
    assert_not_equal,
    assert_not_none,
    assert_raises,
    assert_true,
    fail,
)


def test_assert_equal_passes_silently() -> None:
    assert_equal(3 * 3, 9)


def test_assert_equal_reports_expected_and_actual() -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_equal(0, 24)
    failure = exc.value
    assert failure.expected == 24
    assert failure.actual == 0
    assert failure.assertion == "assert_equal"
    assert "(0) is not equal to (24)" in failure.reason
    assert "expected 24, actual 0" in failure.reason


def test_failure_location_points_at_caller() -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_true(False)
    assert exc.value.location is not None
    assert "test_assertions.py:" in exc.value.location


def test_user_message_is_appended() -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_not_equal("a", "a", "names must differ")
    assert exc.value.reason.endswith("- names must differ")


def test_nil_checks() -> None:
    hello = None
    assert_nil(hello)
    hello = "Hello World"
    assert_equal(hello, "Hello World")
    assert_not_none(hello)
    with pytest.raises(AssertionFailure):
        assert_none(hello)
    with pytest.raises(AssertionFailure):
        assert_not_none(None)


def test_ordering_and_boolean_checks() -> None:
    assert_greater(2, 1)
    assert_less_equal(1, 1)
    assert_false([])
    with pytest.raises(AssertionFailure):
        assert_greater(1, 2)
    with pytest.raises(AssertionFailure):
        assert_false("x")


def test_assert_raises() -> None:
    with assert_raises(KeyError):
        {}["missing"]
    with pytest.raises(AssertionFailure) as exc:
        with assert_raises(KeyError):
            pass
    assert "KeyError was not raised" in exc.value.reason
    assert exc.value.location is not None
    assert "test_assertions.py:" in exc.value.location


def test_fail_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        fail("boom")
