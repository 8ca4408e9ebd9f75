from __future__ import annotations

import threading
import time
from typing import List

import pytest

from tdkit.core import (
    FAILED,
    PASSED,
    TIMED_OUT,
    Case,
    TestRunner,
    TestSuite,
    WaitTimeoutError,
    assert_equal,
)
from tdkit.waiting import NotificationCenter, Waiter


class RecordingReporter:
    def __init__(self) -> None:
        self.events: List[tuple] = []

    def on_start(self, suite) -> None:
        self.events.append(("start", suite.name))

    def on_case_start(self, case, index, total) -> None:
        self.events.append(("case_start", case.name, index, total))

    def on_case_result(self, result, index, total) -> None:
        self.events.append(("case_result", result.case_name, result.outcome))

    def on_complete(self, suite_result) -> None:
        self.events.append(("complete", suite_result.total, suite_result.failed))


def test_lifecycle_order_and_pass() -> None:
    calls: List[str] = []
    suite = TestSuite("lifecycle")
    suite.register_case(
        "ordered",
        lambda: calls.append("body"),
        setup=lambda: calls.append("setup"),
        teardown=lambda: calls.append("teardown"),
    )
    result = TestRunner().run(suite)
    assert calls == ["setup", "body", "teardown"]
    assert result.results[0].outcome == PASSED
    assert result.succeeded


def test_case_without_assertions_passes() -> None:
    suite = TestSuite("empty")
    suite.register_case("nothing", lambda: None)
    assert TestRunner().run(suite).passed == 1


def test_assertion_failure_recorded_and_teardown_runs() -> None:
    calls: List[str] = []

    def body() -> None:
        assert_equal(0, 24)

    suite = TestSuite("failing")
    suite.register_case("loads-24-records", body, teardown=lambda: calls.append("teardown"))
    suite.register_case("after", lambda: calls.append("after"))
    result = TestRunner().run(suite)
    failed = result.result_for("loads-24-records")
    assert failed.outcome == FAILED
    assert failed.expected == 24
    assert failed.actual == 0
    assert "expected 24, actual 0" in failed.reason
    assert failed.location is not None
    assert calls == ["teardown", "after"]
    assert result.total == 2
    assert result.failed == 1


def test_unexpected_exception_is_failure() -> None:
    def body() -> None:
        raise ValueError("bad data")

    suite = TestSuite("errors")
    suite.register_case("raises", body)
    outcome = TestRunner().run(suite).results[0]
    assert outcome.outcome == FAILED
    assert outcome.reason == "unexpected error: ValueError: bad data"


def test_bare_assert_is_failure() -> None:
    def body() -> None:
        assert 1 == 2, "numbers differ"

    suite = TestSuite("bare")
    suite.register_case("bare", body)
    outcome = TestRunner().run(suite).results[0]
    assert outcome.outcome == FAILED
    assert "numbers differ" in outcome.reason


def test_setup_failure_skips_body_and_runs_teardown_once() -> None:
    calls: List[str] = []

    def setup() -> None:
        raise RuntimeError("no fixture")

    suite = TestSuite("setup")
    suite.register_case(
        "broken",
        lambda: calls.append("body"),
        setup=setup,
        teardown=lambda: calls.append("teardown"),
    )
    outcome = TestRunner().run(suite).results[0]
    assert calls == ["teardown"]
    assert outcome.outcome == FAILED
    assert outcome.reason == "setup failed: RuntimeError: no fixture"


def test_teardown_failure_marks_passing_case_failed() -> None:
    def teardown() -> None:
        raise OSError("leak")

    suite = TestSuite("teardown")
    suite.register_case("leaky", lambda: None, teardown=teardown)
    outcome = TestRunner().run(suite).results[0]
    assert outcome.outcome == FAILED
    assert outcome.reason == "teardown failed: OSError: leak"


def test_teardown_failure_appends_to_existing_reason() -> None:
    def body() -> None:
        assert_equal(1, 2)

    def teardown() -> None:
        raise OSError("leak")

    suite = TestSuite("teardown")
    suite.register_case("both", body, teardown=teardown)
    outcome = TestRunner().run(suite).results[0]
    assert outcome.reason.startswith("assert_equal failed")
    assert outcome.reason.endswith("; teardown failed: OSError: leak")


def test_keyboard_interrupt_propagates_after_teardown() -> None:
    calls: List[str] = []

    def body() -> None:
        raise KeyboardInterrupt

    suite = TestSuite("interrupt")
    suite.register_case("stop", body, teardown=lambda: calls.append("teardown"))
    with pytest.raises(KeyboardInterrupt):
        TestRunner().run(suite)
    assert calls == ["teardown"]


def test_reporter_receives_events_in_order() -> None:
    reporter = RecordingReporter()
    suite = TestSuite("events")
    suite.register_case("one", lambda: None)
    suite.register_case("two", lambda: assert_equal(1, 2))
    TestRunner(reporter=reporter).run(suite)
    assert reporter.events == [
        ("start", "events"),
        ("case_start", "one", 1, 2),
        ("case_result", "one", PASSED),
        ("case_start", "two", 2, 2),
        ("case_result", "two", FAILED),
        ("complete", 2, 1),
    ]


def test_red_then_green_rerun() -> None:
    source: List[str] = []
    suite = TestSuite("records")
    suite.register_case("loads-24-records", lambda: assert_equal(len(source), 24))
    runner = TestRunner()

    red = runner.run(suite)
    assert red.failed == 1
    assert "(0) is not equal to (24)" in red.results[0].reason

    source.extend(str(index) for index in range(24))
    green = runner.run(suite)
    assert green.failed == 0
    assert green.results[0].outcome == PASSED


def test_sync_case_then_timed_out_async_case() -> None:
    timeout = 0.5
    waiter = Waiter()

    def async_body() -> None:
        expectation = waiter.create_expectation("never")
        outcome = waiter.wait({expectation}, timeout)
        if outcome.timed_out:
            raise WaitTimeoutError(outcome, timeout)

    suite = TestSuite("mixed")
    suite.register_case("sync", lambda: assert_equal(3 * 3, 9))
    suite.register_case("async", async_body)
    result = TestRunner().run(suite)
    sync, late = result.results
    assert sync.outcome == PASSED
    assert sync.duration_s < 0.2
    assert late.outcome == TIMED_OUT
    assert late.duration_s >= timeout * 0.9
    assert "'never'" in late.reason
    assert result.total == 2
    assert result.failed == 1
    assert result.timed_out == 1


class NotifiedCase(Case):
    def set_up(self) -> None:
        self.loaded: List[int] = []

    def _produce(self, delay: float) -> None:
        def worker() -> None:
            time.sleep(delay)
            self.loaded.append(1)
            self.notifications.post("data.ready")

        threading.Thread(target=worker, daemon=True).start()

    def test_notification_fulfills(self) -> None:
        self.expectation("data.ready")
        self._produce(0.05)
        self.wait_for_expectations(timeout=2.0)
        assert_equal(self.loaded, [1])

    def test_predicate_fulfills(self) -> None:
        self.expectation_for_predicate(lambda: bool(self.loaded), "loaded")
        self._produce(0.05)
        self.wait_for_expectations(timeout=2.0)

    def test_times_out(self) -> None:
        self.expectation("data.never")
        self.wait_for_expectations(timeout=0.2)


def test_class_based_async_cases() -> None:
    center = NotificationCenter()
    result = TestRunner().run(NotifiedCase.default_suite(notifications=center, poll_interval=0.01))
    outcomes = {item.case_name: item.outcome for item in result.results}
    assert outcomes == {
        "NotifiedCase.test_notification_fulfills": PASSED,
        "NotifiedCase.test_predicate_fulfills": PASSED,
        "NotifiedCase.test_times_out": TIMED_OUT,
    }
    assert "'data.never'" in result.result_for("NotifiedCase.test_times_out").reason
    assert center.subscriber_count("data.never") == 0
    assert center.subscriber_count("data.ready") == 0


class ReusedWaiterCase(Case):
    def test_manual_fulfill(self) -> None:
        expectation = self.expectation("manual")
        expectation.fulfill()
        self.wait_for_expectations(timeout=1.0)


def test_case_keeps_its_waiter_across_runs() -> None:
    suite = ReusedWaiterCase.default_suite()
    instance = suite.cases[0].body.__self__
    waiter = instance.waiter
    runner = TestRunner()
    assert runner.run(suite).succeeded
    assert runner.run(suite).succeeded
    assert instance.waiter is waiter
    assert instance._pending == []
