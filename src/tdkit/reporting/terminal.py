"""Terminal reporter rendering an XCTest-style transcript."""
from __future__ import annotations

import datetime as dt

import click
from colorama import init as colorama_init

from tdkit.core.models import TestCase
from tdkit.core.results import SuiteResult, TestResult
from tdkit.core.suite import TestSuite

from .base import Reporter


STATUS_COLORS = {
    "passed": "green",
    "failed": "red",
    "timed_out": "yellow",
}


_COLORAMA_READY = False


def _init_colorama() -> None:
    global _COLORAMA_READY
    if not _COLORAMA_READY:
        colorama_init()
        _COLORAMA_READY = True


def _timestamp(moment: dt.datetime) -> str:
    return moment.astimezone().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        if use_color:
            _init_colorama()

    def on_start(self, suite: TestSuite) -> None:
        click.echo(f"Test Suite '{suite.name}' started at {_timestamp(dt.datetime.now())}")

    def on_case_start(self, case: TestCase, index: int, total: int) -> None:
        click.echo(f"Test Case '{case.name}' started.")

    def on_case_result(self, result: TestResult, index: int, total: int) -> None:
        if result.failed:
            location = result.location or "<unknown>"
            click.echo(
                f"{location}: {self._styled('error', force_color='red')}: {result.case_name} : {result.reason}"
            )
        status_text = self._styled(result.outcome.replace("_", " "), force_color=STATUS_COLORS.get(result.outcome))
        click.echo(f"Test Case '{result.case_name}' {status_text} ({result.duration_s:.3f} seconds).")

    def on_complete(self, suite_result: SuiteResult) -> None:
        finished_at = suite_result.started_at + dt.timedelta(seconds=suite_result.duration_s)
        verdict = "passed" if suite_result.succeeded else "failed"
        click.echo(
            f"Test Suite '{suite_result.name}' "
            f"{self._styled(verdict, force_color=STATUS_COLORS[verdict])} at {_timestamp(finished_at)}."
        )
        click.echo(
            self._styled(
                f"\t Executed {_plural(suite_result.total, 'test')}, "
                f"with {_plural(suite_result.failed, 'failure')} "
                f"({suite_result.timed_out} timed out) in {suite_result.duration_s:.3f} seconds",
                force_color="cyan",
            )
        )

    def _styled(self, text: str, *, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(text.lower(), None)
        if color:
            return click.style(text, fg=color)
        return text
