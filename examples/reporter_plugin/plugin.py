"""Registers a ``dots`` reporter; enable with ``TDKIT_PLUGINS=plugin``."""
from __future__ import annotations

import click

from tdkit.reporting import Reporter, register_reporter, registry


class DotsReporter(Reporter):
    def on_start(self, suite) -> None:
        pass

    def on_case_start(self, case, index, total) -> None:
        pass

    def on_case_result(self, result, index, total) -> None:
        click.echo("." if result.passed else "F", nl=False)

    def on_complete(self, suite_result) -> None:
        click.echo(f"\n{suite_result.passed}/{suite_result.total} passed")


def register() -> None:
    if "dots" not in registry:
        register_reporter("dots", lambda **_: DotsReporter())
