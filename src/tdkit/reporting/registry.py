"""Name-based reporter factories, extendable by plugins."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable

from .base import Reporter
from .json_reporter import JsonReporter
from .log_reporter import LogReporter
from .terminal import TerminalReporter

ReporterFactory = Callable[..., Reporter]


class ReporterRegistry:
    """Stores reporter factories keyed by format name."""

    def __init__(self) -> None:
        self._factories: Dict[str, ReporterFactory] = {}

    def register(self, name: str, factory: ReporterFactory) -> ReporterFactory:
        if name in self._factories:
            raise ValueError(f"Reporter '{name}' already registered")
        self._factories[name] = factory
        return factory

    def create(self, name: str, **options: Any) -> Reporter:
        try:
            factory = self._factories[name]
        except KeyError as exc:
            raise KeyError(f"Reporter '{name}' is not registered") from exc
        return factory(**options)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def names(self) -> Iterable[str]:
        return tuple(self._factories.keys())


def _terminal(*, color: bool = True, **_: Any) -> Reporter:
    return TerminalReporter(use_color=color)


def _json(*, path: str | None = None, **_: Any) -> Reporter:
    return JsonReporter(path=path or "tdkit-report.json")


def _log(**_: Any) -> Reporter:
    report_logger = logging.getLogger(LogReporter.LOGGER_NAME)
    if not report_logger.isEnabledFor(logging.INFO):
        report_logger.setLevel(logging.INFO)
    return LogReporter(report_logger)


registry = ReporterRegistry()
registry.register("terminal", _terminal)
registry.register("json", _json)
registry.register("log", _log)


def register_reporter(name: str, factory: ReporterFactory) -> ReporterFactory:
    return registry.register(name, factory)


def create_reporter(name: str, **options: Any) -> Reporter:
    return registry.create(name, **options)
