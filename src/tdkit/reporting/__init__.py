"""Reporting exports."""
from .base import ReportManager, Reporter
from .json_reporter import JsonReporter
from .log_reporter import LogReporter
from .registry import create_reporter, register_reporter, registry
from .terminal import TerminalReporter

__all__ = [
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "LogReporter",
    "TerminalReporter",
    "create_reporter",
    "register_reporter",
    "registry",
]
