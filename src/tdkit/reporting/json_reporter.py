"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict

import click
from jsonschema import validate

from tdkit.core.models import TestCase
from tdkit.core.results import SuiteResult, TestResult
from tdkit.core.suite import TestSuite

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results to a JSON file validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)
        self._records: list[Dict[str, Any]] = []

    def on_start(self, suite: TestSuite) -> None:
        self._records.clear()

    def on_case_start(self, case: TestCase, index: int, total: int) -> None:
        pass

    def on_case_result(self, result: TestResult, index: int, total: int) -> None:
        self._records.append(_result_to_dict(result))

    def on_complete(self, suite_result: SuiteResult) -> None:
        payload = build_payload(suite_result, self._records)
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def build_payload(suite_result: SuiteResult, records: list[Dict[str, Any]] | None = None) -> Dict[str, Any]:
    if records is None:
        records = [_result_to_dict(result) for result in suite_result.results]
    generated_at = dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": generated_at.isoformat(timespec="seconds") + "Z",
        "suite": suite_result.name,
        "summary": {
            "total": suite_result.total,
            "passed": suite_result.passed,
            "failed": suite_result.failed,
            "timed_out": suite_result.timed_out,
            "duration_s": suite_result.duration_s,
        },
        "cases": list(records),
    }


def _result_to_dict(result: TestResult) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "name": result.case_name,
        "outcome": result.outcome,
        "duration_ms": result.duration_s * 1000,
    }
    if result.reason:
        record["reason"] = result.reason
    if result.location:
        record["location"] = result.location
    if result.expected is not None or result.actual is not None:
        record["expected"] = _jsonify(result.expected)
        record["actual"] = _jsonify(result.actual)
    return record


def _jsonify(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _jsonify(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonify(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
