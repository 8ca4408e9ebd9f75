"""YAML loader and validation for run settings."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from tdkit.core.errors import ConfigError

from .models import ReportSettings, RunSettings

DEFAULT_CONFIG_NAME = "tdkit.yaml"


def load_settings(path: str) -> RunSettings:
    """Load and validate a settings file."""

    settings_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {settings_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {settings_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Settings file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Settings schema validation failed: {messages}")
    return RunSettings(
        timeout=float(raw.get("timeout", RunSettings.timeout)),
        poll_interval=float(raw.get("poll_interval", RunSettings.poll_interval)),
        cases=tuple(str(pattern) for pattern in raw.get("cases", []) or []),
        tags=tuple(str(tag) for tag in raw.get("tags", []) or []),
        report=_parse_report(raw.get("report")),
    )


def find_default_settings(directory: Path | None = None) -> Path | None:
    candidate = (directory or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


def _parse_report(raw: Any) -> ReportSettings:
    if raw is None:
        return ReportSettings()
    if isinstance(raw, str):
        return ReportSettings(format=raw)
    path = raw.get("path")
    return ReportSettings(
        format=str(raw.get("format", "terminal")),
        path=str(path) if path is not None else None,
        color=bool(raw.get("color", True)),
    )


SETTINGS_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "timeout": {"type": "number", "exclusiveMinimum": 0},
        "poll_interval": {"type": "number", "exclusiveMinimum": 0},
        "cases": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "tags": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "report": {
            "oneOf": [
                {"type": "string", "minLength": 1},
                {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {
                        "format": {"type": "string", "minLength": 1},
                        "path": {"type": "string", "minLength": 1},
                        "color": {"type": "boolean"},
                    },
                },
            ]
        },
    },
}

_validator = Draft7Validator(SETTINGS_SCHEMA)
