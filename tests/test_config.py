from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from tdkit.config import RunSettings, find_default_settings, load_settings
from tdkit.core import ConfigError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "tdkit.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_load_full_settings(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        timeout: 2.5
        poll_interval: 0.01
        cases: ["Loader.*"]
        report:
          format: json
          path: out/report.json
          color: false
        """,
    )
    settings = load_settings(str(path))
    assert settings.timeout == 2.5
    assert settings.poll_interval == 0.01
    assert settings.cases == ("Loader.*",)
    assert settings.report.format == "json"
    assert settings.report.path == "out/report.json"
    assert settings.report.color is False


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    settings = load_settings(str(_write(tmp_path, "")))
    assert settings == RunSettings()


def test_report_shorthand(tmp_path: Path) -> None:
    settings = load_settings(str(_write(tmp_path, "report: log\n")))
    assert settings.report.format == "log"


def test_schema_errors_are_reported(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        timeout: -1
        unknown: true
        """,
    )
    with pytest.raises(ConfigError) as exc:
        load_settings(str(path))
    message = str(exc.value)
    assert "timeout" in message
    assert "unknown" in message


def test_non_mapping_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(str(_write(tmp_path, "- a\n- b\n")))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path / "absent.yaml"))


def test_merged_overrides() -> None:
    base = RunSettings(cases=("A*",))
    merged = base.merged(timeout=1.0, report_format="json", report_path="r.json", color=False)
    assert merged.timeout == 1.0
    assert merged.cases == ("A*",)
    assert merged.report.format == "json"
    assert merged.report.path == "r.json"
    assert merged.report.color is False
    assert base.merged(cases=("B*",)).cases == ("B*",)


def test_find_default_settings(tmp_path: Path) -> None:
    assert find_default_settings(tmp_path) is None
    path = _write(tmp_path, "timeout: 1\n")
    assert find_default_settings(tmp_path) == path


def test_tags_loaded_and_overridden(tmp_path: Path) -> None:
    settings = load_settings(str(_write(tmp_path, "tags: [loader, async]\n")))
    assert settings.tags == ("loader", "async")
    assert settings.merged().tags == ("loader", "async")
    assert settings.merged(tags=("unit",)).tags == ("unit",)
