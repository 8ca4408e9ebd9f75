"""Example cases: run with ``tdkit run cases:RecordLoaderCase`` from this folder."""
from __future__ import annotations

import json
import tempfile
from pathlib import Path

from tdkit.core import Case, assert_equal, assert_greater

from records import RECORDS_LOADED, RecordLoader

POKEMON = [f"pokemon-{index:02d}" for index in range(24)]


class RecordLoaderCase(Case):
    def set_up(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        path = Path(self._tmp.name) / "records.json"
        path.write_text(json.dumps(POKEMON), encoding="utf-8")
        self.loader = RecordLoader(path, self.notifications)

    def tear_down(self) -> None:
        self._tmp.cleanup()
        self.loader = None

    def test_loads_24_records(self) -> None:
        self.loader.load()
        assert_equal(len(self.loader.records), 24)

    def test_async_load_posts_notification(self) -> None:
        self.expectation(RECORDS_LOADED)
        self.loader.load_async(delay=0.05)
        self.wait_for_expectations(timeout=2.0)
        assert_greater(len(self.loader.async_records), 0)
