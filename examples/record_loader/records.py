"""Record source used by the example cases."""
from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import List, Optional

from tdkit import NotificationCenter

RECORDS_LOADED = "records.loaded"


class RecordLoader:
    def __init__(self, path: Path, notifications: Optional[NotificationCenter] = None) -> None:
        self.path = path
        self.notifications = notifications
        self.records: List[str] = []
        self.async_records: List[str] = []

    def load(self) -> None:
        if self.path.exists():
            self.records = list(json.loads(self.path.read_text(encoding="utf-8")))

    def load_async(self, delay: float = 0.1) -> threading.Thread:
        """Load on a background thread and post ``RECORDS_LOADED`` when done."""

        def _worker() -> None:
            threading.Event().wait(delay)
            if self.path.exists():
                self.async_records = list(json.loads(self.path.read_text(encoding="utf-8")))
            if self.notifications is not None:
                self.notifications.post(RECORDS_LOADED, len(self.async_records))

        thread = threading.Thread(target=_worker, daemon=True)
        thread.start()
        return thread
