"""Core dataclasses shared across tdkit subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

Hook = Callable[[], object]


@dataclass(frozen=True)
class TestCase:
    """A named unit of verification with optional lifecycle hooks."""

    __test__ = False  # keep pytest from collecting this class

    name: str
    body: Hook
    setup: Optional[Hook] = None
    teardown: Optional[Hook] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
