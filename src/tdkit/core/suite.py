"""Ordered collections of test cases."""
from __future__ import annotations

import fnmatch
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import DuplicateNameError
from .models import Hook, TestCase


class TestSuite:
    """Ordered collection of uniquely named cases."""

    __test__ = False

    def __init__(self, name: str, cases: Sequence[TestCase] = ()) -> None:
        self.name = name
        self._cases: List[TestCase] = []
        self._names: set[str] = set()
        for case in cases:
            self.add(case)

    def register_case(
        self,
        name: str,
        body: Hook,
        setup: Optional[Hook] = None,
        teardown: Optional[Hook] = None,
        tags: Sequence[str] = (),
    ) -> TestCase:
        case = TestCase(name=name, body=body, setup=setup, teardown=teardown, tags=tuple(tags))
        self.add(case)
        return case

    def add(self, case: TestCase) -> None:
        if case.name in self._names:
            raise DuplicateNameError(self.name, case.name)
        self._cases.append(case)
        self._names.add(case.name)

    def extend(self, other: "TestSuite") -> None:
        for case in other:
            self.add(case)

    def select(self, patterns: Sequence[str], tags: Sequence[str] = ()) -> "TestSuite":
        """Return a suite with the cases matching the name globs and tags.

        A case is kept when its name matches any of ``patterns`` and it carries
        any of ``tags``; an empty filter matches every case.
        """

        matched = [
            case
            for case in self._cases
            if (not patterns or any(fnmatch.fnmatchcase(case.name, pattern) for pattern in patterns))
            and (not tags or set(tags) & set(case.tags))
        ]
        return TestSuite(self.name, matched)

    @property
    def cases(self) -> Tuple[TestCase, ...]:
        return tuple(self._cases)

    def names(self) -> List[str]:
        return [case.name for case in self._cases]

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[TestCase]:
        return iter(tuple(self._cases))

    def __len__(self) -> int:
        return len(self._cases)

    def __repr__(self) -> str:
        return f"TestSuite({self.name!r}, cases={len(self._cases)})"
