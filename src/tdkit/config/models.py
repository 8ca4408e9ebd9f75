"""Settings controlling a command line run."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from tdkit.core.case import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ReportSettings:
    format: str = "terminal"
    path: Optional[str] = None
    color: bool = True


@dataclass(frozen=True)
class RunSettings:
    timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    cases: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    report: ReportSettings = field(default_factory=ReportSettings)

    def merged(
        self,
        *,
        timeout: Optional[float] = None,
        cases: Sequence[str] = (),
        tags: Sequence[str] = (),
        report_format: Optional[str] = None,
        report_path: Optional[str] = None,
        color: Optional[bool] = None,
    ) -> "RunSettings":
        """Return a copy with command line overrides applied."""

        report = replace(
            self.report,
            format=report_format or self.report.format,
            path=report_path or self.report.path,
            color=self.report.color if color is None else color,
        )
        return replace(
            self,
            timeout=self.timeout if timeout is None else timeout,
            cases=tuple(cases) or tuple(self.cases),
            tags=tuple(tags) or tuple(self.tags),
            report=report,
        )
