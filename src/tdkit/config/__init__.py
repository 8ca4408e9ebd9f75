"""Run settings loaded from YAML files."""

from .loader import find_default_settings, load_settings
from .models import ReportSettings, RunSettings

__all__ = [
    "ReportSettings",
    "RunSettings",
    "find_default_settings",
    "load_settings",
]
