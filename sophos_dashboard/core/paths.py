"""Resolution of the per-user files the dashboard reads and writes."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from sophos_dashboard.core.config import AppSettings

APP_DIR_NAME = "sophos-dashboard"
SECRETS_FILE_NAME = "sophos_secrets.json"
CACHE_FILE_NAME = "sophos_cache.json"


def default_data_dir() -> Path:
    """Return the platform's per-user application data directory for the app."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME


@dataclass(frozen=True)
class AppPaths:
    """Locations of the credentials and cache files.

    Both stores take an ``AppPaths`` instance instead of computing paths
    themselves, so tests can point them at a temporary directory.
    """

    data_dir: Path

    @property
    def secrets_file(self) -> Path:
        return self.data_dir / SECRETS_FILE_NAME

    @property
    def cache_file(self) -> Path:
        return self.data_dir / CACHE_FILE_NAME

    def ensure_data_dir(self) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "AppPaths":
        data_dir = settings.data_dir or default_data_dir()
        return cls(data_dir=Path(data_dir).expanduser())


__all__ = [
    "APP_DIR_NAME",
    "AppPaths",
    "CACHE_FILE_NAME",
    "SECRETS_FILE_NAME",
    "default_data_dir",
]
