"""Application configuration defaults."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

SETTINGS_FILENAME = "appsettings.json"


def _get_default_settings_path() -> Path:
    """Get the default settings path based on execution context."""
    user_settings = Path.home() / ".mdreader" / SETTINGS_FILENAME

    # When running as a frozen app (PyInstaller bundle)
    if getattr(sys, "frozen", False):
        return user_settings

    # When running from source, prefer a local settings file if it exists
    local_settings = Path(SETTINGS_FILENAME)
    if local_settings.exists():
        return local_settings

    return user_settings


@dataclass(slots=True)
class AppConfig:
    settings_path: Path | None = None
    max_recent_files: int = 10
    search_context: int = 40

    def __post_init__(self) -> None:
        if self.settings_path is None:
            self.settings_path = _get_default_settings_path()

    def resolve_settings_path(self, base_dir: Path | None = None) -> Path:
        if self.settings_path is None:
            self.settings_path = _get_default_settings_path()
        if Path(self.settings_path).is_absolute() or base_dir is None:
            return Path(self.settings_path)
        return base_dir / self.settings_path
