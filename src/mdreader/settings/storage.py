"""JSON persistence for the shared settings document."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from mdreader.models import AppSettings

LOGGER = logging.getLogger(__name__)


class SettingsStore:
    """Reads and rewrites the settings document as a whole.

    Every mutation goes through :meth:`update`, which re-reads the file so that
    changes made by another component are kept.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Optional[AppSettings]:
        """Parse the document, or return ``None`` when it is missing or malformed."""
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = handle.read()
            return AppSettings.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            LOGGER.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return None

    def read(self) -> AppSettings:
        """Load the document; missing or malformed files yield defaults."""
        settings = self.load()
        return settings if settings is not None else AppSettings()

    def write(self, settings: AppSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = settings.model_dump_json(by_alias=True, indent=2)
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(payload)

    @contextmanager
    def update(self) -> Iterator[AppSettings]:
        """Yield a freshly read document and write it back on success."""
        settings = self.read()
        yield settings
        self.write(settings)
