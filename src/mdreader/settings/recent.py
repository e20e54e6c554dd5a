"""Recently opened files."""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from mdreader.settings.storage import SettingsStore

LOGGER = logging.getLogger(__name__)

MAX_RECENT_FILES = 10


class RecentFiles:
    """Most-recent-first list of opened paths, persisted after every change.

    Paths compare case-insensitively, so reopening ``README.md`` as
    ``readme.md`` moves the entry to the front instead of adding a second one.
    """

    def __init__(self, store: SettingsStore, *, max_items: int = MAX_RECENT_FILES) -> None:
        self.store = store
        self.max_items = max_items
        self._items: List[str] = []
        self.load()

    def load(self) -> None:
        """Replace the in-memory list with the persisted one."""
        settings = self.store.read()
        self._items = [item for item in settings.recent_files if item][: self.max_items]

    def add(self, path: str | None) -> None:
        if path is None or not str(path).strip():
            return
        path = str(path)

        folded = path.casefold()
        self._items = [item for item in self._items if item.casefold() != folded]
        self._items.insert(0, path)
        del self._items[self.max_items :]
        self._save()

    def entries(self) -> Tuple[str, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def _save(self) -> None:
        try:
            with self.store.update() as settings:
                settings.recent_files = list(self._items)
        except OSError as exc:
            LOGGER.warning("Unable to save recent files to %s: %s", self.store.path, exc)
