"""Persisted light/dark theme preference."""

from __future__ import annotations

import logging
from typing import Callable, List

from mdreader.models import Theme
from mdreader.settings.storage import SettingsStore

LOGGER = logging.getLogger(__name__)

ThemeListener = Callable[[Theme], None]


class ThemeService:
    """Holds the current theme and broadcasts changes to listeners.

    The saved theme is not read at construction; call :meth:`load_saved`.
    """

    def __init__(self, store: SettingsStore) -> None:
        self.store = store
        self._current = Theme.LIGHT
        self._listeners: List[ThemeListener] = []

    @property
    def current(self) -> Theme:
        return self._current

    def subscribe(self, listener: ThemeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ThemeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def load_saved(self) -> Theme:
        """Adopt the persisted theme, if there is one."""
        settings = self.store.load()
        if settings is None:
            return self._current
        self._current = settings.theme
        self._notify()
        return self._current

    def toggle(self) -> Theme:
        """Switch between light and dark, notify, then persist."""
        self._current = self._current.toggled()
        self._notify()
        self._save()
        return self._current

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._current)
            except Exception:
                LOGGER.exception("Theme listener %r failed", listener)

    def _save(self) -> None:
        try:
            with self.store.update() as settings:
                settings.theme = self._current
        except OSError as exc:
            LOGGER.warning("Unable to save theme to %s: %s", self.store.path, exc)
