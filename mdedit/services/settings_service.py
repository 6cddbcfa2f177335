from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from mdedit.domain.interfaces import ISettingsService
from mdedit.domain.models import Theme
from mdedit.utils.constants import SETTINGS_GEOMETRY, SETTINGS_SPLITTER, SETTINGS_THEME


class SettingsService(ISettingsService):
    """Window layout and the chosen theme; the document lives in DocumentStore."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def _blob(self, key: str) -> bytes | None:
        v = self._s.value(key)
        return bytes(v) if isinstance(v, QByteArray) and not v.isEmpty() else None

    def get_geometry(self) -> bytes | None:
        return self._blob(SETTINGS_GEOMETRY)

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_splitter(self) -> bytes | None:
        return self._blob(SETTINGS_SPLITTER)

    def set_splitter(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_SPLITTER, QByteArray(blob))

    def get_theme(self) -> Theme | None:
        """None until the user has toggled the theme at least once."""
        v = self._s.value(SETTINGS_THEME)
        if not isinstance(v, str) or not v:
            return None
        return Theme.parse(v)

    def set_theme(self, theme: Theme) -> None:
        self._s.setValue(SETTINGS_THEME, theme.value)
