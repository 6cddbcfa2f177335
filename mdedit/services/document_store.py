from __future__ import annotations

from PyQt6.QtCore import QSettings

from mdedit.domain.interfaces import IDocumentStore
from mdedit.utils.constants import SETTINGS_DOCUMENT


class DocumentStore(IDocumentStore):
    """
    The editor's persisted document: one string entry in QSettings.

    Last write wins. QSettings defers the physical flush, so frequent saves
    while typing stay cheap.
    """

    def __init__(self, qsettings: QSettings, key: str = SETTINGS_DOCUMENT) -> None:
        self._s = qsettings
        self._key = key

    def load(self) -> str | None:
        v = self._s.value(self._key)
        return v if isinstance(v, str) else None

    def save(self, text: str) -> None:
        self._s.setValue(self._key, text)

    def flush(self) -> None:
        self._s.sync()
