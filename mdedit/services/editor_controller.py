from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from mdedit.domain.interfaces import IDocumentStore
from mdedit.domain.models import EditorState, ViewMode
from mdedit.utils.constants import SAMPLE_DOCUMENT

log = logging.getLogger(__name__)


class EditorController(QObject):
    """
    Owns the editor state (document text + view mode).

    Every document change after the startup load is written through to the
    document store. View mode is UI-only and never persisted.
    """

    document_changed = pyqtSignal(str)
    view_mode_changed = pyqtSignal(object)  # ViewMode

    def __init__(
        self,
        store: IDocumentStore,
        *,
        state: EditorState | None = None,
        sample: str = SAMPLE_DOCUMENT,
    ) -> None:
        super().__init__()
        self._store = store
        self._state = state or EditorState()
        self._sample = sample

    # ----------------------------- accessors -----------------------------

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def document(self) -> str:
        return self._state.document

    @property
    def view_mode(self) -> ViewMode:
        return self._state.view_mode

    @property
    def loaded(self) -> bool:
        return self._state.loaded

    # ----------------------------- operations -----------------------------

    def load(self) -> str:
        """One-time startup read; falls back to the sample when nothing useful is stored."""
        if self._state.loaded:
            return self._state.document

        saved = self._store.load()
        if saved:
            self._state.document = saved
            log.info("Restored document from storage (%d chars)", len(saved))
        else:
            self._state.document = self._sample
            log.info("No stored document; using the sample")

        # Flag only after the document is in place, so the load itself never writes.
        self._state.loaded = True
        self.document_changed.emit(self._state.document)
        return self._state.document

    def set_document(self, text: str) -> None:
        self._state.document = text
        if self._state.loaded:
            self._store.save(text)
        self.document_changed.emit(text)

    def reset(self) -> None:
        self.set_document("")

    def toggle_fullscreen_preview(self) -> ViewMode:
        self._state.view_mode = self._state.view_mode.toggled()
        self.view_mode_changed.emit(self._state.view_mode)
        return self._state.view_mode
