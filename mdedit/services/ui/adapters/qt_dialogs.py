from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from mdedit.services.ui.ports.dialogs import IFileDialogService


class QtFileDialogService(IFileDialogService):
    """QFileDialog-backed destination picker."""

    def ask_export_path(
        self,
        parent: Any | None,
        caption: str,
        suggested: Path,
        file_ext: str,
    ) -> Path | None:
        filter_str = f"{file_ext.upper()} files (*.{file_ext});;All files (*)"
        path_str, _ = QFileDialog.getSaveFileName(parent, caption, str(suggested), filter_str)
        if not path_str:
            return None
        path = Path(path_str)
        # Typing "notes" in the dialog should still produce notes.md
        if not path.suffix:
            path = path.with_suffix(f".{file_ext}")
        return path
