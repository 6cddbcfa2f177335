from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """
    UI port for choosing where an export lands. Only consulted when the user
    opted into being asked; otherwise downloads go straight to disk.
    """

    def ask_export_path(
            self,
            parent: Any | None,
            caption: str,
            suggested: Path,
            file_ext: str,
    ) -> Path | None:
        """Return the chosen destination, or None if the user cancelled."""
        ...
