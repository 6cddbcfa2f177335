from __future__ import annotations

from pathlib import Path

from mdedit.domain.errors import ExportFailure
from mdedit.domain.interfaces import IExporter, IFileService
from mdedit.domain.models import ExportSnapshot


class MarkdownExporter(IExporter):
    """Writes the raw document verbatim (UTF-8, no newline translation)."""

    name = "md"
    label = "Export MD"
    file_ext = "md"
    mime_type = "text/markdown"
    default_filename = "document.md"

    def __init__(self, files: IFileService) -> None:
        self._files = files

    def export(self, snapshot: ExportSnapshot, out_path: Path) -> None:
        try:
            self._files.write_text_atomic(out_path, snapshot.markdown)
        except (OSError, UnicodeError) as e:
            raise ExportFailure(self.name, f"Failed to write {out_path}: {e}") from e
