from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdedit.domain.interfaces import IFileService


class FileService(IFileService):
    """
    Writes downloads all-or-nothing via QSaveFile: a failed export never leaves
    a truncated file behind, and an existing file is only replaced on commit.
    """

    encoding = "utf-8"

    def write_bytes_atomic(self, path: Path, data: bytes) -> int:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path} ({sf.errorString()})")
        written = sf.write(data)
        if written != len(data):
            sf.cancelWriting()
            raise OSError(f"Short write for {path}: {written} of {len(data)} bytes")
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
        return written

    def write_text_atomic(self, path: Path, text: str) -> int:
        # No newline translation: the bytes on disk are exactly the document.
        return self.write_bytes_atomic(path, text.encode(self.encoding))
