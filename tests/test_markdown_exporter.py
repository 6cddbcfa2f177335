import pytest

from mdedit.domain.errors import ExportFailure
from mdedit.domain.models import ExportSnapshot
from mdedit.services.exporters.markdown_exporter import MarkdownExporter
from mdedit.services.file_service import FileService


def test_markdown_exporter_metadata():
    exp = MarkdownExporter(FileService())
    assert exp.default_filename == "document.md"
    assert exp.mime_type == "text/markdown"
    assert exp.file_ext == "md"


def test_export_title_writes_exact_content(tmp_path):
    out = tmp_path / "document.md"
    MarkdownExporter(FileService()).export(ExportSnapshot(markdown="# Title"), out)
    assert out.read_bytes() == b"# Title"
    assert out.read_text(encoding="utf-8") == "# Title"


def test_export_is_verbatim_utf8(tmp_path):
    text = "line\r\nnext\n  trailing  \néè \U0001f680"
    out = tmp_path / "document.md"
    MarkdownExporter(FileService()).export(ExportSnapshot(markdown=text), out)
    assert out.read_bytes() == text.encode("utf-8")


def test_export_empty_document(tmp_path):
    out = tmp_path / "document.md"
    MarkdownExporter(FileService()).export(ExportSnapshot(markdown=""), out)
    assert out.exists() and out.read_bytes() == b""


def test_io_error_becomes_export_failure(tmp_path):
    class BrokenFiles:
        def write_text_atomic(self, path, text):
            raise OSError("disk full")

    with pytest.raises(ExportFailure) as ei:
        MarkdownExporter(BrokenFiles()).export(ExportSnapshot(markdown="x"), tmp_path / "a.md")
    assert ei.value.exporter == "md"
    assert "disk full" in str(ei.value)


def test_unencodable_text_becomes_export_failure(tmp_path):
    with pytest.raises(ExportFailure):
        MarkdownExporter(FileService()).export(
            ExportSnapshot(markdown="bad \ud800 surrogate"), tmp_path / "a.md"
        )
