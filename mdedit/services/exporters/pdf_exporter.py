from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from mdedit.domain.errors import ExportFailure
from mdedit.domain.interfaces import IExportCapability, IExporter
from mdedit.domain.models import ExportSnapshot
from mdedit.services.exporters.pdf_capability import load_pdf_capability

log = logging.getLogger(__name__)


class PdfExporter(IExporter):
    """
    Exports the rendered preview as a raster PDF.

    The capability is created on first use, so the print/paint machinery is
    only loaded when someone actually exports a PDF.
    """

    name = "pdf"
    label = "Export PDF"
    file_ext = "pdf"
    mime_type = "application/pdf"
    default_filename = "markdown-document.pdf"

    def __init__(
        self,
        capability_factory: Callable[[], IExportCapability] = load_pdf_capability,
    ) -> None:
        self._factory = capability_factory
        self._capability: IExportCapability | None = None

    def _cap(self) -> IExportCapability:
        if self._capability is None:
            self._capability = self._factory()
        return self._capability

    def capture(self, widget: Any) -> Any:
        """Snapshot the preview widget. Must run on the UI thread."""
        try:
            return self._cap().capture(widget)
        except ExportFailure:
            raise
        except Exception as e:
            raise ExportFailure(self.name, f"Could not capture the preview: {e}") from e

    def export(self, snapshot: ExportSnapshot, out_path: Path) -> None:
        if snapshot.preview is None:
            raise ExportFailure(self.name, "No preview snapshot to export")
        try:
            self._cap().write_pdf(snapshot.preview, out_path)
        except ExportFailure:
            raise
        except Exception as e:
            raise ExportFailure(self.name, f"Failed to write {out_path}: {e}") from e
        log.debug("PDF written to %s", out_path)
