# mdedit/services/exporters/pdf_capability.py
from __future__ import annotations

import math
from pathlib import Path
from typing import Any

from mdedit.domain.errors import ExportFailure
from mdedit.domain.interfaces import IExportCapability
from mdedit.utils.constants import APP_NAME


def page_slices(image_height: int, slice_height: int) -> list[tuple[int, int]]:
    """Split an image of `image_height` rows into (top, height) bands of at most `slice_height`."""
    if slice_height <= 0:
        raise ValueError("slice_height must be positive")
    if image_height <= 0:
        return []
    return [
        (top, min(slice_height, image_height - top))
        for top in range(0, image_height, slice_height)
    ]


class QtPdfCapability(IExportCapability):
    """
    Raster snapshot of the preview, laid out on A4 portrait pages.

    The image is scaled to the page width; tall images continue on further
    pages. The result is a picture of the preview, so text is not selectable.
    """

    def __init__(self, *, resolution_dpi: int = 150) -> None:
        # Paint/print classes are only needed once an export actually runs.
        from PyQt6.QtGui import (
            QAbstractTextDocumentLayout,
            QImage,
            QPageLayout,
            QPageSize,
            QPainter,
            QPalette,
            QPdfWriter,
        )

        self._PaintContext = QAbstractTextDocumentLayout.PaintContext
        self._QImage = QImage
        self._QPageLayout = QPageLayout
        self._QPageSize = QPageSize
        self._QPainter = QPainter
        self._QPalette = QPalette
        self._QPdfWriter = QPdfWriter
        self._dpi = resolution_dpi

    # ----------------------------- capture -----------------------------

    def capture(self, widget: Any) -> Any:
        """
        Snapshot the preview. Text-document widgets (QTextBrowser) are rendered
        in full, not just the visible viewport; anything else is grabbed as shown.
        """
        document = getattr(widget, "document", None)
        if callable(document):
            return self._render_document(widget, document())
        return widget.grab().toImage()

    def _render_document(self, widget: Any, source: Any) -> Any:
        doc = source.clone()
        width = max(1, widget.viewport().width())
        doc.setTextWidth(width)
        height = max(1, math.ceil(doc.size().height()))

        image = self._QImage(width, height, self._QImage.Format.Format_ARGB32)
        palette = widget.palette()
        image.fill(palette.color(self._QPalette.ColorRole.Base))
        # Paint with the widget palette so themed text keeps its on-screen colour.
        ctx = self._PaintContext()
        ctx.palette = palette
        painter = self._QPainter(image)
        try:
            doc.documentLayout().draw(painter, ctx)
        finally:
            painter.end()
        return image

    # ----------------------------- pdf -----------------------------

    def write_pdf(self, image: Any, out_path: Path) -> None:
        if image is None or image.isNull() or image.width() <= 0 or image.height() <= 0:
            raise ExportFailure("pdf", "Preview snapshot is empty")

        from PyQt6.QtCore import QMarginsF, QRectF

        out_path.parent.mkdir(parents=True, exist_ok=True)
        writer = self._QPdfWriter(str(out_path))
        writer.setResolution(self._dpi)
        writer.setCreator(APP_NAME)
        writer.setTitle(out_path.stem)
        writer.setPageLayout(
            self._QPageLayout(
                self._QPageSize(self._QPageSize.PageSizeId.A4),
                self._QPageLayout.Orientation.Portrait,
                QMarginsF(0, 0, 0, 0),
                self._QPageLayout.Unit.Millimeter,
            )
        )

        page_w = writer.width()
        page_h = writer.height()
        scale = page_w / image.width()
        rows_per_page = max(1, int(page_h / scale))

        painter = self._QPainter()
        if not painter.begin(writer):
            raise ExportFailure("pdf", f"Cannot open for write: {out_path}")
        try:
            for index, (top, rows) in enumerate(page_slices(image.height(), rows_per_page)):
                if index and not writer.newPage():
                    raise ExportFailure("pdf", "Could not start a new PDF page")
                painter.drawImage(
                    QRectF(0, 0, page_w, rows * scale),
                    image,
                    QRectF(0, top, image.width(), rows),
                )
        finally:
            painter.end()

        if not out_path.exists() or out_path.stat().st_size == 0:
            raise ExportFailure("pdf", f"Nothing was written to {out_path}")


def load_pdf_capability() -> QtPdfCapability:
    """Late-load the PDF capability; a missing Qt module is reported as ExportFailure."""
    try:
        return QtPdfCapability()
    except ImportError as e:
        raise ExportFailure("pdf", f"PDF support is not available: {e}") from e
