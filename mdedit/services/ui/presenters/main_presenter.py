from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable

from mdedit.domain.errors import ExportFailure
from mdedit.domain.interfaces import (
    IExporter,
    IExporterRegistry,
    IMarkdownRenderer,
    ISettingsService,
    ITaskRunner,
)
from mdedit.domain.models import ExportSnapshot, Notification, NotificationKind, Theme, ViewMode
from mdedit.services.config.app_config import EditorOptions
from mdedit.services.editor_controller import EditorController
from mdedit.services.exporters.destination import default_download_dir, resolve_destination
from mdedit.services.ui.ports.dialogs import IFileDialogService
from mdedit.services.ui.ports.notifications import INotificationService

log = logging.getLogger(__name__)

EXPORT_FAILED = Notification(
    title="Export failed",
    description="There was an error exporting your document",
    kind=NotificationKind.ERROR,
)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor/preview
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_preview_html(self, html: str) -> None: ...

    # layout + cosmetics
    def set_view_mode(self, mode: ViewMode) -> None: ...
    def set_theme(self, theme: Theme) -> None: ...

    # export source; None while the preview is not on screen
    def preview_widget(self) -> Any | None: ...


class MainPresenter:
    """
    Coordinates the editor: keystrokes flow into the controller, controller
    changes flow back out to the preview, and exports are sequenced around
    snapshots of the state taken at the moment the user asked for them.
    """

    def __init__(
        self,
        view: IMainView,
        controller: EditorController,
        renderer: IMarkdownRenderer,
        exporters: IExporterRegistry,
        notifier: INotificationService,
        dialogs: IFileDialogService,
        tasks: ITaskRunner,
        *,
        options: EditorOptions | None = None,
        settings: ISettingsService | None = None,
        system_theme: Callable[[], Theme] | None = None,
    ) -> None:
        self.view = view
        self.controller = controller
        self.renderer = renderer
        self.exporters = exporters
        self.notifier = notifier
        self.dialogs = dialogs
        self.tasks = tasks
        self.options = options or EditorOptions()
        self.settings = settings
        self.system_theme = system_theme
        self._started = False

    # ----------------------------- lifecycle -----------------------------

    def start(self) -> None:
        if self._started:
            return
        self._started = True

        theme = (self.settings.get_theme() if self.settings else None) or self.options.theme
        self.renderer.theme = theme
        self.view.set_theme(theme)

        self.controller.document_changed.connect(self._on_document_changed)
        self.controller.view_mode_changed.connect(self.view.set_view_mode)
        self.controller.load()
        self.view.set_view_mode(self.controller.view_mode)

    # ----------------------------- editing -----------------------------

    def on_text_edited(self, text: str) -> None:
        self.controller.set_document(text)

    def reset(self) -> None:
        self.controller.reset()

    def toggle_fullscreen_preview(self) -> ViewMode:
        return self.controller.toggle_fullscreen_preview()

    def toggle_theme(self) -> Theme:
        current = self.renderer.theme
        if current is Theme.SYSTEM:
            current = self.system_theme() if self.system_theme else Theme.LIGHT
        theme = current.toggled()
        self.renderer.theme = theme
        if self.settings is not None:
            self.settings.set_theme(theme)
        self.view.set_theme(theme)
        self.render_preview()
        return theme

    def render_preview(self) -> None:
        self.view.set_preview_html(self.renderer.to_html(self.controller.document))

    def _on_document_changed(self, text: str) -> None:
        # Programmatic changes (load, reset) must reach the editor pane too.
        if self.view.get_editor_text() != text:
            self.view.set_editor_text(text)
        self.view.set_preview_html(self.renderer.to_html(text))

    # ----------------------------- exports -----------------------------

    def export_markdown(self) -> Path | None:
        exporter = self.exporters.find("md")
        if exporter is None:
            return None

        snapshot = ExportSnapshot(markdown=self.controller.document)
        try:
            out = self._destination_for(exporter)
            if out is None:
                return None
            exporter.export(snapshot, out)
        except ExportFailure as e:
            self._export_failed(e)
            return None

        log.info("Markdown exported to %s", out)
        self.notifier.notify(
            Notification(
                title="Markdown exported successfully",
                description=f"Your document has been downloaded as a markdown file ({out.name})",
            )
        )
        return out

    def export_pdf(self) -> None:
        exporter = self.exporters.find("pdf")
        if exporter is None:
            return

        widget = self.view.preview_widget()
        if widget is None:
            # Preview not mounted yet: nothing to snapshot.
            log.debug("PDF export requested before the preview is shown; ignoring")
            return

        try:
            image = exporter.capture(widget)  # type: ignore[attr-defined]
            snapshot = ExportSnapshot(markdown=self.controller.document, preview=image)
            out = self._destination_for(exporter)
        except ExportFailure as e:
            self._export_failed(e)
            return
        if out is None:
            return

        def work() -> Path:
            exporter.export(snapshot, out)
            return out

        self.tasks.submit(work, self._pdf_exported, self._pdf_failed)

    def _pdf_exported(self, out: object) -> None:
        log.info("PDF exported to %s", out)
        name = out.name if isinstance(out, Path) else str(out)
        self.notifier.notify(
            Notification(
                title="PDF exported successfully",
                description=f"Your document has been downloaded as a PDF ({name})",
            )
        )

    def _pdf_failed(self, error: Exception) -> None:
        if not isinstance(error, ExportFailure):
            error = ExportFailure("pdf", str(error))
        self._export_failed(error)

    # ----------------------------- helpers -----------------------------

    def _destination_for(self, exporter: IExporter) -> Path | None:
        directory = self.options.export_directory or default_download_dir()
        if self.options.ask_export_location:
            return self.dialogs.ask_export_path(
                self.view, exporter.label, directory / exporter.default_filename, exporter.file_ext
            )
        try:
            return resolve_destination(directory, exporter.default_filename)
        except OSError as e:
            raise ExportFailure(exporter.name, f"Cannot use {directory}: {e}") from e

    def _export_failed(self, error: ExportFailure) -> None:
        log.error("Export failed: %s", error, exc_info=error)
        self.notifier.notify(EXPORT_FAILED)
