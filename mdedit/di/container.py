from __future__ import annotations

import logging

from PyQt6.QtCore import QSettings

from mdedit.domain.interfaces import (
    IDocumentStore,
    IExporterRegistry,
    IFileService,
    IMarkdownRenderer,
    ISettingsService,
    ITaskRunner,
)
from mdedit.services.config.app_config import AppConfig, build_app_config
from mdedit.services.document_store import DocumentStore
from mdedit.services.editor_controller import EditorController
from mdedit.services.exporters.base import ExporterRegistryInst
from mdedit.services.exporters.markdown_exporter import MarkdownExporter
from mdedit.services.exporters.pdf_exporter import PdfExporter
from mdedit.services.file_service import FileService
from mdedit.services.markdown_renderer import MarkdownRenderer
from mdedit.services.settings_service import SettingsService
from mdedit.services.tasks import QtTaskRunner
from mdedit.services.ui.adapters import QtFileDialogService, QtToastNotifier, qt_system_theme
from mdedit.services.ui.main_window import MainWindow
from mdedit.services.ui.ports.dialogs import IFileDialogService
from mdedit.services.ui.presenters.main_presenter import MainPresenter
from mdedit.utils.constants import APP_NAME, APP_ORG

log = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Registers built-in exporters (md always, pdf behind the feature flag)
      - Builds the window with its presenter attached and started
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        store: IDocumentStore | None = None,
        qsettings: QSettings | None = None,
        config: AppConfig | None = None,
        dialogs: IFileDialogService | None = None,
        tasks: ITaskRunner | None = None,
        exporters: IExporterRegistry | None = None,
    ) -> None:
        self.config = config or build_app_config()
        self.options = self.config.editor_options()

        qs = qsettings or QSettings()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(theme=self.options.theme)
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(qs)
        self.document_store: IDocumentStore = store or DocumentStore(qs)

        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.tasks: ITaskRunner = tasks or QtTaskRunner()
        self.exporters: IExporterRegistry = exporters or ExporterRegistryInst()

        self._ensure_builtin_exporters()

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
        config: AppConfig | None = None,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- Internals ----------

    def _ensure_builtin_exporters(self) -> None:
        if self.exporters.find("md") is None:
            self.exporters.register(MarkdownExporter(self.file_service))
        if self.options.pdf_export and self.exporters.find("pdf") is None:
            self.exporters.register(PdfExporter())

    @property
    def pdf_export_enabled(self) -> bool:
        return self.exporters.find("pdf") is not None

    # ---------- UI factories ----------

    def build_controller(self) -> EditorController:
        return EditorController(self.document_store)

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        """
        Create the Qt MainWindow, attach a presenter bound to a fresh controller,
        and start it (loads the stored document into the editor).
        """
        window = MainWindow(
            settings=self.settings_service,
            pdf_export_enabled=self.pdf_export_enabled,
            preview_engine=self.options.preview_engine,
            app_title=app_title,
        )
        notifier = QtToastNotifier(
            window.toast, window.statusBar(), duration_ms=self.options.toast_ms
        )
        presenter = MainPresenter(
            view=window,
            controller=self.build_controller(),
            renderer=self.renderer,
            exporters=self.exporters,
            notifier=notifier,
            dialogs=self.dialogs,
            tasks=self.tasks,
            options=self.options,
            settings=self.settings_service,
            system_theme=qt_system_theme,
        )
        window.attach_presenter(presenter)
        presenter.start()
        return window
