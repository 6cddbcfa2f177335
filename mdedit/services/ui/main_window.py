from __future__ import annotations

import logging

from PyQt6.QtCore import QByteArray, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
    QToolBar,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from mdedit.domain.interfaces import ISettingsService
from mdedit.domain.models import Theme, ViewMode
from mdedit.services.ui.toast import ToastOverlay

log = logging.getLogger(__name__)

_EDITOR_STYLES = {
    Theme.SYSTEM: "",
    Theme.LIGHT: "QTextEdit, QTextBrowser { background:#ffffff; color:#111111; }",
    Theme.DARK: "QTextEdit, QTextBrowser { background:#0f1115; color:#e7e9ee; }",
}


class MainWindow(QMainWindow):
    """Thin PyQt window; all behaviour goes through the attached presenter."""

    def __init__(
        self,
        settings: ISettingsService,
        *,
        pdf_export_enabled: bool = False,
        preview_engine: str = "auto",
        app_title: str = "Markdown Editor",
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.settings = settings
        self.presenter = None
        self._pdf_export_enabled = pdf_export_enabled

        # Editor pane
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setPlaceholderText("Type your markdown here...")
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        # Preview pane: caption + fullscreen toggle above the rendered document
        self.preview_panel = QWidget(self)
        self.preview = self._create_preview_widget(preview_engine)
        self.preview_caption = QLabel("Preview", self.preview_panel)
        self.fullscreen_button = QToolButton(self.preview_panel)
        self.fullscreen_button.setAutoRaise(True)

        header = QHBoxLayout()
        header.setContentsMargins(8, 4, 8, 0)
        header.addWidget(self.preview_caption)
        header.addStretch(1)
        header.addWidget(self.fullscreen_button)

        panel_layout = QVBoxLayout(self.preview_panel)
        panel_layout.setContentsMargins(0, 0, 0, 0)
        panel_layout.addLayout(header)
        panel_layout.addWidget(self.preview, 1)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview_panel)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        self.toast = ToastOverlay(self)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))
        self.fullscreen_button.setDefaultAction(self.act_fullscreen_preview)

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, (bytes, bytearray)):
            self.splitter.restoreState(QByteArray(split))

    def attach_presenter(self, presenter) -> None:
        self.presenter = presenter

    # ---------- UI creation ----------
    def _build_actions(self):
        self.exit_action = QAction("&Exit", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.setStatusTip("Exit application")
        self.exit_action.triggered.connect(self.close)

        self.act_theme = QAction(
            "Toggle Theme", self, statusTip="Switch between light and dark", triggered=self._toggle_theme
        )
        self.act_reset = QAction(
            "Reset Editor", self, statusTip="Clear the editor", triggered=self._reset
        )
        self.act_export_md = QAction(
            "Export MD",
            self,
            shortcut=QKeySequence.StandardKey.Save,
            statusTip="Save the raw markdown as document.md",
            triggered=self._export_markdown,
        )
        self.act_export_pdf = QAction(
            "Export PDF",
            self,
            shortcut="Ctrl+Shift+E",
            statusTip="Save a snapshot of the preview as markdown-document.pdf",
            triggered=self._export_pdf,
        )
        self.act_export_pdf.setVisible(self._pdf_export_enabled)
        self.act_export_pdf.setEnabled(self._pdf_export_enabled)

        self.act_fullscreen_preview = QAction(
            "Enter fullscreen preview",
            self,
            checkable=True,
            checked=False,
            shortcut="F11",
            triggered=self._toggle_fullscreen_preview,
        )

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.act_theme)
        tb.addSeparator()
        tb.addAction(self.act_reset)
        tb.addAction(self.act_export_md)
        if self._pdf_export_enabled:
            tb.addAction(self.act_export_pdf)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_export_md)
        if self._pdf_export_enabled:
            filem.addAction(self.act_export_pdf)
        filem.addSeparator()
        filem.addAction(self.exit_action)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_reset)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_fullscreen_preview)
        viewm.addAction(self.act_theme)

    # ---------- Actions ----------
    def _toggle_theme(self):
        if self.presenter is not None:
            self.presenter.toggle_theme()

    def _reset(self):
        if self.presenter is not None:
            self.presenter.reset()

    def _export_markdown(self):
        if self.presenter is not None:
            self.presenter.export_markdown()

    def _export_pdf(self):
        if self.presenter is not None:
            self.presenter.export_pdf()

    def _toggle_fullscreen_preview(self, _checked: bool = False):
        if self.presenter is not None:
            self.presenter.toggle_fullscreen_preview()

    def _on_text_changed(self):
        if self.presenter is not None:
            self.presenter.on_text_edited(self.editor.toPlainText())

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        # Programmatic update: do not echo back into the presenter.
        self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(False)

    def set_preview_html(self, html: str) -> None:
        # Both QWebEngineView and QTextBrowser implement setHtml(html).
        self.preview.setHtml(html)

    def set_view_mode(self, mode: ViewMode) -> None:
        fullscreen = mode is ViewMode.PREVIEW_FULLSCREEN
        self.editor.setVisible(not fullscreen)
        self.act_fullscreen_preview.setChecked(fullscreen)
        label = "Exit fullscreen preview" if fullscreen else "Enter fullscreen preview"
        self.act_fullscreen_preview.setText(label)
        self.fullscreen_button.setToolTip(label)

    def set_theme(self, theme: Theme) -> None:
        self.editor.setStyleSheet(_EDITOR_STYLES[theme])
        self.preview.setStyleSheet(_EDITOR_STYLES[theme])

    def preview_widget(self):
        return self.preview if self.preview.isVisible() else None

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        super().closeEvent(event)

    # ---------- Internal: preview creation ----------
    def _create_preview_widget(self, engine: str):
        """
        Prefer QWebEngineView (better CSS) when allowed, fall back to QTextBrowser.
        We guard the import so the app runs even if Qt WebEngine isn't installed.
        """
        if engine in ("auto", "webengine"):
            try:
                from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore

                view = QWebEngineView(self)
                log.info("Preview uses QWebEngineView")
                return view
            except Exception as e:
                log.info("QWebEngineView unavailable (%s); using QTextBrowser", e)
        w = QTextBrowser(self)
        w.setOpenExternalLinks(True)
        return w
