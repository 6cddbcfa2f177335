from __future__ import annotations

import logging
from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from mdedit.di.container import Container
from mdedit.logger import configure_logging
from mdedit.services.config.app_config import build_app_config
from mdedit.utils.constants import APP_NAME, APP_ORG

log = logging.getLogger(__name__)


def _preload_webengine(engine: str) -> None:
    """QtWebEngineWidgets has to be imported before the QApplication exists."""
    if engine not in ("auto", "webengine"):
        return
    try:
        import PyQt6.QtWebEngineWidgets  # type: ignore  # noqa: F401
    except ImportError:
        log.info("PyQt6-WebEngine not installed; preview falls back to QTextBrowser")


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    configure_logging()
    config = build_app_config()
    log.info("Starting %s %s", APP_NAME, config.get_version())
    log.info("Configuration: %s", config.loaded_from or "built-in defaults")
    _preload_webengine(config.editor_options().preview_engine)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)
    app.aboutToQuit.connect(container.document_store.flush)

    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
