from __future__ import annotations

from .qt_dialogs import QtFileDialogService
from .qt_notifications import QtToastNotifier
from .qt_theme import qt_system_theme

__all__ = [
    "QtFileDialogService",
    "QtToastNotifier",
    "qt_system_theme",
]
