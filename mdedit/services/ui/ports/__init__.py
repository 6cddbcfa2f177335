from __future__ import annotations

from .dialogs import IFileDialogService
from .notifications import INotificationService

__all__ = [
    "IFileDialogService",
    "INotificationService",
]
