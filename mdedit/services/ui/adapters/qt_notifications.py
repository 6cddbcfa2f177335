from __future__ import annotations

from PyQt6.QtWidgets import QStatusBar

from mdedit.domain.models import Notification
from mdedit.services.ui.ports.notifications import INotificationService
from mdedit.services.ui.toast import ToastOverlay


class QtToastNotifier(INotificationService):
    """Shows notifications as a toast and mirrors them to the status bar."""

    def __init__(
        self,
        toast: ToastOverlay,
        status_bar: QStatusBar | None = None,
        *,
        duration_ms: int = 3000,
    ) -> None:
        self._toast = toast
        self._status = status_bar
        self._duration_ms = duration_ms

    def notify(self, notification: Notification) -> None:
        self._toast.show_notification(notification, self._duration_ms)
        if self._status is not None:
            text = notification.title
            if notification.description:
                text = f"{text}: {notification.description}"
            self._status.showMessage(text, self._duration_ms)
