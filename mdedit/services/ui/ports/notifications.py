from __future__ import annotations

from typing import Protocol, runtime_checkable

from mdedit.domain.models import Notification


@runtime_checkable
class INotificationService(Protocol):
    """
    Abstract UI port for transient, non-blocking notifications (toasts).
    Never modal: the editing session carries on while one is showing.
    """

    def notify(self, notification: Notification) -> None: ...
