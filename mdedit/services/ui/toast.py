from __future__ import annotations

from PyQt6.QtCore import QEvent, QObject, Qt, QTimer
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from mdedit.domain.models import Notification

_STYLE_DEFAULT = (
    "QFrame#toast { background:#1f2430; border:1px solid #2a2f3a; border-radius:8px; }"
    "QLabel { color:#e7e9ee; background:transparent; }"
)
_STYLE_ERROR = (
    "QFrame#toast { background:#b42318; border:1px solid #912018; border-radius:8px; }"
    "QLabel { color:#ffffff; background:transparent; }"
)


class ToastOverlay(QFrame):
    """
    Transient notification anchored to the bottom-right corner of its parent.

    Hides itself after a timeout; a click dismisses it early. A newer
    notification replaces the one currently showing.
    """

    MARGIN = 16

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setObjectName("toast")
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip("Click to dismiss")

        self.title_label = QLabel(self)
        font = self.title_label.font()
        font.setBold(True)
        self.title_label.setFont(font)
        self.description_label = QLabel(self)
        self.description_label.setWordWrap(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)
        layout.setSpacing(2)
        layout.addWidget(self.title_label)
        layout.addWidget(self.description_label)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.dismiss)

        self.current: Notification | None = None
        parent.installEventFilter(self)
        self.hide()

    def show_notification(self, notification: Notification, msec: int = 3000) -> None:
        self.current = notification
        self.title_label.setText(notification.title)
        self.description_label.setText(notification.description)
        self.description_label.setVisible(bool(notification.description))
        self.setStyleSheet(_STYLE_ERROR if notification.is_error else _STYLE_DEFAULT)

        self.setMaximumWidth(360)
        self.adjustSize()
        self._reposition()
        self.raise_()
        self.show()
        self._timer.start(max(0, msec))

    def dismiss(self) -> None:
        self._timer.stop()
        self.current = None
        self.hide()

    def mousePressEvent(self, event) -> None:
        self.dismiss()
        event.accept()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self.parent() and event.type() == QEvent.Type.Resize:
            self._reposition()
        return super().eventFilter(watched, event)

    def _reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        x = max(0, parent.width() - self.width() - self.MARGIN)
        y = max(0, parent.height() - self.height() - self.MARGIN)
        self.move(x, y)
