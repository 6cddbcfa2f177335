from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ViewMode(Enum):
    SPLIT = "split"
    PREVIEW_FULLSCREEN = "preview-fullscreen"

    def toggled(self) -> ViewMode:
        if self is ViewMode.SPLIT:
            return ViewMode.PREVIEW_FULLSCREEN
        return ViewMode.SPLIT


class Theme(Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        # callers resolve SYSTEM to a concrete theme before flipping
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @classmethod
    def parse(cls, value: str | None, default: Theme | None = None) -> Theme:
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return default or cls.SYSTEM


@dataclass
class EditorState:
    """The single piece of mutable editor state, owned by EditorController."""

    document: str = ""
    view_mode: ViewMode = ViewMode.SPLIT
    loaded: bool = False


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    kind: NotificationKind = NotificationKind.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.kind is NotificationKind.ERROR


@dataclass(frozen=True)
class ExportSnapshot:
    """What an export sees: values captured when the user triggered it."""

    markdown: str
    preview: Any | None = None  # QImage; kept untyped so the domain stays Qt-free
