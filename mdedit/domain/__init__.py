"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import ExportFailure
from .interfaces import (
    IAppConfig,
    IConfigService,
    IDocumentStore,
    IExportCapability,
    IExporter,
    IExporterRegistry,
    IFileService,
    IMarkdownRenderer,
    ISettingsService,
    ITaskRunner,
)
from .models import (
    EditorState,
    ExportSnapshot,
    Notification,
    NotificationKind,
    Theme,
    ViewMode,
)

__all__ = [
    "IMarkdownRenderer",
    "IAppConfig",
    "IConfigService",
    "IDocumentStore",
    "IFileService",
    "ISettingsService",
    "IExporter",
    "IExporterRegistry",
    "IExportCapability",
    "ITaskRunner",
    "ExportFailure",
    "EditorState",
    "ExportSnapshot",
    "Notification",
    "NotificationKind",
    "Theme",
    "ViewMode",
]
