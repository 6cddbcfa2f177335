"""Concrete service implementations and export strategies."""

from .document_store import DocumentStore
from .editor_controller import EditorController
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .settings_service import SettingsService

__all__ = [
    "DocumentStore",
    "EditorController",
    "FileService",
    "MarkdownRenderer",
    "SettingsService",
]
