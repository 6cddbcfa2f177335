from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from .models import ExportSnapshot, Theme


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to full HTML string (including CSS). Must never raise."""

    theme: Theme

    def to_html(self, markdown_text: str) -> str: ...


class IDocumentStore(Protocol):
    """Persisted storage for the single document (survives restarts)."""

    def load(self) -> str | None: ...
    def save(self, text: str) -> None: ...
    def flush(self) -> None: ...


class IFileService(Protocol):
    """Atomic file writes for downloads; returns the number of bytes written."""

    def write_bytes_atomic(self, path: Path, data: bytes) -> int: ...
    def write_text_atomic(self, path: Path, text: str) -> int: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...
    def get_theme(self) -> Theme | None: ...
    def set_theme(self, theme: Theme) -> None: ...


class IExporter(ABC):
    """Export strategy interface. Implementations write a snapshot to a given path."""

    name: str  # e.g. "md", "pdf"
    label: str  # e.g. "Export MD"
    file_ext: str
    default_filename: str

    @abstractmethod
    def export(self, snapshot: ExportSnapshot, out_path: Path) -> None:
        """Perform export. Raises ExportFailure when the file cannot be produced."""
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, exporter: IExporter, *, replace: bool = False) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def find(self, name: str) -> IExporter | None: ...
    def all(self) -> list[IExporter]: ...


@runtime_checkable
class IExportCapability(Protocol):
    """
    Raster snapshot + PDF assembly, kept behind a port so the presenter does not
    depend on the (late-loaded) paint/print modules.
    """

    def capture(self, widget: Any) -> Any:
        """Return a QImage of the rendered preview."""
        ...

    def write_pdf(self, image: Any, out_path: Path) -> None: ...


class ITaskRunner(Protocol):
    """Runs work off the editing path and reports back on the UI thread."""

    def submit(
        self,
        fn: Callable[[], object],
        on_success: Callable[[object], None],
        on_failure: Callable[[Exception], None],
    ) -> None: ...


class IConfigService(Protocol):
    """Read-only access to user/app configuration (INI sections and keys)."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
