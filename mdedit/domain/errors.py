from __future__ import annotations


class ExportFailure(Exception):
    """Raised when an export could not produce or save its file."""

    def __init__(self, exporter: str, message: str) -> None:
        super().__init__(message)
        self.exporter = exporter
        self.message = message

    def __str__(self) -> str:
        return f"{self.exporter}: {self.message}"
