"""Exporter strategies and registry."""

from .base import ExporterRegistryInst
from .destination import default_download_dir, resolve_destination
from .markdown_exporter import MarkdownExporter
from .pdf_exporter import PdfExporter

__all__ = [
    "ExporterRegistryInst",
    "MarkdownExporter",
    "PdfExporter",
    "default_download_dir",
    "resolve_destination",
]
