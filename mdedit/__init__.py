"""Markdown Editor: a live-preview markdown editor built on PyQt6."""

__version__ = "1.0.0"
