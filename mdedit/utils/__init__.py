"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_BASE,
    CSS_THEMES,
    HTML_TEMPLATE,
    SAMPLE_DOCUMENT,
    SETTINGS_DOCUMENT,
    SETTINGS_GEOMETRY,
    SETTINGS_SPLITTER,
    SETTINGS_THEME,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_BASE",
    "CSS_THEMES",
    "HTML_TEMPLATE",
    "SAMPLE_DOCUMENT",
    "SETTINGS_DOCUMENT",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "SETTINGS_THEME",
]
