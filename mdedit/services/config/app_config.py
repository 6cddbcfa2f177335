from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

from mdedit.domain.interfaces import IAppConfig
from mdedit.domain.models import Theme
from mdedit.services.config.ini_config_service import IniConfigService

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)

PREVIEW_ENGINES = ("auto", "webengine", "text")


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # app_config.py -> mdedit/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeError):
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None
    return m.group(1)


@dataclass(frozen=True)
class EditorOptions:
    """Typed view over the [features], [export] and [ui] sections."""

    pdf_export: bool = False
    ask_export_location: bool = False
    export_directory: Path | None = None  # None -> user downloads dir
    theme: Theme = Theme.SYSTEM
    preview_engine: str = "auto"
    toast_ms: int = 3000


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter that wraps IniConfigService and adds get_version() from <root>/version file
    and editor_options() for the editor's feature flags.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def editor_options(self) -> EditorOptions:
        defaults = EditorOptions()

        directory = (self.ini.get("export", "directory", "") or "").strip()
        engine = (self.ini.get("ui", "preview_engine", "") or "").strip().lower()
        if engine not in PREVIEW_ENGINES:
            engine = defaults.preview_engine
        toast_ms = self.ini.get_int("ui", "toast_ms", defaults.toast_ms)
        if toast_ms is None or toast_ms <= 0:
            toast_ms = defaults.toast_ms

        return EditorOptions(
            pdf_export=bool(self.ini.get_bool("features", "pdf_export", defaults.pdf_export)),
            ask_export_location=bool(
                self.ini.get_bool("export", "ask_location", defaults.ask_export_location)
            ),
            export_directory=Path(directory).expanduser() if directory else None,
            theme=Theme.parse(self.ini.get("ui", "theme", None), defaults.theme),
            preview_engine=engine,
            toast_ms=toast_ms,
        )

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
