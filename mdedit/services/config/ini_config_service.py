# mdedit/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from mdedit.domain.interfaces import IConfigService

log = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})
_FALSY = frozenset({"0", "false", "no", "n", "off"})


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first readable file wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/MarkdownEditor/config.ini or %APPDATA%\MarkdownEditor\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    A file that exists but cannot be parsed is logged and skipped. Values are
    read raw (no % interpolation) so export directories may contain '%'.
    """

    DEFAULT_APP_DIR = "MarkdownEditor"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        sources = self._candidates(explicit_path, project_root)
        self._loaded_from: Optional[Path] = None
        self._parser = self._new_parser()

        for path in sources:
            parser = self._read(path)
            if parser is not None:
                self._parser = parser
                self._loaded_from = path
                log.info("Configuration loaded from %s", path)
                break
        else:
            log.info("No configuration file found; using built-in defaults")

        if "app" not in self._parser:
            self._parser["app"] = {}
        self._parser["app"].setdefault("version", "0.0.0")

    @classmethod
    def _candidates(cls, explicit_path: Optional[Path], project_root: Optional[Path]) -> list[Path]:
        paths: list[Path] = []
        if explicit_path:
            paths.append(explicit_path)
        paths.append(Path(user_config_dir(cls.DEFAULT_APP_DIR, appauthor=False)) / cls.DEFAULT_FILE)
        if project_root:
            paths.append(project_root / "config" / cls.DEFAULT_FILE)
        return paths

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        return configparser.ConfigParser(interpolation=None)

    def _read(self, path: Path) -> Optional[configparser.ConfigParser]:
        if not path.is_file():
            return None
        parser = self._new_parser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, UnicodeError, configparser.Error) as e:
            log.warning("Ignoring unreadable config %s: %s", path, e)
            return None
        return parser

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            log.warning("[%s] %s: %r is not an integer", section, key, val)
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        s = val.strip().lower()
        if s in _TRUTHY:
            return True
        if s in _FALSY:
            return False
        return default

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- Extras -----

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics/logging."""
        return self._loaded_from
