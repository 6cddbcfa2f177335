"""INI-backed configuration."""

from .app_config import AppConfig, EditorOptions, build_app_config
from .ini_config_service import IniConfigService

__all__ = ["AppConfig", "EditorOptions", "IniConfigService", "build_app_config"]
