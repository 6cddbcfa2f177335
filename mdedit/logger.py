"""Application logging utilities."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from mdedit.utils.constants import APP_ORG

_LOGGER_NAME = "mdedit"
_LOG_FILE_NAME = "mdedit.log"


def log_dir() -> Path:
    path = Path(user_log_dir(APP_ORG, appauthor=False))
    path.mkdir(parents=True, exist_ok=True)
    return path


def configure_logging(
    level: int = logging.INFO, *, directory: Path | None = None
) -> logging.Logger:
    """Configure a rotating log file in the user log directory plus stderr output."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        log_directory = directory or log_dir()
        handler = RotatingFileHandler(
            log_directory / _LOG_FILE_NAME,
            maxBytes=1_048_576,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError:
        # Read-only home or similar: keep going with stderr only.
        handler = None
    else:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if handler is not None:
        logger.info("Logger initialised; logs available at %s", handler.baseFilename)
    return logger
