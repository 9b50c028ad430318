"""Logging setup for the watchcfg command.

configure_logging() replaces the root logger's handlers with a rotating
file handler, a stderr handler, or both, all sharing one formatter.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from watchcfg.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from watchcfg.config.models import LoggingConfig

# Rotate at 10MB, keep five old files
LOG_FILE_MAX_BYTES = 10_485_760
LOG_FILE_BACKUP_COUNT = 5

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _make_formatter(log_format: str) -> logging.Formatter:
    if log_format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _open_log_file(path: Path) -> RotatingFileHandler | None:
    """Open the rotating log file, or return None after a warning on stderr."""
    try:
        file_path = path.expanduser()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            file_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig.

    stderr is used when config.include_stderr is set, when no file is
    configured, and when the file cannot be opened.

    Args:
        config: Logging configuration.
    """
    level = logging.getLevelName(config.level.upper())
    formatter = _make_formatter(config.format)

    handlers: list[logging.Handler] = []
    if config.file is not None:
        file_handler = _open_log_file(Path(config.file))
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
