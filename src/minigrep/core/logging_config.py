"""Centralized logging configuration for minigrep."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from minigrep.config.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file_enabled: bool = False
    file_path: str = DEFAULT_LOG_FILE
    file_max_bytes: int = DEFAULT_LOG_MAX_BYTES
    file_backup_count: int = DEFAULT_LOG_BACKUP_COUNT
    format: str = DEFAULT_LOG_FORMAT
    use_rich_console: bool = True


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value; unknown names fall back to WARNING."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(config: LogConfig) -> None:
    """
    Configure logging with file rotation and optional Rich console output.

    Console output always goes to stderr; stdout carries match results only.

    Args:
        config: Logging configuration
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(config.level))

    # Remove existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    if config.file_enabled:
        log_path = Path(config.file_path).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if config.use_rich_console:
        console_handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler()  # defaults to stderr
        console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
