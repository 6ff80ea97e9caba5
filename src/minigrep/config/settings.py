"""
Settings management with environment variable and .env support.

Settings precedence (highest to lowest):
1. Environment variables (MINIGREP_*)
2. User settings file (~/.minigrep/config/settings.toml)
3. Hardcoded constants (constants.py)
"""

from __future__ import annotations

import os
from typing import Mapping, overload
from dataclasses import dataclass
from pathlib import Path
import tomli
from dotenv import load_dotenv

from ..core.logging_config import LogConfig
from .constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_CONFIG_SUBDIR,
    SETTINGS_FILE,
    ENV_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_FILE,
    ENV_DATA_DIR,
    ENV_LOG_LEVEL,
    ENV_LOG_FILE,
    ENV_RICH_CONSOLE,
    ERROR_NO_CONFIG,
)


# Load .env file at module import time
# Search order: ./.env, ~/.minigrep/.env, ~/.minigrep/config/.env
def _load_env_files():
    """Load .env files from standard locations."""
    env_locations = [
        Path.cwd() / ENV_FILE,  # Working directory
        DEFAULT_DATA_DIR / ENV_FILE,  # Data directory
        DEFAULT_DATA_DIR / DEFAULT_CONFIG_SUBDIR / ENV_FILE,  # Config directory
    ]

    for env_path in env_locations:
        if env_path.exists():
            load_dotenv(env_path, override=False)  # Don't override already-set vars


_load_env_files()


@overload
def _get_env_str(key: str, default: str) -> str: ...


@overload
def _get_env_str(key: str, default: None = None) -> str | None: ...


def _get_env_str(key: str, default: str | None = None) -> str | None:
    """Get string value from environment variable. Empty strings are treated as missing."""
    value = os.getenv(key)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(key: str, default: bool) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def env_flag_present(key: str, environ: Mapping[str, str] | None = None) -> bool:
    """Return True if *key* is set at all, whatever its value (even empty)."""
    env = os.environ if environ is None else environ
    return key in env


def _logging_from_dict(data: dict) -> LogConfig:
    """Create LogConfig from the [logging] table with environment variable overrides."""
    log_file = _get_env_str(ENV_LOG_FILE)
    return LogConfig(
        level=(_get_env_str(ENV_LOG_LEVEL, data.get("level", DEFAULT_LOG_LEVEL)) or DEFAULT_LOG_LEVEL).upper(),
        file_enabled=True if log_file else bool(data.get("file_enabled", False)),
        file_path=log_file or data.get("file_path", DEFAULT_LOG_FILE),
        use_rich_console=_get_env_bool(
            ENV_RICH_CONSOLE,
            bool(data.get("use_rich_console", True)),
        ),
    )


@dataclass
class Settings:
    logging: LogConfig

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        """
        Load settings with proper precedence.

        Args:
            config_path: Optional explicit settings file path

        Returns:
            Loaded Settings object

        Raises:
            FileNotFoundError: If an explicit settings file does not exist
        """
        if config_path is not None:
            settings_file = config_path
        else:
            base_data_dir = Path(os.getenv(ENV_DATA_DIR, str(DEFAULT_DATA_DIR))).expanduser()
            settings_file = base_data_dir / DEFAULT_CONFIG_SUBDIR / SETTINGS_FILE

        data: dict = {}
        if settings_file.exists():
            with open(settings_file, "rb") as f:
                data = tomli.load(f)
        elif config_path is not None:
            raise FileNotFoundError(
                ERROR_NO_CONFIG.format(
                    path=config_path,
                    config_dir=DEFAULT_DATA_DIR / DEFAULT_CONFIG_SUBDIR,
                    settings_file=SETTINGS_FILE,
                    env_var=ENV_DATA_DIR,
                )
            )

        return cls(logging=_logging_from_dict(data.get("logging", {})))
