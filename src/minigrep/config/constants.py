"""
Constants and default values for minigrep.

Centralizes magic numbers and strings to improve maintainability.
"""

from pathlib import Path

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "minigrep"
CONFIG_DIR_NAME = ".minigrep"

# ============================================================================
# Path Defaults
# ============================================================================

DEFAULT_DATA_DIR = Path.home() / CONFIG_DIR_NAME
DEFAULT_CONFIG_SUBDIR = "config"
DEFAULT_LOGS_SUBDIR = "logs"

# Config file names
SETTINGS_FILE = "settings.toml"
ENV_FILE = ".env"

# ============================================================================
# Search Defaults
# ============================================================================

# Line break used to split file contents; a preceding "\r" is stripped too
LINE_DELIMITER = "\n"
CARRIAGE_RETURN = "\r"

FILE_ENCODING = "utf-8"

# Positional arguments after the program name: <query> <file_path>
REQUIRED_ARG_COUNT = 3

# ============================================================================
# Logging Defaults
# ============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FILE = str(DEFAULT_DATA_DIR / DEFAULT_LOGS_SUBDIR / "minigrep.log")
DEFAULT_LOG_MAX_BYTES = 1048576  # 1MB
DEFAULT_LOG_BACKUP_COUNT = 3
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ============================================================================
# Environment Variable Names
# ============================================================================

# Presence alone switches on case-insensitive matching
ENV_IGNORE_CASE = "IGNORE_CASE"

ENV_DATA_DIR = "MINIGREP_DATA_DIR"
ENV_LOG_LEVEL = "MINIGREP_LOG_LEVEL"
ENV_LOG_FILE = "MINIGREP_LOG_FILE"
ENV_RICH_CONSOLE = "MINIGREP_RICH_CONSOLE"

# ============================================================================
# Exit Codes
# ============================================================================

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_CONFIG_ERROR = 3

# ============================================================================
# Error Messages
# ============================================================================

ERROR_NOT_ENOUGH_ARGUMENTS = "not enough arguments"

ERROR_FILE_READ = "could not read {path}: {reason}"

ERROR_NO_CONFIG = """
Configuration file not found: {path}

Create one at {config_dir}/{settings_file} or unset {env_var}.
"""

USAGE = "Usage: minigrep <query> <file_path>"

HELP_TEXT = f"""{USAGE}

Print every line of <file_path> that contains <query>.

Environment:
  {ENV_IGNORE_CASE}         match case-insensitively when set (any value, even empty;
                      a line "{ENV_IGNORE_CASE}=" in ./.env or ~/.minigrep/.env counts)
  {ENV_LOG_LEVEL}  log level for diagnostics on stderr (default: {DEFAULT_LOG_LEVEL})
  {ENV_LOG_FILE}   also write logs to this file
"""
