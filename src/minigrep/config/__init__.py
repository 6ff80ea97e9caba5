"""Configuration management."""
from minigrep.config.constants import *
from minigrep.config.settings import Settings
from minigrep.config.run_config import Config

__all__ = [
    "Config",
    "Settings",
]
