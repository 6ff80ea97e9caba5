from __future__ import annotations

__version__ = "0.1.0"
__author__ = "minigrep Contributors"

from minigrep.config import Config
from minigrep.core import search, search_case_insensitive
from minigrep.errors import FileReadError, MinigrepError, MissingArgumentError

__all__ = [
    "Config",
    "search",
    "search_case_insensitive",
    "run",
    "MinigrepError",
    "MissingArgumentError",
    "FileReadError",
]


def __getattr__(name: str):
    if name == "run":
        from minigrep.core.runner import run

        return run
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
