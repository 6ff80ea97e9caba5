"""Core logic - line search and the run dispatcher."""
from __future__ import annotations

from minigrep.core.search_engine import search, search_case_insensitive, select_search

__all__ = [
    "search",
    "search_case_insensitive",
    "select_search",
    "run",
]


def __getattr__(name: str):
    if name == "run":
        from minigrep.core.runner import run

        return run
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
