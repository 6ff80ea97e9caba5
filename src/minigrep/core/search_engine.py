"""
Line search over in-memory file contents.

Both search variants are pure: they never touch the filesystem, never
mutate their inputs, and return matching lines in the order they appear.
"""
from __future__ import annotations

from typing import Callable, Iterator

from minigrep.config.constants import CARRIAGE_RETURN, LINE_DELIMITER

SearchFunction = Callable[[str, str], list[str]]


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of *contents*.

    Lines are separated by ``"\\n"``; a ``"\\r"`` right before the break
    belongs to the break. A trailing break does not produce an extra empty
    line, and empty contents produce no lines at all. A lone ``"\\r"`` at
    the very end of unterminated contents is kept.
    """
    if not contents:
        return

    lines = contents.split(LINE_DELIMITER)
    last = lines.pop()

    for line in lines:
        if line.endswith(CARRIAGE_RETURN):
            line = line[:-1]
        yield line

    if last:
        yield last


def search(query: str, contents: str) -> list[str]:
    """Return every line of *contents* containing *query* (case-sensitive)."""
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return every line of *contents* containing *query*, ignoring case.

    Matching compares lowercased text; returned lines keep their original case.
    """
    query = query.lower()
    return [line for line in iter_lines(contents) if query in line.lower()]


def select_search(ignore_case: bool) -> SearchFunction:
    """Pick the search variant for the given case mode."""
    return search_case_insensitive if ignore_case else search
