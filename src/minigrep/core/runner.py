"""Run a configured search: read the file, match, print."""
from __future__ import annotations

import sys
from typing import TextIO

from minigrep.config.constants import FILE_ENCODING
from minigrep.config.run_config import Config
from minigrep.core.logging_config import get_logger
from minigrep.core.search_engine import select_search
from minigrep.errors import FileReadError

logger = get_logger(__name__)


def read_contents(file_path: str) -> str:
    """Read the whole file as UTF-8 text, keeping line breaks untranslated.

    Raises:
        FileReadError: If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        with open(file_path, encoding=FILE_ENCODING, newline="") as fh:
            contents = fh.read()
    except OSError as exc:
        raise FileReadError(file_path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FileReadError(file_path, f"not valid {FILE_ENCODING} text") from exc

    logger.debug("Read %d characters from %s", len(contents), file_path)
    return contents


def run(config: Config, *, out: TextIO | None = None) -> int:
    """Print every line of ``config.file_path`` matching ``config.query``.

    Args:
        config: Run parameters
        out: Stream to write matches to (default: ``sys.stdout``)

    Returns:
        Number of matching lines written

    Raises:
        FileReadError: If the file cannot be read; nothing is printed.
    """
    stream = out if out is not None else sys.stdout
    contents = read_contents(config.file_path)

    search_fn = select_search(config.ignore_case)
    logger.debug(
        "Searching %s for %r (%s)",
        config.file_path,
        config.query,
        "case-insensitive" if config.ignore_case else "case-sensitive",
    )
    results = search_fn(config.query, contents)

    for line in results:
        print(line, file=stream)

    logger.info("%d matching line(s) in %s", len(results), config.file_path)
    return len(results)
