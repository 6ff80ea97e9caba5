#!/usr/bin/env python
"""Command-line entry point: minigrep <query> <file_path>"""
from __future__ import annotations

import sys
from typing import Sequence

import tomli
from rich.console import Console

from minigrep.config import Config, Settings
from minigrep.config.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    HELP_TEXT,
    USAGE,
)
from minigrep.core.logging_config import get_logger, setup_logging
from minigrep.core.runner import run
from minigrep.errors import FileReadError, MissingArgumentError

logger = get_logger(__name__)

_HELP_FLAGS = ("-h", "--help")
_VERSION_FLAGS = ("--version",)


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run minigrep on *argv* (default: ``sys.argv``) and return the exit code."""
    args = list(sys.argv if argv is None else argv)
    err_console = Console(stderr=True, highlight=False)

    # A lone flag is handled here; with two positionals "-h" is just a query.
    if len(args) == 2 and args[1] in _HELP_FLAGS:
        print(HELP_TEXT)
        return EXIT_OK
    if len(args) == 2 and args[1] in _VERSION_FLAGS:
        from minigrep import __version__

        print(__version__)
        return EXIT_OK

    try:
        config = Config.build(args)
    except MissingArgumentError as exc:
        err_console.print(f"Problem parsing arguments: {exc}", markup=False, soft_wrap=True)
        err_console.print(USAGE, markup=False, soft_wrap=True)
        return EXIT_USAGE_ERROR

    try:
        setup_logging(Settings.load().logging)
    except (tomli.TOMLDecodeError, OSError) as exc:
        err_console.print(f"Configuration error: {exc}", markup=False, soft_wrap=True)
        return EXIT_CONFIG_ERROR

    try:
        run(config)
    except FileReadError as exc:
        logger.debug("Read failed for %s", exc.path, exc_info=exc.__cause__)
        err_console.print(f"Application error: {exc}", markup=False, soft_wrap=True)
        return EXIT_IO_ERROR

    return EXIT_OK


def main():
    """Entry point"""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
