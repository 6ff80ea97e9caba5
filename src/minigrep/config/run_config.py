"""Run parameters for a single minigrep invocation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from minigrep.config.constants import ENV_IGNORE_CASE, REQUIRED_ARG_COUNT
from minigrep.config.settings import env_flag_present
from minigrep.errors import MissingArgumentError


@dataclass(frozen=True)
class Config:
    """Query, target file and case mode for one search run."""
    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(cls, args: Sequence[str], *, ignore_case: bool | None = None) -> "Config":
        """Build a Config from raw command-line tokens.

        Args:
            args: Tokens where index 0 is the program name (ignored), index 1 the
                query and index 2 the file path. Extra tokens are ignored.
            ignore_case: Case mode. When None, it is true if ``IGNORE_CASE`` is
                present in the environment.

        Raises:
            MissingArgumentError: If fewer than three tokens are given.
        """
        if len(args) < REQUIRED_ARG_COUNT:
            raise MissingArgumentError()

        if ignore_case is None:
            ignore_case = env_flag_present(ENV_IGNORE_CASE)

        return cls(query=args[1], file_path=args[2], ignore_case=ignore_case)
