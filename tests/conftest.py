"""Pytest configuration and fixtures for minigrep tests."""

from __future__ import annotations

import pytest

from minigrep.config.constants import (
    ENV_DATA_DIR,
    ENV_IGNORE_CASE,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_RICH_CONSOLE,
)


SAMPLE_CONTENTS = """\
Rust:
safe, fast, productive.
Pick three.
Duct tape.
Trust me."""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without case toggles or user settings leaking in."""
    for name in (ENV_IGNORE_CASE, ENV_LOG_LEVEL, ENV_LOG_FILE, ENV_RICH_CONSOLE):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV_DATA_DIR, str(tmp_path / "minigrep-home"))


@pytest.fixture
def sample_contents() -> str:
    return SAMPLE_CONTENTS


@pytest.fixture
def sample_file(tmp_path, sample_contents):
    """Write the sample poem to a UTF-8 file and return its path."""
    path = tmp_path / "poem.txt"
    path.write_text(sample_contents + "\n", encoding="utf-8")
    return path
