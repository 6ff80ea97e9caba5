"""Tests for minigrep.config.settings."""
from __future__ import annotations

import pytest

from minigrep.config import Config, Settings
from minigrep.config.constants import (
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_LOG_LEVEL,
    ENV_DATA_DIR,
    ENV_FILE,
    ENV_IGNORE_CASE,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_RICH_CONSOLE,
    SETTINGS_FILE,
)
from minigrep.config.settings import (
    _get_env_bool,
    _get_env_str,
    _load_env_files,
    env_flag_present,
)


def _write_settings(base, body: str):
    path = base / DEFAULT_CONFIG_SUBDIR / SETTINGS_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


class TestSettingsLoad:
    """Tests for Settings.load."""

    def test_explicit_missing_path_raises(self, tmp_path):
        missing = tmp_path / "nonexistent" / "settings.toml"
        with pytest.raises(FileNotFoundError):
            Settings.load(config_path=missing)

    def test_defaults_without_file(self):
        settings = Settings.load()
        assert settings.logging.level == DEFAULT_LOG_LEVEL
        assert settings.logging.file_enabled is False
        assert settings.logging.use_rich_console is True

    def test_reads_user_settings_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_DATA_DIR, str(tmp_path))
        _write_settings(tmp_path, '[logging]\nlevel = "debug"\nuse_rich_console = false\n')
        settings = Settings.load()
        assert settings.logging.level == "DEBUG"
        assert settings.logging.use_rich_console is False

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[logging]\nfile_enabled = true\nfile_path = "/tmp/x.log"\n', encoding="utf-8")
        settings = Settings.load(config_path=path)
        assert settings.logging.file_enabled is True
        assert settings.logging.file_path == "/tmp/x.log"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_DATA_DIR, str(tmp_path))
        _write_settings(tmp_path, '[logging]\nlevel = "ERROR"\n')
        monkeypatch.setenv(ENV_LOG_LEVEL, "info")
        assert Settings.load().logging.level == "INFO"

    def test_log_file_env_enables_file_logging(self, tmp_path, monkeypatch):
        log_file = tmp_path / "logs" / "run.log"
        monkeypatch.setenv(ENV_LOG_FILE, str(log_file))
        settings = Settings.load()
        assert settings.logging.file_enabled is True
        assert settings.logging.file_path == str(log_file)

    def test_rich_console_env(self, monkeypatch):
        monkeypatch.setenv(ENV_RICH_CONSOLE, "off")
        assert Settings.load().logging.use_rich_console is False


class TestEnvHelpers:
    def test_get_env_str_empty_is_missing(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_TEST_VALUE", "")
        assert _get_env_str("MINIGREP_TEST_VALUE", "fallback") == "fallback"

    def test_get_env_str_value(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_TEST_VALUE", "set")
        assert _get_env_str("MINIGREP_TEST_VALUE") == "set"

    @pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("no", False)])
    def test_get_env_bool(self, monkeypatch, value, expected):
        monkeypatch.setenv("MINIGREP_TEST_FLAG", value)
        assert _get_env_bool("MINIGREP_TEST_FLAG", not expected) is expected

    def test_env_flag_present_uses_given_mapping(self):
        assert env_flag_present("IGNORE_CASE", {"IGNORE_CASE": ""}) is True
        assert env_flag_present("IGNORE_CASE", {}) is False


class TestDotenvLoading:
    """Tests for .env loading at import time."""

    def _track_ignore_case(self, monkeypatch):
        # Register ENV_IGNORE_CASE with monkeypatch so values set by dotenv are undone.
        monkeypatch.setenv(ENV_IGNORE_CASE, "placeholder")
        monkeypatch.delenv(ENV_IGNORE_CASE)

    def test_empty_ignore_case_in_dotenv_enables_case_insensitive(self, tmp_path, monkeypatch):
        self._track_ignore_case(monkeypatch)
        monkeypatch.chdir(tmp_path)
        (tmp_path / ENV_FILE).write_text(f"{ENV_IGNORE_CASE}=\n", encoding="utf-8")

        _load_env_files()

        assert Config.build(["x", "q", "f"]).ignore_case is True

    def test_dotenv_does_not_override_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
        monkeypatch.chdir(tmp_path)
        (tmp_path / ENV_FILE).write_text(f"{ENV_LOG_LEVEL}=DEBUG\n", encoding="utf-8")

        _load_env_files()

        assert Settings.load().logging.level == "ERROR"
