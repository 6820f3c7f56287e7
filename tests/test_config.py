"""
Unit tests for settings and logging configuration.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from sotdl_gen.config import CACHE_FILENAME, Settings, load_settings
from sotdl_gen.logutils import configure_logging, logger, resolve_log_level
from sotdl_gen.rules import DEFAULT_GENDERS

ENV_VARS = [
    "SOTDL_DATA_DIR",
    "SOTDL_CACHE_FILE",
    "SOTDL_NAMES_FILE",
    "SOTDL_SOURCE_DOCUMENT",
    "SOTDL_PDFTOTEXT_TIMEOUT",
    "SOTDL_LOG_LEVEL",
    "SOTDL_GENDERS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("sotdl_gen.config.load_dotenv", lambda: False)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        settings = Settings()
        assert settings.data_dir == Path("sotdl_data")
        assert settings.resolved_cache_file == Path("sotdl_data") / CACHE_FILENAME
        assert settings.genders == DEFAULT_GENDERS
        assert settings.log_level == "ERROR"
        assert settings.pdftotext_timeout == 500.0

    def test_explicit_cache_file(self, tmp_path: Path):
        settings = Settings(cache_file=tmp_path / "db.json")
        assert settings.resolved_cache_file == tmp_path / "db.json"

    def test_empty_genders_rejected(self):
        with pytest.raises(ValidationError):
            Settings(genders=[" ", ""])

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(pdftotext_timeout=0)

    def test_ensure_directories(self, tmp_path: Path):
        settings = Settings(data_dir=tmp_path / "a" / "b")
        settings.ensure_directories()
        assert (tmp_path / "a" / "b").is_dir()


class TestLoadSettings:
    """Tests for environment-driven settings."""

    def test_environment(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SOTDL_DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setenv("SOTDL_PDFTOTEXT_TIMEOUT", "12.5")
        monkeypatch.setenv("SOTDL_GENDERS", "Female, Male")
        monkeypatch.setenv("SOTDL_LOG_LEVEL", "DEBUG")

        settings = load_settings()

        assert settings.data_dir == tmp_path / "data"
        assert settings.pdftotext_timeout == 12.5
        assert settings.genders == ["Female", "Male"]
        assert settings.log_level == "DEBUG"

    def test_overrides_win(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SOTDL_LOG_LEVEL", "DEBUG")
        settings = load_settings(log_level="WARNING", source_document=tmp_path / "book.pdf")
        assert settings.log_level == "WARNING"
        assert settings.source_document == tmp_path / "book.pdf"

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("SOTDL_LOG_LEVEL", "DEBUG")
        assert load_settings(log_level=None).log_level == "DEBUG"


class TestLogging:
    """Tests for log level handling."""

    @pytest.mark.parametrize("name,expected", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" Warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("LOUD", logging.ERROR),
        (None, logging.ERROR),
    ])
    def test_resolve_log_level(self, name, expected):
        assert resolve_log_level(name) == expected

    def test_configure_logging_sets_package_logger(self):
        configure_logging("INFO")
        assert logger.level == logging.INFO
        configure_logging("ERROR")
        assert logger.level == logging.ERROR
