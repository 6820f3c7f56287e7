"""
Configuration model for sotdl-gen.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .extractors.pdftotext import DEFAULT_TIMEOUT
from .rules import DEFAULT_GENDERS

logger = logging.getLogger("sotdl-gen")

CACHE_FILENAME = "Shadow_of_the_Demon_Lord.json"


class Settings(BaseModel):
    """Where data lives and how the generator behaves.

    Populated from environment variables (and a ``.env`` file) by
    ``load_settings``; every field has a usable default.
    """

    data_dir: Path = Field(
        default=Path("sotdl_data"),
        description="Directory holding the database cache",
    )
    cache_file: Path | None = Field(
        default=None,
        description="Database cache path; <data_dir>/Shadow_of_the_Demon_Lord.json if unset",
    )
    names_file: Path | None = Field(
        default=None,
        description="Name table JSON; the packaged table if unset",
    )
    source_document: Path | None = Field(
        default=None,
        description="Rulebook PDF used when the cache must be (re)built",
    )
    pdftotext_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0.0,
        description="Seconds before the pdftotext process is killed",
    )
    log_level: str = Field(
        default="ERROR",
        description="One of DEBUG, INFO, WARNING, ERROR",
    )
    genders: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GENDERS),
        description="Genders drawn from when none is requested",
    )

    @field_validator("genders")
    @classmethod
    def _genders_not_empty(cls, v: list[str]) -> list[str]:
        v = [g.strip() for g in v if g.strip()]
        if not v:
            raise ValueError("At least one gender must be configured")
        return v

    @property
    def resolved_cache_file(self) -> Path:
        return self.cache_file or self.data_dir / CACHE_FILENAME

    def ensure_directories(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)


def load_settings(**overrides) -> Settings:
    """Read settings from the environment, applying explicit overrides last.

    Recognised variables: SOTDL_DATA_DIR, SOTDL_CACHE_FILE, SOTDL_NAMES_FILE,
    SOTDL_SOURCE_DOCUMENT, SOTDL_PDFTOTEXT_TIMEOUT, SOTDL_LOG_LEVEL,
    SOTDL_GENDERS (comma separated).
    """
    if not load_dotenv():
        logger.debug(".env file not found, using environment only")

    env = {
        "data_dir": os.getenv("SOTDL_DATA_DIR"),
        "cache_file": os.getenv("SOTDL_CACHE_FILE"),
        "names_file": os.getenv("SOTDL_NAMES_FILE"),
        "source_document": os.getenv("SOTDL_SOURCE_DOCUMENT"),
        "pdftotext_timeout": os.getenv("SOTDL_PDFTOTEXT_TIMEOUT"),
        "log_level": os.getenv("SOTDL_LOG_LEVEL"),
    }
    genders = os.getenv("SOTDL_GENDERS")
    if genders:
        env["genders"] = genders.split(",")

    values = {k: v for k, v in env.items() if v}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
