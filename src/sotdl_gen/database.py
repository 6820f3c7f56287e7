"""
Character Database - per-path advancement records built from the rulebook.

The database maps every path name to its Level records keyed by unlock level.
It is built once from the rulebook text (through the pdftotext collaborator and
the ExtractionEngine) and cached as JSON; later runs load the cache. Nothing
mutates a database once it has been handed to the generator.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import RLock
from typing import Callable

from pydantic import BaseModel, Field, ValidationError

from .exceptions import PersistenceError
from .extractors import ExtractionEngine, pdf_to_text
from .extractors.pdftotext import DEFAULT_TIMEOUT
from .models import Level, NameList
from .names import default_names_file, load_name_table
from .rules import PATH_NAMES, TIER_LEVELS, PathCategory, all_path_names, category_of

logger = logging.getLogger("sotdl-gen")


class CharacterDatabase(BaseModel):
    """Path name -> unlock level -> Level, plus the optional name table."""
    paths: dict[str, dict[int, Level]]
    names: list[NameList] = Field(default_factory=list)

    @classmethod
    def initialize(cls) -> "CharacterDatabase":
        """An empty database with every path registered against its tier set."""
        return cls(paths={
            path_name: {tier: Level() for tier in TIER_LEVELS[category]}
            for category, names in PATH_NAMES.items()
            for path_name in names
        })

    @classmethod
    def from_text(cls, document: str, names: list[NameList] | None = None) -> "CharacterDatabase":
        """Build a database by extracting every category from rulebook text.

        Raises:
            ExtractionError: If any path's text cannot be found or parsed.
        """
        db = cls.initialize()
        engine = ExtractionEngine(document)
        for category in PathCategory:
            engine.extract(db.paths, category)
        db.names = list(names or [])
        return db

    def has_path(self, path_name: str) -> bool:
        return path_name in self.paths

    def tiers(self, path_name: str) -> list[tuple[int, Level]]:
        """A path's Level records in ascending unlock-level order."""
        levels = self.paths[path_name]
        return [(tier, levels[tier]) for tier in sorted(levels)]

    def check_structure(self) -> None:
        """Verify every known path is present with exactly its category's tiers.

        Raises:
            PersistenceError: On missing, unknown, or malformed paths.
        """
        expected = set(all_path_names())
        missing = sorted(expected - set(self.paths))
        unknown = sorted(set(self.paths) - expected)
        if missing or unknown:
            raise PersistenceError(
                "Database paths do not match the rule set",
                details={"missing": missing, "unknown": unknown},
            )
        for path_name, levels in self.paths.items():
            category = category_of(path_name)
            if set(levels) != set(TIER_LEVELS[category]):
                raise PersistenceError(
                    f"Path {path_name} has tiers {sorted(levels)}, "
                    f"expected {list(TIER_LEVELS[category])}",
                )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, path: Path) -> None:
        """Write the database snapshot as JSON."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.model_dump_json(), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Failed to write database cache: {e}", path=str(path)) from e
        logger.info(f"💾 Saved character database to {path}")

    @classmethod
    def load(cls, path: Path) -> "CharacterDatabase":
        """Read a database snapshot written by ``save``.

        Raises:
            PersistenceError: If the file is unreadable or structurally invalid.
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Failed to read database cache: {e}", path=str(path)) from e
        try:
            db = cls.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise PersistenceError(f"Malformed database cache {path}: {e}", path=str(path)) from e
        try:
            db.check_structure()
        except PersistenceError as e:
            e.path = str(path)
            raise
        logger.info(f"📂 Loaded character database from {path}")
        return db


def open_database(
    source_document: Path | str | None = None,
    force_rebuild: bool = False,
    *,
    cache_file: Path,
    names_file: Path | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    to_text: Callable[..., str] | None = None,
) -> CharacterDatabase:
    """Load the cached database, or build it from the source document.

    Args:
        source_document: Rulebook PDF. Required when no cache exists or when
            rebuilding.
        force_rebuild: Ignore an existing cache and extract again.
        cache_file: Where the JSON snapshot lives.
        names_file: Name table to embed on rebuild; the packaged table if None.
        timeout: Wall-clock limit for the text collaborator, in seconds.
        to_text: The text collaborator; ``pdf_to_text`` if None.

    Raises:
        PersistenceError: Bad cache, nothing to build from, or unwritable cache.
        SubprocessError: The text collaborator failed or timed out.
        ExtractionError: The rulebook text did not have the expected layout.
    """
    cache_file = Path(cache_file)
    if cache_file.exists() and not force_rebuild:
        return CharacterDatabase.load(cache_file)

    if not source_document:
        raise PersistenceError(
            f"No database cache at {cache_file} and no source document to build one from",
            path=str(cache_file),
        )

    logger.info("Extracting DB from PDF.")
    document = (to_text or pdf_to_text)(source_document, timeout=timeout)
    names_path = Path(names_file) if names_file else default_names_file()
    if names_path.exists():
        names = load_name_table(names_path)
    else:
        logger.warning(f"No name table at {names_path}; building database without names")
        names = []
    db = CharacterDatabase.from_text(document, names)
    db.save(cache_file)
    return db


class DatabaseProvider:
    """Lazily opens the shared database on first use.

    First construction and explicit rebuilds happen under a lock, so
    concurrent callers never build twice. The returned database is
    read-only and safe to share.
    """

    def __init__(
        self,
        cache_file: Path,
        source_document: Path | str | None = None,
        names_file: Path | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.cache_file = Path(cache_file)
        self.source_document = source_document
        self.names_file = names_file
        self.timeout = timeout
        self._db: CharacterDatabase | None = None
        self._lock = RLock()

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._db is not None

    def get(self) -> CharacterDatabase:
        with self._lock:
            if self._db is None:
                logger.info("Loading Character DB.")
                self._db = self._open(force_rebuild=False)
            return self._db

    def rebuild(self, source_document: Path | str | None = None) -> CharacterDatabase:
        """Discard the cache and extract again from the source document."""
        with self._lock:
            if source_document:
                self.source_document = source_document
            self._db = self._open(force_rebuild=True)
            return self._db

    def _open(self, force_rebuild: bool) -> CharacterDatabase:
        return open_database(
            self.source_document,
            force_rebuild,
            cache_file=self.cache_file,
            names_file=self.names_file,
            timeout=self.timeout,
        )
