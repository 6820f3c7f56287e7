"""Shared database and generator behind the network-facing server."""

import logging
import threading

from pydantic import ValidationError

from .config import Settings
from .database import DatabaseProvider
from .exceptions import GenerationError
from .generator import CharacterGenerator
from .logutils import configure_logging
from .models import CharacterOptions
from .names import load_name_table

logger = logging.getLogger("sotdl-gen")


class GenerationService:
    """Shared database and generator behind the server tools.

    The database is opened lazily on the first request. The generator is
    created once per database and serializes its own runs, so concurrent
    requests never interleave reseeding.
    """

    def __init__(self, settings: Settings, provider: DatabaseProvider | None = None):
        self.settings = settings
        self.provider = provider or DatabaseProvider(
            cache_file=settings.resolved_cache_file,
            source_document=settings.source_document,
            names_file=settings.names_file,
            timeout=settings.pdftotext_timeout,
        )
        self._generator: CharacterGenerator | None = None
        self._lock = threading.Lock()

    def generator(self) -> CharacterGenerator:
        with self._lock:
            if self._generator is None:
                name_table = load_name_table(self.settings.names_file) if self.settings.names_file else None
                self._generator = CharacterGenerator(
                    self.provider.get(),
                    genders=self.settings.genders,
                    name_table=name_table,
                )
            return self._generator

    def generate(self, **options) -> str:
        """Generate a character and return it as JSON.

        A ``log_level`` option reconfigures logging first; a ``data_file``
        option rebuilds the database from that rulebook before generating.
        """
        try:
            opts = CharacterOptions(**{k: v for k, v in options.items() if v not in (None, "")})
        except ValidationError as e:
            raise GenerationError(f"Invalid options: {e}") from e
        if opts.log_level:
            configure_logging(opts.log_level)
        if opts.data_file:
            self.rebuild(opts.data_file)
        return self.generator().generate(opts).to_json()

    def rebuild(self, source_document: str | None = None) -> int:
        """Rebuild the database from the source document; returns the path count."""
        with self._lock:
            db = self.provider.rebuild(source_document)
            self._generator = None
        return len(db.paths)
