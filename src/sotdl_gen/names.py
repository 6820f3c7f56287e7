"""
Name table loading and ancestry/gender-conditioned name sampling.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .exceptions import PersistenceError
from .models import NameList
from .rng import SeededRandom
from .rules import SURNAME_TYPE

logger = logging.getLogger("sotdl-gen")

_NAME_TABLE_ADAPTER = TypeAdapter(list[NameList])


def default_names_file() -> Path:
    """Path of the name table shipped with the package."""
    return Path(str(resources.files("sotdl_gen") / "data" / "names.json"))


def load_name_table(path: Path | str | None = None) -> list[NameList]:
    """Load a name table file (a JSON list of NameList records).

    Args:
        path: File to read. Defaults to the packaged table.

    Raises:
        PersistenceError: If the file cannot be read or has the wrong shape.
    """
    path = Path(path) if path else default_names_file()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to read name table: {e}", path=str(path)) from e
    try:
        table = _NAME_TABLE_ADAPTER.validate_python(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise PersistenceError(f"Malformed name table {path}: {e}", path=str(path)) from e
    logger.debug(f"Loaded {len(table)} name lists from {path}")
    return table


class NameSampler:
    """Draw full names from a name table using a shared random source."""

    def __init__(self, table: list[NameList]) -> None:
        self.table = table

    def ethnicities_for(self, ancestry: str) -> list[str]:
        """Ethnicities listed for an ancestry, first-seen order, no duplicates."""
        return list(dict.fromkeys(
            entry.ethnicity for entry in self.table if entry.ancestry == ancestry
        ))

    def sample(self, rng: SeededRandom, ancestry: str, gender: str) -> str:
        """Sample "<first> <surname>" for the given ancestry and gender.

        When the ancestry has no ethnicities in the table, the ethnicity of a
        random table entry is used instead. Either component may come back
        empty when its pool is empty. Only non-empty components are joined,
        so a missing first name or surname leaves no stray space; an empty
        table gives an empty name.
        """
        if not self.table:
            logger.warning("Name table is empty; leaving name blank")
            return ""

        candidates = self.ethnicities_for(ancestry)
        if not candidates:
            candidates = [rng.choice(self.table).ethnicity]
        ethnicity = rng.choice(candidates)

        first_names: list[str] = []
        surnames: list[str] = []
        for entry in self.table:
            if entry.ethnicity != ethnicity:
                continue
            if entry.type == gender:
                first_names.extend(entry.names)
            elif entry.type == SURNAME_TYPE:
                surnames.extend(entry.names)

        first = rng.choice(first_names) if first_names else ""
        last = rng.choice(surnames) if surnames else ""
        return " ".join(part for part in (first, last) if part)
