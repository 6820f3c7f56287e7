"""
sotdl-gen - Shadow of the Demon Lord character generator driven by the core rulebook.
"""

from .database import CharacterDatabase, DatabaseProvider, open_database
from .exceptions import (
    ExtractionError,
    GenerationError,
    InvalidSeedError,
    PersistenceError,
    SotDLGenError,
    SubprocessError,
    UnknownPathError,
)
from .generator import CharacterGenerator
from .models import Attributes, Character, CharacterOptions, Level, NameList
from .rng import SeededRandom

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("sotdl-gen")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "CharacterDatabase",
    "DatabaseProvider",
    "open_database",
    "CharacterGenerator",
    "SeededRandom",
    "Attributes",
    "Character",
    "CharacterOptions",
    "Level",
    "NameList",
    "SotDLGenError",
    "ExtractionError",
    "SubprocessError",
    "InvalidSeedError",
    "PersistenceError",
    "GenerationError",
    "UnknownPathError",
]
