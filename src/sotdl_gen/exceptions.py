"""
Exception hierarchy for sotdl-gen.

Every failure the extraction pipeline or the generation engine can hit is
raised as one of these types. None of them is recoverable inside the library:
callers decide whether to report, abort, or retry with different input.
"""

from __future__ import annotations

from typing import Any


class SotDLGenError(Exception):
    """Base exception for all sotdl-gen errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ExtractionError(SotDLGenError):
    """A required tier pattern did not match, or a captured field was malformed.

    Attributes:
        path_name: Path whose text could not be extracted
        tier: Unlock level of the tier being extracted
    """

    def __init__(
        self,
        message: str,
        path_name: str,
        tier: int,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.path_name = path_name
        self.tier = tier


class SubprocessError(SotDLGenError):
    """The text-extraction collaborator failed or exceeded its timeout.

    Attributes:
        timed_out: True when the process was killed after the wall-clock limit
        returncode: Exit status of the process, if it exited
    """

    def __init__(
        self,
        message: str,
        timed_out: bool = False,
        returncode: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.timed_out = timed_out
        self.returncode = returncode


class InvalidSeedError(SotDLGenError):
    """The supplied seed is not a valid hex string."""

    def __init__(self, seed: str, details: dict[str, Any] | None = None):
        super().__init__(f"Seed {seed!r} is not a valid hex string", details)
        self.seed = seed


class PersistenceError(SotDLGenError):
    """A cache or name-table file is unreadable, unwritable, or malformed."""

    def __init__(self, message: str, path: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.path = path


class GenerationError(SotDLGenError):
    """Character generation was asked for something it cannot produce."""


class UnknownPathError(GenerationError):
    """A requested path name is not in the database."""

    def __init__(self, path_name: str, category: str):
        super().__init__(
            f"Unknown {category} path: {path_name!r}",
            {"path_name": path_name, "category": category},
        )
        self.path_name = path_name
        self.category = category
