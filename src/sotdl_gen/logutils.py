"""Logging setup shared by the command line and the server."""

import logging

logger = logging.getLogger("sotdl-gen")

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def resolve_log_level(name: str | None) -> int:
    """Map a level name to a logging level; unknown names mean ERROR."""
    return LOG_LEVELS.get((name or "").strip().upper(), logging.ERROR)


def configure_logging(level_name: str | None) -> None:
    level = resolve_log_level(level_name)
    logging.basicConfig(level=level)
    logger.setLevel(level)
