"""Bounded-time wrapper around the ``pdftotext`` command line tool."""

import logging
import subprocess
from pathlib import Path

from ..exceptions import SubprocessError

logger = logging.getLogger("sotdl-gen")

PDFTOTEXT = "pdftotext"
DEFAULT_TIMEOUT = 500.0


def pdf_to_text(source: Path | str, timeout: float = DEFAULT_TIMEOUT, command: str = PDFTOTEXT) -> str:
    """Convert a PDF to plain text.

    The process is killed if it runs longer than ``timeout`` seconds.

    Raises:
        SubprocessError: If the tool is missing, exits non-zero, or times out.
    """
    source = Path(source)
    logger.info(f"Extracting text from {source}")
    try:
        result = subprocess.run(
            [command, "-q", str(source), "-"],
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise SubprocessError(f"{command} not found; is poppler-utils installed?") from e
    except subprocess.TimeoutExpired as e:
        raise SubprocessError(
            f"{command} timed out after {timeout:g}s on {source}",
            timed_out=True,
        ) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise SubprocessError(
            f"{command} failed on {source} (exit {result.returncode}): {stderr}",
            returncode=result.returncode,
        )
    return result.stdout.decode("utf-8", errors="replace")
