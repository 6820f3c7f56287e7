"""
SotDL Character Generation Service
An MCP server exposing the character generator, built with FastMCP.
"""

import json
import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from .config import load_settings
from .exceptions import SotDLGenError
from .logutils import configure_logging
from .rules import PATH_NAMES, PathCategory
from .service import GenerationService

logger = logging.getLogger("sotdl-gen")


settings = load_settings()
configure_logging(settings.log_level)
settings.ensure_directories()
service = GenerationService(settings)
logger.debug(f"📂 Database cache: {settings.resolved_cache_file}")

mcp = FastMCP(
    name="sotdl-gen"
)


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def generate_character(
    name: Annotated[str | None, Field(description="Character's full name; sampled if omitted")] = None,
    gender: Annotated[str | None, Field(description="Character's gender")] = None,
    level: Annotated[int | None, Field(description="Character level 0-10")] = None,
    ancestry: Annotated[str | None, Field(description="Ancestry (e.g. Human, Goblin)")] = None,
    novice_path: Annotated[str | None, Field(description="Novice path (e.g. Rogue)")] = None,
    expert_path: Annotated[str | None, Field(description="Expert path (e.g. Fighter)")] = None,
    master_path: Annotated[str | None, Field(description="Master path (e.g. Myrmidon)")] = None,
    seed: Annotated[str | None, Field(description="Hex seed; reuse one to reproduce a character")] = None,
    data_file: Annotated[str | None, Field(description="Rulebook PDF to rebuild the database from before generating")] = None,
    log_level: Annotated[str | None, Field(description="One of DEBUG, INFO, WARNING, ERROR")] = None,
) -> str:
    """Generate a Shadow of the Demon Lord character as JSON."""
    try:
        return service.generate(
            name=name,
            gender=gender,
            level=level,
            ancestry=ancestry,
            novice_path=novice_path,
            expert_path=expert_path,
            master_path=master_path,
            seed=seed,
            data_file=data_file,
            log_level=log_level,
        )
    except SotDLGenError as e:
        logger.error(f"❌ Character generation failed: {e}")
        return f"Error: {e}"


@mcp.tool
def list_paths(
    category: Annotated[str, Field(description="One of ancestry, novice, expert, master")],
) -> str:
    """List the path names available in a category."""
    try:
        return json.dumps(PATH_NAMES[PathCategory(category.strip().lower())])
    except ValueError:
        return f"Error: unknown category '{category}'"


@mcp.tool
def rebuild_database() -> str:
    """Re-extract the character database from the configured rulebook PDF."""
    try:
        count = service.rebuild()
    except SotDLGenError as e:
        logger.error(f"❌ Database rebuild failed: {e}")
        return f"Error: {e}"
    return f"🌟 Rebuilt character database with {count} paths"


logger.debug("✅ All tools successfully registered. SotDL generator server running! 🎲")

def main() -> None:
    """Main entry point for the SotDL generation server."""
    mcp.run()

if __name__ == "__main__":
    main()
