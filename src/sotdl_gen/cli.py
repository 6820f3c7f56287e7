#!/usr/bin/env python3
"""
Shadow of the Demon Lord character generator - command line.

Usage:
    sotdl-gen --level 3 --ancestry Goblin --novice-path Magician --seed 1575d911f49e59ee
    sotdl-gen --data-file Shadow_of_the_Demon_Lord.pdf
    sotdl-gen --data-file Shadow_of_the_Demon_Lord.pdf --analyze
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import load_settings
from .database import open_database
from .exceptions import GenerationError, SotDLGenError
from .extractors import ExtractionEngine, pdf_to_text
from .generator import CharacterGenerator
from .logutils import configure_logging, logger
from .models import CharacterOptions
from .names import load_name_table
from .rules import PathCategory


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="sotdl-gen",
        description="SotDL Character Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random character from the cached database
  sotdl-gen

  # Reproduce a character
  sotdl-gen --seed 1575d911f49e59ee --level 3

  # (Re)build the database from the core rules PDF
  sotdl-gen --data-file Shadow_of_the_Demon_Lord.pdf
        """,
    )
    parser.add_argument("-n", "--name", help="The character's full name; random if not specified")
    parser.add_argument("-g", "--gender", help="The character's gender")
    parser.add_argument("-l", "--level", type=int, help="The character's level (0-10); random if not specified")
    parser.add_argument("-A", "--ancestry", help="The character's 0th level path (e.g., Human)")
    parser.add_argument("-N", "--novice-path", help="The character's 1st level path (e.g., Rogue)")
    parser.add_argument("-E", "--expert-path", help="The character's 3rd level path (e.g., Fighter)")
    parser.add_argument("-M", "--master-path", help="The character's 7th level path (e.g., Myrmidon)")
    parser.add_argument("-s", "--seed", help="Character generation signature (hex)")
    parser.add_argument("-d", "--data-file", type=Path, help="SotDL Core Rules PDF file; rebuilds the database")
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Print what each tier template captured from --data-file and exit",
    )
    parser.add_argument("--log-level", help="One of {DEBUG, INFO, WARNING, ERROR}")
    return parser.parse_args(argv)


def analyze(source: Path, timeout: float) -> str:
    """Captured groups for every path and tier, as indented JSON."""
    engine = ExtractionEngine(pdf_to_text(source, timeout=timeout))
    report = {category.value: engine.analyze(category) for category in PathCategory}
    return json.dumps(report, indent=2)


def run(args: argparse.Namespace) -> str:
    """Carry out the requested action and return what should be printed."""
    try:
        settings = load_settings(
            source_document=args.data_file,
            log_level=args.log_level,
        )
    except ValidationError as e:
        raise SotDLGenError(f"Invalid settings: {e}") from e
    configure_logging(settings.log_level)

    if args.analyze:
        if not args.data_file:
            raise SotDLGenError("--analyze needs --data-file")
        return analyze(args.data_file, settings.pdftotext_timeout)

    settings.ensure_directories()
    db = open_database(
        settings.source_document,
        force_rebuild=args.data_file is not None,
        cache_file=settings.resolved_cache_file,
        names_file=settings.names_file,
        timeout=settings.pdftotext_timeout,
    )
    if args.data_file:
        return f"Database extracted from {args.data_file}."

    try:
        options = CharacterOptions(
            name=args.name,
            gender=args.gender,
            level=args.level,
            ancestry=args.ancestry,
            novice_path=args.novice_path,
            expert_path=args.expert_path,
            master_path=args.master_path,
            seed=args.seed,
        )
    except ValidationError as e:
        raise GenerationError(f"Invalid options: {e}") from e

    name_table = load_name_table(settings.names_file) if settings.names_file else None
    generator = CharacterGenerator(db, genders=settings.genders, name_table=name_table)
    character = generator.generate(options)
    return character.to_yaml() if args.format == "yaml" else character.to_json()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the sotdl-gen command."""
    args = parse_args(argv)
    try:
        output = run(args)
    except SotDLGenError as e:
        logger.debug("Aborting", exc_info=True)
        print(f"An error has occurred. Aborting: {e}", file=sys.stderr)
        sys.exit(1)
    print(output)


if __name__ == "__main__":
    main()
