"""
Extraction Engine for rulebook text.

Instantiates the tier templates for each path name, matches them against the
full plain-text rulebook, and folds every captured group into the path's
Level records. The document's layout is assumed fixed: a tier that cannot be
found, or a scalar that is not a number, aborts the whole extraction.
"""

import logging
import re
from typing import Callable

from ..exceptions import ExtractionError
from ..models import Level
from ..rules import PATH_NAMES, PathCategory
from .fields import (
    normalize_text,
    parse_derived,
    parse_healing_rate,
    parse_int,
    parse_primary,
    parse_talents,
)
from .patterns import LEVEL_PATTERNS, compile_patterns

logger = logging.getLogger("sotdl-gen")

# Scalar group name -> Level field it adds to
SCALAR_GROUPS = {
    "Ins": "insanity",
    "Cor": "corruption",
    "Pwr": "power",
    "Spd": "speed",
    "Dmg": "damage",
}


def _parse_size(level: Level, text: str) -> None:
    level.size = text


GROUP_PARSERS: dict[str, Callable[[Level, str], None]] = {
    "Attr": parse_primary,
    "Char": parse_primary,
    "Perc": parse_derived,
    "Def": parse_derived,
    "Hlth": parse_derived,
    "HR": parse_healing_rate,
    "Sz": _parse_size,
}

# Processed after every other group of the same match
DESC_GROUP = "Desc"


class ExtractionEngine:
    """Parse path advancement records out of a plain-text rulebook.

    Usage:
        engine = ExtractionEngine(document_text)
        engine.extract(db.paths, PathCategory.NOVICE)
    """

    def __init__(self, document: str):
        self.document = document

    def extract(self, paths: dict[str, dict[int, Level]], category: PathCategory) -> None:
        """Populate the pre-registered Level records of every path in a category.

        Args:
            paths: Path name -> tier -> Level, already holding empty records
                for every tier of the category.
            category: Which category's names and templates to use.

        Raises:
            ExtractionError: On the first tier that fails to match or parse.
        """
        templates = LEVEL_PATTERNS[category]
        for path_name in PATH_NAMES[category]:
            self.extract_path(path_name, templates, paths[path_name])
        logger.info(f"Extracted {len(PATH_NAMES[category])} {category.value} paths")

    def extract_path(self, path_name: str, templates: dict[int, str], tiers: dict[int, Level]) -> None:
        for tier, pattern in compile_patterns(path_name, templates).items():
            m = pattern.search(self.document)
            if m is None:
                raise ExtractionError(
                    f"No match for {path_name} level {tier}",
                    path_name=path_name,
                    tier=tier,
                    details={"pattern": pattern.pattern},
                )
            self._fold_match(path_name, tier, m, tiers[tier])

    def _fold_match(self, path_name: str, tier: int, m: re.Match[str], level: Level) -> None:
        desc = None
        for name, raw in m.groupdict().items():
            text = normalize_text(raw)
            if name == DESC_GROUP:
                desc = text
            elif name in SCALAR_GROUPS:
                field = SCALAR_GROUPS[name]
                try:
                    value = parse_int(text)
                except ValueError as e:
                    raise ExtractionError(
                        f"Non-numeric {field} for {path_name} level {tier}: {text!r}",
                        path_name=path_name,
                        tier=tier,
                    ) from e
                setattr(level, field, getattr(level, field) + value)
            elif name in GROUP_PARSERS:
                GROUP_PARSERS[name](level, text)
            logger.debug(f"{path_name} :: {name} :: {tier} :: {text}")
        if desc is not None:
            parse_talents(level, desc)

    def analyze(self, category: PathCategory) -> dict[str, dict[int, dict[str, str] | None]]:
        """Report what each tier template captured, without building records.

        Returns path name -> tier -> normalized group texts, with None for a
        tier whose template found no match.
        """
        report: dict[str, dict[int, dict[str, str] | None]] = {}
        templates = LEVEL_PATTERNS[category]
        for path_name in PATH_NAMES[category]:
            tiers: dict[int, dict[str, str] | None] = {}
            for tier, pattern in compile_patterns(path_name, templates).items():
                m = pattern.search(self.document)
                tiers[tier] = (
                    {name: normalize_text(raw) for name, raw in m.groupdict().items()}
                    if m else None
                )
            report[path_name] = tiers
        return report
