"""
Field parsers that fold captured rulebook text into a Level record.

Every parser receives text that has already been through ``normalize_text``,
so phrases split across wrapped lines still match.
"""

import re

from ..models import Level

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Field name -> phrase pattern; every occurrence in a block counts
PRIMARY_PATTERNS: dict[str, re.Pattern[str]] = {
    "strength": re.compile(r"Strength (?P<n>\d+)"),
    "agility": re.compile(r"Agility (?P<n>\d+)"),
    "intellect": re.compile(r"Intellect (?P<n>\d+)"),
    "will": re.compile(r"Will (?P<n>\d+)"),
    "perception_mod": re.compile(r"Perception\s*(?:by|\+)\s*(?P<n>\d+)"),
    "defense_mod": re.compile(r"Defense\s*(?:by|\+)\s*(?P<n>\d+)"),
    "health_mod": re.compile(r"Health\s*(?:by|\+)\s*(?P<n>\d+)"),
    "power": re.compile(r"Power\s*(?:by|\+)\s*(?P<n>\d+)"),
}

BONUS_PATTERN = re.compile(r"score\s*\+\s*(\d+)")

# Base attribute phrase -> derived modifier it feeds
DERIVED_BASES = {
    "equals your Strength": "health_mod",
    "equals your Agility": "defense_mod",
    "equals your Intellect": "perception_mod",
}

QUARTER_HEALTH = "one-quarter your Health"
QUARTER_HEALTH_RATE = 0.25

LANG_PROF_PATTERN = re.compile(r"Languages and Professions (.*?\.)")


def normalize_text(text: str | None) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def parse_primary(level: Level, text: str) -> None:
    """Add every attribute and characteristic phrase found in the block."""
    for field, pattern in PRIMARY_PATTERNS.items():
        for m in pattern.finditer(text):
            setattr(level, field, getattr(level, field) + int(m.group("n")))


def parse_derived(level: Level, text: str) -> None:
    """Handle "equals your <Attribute> score + N" sentences."""
    m = BONUS_PATTERN.search(text)
    bonus = int(m.group(1)) if m else 0
    for phrase, field in DERIVED_BASES.items():
        if phrase in text:
            setattr(level, field, getattr(level, field) + bonus)


def parse_healing_rate(level: Level, text: str) -> None:
    if QUARTER_HEALTH in text:
        level.healing_rate = QUARTER_HEALTH_RATE


def parse_talents(level: Level, text: str) -> None:
    """Split out the languages/professions grant and keep the rest as a talent."""
    m = LANG_PROF_PATTERN.search(text)
    if m:
        level.lang_and_prof.append(m.group(1))
        text = text.replace(m.group(0), "", 1)
    text = normalize_text(text)
    if text:
        level.talents.append(text)


def parse_int(text: str) -> int:
    """Parse a scalar characteristic. Raises ValueError on anything non-numeric."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"Expected an integer, got {text!r}")
    return int(text)
