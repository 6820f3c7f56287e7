"""
Tier templates for locating path advancement text in the rulebook.

Each category maps unlock level -> regex template. ``%s`` is replaced by the
regex-escaped path name. Named groups select the pieces of text handed to the
field parsers:

    Attr  starting/primary attribute block
    Char  characteristics block
    Desc  free text up to the next blank line (talents, languages, professions)
    Perc, Def, Hlth  derived characteristic sentences
    HR    healing rate sentence
    Sz, Spd, Pwr, Dmg, Ins, Cor  scalar characteristics
"""

import re

from ..rules import PathCategory

ANCESTRY_LEVEL_PATTERNS = {
    0: (
        r"\s*Creating An? %s.*?"
        r"Starting Attribute Scores (?P<Attr>.*?)"
        r"Perception (?P<Perc>.*?)\n"
        r"Defense (?P<Def>.*?)\n"
        r"Health (?P<Hlth>.*?)\n"
        r"Healing Rate (?P<HR>.*?)\n"
        r"Size (?P<Sz>.*?), Speed (?P<Spd>.*?), Power (?P<Pwr>.*?)\n"
        r"Damage (?P<Dmg>.*?), Insanity (?P<Ins>.*?), Corruption (?P<Cor>.*?)\n"
        r"(?P<Desc>.*?)\n\n"
    ),
    4: (
        r"Level 4 Expert %s.*?"
        r"Characteristics (?P<Char>.*?)\n"
        r"(?P<Desc>.*?)\n\n"
    ),
}

NOVICE_PATH_LEVEL_PATTERNS = {
    1: r"\s*Level 1 %s.*?Attributes (?P<Attr>.*?)\nCharacteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
    2: r"Level 2 %s.*?Characteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
    5: r"\s*Level 5 Expert %s.*?Characteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
    8: r"\s*Level 8\s*Master %s.*?Characteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
}

EXPERT_PATH_LEVEL_PATTERNS = {
    3: r"Level 3 %s.*?Attributes (?P<Attr>.*?)\nCharacteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
    6: r"Level 6 %s.*?Characteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
    9: r"\s*Level 9\s*Master %s.*?Characteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
}

MASTER_PATH_LEVEL_PATTERNS = {
    7: r"Level 7 %s.*?Attributes (?P<Attr>.*?)\nCharacteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
    10: r"Level 10 %s.*?Characteristics (?P<Char>.*?)\n(?P<Desc>.*?)\n\n",
}

LEVEL_PATTERNS: dict[PathCategory, dict[int, str]] = {
    PathCategory.ANCESTRY: ANCESTRY_LEVEL_PATTERNS,
    PathCategory.NOVICE: NOVICE_PATH_LEVEL_PATTERNS,
    PathCategory.EXPERT: EXPERT_PATH_LEVEL_PATTERNS,
    PathCategory.MASTER: MASTER_PATH_LEVEL_PATTERNS,
}


def compile_patterns(path_name: str, templates: dict[int, str]) -> dict[int, re.Pattern[str]]:
    """Instantiate every tier template for one path, in ascending tier order."""
    return {
        tier: re.compile(templates[tier] % re.escape(path_name), re.DOTALL)
        for tier in sorted(templates)
    }
