"""Static rule data for Shadow of the Demon Lord character advancement.

Path names per category, the unlock levels each category carries, the level
gates for resolving a category, and the random attribute increase table.
"""

from __future__ import annotations

from enum import Enum


class PathCategory(str, Enum):
    """The four path slots a character advances through, in resolution order."""
    ANCESTRY = "ancestry"
    NOVICE = "novice"
    EXPERT = "expert"
    MASTER = "master"


ANCESTRIES = [
    "Human", "Dwarf", "Goblin", "Orc", "Changeling", "Clockwork",
]

NOVICE_PATHS = [
    "Priest", "Magician", "Warrior", "Rogue",
]

EXPERT_PATHS = [
    "Artificer", "Assassin", "Berserker", "Cleric", "Druid", "Fighter",
    "Oracle", "Paladin", "Ranger", "Scout", "Sorcerer", "Spellbinder", "Thief",
    "Warlock", "Witch", "Wizard",
]

MASTER_PATHS = [
    "Abjurer", "Acrobat", "Aeromancer", "Apocalyptist", "Arcanist", "Astromancer",
    "Avenger", "Bard", "Beastmaster", "Blade", "Brute", "Cavalier", "Champion",
    "Chaplain", "Chronomancer", "Conjurer", "Conqueror", "Death Dealer", "Defender",
    "Dervish", "Destroyer", "Diplomat", "Diviner", "Dreadnaught", "Duelist",
    "Enchantment", "Engineer", "Executioner", "Exorcist", "Explorer", "Geomancer",
    "Gladiator", "Gunslinger", "Healer", "Hexer", "Hydromancer", "Illusionist",
    "Infiltrator", "Inquisitor", "Jack-of-all-Trades", "Mage Knight", "Magus",
    "Marauder", "Miracle Worker", "Myrmidon", "Necromancer", "Poisoner", "Pyromancer",
    "Runesmith", "Savant", "Sentinel", "Shapeshifter", "Sharpshooter", "Stormbringer",
    "Technomancer", "Templar", "Tenebrist", "Thaumaturge", "Theurge", "Transmuter",
    "Traveler", "Weapon Master", "Woodwose", "Zealot",
]

PATH_NAMES: dict[PathCategory, list[str]] = {
    PathCategory.ANCESTRY: ANCESTRIES,
    PathCategory.NOVICE: NOVICE_PATHS,
    PathCategory.EXPERT: EXPERT_PATHS,
    PathCategory.MASTER: MASTER_PATHS,
}

# Unlock levels per category; the sets never overlap
TIER_LEVELS: dict[PathCategory, tuple[int, ...]] = {
    PathCategory.ANCESTRY: (0, 4),
    PathCategory.NOVICE: (1, 2, 5, 8),
    PathCategory.EXPERT: (3, 6, 9),
    PathCategory.MASTER: (7, 10),
}

# Minimum character level at which a category slot is resolved
CATEGORY_MIN_LEVEL: dict[PathCategory, int] = {
    PathCategory.ANCESTRY: 0,
    PathCategory.NOVICE: 1,
    PathCategory.EXPERT: 3,
    PathCategory.MASTER: 7,
}

MIN_LEVEL = 0
MAX_LEVEL = 10

DEFAULT_GENDERS = ["Male", "Female", "Other"]

# Only this ancestry earns the extra +1 on its starting tier
DEFAULT_ANCESTRY = "Human"

# Tier unlock level -> number of random +1 primary attribute increases
RANDOM_INCREASES = {1: 2, 3: 2, 7: 3}

PRIMARY_ATTRIBUTES = ("strength", "agility", "intellect", "will")

NOVICE_PROFESSIONS_GRANT = "Two professions of your choice; trade one for a language."

SURNAME_TYPE = "Surname"


def category_of(path_name: str) -> PathCategory | None:
    """Return the category a path name belongs to, or None if unknown."""
    for category, names in PATH_NAMES.items():
        if path_name in names:
            return category
    return None


def all_path_names() -> list[str]:
    """Every path name across all four categories, in category order."""
    return [name for names in PATH_NAMES.values() for name in names]
