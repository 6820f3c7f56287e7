"""Character Generator: build a seeded character from the path database.

Given a CharacterDatabase and a set of options, the generator reseeds its
random source, picks a level, then resolves the ancestry, novice, expert and
master slots in that order, folding every unlocked tier of each chosen path
into the character's attributes. Gender and name are settled last.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field

from .database import CharacterDatabase
from .exceptions import GenerationError, UnknownPathError
from .models import Attributes, Character, CharacterOptions, Level, NameList
from .names import NameSampler, load_name_table
from .rng import SeededRandom
from .rules import (
    CATEGORY_MIN_LEVEL,
    DEFAULT_ANCESTRY,
    DEFAULT_GENDERS,
    MAX_LEVEL,
    MIN_LEVEL,
    NOVICE_PROFESSIONS_GRANT,
    PATH_NAMES,
    PRIMARY_ATTRIBUTES,
    RANDOM_INCREASES,
    TIER_LEVELS,
    PathCategory,
)

logger = logging.getLogger("sotdl-gen")

# Options field carrying the requested path for each slot
SLOT_OPTIONS = {
    PathCategory.ANCESTRY: "ancestry",
    PathCategory.NOVICE: "novice_path",
    PathCategory.EXPERT: "expert_path",
    PathCategory.MASTER: "master_path",
}


@dataclass
class _Stats:
    """Running totals folded from every unlocked tier."""
    strength: int = 0
    agility: int = 0
    intellect: int = 0
    will: int = 0
    speed: int = 0
    power: int = 0
    damage: int = 0
    health: int = 0
    size: str = ""
    insanity: int = 0
    corruption: int = 0
    defense: int = 0
    perception: int = 0
    healing_rate: int = 0

    health_mod: int = 0
    defense_mod: int = 0
    perception_mod: int = 0
    healing_rate_multiplier: float = 0.0

    def freeze(self) -> Attributes:
        return Attributes(**{name: getattr(self, name) for name in Attributes.model_fields})


@dataclass
class _Draft:
    """Mutable working state for one generation run."""
    level: int
    paths: dict[PathCategory, str] = field(default_factory=dict)
    stats: _Stats = field(default_factory=_Stats)
    talents: list[str] = field(default_factory=list)
    lang_and_prof: list[str] = field(default_factory=list)


class CharacterGenerator:
    """Generate reproducible characters from a CharacterDatabase.

    One generator owns one SeededRandom. ``generate`` holds a lock for the
    whole run, so concurrent callers cannot interleave reseeding and draws.
    """

    def __init__(
        self,
        database: CharacterDatabase,
        *,
        genders: list[str] | None = None,
        name_table: list[NameList] | None = None,
        rng: SeededRandom | None = None,
    ) -> None:
        self.db = database
        self.genders = list(genders or DEFAULT_GENDERS)
        if name_table is None:
            name_table = database.names or load_name_table()
        self.names = NameSampler(name_table)
        self.rng = rng or SeededRandom()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, options: CharacterOptions | None = None) -> Character:
        """Generate one character.

        Args:
            options: Requested name, gender, level, paths and seed; anything
                left unset is drawn from the seeded random source.

        Returns:
            A frozen Character carrying the canonical seed that reproduces it.

        Raises:
            InvalidSeedError: If the seed is not valid hex.
            UnknownPathError: If a requested path is not in its category.
            GenerationError: If the requested level is outside 0-10.
        """
        options = options or CharacterOptions()
        with self._lock:
            seed = self.rng.seed(options.seed)

            logger.info("Generating attributes and characteristics.")
            draft = _Draft(level=self._resolve_level(options.level))
            for category in PathCategory:
                if draft.level >= CATEGORY_MIN_LEVEL[category]:
                    self._set_path(draft, category, getattr(options, SLOT_OPTIONS[category]))

            logger.info("Generating fluff.")
            gender = options.gender or self.rng.choice(self.genders)
            name = options.name or self.names.sample(
                self.rng, draft.paths[PathCategory.ANCESTRY], gender
            )

        return Character(
            name=name,
            gender=gender,
            ancestry=draft.paths.get(PathCategory.ANCESTRY, ""),
            novice_path=draft.paths.get(PathCategory.NOVICE, ""),
            expert_path=draft.paths.get(PathCategory.EXPERT, ""),
            master_path=draft.paths.get(PathCategory.MASTER, ""),
            level=draft.level,
            talents=tuple(draft.talents),
            languages_and_professions=tuple(draft.lang_and_prof),
            attributes=draft.stats.freeze(),
            seed=seed,
        )

    # ------------------------------------------------------------------
    # Slot resolution
    # ------------------------------------------------------------------

    def _resolve_level(self, level: int | None) -> int:
        if level is not None:
            if not MIN_LEVEL <= level <= MAX_LEVEL:
                raise GenerationError(f"Level {level} is outside {MIN_LEVEL}-{MAX_LEVEL}")
            return level
        return self.rng.uniform_int(MIN_LEVEL, MAX_LEVEL + 1)

    def _set_path(self, draft: _Draft, category: PathCategory, path_name: str | None) -> None:
        if category in draft.paths:
            return
        if not path_name:
            path_name = self.rng.choice(PATH_NAMES[category])
        elif path_name not in PATH_NAMES[category] or not self.db.has_path(path_name):
            raise UnknownPathError(path_name, category.value)
        draft.paths[category] = path_name
        logger.debug(f"{category.value} path: {path_name}")

        for tier, level in self.db.tiers(path_name):
            if tier > draft.level:
                break
            self._fold_tier(draft, category, tier, level)
            self._increase_attributes(draft.stats, tier, path_name)

        self._calc_derived(draft.stats)

    def _fold_tier(self, draft: _Draft, category: PathCategory, tier: int, level: Level) -> None:
        stats = draft.stats

        stats.strength += level.strength
        stats.agility += level.agility
        stats.intellect += level.intellect
        stats.will += level.will

        stats.perception_mod += level.perception_mod
        stats.defense_mod += level.defense_mod
        stats.health_mod += level.health_mod

        stats.speed += level.speed
        stats.power += level.power
        stats.damage += level.damage
        stats.insanity += level.insanity
        stats.corruption += level.corruption

        if level.size:
            stats.size = level.size
        if level.healing_rate:
            stats.healing_rate_multiplier = level.healing_rate

        draft.talents.extend(level.talents)
        if category is PathCategory.NOVICE and tier == TIER_LEVELS[PathCategory.NOVICE][0]:
            draft.lang_and_prof.append(NOVICE_PROFESSIONS_GRANT)
        draft.lang_and_prof.extend(level.lang_and_prof)

    def _increase_attributes(self, stats: _Stats, tier: int, path_name: str) -> None:
        n = RANDOM_INCREASES.get(tier, 0)
        if tier == 0 and path_name == DEFAULT_ANCESTRY:
            n += 1
        for _ in range(n):
            attr = self.rng.choice(PRIMARY_ATTRIBUTES)
            setattr(stats, attr, getattr(stats, attr) + 1)

    @staticmethod
    def _calc_derived(stats: _Stats) -> None:
        stats.perception = stats.intellect + stats.perception_mod
        stats.defense = stats.agility + stats.defense_mod
        stats.health = stats.strength + stats.health_mod
        stats.healing_rate = math.floor(stats.health * stats.healing_rate_multiplier)
