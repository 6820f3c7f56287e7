"""
Data models for sotdl-gen.
"""

from __future__ import annotations

import json

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .rules import MAX_LEVEL, MIN_LEVEL


class Level(BaseModel):
    """The stat and talent payload one path grants at one unlock level.

    Numeric fields are deltas, summed across every unlocked tier. ``size`` and
    ``healing_rate`` are overwritten by the highest unlocked tier that sets them.
    """
    strength: int = 0
    agility: int = 0
    intellect: int = 0
    will: int = 0
    perception_mod: int = 0
    defense_mod: int = 0
    health_mod: int = 0
    healing_rate: float = 0.0
    speed: int = 0
    power: int = 0
    damage: int = 0
    insanity: int = 0
    corruption: int = 0
    size: str = ""
    lang_and_prof: list[str] = Field(default_factory=list)
    talents: list[str] = Field(default_factory=list)


class NameList(BaseModel):
    """One block of the name table: names of one type for one ethnicity."""
    ancestry: str
    ethnicity: str
    type: str = Field(description="A gender label, or 'Surname'")
    names: list[str] = Field(default_factory=list)


class Attributes(BaseModel):
    """Primary scores and derived characteristics of a finished character."""
    model_config = ConfigDict(frozen=True)

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


class Character(BaseModel):
    """A generated character. Frozen once the generator hands it back."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    gender: str = ""
    ancestry: str = ""
    novice_path: str = ""
    expert_path: str = ""
    master_path: str = ""
    level: int = 0
    talents: tuple[str, ...] = ()
    languages_and_professions: tuple[str, ...] = ()
    attributes: Attributes = Field(default_factory=Attributes)
    seed: str = Field(default="", description="Canonical hex seed that reproduces this character")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Indented JSON with a stable key order."""
        return json.dumps(self.to_dict(), indent=2)

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


class CharacterOptions(BaseModel):
    """Generation input. Every option is optional and defaults independently."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, description="Full name; sampled if omitted")
    gender: str | None = Field(default=None, description="Gender; drawn from the configured list if omitted")
    level: int | None = Field(default=None, ge=MIN_LEVEL, le=MAX_LEVEL, description="Character level 0-10")
    ancestry: str | None = Field(default=None, description="Level 0 path (e.g. Human)")
    novice_path: str | None = Field(default=None, description="Level 1 path (e.g. Rogue)")
    expert_path: str | None = Field(default=None, description="Level 3 path (e.g. Fighter)")
    master_path: str | None = Field(default=None, description="Level 7 path (e.g. Myrmidon)")
    seed: str | None = Field(default=None, description="Hex generation seed")
    data_file: str | None = Field(default=None, description="Source rulebook PDF; forces a database rebuild")
    log_level: str | None = Field(default=None, description="One of DEBUG, INFO, WARNING, ERROR")
