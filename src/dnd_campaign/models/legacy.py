"""Legacy flat record schemas.

DEPRECATED: The first version of the store kept precomputed skill and
saving throw totals next to proficiency lists, embedded notes in the
campaign document, and tracked a single hit dice pool per character.
These schemas exist so old documents can still be read and upgraded
with :mod:`dnd_campaign.engine.migrate`. New code should use the
records in :mod:`dnd_campaign.models.creature` and
:mod:`dnd_campaign.models.campaign`.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator

from dnd_campaign.core.constants import MAX_PROFICIENCY_BONUS
from dnd_campaign.models.common import Record, Source
from dnd_campaign.models.creature import (
    AbilityScore,
    DeathSaves,
    FeetDistance,
    HitPoints,
    Personality,
    Physical,
    Speed,
    Treasure,
    require_every_ability,
)
from dnd_campaign.models.enums import (
    Ability,
    Alignment,
    DamageType,
    NoteVisibility,
    Sense,
    Size,
    Skill,
)
from dnd_campaign.models.items import Range, WeaponDamage
from dnd_campaign.models.spells import Spell


class LegacyCreature(Record):
    """Flat creature shape with precomputed totals.

    Condition lists are kept as plain strings: the old tag list contained
    values that are not conditions, and the upgrade drops them.
    """

    name: str = Field(min_length=1, max_length=100)
    size: Size = Size.MEDIUM
    speed: Speed = Field(default_factory=Speed)
    ability_scores: dict[Ability, AbilityScore]
    hit_points: HitPoints
    armor_class: Annotated[int, Field(ge=0, le=50)]
    passive_perception: int | None = None
    skills: dict[Skill, int] = Field(default_factory=dict)
    skill_proficiencies: list[Skill] = Field(default_factory=list)
    skill_expertises: list[Skill] = Field(default_factory=list)
    saving_throws: dict[Ability, int] = Field(default_factory=dict)
    saving_throw_proficiencies: list[Ability] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    senses: dict[Sense, FeetDistance] = Field(default_factory=dict)
    conditions: list[str] = Field(default_factory=list)
    condition_immunities: list[str] = Field(default_factory=list)
    damage_immunities: list[DamageType] = Field(default_factory=list)
    damage_resistances: list[DamageType] = Field(default_factory=list)
    damage_vulnerabilities: list[DamageType] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @field_validator("ability_scores", mode="after")
    @classmethod
    def validate_all_abilities(cls, v: dict[Ability, int]) -> dict[Ability, int]:
        return require_every_ability(v)


class LegacyRace(Record):
    name: str = Field(min_length=1, max_length=50)
    subtype: str | None = None
    source: Source | None = None


class LegacyClass(Record):
    name: str = Field(min_length=1, max_length=50)
    spellcasting_ability: Ability | None = None
    level: Annotated[int, Field(ge=1, le=20)]
    source: Source | None = None


class LegacyHitDice(Record):
    """Single hit dice pool shared by all classes."""

    current: Annotated[int, Field(ge=0)]
    max: Annotated[int, Field(ge=0)]


class LegacyItem(Record):
    name: str = Field(min_length=1, max_length=200)
    description: str = ""
    is_magic: bool = False
    weight: Annotated[float, Field(ge=0)] = 0
    source: Source | None = None


class LegacyWeapon(LegacyItem):
    category: str = Field(min_length=1, max_length=50)
    damage: WeaponDamage
    range: Range = Field(default_factory=Range)
    throw_range: Range = Field(default_factory=Range)
    is_equipped: bool = False


class LegacyEquipment(LegacyItem):
    quantity: Annotated[int, Field(ge=0)] = 1


class LegacyFeat(Record):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    source: Source | None = None


class LegacyCharacter(LegacyCreature):
    """Flat character shape with a single hit dice pool."""

    nickname: str | None = None
    xp: Annotated[int, Field(ge=0)] = 0
    race: LegacyRace
    classes: list[LegacyClass] = Field(min_length=1)
    alignment: Alignment = Alignment.TRUE_NEUTRAL
    proficiency_bonus: Annotated[int, Field(ge=0, le=MAX_PROFICIENCY_BONUS)] = 2
    has_inspiration: bool = False
    hit_dice: LegacyHitDice
    death_saves: DeathSaves = Field(default_factory=DeathSaves)
    physical: Physical = Field(default_factory=Physical)
    personality: Personality = Field(default_factory=Personality)
    feats: list[LegacyFeat] = Field(default_factory=list)
    weapon_proficiencies: list[str] = Field(default_factory=list)
    armor_proficiencies: list[str] = Field(default_factory=list)
    tool_proficiencies: list[str] = Field(default_factory=list)
    spells: list[Spell] | None = None
    weapons: list[LegacyWeapon] = Field(default_factory=list)
    equipment: list[LegacyEquipment] = Field(default_factory=list)
    treasure: Treasure = Field(default_factory=Treasure)


class LegacyNote(Record):
    """Note embedded in a legacy campaign document.

    Attributes:
        author_user_id: Creator and owner of the note.
        title: Optional title.
        body: Note content.
        timestamp: Creation time in epoch milliseconds.
        visibility: Who can view the note.
    """

    author_user_id: str = Field(min_length=1)
    title: str | None = None
    body: str = ""
    timestamp: Annotated[int, Field(ge=0)]
    visibility: NoteVisibility = NoteVisibility.OWNERS


class LegacyCampaign(Record):
    """Campaign document with embedded notes and world map URLs."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    world_map_urls: list[str] = Field(default_factory=list)
    dm_user_ids: list[str] = Field(default_factory=list)
    dm_invite_emails: list[str] = Field(default_factory=list)
    dm_notes: list[LegacyNote] = Field(default_factory=list)
    player_user_ids: list[str] = Field(default_factory=list)
    player_invite_emails: list[str] = Field(default_factory=list)
    player_notes: list[LegacyNote] = Field(default_factory=list)


__all__ = [
    "LegacyCreature",
    "LegacyRace",
    "LegacyClass",
    "LegacyHitDice",
    "LegacyItem",
    "LegacyWeapon",
    "LegacyEquipment",
    "LegacyFeat",
    "LegacyCharacter",
    "LegacyNote",
    "LegacyCampaign",
]
