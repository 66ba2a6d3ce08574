"""Pydantic V2 schemas for creatures and player characters.

Creatures store raw inputs only: ability scores, proficiency flags and
misc modifiers. Display values (modifiers, skill and saving throw
totals, passive perception) are never stored; they are derived on read
by :mod:`dnd_campaign.engine.derived_stats`.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import ConfigDict, Field, StrictInt, field_validator, model_validator

from dnd_campaign.core.constants import (
    DEFAULT_PROFICIENCY_BONUS,
    DEFAULT_SPEED,
    MAX_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    MAX_DEATH_SAVES,
    MAX_PROFICIENCY_BONUS,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
)
from dnd_campaign.models.common import (
    Entries,
    Owned,
    Record,
    Shareable,
    Sourced,
    Timestamped,
)
from dnd_campaign.models.enums import (
    Ability,
    Alignment,
    Condition,
    DamageType,
    HitDieSides,
    Sense,
    Size,
    Skill,
)
from dnd_campaign.models.items import Equipment, Feat, Weapon
from dnd_campaign.models.spells import Spell


# =============================================================================
# Type Definitions
# =============================================================================

AbilityScore = Annotated[
    StrictInt,
    Field(
        ge=MIN_ABILITY_SCORE,
        le=MAX_ABILITY_SCORE,
        description=f"Ability score ({MIN_ABILITY_SCORE}-{MAX_ABILITY_SCORE})",
    ),
]

FeetDistance = Annotated[int, Field(ge=0, le=10000, description="Distance in feet")]


def require_every_ability(scores: dict[Ability, int]) -> dict[Ability, int]:
    """Check that a score mapping names all six abilities.

    Args:
        scores: Ability scores keyed by ability.

    Returns:
        The scores, unchanged.

    Raises:
        ValueError: If any ability is missing.
    """
    missing = [a.value for a in Ability if a not in scores]
    if missing:
        msg = f"Missing ability scores: {', '.join(missing)}"
        raise ValueError(msg)
    return scores


# =============================================================================
# Creature Components
# =============================================================================


class Speed(Record):
    """Movement speeds in feet. Walking is the speed shown on the sheet."""

    model_config = ConfigDict(frozen=True)

    walking: FeetDistance = DEFAULT_SPEED
    climbing: FeetDistance = 0
    swimming: FeetDistance = 0
    flying: FeetDistance = 0
    burrowing: FeetDistance = 0


class HitPoints(Record):
    """Current, temporary, and maximum hit points."""

    current: int = Field(description="Current hit points")
    temporary: Annotated[int, Field(ge=0, description="Temporary hit points")] = 0
    max: Annotated[int, Field(ge=1, description="Maximum hit points")]

    @property
    def effective(self) -> int:
        """Hit points available before dropping to 0, including temporary."""
        return max(0, self.current) + self.temporary

    @property
    def is_bloodied(self) -> bool:
        return 0 < self.current <= self.max // 2


class SkillProficiency(Record):
    """Proficiency flags for one skill.

    Expertise implies proficiency: a record with ``is_expertise`` set is
    always proficient.
    """

    model_config = ConfigDict(frozen=True)

    is_proficient: bool = False
    is_expertise: bool = False
    misc_modifier: StrictInt | None = Field(
        default=None,
        description="Optional miscellaneous modifier to add/subtract",
    )

    @model_validator(mode="before")
    @classmethod
    def expertise_implies_proficiency(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("is_expertise"):
            return {**data, "is_proficient": True}
        return data


class SavingThrowProficiency(Record):
    """Proficiency flag for one saving throw."""

    model_config = ConfigDict(frozen=True)

    is_proficient: bool = False
    misc_modifier: StrictInt | None = Field(
        default=None,
        description="Optional miscellaneous modifier to add/subtract",
    )


# =============================================================================
# Creature
# =============================================================================


class Creature(Owned, Shareable, Timestamped, Sourced):
    """A creature: monster, NPC, or the common part of a player character.

    Attributes:
        name: Creature name.
        size: Current size.
        speed: Movement speeds.
        initiative: Initiative rolled for the current encounter, if any.
        ability_scores: All six ability scores.
        hit_points: Hit point info.
        armor_class: Current armor class (depends on equipped items, stored as-is).
        skills: Proficiency flags per skill. Missing skills are not proficient.
        saving_throws: Proficiency flags per ability. Missing abilities are not proficient.
        languages: Understood languages.
        senses: Special senses and their ranges in feet.
        conditions: Current conditions.
        condition_immunities: Conditions the creature is immune to.
        damage_immunities: Damage types the creature is immune to.
        damage_resistances: Damage types the creature resists.
        damage_vulnerabilities: Damage types the creature is vulnerable to.
        tags: Creature tags (e.g., 'goblinoid').
    """

    name: str = Field(min_length=1, max_length=100, description="Creature name")
    size: Size = Field(default=Size.MEDIUM, description="Current size")
    speed: Speed = Field(default_factory=Speed, description="Movement speeds")
    initiative: int | None = Field(default=None, description="Current initiative")
    ability_scores: dict[Ability, AbilityScore] = Field(description="Ability scores")
    hit_points: HitPoints = Field(description="Hit point info")
    armor_class: Annotated[int, Field(ge=0, le=50, description="Armor class")]
    skills: dict[Skill, SkillProficiency] = Field(
        default_factory=dict,
        validate_default=True,
    )
    saving_throws: dict[Ability, SavingThrowProficiency] = Field(
        default_factory=dict,
        validate_default=True,
    )
    languages: list[str] = Field(default_factory=list)
    senses: dict[Sense, FeetDistance] = Field(default_factory=dict)
    conditions: list[Condition] = Field(default_factory=list)
    condition_immunities: list[Condition] = Field(default_factory=list)
    damage_immunities: list[DamageType] = Field(default_factory=list)
    damage_resistances: list[DamageType] = Field(default_factory=list)
    damage_vulnerabilities: list[DamageType] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @field_validator("ability_scores", mode="after")
    @classmethod
    def validate_all_abilities(cls, v: dict[Ability, int]) -> dict[Ability, int]:
        return require_every_ability(v)

    @field_validator("skills", mode="after")
    @classmethod
    def fill_missing_skills(
        cls, v: dict[Skill, SkillProficiency]
    ) -> dict[Skill, SkillProficiency]:
        """Store an explicit entry for every skill."""
        return {skill: v.get(skill, SkillProficiency()) for skill in Skill}

    @field_validator("saving_throws", mode="after")
    @classmethod
    def fill_missing_saving_throws(
        cls, v: dict[Ability, SavingThrowProficiency]
    ) -> dict[Ability, SavingThrowProficiency]:
        """Store an explicit entry for every ability."""
        return {ability: v.get(ability, SavingThrowProficiency()) for ability in Ability}

    def has_condition(self, condition: Condition) -> bool:
        return condition in self.conditions

    def is_immune_to(self, damage_type: DamageType) -> bool:
        return damage_type in self.damage_immunities

    def resists(self, damage_type: DamageType) -> bool:
        return damage_type in self.damage_resistances

    def is_vulnerable_to(self, damage_type: DamageType) -> bool:
        return damage_type in self.damage_vulnerabilities

    @property
    def proficient_skills(self) -> list[Skill]:
        return [skill for skill, prof in self.skills.items() if prof.is_proficient]


# =============================================================================
# Character Building Blocks
# =============================================================================


class RaceSpeed(Record):
    walk: FeetDistance | None = None
    fly: FeetDistance | None = None


class Race(Sourced):
    """A playable race."""

    name: str = Field(min_length=1, max_length=50, description="Race name")
    subtype: str | None = Field(default=None, max_length=50, description="Subrace")
    size: list[Size] | None = Field(default=None, description="Allowed sizes")
    speed: RaceSpeed | None = Field(default=None, description="Base speeds")
    entries: Entries = Field(default_factory=list, description="Racial traits")

    @property
    def display_name(self) -> str:
        if self.subtype:
            return f"{self.subtype} {self.name}"
        return self.name


class ClassFeature(Sourced):
    """A feature gained from a class at some level."""

    name: str = Field(min_length=1, max_length=100, description="Feature name")
    level: Annotated[int, Field(ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL)]
    entries: Entries = Field(default_factory=list, description="Feature rules text")


class HitDice(Record):
    """Hit dice of one class: die size and how many remain unspent."""

    sides: HitDieSides = Field(description="Hit die size")
    current: Annotated[int, Field(ge=0, description="Unspent hit dice")]


class CharacterClass(Sourced):
    """One class a character has levels in.

    Attributes:
        name: Class name (e.g., 'Bard').
        spellcasting_ability: Ability used for spells of this class.
        level: Levels in this class.
        hit_dice: Hit die size and remaining dice (out of ``level``).
        features: Features gained so far.
    """

    name: str = Field(min_length=1, max_length=50, description="Class name")
    spellcasting_ability: Ability | None = Field(
        default=None,
        description="Spellcasting ability",
    )
    level: Annotated[int, Field(ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL)]
    hit_dice: HitDice = Field(description="Hit dice")
    features: list[ClassFeature] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_hit_dice(self) -> "CharacterClass":
        """Remaining hit dice can't exceed the class level."""
        if self.hit_dice.current > self.level:
            msg = (
                f"{self.name} has {self.hit_dice.current} hit dice remaining "
                f"but only {self.level} levels"
            )
            raise ValueError(msg)
        return self


class DeathSaves(Record):
    successes: Annotated[int, Field(ge=0, le=MAX_DEATH_SAVES)] = 0
    failures: Annotated[int, Field(ge=0, le=MAX_DEATH_SAVES)] = 0

    @property
    def is_stable(self) -> bool:
        return self.successes >= MAX_DEATH_SAVES

    @property
    def is_dead(self) -> bool:
        return self.failures >= MAX_DEATH_SAVES


class Physical(Record):
    """Physical description. Height in inches, weight in pounds."""

    age: Annotated[int, Field(ge=0)] = 0
    eyes: str = ""
    hair: str = ""
    skin: str = ""
    height: Annotated[int, Field(ge=0)] = 0
    weight: Annotated[int, Field(ge=0)] = 0
    description: str = Field(default="", max_length=5000)


class Personality(Record):
    traits: list[str] = Field(default_factory=list)
    ideals: list[str] = Field(default_factory=list)
    bonds: list[str] = Field(default_factory=list)
    flaws: list[str] = Field(default_factory=list)
    backstory: str = Field(default="", max_length=20000)


class Treasure(Record):
    """Coins carried. Electrum is not tracked."""

    platinum: Annotated[int, Field(ge=0)] = 0
    gold: Annotated[int, Field(ge=0)] = 0
    silver: Annotated[int, Field(ge=0)] = 0
    copper: Annotated[int, Field(ge=0)] = 0

    @property
    def total_copper(self) -> int:
        return self.platinum * 1000 + self.gold * 100 + self.silver * 10 + self.copper

    @property
    def total_gp(self) -> float:
        return self.total_copper / 100


# =============================================================================
# Character
# =============================================================================


class Character(Creature):
    """A player character.

    Attributes:
        is_active: Whether this is the player's active character. A player
            has at most one active character per campaign.
        nickname: Optional nickname.
        xp: Current experience points.
        race: Character race.
        classes: Classes the character has levels in.
        alignment: Moral alignment.
        proficiency_bonus: Current proficiency bonus.
        has_inspiration: Whether the character is inspired.
        is_jack_of_all_trades: Adds half the proficiency bonus to checks
            for skills the character is not proficient in.
        death_saves: Death saving throw tallies.
        physical: Physical description.
        personality: Personality description.
        feats: Feats taken.
        weapon_proficiencies: Weapon proficiencies (free text).
        armor_proficiencies: Armor proficiencies (free text).
        tool_proficiencies: Tool proficiencies (free text).
        spells: Known or prepared spells.
        weapons: Weapons, equipped or not.
        equipment: Carried equipment.
        treasure: Coins.
    """

    is_active: bool = Field(default=False, description="Active character in campaign")
    nickname: str | None = Field(default=None, max_length=100)
    xp: Annotated[int, Field(ge=0, description="Experience points")] = 0
    race: Race = Field(description="Character race")
    classes: list[CharacterClass] = Field(
        min_length=1,
        max_length=13,
        description="Character classes",
    )
    alignment: Alignment = Field(default=Alignment.TRUE_NEUTRAL)
    proficiency_bonus: Annotated[StrictInt, Field(ge=0, le=MAX_PROFICIENCY_BONUS)] = (
        DEFAULT_PROFICIENCY_BONUS
    )
    has_inspiration: bool = False
    is_jack_of_all_trades: bool = False
    death_saves: DeathSaves = Field(default_factory=DeathSaves)
    physical: Physical = Field(default_factory=Physical)
    personality: Personality = Field(default_factory=Personality)
    feats: list[Feat] = Field(default_factory=list)
    weapon_proficiencies: list[str] = Field(default_factory=list)
    armor_proficiencies: list[str] = Field(default_factory=list)
    tool_proficiencies: list[str] = Field(default_factory=list)
    spells: list[Spell] | None = Field(default=None)
    weapons: list[Weapon] = Field(default_factory=list)
    equipment: list[Equipment] = Field(default_factory=list)
    treasure: Treasure = Field(default_factory=Treasure)

    @model_validator(mode="after")
    def validate_total_level(self) -> "Character":
        """Class levels can't add up past the level cap."""
        if self.total_level > MAX_CHARACTER_LEVEL:
            msg = f"Total level {self.total_level} exceeds {MAX_CHARACTER_LEVEL}"
            raise ValueError(msg)
        return self

    @property
    def total_level(self) -> int:
        """Sum of all class levels."""
        return sum(c.level for c in self.classes)

    @property
    def display_name(self) -> str:
        if self.nickname:
            return f'{self.name} "{self.nickname}"'
        return self.name

    @property
    def equipped_weapons(self) -> list[Weapon]:
        return [w for w in self.weapons if w.is_equipped]

    @property
    def spellcasting_abilities(self) -> list[Ability]:
        """Distinct spellcasting abilities across classes, in class order."""
        abilities: list[Ability] = []
        for char_class in self.classes:
            ability = char_class.spellcasting_ability
            if ability is not None and ability not in abilities:
                abilities.append(ability)
        return abilities


__all__ = [
    "AbilityScore",
    "FeetDistance",
    "require_every_ability",
    "Speed",
    "HitPoints",
    "SkillProficiency",
    "SavingThrowProficiency",
    "Creature",
    "RaceSpeed",
    "Race",
    "ClassFeature",
    "HitDice",
    "CharacterClass",
    "DeathSaves",
    "Physical",
    "Personality",
    "Treasure",
    "Character",
]
