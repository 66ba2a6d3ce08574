"""Enumeration types for the D&D campaign data model.

Every tag the stored records use (abilities, skills, conditions, damage
types, ...) is a closed enumeration. Member values are the spellings
the backing store uses, and dumping a record writes them back as
stored (``"sleight of Hand"``, ``"out-of-combat"``). Lookups compare
normalized forms, so case differences and underscores, dashes or spaces
between words are tolerated: ``Skill("Sleight_of_Hand")`` and
``Skill("sleight of hand")`` are the same member.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any


# Historical misspellings found in stored documents.
_TAG_ALIASES: dict[str, str] = {
    "posion": "poison",
}


def normalize_tag(value: str) -> str:
    """Normalize a stored tag for enum lookup.

    Args:
        value: Raw tag text.

    Returns:
        Lowercase tag with underscores and dashes turned into single spaces.

    Example:
        >>> normalize_tag("Sleight_of_Hand")
        'sleight of hand'
    """
    cleaned = " ".join(value.replace("_", " ").replace("-", " ").lower().split())
    return _TAG_ALIASES.get(cleaned, cleaned)


class TagEnum(StrEnum):
    """String enumeration that accepts loosely formatted stored tags."""

    @classmethod
    def _missing_(cls, value: Any) -> TagEnum | None:
        if not isinstance(value, str):
            return None
        normalized = normalize_tag(value)
        for member in cls:
            if normalize_tag(member.value) == normalized:
                return member
        return None


class Ability(TagEnum):
    """D&D 5E ability scores, keyed by their stored abbreviation."""

    STR = "str"
    DEX = "dex"
    CON = "con"
    INT = "int"
    WIS = "wis"
    CHA = "cha"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability (e.g., 'Strength' for STR)."""
        return _ABILITY_NAMES[self]

    @property
    def abbreviation(self) -> str:
        """Get the uppercase three-letter abbreviation."""
        return self.name

    @classmethod
    def _missing_(cls, value: Any) -> Ability | None:
        # Accept full names as well ("Wisdom" -> WIS)
        if isinstance(value, str):
            for member, full_name in _ABILITY_NAMES.items():
                if full_name.lower() == value.strip().lower():
                    return member
        return super()._missing_(value)


_ABILITY_NAMES: dict[Ability, str] = {
    Ability.STR: "Strength",
    Ability.DEX: "Dexterity",
    Ability.CON: "Constitution",
    Ability.INT: "Intelligence",
    Ability.WIS: "Wisdom",
    Ability.CHA: "Charisma",
}


class Skill(TagEnum):
    """D&D 5E skills.

    Each skill is linked to the ability used for its checks.
    """

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight of Hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def ability(self) -> Ability:
        """Get the governing ability for this skill."""
        return SKILL_ABILITIES[self]


SKILL_ABILITIES: dict[Skill, Ability] = {
    # Strength
    Skill.ATHLETICS: Ability.STR,
    # Dexterity
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    # Intelligence
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    # Wisdom
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    # Charisma
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}


class Size(TagEnum):
    """D&D 5E creature sizes."""

    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GARGANTUAN = "gargantuan"

    @property
    def space_feet(self) -> int:
        """Get the space controlled by a creature of this size in feet."""
        sizes = {
            Size.TINY: 2,
            Size.SMALL: 5,
            Size.MEDIUM: 5,
            Size.LARGE: 10,
            Size.HUGE: 15,
            Size.GARGANTUAN: 20,
        }
        return sizes[self]


class Alignment(TagEnum):
    """D&D 5E character alignments."""

    LAWFUL_GOOD = "lawful good"
    NEUTRAL_GOOD = "neutral good"
    CHAOTIC_GOOD = "chaotic good"
    LAWFUL_NEUTRAL = "lawful neutral"
    TRUE_NEUTRAL = "true neutral"
    CHAOTIC_NEUTRAL = "chaotic neutral"
    LAWFUL_EVIL = "lawful evil"
    NEUTRAL_EVIL = "neutral evil"
    CHAOTIC_EVIL = "chaotic evil"

    @property
    def display_name(self) -> str:
        """Get human-readable alignment name (e.g., 'Lawful Good')."""
        return self.value.title()


class DamageType(TagEnum):
    """D&D 5E damage types."""

    ACID = "acid"
    BLUDGEONING = "bludgeoning"
    COLD = "cold"
    FIRE = "fire"
    FORCE = "force"
    LIGHTNING = "lightning"
    NECROTIC = "necrotic"
    PIERCING = "piercing"
    POISON = "poison"
    PSYCHIC = "psychic"
    RADIANT = "radiant"
    SLASHING = "slashing"
    THUNDER = "thunder"


class Condition(TagEnum):
    """D&D 5E conditions that can affect creatures."""

    BLINDED = "blinded"
    CHARMED = "charmed"
    DEAFENED = "deafened"
    EXHAUSTION = "exhaustion"
    FRIGHTENED = "frightened"
    GRAPPLED = "grappled"
    INCAPACITATED = "incapacitated"
    INVISIBLE = "invisible"
    PARALYZED = "paralyzed"
    PETRIFIED = "petrified"
    POISONED = "poisoned"
    PRONE = "prone"
    RESTRAINED = "restrained"
    STUNNED = "stunned"
    UNCONSCIOUS = "unconscious"


class Sense(TagEnum):
    """Special senses measured in feet."""

    BLINDSIGHT = "blindsight"
    DARKVISION = "darkvision"
    TREMORSENSE = "tremorsense"
    TRUESIGHT = "truesight"


class Rarity(TagEnum):
    """Item rarities."""

    NONE = "none"
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    VERY_RARE = "very rare"
    LEGENDARY = "legendary"
    ARTIFACT = "artifact"
    VARIES = "varies"
    UNKNOWN = "unknown"
    UNKNOWN_MAGIC = "unknown (magic)"


class ItemType(StrEnum):
    """Item type codes used by the reference data (case sensitive)."""

    AMMUNITION = "A"
    ARTISAN_TOOL = "AT"
    EXPLOSIVE = "EXP"
    GEAR = "G"
    GAMING_SET = "GS"
    GENERIC_VARIANT = "GV"
    HEAVY_ARMOR = "HA"
    INSTRUMENT = "INS"
    LIGHT_ARMOR = "LA"
    MELEE_WEAPON = "M"
    MEDIUM_ARMOR = "MA"
    MOUNT = "MNT"
    OTHER = "OTH"
    POTION = "P"
    RANGED_WEAPON = "R"
    ROD = "RD"
    RING = "RG"
    SHIELD = "S"
    SCROLL = "SC"
    SPELLCASTING_FOCUS = "SCF"
    VEHICLE = "SHP"
    TOOLS = "T"
    TACK_AND_HARNESS = "TAH"
    TRADE_GOOD = "TG"
    LAND_VEHICLE = "VEH"
    WAND = "WD"
    TREASURE = "$"

    @property
    def is_armor(self) -> bool:
        """Check whether the type is worn armor or a shield."""
        return self in {
            ItemType.LIGHT_ARMOR,
            ItemType.MEDIUM_ARMOR,
            ItemType.HEAVY_ARMOR,
            ItemType.SHIELD,
        }

    @property
    def is_weapon(self) -> bool:
        """Check whether the type is a melee or ranged weapon."""
        return self in {ItemType.MELEE_WEAPON, ItemType.RANGED_WEAPON}


class SpellComponent(TagEnum):
    """Spell components: verbal, somatic, material."""

    VERBAL = "v"
    SOMATIC = "s"
    MATERIAL = "m"


class SpellSchool(TagEnum):
    """D&D 5E schools of magic."""

    ABJURATION = "abjuration"
    CONJURATION = "conjuration"
    DIVINATION = "divination"
    ENCHANTMENT = "enchantment"
    EVOCATION = "evocation"
    ILLUSION = "illusion"
    NECROMANCY = "necromancy"
    TRANSMUTATION = "transmutation"

    @classmethod
    def _missing_(cls, value: Any) -> SpellSchool | None:
        # Reference data abbreviates schools to one letter
        if isinstance(value, str) and len(value.strip()) == 1:
            letter = value.strip().upper()
            for member in cls:
                if _SCHOOL_CODES.get(member) == letter:
                    return member
        return super()._missing_(value)


_SCHOOL_CODES: dict[SpellSchool, str] = {
    SpellSchool.ABJURATION: "A",
    SpellSchool.CONJURATION: "C",
    SpellSchool.DIVINATION: "D",
    SpellSchool.ENCHANTMENT: "E",
    SpellSchool.EVOCATION: "V",
    SpellSchool.ILLUSION: "I",
    SpellSchool.NECROMANCY: "N",
    SpellSchool.TRANSMUTATION: "T",
}


class CastingTimeUnit(TagEnum):
    """Units of spell casting time."""

    ACTION = "action"
    BONUS = "bonus"
    REACTION = "reaction"
    MINUTE = "minute"
    HOUR = "hour"


class SpellAreaType(TagEnum):
    """Shape of a spell's area of effect."""

    POINT = "point"
    CONE = "cone"
    CUBE = "cube"
    CYLINDER = "cylinder"
    LINE = "line"
    SPHERE = "sphere"


class SpellDistanceType(TagEnum):
    """How a spell's range is measured."""

    SELF = "self"
    FEET = "feet"
    TOUCH = "touch"


class SpellDurationType(TagEnum):
    """Whether a spell lasts or resolves immediately."""

    TIMED = "timed"
    INSTANT = "instant"


class DurationUnit(TagEnum):
    """Units for timed spell durations."""

    ROUND = "round"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


class CampaignMode(TagEnum):
    """Current campaign view mode for players and DMs."""

    COMBAT = "combat"
    OUT_OF_COMBAT = "out-of-combat"


class LogItemType(TagEnum):
    """Kinds of campaign log entries."""

    CAMPAIGN_CREATED = "campaign created"
    CAMPAIGN_UPDATED = "campaign updated"
    PLAYER_INVITED = "player invited"
    PLAYER_UNINVITED = "player uninvited"
    DM_INVITED = "dm invited"
    DM_UNINVITED = "dm uninvited"
    PLAYER_INVITE_ACCEPTED = "player invite accepted"
    DM_INVITE_ACCEPTED = "dm invite accepted"
    PLAYER_INVITE_DECLINED = "player invite declined"
    DM_INVITE_DECLINED = "dm invite declined"
    ITEM = "item"
    NOTE = "note"
    SPELL = "spell"
    RULE = "rule"
    CHAT = "chat"


class CampaignRole(TagEnum):
    """Role of a user inside a campaign."""

    DM = "dm"
    PLAYER = "player"


class TokenType(TagEnum):
    """What a battle map token stands for."""

    CREATURE = "creature"
    CHARACTER = "character"


class NoteVisibility(TagEnum):
    """Who can read a legacy campaign note."""

    OWNERS = "owners"
    ALL = "all"


class RollMode(TagEnum):
    """Advantage state asserted on a check."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"


class HitDieSides(IntEnum):
    """Hit die sizes a class can use."""

    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12


__all__ = [
    "normalize_tag",
    "TagEnum",
    "Ability",
    "Skill",
    "SKILL_ABILITIES",
    "Size",
    "Alignment",
    "DamageType",
    "Condition",
    "Sense",
    "Rarity",
    "ItemType",
    "SpellComponent",
    "SpellSchool",
    "CastingTimeUnit",
    "SpellAreaType",
    "SpellDistanceType",
    "SpellDurationType",
    "DurationUnit",
    "CampaignMode",
    "LogItemType",
    "CampaignRole",
    "TokenType",
    "NoteVisibility",
    "RollMode",
    "HitDieSides",
]
