"""Pydantic V2 schemas for the D&D campaign data model.

Submodules:
    enums: Closed tag enumerations (Ability, Skill, Condition, DamageType, ...)
    common: Record mixins (Owned, Shareable, Timestamped, Sourced)
    creature: Creatures, characters, races, and classes
    items: Items, weapons, equipment, and feats
    spells: Spells and their ranges, durations, and components
    campaign: Campaigns, notes, log items, and audio
    maps: World maps and battle maps
    legacy: Deprecated flat schemas kept for upgrades

Example:
    >>> from dnd_campaign.models import Creature, HitPoints
    >>> goblin = Creature(
    ...     name="Goblin",
    ...     ability_scores={"str": 8, "dex": 14, "con": 10, "int": 10, "wis": 8, "cha": 8},
    ...     hit_points=HitPoints(current=7, max=7),
    ...     armor_class=15,
    ... )
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dnd_campaign.models.enums import (
    SKILL_ABILITIES,
    Ability,
    Alignment,
    CampaignMode,
    CampaignRole,
    CastingTimeUnit,
    Condition,
    DamageType,
    DurationUnit,
    HitDieSides,
    ItemType,
    LogItemType,
    NoteVisibility,
    Rarity,
    RollMode,
    Sense,
    Size,
    Skill,
    SpellAreaType,
    SpellComponent,
    SpellDistanceType,
    SpellDurationType,
    SpellSchool,
    TokenType,
    normalize_tag,
)

# =============================================================================
# Record Mixins
# =============================================================================
from dnd_campaign.models.common import (
    CampaignUserSummary,
    Owned,
    Record,
    Shareable,
    Source,
    Sourced,
    Timestamped,
)

# =============================================================================
# Reference Data
# =============================================================================
from dnd_campaign.models.items import (
    DiceRoll,
    Equipment,
    Feat,
    Item,
    Range,
    Weapon,
    WeaponDamage,
)
from dnd_campaign.models.spells import (
    CastingTime,
    MaterialComponent,
    Spell,
    SpellDistance,
    SpellDuration,
    SpellMeta,
    SpellRange,
    TimedDuration,
)

# =============================================================================
# Creatures
# =============================================================================
from dnd_campaign.models.creature import (
    Character,
    CharacterClass,
    ClassFeature,
    Creature,
    DeathSaves,
    HitDice,
    HitPoints,
    Personality,
    Physical,
    Race,
    RaceSpeed,
    SavingThrowProficiency,
    SkillProficiency,
    Speed,
    Treasure,
)

# =============================================================================
# Collaboration Records
# =============================================================================
from dnd_campaign.models.campaign import Audio, Campaign, LogItem, Note
from dnd_campaign.models.maps import (
    BattleMap,
    BattleMapBGImage,
    BattleMapToken,
    PinLocation,
    WorldMap,
    WorldMapPin,
)


__all__ = [
    # Enums
    "SKILL_ABILITIES",
    "Ability",
    "Alignment",
    "CampaignMode",
    "CampaignRole",
    "CastingTimeUnit",
    "Condition",
    "DamageType",
    "DurationUnit",
    "HitDieSides",
    "ItemType",
    "LogItemType",
    "NoteVisibility",
    "Rarity",
    "RollMode",
    "Sense",
    "Size",
    "Skill",
    "SpellAreaType",
    "SpellComponent",
    "SpellDistanceType",
    "SpellDurationType",
    "SpellSchool",
    "TokenType",
    "normalize_tag",
    # Mixins
    "CampaignUserSummary",
    "Owned",
    "Record",
    "Shareable",
    "Source",
    "Sourced",
    "Timestamped",
    # Reference data
    "DiceRoll",
    "Equipment",
    "Feat",
    "Item",
    "Range",
    "Weapon",
    "WeaponDamage",
    "CastingTime",
    "MaterialComponent",
    "Spell",
    "SpellDistance",
    "SpellDuration",
    "SpellMeta",
    "SpellRange",
    "TimedDuration",
    # Creatures
    "Character",
    "CharacterClass",
    "ClassFeature",
    "Creature",
    "DeathSaves",
    "HitDice",
    "HitPoints",
    "Personality",
    "Physical",
    "Race",
    "RaceSpeed",
    "SavingThrowProficiency",
    "SkillProficiency",
    "Speed",
    "Treasure",
    # Collaboration
    "Audio",
    "Campaign",
    "LogItem",
    "Note",
    "BattleMap",
    "BattleMapBGImage",
    "BattleMapToken",
    "PinLocation",
    "WorldMap",
    "WorldMapPin",
]
