"""dnd-campaign - data model and derived statistics for D&D 5E campaigns.

Stored records (creatures, characters, items, spells, campaigns, notes,
maps) keep raw attributes only. Everything a character sheet displays
on top of them is derived on read by the engine.

Example:
    >>> from dnd_campaign import compute_derived_stats
    >>> stats = compute_derived_stats({
    ...     "ability_scores": {"str": 10, "dex": 15, "con": 14,
    ...                        "int": 8, "wis": 12, "cha": 10},
    ...     "proficiency_bonus": 2,
    ... })
    >>> stats.initiative_bonus
    2

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 record schemas and tag enumerations.
    engine: Derived statistics, rules tables, and legacy upgrades.
"""

from __future__ import annotations

# Core
from dnd_campaign.core.config import Settings, get_settings
from dnd_campaign.core.exceptions import DndCampaignError, ValidationError
from dnd_campaign.core.logging import configure_logging, get_logger

# Engine
from dnd_campaign.engine import (
    CreatureInput,
    DerivedStats,
    ability_modifier,
    compute_derived_stats,
    derive_character_stats,
    derive_creature_stats,
    passive_perception,
    saving_throw_value,
    skill_value,
)

# Records
from dnd_campaign.models import Ability, Character, Creature, Skill


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "DndCampaignError",
    "ValidationError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "CreatureInput",
    "DerivedStats",
    "ability_modifier",
    "compute_derived_stats",
    "derive_character_stats",
    "derive_creature_stats",
    "passive_perception",
    "saving_throw_value",
    "skill_value",
    # Records
    "Ability",
    "Character",
    "Creature",
    "Skill",
]
