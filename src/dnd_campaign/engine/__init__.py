"""Derived statistics engine and rules helpers.

This module computes the values a character sheet displays from the
raw attributes stored on creatures and characters.

Components:
    derived_stats: Pure derivation functions and ``compute_derived_stats``
    sheet: Adapters from stored creatures/characters to the engine
    rules: Proficiency bonus tables by level and challenge rating
    migrate: Upgrades from legacy flat records
"""

from __future__ import annotations

from dnd_campaign.engine.derived_stats import (
    CreatureInput,
    DerivedStats,
    SpellcastingStats,
    ability_modifier,
    compute_derived_stats,
    half_proficiency_bonus,
    passive_perception,
    saving_throw_value,
    skill_value,
    spellcasting_stats,
)
from dnd_campaign.engine.migrate import (
    upgrade_legacy_campaign,
    upgrade_legacy_character,
    upgrade_legacy_creature,
)
from dnd_campaign.engine.rules import (
    cr_to_float,
    cr_to_proficiency_bonus,
    proficiency_bonus_for_level,
)
from dnd_campaign.engine.sheet import (
    creature_input_from_character,
    creature_input_from_creature,
    derive_character_stats,
    derive_creature_stats,
)


__all__ = [
    # Derived stats
    "CreatureInput",
    "DerivedStats",
    "SpellcastingStats",
    "ability_modifier",
    "compute_derived_stats",
    "half_proficiency_bonus",
    "passive_perception",
    "saving_throw_value",
    "skill_value",
    "spellcasting_stats",
    # Sheet adapters
    "creature_input_from_character",
    "creature_input_from_creature",
    "derive_character_stats",
    "derive_creature_stats",
    # Rules
    "cr_to_float",
    "cr_to_proficiency_bonus",
    "proficiency_bonus_for_level",
    # Migration
    "upgrade_legacy_campaign",
    "upgrade_legacy_character",
    "upgrade_legacy_creature",
]
