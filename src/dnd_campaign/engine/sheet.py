"""Derive display statistics for stored creatures and characters.

Stored records are the source of truth for raw attributes; these
helpers feed them to the derived statistics engine.
"""

from __future__ import annotations

from dnd_campaign.core.config import RulesSettings
from dnd_campaign.core.logging import get_logger
from dnd_campaign.engine.derived_stats import (
    CreatureInput,
    DerivedStats,
    compute_derived_stats,
)
from dnd_campaign.engine.rules import proficiency_bonus_for_level
from dnd_campaign.models.creature import Character, Creature
from dnd_campaign.models.enums import RollMode


logger = get_logger(__name__)


def creature_input_from_creature(
    creature: Creature,
    *,
    proficiency_bonus: int = 0,
    perception_mode: RollMode = RollMode.NORMAL,
) -> CreatureInput:
    """Build engine input from a stored creature.

    Creatures don't store a proficiency bonus; pass one for monsters
    (see :func:`~dnd_campaign.engine.rules.cr_to_proficiency_bonus`).
    """
    return CreatureInput(
        name=creature.name,
        ability_scores=dict(creature.ability_scores),
        proficiency_bonus=proficiency_bonus,
        skills=dict(creature.skills),
        saving_throws=dict(creature.saving_throws),
        perception_mode=perception_mode,
        armor_class=creature.armor_class,
    )


def creature_input_from_character(
    character: Character,
    *,
    perception_mode: RollMode = RollMode.NORMAL,
) -> CreatureInput:
    """Build engine input from a stored character.

    Uses the character's own proficiency bonus, Jack of All Trades flag,
    and class spellcasting abilities.
    """
    return CreatureInput(
        name=character.name,
        ability_scores=dict(character.ability_scores),
        proficiency_bonus=character.proficiency_bonus,
        skills=dict(character.skills),
        saving_throws=dict(character.saving_throws),
        half_proficiency=character.is_jack_of_all_trades,
        perception_mode=perception_mode,
        armor_class=character.armor_class,
        spellcasting_abilities=character.spellcasting_abilities,
    )


def derive_creature_stats(
    creature: Creature,
    *,
    proficiency_bonus: int = 0,
    perception_mode: RollMode = RollMode.NORMAL,
    rules: RulesSettings | None = None,
) -> DerivedStats:
    """Compute derived statistics for a stored creature."""
    data = creature_input_from_creature(
        creature,
        proficiency_bonus=proficiency_bonus,
        perception_mode=perception_mode,
    )
    return compute_derived_stats(data, rules=rules)


def derive_character_stats(
    character: Character,
    *,
    perception_mode: RollMode = RollMode.NORMAL,
    rules: RulesSettings | None = None,
) -> DerivedStats:
    """Compute derived statistics for a stored character.

    The stored proficiency bonus is used as-is. A bonus that doesn't
    match the character's total level is logged, since feats and
    homebrew rules can change it legitimately.
    """
    expected = proficiency_bonus_for_level(character.total_level)
    if expected != character.proficiency_bonus:
        logger.info(
            "Stored proficiency bonus differs from level table",
            character=character.name,
            level=character.total_level,
            stored=character.proficiency_bonus,
            expected=expected,
        )

    data = creature_input_from_character(character, perception_mode=perception_mode)
    return compute_derived_stats(data, rules=rules)


__all__ = [
    "creature_input_from_creature",
    "creature_input_from_character",
    "derive_creature_stats",
    "derive_character_stats",
]
