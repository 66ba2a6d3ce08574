"""Derived statistics for D&D 5E creatures.

Everything a character sheet shows that is not stored directly is
computed here from the creature's raw attributes: ability modifiers,
skill and saving throw totals, passive perception, initiative and
spellcasting numbers. Armor class depends on equipped items and is
passed through unchanged.

All functions are pure. ``compute_derived_stats`` either returns a
complete :class:`DerivedStats` record or raises
:class:`~dnd_campaign.core.exceptions.ValidationError` naming the
offending field; it never returns partial results.

Example:
    >>> stats = compute_derived_stats({
    ...     "ability_scores": {"str": 8, "dex": 14, "con": 12,
    ...                        "int": 10, "wis": 15, "cha": 13},
    ...     "proficiency_bonus": 2,
    ...     "skills": {"perception": {"is_proficient": True}},
    ... })
    >>> stats.passive_perception
    14
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictInt

from dnd_campaign.core.config import RulesSettings, get_settings
from dnd_campaign.core.constants import (
    OBSERVATION_ADJUSTMENT,
    PASSIVE_SCORE_BASE,
    SPELL_SAVE_DC_BASE,
)
from dnd_campaign.core.exceptions import ValidationError
from dnd_campaign.core.logging import get_logger
from dnd_campaign.models.creature import SavingThrowProficiency, SkillProficiency
from dnd_campaign.models.enums import Ability, RollMode, Skill


logger = get_logger(__name__)

Rounding = Literal["down", "up"]


# =============================================================================
# Input & Output Records
# =============================================================================


class CreatureInput(BaseModel):
    """Raw attributes the engine derives statistics from.

    Attributes:
        name: Creature name, used only for logging.
        ability_scores: All six ability scores.
        proficiency_bonus: Proficiency bonus (0 for creatures without one).
        skills: Skill flags. Missing skills are not proficient.
        saving_throws: Saving throw flags. Missing abilities are not proficient.
        half_proficiency: Add half the proficiency bonus to skills the
            creature is not proficient in (Jack of All Trades).
        perception_mode: Advantage state on perception checks in general.
        armor_class: Stored armor class, passed through unchanged.
        spellcasting_abilities: Abilities used for spellcasting.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    ability_scores: dict[Ability, StrictInt]
    proficiency_bonus: StrictInt = Field(default=0, ge=0)
    skills: dict[Skill, SkillProficiency] = Field(default_factory=dict)
    saving_throws: dict[Ability, SavingThrowProficiency] = Field(default_factory=dict)
    half_proficiency: bool = False
    perception_mode: RollMode = RollMode.NORMAL
    armor_class: int | None = None
    spellcasting_abilities: list[Ability] = Field(default_factory=list)


class SpellcastingStats(BaseModel):
    """Spell save DC and spell attack bonus for one spellcasting ability."""

    model_config = ConfigDict(frozen=True)

    ability: Ability
    spell_save_dc: int
    spell_attack_bonus: int


class DerivedStats(BaseModel):
    """Display-ready statistics for a creature.

    Attributes:
        ability_modifiers: Modifier for each ability.
        skills: Total bonus for each skill.
        saving_throws: Total bonus for each saving throw.
        passive_perception: Passive Wisdom (Perception) score.
        initiative_bonus: Bonus added to initiative rolls.
        proficiency_bonus: Proficiency bonus used for the derivation.
        armor_class: Stored armor class.
        spellcasting: Spellcasting numbers keyed by ability.
    """

    model_config = ConfigDict(frozen=True)

    ability_modifiers: dict[Ability, int]
    skills: dict[Skill, int]
    saving_throws: dict[Ability, int]
    passive_perception: int
    initiative_bonus: int
    proficiency_bonus: int
    armor_class: int | None = None
    spellcasting: dict[Ability, SpellcastingStats] = Field(default_factory=dict)


# =============================================================================
# Pure Operations
# =============================================================================


def ability_modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    The modifier is floor((score - 10) / 2).

    Example:
        >>> ability_modifier(15)
        2
        >>> ability_modifier(8)
        -1
    """
    return (score - 10) // 2


def half_proficiency_bonus(proficiency_bonus: int, rounding: Rounding = "down") -> int:
    """Half the proficiency bonus, rounded as the table rules say."""
    if rounding == "up":
        return (proficiency_bonus + 1) // 2
    return proficiency_bonus // 2


def skill_value(
    ability_mod: int,
    proficiency: SkillProficiency,
    proficiency_bonus: int,
    *,
    half_proficiency: bool = False,
    rounding: Rounding = "down",
) -> int:
    """Calculate a skill check bonus.

    Expertise doubles the proficiency bonus and implies proficiency.
    Half proficiency applies only to skills without proficiency; it
    never stacks with it.

    Args:
        ability_mod: Modifier of the skill's governing ability.
        proficiency: Flags and misc modifier for the skill.
        proficiency_bonus: The creature's proficiency bonus.
        half_proficiency: Whether the creature adds half its bonus to
            skills it is not proficient in.
        rounding: Rounding of the half bonus.

    Returns:
        Total skill check bonus.
    """
    if proficiency.is_expertise:
        bonus = proficiency_bonus * 2
    elif proficiency.is_proficient:
        bonus = proficiency_bonus
    elif half_proficiency:
        bonus = half_proficiency_bonus(proficiency_bonus, rounding)
    else:
        bonus = 0
    return ability_mod + bonus + (proficiency.misc_modifier or 0)


def saving_throw_value(
    ability_mod: int,
    proficiency: SavingThrowProficiency,
    proficiency_bonus: int,
) -> int:
    """Calculate a saving throw bonus."""
    bonus = proficiency_bonus if proficiency.is_proficient else 0
    return ability_mod + bonus + (proficiency.misc_modifier or 0)


def passive_perception(
    wisdom_modifier: int,
    perception_skill_value: int | None = None,
    observation: RollMode = RollMode.NORMAL,
    *,
    base: int = PASSIVE_SCORE_BASE,
    adjustment: int = OBSERVATION_ADJUSTMENT,
) -> int:
    """Calculate passive Wisdom (Perception).

    Args:
        wisdom_modifier: Wisdom modifier, used when no perception skill
            value is given.
        perception_skill_value: Total Perception skill bonus.
        observation: Advantage or disadvantage on perception checks.
        base: Base of the passive score.
        adjustment: Amount added for advantage or removed for disadvantage.

    Returns:
        Passive perception score.
    """
    check_bonus = wisdom_modifier if perception_skill_value is None else perception_skill_value
    score = base + check_bonus
    if observation == RollMode.ADVANTAGE:
        score += adjustment
    elif observation == RollMode.DISADVANTAGE:
        score -= adjustment
    return score


def spellcasting_stats(
    ability: Ability,
    ability_mod: int,
    proficiency_bonus: int,
) -> SpellcastingStats:
    """Calculate spell save DC and spell attack bonus for one ability."""
    return SpellcastingStats(
        ability=ability,
        spell_save_dc=SPELL_SAVE_DC_BASE + proficiency_bonus + ability_mod,
        spell_attack_bonus=proficiency_bonus + ability_mod,
    )


# =============================================================================
# Input Validation
# =============================================================================


def _field_path(loc: tuple[Any, ...]) -> str:
    """Turn a pydantic error location into a dotted field path."""
    return ".".join(str(part) for part in loc if part != "[key]")


def _coerce_input(creature: CreatureInput | Mapping[str, Any]) -> CreatureInput:
    if isinstance(creature, CreatureInput):
        return creature
    if not isinstance(creature, Mapping):
        raise ValidationError(
            f"Expected creature data as a mapping, got {type(creature).__name__}",
            field_name="creature",
        )
    try:
        return CreatureInput.model_validate(dict(creature))
    except pydantic.ValidationError as exc:
        error = exc.errors()[0]
        raise ValidationError(
            error["msg"],
            field_name=_field_path(error["loc"]),
            invalid_value=error.get("input"),
            details={"error_count": exc.error_count()},
        ) from exc


def _check_ability_scores(creature: CreatureInput, rules: RulesSettings) -> None:
    for ability in Ability:
        field_name = f"ability_scores.{ability.value}"
        if ability not in creature.ability_scores:
            raise ValidationError(f"Missing {ability.full_name} score", field_name=field_name)
        score = creature.ability_scores[ability]
        if not rules.min_ability_score <= score <= rules.max_ability_score:
            raise ValidationError(
                f"{ability.full_name} score must be between "
                f"{rules.min_ability_score} and {rules.max_ability_score}",
                field_name=field_name,
                invalid_value=score,
            )


# =============================================================================
# Full Derivation
# =============================================================================


def compute_derived_stats(
    creature: CreatureInput | Mapping[str, Any],
    *,
    rules: RulesSettings | None = None,
) -> DerivedStats:
    """Compute every derived statistic for a creature.

    Args:
        creature: Creature attributes, as a CreatureInput or a mapping of
            the same shape.
        rules: Table conventions. Defaults to the configured settings.

    Returns:
        The complete derived statistics record.

    Raises:
        ValidationError: If any input field is missing or malformed.
    """
    if rules is None:
        rules = get_settings().rules

    try:
        data = _coerce_input(creature)
        _check_ability_scores(data, rules)
    except ValidationError as exc:
        logger.warning(
            "Rejected creature input",
            field=exc.field_name,
            reason=exc.message,
        )
        raise

    modifiers = {ability: ability_modifier(data.ability_scores[ability]) for ability in Ability}
    bonus = data.proficiency_bonus

    skills = {
        skill: skill_value(
            modifiers[skill.ability],
            data.skills.get(skill, SkillProficiency()),
            bonus,
            half_proficiency=data.half_proficiency,
            rounding=rules.half_proficiency_rounding,
        )
        for skill in Skill
    }
    saving_throws = {
        ability: saving_throw_value(
            modifiers[ability],
            data.saving_throws.get(ability, SavingThrowProficiency()),
            bonus,
        )
        for ability in Ability
    }
    spellcasting = {
        ability: spellcasting_stats(ability, modifiers[ability], bonus)
        for ability in data.spellcasting_abilities
    }

    stats = DerivedStats(
        ability_modifiers=modifiers,
        skills=skills,
        saving_throws=saving_throws,
        passive_perception=passive_perception(
            modifiers[Ability.WIS],
            skills[Skill.PERCEPTION],
            data.perception_mode,
            base=rules.passive_base,
            adjustment=rules.observation_adjustment,
        ),
        initiative_bonus=modifiers[Ability.DEX],
        proficiency_bonus=bonus,
        armor_class=data.armor_class,
        spellcasting=spellcasting,
    )
    logger.debug(
        "Derived stats computed",
        creature=data.name,
        proficiency_bonus=bonus,
        passive_perception=stats.passive_perception,
    )
    return stats


__all__ = [
    "CreatureInput",
    "SpellcastingStats",
    "DerivedStats",
    "ability_modifier",
    "half_proficiency_bonus",
    "skill_value",
    "saving_throw_value",
    "passive_perception",
    "spellcasting_stats",
    "compute_derived_stats",
]
