"""Upgrade legacy flat records to the normalized schema.

Legacy creatures stored final skill and saving throw totals. The
normalized schema keeps only flags and misc modifiers, deriving totals
on read. When the proficiency bonus is known, a stored total that
disagrees with the derived value is kept as a misc modifier so the
sheet shows the same number after the upgrade; otherwise totals are
discarded.
"""

from __future__ import annotations

import warnings
from datetime import UTC, datetime

from dnd_campaign.core.logging import get_logger
from dnd_campaign.engine.derived_stats import (
    ability_modifier,
    saving_throw_value,
    skill_value,
)
from dnd_campaign.models.campaign import Campaign, Note
from dnd_campaign.models.creature import (
    Character,
    CharacterClass,
    Creature,
    HitDice,
    Race,
    SavingThrowProficiency,
    SkillProficiency,
)
from dnd_campaign.models.enums import (
    Ability,
    Condition,
    HitDieSides,
    NoteVisibility,
    Rarity,
    Skill,
)
from dnd_campaign.models.items import Equipment, Feat, Weapon
from dnd_campaign.models.legacy import (
    LegacyCampaign,
    LegacyCharacter,
    LegacyCreature,
    LegacyEquipment,
    LegacyItem,
    LegacyNote,
    LegacyWeapon,
)


logger = get_logger(__name__)

CLASS_HIT_DIE: dict[str, HitDieSides] = {
    "barbarian": HitDieSides.D12,
    "fighter": HitDieSides.D10,
    "paladin": HitDieSides.D10,
    "ranger": HitDieSides.D10,
    "sorcerer": HitDieSides.D6,
    "wizard": HitDieSides.D6,
}
"""Hit die per SRD class; classes not listed use a d8."""


def _warn_deprecated(kind: str) -> None:
    warnings.warn(
        f"Legacy {kind} records are deprecated; store the upgraded record instead.",
        DeprecationWarning,
        stacklevel=3,
    )


def _upgrade_conditions(name: str, field: str, tags: list[str]) -> list[Condition]:
    conditions: list[Condition] = []
    for tag in tags:
        try:
            conditions.append(Condition(tag))
        except ValueError:
            logger.warning("Dropped unknown condition tag", creature=name, field=field, tag=tag)
    return conditions


def _upgrade_skills(
    legacy: LegacyCreature,
    proficiency_bonus: int | None,
) -> dict[Skill, SkillProficiency]:
    skills: dict[Skill, SkillProficiency] = {}
    for skill in Skill:
        is_expertise = skill in legacy.skill_expertises
        flags = SkillProficiency(
            is_proficient=is_expertise or skill in legacy.skill_proficiencies,
            is_expertise=is_expertise,
        )
        stored = legacy.skills.get(skill)
        if proficiency_bonus is not None and stored is not None:
            mod = ability_modifier(legacy.ability_scores[skill.ability])
            difference = stored - skill_value(mod, flags, proficiency_bonus)
            if difference:
                flags = flags.model_copy(update={"misc_modifier": difference})
        skills[skill] = flags
    return skills


def _upgrade_saving_throws(
    legacy: LegacyCreature,
    proficiency_bonus: int | None,
) -> dict[Ability, SavingThrowProficiency]:
    saves: dict[Ability, SavingThrowProficiency] = {}
    for ability in Ability:
        flags = SavingThrowProficiency(
            is_proficient=ability in legacy.saving_throw_proficiencies,
        )
        stored = legacy.saving_throws.get(ability)
        if proficiency_bonus is not None and stored is not None:
            mod = ability_modifier(legacy.ability_scores[ability])
            difference = stored - saving_throw_value(mod, flags, proficiency_bonus)
            if difference:
                flags = flags.model_copy(update={"misc_modifier": difference})
        saves[ability] = flags
    return saves


def _creature_fields(legacy: LegacyCreature, proficiency_bonus: int | None) -> dict:
    """Fields shared by upgraded creatures and characters."""
    if proficiency_bonus is None and (legacy.skills or legacy.saving_throws):
        logger.info(
            "Discarding precomputed totals without a proficiency bonus",
            creature=legacy.name,
        )
    return {
        "name": legacy.name,
        "size": legacy.size,
        "speed": legacy.speed,
        "ability_scores": dict(legacy.ability_scores),
        "hit_points": legacy.hit_points,
        "armor_class": legacy.armor_class,
        "skills": _upgrade_skills(legacy, proficiency_bonus),
        "saving_throws": _upgrade_saving_throws(legacy, proficiency_bonus),
        "languages": list(legacy.languages),
        "senses": dict(legacy.senses),
        "conditions": _upgrade_conditions(legacy.name, "conditions", legacy.conditions),
        "condition_immunities": _upgrade_conditions(
            legacy.name, "condition_immunities", legacy.condition_immunities
        ),
        "damage_immunities": list(legacy.damage_immunities),
        "damage_resistances": list(legacy.damage_resistances),
        "damage_vulnerabilities": list(legacy.damage_vulnerabilities),
        "tags": list(legacy.tags),
    }


def upgrade_legacy_creature(
    legacy: LegacyCreature,
    *,
    proficiency_bonus: int | None = None,
) -> Creature:
    """Convert a legacy flat creature to the normalized schema.

    Args:
        legacy: The legacy record.
        proficiency_bonus: The creature's proficiency bonus, if known.
            Needed to keep stored totals as misc modifiers.

    Returns:
        The normalized creature.
    """
    _warn_deprecated("creature")
    return Creature(**_creature_fields(legacy, proficiency_bonus))


def _split_hit_dice(legacy: LegacyCharacter) -> list[CharacterClass]:
    """Spread the shared hit dice pool over classes in order."""
    remaining = legacy.hit_dice.current
    classes: list[CharacterClass] = []
    for legacy_class in legacy.classes:
        current = min(remaining, legacy_class.level)
        remaining -= current
        classes.append(
            CharacterClass(
                name=legacy_class.name,
                spellcasting_ability=legacy_class.spellcasting_ability,
                level=legacy_class.level,
                hit_dice=HitDice(
                    sides=CLASS_HIT_DIE.get(legacy_class.name.lower(), HitDieSides.D8),
                    current=current,
                ),
                source=legacy_class.source,
            )
        )
    if remaining:
        logger.warning(
            "Dropped hit dice beyond class levels",
            character=legacy.name,
            dropped=remaining,
        )
    return classes


def _item_fields(item: LegacyItem) -> dict:
    return {
        "name": item.name,
        "rarity": Rarity.UNKNOWN_MAGIC if item.is_magic else Rarity.NONE,
        "weight": item.weight,
        "entries": [item.description] if item.description else [],
        "source": item.source,
    }


def _upgrade_weapon(weapon: LegacyWeapon) -> Weapon:
    return Weapon(
        **_item_fields(weapon),
        weapon_category=weapon.category,
        damage=weapon.damage,
        range=weapon.range,
        throw_range=weapon.throw_range,
        is_equipped=weapon.is_equipped,
    )


def _upgrade_equipment(equipment: LegacyEquipment) -> Equipment:
    return Equipment(**_item_fields(equipment), quantity=equipment.quantity)


def upgrade_legacy_character(legacy: LegacyCharacter) -> Character:
    """Convert a legacy flat character to the normalized schema.

    The character's own proficiency bonus is used to keep stored totals
    as misc modifiers.
    """
    _warn_deprecated("character")
    return Character(
        **_creature_fields(legacy, legacy.proficiency_bonus),
        nickname=legacy.nickname,
        xp=legacy.xp,
        race=Race(name=legacy.race.name, subtype=legacy.race.subtype, source=legacy.race.source),
        classes=_split_hit_dice(legacy),
        alignment=legacy.alignment,
        proficiency_bonus=legacy.proficiency_bonus,
        has_inspiration=legacy.has_inspiration,
        death_saves=legacy.death_saves,
        physical=legacy.physical,
        personality=legacy.personality,
        feats=[Feat(name=f.name, description=f.description, source=f.source) for f in legacy.feats],
        weapon_proficiencies=list(legacy.weapon_proficiencies),
        armor_proficiencies=list(legacy.armor_proficiencies),
        tool_proficiencies=list(legacy.tool_proficiencies),
        spells=legacy.spells,
        weapons=[_upgrade_weapon(w) for w in legacy.weapons],
        equipment=[_upgrade_equipment(e) for e in legacy.equipment],
        treasure=legacy.treasure,
    )


def _upgrade_note(note: LegacyNote, dm_user_ids: list[str], *, dm_only: bool) -> Note:
    is_public = not dm_only and note.visibility == NoteVisibility.ALL
    return Note(
        owner_user_id=note.author_user_id,
        title=note.title,
        body=note.body,
        created_at=datetime.fromtimestamp(note.timestamp / 1000, tz=UTC),
        is_public=is_public,
        shared_with_user_ids=(
            [] if is_public else [u for u in dm_user_ids if u != note.author_user_id]
        ),
    )


def upgrade_legacy_campaign(legacy: LegacyCampaign) -> tuple[Campaign, list[Note]]:
    """Split a legacy campaign document into a campaign and its notes.

    DM notes and notes visible only to their owners are shared with the
    campaign's DMs; other player notes become public. World map URLs
    have no counterpart and are dropped.

    Returns:
        The campaign and the notes that were embedded in it.
    """
    _warn_deprecated("campaign")
    if legacy.world_map_urls:
        logger.warning(
            "Dropped legacy world map URLs",
            campaign=legacy.name,
            count=len(legacy.world_map_urls),
        )
    campaign = Campaign(
        name=legacy.name,
        description=legacy.description,
        dm_user_ids=list(legacy.dm_user_ids),
        dm_invite_emails=list(legacy.dm_invite_emails),
        player_user_ids=list(legacy.player_user_ids),
        player_invite_emails=list(legacy.player_invite_emails),
    )
    notes = [_upgrade_note(n, legacy.dm_user_ids, dm_only=True) for n in legacy.dm_notes]
    notes += [_upgrade_note(n, legacy.dm_user_ids, dm_only=False) for n in legacy.player_notes]
    return campaign, notes


__all__ = [
    "CLASS_HIT_DIE",
    "upgrade_legacy_creature",
    "upgrade_legacy_character",
    "upgrade_legacy_campaign",
]
