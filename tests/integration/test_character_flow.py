"""Integration tests for storing characters and deriving their sheets.

Covers the read path end to end: stored document -> validated record ->
engine input -> derived statistics, including legacy documents.
"""

from __future__ import annotations

from typing import Any

import pytest

from dnd_campaign import (
    Ability,
    Character,
    Skill,
    compute_derived_stats,
    derive_character_stats,
)
from dnd_campaign.engine import (
    creature_input_from_character,
    proficiency_bonus_for_level,
    upgrade_legacy_character,
)
from dnd_campaign.models.legacy import LegacyCharacter


class TestStoredCharacterFlow:
    """Tests for deriving sheets from stored characters."""

    def test_json_round_trip_keeps_sheet(self, sample_character: Character) -> None:
        """A character read back from JSON derives the same sheet."""
        stored = sample_character.model_dump_json()
        loaded = Character.model_validate_json(stored)

        assert loaded == sample_character
        assert derive_character_stats(loaded) == derive_character_stats(sample_character)

    def test_stored_document_has_no_totals(self, sample_character: Character) -> None:
        """Only raw flags are persisted; totals are derived on read."""
        document = sample_character.model_dump(mode="json")

        assert "passive_perception" not in document
        assert document["skills"]["perception"] == {
            "is_proficient": True,
            "is_expertise": False,
            "misc_modifier": None,
        }
        assert document["ability_scores"]["wis"] == 15

    def test_level_up(self, sample_character: Character) -> None:
        """Levelling past 4 raises the bonus and every proficient total."""
        bard = sample_character.classes[0]
        levelled_class = bard.model_copy(update={"level": 5})
        character = sample_character.model_copy(
            update={
                "classes": [levelled_class],
                "proficiency_bonus": proficiency_bonus_for_level(5),
            }
        )

        before = derive_character_stats(sample_character)
        after = derive_character_stats(character)

        assert after.proficiency_bonus == 3
        assert after.skills[Skill.PERCEPTION] == before.skills[Skill.PERCEPTION] + 1
        assert after.skills[Skill.PERFORMANCE] == before.skills[Skill.PERFORMANCE] + 2
        # Half of 3 still rounds down to 1
        assert after.skills[Skill.ATHLETICS] == before.skills[Skill.ATHLETICS]
        assert after.spellcasting[Ability.CHA].spell_save_dc == 12

    def test_ability_increase(self, sample_character: Character) -> None:
        """Raising a score updates its modifier and dependent values."""
        scores = {**sample_character.ability_scores, Ability.WIS: 16}
        character = sample_character.model_copy(update={"ability_scores": scores})

        stats = derive_character_stats(character)

        assert stats.ability_modifiers[Ability.WIS] == 3
        assert stats.skills[Skill.PERCEPTION] == 5
        assert stats.passive_perception == 15

    def test_engine_input_is_plain_data(self, sample_character: Character) -> None:
        """Engine input can be shipped as a plain mapping."""
        data = creature_input_from_character(sample_character).model_dump(mode="json")

        assert compute_derived_stats(data) == derive_character_stats(sample_character)


class TestLegacyCharacterFlow:
    """Tests for reading a legacy flat character."""

    @pytest.fixture
    def legacy_document(self) -> dict[str, Any]:
        """A flat rogue document with stored totals."""
        return {
            "name": "Nim",
            "ability_scores": {"str": 10, "dex": 17, "con": 12, "int": 13, "wis": 12, "cha": 14},
            "hit_points": {"current": 9, "max": 9},
            "armor_class": 14,
            "passive_perception": 15,
            "skills": {"stealth": 7, "perception": 5, "acrobatics": 5, "deception": 4},
            "skill_proficiencies": ["stealth", "perception", "acrobatics", "deception"],
            "skill_expertises": ["stealth", "perception"],
            "saving_throws": {"dex": 5, "int": 3},
            "saving_throw_proficiencies": ["dex", "int"],
            "race": {"name": "Halfling"},
            "classes": [{"name": "Rogue", "level": 1}],
            "proficiency_bonus": 2,
            "hit_dice": {"current": 1, "max": 1},
            "conditions": [],
        }

    def test_upgrade_and_derive(self, legacy_document: dict[str, Any]) -> None:
        """The upgraded character's sheet matches the stored totals."""
        legacy = LegacyCharacter.model_validate(legacy_document)
        with pytest.warns(DeprecationWarning):
            character = upgrade_legacy_character(legacy)

        stats = derive_character_stats(character)

        for skill, total in legacy.skills.items():
            assert stats.skills[skill] == total
        for ability, total in legacy.saving_throws.items():
            assert stats.saving_throws[ability] == total
        assert stats.passive_perception == legacy.passive_perception
        assert all(p.misc_modifier is None for p in character.skills.values())
