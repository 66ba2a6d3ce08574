"""Tests for tag enumerations."""

from __future__ import annotations

import pytest

from dnd_campaign.models.enums import (
    SKILL_ABILITIES,
    Ability,
    Alignment,
    Condition,
    DamageType,
    ItemType,
    Size,
    Skill,
    SpellSchool,
    normalize_tag,
)


class TestNormalizeTag:
    """Tests for normalize_tag."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Sleight_of_Hand", "sleight of hand"),
            ("ANIMAL-HANDLING", "animal handling"),
            ("  very   rare ", "very rare"),
            ("posion", "poison"),
        ],
    )
    def test_normalization(self, raw: str, expected: str) -> None:
        """Case, separators, and known misspellings are normalized."""
        assert normalize_tag(raw) == expected


class TestAbility:
    """Tests for the Ability enum."""

    def test_stored_values(self) -> None:
        """Members use the stored abbreviations."""
        assert [a.value for a in Ability] == ["str", "dex", "con", "int", "wis", "cha"]

    @pytest.mark.parametrize("raw", ["wis", "WIS", "Wisdom", "wisdom"])
    def test_lookup(self, raw: str) -> None:
        """Abbreviations and full names both resolve."""
        assert Ability(raw) is Ability.WIS

    def test_full_name(self) -> None:
        """Test full name and abbreviation."""
        assert Ability.CON.full_name == "Constitution"
        assert Ability.CON.abbreviation == "CON"

    def test_unknown(self) -> None:
        """Unknown abilities raise ValueError."""
        with pytest.raises(ValueError):
            Ability("luck")


class TestSkill:
    """Tests for the Skill enum."""

    def test_every_skill_has_ability(self) -> None:
        """Every skill maps to a governing ability."""
        assert set(SKILL_ABILITIES) == set(Skill)
        assert len(Skill) == 18

    @pytest.mark.parametrize(
        "skill,ability",
        [
            (Skill.ATHLETICS, Ability.STR),
            (Skill.STEALTH, Ability.DEX),
            (Skill.ARCANA, Ability.INT),
            (Skill.PERCEPTION, Ability.WIS),
            (Skill.PERSUASION, Ability.CHA),
        ],
    )
    def test_governing_ability(self, skill: Skill, ability: Ability) -> None:
        """Test skill to ability mapping."""
        assert skill.ability is ability

    def test_no_constitution_skills(self) -> None:
        """No skill is governed by Constitution."""
        assert Ability.CON not in SKILL_ABILITIES.values()

    def test_loose_lookup(self) -> None:
        """Stored spellings with underscores resolve."""
        assert Skill("Sleight_of_Hand") is Skill.SLEIGHT_OF_HAND
        assert Skill("sleight of hand") is Skill.SLEIGHT_OF_HAND
        assert Skill.ANIMAL_HANDLING == "animal handling"

    def test_stored_spelling_kept(self) -> None:
        """Members hold the store's own spelling."""
        assert Skill.SLEIGHT_OF_HAND.value == "sleight of Hand"
        assert Skill("sleight of Hand") is Skill.SLEIGHT_OF_HAND


class TestOtherTags:
    """Tests for the remaining tag enums."""

    def test_size_space(self) -> None:
        """Test space controlled by size."""
        assert Size.MEDIUM.space_feet == 5
        assert Size.GARGANTUAN.space_feet == 20

    def test_alignment_display(self) -> None:
        """Test alignment display names."""
        assert Alignment("Chaotic_Good").display_name == "Chaotic Good"

    def test_necrotic_is_not_a_condition(self) -> None:
        """Necrotic is a damage type only."""
        assert DamageType("necrotic") is DamageType.NECROTIC
        with pytest.raises(ValueError):
            Condition("necrotic")

    def test_poison_misspelling(self) -> None:
        """The historical 'posion' tag reads as poison."""
        assert DamageType("posion") is DamageType.POISON

    def test_item_type_codes(self) -> None:
        """Item type codes are case sensitive and classify armor and weapons."""
        assert ItemType("HA").is_armor
        assert ItemType("S").is_armor
        assert ItemType("M").is_weapon
        assert not ItemType("P").is_weapon
        with pytest.raises(ValueError):
            ItemType("ha")

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("V", SpellSchool.EVOCATION),
            ("n", SpellSchool.NECROMANCY),
            ("Illusion", SpellSchool.ILLUSION),
        ],
    )
    def test_spell_school_codes(self, raw: str, expected: SpellSchool) -> None:
        """One-letter school codes and names both resolve."""
        assert SpellSchool(raw) is expected
