"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the dnd-campaign test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Reset the settings cache and keep stray .env files out of tests."""
    from dnd_campaign.core.config import clear_settings_cache

    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_CAMPAIGN_DEBUG": "true",
        "DND_CAMPAIGN_LOG_LEVEL": "DEBUG",
        "DND_CAMPAIGN_RULES_HALF_PROFICIENCY_ROUNDING": "up",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_ability_scores() -> dict[str, int]:
    """Provide sample ability scores keyed by stored abbreviation.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "str": 8,
        "dex": 14,
        "con": 12,
        "int": 10,
        "wis": 15,
        "cha": 13,
    }


@pytest.fixture
def sample_creature_data(sample_ability_scores: dict[str, int]) -> dict[str, Any]:
    """Provide sample engine input for a level 1 rogue-like creature.

    Args:
        sample_ability_scores: Creature ability scores.

    Returns:
        Dictionary of creature data.
    """
    return {
        "name": "Test Scout",
        "ability_scores": sample_ability_scores,
        "proficiency_bonus": 2,
        "skills": {
            "perception": {"is_proficient": True},
            "stealth": {"is_expertise": True},
            "sleight of hand": {"is_proficient": True, "misc_modifier": 1},
        },
        "saving_throws": {
            "dex": {"is_proficient": True},
            "int": {"is_proficient": True},
        },
        "armor_class": 14,
    }


@pytest.fixture
def sample_character_data(sample_ability_scores: dict[str, int]) -> dict[str, Any]:
    """Provide sample stored character data for testing.

    Args:
        sample_ability_scores: Character ability scores.

    Returns:
        Dictionary of character data.
    """
    return {
        "name": "Lia Thorn",
        "nickname": "Quickfingers",
        "owner_user_id": "player-1",
        "ability_scores": sample_ability_scores,
        "hit_points": {"current": 24, "max": 27},
        "armor_class": 15,
        "race": {"name": "Halfling", "subtype": "Lightfoot"},
        "classes": [
            {
                "name": "Bard",
                "spellcasting_ability": "cha",
                "level": 4,
                "hit_dice": {"sides": 8, "current": 4},
            },
        ],
        "alignment": "chaotic good",
        "proficiency_bonus": 2,
        "is_jack_of_all_trades": True,
        "skills": {
            "perception": {"is_proficient": True},
            "performance": {"is_expertise": True},
        },
        "saving_throws": {
            "dex": {"is_proficient": True},
            "cha": {"is_proficient": True},
        },
    }


@pytest.fixture
def sample_character(sample_character_data: dict[str, Any]) -> Any:
    """Create a sample Character instance for testing.

    Args:
        sample_character_data: Character data dictionary.

    Returns:
        Character instance.
    """
    from dnd_campaign.models import Character

    return Character.model_validate(sample_character_data)


@pytest.fixture
def sample_creature(sample_ability_scores: dict[str, int]) -> Any:
    """Create a sample Creature instance (a goblin-like monster).

    Returns:
        Creature instance.
    """
    from dnd_campaign.models import Creature

    return Creature(
        name="Goblin",
        size="small",
        ability_scores={"str": 8, "dex": 14, "con": 10, "int": 10, "wis": 8, "cha": 8},
        hit_points={"current": 7, "max": 7},
        armor_class=15,
        skills={"stealth": {"is_proficient": True}},
        senses={"darkvision": 60},
        tags=["goblinoid"],
    )
