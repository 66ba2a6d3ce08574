"""Application-wide constants for the D&D campaign data model.

D&D 5E rules constants shared by the record models and the derived
statistics engine.
"""

from __future__ import annotations

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score for any creature (RAW D&D 5E)."""

# =============================================================================
# Proficiency
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

DEFAULT_PROFICIENCY_BONUS = 2
"""Proficiency bonus for level 1 characters."""

MAX_PROFICIENCY_BONUS = 9
"""Highest proficiency bonus in published stat blocks (CR 29-30)."""

# =============================================================================
# Passive Scores & Spellcasting
# =============================================================================

PASSIVE_SCORE_BASE = 10
"""Base of every passive check (PHB p.175)."""

OBSERVATION_ADJUSTMENT = 5
"""Passive score adjustment for advantage (+) or disadvantage (-)."""

SPELL_SAVE_DC_BASE = 8
"""Base of the spell save DC formula (PHB p.205)."""

# =============================================================================
# Combat
# =============================================================================

DEFAULT_SPEED = 30
"""Default walking speed in feet (most medium creatures)."""

MAX_DEATH_SAVES = 3
"""Maximum death saving throws (3 successes = stable, 3 failures = dead)."""


__all__ = [
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "DEFAULT_PROFICIENCY_BONUS",
    "MAX_PROFICIENCY_BONUS",
    "PASSIVE_SCORE_BASE",
    "OBSERVATION_ADJUSTMENT",
    "SPELL_SAVE_DC_BASE",
    "DEFAULT_SPEED",
    "MAX_DEATH_SAVES",
]
