"""Rules lookups for proficiency bonuses.

Characters gain proficiency by total level; monsters by challenge
rating. Both tables are from the SRD.
"""

from __future__ import annotations

from dnd_campaign.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from dnd_campaign.core.exceptions import RulesError


def proficiency_bonus_for_level(level: int) -> int:
    """Calculate the proficiency bonus for a total character level.

    Args:
        level: Total character level (1-20).

    Returns:
        Proficiency bonus (2-6).

    Raises:
        RulesError: If the level is outside 1-20.

    Example:
        >>> proficiency_bonus_for_level(5)
        3
    """
    if not MIN_CHARACTER_LEVEL <= level <= MAX_CHARACTER_LEVEL:
        raise RulesError(
            f"Character level must be between {MIN_CHARACTER_LEVEL} and "
            f"{MAX_CHARACTER_LEVEL}, got {level}",
            rule="proficiency_bonus_for_level",
            details={"level": level},
        )
    return (level - 1) // 4 + 2


def cr_to_float(cr: str) -> float:
    """Convert a challenge rating string to a number.

    Args:
        cr: Challenge rating string (e.g., "1/4", "5").

    Returns:
        Numeric challenge rating.

    Raises:
        RulesError: If the string is not a valid challenge rating.
    """
    try:
        if "/" in cr:
            num, denom = cr.split("/")
            value = int(num) / int(denom)
        else:
            value = float(cr)
    except (ValueError, ZeroDivisionError) as exc:
        raise RulesError(
            f"Invalid challenge rating: {cr!r}",
            rule="challenge_rating",
        ) from exc
    if not 0 <= value <= 30:
        raise RulesError(f"Challenge rating out of range: {cr!r}", rule="challenge_rating")
    return value


def cr_to_proficiency_bonus(cr: str) -> int:
    """Calculate a monster's proficiency bonus from its challenge rating.

    Monsters follow the character table with CR standing in for level,
    and every rating below 1 counts as 1.

    Args:
        cr: Challenge rating string.

    Returns:
        Proficiency bonus (2-9 based on CR).

    Example:
        >>> cr_to_proficiency_bonus("1/4"), cr_to_proficiency_bonus("17")
        (2, 6)
    """
    rating = max(cr_to_float(cr), 1)
    return int((rating - 1) // 4) + 2


__all__ = [
    "proficiency_bonus_for_level",
    "cr_to_float",
    "cr_to_proficiency_bonus",
]
