"""Configuration management for the D&D campaign data model.

Settings are loaded with pydantic-settings from environment variables
and an optional ``.env`` file. The rules section holds the table
conventions the derived statistics engine depends on.

Example:
    >>> from dnd_campaign.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.passive_base
    10

Environment Variables:
    DND_CAMPAIGN_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_CAMPAIGN_JSON_LOGS: Emit JSON log lines instead of console output
    DND_CAMPAIGN_RULES_PASSIVE_BASE: Base value of passive scores
    DND_CAMPAIGN_RULES_OBSERVATION_ADJUSTMENT: Passive adjustment for advantage/disadvantage
    DND_CAMPAIGN_RULES_HALF_PROFICIENCY_ROUNDING: "down" or "up"
    DND_CAMPAIGN_RULES_MIN_ABILITY_SCORE / DND_CAMPAIGN_RULES_MAX_ABILITY_SCORE
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_campaign.core.constants import (
    MAX_ABILITY_SCORE,
    MIN_ABILITY_SCORE,
    OBSERVATION_ADJUSTMENT,
    PASSIVE_SCORE_BASE,
)
from dnd_campaign.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Table conventions used when deriving statistics.

    Attributes:
        passive_base: Base value added to a skill bonus for passive scores.
        observation_adjustment: Amount added or removed from a passive
            score when the creature has advantage or disadvantage.
        half_proficiency_rounding: Rounding applied to half the proficiency
            bonus (Jack of All Trades rounds down, Remarkable Athlete up).
        min_ability_score: Lowest accepted ability score.
        max_ability_score: Highest accepted ability score.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CAMPAIGN_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    passive_base: int = Field(
        default=PASSIVE_SCORE_BASE,
        ge=0,
        le=30,
        description="Base value of passive scores",
    )
    observation_adjustment: int = Field(
        default=OBSERVATION_ADJUSTMENT,
        ge=0,
        le=10,
        description="Passive score adjustment for advantage/disadvantage",
    )
    half_proficiency_rounding: Literal["down", "up"] = Field(
        default="down",
        description="Rounding of the half proficiency bonus",
    )
    min_ability_score: int = Field(
        default=MIN_ABILITY_SCORE,
        ge=0,
        description="Lowest accepted ability score",
    )
    max_ability_score: int = Field(
        default=MAX_ABILITY_SCORE,
        ge=1,
        description="Highest accepted ability score",
    )

    @model_validator(mode="after")
    def validate_score_range(self) -> "RulesSettings":
        """Ensure the ability score range is not empty.

        Raises:
            ConfigurationError: If min_ability_score > max_ability_score.
        """
        if self.min_ability_score > self.max_ability_score:
            raise ConfigurationError(
                f"min_ability_score ({self.min_ability_score}) must not exceed "
                f"max_ability_score ({self.max_ability_score})",
                config_key="min_ability_score",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines.
        rules: Rules conventions for the derived statistics engine.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CAMPAIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D Campaign Manager",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
