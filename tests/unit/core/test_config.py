"""Tests for configuration management."""

from __future__ import annotations

import pydantic
import pytest

from dnd_campaign.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_campaign.core.exceptions import ConfigurationError


class TestRulesSettings:
    """Tests for RulesSettings configuration."""

    def test_default_values(self) -> None:
        """Test default table conventions."""
        rules = RulesSettings()

        assert rules.passive_base == 10
        assert rules.observation_adjustment == 5
        assert rules.half_proficiency_rounding == "down"
        assert rules.min_ability_score == 1
        assert rules.max_ability_score == 30

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test rules settings read their own prefix."""
        monkeypatch.setenv("DND_CAMPAIGN_RULES_HALF_PROFICIENCY_ROUNDING", "up")
        monkeypatch.setenv("DND_CAMPAIGN_RULES_PASSIVE_BASE", "8")

        rules = RulesSettings()

        assert rules.half_proficiency_rounding == "up"
        assert rules.passive_base == 8

    def test_score_range_validation(self) -> None:
        """Test that min_ability_score must not exceed max_ability_score."""
        with pytest.raises(ConfigurationError) as exc_info:
            RulesSettings(min_ability_score=20, max_ability_score=10)

        assert "min_ability_score" in str(exc_info.value)
        assert exc_info.value.details["config_key"] == "min_ability_score"


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self) -> None:
        """Test default settings initialization."""
        settings = Settings()

        assert settings.app_name == "D&D Campaign Manager"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert isinstance(settings.rules, RulesSettings)

    def test_env_vars(self, mock_env_vars: dict[str, str]) -> None:
        """Test settings loaded from the environment."""
        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.rules.half_proficiency_rounding == "up"

    def test_invalid_log_level(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="LOUD")


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_settings_instance(self) -> None:
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()

        assert isinstance(settings, Settings)

    def test_caching(self) -> None:
        """Test that settings are cached."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self) -> None:
        """Test that cache can be cleared."""
        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_env_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid environment values surface as ConfigurationError."""
        monkeypatch.setenv("DND_CAMPAIGN_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details

    def test_invalid_rules_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a bad rules range is reported as ConfigurationError."""
        monkeypatch.setenv("DND_CAMPAIGN_RULES_MIN_ABILITY_SCORE", "25")
        monkeypatch.setenv("DND_CAMPAIGN_RULES_MAX_ABILITY_SCORE", "20")

        with pytest.raises(ConfigurationError):
            get_settings()
