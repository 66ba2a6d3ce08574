"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from dnd_campaign.core.exceptions import (
    ConfigurationError,
    DndCampaignError,
    RulesError,
    ValidationError,
)


class TestDndCampaignError:
    """Tests for the base DndCampaignError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = DndCampaignError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = DndCampaignError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = DndCampaignError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "DndCampaignError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestValidationError:
    """Tests for ValidationError field context."""

    def test_field_and_value(self) -> None:
        """Field path and invalid value are kept as attributes and details."""
        exc = ValidationError(
            "Wisdom score must be finite",
            field_name="ability_scores.wis",
            invalid_value=float("inf"),
        )
        assert exc.field_name == "ability_scores.wis"
        assert exc.invalid_value == float("inf")
        assert exc.details["field_name"] == "ability_scores.wis"
        assert exc.message == "Wisdom score must be finite"

    def test_without_field(self) -> None:
        """Field context is optional."""
        exc = ValidationError("Bad input")
        assert exc.field_name is None
        assert exc.details == {}

    def test_zero_is_recorded_as_invalid_value(self) -> None:
        """Falsy invalid values are still recorded."""
        exc = ValidationError("Too low", field_name="ability_scores.str", invalid_value=0)
        assert exc.details["invalid_value"] == 0


class TestDomainExceptions:
    """Tests for configuration and rules exceptions."""

    def test_configuration_error(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad range", config_key="min_ability_score")
        assert exc.details["config_key"] == "min_ability_score"
        assert exc.config_key == "min_ability_score"

    def test_rules_error(self) -> None:
        """Test RulesError with rule name."""
        exc = RulesError("Level 0", rule="proficiency_bonus_for_level")
        assert exc.details["rule"] == "proficiency_bonus_for_level"

    def test_unknown_context_rejected(self) -> None:
        """Context keys a subclass does not declare are a TypeError."""
        with pytest.raises(TypeError, match="field_name"):
            RulesError("Level 0", field_name="level")

    def test_details_are_copied(self) -> None:
        """The caller's details dict is not mutated."""
        details = {"level": 0}
        exc = RulesError("Level 0", rule="proficiency_bonus_for_level", details=details)
        assert details == {"level": 0}
        assert exc.details == {"level": 0, "rule": "proficiency_bonus_for_level"}

    @pytest.mark.parametrize("exc_type", [ConfigurationError, ValidationError, RulesError])
    def test_inheritance(self, exc_type: type[DndCampaignError]) -> None:
        """Every domain error is a DndCampaignError."""
        exc = exc_type("Error")
        assert isinstance(exc, DndCampaignError)
        assert isinstance(exc, Exception)


class TestExceptionChaining:
    """Tests for exception chaining behavior."""

    def test_raise_from(self) -> None:
        """Test that exceptions can be properly chained."""
        original = ValueError("Original error")

        with pytest.raises(ValidationError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise ValidationError("Wrapped error") from e

        assert exc_info.value.__cause__ is original
