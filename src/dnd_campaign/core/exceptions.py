"""Exception hierarchy for the D&D campaign data model.

Every error derives from :class:`DndCampaignError`. Subclasses declare
the keyword context they accept in ``context_keys``; each key becomes an
attribute on the exception and, when given, an entry in ``details``.

Example:
    >>> from dnd_campaign.core.exceptions import ValidationError
    >>> raise ValidationError("Score must be finite", field_name="ability_scores.str")
"""

from __future__ import annotations

from typing import Any, ClassVar


class DndCampaignError(Exception):
    """Base exception for all D&D campaign errors.

    Attributes:
        message: Human-readable error description.
        details: Extra context, including any declared context keys that
            were passed.
    """

    context_keys: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        unknown = set(context) - set(self.context_keys)
        if unknown:
            raise TypeError(
                f"{type(self).__name__} got unexpected context: {', '.join(sorted(unknown))}"
            )
        self.message = message
        self.details = dict(details or {})
        for key in self.context_keys:
            value = context.get(key)
            setattr(self, key, value)
            if value is not None:
                self.details[key] = value
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{context}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


class ConfigurationError(DndCampaignError):
    """Settings could not be loaded or are inconsistent.

    ``config_key`` names the offending setting, e.g. ``min_ability_score``.
    """

    context_keys = ("config_key",)


class ValidationError(DndCampaignError):
    """Creature data cannot be turned into derived statistics.

    The derived statistics engine raises only this error. ``field_name``
    is a dotted path into the input (``ability_scores.wis``,
    ``skills.stealth.misc_modifier``) and ``invalid_value`` holds the
    rejected value when there is one.
    """

    context_keys = ("field_name", "invalid_value")


class RulesError(DndCampaignError):
    """A rules helper was asked about an impossible game state, such as level 0."""

    context_keys = ("rule",)


__all__ = [
    "DndCampaignError",
    "ConfigurationError",
    "ValidationError",
    "RulesError",
]
