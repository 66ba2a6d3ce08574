"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndCampaignError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Malformed creature data.
        RulesError: Impossible rules inputs.

    Configuration:
        Settings: Main application settings class.
        RulesSettings: Table conventions for derived statistics.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dnd_campaign.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_campaign.core.exceptions import (
    ConfigurationError,
    DndCampaignError,
    RulesError,
    ValidationError,
)
from dnd_campaign.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DndCampaignError",
    "ConfigurationError",
    "ValidationError",
    "RulesError",
    # Configuration
    "Settings",
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
