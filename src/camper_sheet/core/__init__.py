"""Core module providing configuration, logging, constants, and exceptions.

Exports:
    Exceptions:
        CamperSheetError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Data validation errors.
        StatValidationError: Stat allocation rule violations.
        ProgressionError: Base for skill progression errors.
        LedgerError: Unlock ledger invariant violations.
        InvalidSkillTreeError: Structurally unusable skill trees.
        SkillUnlockDenied: Applying an unlock the rules deny.

    Configuration:
        Settings: Main application settings class.
        RulesSettings: Catalog and rule handling settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from camper_sheet.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from camper_sheet.core.exceptions import (
    CamperSheetError,
    ConfigurationError,
    InvalidSkillTreeError,
    LedgerError,
    ProgressionError,
    SkillUnlockDenied,
    StatValidationError,
    ValidationError,
)
from camper_sheet.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Exceptions
    "CamperSheetError",
    "ConfigurationError",
    "ValidationError",
    "StatValidationError",
    "ProgressionError",
    "LedgerError",
    "InvalidSkillTreeError",
    "SkillUnlockDenied",
    # Configuration
    "Settings",
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
