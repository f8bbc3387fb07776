"""Configuration management for camper-sheet.

Centralized settings via pydantic-settings, read from environment
variables and an optional .env file.

Example:
    >>> from camper_sheet.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.validate_tree_graphs
    True

Environment Variables:
    CAMPER_SHEET_DEBUG: Force DEBUG logging
    CAMPER_SHEET_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CAMPER_SHEET_JSON_LOGS: Emit JSON log lines instead of console output
    CAMPER_SHEET_LOG_FILE: Optional log file path
    CAMPER_SHEET_RULES_VALIDATE_TREE_GRAPHS: Reject cyclic or dangling catalogs
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from camper_sheet.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Configuration for catalog handling around the rules engine.

    The rule constants themselves live in camper_sheet.core.constants and
    are deliberately not configurable.

    Attributes:
        validate_tree_graphs: Check every loaded tree for prerequisite cycles
            and prerequisites that do not resolve inside the tree.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAMPER_SHEET_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    validate_tree_graphs: bool = Field(
        default=True,
        description="Reject skill trees with prerequisite cycles or dangling prerequisites",
    )


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        debug: Force DEBUG logging regardless of log_level.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        log_file: Optional path for a persistent log file.
        rules: Catalog and rule handling settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAMPER_SHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(
        default=False,
        description="Force DEBUG logging",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value


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
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
