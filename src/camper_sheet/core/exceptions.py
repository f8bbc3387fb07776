"""Custom exception hierarchy for the camper-sheet rules engine.

All exceptions inherit from CamperSheetError so callers can catch the
whole family at the application boundary while keeping domain context.

Routine rule denials (a locked tree, a skill without points) are not
exceptions; they are returned as RuleVerdict values. The classes here
cover invalid input, broken catalog data, and callers that try to apply
a denied mutation anyway.

Example:
    >>> from camper_sheet.core.exceptions import InvalidSkillTreeError
    >>> raise InvalidSkillTreeError("Prerequisite cycle", tree_id="psionics")
"""

from __future__ import annotations

from typing import Any


class CamperSheetError(Exception):
    """Base exception for all camper-sheet errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(CamperSheetError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(CamperSheetError):
    """Raised when submitted data fails validation.

    Always locally recoverable: the caller re-prompts or rejects the write.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)

    @property
    def field_name(self) -> str | None:
        """Name of the offending field, if any."""
        return self.details.get("field_name")


class StatValidationError(ValidationError):
    """Raised when a stat allocation breaks a bounds or budget rule."""


# =============================================================================
# Progression Domain Exceptions
# =============================================================================


class ProgressionError(CamperSheetError):
    """Base exception for skill progression errors."""


class LedgerError(ProgressionError):
    """Raised when an unlock ledger would break its uniqueness invariant."""

    def __init__(
        self,
        message: str,
        *,
        tree_id: str | None = None,
        skill_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ledger error with tree and skill context.

        Args:
            message: Human-readable error description.
            tree_id: Tree whose entry was being modified.
            skill_id: Skill that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if tree_id:
            combined_details["tree_id"] = tree_id
        if skill_id:
            combined_details["skill_id"] = skill_id
        super().__init__(message, details=combined_details)


class InvalidSkillTreeError(ProgressionError):
    """Raised when a skill tree definition is structurally unusable.

    Covers prerequisite cycles, prerequisites that do not resolve inside
    the tree, and catalog rows naming an unknown attribute.
    """

    def __init__(
        self,
        message: str,
        *,
        tree_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if tree_id:
            combined_details["tree_id"] = tree_id
        super().__init__(message, details=combined_details)


class SkillUnlockDenied(ProgressionError):
    """Raised when a caller applies an unlock the rules deny.

    Attributes:
        reason: The first blocking reason from the unlock rules.
    """

    def __init__(
        self,
        reason: str,
        *,
        skill_id: str | None = None,
        tree_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the denial reason.

        Args:
            reason: The first blocking reason from the unlock rules.
            skill_id: Skill the caller tried to unlock.
            tree_id: Tree the skill belongs to.
            details: Optional dictionary containing additional error context.
        """
        self.reason = reason
        combined_details = details or {}
        if skill_id:
            combined_details["skill_id"] = skill_id
        if tree_id:
            combined_details["tree_id"] = tree_id
        super().__init__(reason, details=combined_details)


__all__ = [
    "CamperSheetError",
    "ConfigurationError",
    "ValidationError",
    "StatValidationError",
    "ProgressionError",
    "LedgerError",
    "InvalidSkillTreeError",
    "SkillUnlockDenied",
]
