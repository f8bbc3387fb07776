"""Enumeration types for camper-sheet."""

from __future__ import annotations

from enum import StrEnum


class Attribute(StrEnum):
    """The six camper attributes.

    Values are the keys used in persisted character records and in skill
    tree definitions.
    """

    CHARM = "charm"
    AGILITY = "agility"
    MIGHT = "might"
    PROWESS = "prowess"
    ENDURANCE = "endurance"
    RESOLVE = "resolve"

    @property
    def display_name(self) -> str:
        """Get the capitalized name shown to players.

        Returns:
            Display name (e.g., 'Might' for MIGHT).
        """
        return self.value.capitalize()


ATTRIBUTE_NAMES: frozenset[str] = frozenset(attr.value for attr in Attribute)
"""Every valid attribute key."""

LEGACY_ATTRIBUTE_KEYS: dict[str, Attribute] = {
    "power": Attribute.PROWESS,
}
"""Older record keys still found in persisted character attributes."""


class SkillStatus(StrEnum):
    """Per-character state of a single skill.

    Transitions are monotonic: locked -> available -> unlocked.
    """

    LOCKED = "locked"
    AVAILABLE = "available"
    UNLOCKED = "unlocked"


__all__ = [
    "Attribute",
    "ATTRIBUTE_NAMES",
    "LEGACY_ATTRIBUTE_KEYS",
    "SkillStatus",
]
