"""Pydantic models for character progression.

All models are frozen: rule functions never mutate their inputs.
"""

from __future__ import annotations

from camper_sheet.models.character import (
    CharacterSnapshot,
    StatBlock,
    StatValue,
    UnlockLedger,
)
from camper_sheet.models.enums import (
    ATTRIBUTE_NAMES,
    LEGACY_ATTRIBUTE_KEYS,
    Attribute,
    SkillStatus,
)
from camper_sheet.models.results import RuleVerdict, SkillPointSummary
from camper_sheet.models.skills import Skill, SkillTree


__all__ = [
    # Enums
    "Attribute",
    "ATTRIBUTE_NAMES",
    "LEGACY_ATTRIBUTE_KEYS",
    "SkillStatus",
    # Character
    "StatValue",
    "StatBlock",
    "UnlockLedger",
    "CharacterSnapshot",
    # Skills
    "Skill",
    "SkillTree",
    # Results
    "RuleVerdict",
    "SkillPointSummary",
]
