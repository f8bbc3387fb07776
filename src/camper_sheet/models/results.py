"""Result models returned by the rule functions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RuleVerdict(BaseModel):
    """Allow/deny outcome of a rule gate.

    A denial is normal control flow (a player clicking a locked skill),
    not an error. ``reason`` carries the first blocking rule and is what
    the UI displays.
    """

    model_config = ConfigDict(frozen=True)

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> RuleVerdict:
        """Build an allowing verdict."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> RuleVerdict:
        """Build a denying verdict with its reason."""
        return cls(allowed=False, reason=reason)


class SkillPointSummary(BaseModel):
    """Skill point totals for display.

    Attributes:
        total: Budget for the character's level.
        spent: Unlocked skills across all trees.
        available: Points left to spend, never negative.
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    spent: int = Field(ge=0)
    available: int = Field(ge=0)


__all__ = [
    "RuleVerdict",
    "SkillPointSummary",
]
