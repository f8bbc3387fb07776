"""Rule constants for character progression.

These values are part of the observable contract: verdicts and reason
strings built from them must match across every deployment, so they are
constants rather than settings.
"""

from __future__ import annotations

# =============================================================================
# Stat Allocation
# =============================================================================

MIN_STAT_VALUE = 0
"""Lowest base value for a single attribute."""

MAX_STAT_VALUE = 10
"""Highest base value for a single attribute, regardless of budget."""

MAX_STAT_POINTS = 30
"""Global point budget across all six attributes."""

PROFICIENCY_BONUS = 3
"""Flat display bonus granted by a proficiency."""

MAX_PROFICIENCIES = 2
"""Maximum number of simultaneous proficiencies."""

# =============================================================================
# Level
# =============================================================================

MIN_LEVEL = 0
"""Lowest character level."""

MAX_LEVEL = 20
"""Highest character level."""

# =============================================================================
# Skill Points
# =============================================================================

BASE_SKILL_POINTS = 3
"""Skill points available at level 0."""

SKILL_POINTS_PER_LEVEL = 2
"""Skill points gained per level."""

TREE_ACCESS_STAT_THRESHOLD = 5
"""Base value that opens a tree without proficiency in its attribute."""

COMMITMENT_THRESHOLD = 3
"""Spent points after which only trees with unlocked skills stay open."""


__all__ = [
    "MIN_STAT_VALUE",
    "MAX_STAT_VALUE",
    "MAX_STAT_POINTS",
    "PROFICIENCY_BONUS",
    "MAX_PROFICIENCIES",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "BASE_SKILL_POINTS",
    "SKILL_POINTS_PER_LEVEL",
    "TREE_ACCESS_STAT_THRESHOLD",
    "COMMITMENT_THRESHOLD",
]
