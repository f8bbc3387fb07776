"""Pytest configuration and shared fixtures.

This module provides common fixtures for the camper-sheet test suite:
settings cache handling, a sample skill tree, and character snapshots at
interesting points of progression.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from camper_sheet.models import (
    Attribute,
    CharacterSnapshot,
    Skill,
    SkillTree,
    StatBlock,
    UnlockLedger,
)


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from camper_sheet.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CAMPER_SHEET_DEBUG": "true",
        "CAMPER_SHEET_LOG_LEVEL": "DEBUG",
        "CAMPER_SHEET_RULES_VALIDATE_TREE_GRAPHS": "false",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Stat Fixtures
# =============================================================================


@pytest.fixture
def full_budget_stats() -> dict[str, int]:
    """Stats spending exactly the 30-point budget.

    Returns:
        Dictionary of base values.
    """
    return {
        "charm": 5,
        "agility": 5,
        "might": 5,
        "prowess": 5,
        "endurance": 5,
        "resolve": 5,
    }


# =============================================================================
# Skill Tree Fixtures
# =============================================================================


@pytest.fixture
def strength_tree() -> SkillTree:
    """A might-gated tree with one root and one child skill.

    Returns:
        SkillTree instance.
    """
    return SkillTree(
        id="strength",
        name="Strength",
        attribute=Attribute.MIGHT,
        skills=[
            Skill(id="root-skill", name="Iron Grip", description="Never let go."),
            Skill(
                id="child-skill",
                name="Heavy Lift",
                description="Carry a canoe alone.",
                prerequisites=["root-skill"],
            ),
        ],
    )


@pytest.fixture
def psionics_tree() -> SkillTree:
    """A resolve-gated tree used as the 'other' tree in commitment tests.

    Returns:
        SkillTree instance.
    """
    return SkillTree(
        id="psionics",
        name="Psionics",
        attribute=Attribute.RESOLVE,
        skills=[
            Skill(id="focus", name="Focus"),
            Skill(id="mind-read", name="Mind Read", prerequisites=["focus"]),
            Skill(id="push", name="Push", prerequisites=["focus"]),
            Skill(id="lift", name="Telekinetic Lift", prerequisites=["push", "mind-read"]),
        ],
    )


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def might_proficient() -> CharacterSnapshot:
    """Level 1 character proficient in might with nothing unlocked.

    Returns:
        CharacterSnapshot instance.
    """
    return CharacterSnapshot(level=1, proficiencies=[Attribute.MIGHT])


@pytest.fixture
def committed_elsewhere() -> CharacterSnapshot:
    """Level 5 might-proficient character with 3 points spent in psionics.

    Returns:
        CharacterSnapshot instance.
    """
    return CharacterSnapshot(
        level=5,
        stats=StatBlock(resolve=6),
        proficiencies=[Attribute.MIGHT],
        ledger=UnlockLedger(trees={"psionics": ["focus", "mind-read", "push"]}),
    )
