"""Integration tests for a character's progression lifecycle.

Walks the flow a caller runs: load a persisted record, validate a stat
edit, open trees, unlock skills, and persist the resulting ledger.
"""

from __future__ import annotations

from typing import Any

import pytest

from camper_sheet import (
    CharacterSnapshot,
    SkillUnlockDenied,
    apply_unlock,
    build_skill_trees,
    can_access_tree,
    can_unlock_skill,
    validate_stats,
)
from camper_sheet.models import Attribute, SkillStatus
from camper_sheet.rules import (
    effective_stats,
    order_trees,
    summarize_skill_points,
    tree_skill_statuses,
)


CATALOG_ROWS = [
    ["grip", "Iron Grip", "", "Strength", "might", ""],
    ["lift", "Heavy Lift", "", "Strength", "might", "grip"],
    ["throw", "Log Toss", "", "Strength", "might", "grip, lift"],
    ["focus", "Focus", "", "Psionics", "resolve", ""],
    ["push", "Push", "", "Psionics", "resolve", "focus"],
    ["wink", "Wink", "", "Smooth Talk", "charm", ""],
]


@pytest.fixture
def stored_record() -> dict[str, Any]:
    """A persisted character attribute blob in the legacy shape.

    Returns:
        Dictionary of stored attributes.
    """
    return {
        "level": 1,
        "charm": 2,
        "agility": 5,
        "might": 3,
        "power": 5,
        "endurance": 5,
        "resolve": 6,
        "proficiencies": ["might"],
        "skills": {},
    }


class TestProgressionFlow:
    """End-to-end progression through the public API."""

    def test_full_flow(self, stored_record: dict[str, Any]) -> None:
        """Unlock up to the budget, hitting the commitment gate on the way."""
        trees = {tree.id: tree for tree in build_skill_trees(CATALOG_ROWS)}
        character = CharacterSnapshot.from_attributes(stored_record)

        # Stored stats are valid and the radar shows the might bonus.
        stats = character.stats.as_dict()
        assert validate_stats(
            {attr.value: value for attr, value in stats.items()},
            character.proficiencies,
            character.level,
        ).success
        assert effective_stats(character.stats, character.proficiencies)[Attribute.MIGHT] == 6

        # Charm 2 without proficiency keeps Smooth Talk closed.
        assert can_access_tree(trees["smooth-talk"], character).allowed is False

        # Spend the first three points across two trees.
        character = apply_unlock("grip", trees["strength"], character)
        character = apply_unlock("focus", trees["psionics"], character)
        character = apply_unlock("lift", trees["strength"], character)
        assert summarize_skill_points(character).spent == 3

        # Committed trees stay open; nothing new can be started.
        assert can_access_tree(trees["strength"], character).allowed is True
        assert can_access_tree(trees["psionics"], character).allowed is True
        assert [tree.id for tree in order_trees(trees.values(), character)] == [
            "strength",
            "psionics",
            "smooth-talk",
        ]

        statuses = tree_skill_statuses(trees["strength"], character)
        assert statuses["throw"] is SkillStatus.AVAILABLE

        # Two more points at level 1 (budget 5).
        character = apply_unlock("throw", trees["strength"], character)
        character = apply_unlock("push", trees["psionics"], character)

        summary = summarize_skill_points(character)
        assert (summary.total, summary.spent, summary.available) == (5, 5, 0)

        verdict = can_unlock_skill("throw", trees["strength"], character)
        assert verdict.reason == "Skill already unlocked"

        with pytest.raises(SkillUnlockDenied):
            apply_unlock("wink", trees["smooth-talk"], character)

        # The caller persists the ledger in its stored shape.
        assert character.ledger.to_raw() == {
            "strength": ["grip", "lift", "throw"],
            "psionics": ["focus", "push"],
        }

    def test_reload_after_persist(self, stored_record: dict[str, Any]) -> None:
        """A persisted ledger reloads into the same decisions."""
        trees = {tree.id: tree for tree in build_skill_trees(CATALOG_ROWS)}
        character = CharacterSnapshot.from_attributes(stored_record)
        character = apply_unlock("grip", trees["strength"], character)

        reloaded = CharacterSnapshot.from_attributes(
            {**stored_record, "skills": character.ledger.to_raw()}
        )
        assert reloaded == character
        assert can_unlock_skill("lift", trees["strength"], reloaded) == can_unlock_skill(
            "lift", trees["strength"], character
        )

    def test_stale_snapshot_is_callers_problem(self, stored_record: dict[str, Any]) -> None:
        """Two writers holding the same snapshot can both be allowed.

        The engine has no hidden state; serializing writes per character is
        the caller's contract.
        """
        trees = {tree.id: tree for tree in build_skill_trees(CATALOG_ROWS)}
        character = CharacterSnapshot.from_attributes({**stored_record, "level": 0})
        character = apply_unlock("grip", trees["strength"], character)
        character = apply_unlock("lift", trees["strength"], character)

        writer_a = apply_unlock("throw", trees["strength"], character)
        writer_b = apply_unlock("focus", trees["psionics"], character)

        assert summarize_skill_points(writer_a).available == 0
        assert summarize_skill_points(writer_b).available == 0
