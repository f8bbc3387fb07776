"""Skill progression rules.

Computes the skill point budget, decides which trees a character may use,
and authorizes individual unlocks. Gates are evaluated in a fixed order
and short-circuit: the first blocking reason is the one the UI shows, so
the order is part of the contract.

Tree access:
    1. Attribute gate: proficiency in the tree's attribute, or base value >= 5.
    2. Commitment gate: after 3 points are spent, only trees that already
       hold an unlocked skill stay open.

Skill unlock:
    1. Tree access (denial propagated verbatim).
    2. Not already unlocked.
    3. At least one unspent point.
    4. Skill exists in the tree.
    5. Every prerequisite unlocked in the same tree.

None of this synchronizes anything. A caller that gets an allowing verdict
must persist the unlock under a per-character single-writer or optimistic
concurrency check, or two writers can both spend the last point.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from camper_sheet.core.constants import (
    BASE_SKILL_POINTS,
    COMMITMENT_THRESHOLD,
    SKILL_POINTS_PER_LEVEL,
    TREE_ACCESS_STAT_THRESHOLD,
)
from camper_sheet.core.exceptions import SkillUnlockDenied
from camper_sheet.core.logging import get_logger
from camper_sheet.models.character import CharacterSnapshot, UnlockLedger
from camper_sheet.models.enums import SkillStatus
from camper_sheet.models.results import RuleVerdict, SkillPointSummary
from camper_sheet.models.skills import Skill, SkillTree


logger = get_logger(__name__)


LedgerInput = UnlockLedger | Mapping[str, Sequence[str]]


# =============================================================================
# Skill Points
# =============================================================================


def skill_point_budget(level: int) -> int:
    """Skill points granted at a level: ``level * 2 + 3``."""
    return level * SKILL_POINTS_PER_LEVEL + BASE_SKILL_POINTS


def spent_skill_points(ledger: LedgerInput) -> int:
    """Count unlocked skill ids across every tree.

    No deduplication happens here; keeping entries unique is the ledger
    producer's job.

    Args:
        ledger: An UnlockLedger or a plain mapping of tree id to skill ids.

    Returns:
        The number of spent points.
    """
    if isinstance(ledger, UnlockLedger):
        return ledger.total_unlocked
    return sum(len(skill_ids) for skill_ids in ledger.values())


def summarize_skill_points(character: CharacterSnapshot) -> SkillPointSummary:
    """Budget, spend, and remaining points for display."""
    total = skill_point_budget(character.level)
    spent = spent_skill_points(character.ledger)
    return SkillPointSummary(total=total, spent=spent, available=max(total - spent, 0))


# =============================================================================
# Tree Access
# =============================================================================


def tree_lock_reason(tree: SkillTree, character: CharacterSnapshot) -> str | None:
    """First reason a tree is closed to a character.

    Args:
        tree: The tree being opened.
        character: The character's snapshot.

    Returns:
        The blocking reason, or None when the tree is accessible.
    """
    attribute = tree.attribute
    if not (
        character.is_proficient(attribute)
        or character.stat(attribute) >= TREE_ACCESS_STAT_THRESHOLD
    ):
        return (
            f"Requires {attribute.display_name} proficiency "
            f"or stat >= {TREE_ACCESS_STAT_THRESHOLD}"
        )

    spent = spent_skill_points(character.ledger)
    if spent >= COMMITMENT_THRESHOLD and not character.ledger.unlocked_in(tree.id):
        return (
            f"After {COMMITMENT_THRESHOLD} points, only trees with unlocked skills "
            "can be used"
        )
    return None


def can_access_tree(tree: SkillTree, character: CharacterSnapshot) -> RuleVerdict:
    """Decide whether a character may browse and unlock in a tree.

    Args:
        tree: The tree being opened.
        character: The character's snapshot.

    Returns:
        An allowing verdict, or a denial carrying the first failing gate.
    """
    reason = tree_lock_reason(tree, character)
    if reason is not None:
        logger.debug("Tree access denied", tree_id=tree.id, reason=reason)
        return RuleVerdict.deny(reason)
    return RuleVerdict.allow()


def order_trees(trees: Iterable[SkillTree], character: CharacterSnapshot) -> list[SkillTree]:
    """Order trees for a tree picker.

    Before the commitment threshold the catalog order is kept. Afterwards
    trees holding unlocked skills come first; the sort is stable so the
    catalog order survives within each group.
    """
    ordered = list(trees)
    if spent_skill_points(character.ledger) < COMMITMENT_THRESHOLD:
        return ordered
    return sorted(ordered, key=lambda tree: not character.ledger.unlocked_in(tree.id))


# =============================================================================
# Skill Unlock
# =============================================================================


def can_unlock_skill(
    skill_id: str,
    tree: SkillTree,
    character: CharacterSnapshot,
) -> RuleVerdict:
    """Decide whether a character may unlock a skill.

    Args:
        skill_id: The skill to unlock.
        tree: The tree the skill belongs to.
        character: The character's snapshot.

    Returns:
        An allowing verdict only when all five gates pass; otherwise a
        denial with the first failing gate's reason.
    """
    access = can_access_tree(tree, character)
    if not access.allowed:
        return access

    verdict = _unlock_gates(skill_id, tree, character)
    if not verdict.allowed:
        logger.debug(
            "Skill unlock denied",
            tree_id=tree.id,
            skill_id=skill_id,
            reason=verdict.reason,
        )
    return verdict


def _unlock_gates(skill_id: str, tree: SkillTree, character: CharacterSnapshot) -> RuleVerdict:
    unlocked = character.ledger.unlocked_in(tree.id)
    if skill_id in unlocked:
        return RuleVerdict.deny("Skill already unlocked")

    if spent_skill_points(character.ledger) >= skill_point_budget(character.level):
        return RuleVerdict.deny("No skill points available")

    skill = tree.get_skill(skill_id)
    if skill is None:
        return RuleVerdict.deny("Skill not found in tree")

    missing = [prereq for prereq in skill.prerequisites if prereq not in unlocked]
    if missing:
        return RuleVerdict.deny(f"Prerequisites not met: {', '.join(missing)}")
    return RuleVerdict.allow()


def apply_unlock(
    skill_id: str,
    tree: SkillTree,
    character: CharacterSnapshot,
) -> CharacterSnapshot:
    """Evaluate an unlock and return the snapshot that results from it.

    The input snapshot is unchanged. Persisting the returned ledger, and
    serializing that write against other writers, is up to the caller.

    Args:
        skill_id: The skill to unlock.
        tree: The tree the skill belongs to.
        character: The character's snapshot.

    Returns:
        A new snapshot whose ledger lists the skill under the tree.

    Raises:
        SkillUnlockDenied: If any unlock gate fails.
    """
    verdict = can_unlock_skill(skill_id, tree, character)
    if not verdict.allowed:
        raise SkillUnlockDenied(
            verdict.reason or "Skill cannot be unlocked",
            skill_id=skill_id,
            tree_id=tree.id,
        )
    updated = character.with_ledger(character.ledger.with_unlock(tree.id, skill_id))
    logger.info("Skill unlocked", tree_id=tree.id, skill_id=skill_id)
    return updated


# =============================================================================
# Skill Status
# =============================================================================


def skill_status(skill: Skill, unlocked_ids: Iterable[str]) -> SkillStatus:
    """Per-skill state within one tree.

    Args:
        skill: The skill to classify.
        unlocked_ids: Ids unlocked in the skill's tree.

    Returns:
        UNLOCKED if present, AVAILABLE if every prerequisite is unlocked
        (always true for a root skill), else LOCKED. Tree access is not
        considered; a skill can be available in a tree the character
        cannot open.
    """
    unlocked = set(unlocked_ids)
    if skill.id in unlocked:
        return SkillStatus.UNLOCKED
    if skill.is_root or all(prereq in unlocked for prereq in skill.prerequisites):
        return SkillStatus.AVAILABLE
    return SkillStatus.LOCKED


def tree_skill_statuses(tree: SkillTree, character: CharacterSnapshot) -> dict[str, SkillStatus]:
    """Status of every skill in a tree, keyed by skill id in tree order."""
    unlocked = character.ledger.unlocked_in(tree.id)
    return {skill.id: skill_status(skill, unlocked) for skill in tree.skills}


__all__ = [
    "skill_point_budget",
    "spent_skill_points",
    "summarize_skill_points",
    "tree_lock_reason",
    "can_access_tree",
    "order_trees",
    "can_unlock_skill",
    "apply_unlock",
    "skill_status",
    "tree_skill_statuses",
]
