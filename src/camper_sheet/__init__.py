"""camper-sheet - Character progression rules for a tabletop camper RPG.

Pure rule evaluation over immutable character snapshots:

- Stat allocation: six attributes in [0, 10], 30-point budget, up to two
  proficiencies granting +3 to displayed values.
- Skill progression: ``level * 2 + 3`` skill points, attribute and
  commitment gates on trees, ordered unlock gates on skills.

Persistence, auth, and rendering belong to the caller, which owns the
read-modify-write cycle and per-character write serialization.

Example:
    >>> from camper_sheet import CharacterSnapshot, SkillTree, Skill, can_unlock_skill
    >>> tree = SkillTree(id="strength", attribute="might", skills=[Skill(id="grip")])
    >>> hero = CharacterSnapshot(level=1, proficiencies=["might"])
    >>> can_unlock_skill("grip", tree, hero).allowed
    True

Modules:
    core: Configuration, logging, constants, and exceptions.
    models: Frozen pydantic models for stats, skills, ledgers, snapshots.
    rules: Stat allocation, skill progression, graph checks, catalog loading.
"""

from __future__ import annotations

from camper_sheet.core.config import Settings, get_settings
from camper_sheet.core.exceptions import (
    CamperSheetError,
    InvalidSkillTreeError,
    SkillUnlockDenied,
    StatValidationError,
)
from camper_sheet.core.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from camper_sheet.models import (
    Attribute,
    CharacterSnapshot,
    RuleVerdict,
    Skill,
    SkillPointSummary,
    SkillStatus,
    SkillTree,
    StatBlock,
    UnlockLedger,
)
from camper_sheet.rules import (
    apply_unlock,
    build_skill_trees,
    can_access_tree,
    can_unlock_skill,
    effective_stat,
    skill_point_budget,
    spent_skill_points,
    total_points,
    validate_stats,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "CamperSheetError",
    "StatValidationError",
    "InvalidSkillTreeError",
    "SkillUnlockDenied",
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    # Models
    "Attribute",
    "SkillStatus",
    "StatBlock",
    "UnlockLedger",
    "CharacterSnapshot",
    "Skill",
    "SkillTree",
    "RuleVerdict",
    "SkillPointSummary",
    # Rules
    "validate_stats",
    "total_points",
    "effective_stat",
    "skill_point_budget",
    "spent_skill_points",
    "can_access_tree",
    "can_unlock_skill",
    "apply_unlock",
    "build_skill_trees",
]
