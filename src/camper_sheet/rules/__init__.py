"""Character progression rules.

Modules:
    stats: Stat allocation validation and proficiency bonuses.
    skills: Skill point budget, tree access, and skill unlock gates.
    graph: Prerequisite graph checks and layout depth.
    catalog: Building skill trees from catalog rows.
"""

from __future__ import annotations

from camper_sheet.rules.catalog import build_skill_trees, parse_prerequisites, tree_id_for
from camper_sheet.rules.graph import (
    build_prerequisite_graph,
    dangling_prerequisites,
    find_prerequisite_cycle,
    skill_depths,
    skill_layers,
    validate_tree_graph,
)
from camper_sheet.rules.skills import (
    apply_unlock,
    can_access_tree,
    can_unlock_skill,
    order_trees,
    skill_point_budget,
    skill_status,
    spent_skill_points,
    summarize_skill_points,
    tree_lock_reason,
    tree_skill_statuses,
)
from camper_sheet.rules.stats import (
    StatValidationResult,
    can_set_stat,
    effective_stat,
    effective_stats,
    remaining_points,
    total_points,
    validate_stats,
)


__all__ = [
    # Stats
    "StatValidationResult",
    "validate_stats",
    "total_points",
    "remaining_points",
    "effective_stat",
    "effective_stats",
    "can_set_stat",
    # Skills
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
    # Graph
    "build_prerequisite_graph",
    "find_prerequisite_cycle",
    "dangling_prerequisites",
    "validate_tree_graph",
    "skill_depths",
    "skill_layers",
    # Catalog
    "tree_id_for",
    "parse_prerequisites",
    "build_skill_trees",
]
