"""Skill tree catalog loading.

Skill definitions are authored as flat rows (one skill per row) in a
shared spreadsheet. Fetching the rows is the caller's business; this
module groups them into validated SkillTree models.

Row layout:
    skill_id, name, description, tree_name, attribute, prerequisites, icon

Trailing columns may be omitted. Prerequisites are comma-separated skill
ids.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any

from camper_sheet.core.config import get_settings
from camper_sheet.core.exceptions import InvalidSkillTreeError
from camper_sheet.core.logging import get_logger
from camper_sheet.models.enums import Attribute
from camper_sheet.models.skills import Skill, SkillTree
from camper_sheet.rules.graph import validate_tree_graph


logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")

_COLUMNS = ("skill_id", "name", "description", "tree_name", "attribute", "prerequisites", "icon")


def tree_id_for(tree_name: str) -> str:
    """Derive a tree id from its display name.

    Example:
        >>> tree_id_for("Raw Strength")
        'raw-strength'
    """
    return _WHITESPACE.sub("-", tree_name.lower())


def parse_prerequisites(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated prerequisite cell into skill ids."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _cell(row: Sequence[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def _parse_attribute(raw: str, tree_id: str) -> Attribute:
    try:
        return Attribute(raw.strip().lower())
    except ValueError as exc:
        raise InvalidSkillTreeError(
            f"Unknown tree attribute '{raw}'",
            tree_id=tree_id,
        ) from exc


def build_skill_trees(
    rows: Iterable[Sequence[Any]],
    *,
    validate_graphs: bool | None = None,
) -> list[SkillTree]:
    """Group catalog rows into skill trees.

    Rows missing a skill id or tree name are skipped. A tree takes its
    attribute from its first row and keeps skills in row order; trees are
    returned in order of first appearance.

    Args:
        rows: Catalog rows in the documented column order.
        validate_graphs: Check each tree for cycles and dangling
            prerequisites. Defaults to ``rules.validate_tree_graphs``.

    Returns:
        The assembled trees.

    Raises:
        InvalidSkillTreeError: On an unknown attribute, or a failed graph
            check when validation is enabled.
    """
    if validate_graphs is None:
        validate_graphs = get_settings().rules.validate_tree_graphs

    grouped: dict[str, dict[str, Any]] = {}
    skipped = 0
    for row in rows:
        skill_id = _cell(row, _COLUMNS.index("skill_id")).strip()
        tree_name = _cell(row, _COLUMNS.index("tree_name")).strip()
        if not skill_id or not tree_name:
            skipped += 1
            continue

        tree_id = tree_id_for(tree_name)
        if tree_id not in grouped:
            grouped[tree_id] = {
                "id": tree_id,
                "name": tree_name,
                "attribute": _parse_attribute(_cell(row, _COLUMNS.index("attribute")), tree_id),
                "skills": [],
            }

        icon = _cell(row, _COLUMNS.index("icon")).strip()
        grouped[tree_id]["skills"].append(
            Skill(
                id=skill_id,
                name=_cell(row, _COLUMNS.index("name")),
                description=_cell(row, _COLUMNS.index("description")),
                prerequisites=parse_prerequisites(_cell(row, _COLUMNS.index("prerequisites"))),
                icon=icon or None,
            )
        )

    trees = [SkillTree(**data) for data in grouped.values()]
    if validate_graphs:
        for tree in trees:
            validate_tree_graph(tree)

    logger.info(
        "Skill trees built from catalog",
        trees=len(trees),
        skills=sum(len(tree.skills) for tree in trees),
        skipped_rows=skipped,
    )
    return trees


__all__ = [
    "tree_id_for",
    "parse_prerequisites",
    "build_skill_trees",
]
