"""Prerequisite graph analysis for skill trees.

Skills form a DAG through their prerequisite lists. The unlock rules never
walk this graph, so a cyclic or dangling tree still evaluates; it just
leaves some skills permanently locked. These helpers detect such trees
before they reach players and compute layout depth for tree rendering.

Edges point from prerequisite to dependent skill.
"""

from __future__ import annotations

import networkx as nx

from camper_sheet.core.exceptions import InvalidSkillTreeError
from camper_sheet.models.skills import SkillTree


def build_prerequisite_graph(tree: SkillTree) -> nx.DiGraph:
    """Build the prerequisite graph of a tree.

    Every skill becomes a node flagged ``in_tree=True``. Prerequisites that
    the tree does not define still become nodes, flagged ``in_tree=False``.

    Args:
        tree: The tree to analyze.

    Returns:
        A directed graph with edges prerequisite -> skill.
    """
    graph = nx.DiGraph(tree_id=tree.id)
    graph.add_nodes_from(tree.skill_ids, in_tree=True)
    for skill in tree.skills:
        for prereq in skill.prerequisites:
            if prereq not in graph:
                graph.add_node(prereq, in_tree=False)
            graph.add_edge(prereq, skill.id)
    return graph


def find_prerequisite_cycle(tree: SkillTree) -> list[str] | None:
    """Find one prerequisite cycle, if any.

    Returns:
        Skill ids along the cycle in edge order, or None for a DAG.
    """
    graph = build_prerequisite_graph(tree)
    try:
        edges = nx.find_cycle(graph, orientation="original")
    except nx.NetworkXNoCycle:
        return None
    return [edge[0] for edge in edges]


def dangling_prerequisites(tree: SkillTree) -> dict[str, list[str]]:
    """Prerequisites that do not resolve to a skill in the same tree.

    Returns:
        Mapping of skill id to its unresolved prerequisite ids; skills with
        none are omitted.
    """
    dangling: dict[str, list[str]] = {}
    for skill in tree.skills:
        missing = [prereq for prereq in skill.prerequisites if not tree.has_skill(prereq)]
        if missing:
            dangling[skill.id] = missing
    return dangling


def validate_tree_graph(tree: SkillTree) -> None:
    """Check that a tree's prerequisites form a DAG inside the tree.

    Raises:
        InvalidSkillTreeError: On a dangling prerequisite or a cycle.
    """
    dangling = dangling_prerequisites(tree)
    if dangling:
        raise InvalidSkillTreeError(
            "Prerequisites do not resolve within the tree",
            tree_id=tree.id,
            details={"dangling": dangling},
        )

    cycle = find_prerequisite_cycle(tree)
    if cycle is not None:
        path = " -> ".join([*cycle, cycle[0]])
        raise InvalidSkillTreeError(
            f"Prerequisite cycle: {path}",
            tree_id=tree.id,
            details={"cycle": cycle},
        )


def skill_depths(tree: SkillTree) -> dict[str, int]:
    """Layout depth of every skill.

    Root skills sit at depth 0; any other skill sits one below its deepest
    prerequisite. Prerequisites the tree does not define count as depth 0.

    Returns:
        Depth by skill id, in tree order.

    Raises:
        InvalidSkillTreeError: If the prerequisites contain a cycle.
    """
    graph = build_prerequisite_graph(tree)
    try:
        order = list(nx.topological_sort(graph))
    except nx.NetworkXUnfeasible as exc:
        raise InvalidSkillTreeError(
            "Cannot lay out a tree with a prerequisite cycle",
            tree_id=tree.id,
        ) from exc

    depths: dict[str, int] = {}
    for node in order:
        prereqs = list(graph.predecessors(node))
        depths[node] = 1 + max(depths[p] for p in prereqs) if prereqs else 0
    return {skill_id: depths[skill_id] for skill_id in tree.skill_ids}


def skill_layers(tree: SkillTree) -> list[list[str]]:
    """Skill ids grouped by depth, shallowest first, tree order within a layer."""
    depths = skill_depths(tree)
    if not depths:
        return []
    layers: list[list[str]] = [[] for _ in range(max(depths.values()) + 1)]
    for skill_id, depth in depths.items():
        layers[depth].append(skill_id)
    return layers


__all__ = [
    "build_prerequisite_graph",
    "find_prerequisite_cycle",
    "dangling_prerequisites",
    "validate_tree_graph",
    "skill_depths",
    "skill_layers",
]
