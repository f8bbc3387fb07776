"""Tests for prerequisite graph analysis."""

from __future__ import annotations

import pytest

from camper_sheet.core.exceptions import InvalidSkillTreeError
from camper_sheet.models import Skill, SkillTree
from camper_sheet.rules.graph import (
    build_prerequisite_graph,
    dangling_prerequisites,
    find_prerequisite_cycle,
    skill_depths,
    skill_layers,
    validate_tree_graph,
)


def _tree(*skills: Skill) -> SkillTree:
    return SkillTree(id="test", attribute="resolve", skills=list(skills))


class TestBuildGraph:
    """Tests for build_prerequisite_graph."""

    def test_edges_point_to_dependents(self, strength_tree: SkillTree) -> None:
        """Edges run from prerequisite to dependent skill."""
        graph = build_prerequisite_graph(strength_tree)
        assert graph.has_edge("root-skill", "child-skill")
        assert not graph.has_edge("child-skill", "root-skill")

    def test_flags_unknown_prerequisites(self) -> None:
        """Prerequisites outside the tree are marked."""
        graph = build_prerequisite_graph(_tree(Skill(id="a", prerequisites=["ghost"])))
        assert graph.nodes["a"]["in_tree"] is True
        assert graph.nodes["ghost"]["in_tree"] is False


class TestValidation:
    """Tests for cycle and dangling prerequisite checks."""

    def test_valid_dag(self, psionics_tree: SkillTree) -> None:
        """A proper DAG passes."""
        assert find_prerequisite_cycle(psionics_tree) is None
        assert dangling_prerequisites(psionics_tree) == {}
        validate_tree_graph(psionics_tree)

    def test_detects_cycle(self) -> None:
        """Mutual prerequisites form a cycle."""
        tree = _tree(
            Skill(id="a", prerequisites=["c"]),
            Skill(id="b", prerequisites=["a"]),
            Skill(id="c", prerequisites=["b"]),
        )
        cycle = find_prerequisite_cycle(tree)
        assert cycle is not None
        assert sorted(cycle) == ["a", "b", "c"]
        with pytest.raises(InvalidSkillTreeError) as exc_info:
            validate_tree_graph(tree)
        assert "cycle" in exc_info.value.message
        assert exc_info.value.details["tree_id"] == "test"

    def test_detects_self_prerequisite(self) -> None:
        """A skill requiring itself is a cycle."""
        tree = _tree(Skill(id="a", prerequisites=["a"]))
        assert find_prerequisite_cycle(tree) == ["a"]

    def test_detects_dangling(self) -> None:
        """Prerequisites that do not resolve inside the tree are reported."""
        tree = _tree(Skill(id="a"), Skill(id="b", prerequisites=["a", "elsewhere"]))
        assert dangling_prerequisites(tree) == {"b": ["elsewhere"]}
        with pytest.raises(InvalidSkillTreeError):
            validate_tree_graph(tree)


class TestDepths:
    """Tests for layout depth."""

    def test_depths(self, psionics_tree: SkillTree) -> None:
        """Depth is one below the deepest prerequisite."""
        assert skill_depths(psionics_tree) == {
            "focus": 0,
            "mind-read": 1,
            "push": 1,
            "lift": 2,
        }

    def test_layers(self, psionics_tree: SkillTree) -> None:
        """Layers group skills by depth in tree order."""
        assert skill_layers(psionics_tree) == [["focus"], ["mind-read", "push"], ["lift"]]

    def test_unknown_prerequisite_counts_as_root(self) -> None:
        """An unresolved prerequisite sits at depth 0."""
        tree = _tree(Skill(id="a", prerequisites=["ghost"]))
        assert skill_depths(tree) == {"a": 1}

    def test_empty_tree(self) -> None:
        """A tree without skills has no layers."""
        assert skill_layers(_tree()) == []

    def test_cycle_cannot_be_laid_out(self) -> None:
        """Depth is undefined on a cycle."""
        tree = _tree(Skill(id="a", prerequisites=["b"]), Skill(id="b", prerequisites=["a"]))
        with pytest.raises(InvalidSkillTreeError):
            skill_depths(tree)
