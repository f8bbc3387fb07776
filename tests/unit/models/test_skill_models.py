"""Tests for skill and skill tree models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from camper_sheet.models import Attribute, Skill, SkillTree


class TestSkill:
    """Tests for Skill."""

    def test_minimal(self) -> None:
        """Only the id is required."""
        skill = Skill(id="grip")
        assert skill.name == ""
        assert skill.prerequisites == ()
        assert skill.icon is None
        assert skill.is_root

    def test_prerequisites_keep_order(self) -> None:
        """Prerequisites are stored in the given order."""
        skill = Skill(id="lift", prerequisites=["push", "focus"])
        assert skill.prerequisites == ("push", "focus")
        assert not skill.is_root

    def test_rejects_empty_id(self) -> None:
        """An empty id is malformed."""
        with pytest.raises(ValidationError):
            Skill(id="")


class TestSkillTree:
    """Tests for SkillTree."""

    def test_attribute_from_string(self) -> None:
        """The governing attribute coerces from its key."""
        tree = SkillTree(id="strength", attribute="might")
        assert tree.attribute is Attribute.MIGHT
        assert tree.skills == ()

    def test_requires_attribute(self) -> None:
        """A tree without an attribute is malformed."""
        with pytest.raises(ValidationError):
            SkillTree(id="strength")  # type: ignore[call-arg]

    def test_rejects_unknown_attribute(self) -> None:
        """Only the six attributes can govern a tree."""
        with pytest.raises(ValidationError):
            SkillTree(id="strength", attribute="luck")

    def test_rejects_duplicate_skill_ids(self) -> None:
        """Skill ids are unique within a tree."""
        with pytest.raises(ValidationError):
            SkillTree(id="strength", attribute="might", skills=[Skill(id="a"), Skill(id="a")])

    def test_lookup(self, strength_tree: SkillTree) -> None:
        """Skills can be found by id."""
        skill = strength_tree.get_skill("child-skill")
        assert skill is not None
        assert skill.name == "Heavy Lift"
        assert strength_tree.get_skill("missing") is None
        assert strength_tree.has_skill("root-skill")
        assert strength_tree.skill_ids == ("root-skill", "child-skill")

    def test_display_name(self) -> None:
        """Attributes capitalize for display."""
        assert Attribute.PROWESS.display_name == "Prowess"
