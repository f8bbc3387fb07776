"""Skill and skill tree models.

A skill tree is a named collection of skills governed by one attribute.
Skills list prerequisite skill ids from the same tree; cross-tree
prerequisites are not supported.

Example:
    >>> tree = SkillTree(
    ...     id="strength",
    ...     name="Strength",
    ...     attribute=Attribute.MIGHT,
    ...     skills=[
    ...         Skill(id="grip", name="Iron Grip"),
    ...         Skill(id="lift", name="Heavy Lift", prerequisites=["grip"]),
    ...     ],
    ... )
    >>> tree.get_skill("lift").prerequisites
    ('grip',)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from camper_sheet.models.enums import Attribute


class Skill(BaseModel):
    """A single unlockable skill.

    Attributes:
        id: Identity, unique within its tree.
        name: Display name.
        description: Display description.
        prerequisites: Ordered ids of skills that must be unlocked first.
        icon: Optional icon reference.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Skill identity")
    name: str = Field(default="", description="Display name")
    description: str = Field(default="", description="Display description")
    prerequisites: tuple[str, ...] = Field(
        default=(),
        description="Ids of skills in the same tree that must be unlocked first",
    )
    icon: str | None = Field(default=None, description="Icon reference")

    @property
    def is_root(self) -> bool:
        """Whether the skill has no prerequisites."""
        return not self.prerequisites


class SkillTree(BaseModel):
    """A named, attribute-gated collection of skills.

    Attributes:
        id: Tree identity, used as the key in the unlock ledger.
        name: Display name.
        attribute: Governing attribute checked by the tree access gate.
        skills: Skills in display order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Tree identity")
    name: str = Field(default="", description="Display name")
    attribute: Attribute = Field(description="Governing attribute")
    skills: tuple[Skill, ...] = Field(default=(), description="Skills in display order")

    @model_validator(mode="after")
    def check_unique_skill_ids(self) -> SkillTree:
        """Reject trees that define the same skill id twice."""
        seen: set[str] = set()
        for skill in self.skills:
            if skill.id in seen:
                msg = f"Skill '{skill.id}' is defined more than once in tree '{self.id}'"
                raise ValueError(msg)
            seen.add(skill.id)
        return self

    @property
    def skill_ids(self) -> tuple[str, ...]:
        """Ids of all skills in display order."""
        return tuple(skill.id for skill in self.skills)

    def get_skill(self, skill_id: str) -> Skill | None:
        """Look up a skill by id.

        Args:
            skill_id: The skill to find.

        Returns:
            The skill, or None when the tree has no such skill.
        """
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None

    def has_skill(self, skill_id: str) -> bool:
        """Check whether the tree defines a skill id."""
        return self.get_skill(skill_id) is not None


__all__ = [
    "Skill",
    "SkillTree",
]
