"""Character progression snapshot models.

A CharacterSnapshot is built fresh from persisted state before every rule
evaluation and is never mutated in place. Rule functions return verdicts or
new snapshots; the caller owns the read-modify-write cycle and must
serialize writes per character.

Models:
    StatBlock: The six base attribute values.
    UnlockLedger: Unlocked skill ids grouped by tree.
    CharacterSnapshot: Level, stats, proficiencies, and ledger.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from camper_sheet.core.constants import (
    MAX_LEVEL,
    MAX_PROFICIENCIES,
    MAX_STAT_POINTS,
    MAX_STAT_VALUE,
    MIN_LEVEL,
    MIN_STAT_VALUE,
)
from camper_sheet.core.exceptions import LedgerError
from camper_sheet.models.enums import LEGACY_ATTRIBUTE_KEYS, Attribute
from camper_sheet.models.skills import SkillTree


# =============================================================================
# Stat Block
# =============================================================================


StatValue = Annotated[
    int,
    Field(ge=MIN_STAT_VALUE, le=MAX_STAT_VALUE, description="Base attribute value (0-10)"),
]


class StatBlock(BaseModel):
    """The six base attribute values of a character.

    Values are the stored base values; proficiency bonuses are never
    folded in here.

    Example:
        >>> stats = StatBlock(charm=5, might=7)
        >>> stats.total
        12
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    charm: StatValue = 0
    agility: StatValue = 0
    might: StatValue = 0
    prowess: StatValue = 0
    endurance: StatValue = 0
    resolve: StatValue = 0

    @model_validator(mode="after")
    def check_point_budget(self) -> StatBlock:
        """Reject blocks whose total exceeds the point budget."""
        if self.total > MAX_STAT_POINTS:
            msg = f"Total stat points cannot exceed {MAX_STAT_POINTS}, got {self.total}"
            raise ValueError(msg)
        return self

    @property
    def total(self) -> int:
        """Sum of all six base values."""
        return (
            self.charm + self.agility + self.might
            + self.prowess + self.endurance + self.resolve
        )

    def get(self, attribute: Attribute | str) -> int:
        """Get the base value of one attribute.

        Args:
            attribute: Attribute or its key.

        Returns:
            The base value.
        """
        return getattr(self, Attribute(attribute).value)

    def as_dict(self) -> dict[Attribute, int]:
        """Base values keyed by attribute, in canonical order."""
        return {attr: self.get(attr) for attr in Attribute}


# =============================================================================
# Unlock Ledger
# =============================================================================


class UnlockLedger(BaseModel):
    """Unlocked skill ids grouped by tree.

    Iteration follows insertion order for both trees and skills so a
    persisted ledger round-trips unchanged. A skill id appears at most
    once per tree. ``trees`` is a read-only mapping; use ``with_unlock``
    to derive a changed ledger.

    Example:
        >>> ledger = UnlockLedger().with_unlock("strength", "grip")
        >>> ledger.unlocked_in("strength")
        ('grip',)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    trees: Mapping[str, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("trees", mode="after")
    @classmethod
    def check_unique_per_tree(
        cls, value: Mapping[str, tuple[str, ...]]
    ) -> Mapping[str, tuple[str, ...]]:
        """Reject entries listing the same skill twice in one tree."""
        for tree_id, skill_ids in value.items():
            if len(set(skill_ids)) != len(skill_ids):
                msg = f"Tree '{tree_id}' lists an unlocked skill more than once"
                raise ValueError(msg)
        return MappingProxyType(dict(value))

    @field_serializer("trees")
    def serialize_trees(self, value: Mapping[str, tuple[str, ...]]) -> dict[str, list[str]]:
        """Dump the read-only mapping as a plain dict."""
        return {tree_id: list(skill_ids) for tree_id, skill_ids in value.items()}

    @classmethod
    def from_raw(cls, raw: Mapping[str, Sequence[Any]] | None) -> UnlockLedger:
        """Build a ledger from persisted data.

        Entries may be plain skill ids or objects with an ``id`` key;
        both formats exist in stored character records.

        Args:
            raw: Mapping of tree id to a sequence of entries.

        Returns:
            The normalized ledger.
        """
        trees: dict[str, tuple[str, ...]] = {}
        for tree_id, entries in (raw or {}).items():
            trees[tree_id] = tuple(
                entry if isinstance(entry, str) else str(entry["id"])
                for entry in entries
            )
        return cls(trees=trees)

    def to_raw(
        self, catalog: Mapping[str, SkillTree] | None = None
    ) -> dict[str, list[Any]]:
        """Plain mapping suitable for persistence.

        Without a catalog, entries are bare skill ids. With one, entries
        take the ``{"id", "name"}`` shape that current character records
        store; skills the catalog no longer defines keep their id as name.

        Args:
            catalog: Optional skill trees keyed by tree id.

        Returns:
            Mapping of tree id to a list of entries, in ledger order.
        """
        if catalog is None:
            return {tree_id: list(skill_ids) for tree_id, skill_ids in self.trees.items()}

        raw: dict[str, list[Any]] = {}
        for tree_id, skill_ids in self.trees.items():
            tree = catalog.get(tree_id)
            entries = []
            for skill_id in skill_ids:
                skill = tree.get_skill(skill_id) if tree is not None else None
                name = skill.name if skill is not None and skill.name else skill_id
                entries.append({"id": skill_id, "name": name})
            raw[tree_id] = entries
        return raw

    def unlocked_in(self, tree_id: str) -> tuple[str, ...]:
        """Skill ids unlocked in a tree, empty if none."""
        return self.trees.get(tree_id, ())

    def has_unlocked(self, tree_id: str, skill_id: str) -> bool:
        """Check whether a skill is unlocked in a tree."""
        return skill_id in self.unlocked_in(tree_id)

    def with_unlock(self, tree_id: str, skill_id: str) -> UnlockLedger:
        """Return a new ledger with a skill appended to a tree's entry.

        Args:
            tree_id: Tree the skill belongs to.
            skill_id: Skill being unlocked.

        Returns:
            A new ledger; this one is unchanged.

        Raises:
            LedgerError: If the skill is already in the tree's entry.
        """
        if self.has_unlocked(tree_id, skill_id):
            raise LedgerError(
                f"Skill '{skill_id}' is already unlocked",
                tree_id=tree_id,
                skill_id=skill_id,
            )
        trees = dict(self.trees)
        trees[tree_id] = (*self.unlocked_in(tree_id), skill_id)
        return UnlockLedger(trees=trees)

    @property
    def total_unlocked(self) -> int:
        """Count of unlocked ids across all trees."""
        return sum(len(skill_ids) for skill_ids in self.trees.values())


# =============================================================================
# Character Snapshot
# =============================================================================


class CharacterSnapshot(BaseModel):
    """Read-only view of a character's progression state.

    Attributes:
        level: Character level (0-20).
        stats: Base attribute values.
        proficiencies: Proficient attributes in stored order.
        ledger: Unlocked skills by tree.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int = Field(default=0, ge=MIN_LEVEL, le=MAX_LEVEL, description="Character level")
    stats: StatBlock = Field(default_factory=StatBlock)
    proficiencies: tuple[Attribute, ...] = Field(default=())
    ledger: UnlockLedger = Field(default_factory=UnlockLedger)

    @field_validator("proficiencies", mode="after")
    @classmethod
    def check_proficiency_set(cls, value: tuple[Attribute, ...]) -> tuple[Attribute, ...]:
        """Hold proficiencies to the same limits as stat validation."""
        if len(value) > MAX_PROFICIENCIES:
            msg = f"Cannot have more than {MAX_PROFICIENCIES} proficiencies"
            raise ValueError(msg)
        if len(set(value)) != len(value):
            msg = "Proficiencies must not repeat an attribute"
            raise ValueError(msg)
        return value

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any] | None) -> CharacterSnapshot:
        """Build a snapshot from a persisted character attribute blob.

        Missing stats count as 0 and the legacy ``power`` key is read as
        prowess when ``prowess`` itself is absent.

        Args:
            attributes: The stored attribute mapping (level, the six stats,
                proficiencies, skills).

        Returns:
            A validated snapshot.
        """
        attributes = attributes or {}
        stats: dict[str, int] = {}
        for attr in Attribute:
            value = attributes.get(attr.value)
            if value is None:
                for legacy_key, target in LEGACY_ATTRIBUTE_KEYS.items():
                    if target is attr:
                        value = attributes.get(legacy_key)
            stats[attr.value] = value or 0

        return cls(
            level=attributes.get("level") or 0,
            stats=StatBlock(**stats),
            proficiencies=tuple(attributes.get("proficiencies") or ()),
            ledger=UnlockLedger.from_raw(attributes.get("skills")),
        )

    def stat(self, attribute: Attribute | str) -> int:
        """Base value of one attribute."""
        return self.stats.get(attribute)

    def is_proficient(self, attribute: Attribute | str) -> bool:
        """Check whether the character is proficient in an attribute."""
        return Attribute(attribute) in self.proficiencies

    def with_ledger(self, ledger: UnlockLedger) -> CharacterSnapshot:
        """Return a copy of this snapshot with a different ledger."""
        return self.model_copy(update={"ledger": ledger})


__all__ = [
    "StatValue",
    "StatBlock",
    "UnlockLedger",
    "CharacterSnapshot",
]
