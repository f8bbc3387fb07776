"""Stat allocation rules.

Point-buy validation for the six base attributes and the proficiency
bonus applied to displayed values. Everything here is pure: inputs are
never mutated and no state is kept between calls.

Rules:
    - each attribute is an integer in [0, 10]
    - the six attributes sum to at most 30
    - at most 2 distinct proficiencies, each a valid attribute
    - level, when given, is an integer in [0, 20]

Example:
    >>> result = validate_stats({"charm": 6, "agility": 5, "might": 5,
    ...                          "prowess": 5, "endurance": 5, "resolve": 5})
    >>> result.success
    False
    >>> result.message
    'Total stat points cannot exceed 30'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from camper_sheet.core.constants import (
    MAX_LEVEL,
    MAX_PROFICIENCIES,
    MAX_STAT_POINTS,
    MAX_STAT_VALUE,
    MIN_LEVEL,
    MIN_STAT_VALUE,
    PROFICIENCY_BONUS,
)
from camper_sheet.core.exceptions import StatValidationError
from camper_sheet.core.logging import get_logger
from camper_sheet.models.character import StatBlock
from camper_sheet.models.enums import ATTRIBUTE_NAMES, Attribute
from camper_sheet.models.results import RuleVerdict


logger = get_logger(__name__)


StatsInput = StatBlock | Mapping[str, Any]


@dataclass(frozen=True)
class StatValidationResult:
    """Outcome of validate_stats.

    Attributes:
        errors: Every violated rule, in evaluation order.
    """

    errors: tuple[StatValidationError, ...] = ()

    @property
    def success(self) -> bool:
        """True when no rule was violated."""
        return not self.errors

    @property
    def error(self) -> StatValidationError | None:
        """The first violated rule, if any."""
        return self.errors[0] if self.errors else None

    @property
    def message(self) -> str | None:
        """Message of the first violated rule, if any."""
        return self.errors[0].message if self.errors else None

    def raise_for_errors(self) -> None:
        """Raise the first violation.

        Raises:
            StatValidationError: If any rule was violated.
        """
        if self.errors:
            raise self.errors[0]


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _stat_mapping(stats: StatsInput) -> Mapping[str, Any]:
    if isinstance(stats, StatBlock):
        return {attr.value: value for attr, value in stats.as_dict().items()}
    return stats


def _check_stats(stats: Mapping[str, Any]) -> list[StatValidationError]:
    errors: list[StatValidationError] = []

    for attr in Attribute:
        value = stats.get(attr.value)
        if value is None:
            errors.append(StatValidationError(
                f"Stat '{attr.value}' is required",
                field_name=attr.value,
            ))
        elif not _is_integer(value):
            errors.append(StatValidationError(
                f"Stat '{attr.value}' must be an integer",
                field_name=attr.value,
                invalid_value=value,
            ))
        elif not MIN_STAT_VALUE <= value <= MAX_STAT_VALUE:
            errors.append(StatValidationError(
                f"Stat '{attr.value}' must be between {MIN_STAT_VALUE} and {MAX_STAT_VALUE}",
                field_name=attr.value,
                invalid_value=value,
            ))

    total = total_points(stats)
    if total > MAX_STAT_POINTS:
        errors.append(StatValidationError(
            f"Total stat points cannot exceed {MAX_STAT_POINTS}",
            field_name="total",
            invalid_value=total,
        ))
    return errors


def _check_proficiencies(proficiencies: Iterable[Any]) -> list[StatValidationError]:
    errors: list[StatValidationError] = []
    entries = list(proficiencies)

    if len(entries) > MAX_PROFICIENCIES:
        errors.append(StatValidationError(
            f"Cannot have more than {MAX_PROFICIENCIES} proficiencies",
            field_name="proficiencies",
            invalid_value=len(entries),
        ))

    seen: set[str] = set()
    for entry in entries:
        if entry not in ATTRIBUTE_NAMES:
            errors.append(StatValidationError(
                f"Invalid proficiency '{entry}'",
                field_name="proficiencies",
                invalid_value=entry,
            ))
        elif entry in seen:
            errors.append(StatValidationError(
                f"Duplicate proficiency '{entry}'",
                field_name="proficiencies",
                invalid_value=entry,
            ))
        else:
            seen.add(entry)
    return errors


def _check_level(level: Any) -> list[StatValidationError]:
    if not _is_integer(level):
        return [StatValidationError(
            "Level must be an integer",
            field_name="level",
            invalid_value=level,
        )]
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        return [StatValidationError(
            f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}",
            field_name="level",
            invalid_value=level,
        )]
    return []


def validate_stats(
    stats: StatsInput,
    proficiencies: Iterable[Attribute | str] | None = None,
    level: int | None = None,
) -> StatValidationResult:
    """Validate a stat allocation.

    This is the final authority on allocations: interactive callers may
    pre-check edits with can_set_stat, but must still validate here
    before persisting.

    Args:
        stats: Base values keyed by attribute name, or a StatBlock.
        proficiencies: Optional proficient attribute names.
        level: Optional character level.

    Returns:
        A result listing every violated rule; empty when valid.
    """
    errors = _check_stats(_stat_mapping(stats))
    if proficiencies is not None:
        errors.extend(_check_proficiencies(proficiencies))
    if level is not None:
        errors.extend(_check_level(level))

    if errors:
        logger.debug(
            "Stat allocation rejected",
            violations=[error.message for error in errors],
        )
    return StatValidationResult(errors=tuple(errors))


def total_points(stats: StatsInput) -> int:
    """Sum the six base values.

    Absent or None attributes count as 0; non-integer values are ignored
    so this never fails.

    Args:
        stats: Base values keyed by attribute name, or a StatBlock.

    Returns:
        The total of all six attributes.
    """
    if isinstance(stats, StatBlock):
        return stats.total
    total = 0
    for attr in Attribute:
        value = stats.get(attr.value)
        if _is_integer(value):
            total += value
    return total


def remaining_points(stats: StatsInput) -> int:
    """Points left in the global stat budget (negative when over)."""
    return MAX_STAT_POINTS - total_points(stats)


def effective_stat(
    attribute: Attribute | str,
    base_value: int,
    proficiencies: Iterable[Attribute | str] | None = None,
) -> int:
    """Displayed value of an attribute.

    The result is for display and derived stats only and must never be
    written back as the stored base value.

    Args:
        attribute: The attribute being displayed.
        base_value: Its stored base value.
        proficiencies: The character's proficiencies, if any.

    Returns:
        ``base_value + 3`` when proficient, else ``base_value``.

    Example:
        >>> effective_stat("charm", 5, ["charm"])
        8
    """
    if proficiencies is not None and attribute in set(proficiencies):
        return base_value + PROFICIENCY_BONUS
    return base_value


def effective_stats(
    stats: StatsInput,
    proficiencies: Iterable[Attribute | str] | None = None,
) -> dict[Attribute, int]:
    """Displayed values for all six attributes, e.g. for a radar chart."""
    mapping = _stat_mapping(stats)
    proficient = set(proficiencies or ())
    result: dict[Attribute, int] = {}
    for attr in Attribute:
        value = mapping.get(attr.value)
        base = value if _is_integer(value) else 0
        result[attr] = effective_stat(attr, base, proficient)
    return result


def can_set_stat(stats: StatsInput, attribute: Attribute | str, value: int) -> RuleVerdict:
    """Pre-check a single-stat edit in an interactive flow.

    Bounds are checked before the budget; the budget check counts the
    other five attributes plus the proposed value.

    Args:
        stats: Current base values.
        attribute: The attribute being edited.
        value: The proposed new base value.

    Returns:
        An allowing verdict, or a denial naming the violated rule.
    """
    attr = Attribute(attribute)
    if not _is_integer(value):
        return RuleVerdict.deny(f"Stat '{attr.value}' must be an integer")
    if not MIN_STAT_VALUE <= value <= MAX_STAT_VALUE:
        return RuleVerdict.deny(
            f"Stat '{attr.value}' must be between {MIN_STAT_VALUE} and {MAX_STAT_VALUE}"
        )

    proposed = dict(_stat_mapping(stats))
    proposed[attr.value] = value
    if total_points(proposed) > MAX_STAT_POINTS:
        return RuleVerdict.deny(f"Total stat points cannot exceed {MAX_STAT_POINTS}")
    return RuleVerdict.allow()


__all__ = [
    "StatValidationResult",
    "validate_stats",
    "total_points",
    "remaining_points",
    "effective_stat",
    "effective_stats",
    "can_set_stat",
]
