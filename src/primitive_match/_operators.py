"""Set-membership operators: either / neither.

``either(a, b)`` matches a position whose value equals a or b.
``neither(a, b)`` matches a position whose value equals neither.
Element equality follows the same rule as literals (see values_equal).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from primitive_match._types import Literal, MatcherError, Wildcard, values_equal


class Operator(StrEnum):
    EITHER = "either"
    NEITHER = "neither"


@dataclass(frozen=True, slots=True)
class Operation:
    """An immutable set-membership descriptor.

    Elements keep the caller's order. No deduplication, no sorting.
    An empty ``either`` never matches; an empty ``neither`` always matches.

    Raises:
        MatcherError: If operator is not a known Operator.
    """

    operator: Operator
    elements: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        try:
            operator = Operator(self.operator)
        except ValueError as e:
            expected = [op.value for op in Operator]
            msg = f"unknown set operator {self.operator!r}, expected one of {expected}"
            raise MatcherError(msg) from e
        object.__setattr__(self, "operator", operator)
        object.__setattr__(self, "elements", tuple(self.elements))

    def matches(self, value: Any, /) -> bool:
        found = any(values_equal(element, value) for element in self.elements)
        if self.operator is Operator.EITHER:
            return found
        return not found


def either(*values: Any) -> Operation:
    """Match when the value equals at least one of ``values``."""
    return Operation(Operator.EITHER, values)


def neither(*values: Any) -> Operation:
    """Match when the value equals none of ``values``."""
    return Operation(Operator.NEITHER, values)


# The explicit tagged union replacing duck typing on an ``operator`` field.
type PatternElement = Literal | Wildcard | Operation


def pattern_element(value: Any) -> PatternElement:
    """Classify a raw pattern entry.

    Wildcards, Operations and explicit Literals pass through unchanged.
    Everything else becomes a Literal, including objects that happen to
    carry an ``operator`` attribute.
    """
    match value:
        case Wildcard() | Operation() | Literal():
            return value
        case _:
            return Literal(value)
