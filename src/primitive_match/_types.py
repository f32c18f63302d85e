"""Core pattern element types for primitive_match.

A pattern tuple is an explicit tagged union, classified once when an arm is
built:
- Literal wraps a plain value (value equality for primitives, identity otherwise)
- Wildcard is the single ``_`` placeholder that matches any value
- Operation is an either/neither set-membership descriptor (see _operators)

Every element exposes ``matches(value, /) -> bool``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Compared by exact type + ==. Anything else is compared by identity.
PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)

# Compared numerically with each other. bool is not a number here.
NUMBER_TYPES: tuple[type, ...] = (int, float)


class MatcherError(Exception):
    """Errors from pattern validation."""


def values_equal(expected: Any, actual: Any) -> bool:
    """Compare a pattern value against a runtime value.

    Primitives are equal only when they share the exact type and compare
    equal, so ``1`` never equals ``True`` and ``nan`` never equals itself.
    ``int`` and ``float`` form a single number type: ``1`` equals ``1.0``.
    Composite values are equal only when they are the same object.
    """
    expected_type, actual_type = type(expected), type(actual)
    if expected_type in PRIMITIVE_TYPES:
        if expected_type in NUMBER_TYPES and actual_type in NUMBER_TYPES:
            return expected == actual
        return actual_type is expected_type and expected == actual
    return expected is actual


class Wildcard(Enum):
    """The wildcard pattern element. Matches any value at its position.

    A single-member enum, so exactly one instance exists for the lifetime of
    the process. It is exported as ``_``.
    """

    ANY = "_"

    def matches(self, value: Any, /) -> bool:
        return True

    def __repr__(self) -> str:
        return "_"


_ = Wildcard.ANY


@dataclass(frozen=True, slots=True)
class Literal:
    """A literal pattern element.

    Plain values in a pattern are wrapped automatically. Wrap explicitly to
    match a value that would otherwise be read as a wildcard or an operation,
    e.g. ``Literal(either(1))`` matches that exact Operation object.
    """

    value: Any

    def matches(self, value: Any, /) -> bool:
        return values_equal(self.value, value)
