"""Arms and dispatch — first-match-wins selection over flat value tuples.

Evaluation semantics:
- An arm is a compiled pattern tuple plus a result captured eagerly at
  construction time. Results are values, never deferred computations.
- Arity mismatch and any single-position mismatch are a NegativeMatch,
  never an error.
- match() evaluates every arm, then selects the first positive outcome in
  list order. By default a positive outcome whose result is falsy is
  skipped, as though the arm had not matched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from primitive_match._operators import PatternElement, pattern_element


@dataclass(frozen=True, slots=True)
class PositiveMatch[A]:
    """The arm matched. Carries the arm's precomputed result."""

    result: A

    @property
    def matches(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NegativeMatch:
    """The arm did not match. Carries nothing."""

    @property
    def matches(self) -> bool:
        return False


type MatchResult[A] = PositiveMatch[A] | NegativeMatch

# Any one-argument callable from a value tuple to a MatchResult can act as an arm.
type ArmMatcher[A] = Callable[[tuple[Any, ...]], MatchResult[A]]


@dataclass(frozen=True, slots=True)
class Arm[A]:
    """One pattern tuple bound to one result.

    Raw pattern entries are classified into PatternElements at construction.
    Stateless and reusable across any number of evaluations.
    """

    pattern: tuple[PatternElement, ...]
    result: A

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "pattern", tuple(pattern_element(p) for p in self.pattern)
        )

    def __call__(self, values: Sequence[Any], /) -> MatchResult[A]:
        return self.evaluate(values)

    def evaluate(self, values: Sequence[Any]) -> MatchResult[A]:
        """Evaluate this arm against a value tuple.

        Positions are checked in order and evaluation stops at the first
        mismatch.
        """
        if len(values) != len(self.pattern):
            return NegativeMatch()
        for element, value in zip(self.pattern, values, strict=True):
            if not element.matches(value):
                return NegativeMatch()
        return PositiveMatch(self.result)


def when[A](pattern: Sequence[Any], result: A) -> Arm[A]:
    """Build an arm from a pattern tuple and an already-computed result.

    >>> from primitive_match import _, either, when
    >>> when([1, _, either("a", "b")], "hit")((1, object(), "b"))
    PositiveMatch(result='hit')
    """
    return Arm(tuple(pattern), result)


def is_falsy(value: Any) -> bool:
    """Whether a result counts as "no result" for selection.

    The falsy set is closed: ``None``, ``False``, numeric zero, ``nan`` and
    ``""``. Containers and other objects are never falsy, and their
    ``__bool__`` is never called.
    """
    if value is None or value is False:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float | complex):
        return value == 0 or value != value
    if isinstance(value, str):
        return value == ""
    return False


def select[A](
    outcomes: Iterable[MatchResult[A]], *, skip_falsy: bool = True
) -> A | None:
    """Return the result of the first qualifying outcome, or None.

    With skip_falsy, a PositiveMatch whose result is_falsy does not qualify.
    """
    for outcome in outcomes:
        match outcome:
            case PositiveMatch(result=result) if not (skip_falsy and is_falsy(result)):
                return result
    return None


@dataclass(frozen=True, slots=True)
class Dispatch:
    """A value tuple waiting for its arms. Returned by match()."""

    values: tuple[Any, ...]
    skip_falsy: bool = True

    def __call__[A](self, *arms: ArmMatcher[A]) -> A | None:
        # INV: every arm is evaluated before selection.
        outcomes = [arm(self.values) for arm in arms]
        return select(outcomes, skip_falsy=self.skip_falsy)


def match(*values: Any, skip_falsy: bool = True) -> Dispatch:
    """Start a match over ``values``.

    >>> from primitive_match import _, match, when
    >>> match("x")(when([_], 0), when([_], "fallback"))
    'fallback'

    Pass ``skip_falsy=False`` to select on the match flag alone, so a
    matching arm whose result is ``0`` or ``""`` is returned as-is.
    """
    return Dispatch(values, skip_falsy)
