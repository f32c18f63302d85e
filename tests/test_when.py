"""Tests for when() and Arm evaluation."""

from __future__ import annotations

from primitive_match import (
    Arm,
    Literal,
    NegativeMatch,
    PositiveMatch,
    _,
    either,
    neither,
    when,
)


class TestArity:
    def test_shorter_values_is_negative(self) -> None:
        assert when([1, 2, 3, 4], "result")([]) == NegativeMatch()

    def test_longer_values_is_negative(self) -> None:
        assert when([1], "result")([1, 1]) == NegativeMatch()

    def test_wildcards_do_not_relax_arity(self) -> None:
        assert when([_, _], "result")(["a"]) == NegativeMatch()

    def test_empty_pattern_matches_empty_values(self) -> None:
        assert when([], "result")(()) == PositiveMatch("result")


class TestLiterals:
    def test_all_match(self) -> None:
        assert when([1, 2, 3, 4], "result")([1, 2, 3, 4]) == PositiveMatch("result")

    def test_order_matters(self) -> None:
        assert when([1, 2, 3, 4], "result")([1, 2, 4, 3]) == NegativeMatch()

    def test_strings(self) -> None:
        arm = when(["foo", "bar", "baz"], "result")
        assert arm(["foo", "bar", "baz"]) == PositiveMatch("result")

    def test_big_int(self) -> None:
        assert when([9007199254740993], "result")([9007199254740993]).matches

    def test_falsy_values(self) -> None:
        assert when([None], "result")([None]).matches
        assert when([""], "result")([""]).matches
        assert when([0], "result")([0]).matches
        assert when([False], "result")([False]).matches

    def test_distinct_objects_do_not_match(self) -> None:
        assert when([{"a": 1}], "result")([{"a": 1}]) == NegativeMatch()

    def test_same_object_matches(self) -> None:
        config = {"a": 1}
        assert when([config], "result")([config]) == PositiveMatch("result")

    def test_nan_does_not_match(self) -> None:
        nan = float("nan")
        assert when([nan], "result")([nan]) == NegativeMatch()


class TestWildcard:
    def test_single_wildcard(self) -> None:
        assert when([_], "result")(["a"]) == PositiveMatch("result")

    def test_wildcard_position_ignored(self) -> None:
        arm = when([1, _, 3], "result")
        for middle in (None, 0, "x", object(), [1]):
            assert arm([1, middle, 3]).matches

    def test_other_positions_still_checked(self) -> None:
        assert when([1, _, 3], "result")([2, "x", 3]) == NegativeMatch()


class TestSetOperators:
    def test_either(self) -> None:
        assert when([either(1, 2)], "R")([2]) == PositiveMatch("R")
        assert when([either(1, 2)], "R")([3]) == NegativeMatch()

    def test_neither(self) -> None:
        assert when([neither(1, 2)], "R")([3]) == PositiveMatch("R")
        assert when([neither(1, 2)], "R")([1]) == NegativeMatch()

    def test_empty_sets(self) -> None:
        assert when([either()], "R")(["x"]) == NegativeMatch()
        assert when([neither()], "R")(["x"]) == PositiveMatch("R")

    def test_mixed_pattern(self) -> None:
        arm = when(["GET", either(200, 204), neither("/admin"), _], "ok")
        assert arm(["GET", 204, "/users", None]).matches
        assert not arm(["GET", 204, "/admin", None]).matches
        assert not arm(["GET", 500, "/users", None]).matches

    def test_literal_operation_matches_by_identity(self) -> None:
        op = either(1)
        arm = when([Literal(op)], "R")
        assert arm([op]) == PositiveMatch("R")
        assert arm([1]) == NegativeMatch()


class TestArm:
    def test_when_builds_arm(self) -> None:
        arm = when([1, _], "R")
        assert isinstance(arm, Arm)
        assert arm.pattern == (Literal(1), _)
        assert arm.result == "R"

    def test_evaluate_is_call(self) -> None:
        arm = when([1], "R")
        assert arm.evaluate([1]) == arm([1])

    def test_reusable(self) -> None:
        arm = when([either("a", "b")], "R")
        assert arm(["a"]).matches
        assert not arm(["c"]).matches
        assert arm(["b"]).matches

    def test_result_is_computed_once_at_construction(self) -> None:
        calls: list[int] = []

        def compute() -> str:
            calls.append(1)
            return "R"

        arm = when([_], compute())
        assert calls == [1]
        arm(["a"])
        arm(["b"])
        assert calls == [1]

    def test_pattern_is_copied(self) -> None:
        pattern = [1, 2]
        arm = when(pattern, "R")
        pattern.append(3)
        assert arm([1, 2]).matches

    def test_values_are_not_mutated(self) -> None:
        values = [1, "x"]
        when([1, _], "R")(values)
        assert values == [1, "x"]


class TestMatchResult:
    def test_positive_flag(self) -> None:
        assert PositiveMatch("r").matches is True
        assert PositiveMatch("r").result == "r"

    def test_negative_flag(self) -> None:
        assert NegativeMatch().matches is False

    def test_positive_can_carry_falsy_result(self) -> None:
        assert when([_], 0)(["x"]) == PositiveMatch(0)
