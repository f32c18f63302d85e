"""Config types for declarative match tables.

A match table can be described as plain data (a dict, or YAML via
load_match_table_yaml) instead of being built with ``when``. Config path:
  dict → parse_match_table_config() → MatchTableConfig → load_match_table() → MatchTable

Relationship to runtime types:

| Config type           | Runtime type          |
|-----------------------|-----------------------|
| MatchTableConfig      | MatchTable            |
| ArmConfig             | Arm                   |
| LiteralConfig         | Literal               |
| WildcardConfig        | Wildcard (``_``)      |
| SetConfig             | Operation             |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from primitive_match._operators import Operator
from primitive_match._types import PRIMITIVE_TYPES

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LiteralConfig:
    """A literal pattern element. Only scalar values are accepted."""

    value: Any


@dataclass(frozen=True, slots=True)
class WildcardConfig:
    """The wildcard pattern element."""


@dataclass(frozen=True, slots=True)
class SetConfig:
    """An either/neither pattern element."""

    operator: Operator
    values: tuple[Any, ...]


type PatternElementConfig = LiteralConfig | WildcardConfig | SetConfig


@dataclass(frozen=True, slots=True)
class ArmConfig[A]:
    """Pairs a pattern config with a result."""

    pattern: tuple[PatternElementConfig, ...]
    result: A


@dataclass(frozen=True, slots=True)
class MatchTableConfig[A]:
    """Configuration for a MatchTable.

    skip_falsy mirrors the keyword of match().
    """

    arms: tuple[ArmConfig[A], ...]
    skip_falsy: bool = True


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_match_table_config(data: dict[str, Any]) -> MatchTableConfig[Any]:
    """Parse a dict into a MatchTableConfig.

    Expected shape::

        {
            "skip_falsy": true,
            "arms": [
                {
                    "pattern": [
                        {"type": "literal", "value": 1},
                        {"type": "wildcard"},
                        {"type": "either", "values": ["a", "b"]},
                    ],
                    "result": "hit",
                },
            ],
        }

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_arms = data.get("arms")
    if raw_arms is None:
        msg = "missing required field 'arms'"
        raise ConfigParseError(msg)
    if not isinstance(raw_arms, list):
        msg = f"'arms' must be a list, got {type(raw_arms).__name__}"
        raise ConfigParseError(msg)

    skip_falsy = data.get("skip_falsy", True)
    if not isinstance(skip_falsy, bool):
        msg = f"'skip_falsy' must be a bool, got {type(skip_falsy).__name__}"
        raise ConfigParseError(msg)

    arms = tuple(_parse_arm(arm) for arm in raw_arms)
    return MatchTableConfig(arms=arms, skip_falsy=skip_falsy)


def _parse_arm(data: dict[str, Any]) -> ArmConfig[Any]:
    """Parse an arm config dict."""
    if not isinstance(data, dict):
        msg = f"arm must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "pattern" not in data:
        msg = "arm missing required field 'pattern'"
        raise ConfigParseError(msg)
    if "result" not in data:
        msg = "arm missing required field 'result'"
        raise ConfigParseError(msg)

    raw_pattern = data["pattern"]
    if not isinstance(raw_pattern, list):
        msg = f"'pattern' must be a list, got {type(raw_pattern).__name__}"
        raise ConfigParseError(msg)

    pattern = tuple(_parse_pattern_element(p) for p in raw_pattern)
    return ArmConfig(pattern=pattern, result=data["result"])


def _parse_pattern_element(data: dict[str, Any]) -> PatternElementConfig:
    """Parse a pattern element config dict.

    Uses 'type' discriminant: literal, wildcard, either, neither.
    """
    if not isinstance(data, dict):
        msg = f"pattern element must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    el_type = data.get("type")
    if el_type is None:
        msg = "pattern element missing required field 'type'"
        raise ConfigParseError(msg)

    if el_type == "wildcard":
        return WildcardConfig()

    if el_type == "literal":
        if "value" not in data:
            msg = "literal pattern element missing required field 'value'"
            raise ConfigParseError(msg)
        return LiteralConfig(value=_parse_scalar(data["value"], "literal value"))

    if el_type in (Operator.EITHER, Operator.NEITHER):
        raw_values = data.get("values", [])
        if not isinstance(raw_values, list):
            msg = f"{el_type} 'values' must be a list, got {type(raw_values).__name__}"
            raise ConfigParseError(msg)
        values = tuple(_parse_scalar(v, f"{el_type} value") for v in raw_values)
        return SetConfig(operator=Operator(el_type), values=values)

    msg = f"unknown pattern element type: {el_type!r}"
    raise ConfigParseError(msg)


def _parse_scalar(value: Any, what: str) -> Any:
    """Reject composite values. They compare by identity and could never match."""
    if type(value) not in PRIMITIVE_TYPES:
        msg = f"{what} must be a scalar, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value
