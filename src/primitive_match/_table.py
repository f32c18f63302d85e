"""Match tables — config-driven construction of arm lists.

load_match_table() walks a MatchTableConfig and builds runtime arms with
the same combinators callers use directly (``when``, ``either``,
``neither``, ``_``), so a loaded table evaluates exactly like the
equivalent hand-written ``match(...)(...)`` expression.

Example::

    table = load_match_table_yaml('''
    arms:
      - pattern: [{type: literal, value: GET}, {type: wildcard}]
        result: read
    ''')
    table.evaluate("GET", "/users")  # 'read'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import yaml

from primitive_match._config import (
    ConfigParseError,
    LiteralConfig,
    SetConfig,
    WildcardConfig,
    parse_match_table_config,
)
from primitive_match._matcher import Arm, match, when
from primitive_match._operators import Operation
from primitive_match._types import Literal, MatcherError, _

if TYPE_CHECKING:
    from primitive_match._config import (
        ArmConfig,
        MatchTableConfig,
        PatternElementConfig,
    )
    from primitive_match._operators import PatternElement

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_ARMS = 256
MAX_PATTERN_LENGTH = 256

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class TooManyArmsError(MatcherError):
    """Config has too many arms."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many arms: {count} exceeds maximum {max_}")


class PatternTooLongError(MatcherError):
    """An arm pattern has too many positions."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Runtime table
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class MatchTable[A]:
    """An ordered, reusable list of arms with a selection policy."""

    arms: tuple[Arm[A], ...]
    skip_falsy: bool = True

    def evaluate(self, *values: Any) -> A | None:
        """Equivalent to ``match(*values, skip_falsy=...)(*arms)``."""
        return match(*values, skip_falsy=self.skip_falsy)(*self.arms)

    def __len__(self) -> int:
        return len(self.arms)


def load_match_table(config: MatchTableConfig[Any]) -> MatchTable[Any]:
    """Build a MatchTable from configuration.

    Raises:
        TooManyArmsError: more than MAX_ARMS arms
        PatternTooLongError: a pattern longer than MAX_PATTERN_LENGTH
    """
    if len(config.arms) > MAX_ARMS:
        raise TooManyArmsError(len(config.arms), MAX_ARMS)

    arms = tuple(_load_arm(arm) for arm in config.arms)
    logger.debug(
        "loaded match table with %d arms (skip_falsy=%s)",
        len(arms),
        config.skip_falsy,
    )
    return MatchTable(arms=arms, skip_falsy=config.skip_falsy)


def load_match_table_yaml(text: str) -> MatchTable[Any]:
    """Parse a YAML document and load it as a MatchTable.

    Raises:
        ConfigParseError: invalid YAML or malformed config
        TooManyArmsError, PatternTooLongError: limits exceeded
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"invalid YAML: {e}"
        raise ConfigParseError(msg) from e
    return load_match_table(parse_match_table_config(data))


def _load_arm(config: ArmConfig[Any]) -> Arm[Any]:
    if len(config.pattern) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(config.pattern), MAX_PATTERN_LENGTH)
    return when([_load_pattern_element(p) for p in config.pattern], config.result)


def _load_pattern_element(config: PatternElementConfig) -> PatternElement:
    match config:
        case WildcardConfig():
            return _
        case LiteralConfig(value=v):
            return Literal(v)
        case SetConfig(operator=op, values=vs):
            return Operation(op, vs)
    msg = f"unsupported pattern element config: {config!r}"  # pragma: no cover
    raise MatcherError(msg)  # pragma: no cover
