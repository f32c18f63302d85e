"""primitive_match — pattern matching over flat tuples of values.

All public names are exported from this module for flat imports:

    from primitive_match import _, either, match, neither, when

    match(status, method)(
        when([200, either("GET", "HEAD")], "ok"),
        when([neither(200), _], "error"),
    )
"""

__version__ = "0.1.0"

# Config types — see primitive_match._config for details
from primitive_match._config import (
    ArmConfig,
    ConfigParseError,
    LiteralConfig,
    MatchTableConfig,
    PatternElementConfig,
    SetConfig,
    WildcardConfig,
    parse_match_table_config,
)

# Arms and dispatch
from primitive_match._matcher import (
    Arm,
    ArmMatcher,
    Dispatch,
    is_falsy,
    MatchResult,
    NegativeMatch,
    PositiveMatch,
    match,
    select,
    when,
)

# Operators
from primitive_match._operators import (
    Operation,
    Operator,
    PatternElement,
    either,
    neither,
    pattern_element,
)

# Match tables — see primitive_match._table for details
from primitive_match._table import (
    MAX_ARMS,
    MAX_PATTERN_LENGTH,
    MatchTable,
    PatternTooLongError,
    TooManyArmsError,
    load_match_table,
    load_match_table_yaml,
)
from primitive_match._types import Literal, MatcherError, Wildcard, _, values_equal

WILDCARD = _

__all__ = [
    # Wildcard
    "_",
    "WILDCARD",
    "Wildcard",
    # Pattern elements
    "Literal",
    "Operation",
    "Operator",
    "PatternElement",
    "either",
    "neither",
    "pattern_element",
    "values_equal",
    # Arms and dispatch
    "Arm",
    "ArmMatcher",
    "Dispatch",
    "is_falsy",
    "MatchResult",
    "NegativeMatch",
    "PositiveMatch",
    "match",
    "select",
    "when",
    "MatcherError",
    # Config types
    "ArmConfig",
    "LiteralConfig",
    "WildcardConfig",
    "SetConfig",
    "PatternElementConfig",
    "MatchTableConfig",
    "ConfigParseError",
    "parse_match_table_config",
    # Match tables
    "MatchTable",
    "load_match_table",
    "load_match_table_yaml",
    "TooManyArmsError",
    "PatternTooLongError",
    "MAX_ARMS",
    "MAX_PATTERN_LENGTH",
]
