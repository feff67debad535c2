"""grammex: backtracking parser combinators over a shared cursor.

All public types are exported from this module for flat imports:

    from grammex import sequence, alternation, quantifier, character, parse
"""

__version__ = "0.1.0"

# Structural combinators
from grammex._combinators import (
    AlternationMatcher,
    OptionalMatcher,
    QuantifierMatcher,
    SequenceMatcher,
    alternation,
    matcher_depth,
    optional,
    quantifier,
    sequence,
)

# Concrete cursor
from grammex._feed import Feed

# Leaf matchers
from grammex._leaves import (
    MAX_PATTERN_LENGTH,
    CharacterMatcher,
    PatternError,
    PatternMatcher,
    PatternTooLongError,
    character,
    pattern,
)

# Entry points
from grammex._parse import parse, parse_all

# Protocols and records
from grammex._types import Cursor, Matcher, MatcherError, MatchResult

__all__ = [
    # Protocols and records
    "Cursor",
    "Matcher",
    "MatchResult",
    "MatcherError",
    # Concrete cursor
    "Feed",
    # Leaf matchers
    "CharacterMatcher",
    "PatternMatcher",
    "character",
    "pattern",
    "PatternError",
    "PatternTooLongError",
    "MAX_PATTERN_LENGTH",
    # Structural combinators
    "SequenceMatcher",
    "AlternationMatcher",
    "QuantifierMatcher",
    "OptionalMatcher",
    "sequence",
    "alternation",
    "quantifier",
    "optional",
    "matcher_depth",
    # Entry points
    "parse",
    "parse_all",
]
