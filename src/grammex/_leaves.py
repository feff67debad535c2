"""Leaf matchers: the only matchers that read input directly.

Each leaf is a frozen dataclass, immutable after construction and callable as
a Matcher. On failure a leaf leaves the cursor where it found it; that
guarantee comes from the Cursor's consume(), which never advances on a
mismatch.

Patterns compile with ``google-re2`` for guaranteed linear-time matching.
RE2 does not support backreferences or lookahead/lookbehind because they
require backtracking; fragments using them are rejected at construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from grammex._types import MatcherError, MatchResult

if TYPE_CHECKING:
    from grammex._types import Cursor

logger = logging.getLogger(__name__)

MAX_PATTERN_LENGTH = 4096


class PatternError(MatcherError):
    """A pattern fragment is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class PatternTooLongError(MatcherError):
    """A pattern fragment exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


@dataclass(frozen=True, slots=True)
class CharacterMatcher:
    """Match one literal character at the cursor.

    Only the first character of ``value`` takes part in the comparison;
    a successful match always spans exactly one character.
    """

    value: str

    def __call__(self, cursor: Cursor, /) -> MatchResult[str] | None:
        start = cursor.cursor
        if cursor.consume(self.value, 1):
            return MatchResult(self.value, start, cursor.cursor)
        return None


@dataclass(frozen=True, slots=True)
class PatternMatcher:
    """Match a regular-expression fragment anchored at the cursor.

    The fragment is anchored with ``^`` and compiled once, at construction.
    Metacharacters are interpreted, never escaped. The anchor binds to the
    first top-level branch only, so ``a|b`` may find ``b`` further along the
    input; the consume step then rejects it because the input at the cursor
    does not start with the found text.

    Raises:
        PatternTooLongError: If the fragment exceeds MAX_PATTERN_LENGTH.
        PatternError: If the fragment is not valid RE2 syntax.
    """

    value: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.value) > MAX_PATTERN_LENGTH:
            raise PatternTooLongError(len(self.value), MAX_PATTERN_LENGTH)
        try:
            compiled = re2.compile(f"^{self.value}")
        except re2.error as e:
            logger.debug("rejected pattern %r: %s", self.value, e)
            raise PatternError(self.value, str(e)) from e
        logger.debug("compiled pattern %r", self.value)
        object.__setattr__(self, "_compiled", compiled)

    def __call__(self, cursor: Cursor, /) -> MatchResult[str] | None:
        found = self._compiled.search(cursor.lookahead())
        if found is None:
            return None
        text = found.group(0)
        start = cursor.cursor
        if cursor.consume(text, len(text)):
            return MatchResult(text, start, cursor.cursor)
        return None


def character(value: str) -> CharacterMatcher:
    """Return a matcher for the single character ``value``."""
    return CharacterMatcher(value)


def pattern(value: str) -> PatternMatcher:
    """Return a matcher for the regular-expression fragment ``value``.

    Compilation happens here, not at match time, so a malformed fragment
    surfaces immediately as a PatternError.
    """
    return PatternMatcher(value)
