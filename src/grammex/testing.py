"""Test utilities for grammex.

Provides small character-class matchers for use in tests and examples.
These are NOT grammar features; they exist to reduce boilerplate when
exploring grammex without writing regex fragments.

For real grammars, prefer ``pattern("[0-9]")`` and friends.
"""

from __future__ import annotations

from grammex._combinators import AlternationMatcher, alternation
from grammex._leaves import character


def one_of(chars: str) -> AlternationMatcher[str]:
    """Match any single character in ``chars``.

    >>> from grammex import parse
    >>> from grammex.testing import one_of
    >>> parse(one_of("xyz"), "yes").value
    'y'
    """
    if not chars:
        msg = "one_of requires at least one character"
        raise ValueError(msg)
    return alternation(*(character(c) for c in chars))


DIGIT = one_of("0123456789")
