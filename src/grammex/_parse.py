"""Top-level entry points: run a matcher against a string.

A matcher can always be invoked directly with any Cursor. These helpers
cover the common case of parsing an in-memory string from a fresh Feed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from grammex._feed import Feed

if TYPE_CHECKING:
    from grammex._types import Matcher, MatchResult

T = TypeVar("T")


def parse(matcher: Matcher[T], source: str, start: int = 0) -> MatchResult[T] | None:
    """Run ``matcher`` once against ``source`` beginning at offset ``start``.

    Returns the matcher's result, or None if it did not match. A prefix
    match is a success; use parse_all() to require the whole input.

    Raises:
        ValueError: If ``start`` lies outside the input.
    """
    return matcher(Feed(source, start))


def parse_all(matcher: Matcher[T], source: str) -> MatchResult[T] | None:
    """Run ``matcher`` against ``source`` and require it to span all of it.

    INV: a result is returned only when ``end == len(source)``.
    """
    feed = Feed(source)
    result = matcher(feed)
    if result is None or not feed.done:
        return None
    return result
