"""Structural combinators: backtracking and repetition over any matchers.

SequenceMatcher, AlternationMatcher, QuantifierMatcher and OptionalMatcher
compose other matchers (leaves, combinators, or plain functions) and never
read input themselves.

Rollback discipline, the invariant every grammar built on top relies on:

| Combinator  | Cursor after failure                              |
|-------------|---------------------------------------------------|
| sequence    | reset to where the sequence started               |
| quantifier  | reset to where the loop started (count < min)     |
| alternation | whatever the last branch left (no management)     |
| optional    | never fails; cursor is always reset               |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from grammex._leaves import CharacterMatcher, PatternMatcher
from grammex._types import MatchResult

if TYPE_CHECKING:
    from grammex._types import Cursor, Matcher

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SequenceMatcher(Generic[T]):
    """Every matcher must succeed, in order, against the advancing cursor.

    The first failure resets the cursor to where the sequence began, which
    is what makes a sequence safe as an alternation branch. An empty
    sequence succeeds without consuming anything.
    """

    matchers: tuple[Matcher[T], ...]

    def __call__(self, cursor: Cursor, /) -> MatchResult[list[MatchResult[T]]] | None:
        start = cursor.cursor
        results: list[MatchResult[T]] = []
        for matcher in self.matchers:
            result = matcher(cursor)
            if result is None:
                cursor.cursor = start  # INV: full rollback
                return None
            results.append(result)
        return MatchResult(results, start, cursor.cursor)


@dataclass(frozen=True, slots=True)
class AlternationMatcher(Generic[T]):
    """First successful branch wins (not the longest).

    Branches are tried in order against the same cursor position and the
    winning result is returned unmodified. Alternation does no cursor
    management of its own: a failing branch that leaks consumption (a raw
    leaf combination rather than a sequence) leaks it into the next branch.
    Empty alternation always fails.
    """

    matchers: tuple[Matcher[T], ...]

    def __call__(self, cursor: Cursor, /) -> MatchResult[T] | None:
        for matcher in self.matchers:
            result = matcher(cursor)
            if result is not None:
                return result
        return None


@dataclass(frozen=True, slots=True)
class QuantifierMatcher(Generic[T]):
    """Greedy repetition with a floor and an optional ceiling.

    Applies the matcher until it fails or ``max`` successes are collected.
    Fewer than ``min`` successes rolls the whole quantifier back. The failing
    attempt that ends the loop is not undone separately; well-behaved
    matchers leave nothing to undo.

    An unbounded quantifier stops after a success that did not advance the
    cursor, since a deterministic matcher would repeat it forever. Such a
    stalled loop counts as meeting the floor: the repetitions it skipped
    would all have succeeded.
    """

    matcher: Matcher[T]
    min: int = 0
    max: int | None = None

    def __call__(self, cursor: Cursor, /) -> MatchResult[list[MatchResult[T]]] | None:
        start = cursor.cursor
        results: list[MatchResult[T]] = []
        stalled = False
        while self.max is None or len(results) < self.max:
            before = cursor.cursor
            result = self.matcher(cursor)
            if result is None:
                break
            results.append(result)
            if self.max is None and cursor.cursor == before:
                stalled = True
                break
        if stalled or len(results) >= self.min:
            return MatchResult(results, start, cursor.cursor)
        cursor.cursor = start  # INV: below the floor, nothing consumed
        return None


@dataclass(frozen=True, slots=True)
class OptionalMatcher(Generic[T]):
    """Attempt the matcher once; always succeed, never consume.

    .. warning::
       The cursor is reset to its starting position whether or not the
       wrapped matcher succeeded, so a successful inner match is *discarded*
       from the input position. The returned result has ``start == end`` and
       carries the inner result (or None) as its value. Inside a sequence this
       does NOT skip past an optional element: the next matcher sees the
       same input the optional saw. Grammars that need "consume if present"
       should use ``quantifier(m, 0, 1)`` instead.
    """

    matcher: Matcher[T]

    def __call__(self, cursor: Cursor, /) -> MatchResult[MatchResult[T] | None]:
        start = cursor.cursor
        result = self.matcher(cursor)
        cursor.cursor = start
        return MatchResult(result, start, cursor.cursor)


def sequence(*matchers: Matcher[T]) -> SequenceMatcher[T]:
    """Match every matcher in order; roll back entirely on the first failure."""
    return SequenceMatcher(matchers)


def alternation(*matchers: Matcher[T]) -> AlternationMatcher[T]:
    """Match the first matcher that succeeds, trying them in order."""
    return AlternationMatcher(matchers)


def quantifier(
    matcher: Matcher[T], min: int = 0, max: int | None = None
) -> QuantifierMatcher[T]:
    """Match ``matcher`` greedily between ``min`` and ``max`` times.

    ``max=None`` means unbounded. ``min=0`` always succeeds, possibly with
    an empty result list.
    """
    return QuantifierMatcher(matcher, min, max)


def optional(matcher: Matcher[T]) -> OptionalMatcher[T]:
    """Attempt ``matcher`` without consuming input. See OptionalMatcher."""
    return OptionalMatcher(matcher)


def matcher_depth(m: Matcher[Any]) -> int:
    """Calculate the nesting depth of a matcher tree.

    Leaves and opaque callables count as 1. Matching recurses roughly this
    deep, so very deep grammars risk exhausting the interpreter stack.
    """
    match m:
        case CharacterMatcher() | PatternMatcher():
            return 1
        case SequenceMatcher(matchers=ms) | AlternationMatcher(matchers=ms):
            return 1 + max((matcher_depth(sub) for sub in ms), default=0)
        case QuantifierMatcher(matcher=inner) | OptionalMatcher(matcher=inner):
            return 1 + matcher_depth(inner)
        case _:
            return 1
