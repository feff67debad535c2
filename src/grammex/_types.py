"""Core protocols, records and type aliases for grammex.

The type system has three pieces:
- Cursor is the input port: text plus a mutable offset shared by every matcher
- MatchResult is the immutable record a successful matcher returns
- Matcher is any callable from a Cursor to a MatchResult (or None)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeAlias, TypeVar, runtime_checkable

T = TypeVar("T")


class MatcherError(Exception):
    """Errors raised while constructing matchers.

    Never raised at match time; a failed match is None.
    """


@runtime_checkable
class Cursor(Protocol):
    """Input text with a mutable read offset.

    One Cursor instance is shared by reference across the whole call tree of
    a parse attempt. Combinators read and reset ``cursor`` directly to
    backtrack, so it must never be copied mid-parse.
    """

    cursor: int

    def lookahead(self, window: int | None = None, /) -> str:
        """Return the unconsumed input from ``cursor`` onward, without mutation.

        Never fails; returns ``""`` at end of input.
        """
        ...

    def consume(self, token: str, length: int | None = None, /) -> bool:
        """Advance past ``token`` if the input at ``cursor`` starts with it.

        Only the first ``length`` characters take part in the comparison
        (default: all of ``token``). On failure the cursor is unchanged.
        """
        ...


@dataclass(frozen=True, slots=True)
class MatchResult(Generic[T]):
    """What a matcher recognized and the half-open range ``[start, end)`` it spans.

    Composite matchers carry their sub-results (themselves MatchResults)
    in ``value``; callers unwrap as needed.

    INV: 0 <= start <= end. A span violating it means a matcher broke the
    cursor contract (e.g. rewound below its own start), so construction
    raises ValueError rather than returning a failure.
    """

    value: T
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            msg = f"invalid match span [{self.start}, {self.end})"
            raise ValueError(msg)

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


# The sole extension point: any callable with this shape composes with every combinator.
# None is the failure sentinel; failure never raises.
Matcher: TypeAlias = Callable[[Cursor], "MatchResult[T] | None"]
