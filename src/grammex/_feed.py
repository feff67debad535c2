"""Feed: the concrete Cursor over an in-memory string.

Holds the input text (immutable for the lifetime of a parse) and the
mutable read offset that every matcher in one parse attempt shares.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from grammex._types import MatchResult


@dataclass(slots=True)
class Feed:
    """Input text plus a read offset, implementing the Cursor protocol.

    Intentionally mutable: combinators advance and reset ``cursor`` in place.
    Create one Feed per parse attempt and pass the same instance everywhere.

    >>> feed = Feed("abc")
    >>> feed.consume("ab")
    True
    >>> feed.cursor, feed.lookahead()
    (2, 'c')
    """

    source: str
    cursor: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.cursor <= len(self.source):
            msg = f"cursor {self.cursor} out of range for input of length {len(self.source)}"
            raise ValueError(msg)

    def lookahead(self, window: int | None = None, /) -> str:
        """Unconsumed input from the cursor, at most ``window`` characters."""
        if window is None:
            return self.source[self.cursor :]
        return self.source[self.cursor : self.cursor + window]

    def consume(self, token: str, length: int | None = None, /) -> bool:
        """Advance by ``length`` if the input at the cursor starts with ``token``.

        Only the first ``length`` characters of ``token`` are compared
        (default: ``len(token)``). Leaves the cursor untouched on mismatch.
        """
        if length is None:
            length = len(token)
        segment = self.source[self.cursor : self.cursor + length]
        # A short segment means end of input; never advance past it.
        if len(segment) != length or segment != token[:length]:
            return False
        self.cursor += length
        return True

    @property
    def done(self) -> bool:
        """True once the cursor has reached the end of the input."""
        return self.cursor >= len(self.source)

    @property
    def remaining(self) -> int:
        return len(self.source) - self.cursor

    def text(self, result: MatchResult[Any]) -> str:
        """The slice of input a match result spans."""
        return self.source[result.start : result.end]
