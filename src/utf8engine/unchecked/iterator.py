"""Non-validating bidirectional code-point iterator.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator

from utf8engine.core.protocols import CodeUnitSource

from .navigation import next_code_point, peek_next, prior

__all__ = ["UncheckedIterator"]


class UncheckedIterator:
    """Position inside a buffer trusted to hold well-formed UTF-8.

    No range is kept and no step is validated. Iteration runs to
    len(buffer). Equality compares buffer identity and position and never
    raises.

    Example:
        >>> it = UncheckedIterator("añ".encode())
        >>> it.advance().code_point
        241
        >>> list(it)
        [97, 241]
    """

    __slots__ = ("_buffer", "_pos")

    def __init__(self, buffer: CodeUnitSource, pos: int = 0) -> None:
        self._buffer = buffer
        self._pos = pos

    @property
    def buffer(self) -> CodeUnitSource:
        """The underlying buffer."""
        return self._buffer

    @property
    def pos(self) -> int:
        """Current offset."""
        return self._pos

    @property
    def code_point(self) -> int:
        """Decode the code point at the position without moving."""
        return peek_next(self._buffer, self._pos)

    def advance(self) -> UncheckedIterator:
        """Return an iterator one code point forward."""
        return UncheckedIterator(self._buffer, next_code_point(self._buffer, self._pos)[1])

    def retreat(self) -> UncheckedIterator:
        """Return an iterator one code point back."""
        return UncheckedIterator(self._buffer, prior(self._buffer, self._pos)[1])

    def __iter__(self) -> Iterator[int]:
        pos = self._pos
        end = len(self._buffer)
        while pos < end:
            cp, pos = next_code_point(self._buffer, pos)
            yield cp

    def __reversed__(self) -> Iterator[int]:
        pos = self._pos
        while pos > 0:
            cp, pos = prior(self._buffer, pos)
            yield cp

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UncheckedIterator):
            return NotImplemented
        return self._buffer is other._buffer and self._pos == other._pos

    def __hash__(self) -> int:
        return hash((id(self._buffer), self._pos))

    def __repr__(self) -> str:
        return f"UncheckedIterator(pos={self._pos})"
