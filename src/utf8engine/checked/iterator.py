"""Bidirectional code-point iterator over a bounded UTF-8 range.

Utf8Iterator is an immutable position value. advance() and retreat() return
new iterators; the original keeps its position, so a failed step leaves the
caller where it was.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator

from utf8engine.core.protocols import CodeUnitSource
from utf8engine.diagnostics import (
    ErrorTemplate,
    IteratorMismatchError,
    IteratorRangeError,
)

from .navigation import next_code_point, peek_next, prior

__all__ = ["Utf8Iterator"]


class Utf8Iterator:
    """Checked position inside buffer[range_start:range_end].

    The position always sits on a lead byte or equals range_end. Every step
    validates the unit it crosses.

    Example:
        >>> data = "añ€".encode()
        >>> it = Utf8Iterator(data, 0)
        >>> it.code_point
        97
        >>> it.advance().advance().code_point
        8364
        >>> list(it)
        [97, 241, 8364]
        >>> end = Utf8Iterator(data, len(data))
        >>> end.retreat().code_point
        8364

    Thread Safety:
        Thread-safe. Internal state is only set during construction and the
        buffer is never written.
    """

    __slots__ = ("_buffer", "_pos", "_range_end", "_range_start")

    def __init__(
        self,
        buffer: CodeUnitSource,
        pos: int,
        range_start: int = 0,
        range_end: int | None = None,
    ) -> None:
        """Create an iterator at pos.

        Args:
            buffer: UTF-8 bytes (referenced, not copied)
            pos: Starting position
            range_start: Inclusive lower bound (default: 0)
            range_end: Exclusive upper bound (default: len(buffer))

        Raises:
            IteratorRangeError: Unless
                0 <= range_start <= pos <= range_end <= len(buffer)
        """
        if range_end is None:
            range_end = len(buffer)
        if not 0 <= range_start <= pos <= range_end <= len(buffer):
            raise IteratorRangeError(
                ErrorTemplate.iterator_out_of_range(pos, range_start, range_end)
            )
        self._buffer = buffer
        self._pos = pos
        self._range_start = range_start
        self._range_end = range_end

    def _moved(self, pos: int) -> Utf8Iterator:
        """Same range, new position. Bounds are already known to hold."""
        clone = object.__new__(Utf8Iterator)
        clone._buffer = self._buffer
        clone._pos = pos
        clone._range_start = self._range_start
        clone._range_end = self._range_end
        return clone

    @property
    def buffer(self) -> CodeUnitSource:
        """The underlying buffer."""
        return self._buffer

    @property
    def pos(self) -> int:
        """Current offset."""
        return self._pos

    @property
    def range_start(self) -> int:
        """Inclusive lower bound."""
        return self._range_start

    @property
    def range_end(self) -> int:
        """Exclusive upper bound."""
        return self._range_end

    @property
    def at_start(self) -> bool:
        """True when no code point precedes the position."""
        return self._pos == self._range_start

    @property
    def at_end(self) -> bool:
        """True when no code point follows the position."""
        return self._pos == self._range_end

    @property
    def code_point(self) -> int:
        """Decode the code point at the position without moving.

        Raises:
            NotEnoughRoomError: At range_end, or the unit is truncated
            InvalidUtf8Error: If the unit is malformed
            InvalidCodePointError: If the unit encodes an invalid value
        """
        return peek_next(self._buffer, self._pos, self._range_end)

    def advance(self) -> Utf8Iterator:
        """Return an iterator one code point forward.

        Raises:
            Same as code_point
        """
        _, new_pos = next_code_point(self._buffer, self._pos, self._range_end)
        return self._moved(new_pos)

    def retreat(self) -> Utf8Iterator:
        """Return an iterator one code point back.

        Raises:
            NotEnoughRoomError: At range_start
            InvalidUtf8Error: If range_start is reached without a lead byte,
                or the preceding unit is malformed
        """
        _, new_pos = prior(self._buffer, self._pos, self._range_start)
        return self._moved(new_pos)

    def __iter__(self) -> Iterator[int]:
        """Yield code points from the position up to range_end."""
        pos = self._pos
        while pos < self._range_end:
            cp, pos = next_code_point(self._buffer, pos, self._range_end)
            yield cp

    def __reversed__(self) -> Iterator[int]:
        """Yield code points from the position back to range_start."""
        pos = self._pos
        while pos > self._range_start:
            cp, pos = prior(self._buffer, pos, self._range_start)
            yield cp

    def _check_comparable(self, other: Utf8Iterator) -> None:
        if (
            self._buffer is not other._buffer
            or self._range_start != other._range_start
            or self._range_end != other._range_end
        ):
            raise IteratorMismatchError(
                ErrorTemplate.iterator_range_mismatch(
                    (self._range_start, self._range_end),
                    (other._range_start, other._range_end),
                )
            )

    def __eq__(self, other: object) -> bool:
        """Compare positions.

        Raises:
            IteratorMismatchError: If other iterates a different buffer or
                range
        """
        if not isinstance(other, Utf8Iterator):
            return NotImplemented
        self._check_comparable(other)
        return self._pos == other._pos

    def __lt__(self, other: Utf8Iterator) -> bool:
        if not isinstance(other, Utf8Iterator):
            return NotImplemented
        self._check_comparable(other)
        return self._pos < other._pos

    def __hash__(self) -> int:
        return hash((id(self._buffer), self._pos, self._range_start, self._range_end))

    def __repr__(self) -> str:
        return (
            f"Utf8Iterator(pos={self._pos}, "
            f"range=[{self._range_start}, {self._range_end}))"
        )
