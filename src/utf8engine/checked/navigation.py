"""Raising navigation over UTF-8 buffers.

Positions are plain ints. Each function returns the new position instead of
mutating anything, so on failure the caller's position is unchanged.

Python 3.13+.
"""

from __future__ import annotations

from utf8engine.core.protocols import CodeUnitSource

from .decoder import DecodeError, decode_next, decode_prior

__all__ = ["advance", "distance", "next_code_point", "peek_next", "prior"]


def next_code_point(
    buffer: CodeUnitSource, pos: int = 0, end: int | None = None
) -> tuple[int, int]:
    """Decode the code point at pos and step past it.

    Args:
        buffer: UTF-8 bytes
        pos: Offset of the lead byte
        end: Exclusive end bound (default: len(buffer))

    Returns:
        (code_point, new_pos)

    Raises:
        NotEnoughRoomError: If pos is at end or the unit is truncated
        InvalidUtf8Error: If the unit is malformed or overlong
        InvalidCodePointError: If the unit encodes a surrogate or a value
            above U+10FFFF

    Example:
        >>> next_code_point(b"\\xe6\\x97\\xa5\\xd1\\x88", 0)
        (26085, 3)
    """
    result = decode_next(buffer, pos, end)
    if isinstance(result, DecodeError):
        raise result.to_exception()
    return result.code_point, result.end


def peek_next(buffer: CodeUnitSource, pos: int = 0, end: int | None = None) -> int:
    """Decode the code point at pos without moving.

    Raises:
        Same as next_code_point()
    """
    return next_code_point(buffer, pos, end)[0]


def prior(buffer: CodeUnitSource, pos: int, start: int = 0) -> tuple[int, int]:
    """Step back one code point from pos.

    Args:
        buffer: UTF-8 bytes
        pos: Offset just past the code point to decode
        start: Lower bound of the backward walk (default: 0)

    Returns:
        (code_point, new_pos) where new_pos is the lead byte offset

    Raises:
        NotEnoughRoomError: If pos <= start
        InvalidUtf8Error: If start is reached without finding a lead byte,
            or the unit before pos is malformed

    Example:
        >>> prior(b"\\xe6\\x97\\xa5\\xd1\\x88", 5)
        (1096, 3)
    """
    result = decode_prior(buffer, pos, start)
    if isinstance(result, DecodeError):
        raise result.to_exception()
    return result.code_point, result.start


def advance(buffer: CodeUnitSource, pos: int, n: int, end: int | None = None) -> int:
    """Step forward n code points from pos.

    Args:
        buffer: UTF-8 bytes
        pos: Starting offset
        n: Number of code points to skip (non-negative)
        end: Exclusive end bound (default: len(buffer))

    Returns:
        Offset after the n-th code point

    Raises:
        ValueError: If n is negative
        NotEnoughRoomError: If end is reached before n code points
        InvalidUtf8Error: If a malformed unit is met on the way

    Example:
        >>> advance(b"a\\xc3\\xa9b", 0, 2)
        3
    """
    if n < 0:
        msg = f"advance() step count must be non-negative, got {n}"
        raise ValueError(msg)
    for _ in range(n):
        pos = next_code_point(buffer, pos, end)[1]
    return pos


def distance(buffer: CodeUnitSource, first: int = 0, last: int | None = None) -> int:
    """Count the code points in buffer[first:last].

    Raises:
        NotEnoughRoomError: If the range ends inside a unit
        InvalidUtf8Error: If the range contains a malformed unit

    Example:
        >>> distance("日本語".encode())
        3
    """
    if last is None:
        last = len(buffer)
    count = 0
    while first < last:
        first = next_code_point(buffer, first, last)[1]
        count += 1
    return count
