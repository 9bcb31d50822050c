"""Non-validating navigation over UTF-8 buffers.

Trusts the lead byte of every sequence: continuation bytes are not
checked, and no bound is consulted while reading a unit. A malformed or
truncated buffer yields unspecified code points or an IndexError.

A lead byte that declares no length (a stray continuation byte, or
0xF8-0xFF) is stepped over as a single byte so traversal always makes
progress.

Python 3.13+.
"""

from __future__ import annotations

from utf8engine.core.classify import is_trail, mask8, sequence_length
from utf8engine.core.protocols import CodeUnitSource

__all__ = ["advance", "distance", "next_code_point", "peek_next", "prior"]


def next_code_point(buffer: CodeUnitSource, pos: int = 0) -> tuple[int, int]:
    """Decode the code point at pos and step past it.

    Returns:
        (code_point, new_pos)

    Example:
        >>> next_code_point(b"\\xe2\\x82\\xac!", 0)
        (8364, 3)
    """
    cp = mask8(buffer[pos])
    length = sequence_length(cp)
    if length == 2:
        cp = ((cp << 6) & 0x7FF) + (mask8(buffer[pos + 1]) & 0x3F)
    elif length == 3:
        cp = ((cp << 12) & 0xFFFF) + ((mask8(buffer[pos + 1]) << 6) & 0xFFF)
        cp += mask8(buffer[pos + 2]) & 0x3F
    elif length == 4:
        cp = ((cp << 18) & 0x1FFFFF) + ((mask8(buffer[pos + 1]) << 12) & 0x3FFFF)
        cp += (mask8(buffer[pos + 2]) << 6) & 0xFFF
        cp += mask8(buffer[pos + 3]) & 0x3F
    return cp, pos + (length or 1)


def peek_next(buffer: CodeUnitSource, pos: int = 0) -> int:
    """Decode the code point at pos without moving."""
    return next_code_point(buffer, pos)[0]


def prior(buffer: CodeUnitSource, pos: int) -> tuple[int, int]:
    """Step back one code point from pos.

    Walks back over continuation bytes, stopping at offset 0 at the latest.

    Returns:
        (code_point, new_pos) where new_pos is the lead byte offset

    Example:
        >>> prior(b"a\\xc3\\xa9", 3)
        (233, 1)
    """
    pos -= 1
    while pos > 0 and is_trail(buffer[pos]):
        pos -= 1
    return next_code_point(buffer, pos)[0], pos


def advance(buffer: CodeUnitSource, pos: int, n: int) -> int:
    """Step forward n code points from pos. Non-positive n is a no-op."""
    for _ in range(n):
        pos = next_code_point(buffer, pos)[1]
    return pos


def distance(buffer: CodeUnitSource, first: int = 0, last: int | None = None) -> int:
    """Count the code points in buffer[first:last]."""
    if last is None:
        last = len(buffer)
    count = 0
    while first < last:
        first = next_code_point(buffer, first)[1]
        count += 1
    return count
