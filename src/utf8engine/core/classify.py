"""Byte and code point classification for UTF-8 and UTF-16.

This module provides the single source of truth for the bit-pattern rules
both the checked and unchecked engines are built from:

    Lead byte            Sequence length
    0xxxxxxx             1
    110xxxxx             2
    1110xxxx             3
    11110xxx             4
    anything else        0 (invalid lead)

    Continuation byte:   10xxxxxx

Masking:
    Buffers may hold signed or wider integers (array('b'), list[int] built
    from C data, 16-bit units stored in 32-bit slots). mask8() and mask16()
    truncate such values before every test, so -0x1E and 0xE2 classify the
    same way.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

from utf8engine.constants import (
    CODE_POINT_MAX,
    LEAD_SURROGATE_MAX,
    LEAD_SURROGATE_MIN,
    TRAIL_SURROGATE_MAX,
    TRAIL_SURROGATE_MIN,
)

__all__ = [
    "encoded_length",
    "is_code_point_valid",
    "is_lead_surrogate",
    "is_overlong_sequence",
    "is_surrogate",
    "is_trail",
    "is_trail_surrogate",
    "mask8",
    "mask16",
    "sequence_length",
]


def mask8(value: int) -> int:
    """Truncate an integer to its low 8 bits.

    Example:
        >>> mask8(-30)
        226
        >>> mask8(0x1E2)
        226
    """
    return value & 0xFF


def mask16(value: int) -> int:
    """Truncate an integer to its low 16 bits."""
    return value & 0xFFFF


def is_trail(octet: int) -> bool:
    """Check if a byte is a UTF-8 continuation byte (top bits ``10``).

    Example:
        >>> is_trail(0x80)
        True
        >>> is_trail(0xC2)
        False
    """
    return (mask8(octet) >> 6) == 0x2


def is_lead_surrogate(cp: int) -> bool:
    """Check if a value is a UTF-16 lead (high) surrogate."""
    return LEAD_SURROGATE_MIN <= cp <= LEAD_SURROGATE_MAX


def is_trail_surrogate(cp: int) -> bool:
    """Check if a value is a UTF-16 trail (low) surrogate."""
    return TRAIL_SURROGATE_MIN <= cp <= TRAIL_SURROGATE_MAX


def is_surrogate(cp: int) -> bool:
    """Check if a value lies anywhere in the surrogate range 0xD800-0xDFFF."""
    return LEAD_SURROGATE_MIN <= cp <= TRAIL_SURROGATE_MAX


def is_code_point_valid(cp: int) -> bool:
    """Check if a value is a Unicode scalar value.

    Args:
        cp: Candidate code point

    Returns:
        True if 0 <= cp <= 0x10FFFF and cp is not a surrogate

    Example:
        >>> is_code_point_valid(0x10FFFF)
        True
        >>> is_code_point_valid(0xD800)
        False
        >>> is_code_point_valid(0x110000)
        False
    """
    return 0 <= cp <= CODE_POINT_MAX and not is_surrogate(cp)


def sequence_length(lead: int) -> int:
    """Resolve the total sequence length declared by a lead byte.

    Args:
        lead: First byte of a sequence (masked to 8 bits)

    Returns:
        1, 2, 3 or 4; 0 if the byte cannot start a sequence
        (a continuation byte, or 0xF8-0xFF)

    Example:
        >>> sequence_length(0x41)
        1
        >>> sequence_length(0xE2)
        3
        >>> sequence_length(0x80)
        0
    """
    lead = mask8(lead)
    if lead < 0x80:
        return 1
    if (lead >> 5) == 0x6:
        return 2
    if (lead >> 4) == 0xE:
        return 3
    if (lead >> 3) == 0x1E:
        return 4
    return 0


def encoded_length(cp: int) -> int:
    """Minimal UTF-8 length for a code point's magnitude.

    Does not validate cp; surrogates report 3 and values above
    0x10FFFF report 4.
    """
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def is_overlong_sequence(cp: int, length: int) -> bool:
    """Check if a sequence is longer than the minimal form of its code point.

    Args:
        cp: Decoded code point
        length: Number of bytes the sequence used

    Returns:
        True if length differs from encoded_length(cp). Four-byte code
        points cannot be overlong: no longer form exists.

    Example:
        >>> is_overlong_sequence(0x00, 2)   # C0 80
        True
        >>> is_overlong_sequence(0xE9, 2)   # C3 A9
        False
    """
    if cp >= 0x10000:
        return False
    return length != encoded_length(cp)
