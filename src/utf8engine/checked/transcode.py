"""Validating bulk converters between UTF-8, UTF-16 and UTF-32.

UTF-16 and UTF-32 are handled as sequences of ints; UTF-8 output is bytes.
Each converter raises on the first malformed element and logs the failure
at DEBUG level first.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from utf8engine.constants import BMP_MAX, LEAD_OFFSET, SURROGATE_OFFSET, TRAIL_SURROGATE_MIN
from utf8engine.core.classify import (
    is_lead_surrogate,
    is_trail_surrogate,
    mask16,
)
from utf8engine.core.protocols import CodeUnitSource
from utf8engine.diagnostics import (
    ErrorTemplate,
    InvalidCodePointError,
    InvalidUtf16Error,
    Utf8EngineError,
)

from .encoder import append
from .navigation import next_code_point

__all__ = ["utf8_to_utf16", "utf8_to_utf32", "utf16_to_utf8", "utf32_to_utf8"]

logger = logging.getLogger(__name__)


def utf16_to_utf8(units: CodeUnitSource) -> bytes:
    """Convert UTF-16 code units to UTF-8.

    Each element is masked to 16 bits. A lead surrogate must be followed by
    a trail surrogate.

    Raises:
        InvalidUtf16Error: On a lone trail surrogate, or a lead surrogate
            not followed by a trail (``unit`` is the non-trail unit, or the
            lead itself when the input ends)

    Example:
        >>> utf16_to_utf8([0x0041, 0xD83D, 0xDE00])
        b'A\\xf0\\x9f\\x98\\x80'
    """
    out = bytearray()
    end = len(units)
    i = 0
    while i < end:
        cp = mask16(units[i])
        if is_lead_surrogate(cp):
            if i + 1 >= end:
                logger.debug("Unpaired lead surrogate 0x%04X at end of input", cp)
                raise InvalidUtf16Error(ErrorTemplate.invalid_utf16(cp, i))
            trail = mask16(units[i + 1])
            if not is_trail_surrogate(trail):
                logger.debug("Lead surrogate at %d followed by 0x%04X", i, trail)
                raise InvalidUtf16Error(ErrorTemplate.invalid_utf16(trail, i + 1))
            cp = (cp << 10) + trail + SURROGATE_OFFSET
            i += 1
        elif is_trail_surrogate(cp):
            logger.debug("Lone trail surrogate 0x%04X at %d", cp, i)
            raise InvalidUtf16Error(ErrorTemplate.invalid_utf16(cp, i))
        append(cp, out)
        i += 1
    return bytes(out)


def utf8_to_utf16(buffer: CodeUnitSource) -> list[int]:
    """Convert UTF-8 to UTF-16 code units.

    Code points above U+FFFF become a lead/trail surrogate pair.

    Raises:
        NotEnoughRoomError: If the buffer ends inside a sequence
        InvalidUtf8Error: On a malformed sequence
        InvalidCodePointError: On an encoded surrogate or out-of-range value

    Example:
        >>> [hex(u) for u in utf8_to_utf16(b"\\xf0\\x9f\\x98\\x80")]
        ['0xd83d', '0xde00']
    """
    units: list[int] = []
    pos = 0
    end = len(buffer)
    try:
        while pos < end:
            cp, pos = next_code_point(buffer, pos, end)
            if cp > BMP_MAX:
                units.append((cp >> 10) + LEAD_OFFSET)
                units.append((cp & 0x3FF) + TRAIL_SURROGATE_MIN)
            else:
                units.append(cp)
    except Utf8EngineError as e:
        logger.debug("utf8_to_utf16 failed: %s", e)
        raise
    return units


def utf32_to_utf8(code_points: Iterable[int]) -> bytes:
    """Convert UTF-32 code points to UTF-8.

    Raises:
        InvalidCodePointError: On the first invalid value; its position is
            the element index

    Example:
        >>> utf32_to_utf8([0x48, 0x20AC])
        b'H\\xe2\\x82\\xac'
    """
    out = bytearray()
    for index, cp in enumerate(code_points):
        try:
            append(cp, out)
        except InvalidCodePointError:
            logger.debug("Invalid code point at index %d", index)
            raise InvalidCodePointError(
                ErrorTemplate.invalid_code_point(cp, index, 1)
            ) from None
    return bytes(out)


def utf8_to_utf32(buffer: CodeUnitSource) -> list[int]:
    """Convert UTF-8 to a list of code points.

    Raises:
        Same as utf8_to_utf16()

    Example:
        >>> utf8_to_utf32("añ€".encode())
        [97, 241, 8364]
    """
    code_points: list[int] = []
    pos = 0
    end = len(buffer)
    try:
        while pos < end:
            cp, pos = next_code_point(buffer, pos, end)
            code_points.append(cp)
    except Utf8EngineError as e:
        logger.debug("utf8_to_utf32 failed: %s", e)
        raise
    return code_points
