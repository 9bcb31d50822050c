"""Non-validating bulk converters between UTF-8, UTF-16 and UTF-32.

Same signatures as the checked converters. Input is trusted: surrogate
pairing in UTF-16 and the range of UTF-32 values are not verified.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from utf8engine.constants import BMP_MAX, LEAD_OFFSET, SURROGATE_OFFSET, TRAIL_SURROGATE_MIN
from utf8engine.core.classify import is_lead_surrogate, mask16
from utf8engine.core.protocols import CodeUnitSource

from .encoder import append
from .navigation import next_code_point

__all__ = ["utf8_to_utf16", "utf8_to_utf32", "utf16_to_utf8", "utf32_to_utf8"]


def utf16_to_utf8(units: CodeUnitSource) -> bytes:
    """Convert UTF-16 code units to UTF-8.

    The unit after a lead surrogate is combined with it whatever its value.
    A lead surrogate as the last unit raises IndexError.
    """
    out = bytearray()
    end = len(units)
    i = 0
    while i < end:
        cp = mask16(units[i])
        i += 1
        if is_lead_surrogate(cp):
            cp = (cp << 10) + mask16(units[i]) + SURROGATE_OFFSET
            i += 1
        append(cp, out)
    return bytes(out)


def utf8_to_utf16(buffer: CodeUnitSource) -> list[int]:
    """Convert UTF-8 to UTF-16 code units."""
    units: list[int] = []
    pos = 0
    end = len(buffer)
    while pos < end:
        cp, pos = next_code_point(buffer, pos)
        if cp > BMP_MAX:
            units.append(mask16((cp >> 10) + LEAD_OFFSET))
            units.append(mask16((cp & 0x3FF) + TRAIL_SURROGATE_MIN))
        else:
            units.append(cp)
    return units


def utf32_to_utf8(code_points: Iterable[int]) -> bytes:
    """Convert UTF-32 code points to UTF-8."""
    out = bytearray()
    for cp in code_points:
        append(cp, out)
    return bytes(out)


def utf8_to_utf32(buffer: CodeUnitSource) -> list[int]:
    """Convert UTF-8 to a list of code points."""
    code_points: list[int] = []
    pos = 0
    end = len(buffer)
    while pos < end:
        cp, pos = next_code_point(buffer, pos)
        code_points.append(cp)
    return code_points
