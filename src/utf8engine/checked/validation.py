"""Whole-buffer UTF-8 validation.

Python 3.13+.
"""

from __future__ import annotations

from utf8engine.constants import BOM
from utf8engine.core.classify import mask8
from utf8engine.core.protocols import CodeUnitSource

from .decoder import DecodeError, decode_next

__all__ = ["find_first_invalid", "first_error", "is_valid", "starts_with_bom"]


def first_error(
    buffer: CodeUnitSource, start: int = 0, end: int | None = None
) -> DecodeError | None:
    """Return the first decode failure in buffer[start:end], or None.

    Example:
        >>> first_error(b"ok\\xff").position
        2
        >>> first_error(b"ok") is None
        True
    """
    if end is None:
        end = len(buffer)
    pos = start
    while pos < end:
        result = decode_next(buffer, pos, end)
        if isinstance(result, DecodeError):
            return result
        pos = result.end
    return None


def find_first_invalid(
    buffer: CodeUnitSource, start: int = 0, end: int | None = None
) -> int:
    """Offset of the first byte of the first malformed unit.

    Returns:
        That offset, or ``end`` (default: len(buffer)) when every unit
        decodes

    Example:
        >>> find_first_invalid(b"He\\xffllo")
        2
        >>> find_first_invalid(b"Hello")
        5
    """
    if end is None:
        end = len(buffer)
    error = first_error(buffer, start, end)
    return end if error is None else error.position


def is_valid(buffer: CodeUnitSource) -> bool:
    """Check whether the whole buffer is well-formed UTF-8.

    Example:
        >>> is_valid(b"\\xe2\\x82\\xac")
        True
        >>> is_valid(b"\\xc0\\x80")
        False
    """
    return first_error(buffer) is None


def starts_with_bom(buffer: CodeUnitSource) -> bool:
    """Check whether buffer begins with the UTF-8 byte-order mark EF BB BF."""
    if len(buffer) < len(BOM):
        return False
    return all(mask8(buffer[i]) == octet for i, octet in enumerate(BOM))
