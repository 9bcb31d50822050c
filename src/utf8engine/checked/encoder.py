"""Validating UTF-8 encoder.

Bit layout of the minimal form:

    U+0000   - U+007F     0xxxxxxx
    U+0080   - U+07FF     110xxxxx 10xxxxxx
    U+0800   - U+FFFF     1110xxxx 10xxxxxx 10xxxxxx
    U+10000  - U+10FFFF   11110xxx 10xxxxxx 10xxxxxx 10xxxxxx

Python 3.13+.
"""

from __future__ import annotations

from typing import TypeVar

from utf8engine.core.classify import is_code_point_valid
from utf8engine.core.protocols import CodeUnitSink
from utf8engine.diagnostics import ErrorTemplate, InvalidCodePointError

__all__ = ["append", "encode"]

SinkT = TypeVar("SinkT", bound=CodeUnitSink)


def append(cp: int, output: SinkT | None = None) -> SinkT | bytearray:
    """Append the UTF-8 encoding of a code point to output.

    Validation happens before anything is written, so output is untouched
    when this raises.

    Args:
        cp: Code point to encode
        output: Destination for the bytes (default: a new bytearray)

    Returns:
        output, for chaining

    Raises:
        InvalidCodePointError: If cp is negative, a surrogate, or above
            U+10FFFF

    Example:
        >>> append(0x20AC)
        bytearray(b'\\xe2\\x82\\xac')
        >>> buf = bytearray(b"x")
        >>> append(0x41, buf) is buf
        True
    """
    if not is_code_point_valid(cp):
        raise InvalidCodePointError(ErrorTemplate.invalid_code_point(cp))

    out: SinkT | bytearray = bytearray() if output is None else output
    if cp < 0x80:
        out.append(cp)
    elif cp < 0x800:
        out.append((cp >> 6) | 0xC0)
        out.append((cp & 0x3F) | 0x80)
    elif cp < 0x10000:
        out.append((cp >> 12) | 0xE0)
        out.append(((cp >> 6) & 0x3F) | 0x80)
        out.append((cp & 0x3F) | 0x80)
    else:
        out.append((cp >> 18) | 0xF0)
        out.append(((cp >> 12) & 0x3F) | 0x80)
        out.append(((cp >> 6) & 0x3F) | 0x80)
        out.append((cp & 0x3F) | 0x80)
    return out


def encode(cp: int) -> bytes:
    """Encode a single code point to bytes.

    Raises:
        InvalidCodePointError: If cp is not a Unicode scalar value
    """
    return bytes(append(cp))
