"""Non-validating UTF-8 encoder.

The caller guarantees that every code point is a Unicode scalar value.
Out-of-range input produces garbage bytes (lead bytes are truncated to
8 bits), never an exception from this module.

Python 3.13+.
"""

from __future__ import annotations

from typing import TypeVar

from utf8engine.core.classify import mask8
from utf8engine.core.protocols import CodeUnitSink

__all__ = ["append", "encode"]

SinkT = TypeVar("SinkT", bound=CodeUnitSink)


def append(cp: int, output: SinkT | None = None) -> SinkT | bytearray:
    """Append the UTF-8 encoding of cp to output without validating it.

    Example:
        >>> append(0xE9)
        bytearray(b'\\xc3\\xa9')
    """
    out: SinkT | bytearray = bytearray() if output is None else output
    if cp < 0x80:
        out.append(mask8(cp))
    elif cp < 0x800:
        out.append(mask8((cp >> 6) | 0xC0))
        out.append((cp & 0x3F) | 0x80)
    elif cp < 0x10000:
        out.append(mask8((cp >> 12) | 0xE0))
        out.append(((cp >> 6) & 0x3F) | 0x80)
        out.append((cp & 0x3F) | 0x80)
    else:
        out.append(mask8((cp >> 18) | 0xF0))
        out.append(((cp >> 12) & 0x3F) | 0x80)
        out.append(((cp >> 6) & 0x3F) | 0x80)
        out.append((cp & 0x3F) | 0x80)
    return out


def encode(cp: int) -> bytes:
    """Encode a single code point to bytes without validating it."""
    return bytes(append(cp))
