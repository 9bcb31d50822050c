"""Type guard functions for decode result narrowing.

decode_next() and decode_prior() return ``DecodeResult | DecodeError``.
Type guards narrow the union for mypy without isinstance() noise at every
call site.

Note: Both guards accept None and return False, so they can be applied
directly to optional results.

Example:
    >>> from utf8engine.checked.decoder import decode_next
    >>> result = decode_next(b"\\xf0\\x9f\\x98\\x80")
    >>> if is_decoded(result):
    ...     # mypy knows result is DecodeResult
    ...     hex(result.code_point)
    '0x1f600'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TypeIs

from .decoder import DecodeError, DecodeResult

__all__ = ["is_decode_error", "is_decoded"]


def is_decoded(result: DecodeResult | DecodeError | None) -> TypeIs[DecodeResult]:
    """Type guard: Check if a decode call succeeded.

    Args:
        result: Return value of decode_next() or decode_prior()

    Returns:
        True if result is a DecodeResult
    """
    return isinstance(result, DecodeResult)


def is_decode_error(result: DecodeResult | DecodeError | None) -> TypeIs[DecodeError]:
    """Type guard: Check if a decode call failed.

    Args:
        result: Return value of decode_next() or decode_prior()

    Returns:
        True if result is a DecodeError
    """
    return isinstance(result, DecodeError)
