"""Invalid-sequence sanitizer.

Copies well-formed UTF-8 through unchanged and substitutes one replacement
marker per malformed unit.

Recovery rules, by decode error kind:
    INVALID_LEAD         one marker, skip the byte
    INCOMPLETE_SEQUENCE  one marker, skip the lead and every following
    OVERLONG_SEQUENCE    continuation byte
    INVALID_CODE_POINT
    NOT_ENOUGH_ROOM      fatal: NotEnoughRoomError for the whole call

Python 3.13+.
"""

from __future__ import annotations

import logging

from utf8engine.core.classify import is_trail, mask8
from utf8engine.core.protocols import CodeUnitSource
from utf8engine.diagnostics import DiagnosticCode

from .decoder import DecodeError, decode_next
from .encoder import encode
from .sanitize_config import SanitizeConfig

__all__ = ["replace_invalid"]

logger = logging.getLogger(__name__)


def _copy_run(buffer: CodeUnitSource, start: int, stop: int, out: bytearray) -> None:
    """Append buffer[start:stop] to out, masking non-byte elements."""
    if start == stop:
        return
    if isinstance(buffer, (bytes, bytearray)):
        out += buffer[start:stop]
    else:
        out.extend(mask8(buffer[i]) for i in range(start, stop))


def replace_invalid(
    buffer: CodeUnitSource,
    replacement: int | None = None,
    *,
    config: SanitizeConfig | None = None,
) -> bytes:
    """Return buffer with every malformed unit replaced by a marker.

    Args:
        buffer: Bytes to sanitize
        replacement: Marker code point (default: U+FFFD). Ignored when
            config is given.
        config: Replacement and size limit as one object

    Returns:
        Well-formed UTF-8 bytes

    Raises:
        InvalidCodePointError: If the replacement is not a Unicode scalar
            value (raised before the buffer is read)
        InputTooLargeError: If buffer exceeds config.max_input_size
        NotEnoughRoomError: If the buffer ends inside a sequence

    Example:
        >>> replace_invalid(b"He\\xffllo").decode()
        'He\\ufffdllo'
        >>> replace_invalid(b"\\xc0\\x80!", ord("?"))
        b'?!'
    """
    if config is None:
        config = SanitizeConfig() if replacement is None else SanitizeConfig(replacement)
    marker = encode(config.replacement)

    end = len(buffer)
    config.check_size(end)

    out = bytearray()
    run_start = pos = 0
    replaced = 0
    while pos < end:
        result = decode_next(buffer, pos, end)
        if not isinstance(result, DecodeError):
            pos = result.end
            continue

        _copy_run(buffer, run_start, pos, out)
        if result.kind is DiagnosticCode.NOT_ENOUGH_ROOM:
            raise result.to_exception()

        logger.debug("Replacing %s at offset %d", result.kind.name, pos)
        out += marker
        replaced += 1
        pos += 1
        if result.kind is not DiagnosticCode.INVALID_LEAD:
            while pos < end and is_trail(buffer[pos]):
                pos += 1
        run_start = pos

    _copy_run(buffer, run_start, pos, out)
    if replaced:
        logger.debug("Replaced %d malformed sequence(s) in %d bytes", replaced, end)
    return bytes(out)
