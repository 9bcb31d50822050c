"""Validating UTF-8 decoder.

Decodes exactly one encoded unit per call and reports the outcome as a
value, never by raising:

    decode_next(buffer, pos, end) -> DecodeResult | DecodeError
    decode_prior(buffer, pos, start) -> DecodeResult | DecodeError

Design Philosophy:
    - Functional positions: the caller's offset is an int that this module
      never mutates. A DecodeResult carries the new offset (``end``); a
      DecodeError carries none, so nothing is consumed on failure.
    - Errors are data: DecodeError holds the Diagnostic, and converts to
      the matching exception only when the caller asks (to_exception()).
    - Every byte read goes through mask8(), so any CodeUnitSource works.

Validation order (first failure wins):
    1. INVALID_LEAD          lead byte declares no length
    2. NOT_ENOUGH_ROOM       end bound reached inside the sequence
    3. INCOMPLETE_SEQUENCE   a following byte is not 10xxxxxx
    4. INVALID_CODE_POINT    surrogate or above U+10FFFF
    5. OVERLONG_SEQUENCE     longer than the minimal form

NOT_ENOUGH_ROOM and INCOMPLETE_SEQUENCE are checked byte by byte, so a
sequence that is both short and broken reports whichever the scan reaches
first.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from utf8engine.core.classify import (
    is_code_point_valid,
    is_overlong_sequence,
    is_trail,
    mask8,
    sequence_length,
)
from utf8engine.core.protocols import CodeUnitSource
from utf8engine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    InvalidCodePointError,
    InvalidUtf8Error,
    NotEnoughRoomError,
    Utf8EngineError,
)

__all__ = ["DecodeError", "DecodeResult", "decode_next", "decode_prior"]

# Payload bits kept from a lead byte, by sequence length.
_LEAD_PAYLOAD: dict[int, int] = {2: 0x1F, 3: 0x0F, 4: 0x07}


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Successfully decoded unit.

    Attributes:
        code_point: The decoded Unicode scalar value
        start: Offset of the lead byte
        end: Offset just past the last byte (the caller's new position
            when decoding forward)

    Example:
        >>> result = decode_next(b"\\xc3\\xa9!", 0)
        >>> result.code_point, result.start, result.end
        (233, 0, 2)
        >>> result.consumed
        2
    """

    code_point: int
    start: int
    end: int

    @property
    def consumed(self) -> int:
        """Number of bytes the unit occupies."""
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class DecodeError:
    """Failed decode. The caller's position is unchanged.

    Attributes:
        diagnostic: Structured description of the failure
        position: Offset of the byte where the failed sequence starts
    """

    diagnostic: Diagnostic
    position: int

    @property
    def kind(self) -> DiagnosticCode:
        """Error kind (one of the UTF-8 decoding codes)."""
        return self.diagnostic.code

    @property
    def consumed(self) -> int:
        """Always 0: a failed decode consumes nothing."""
        return 0

    @property
    def octet(self) -> int | None:
        """Lead byte of the failed sequence, when one was read."""
        return self.diagnostic.octet

    @property
    def code_point(self) -> int | None:
        """Assembled value for INVALID_CODE_POINT and OVERLONG_SEQUENCE."""
        return self.diagnostic.code_point

    def to_exception(self) -> Utf8EngineError:
        """Build the exception matching this error kind.

        Returns:
            NotEnoughRoomError, InvalidCodePointError, or InvalidUtf8Error
            carrying this error's diagnostic
        """
        match self.kind:
            case DiagnosticCode.NOT_ENOUGH_ROOM:
                return NotEnoughRoomError(self.diagnostic)
            case DiagnosticCode.INVALID_CODE_POINT:
                return InvalidCodePointError(self.diagnostic)
            case _:
                return InvalidUtf8Error(self.diagnostic)


def decode_next(
    buffer: CodeUnitSource, pos: int = 0, end: int | None = None
) -> DecodeResult | DecodeError:
    """Decode one UTF-8 unit starting at pos.

    Args:
        buffer: Bytes to decode
        pos: Offset of the lead byte
        end: Exclusive end bound (default: len(buffer))

    Returns:
        DecodeResult whose ``end`` is the offset past the unit, or a
        DecodeError (see module docstring for the validation order)

    Example:
        >>> decode_next(b"\\xe2\\x82\\xac", 0).code_point
        8364
        >>> decode_next(b"\\xc0\\x80", 0).kind
        <DiagnosticCode.OVERLONG_SEQUENCE: 1005>
        >>> decode_next(b"\\xe2", 0).kind
        <DiagnosticCode.NOT_ENOUGH_ROOM: 1002>
    """
    if end is None:
        end = len(buffer)
    if pos >= end:
        return DecodeError(ErrorTemplate.empty_range(pos), pos)

    lead = mask8(buffer[pos])
    length = sequence_length(lead)
    if length == 0:
        return DecodeError(ErrorTemplate.invalid_lead(lead, pos), pos)
    if length == 1:
        return DecodeResult(lead, pos, pos + 1)

    cp = lead & _LEAD_PAYLOAD[length]
    for offset in range(pos + 1, pos + length):
        if offset >= end:
            return DecodeError(
                ErrorTemplate.not_enough_room(pos, length, end - pos), pos
            )
        octet = mask8(buffer[offset])
        if not is_trail(octet):
            return DecodeError(
                ErrorTemplate.incomplete_sequence(lead, pos, length, offset), pos
            )
        cp = (cp << 6) | (octet & 0x3F)

    if not is_code_point_valid(cp):
        return DecodeError(ErrorTemplate.invalid_code_point(cp, pos, length), pos)
    if is_overlong_sequence(cp, length):
        return DecodeError(ErrorTemplate.overlong_sequence(lead, pos, length, cp), pos)
    return DecodeResult(cp, pos, pos + length)


def decode_prior(
    buffer: CodeUnitSource, pos: int, start: int = 0
) -> DecodeResult | DecodeError:
    """Decode the unit that ends just before pos.

    Walks backward over continuation bytes to the nearest lead byte, then
    decodes forward from it with pos as the end bound.

    Args:
        buffer: Bytes to decode
        pos: Offset just past the unit to decode
        start: Inclusive lower bound for the backward walk (default: 0)

    Returns:
        DecodeResult whose ``start`` is the lead byte offset (the caller's
        new position when decoding backward), or a DecodeError:
        NOT_ENOUGH_ROOM if pos <= start, INVALID_LEAD if start is reached
        on a continuation byte or if the lead byte's unit ends before pos,
        otherwise whatever decoding the lead byte reports

    Example:
        >>> result = decode_prior(b"a\\xc3\\xa9", 3)
        >>> result.code_point, result.start
        (233, 1)
    """
    if pos <= start:
        return DecodeError(ErrorTemplate.at_range_start(pos), pos)

    lead_pos = pos - 1
    while is_trail(buffer[lead_pos]):
        if lead_pos == start:
            octet = mask8(buffer[lead_pos])
            return DecodeError(ErrorTemplate.missing_lead_byte(octet, lead_pos), lead_pos)
        lead_pos -= 1

    result = decode_next(buffer, lead_pos, pos)
    if isinstance(result, DecodeResult) and result.end != pos:
        # Lead byte was complete on its own; the bytes up to pos are strays.
        stray = mask8(buffer[result.end])
        return DecodeError(ErrorTemplate.missing_lead_byte(stray, result.end), result.end)
    return result
