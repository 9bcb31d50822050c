"""Diagnostic codes and data structures.

Defines error codes, byte spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: UTF-8 decoding errors, in the priority order the
                   validating decoder applies them
        1100-1199: Code point errors
        1200-1299: UTF-16 errors
        2000-2099: Usage errors (iterator construction and comparison)
        3000-3099: Input limits
    """

    # UTF-8 decoding errors (1000-1099)
    INVALID_LEAD = 1001
    NOT_ENOUGH_ROOM = 1002
    INCOMPLETE_SEQUENCE = 1003
    OVERLONG_SEQUENCE = 1005

    # Code point errors (1100-1199)
    # INVALID_CODE_POINT is checked before OVERLONG_SEQUENCE by the decoder
    # even though its numeric code sorts after it.
    INVALID_CODE_POINT = 1101

    # UTF-16 errors (1200-1299)
    INVALID_UTF16 = 1201

    # Usage errors (2000-2099)
    ITERATOR_OUT_OF_RANGE = 2001
    ITERATOR_RANGE_MISMATCH = 2002

    # Input limits (3000-3099)
    INPUT_TOO_LARGE = 3001


@dataclass(frozen=True, slots=True)
class ByteSpan:
    """Byte range within a buffer for error reporting.

    Note:
        Offsets count elements of the buffer being processed: bytes for
        UTF-8 input, 16-bit units for UTF-16 input, 32-bit values for
        UTF-32 input.

    Attributes:
        start: Starting offset (0-indexed)
        end: Ending offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate ByteSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"ByteSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"ByteSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def length(self) -> int:
        """Number of elements covered by the span."""
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries the offending value so
    callers can branch on it without parsing the message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Buffer location (None when no buffer is involved)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        octet: Offending UTF-8 byte (decoding errors)
        code_point: Offending code point value (code point errors)
        unit: Offending UTF-16 unit (UTF-16 errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: ByteSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    octet: int | None = None
    code_point: int | None = None
    unit: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[OVERLONG_SEQUENCE]: Overlong 2-byte encoding of U+0000 at offset 0
              --> bytes 0..2
              = octet: 0xC0
              = code point: U+0000
              = help: Encode the code point with its shortest form

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
