"""utf8engine exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information and
expose the offending value (byte, code point, or UTF-16 unit) as a plain
attribute.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidUtf16Error",
    "InvalidUtf8Error",
    "IteratorMismatchError",
    "IteratorRangeError",
    "IteratorUsageError",
    "NotEnoughRoomError",
    "Utf8EngineError",
]


class Utf8EngineError(Exception):
    """Base exception for all utf8engine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize Utf8EngineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, or None when raised with a plain message."""
        return self.diagnostic.code if self.diagnostic is not None else None

    @property
    def position(self) -> int | None:
        """Start offset of the offending data, when known."""
        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        return self.diagnostic.span.start


class NotEnoughRoomError(Utf8EngineError):
    """Buffer ends in the middle of a sequence.

    Also raised when stepping backward from the start of a range.
    Treated as fatal by replace_invalid(): a truncated buffer cannot be
    repaired by substitution.
    """


class InvalidUtf8Error(Utf8EngineError):
    """Malformed UTF-8: invalid lead byte, missing continuation, or overlong form.

    Attributes:
        octet: The byte at which the failed sequence starts
    """

    @property
    def octet(self) -> int | None:
        """Offending byte value."""
        return self.diagnostic.octet if self.diagnostic is not None else None


class InvalidCodePointError(Utf8EngineError):
    """Surrogate or out-of-range code point.

    Raised by the encoder before any byte is written, and by the decoder
    when a well-framed sequence decodes to a surrogate or to a value above
    U+10FFFF.
    """

    @property
    def code_point(self) -> int | None:
        """Offending code point value."""
        return self.diagnostic.code_point if self.diagnostic is not None else None


class InvalidUtf16Error(Utf8EngineError):
    """Lone or mismatched surrogate in UTF-16 input."""

    @property
    def unit(self) -> int | None:
        """Offending 16-bit unit."""
        return self.diagnostic.unit if self.diagnostic is not None else None


class IteratorUsageError(Utf8EngineError):
    """Misuse of an iterator adaptor (caller bug, not bad data)."""


class IteratorRangeError(IteratorUsageError, ValueError):
    """Iterator position lies outside its [range_start, range_end] bounds."""


class IteratorMismatchError(IteratorUsageError):
    """Iterators built over different buffers or ranges were compared."""


class InputTooLargeError(Utf8EngineError):
    """Input exceeds the configured maximum size."""
