"""Diagnostic system for utf8engine errors.

Provides structured error diagnostics with codes, byte spans, hints, and
help URLs. Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode
from .errors import (
    InputTooLargeError,
    InvalidCodePointError,
    InvalidUtf8Error,
    InvalidUtf16Error,
    IteratorMismatchError,
    IteratorRangeError,
    IteratorUsageError,
    NotEnoughRoomError,
    Utf8EngineError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidUtf16Error",
    "InvalidUtf8Error",
    "IteratorMismatchError",
    "IteratorRangeError",
    "IteratorUsageError",
    "NotEnoughRoomError",
    "OutputFormat",
    "Utf8EngineError",
]
