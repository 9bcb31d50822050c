"""utf8engine - UTF-8 validation and UTF-8/16/32 transcoding.

Validates byte sequences as well-formed UTF-8, sanitizes malformed input,
converts between UTF-8, UTF-16 and UTF-32, and walks UTF-8 buffers one code
point at a time in either direction.

Public API (checked engine):
    is_valid, find_first_invalid, starts_with_bom - Validation
    append, encode - Encoding a code point
    decode_next, decode_prior - Value-returning primitive decode
    next_code_point, peek_next, prior, advance, distance - Navigation
    replace_invalid, SanitizeConfig - Sanitizing copy
    utf16_to_utf8, utf8_to_utf16, utf32_to_utf8, utf8_to_utf32 - Converters
    Utf8Iterator - Bidirectional code-point iterator

Exceptions:
    Utf8EngineError - Base exception class
    NotEnoughRoomError - Buffer ends inside a sequence
    InvalidUtf8Error - Malformed or overlong sequence
    InvalidCodePointError - Surrogate or out-of-range code point
    InvalidUtf16Error - Unpaired surrogate in UTF-16 input

Submodules:
    utf8engine.unchecked - Non-validating fast path for trusted input
    utf8engine.diagnostics - Diagnostic codes, templates and formatting
    utf8engine.core - Byte classification and buffer protocols
    utf8engine.constants - Unicode constants
"""

from .checked import (
    DecodeError,
    DecodeResult,
    SanitizeConfig,
    Utf8Iterator,
    advance,
    append,
    decode_next,
    decode_prior,
    distance,
    encode,
    find_first_invalid,
    is_decode_error,
    is_decoded,
    is_valid,
    next_code_point,
    peek_next,
    prior,
    replace_invalid,
    starts_with_bom,
    utf8_to_utf16,
    utf8_to_utf32,
    utf16_to_utf8,
    utf32_to_utf8,
)
from .diagnostics import (
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

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("utf8engine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DecodeError",
    "DecodeResult",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidUtf8Error",
    "InvalidUtf16Error",
    "IteratorMismatchError",
    "IteratorRangeError",
    "IteratorUsageError",
    "NotEnoughRoomError",
    "SanitizeConfig",
    "Utf8EngineError",
    "Utf8Iterator",
    "__version__",
    "advance",
    "append",
    "decode_next",
    "decode_prior",
    "distance",
    "encode",
    "find_first_invalid",
    "is_decode_error",
    "is_decoded",
    "is_valid",
    "next_code_point",
    "peek_next",
    "prior",
    "replace_invalid",
    "starts_with_bom",
    "utf8_to_utf16",
    "utf8_to_utf32",
    "utf16_to_utf8",
    "utf32_to_utf8",
]
