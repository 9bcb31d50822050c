"""Shared constants for utf8engine.

This module provides the Unicode and UTF-8 constants used across the
classifier, the checked and unchecked engines, and the command-line driver.
Placing constants here avoids circular imports and provides a single source
of truth.

Constants are grouped by domain:
- Surrogates: UTF-16 lead/trail ranges and pair arithmetic offsets
- Code points: Valid range and the default replacement marker
- UTF-8 framing: Sequence lengths and the byte-order mark
- Input limits: DoS prevention for the command-line driver

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Surrogates
    "LEAD_SURROGATE_MIN",
    "LEAD_SURROGATE_MAX",
    "TRAIL_SURROGATE_MIN",
    "TRAIL_SURROGATE_MAX",
    "LEAD_OFFSET",
    "SURROGATE_OFFSET",
    # Code points
    "CODE_POINT_MAX",
    "REPLACEMENT_CHARACTER",
    "BMP_MAX",
    # UTF-8 framing
    "MAX_SEQUENCE_LENGTH",
    "BOM",
    # Input limits
    "MAX_INPUT_SIZE",
    "DEFAULT_SAMPLE_LIMIT",
]

# ============================================================================
# SURROGATES
# ============================================================================

# Leading (high) surrogates: 0xD800 - 0xDBFF
LEAD_SURROGATE_MIN: int = 0xD800
LEAD_SURROGATE_MAX: int = 0xDBFF

# Trailing (low) surrogates: 0xDC00 - 0xDFFF
TRAIL_SURROGATE_MIN: int = 0xDC00
TRAIL_SURROGATE_MAX: int = 0xDFFF

# Added to (cp >> 10) to produce the lead surrogate of a pair.
# Equals 0xD7C0; the 0x10000 bias is folded in.
LEAD_OFFSET: int = LEAD_SURROGATE_MIN - (0x10000 >> 10)

# Added to (lead << 10) + trail to recover the code point of a pair.
# Negative by construction: 0x10000 - (0xD800 << 10) - 0xDC00.
SURROGATE_OFFSET: int = 0x10000 - (LEAD_SURROGATE_MIN << 10) - TRAIL_SURROGATE_MIN

# ============================================================================
# CODE POINTS
# ============================================================================

# Maximum valid value for a Unicode code point.
CODE_POINT_MAX: int = 0x10FFFF

# U+FFFD REPLACEMENT CHARACTER, substituted for each malformed run.
REPLACEMENT_CHARACTER: int = 0xFFFD

# Last code point of the Basic Multilingual Plane. Anything above needs
# a surrogate pair in UTF-16.
BMP_MAX: int = 0xFFFF

# ============================================================================
# UTF-8 FRAMING
# ============================================================================

# UTF-8 encodes any valid code point in at most 4 bytes (RFC 3629).
MAX_SEQUENCE_LENGTH: int = 4

# UTF-8 byte-order mark.
BOM: bytes = b"\xef\xbb\xbf"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input size in bytes (10 MB) read by the command-line driver.
MAX_INPUT_SIZE: int = 10 * 1024 * 1024

# Prefix length the sample sanitizer run uses when --limit is given
# without a value.
DEFAULT_SAMPLE_LIMIT: int = 2000
