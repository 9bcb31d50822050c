"""Hypothesis strategies for utf8engine property-based testing.

Strategies are organized by domain:

- unicode: code points, UTF-8 buffers, malformed byte soups, UTF-16 units

Usage:
    from tests.strategies import valid_code_points, utf8_buffers
    from tests.strategies.unicode import malformed_buffers, utf16_units

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - valid_code_points, invalid_code_points
    - malformed_buffers, byte_soups
"""

from .unicode import (
    byte_soups,
    invalid_code_points,
    malformed_buffers,
    utf8_buffers,
    utf16_units,
    valid_code_points,
)

__all__ = [
    "byte_soups",
    "invalid_code_points",
    "malformed_buffers",
    "utf8_buffers",
    "utf16_units",
    "valid_code_points",
]
