"""Core utilities shared by the checked and unchecked engines.

This package provides the foundational classification rules and buffer
protocols that both engines depend on. By isolating them here, we maintain
a clean dependency graph:

    core <- checked
    core <- unchecked

Exports:
    CodeUnitSource, CodeUnitSink: Buffer capability protocols
    mask8, mask16, is_trail, sequence_length, ...: Classification rules

Python 3.13+.
"""

from .classify import (
    encoded_length,
    is_code_point_valid,
    is_lead_surrogate,
    is_overlong_sequence,
    is_surrogate,
    is_trail,
    is_trail_surrogate,
    mask8,
    mask16,
    sequence_length,
)
from .protocols import CodeUnitSink, CodeUnitSource

__all__ = [
    "CodeUnitSink",
    "CodeUnitSource",
    "encoded_length",
    "is_code_point_valid",
    "is_lead_surrogate",
    "is_overlong_sequence",
    "is_surrogate",
    "is_trail",
    "is_trail_surrogate",
    "mask8",
    "mask16",
    "sequence_length",
]
