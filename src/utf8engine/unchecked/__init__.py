"""Non-validating UTF-8 engine.

Mirrors the checked engine for input already known to be well-formed.
Nothing here raises a Utf8EngineError; malformed input is a precondition
violation and produces unspecified results.

Python 3.13+.
"""

from .encoder import append, encode
from .iterator import UncheckedIterator
from .navigation import advance, distance, next_code_point, peek_next, prior
from .transcode import utf8_to_utf16, utf8_to_utf32, utf16_to_utf8, utf32_to_utf8

__all__ = [
    "UncheckedIterator",
    "advance",
    "append",
    "distance",
    "encode",
    "next_code_point",
    "peek_next",
    "prior",
    "utf8_to_utf16",
    "utf8_to_utf32",
    "utf16_to_utf8",
    "utf32_to_utf8",
]
