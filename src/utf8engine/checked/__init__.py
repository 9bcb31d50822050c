"""Validating UTF-8 engine.

Every operation here checks each byte it reads and each code point it
writes. Primitive decoding reports failures as DecodeError values;
everything built on top raises a Utf8EngineError subclass.

Modules:
    decoder: decode_next / decode_prior (value-returning)
    encoder: append / encode
    validation: is_valid / find_first_invalid / starts_with_bom
    navigation: next_code_point / peek_next / prior / advance / distance
    sanitize: replace_invalid
    iterator: Utf8Iterator
    transcode: UTF-16 / UTF-32 converters

Python 3.13+.
"""

from .decoder import DecodeError, DecodeResult, decode_next, decode_prior
from .encoder import append, encode
from .guards import is_decode_error, is_decoded
from .iterator import Utf8Iterator
from .navigation import advance, distance, next_code_point, peek_next, prior
from .sanitize import replace_invalid
from .sanitize_config import SanitizeConfig
from .transcode import utf8_to_utf16, utf8_to_utf32, utf16_to_utf8, utf32_to_utf8
from .validation import find_first_invalid, first_error, is_valid, starts_with_bom

__all__ = [
    "DecodeError",
    "DecodeResult",
    "SanitizeConfig",
    "Utf8Iterator",
    "advance",
    "append",
    "decode_next",
    "decode_prior",
    "distance",
    "encode",
    "find_first_invalid",
    "first_error",
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
