"""Sanitizer configuration.

Bundles the replacement marker and the input size ceiling for
replace_invalid() into one frozen, validated object.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from utf8engine.constants import REPLACEMENT_CHARACTER
from utf8engine.core.classify import is_code_point_valid
from utf8engine.diagnostics import (
    ErrorTemplate,
    InputTooLargeError,
    InvalidCodePointError,
)

__all__ = ["SanitizeConfig"]


@dataclass(frozen=True, slots=True)
class SanitizeConfig:
    """Immutable configuration for replace_invalid().

    Attributes:
        replacement: Code point emitted once per malformed unit
            (default: U+FFFD REPLACEMENT CHARACTER)
        max_input_size: Largest accepted input in bytes, or None for no
            limit (default: None)

    Example:
        >>> from utf8engine import replace_invalid
        >>> config = SanitizeConfig(replacement=ord("?"))
        >>> replace_invalid(b"He\\xffllo", config=config)
        b'He?llo'
    """

    replacement: int = REPLACEMENT_CHARACTER
    max_input_size: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            InvalidCodePointError: If replacement is not a Unicode scalar
                value
            ValueError: If max_input_size is not positive
        """
        if not is_code_point_valid(self.replacement):
            raise InvalidCodePointError(ErrorTemplate.invalid_code_point(self.replacement))
        if self.max_input_size is not None and self.max_input_size <= 0:
            msg = "max_input_size must be positive"
            raise ValueError(msg)

    def check_size(self, size: int) -> None:
        """Reject inputs above max_input_size.

        Raises:
            InputTooLargeError: If size exceeds the configured limit
        """
        if self.max_input_size is not None and size > self.max_input_size:
            raise InputTooLargeError(ErrorTemplate.input_too_large(size, self.max_input_size))
