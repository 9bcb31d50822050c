"""Protocols for utf8engine buffers.

Defines the capability a buffer must provide to be decoded, encoded into,
or traversed. The engines never rely on a concrete container type: bytes,
bytearray, memoryview, array.array, and list[int] all qualify.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["CodeUnitSink", "CodeUnitSource"]


@runtime_checkable
class CodeUnitSource(Protocol):
    """Read-only, random-access sequence of integer code units.

    Thread Safety:
        The engines only read from sources. Concurrent readers are safe as
        long as nobody mutates the source during a call.
    """

    def __getitem__(self, index: int, /) -> int:
        """Return the element at index (an int; masked by the caller)."""
        ...

    def __len__(self) -> int:
        """Return the number of elements."""
        ...


@runtime_checkable
class CodeUnitSink(Protocol):
    """Append-only destination for encoded code units.

    Satisfied by bytearray (for UTF-8 output) and list[int]
    (for UTF-16 and UTF-32 output).
    """

    def append(self, value: int, /) -> None:
        """Append one code unit."""
        ...
