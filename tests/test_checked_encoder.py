"""Tests for the validating encoder."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.strategies import invalid_code_points, valid_code_points
from utf8engine import InvalidCodePointError, append, encode
from utf8engine.diagnostics import DiagnosticCode


class TestAppend:
    """append() writes the minimal form."""

    @pytest.mark.parametrize(
        ("cp", "expected"),
        [
            (0x00, b"\x00"),
            (0x7F, b"\x7f"),
            (0x80, b"\xc2\x80"),
            (0x7FF, b"\xdf\xbf"),
            (0x800, b"\xe0\xa0\x80"),
            (0x20AC, b"\xe2\x82\xac"),
            (0xFFFF, b"\xef\xbf\xbf"),
            (0x10000, b"\xf0\x90\x80\x80"),
            (0x10FFFF, b"\xf4\x8f\xbf\xbf"),
        ],
    )
    def test_boundaries(self, cp: int, expected: bytes) -> None:
        assert append(cp) == bytearray(expected)

    def test_appends_to_existing_output(self) -> None:
        out = bytearray(b"x")
        result = append(0xE9, out)
        assert result is out
        assert out == b"x\xc3\xa9"

    def test_list_sink(self) -> None:
        out: list[int] = []
        append(0x20AC, out)
        assert out == [0xE2, 0x82, 0xAC]

    @given(valid_code_points())
    def test_matches_python_codec(self, cp: int) -> None:
        """PROPERTY: Output equals Python's strict UTF-8 encoding."""
        assert encode(cp) == chr(cp).encode("utf-8")


class TestAppendRejects:
    """Invalid code points raise before any byte is written."""

    @given(invalid_code_points())
    def test_output_untouched(self, cp: int) -> None:
        """PROPERTY: A rejected code point leaves the output unchanged."""
        out = bytearray(b"keep")
        with pytest.raises(InvalidCodePointError) as exc_info:
            append(cp, out)
        assert out == b"keep"
        assert exc_info.value.code_point == cp
        assert exc_info.value.code is DiagnosticCode.INVALID_CODE_POINT

    def test_negative_message(self) -> None:
        with pytest.raises(InvalidCodePointError, match="negative"):
            encode(-5)

    def test_surrogate_message(self) -> None:
        with pytest.raises(InvalidCodePointError, match="U\\+D800"):
            encode(0xD800)
