"""Tests for byte classification and sequence-length resolution."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from tests.strategies import invalid_code_points, valid_code_points
from utf8engine.core import (
    CodeUnitSink,
    CodeUnitSource,
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


class TestMasking:
    """mask8 / mask16 truncation."""

    def test_mask8_negative_signed_char(self) -> None:
        assert mask8(-1) == 0xFF
        assert mask8(-30) == 0xE2

    def test_mask8_oversized(self) -> None:
        assert mask8(0x1E2) == 0xE2

    def test_mask16(self) -> None:
        assert mask16(0x1D83D) == 0xD83D
        assert mask16(-1) == 0xFFFF

    @given(st.integers())
    def test_mask8_range(self, value: int) -> None:
        """PROPERTY: mask8 always lands in 0..255."""
        assert 0 <= mask8(value) <= 0xFF


class TestRoles:
    """Continuation byte and surrogate tests."""

    @pytest.mark.parametrize("octet", [0x80, 0x9F, 0xBF])
    def test_trail_bytes(self, octet: int) -> None:
        assert is_trail(octet)

    @pytest.mark.parametrize("octet", [0x00, 0x7F, 0xC0, 0xE2, 0xFF])
    def test_non_trail_bytes(self, octet: int) -> None:
        assert not is_trail(octet)

    def test_is_trail_masks_signed_values(self) -> None:
        assert is_trail(-128)  # 0x80 as signed char

    def test_surrogate_ranges(self) -> None:
        assert is_lead_surrogate(0xD800)
        assert is_lead_surrogate(0xDBFF)
        assert not is_lead_surrogate(0xDC00)
        assert is_trail_surrogate(0xDC00)
        assert is_trail_surrogate(0xDFFF)
        assert not is_trail_surrogate(0xDBFF)
        assert is_surrogate(0xD800)
        assert is_surrogate(0xDFFF)
        assert not is_surrogate(0xD7FF)
        assert not is_surrogate(0xE000)


class TestCodePointValidity:
    """is_code_point_valid boundaries."""

    @pytest.mark.parametrize("cp", [0, 0x7F, 0xD7FF, 0xE000, 0xFFFD, 0x10FFFF])
    def test_valid_boundaries(self, cp: int) -> None:
        assert is_code_point_valid(cp)

    @pytest.mark.parametrize("cp", [-1, 0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000])
    def test_invalid_boundaries(self, cp: int) -> None:
        assert not is_code_point_valid(cp)

    @given(valid_code_points())
    def test_generated_valid(self, cp: int) -> None:
        """PROPERTY: Every scalar value is valid."""
        assert is_code_point_valid(cp)

    @given(invalid_code_points())
    def test_generated_invalid(self, cp: int) -> None:
        """PROPERTY: Surrogates, negatives and values above U+10FFFF are invalid."""
        assert not is_code_point_valid(cp)


class TestSequenceLength:
    """Lead byte -> declared length."""

    @pytest.mark.parametrize(
        ("lead", "expected"),
        [
            (0x00, 1),
            (0x7F, 1),
            (0x80, 0),
            (0xBF, 0),
            (0xC0, 2),
            (0xDF, 2),
            (0xE0, 3),
            (0xEF, 3),
            (0xF0, 4),
            (0xF7, 4),
            (0xF8, 0),
            (0xFF, 0),
        ],
    )
    def test_lead_table(self, lead: int, expected: int) -> None:
        assert sequence_length(lead) == expected

    @given(st.integers(min_value=0, max_value=0xFF))
    def test_length_matches_python_codec(self, lead: int) -> None:
        """PROPERTY: Declared length is 0 exactly for trail bytes and F8-FF."""
        length = sequence_length(lead)
        event(f"length={length}")
        assert length in (0, 1, 2, 3, 4)
        assert (length == 0) == (is_trail(lead) or lead >= 0xF8)


class TestOverlong:
    """Minimal-form checks."""

    @given(valid_code_points())
    def test_minimal_length_is_not_overlong(self, cp: int) -> None:
        """INVARIANT: The encoded length of a code point is never overlong."""
        assert not is_overlong_sequence(cp, encoded_length(cp))

    def test_overlong_examples(self) -> None:
        assert is_overlong_sequence(0x00, 2)
        assert is_overlong_sequence(0x7F, 3)
        assert is_overlong_sequence(0x7FF, 4)
        assert not is_overlong_sequence(0x10000, 4)

    @given(valid_code_points())
    def test_encoded_length_matches_codec(self, cp: int) -> None:
        assert encoded_length(cp) == len(chr(cp).encode("utf-8"))


class TestProtocols:
    """Buffer capability protocols accept the documented containers."""

    @pytest.mark.parametrize(
        "buffer",
        [b"ab", bytearray(b"ab"), memoryview(b"ab"), [0x61, 0x62]],
    )
    def test_sources(self, buffer: object) -> None:
        assert isinstance(buffer, CodeUnitSource)

    def test_sinks(self) -> None:
        assert isinstance(bytearray(), CodeUnitSink)
        assert isinstance([], CodeUnitSink)
        assert not isinstance(b"", CodeUnitSink)
