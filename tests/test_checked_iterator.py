"""Tests for the checked bidirectional Utf8Iterator."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.strategies import utf8_buffers
from utf8engine import (
    InvalidUtf8Error,
    IteratorMismatchError,
    IteratorRangeError,
    IteratorUsageError,
    NotEnoughRoomError,
    Utf8Iterator,
)

DATA = "añ€😀".encode()  # 1 + 2 + 3 + 4 bytes


class TestConstruction:
    """Range validation at construction."""

    def test_defaults(self) -> None:
        it = Utf8Iterator(DATA, 0)
        assert it.pos == 0
        assert it.range_start == 0
        assert it.range_end == len(DATA)
        assert it.buffer is DATA
        assert it.at_start
        assert not it.at_end

    @pytest.mark.parametrize(
        ("pos", "start", "end"),
        [(-1, 0, None), (11, 0, None), (0, 1, None), (5, 0, 4), (0, 0, 11), (2, 3, 1)],
    )
    def test_out_of_range(self, pos: int, start: int, end: int | None) -> None:
        with pytest.raises(IteratorRangeError):
            Utf8Iterator(DATA, pos, start, end)

    def test_range_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid utf-8 iterator position"):
            Utf8Iterator(DATA, 99)

    def test_end_position_allowed(self) -> None:
        assert Utf8Iterator(DATA, len(DATA)).at_end


class TestTraversal:
    """advance(), retreat(), code_point."""

    def test_forward(self) -> None:
        it = Utf8Iterator(DATA, 0)
        seen = []
        while not it.at_end:
            seen.append(it.code_point)
            it = it.advance()
        assert seen == [0x61, 0xF1, 0x20AC, 0x1F600]
        assert it.pos == len(DATA)

    def test_backward(self) -> None:
        it = Utf8Iterator(DATA, len(DATA))
        seen = []
        while not it.at_start:
            it = it.retreat()
            seen.append(it.code_point)
        assert seen == [0x1F600, 0x20AC, 0xF1, 0x61]

    def test_immutable_steps(self) -> None:
        it = Utf8Iterator(DATA, 0)
        nxt = it.advance()
        assert it.pos == 0
        assert nxt.pos == 1

    def test_advance_at_end_raises(self) -> None:
        with pytest.raises(NotEnoughRoomError):
            Utf8Iterator(DATA, len(DATA)).advance()

    def test_code_point_at_end_raises(self) -> None:
        with pytest.raises(NotEnoughRoomError):
            _ = Utf8Iterator(DATA, len(DATA)).code_point

    def test_retreat_at_start_raises(self) -> None:
        with pytest.raises(NotEnoughRoomError):
            Utf8Iterator(DATA, 0).retreat()

    def test_retreat_without_lead_in_range(self) -> None:
        # Range starts on the second byte of the euro sign.
        it = Utf8Iterator(DATA, 6, 4, len(DATA))
        with pytest.raises(InvalidUtf8Error):
            it.retreat()

    def test_advance_over_malformed_raises(self) -> None:
        it = Utf8Iterator(b"a\xffb", 1)
        with pytest.raises(InvalidUtf8Error):
            it.advance()
        assert it.pos == 1

    def test_range_end_bounds_decoding(self) -> None:
        it = Utf8Iterator(DATA, 3, 0, 4)
        with pytest.raises(NotEnoughRoomError):
            it.advance()


class TestIterationProtocol:
    """iter() and reversed()."""

    def test_iter(self) -> None:
        assert list(Utf8Iterator(DATA, 0)) == [0x61, 0xF1, 0x20AC, 0x1F600]
        assert list(Utf8Iterator(DATA, 3)) == [0x20AC, 0x1F600]

    def test_reversed(self) -> None:
        assert list(reversed(Utf8Iterator(DATA, len(DATA)))) == [0x1F600, 0x20AC, 0xF1, 0x61]
        assert list(reversed(Utf8Iterator(DATA, 3))) == [0xF1, 0x61]

    @given(utf8_buffers())
    def test_iter_matches_str(self, data: bytes) -> None:
        """PROPERTY: Forward iteration yields the ord() of each character."""
        assert list(Utf8Iterator(data, 0)) == [ord(c) for c in data.decode("utf-8")]

    @given(utf8_buffers())
    def test_reversed_matches_str(self, data: bytes) -> None:
        """PROPERTY: Backward iteration from the end yields the reversed characters."""
        expected = [ord(c) for c in reversed(data.decode("utf-8"))]
        assert list(reversed(Utf8Iterator(data, len(data)))) == expected


class TestEquality:
    """Comparison within and across ranges."""

    def test_same_position(self) -> None:
        assert Utf8Iterator(DATA, 0).advance() == Utf8Iterator(DATA, 1)
        assert Utf8Iterator(DATA, 0) != Utf8Iterator(DATA, 1)

    def test_ordering(self) -> None:
        assert Utf8Iterator(DATA, 0) < Utf8Iterator(DATA, 3)

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(Utf8Iterator(DATA, 3)) == hash(Utf8Iterator(DATA, 1).advance())

    def test_different_range_raises(self) -> None:
        with pytest.raises(IteratorMismatchError):
            _ = Utf8Iterator(DATA, 1, 0, 10) == Utf8Iterator(DATA, 1, 1, 10)

    def test_different_buffer_raises(self) -> None:
        with pytest.raises(IteratorUsageError):
            _ = Utf8Iterator(DATA, 0) == Utf8Iterator(bytearray(DATA), 0)

    def test_other_types_not_equal(self) -> None:
        assert Utf8Iterator(DATA, 0) != 0

    def test_repr(self) -> None:
        assert repr(Utf8Iterator(DATA, 1)) == "Utf8Iterator(pos=1, range=[0, 10))"
