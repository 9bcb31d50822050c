"""Tests for the non-validating engine.

On well-formed input every unchecked operation must agree with its checked
counterpart. Malformed input is outside the contract; only progress (no
hang) is asserted for it.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from tests.strategies import byte_soups, utf8_buffers, utf16_units, valid_code_points
from utf8engine import checked, unchecked
from utf8engine.unchecked import UncheckedIterator


class TestAgreementWithChecked:
    """PROPERTY: Unchecked == checked on well-formed input."""

    @given(valid_code_points())
    def test_encode(self, cp: int) -> None:
        assert unchecked.encode(cp) == checked.encode(cp)

    @given(valid_code_points())
    def test_append_to_sink(self, cp: int) -> None:
        out: list[int] = [0]
        unchecked.append(cp, out)
        assert bytes(out[1:]) == checked.encode(cp)

    @given(utf8_buffers())
    def test_next_code_point(self, data: bytes) -> None:
        pos = 0
        while pos < len(data):
            expected = checked.next_code_point(data, pos)
            assert unchecked.next_code_point(data, pos) == expected
            assert unchecked.peek_next(data, pos) == expected[0]
            pos = expected[1]

    @given(utf8_buffers())
    def test_prior(self, data: bytes) -> None:
        pos = len(data)
        while pos > 0:
            expected = checked.prior(data, pos)
            assert unchecked.prior(data, pos) == expected
            pos = expected[1]

    @given(utf8_buffers(), st.data())
    def test_advance_and_distance(self, data: bytes, draw: st.DataObject) -> None:
        count = checked.distance(data)
        n = draw.draw(st.integers(min_value=0, max_value=count))
        event(f"count={min(count, 10)}")
        assert unchecked.distance(data) == count
        assert unchecked.advance(data, 0, n) == checked.advance(data, 0, n)

    @given(utf8_buffers())
    def test_transcoders(self, data: bytes) -> None:
        assert unchecked.utf8_to_utf16(data) == checked.utf8_to_utf16(data)
        assert unchecked.utf8_to_utf32(data) == checked.utf8_to_utf32(data)
        units = checked.utf8_to_utf16(data)
        assert unchecked.utf16_to_utf8(units) == data
        assert unchecked.utf32_to_utf8(checked.utf8_to_utf32(data)) == data

    @given(utf16_units())
    def test_utf16_to_utf8(self, units: list[int]) -> None:
        assert unchecked.utf16_to_utf8(units) == checked.utf16_to_utf8(units)

    @given(utf8_buffers())
    def test_iterator(self, data: bytes) -> None:
        assert list(UncheckedIterator(data)) == list(checked.Utf8Iterator(data, 0))
        assert list(reversed(UncheckedIterator(data, len(data)))) == list(
            reversed(checked.Utf8Iterator(data, len(data)))
        )


class TestUncheckedBehaviour:
    """Trust-the-input semantics."""

    def test_no_pair_verification(self) -> None:
        """A lead surrogate is combined with whatever unit follows it."""
        # (0xD800 << 10) + 0x41 + SURROGATE_OFFSET == 0x2441
        assert unchecked.utf16_to_utf8([0xD800, 0x0041]) == b"\xe2\x91\x81"

    def test_encodes_surrogate_without_error(self) -> None:
        assert unchecked.encode(0xD800) == b"\xed\xa0\x80"

    def test_advance_negative_is_noop(self) -> None:
        assert unchecked.advance(b"abc", 1, -2) == 1

    def test_prior_stops_at_zero(self) -> None:
        cp, pos = unchecked.prior(b"\x80\x80", 2)
        assert pos == 0
        assert isinstance(cp, int)

    @given(byte_soups())
    def test_forward_always_progresses(self, data: bytes) -> None:
        """INVARIANT: Each forward step moves by at least one byte."""
        pos = 0
        steps = 0
        while pos < len(data):
            try:
                _, new_pos = unchecked.next_code_point(data, pos)
            except IndexError:
                event("outcome=truncated")
                return
            assert new_pos > pos
            pos = new_pos
            steps += 1
        assert steps <= len(data)


class TestUncheckedIterator:
    """Value semantics of UncheckedIterator."""

    def test_steps(self) -> None:
        data = "añ€".encode()
        it = UncheckedIterator(data)
        assert it.code_point == 0x61
        nxt = it.advance()
        assert nxt.pos == 1
        assert nxt.code_point == 0xF1
        assert nxt.advance().retreat() == nxt
        assert it.pos == 0
        assert it.buffer is data

    def test_equality_never_raises(self) -> None:
        a = b"abc"
        assert UncheckedIterator(a, 1) == UncheckedIterator(a, 1)
        assert UncheckedIterator(a, 1) != UncheckedIterator(bytearray(a), 1)
        assert hash(UncheckedIterator(a, 2)) == hash(UncheckedIterator(a, 2))

    def test_repr(self) -> None:
        assert repr(UncheckedIterator(b"x", 0)) == "UncheckedIterator(pos=0)"
