"""Tests for the package surface: exports, version, constants."""

from __future__ import annotations

import utf8engine
from utf8engine import constants


class TestPublicApi:
    """Top-level re-exports."""

    def test_all_names_resolve(self) -> None:
        for name in utf8engine.__all__:
            assert hasattr(utf8engine, name), name

    def test_checked_api_exported(self) -> None:
        for name in (
            "is_valid",
            "find_first_invalid",
            "starts_with_bom",
            "append",
            "decode_next",
            "decode_prior",
            "next_code_point",
            "peek_next",
            "prior",
            "replace_invalid",
            "advance",
            "distance",
            "utf16_to_utf8",
            "utf8_to_utf16",
            "utf32_to_utf8",
            "utf8_to_utf32",
            "Utf8Iterator",
        ):
            assert name in utf8engine.__all__

    def test_unchecked_api(self) -> None:
        from utf8engine import unchecked

        assert set(unchecked.__all__) == {
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
        }

    def test_version_string(self) -> None:
        assert isinstance(utf8engine.__version__, str)
        assert utf8engine.__version__


class TestConstants:
    """Surrogate arithmetic constants."""

    def test_lead_offset(self) -> None:
        assert constants.LEAD_OFFSET == 0xD7C0

    def test_surrogate_offset_recovers_code_point(self) -> None:
        lead, trail = 0xD83D, 0xDE00
        assert (lead << 10) + trail + constants.SURROGATE_OFFSET == 0x1F600

    def test_bom(self) -> None:
        assert constants.BOM == "\ufeff".encode()

    def test_all_names_resolve(self) -> None:
        for name in constants.__all__:
            assert hasattr(constants, name), name
