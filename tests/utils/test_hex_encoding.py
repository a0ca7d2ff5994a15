"""
Tests for the hex encoding helpers.
"""

import pytest

from bundlecmd.utils.hex_encoding import (
    ascii_to_hex,
    decimal_to_hex,
    decimal_to_hex_reversed,
    hex_to_bytes,
    pad_hex_pair,
    remove_quotes,
)


class TestRemoveQuotes:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("'general'", "general"),
            ('"key name"', "key name"),
            ("plain", "plain"),
            ("'mismatched\"", "'mismatched\""),
            ("'", "'"),
            ("''", ""),
            ("'a' 'b'", "a' 'b"),
        ],
    )
    def test_remove_quotes(self, raw, expected):
        assert remove_quotes(raw) == expected


class TestConversions:
    def test_ascii_to_hex(self):
        assert ascii_to_hex("AB") == "4142"
        assert ascii_to_hex("") == ""

    @pytest.mark.parametrize(
        "decimal, expected",
        [("0", "00"), ("10", "0A"), ("255", "FF"), ("256", "0100"), ("1000", "03E8")],
    )
    def test_decimal_to_hex(self, decimal, expected):
        assert decimal_to_hex(decimal) == expected

    def test_decimal_to_hex_reversed(self):
        assert decimal_to_hex_reversed("1000") == "E803"
        assert decimal_to_hex_reversed("65536") == "000001"

    def test_decimal_to_hex_rejects_garbage(self):
        with pytest.raises(ValueError):
            decimal_to_hex("12ab")
        with pytest.raises(ValueError):
            decimal_to_hex("-5")

    def test_pad_hex_pair_pads_shorter_search(self):
        assert pad_hex_pair("4142", "4142434445") == ("4142000000", "4142434445")

    def test_pad_hex_pair_pads_shorter_replacement(self):
        assert pad_hex_pair("414243", "41") == ("414243", "410000")

    def test_hex_to_bytes(self):
        assert hex_to_bytes("DE AD be ef") == b"\xde\xad\xbe\xef"
        with pytest.raises(ValueError):
            hex_to_bytes("ABC")
        with pytest.raises(ValueError):
            hex_to_bytes("ZZ")
