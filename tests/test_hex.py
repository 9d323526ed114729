"""Tests for the hex lookup table."""

from fnvhex._hex import HEX_TABLE, hex_byte


def test_table_size():
    assert len(HEX_TABLE) == 256


def test_zero_padded():
    assert hex_byte(0) == "00"
    assert hex_byte(5) == "05"
    assert hex_byte(15) == "0f"


def test_lowercase():
    assert hex_byte(0xAB) == "ab"
    assert hex_byte(255) == "ff"


def test_matches_format():
    for b in range(256):
        assert hex_byte(b) == format(b, "02x")


def test_table_is_immutable():
    assert isinstance(HEX_TABLE, tuple)
