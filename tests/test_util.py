"""Test for pysrp.util."""
import pytest

from pysrp import util


def test_long_to_bytes():
    """Test the minimal big-endian serialization."""
    assert util.long_to_bytes(0) == b""
    assert util.long_to_bytes(1) == b"\x01"
    assert util.long_to_bytes(255) == b"\xff"
    assert util.long_to_bytes(256) == b"\x01\x00"
    assert util.long_to_bytes(0x0102030405) == b"\x01\x02\x03\x04\x05"

    with pytest.raises(ValueError):
        util.long_to_bytes(-1)


def test_bytes_to_long():
    """Test bytes are read as unsigned big-endian."""
    assert util.bytes_to_long(b"") == 0
    assert util.bytes_to_long(b"\x00\x00\x01\x00") == 256
    assert util.bytes_to_long(b"\xff") == 255


def test_to_bytes():
    """Test text is UTF-8 encoded and bytes pass through."""
    assert util.to_bytes("alice") == b"alice"
    assert util.to_bytes("zoë") == b"zo\xc3\xab"
    assert util.to_bytes(b"\x00\x01") == b"\x00\x01"
    assert util.to_bytes(bytearray(b"ab")) == b"ab"


def test_to_long():
    """Test ints pass through and bytes are converted."""
    assert util.to_long(12345) == 12345
    assert util.to_long(b"\x30\x39") == 12345


def test_minimal_hex():
    """Test upper case hex without leading zero bytes."""
    assert util.minimal_hex(b"\x00\x0a\xbc") == "0ABC"
    assert util.minimal_hex(b"\xbe\xb2") == "BEB2"
    assert util.minimal_hex(b"\x00\x00") == ""


def test_random_bytes():
    """Test the OS random source returns the requested length."""
    assert len(util.random_bytes(16)) == 16
    assert util.random_bytes(32) != util.random_bytes(32)
