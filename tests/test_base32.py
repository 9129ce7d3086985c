"""Tests for the unpadded, lenient Base32 codec."""

import os

import pytest

from totp_client.base32 import ALPHABET, base32_to_bytes, bytes_to_base32


@pytest.mark.parametrize("raw, encoded", [
    (b"", ""),
    (b"f", "MY"),
    (b"fo", "MZXQ"),
    (b"foo", "MZXW6"),
    (b"foob", "MZXW6YQ"),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI"),
])
def test_rfc4648_vectors_without_padding(raw, encoded):
    assert bytes_to_base32(raw) == encoded
    assert base32_to_bytes(encoded) == raw


def test_encode_rfc6238_key():
    assert bytes_to_base32(b"12345678901234567890") == "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_encode_known_secret():
    assert bytes_to_base32(b"Hello!\xde\xad\xbe\xef") == "JBSWY3DPEHPK3PXP"


def test_encode_accepts_bytearray():
    assert bytes_to_base32(bytearray(b"Hello")) == "JBSWY3DP"


def test_round_trip_lengths_0_to_64():
    for length in range(65):
        data = os.urandom(length)
        assert base32_to_bytes(bytes_to_base32(data)) == data


def test_round_trip_extreme_bytes():
    for data in (b"\x00" * 20, b"\xff" * 20, bytes(range(256))):
        assert base32_to_bytes(bytes_to_base32(data)) == data


def test_encoded_output_uses_alphabet_only():
    encoded = bytes_to_base32(os.urandom(33))
    assert "=" not in encoded
    assert set(encoded) <= set(ALPHABET)


def test_decode_is_case_insensitive():
    assert base32_to_bytes("mzxw6ytboi") == b"foobar"


def test_decode_skips_whitespace_and_separators():
    assert base32_to_bytes(" MZXW 6YTB\tOI\n") == b"foobar"
    assert base32_to_bytes("mzxw-6ytb-oi") == b"foobar"


def test_decode_skips_padding_characters():
    assert base32_to_bytes("MZXW6YTBOI======") == b"foobar"


def test_decode_drops_incomplete_trailing_bits():
    # 5 bits cannot make a byte
    assert base32_to_bytes("M") == b""
    # 10 bits -> one byte, two bits discarded
    assert base32_to_bytes("MY") == b"f"


def test_decode_of_nothing_valid_is_empty():
    assert base32_to_bytes("") == b""
    assert base32_to_bytes("!!!! 0189") == b""


def test_reverse_round_trip_not_guaranteed():
    # 'Z' sets pad bits that encoding never produces
    assert base32_to_bytes("MZ") == b"f"
    assert bytes_to_base32(base32_to_bytes("MZ")) == "MY"
