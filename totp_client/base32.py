"""
base32.py — RFC 4648 Base32 codec (alphabet A-Z2-7, no '=' padding).

Encoding follows RFC 4648 exactly, minus the trailing '=' characters that
authenticator apps neither need nor expect.

Decoding is deliberately lenient and is NOT strict RFC 4648:
- case-insensitive
- whitespace and any other character outside the alphabet (including '=')
  are skipped instead of rejected, so secrets retyped by hand with spaces,
  dashes or lowercase letters still decode
- trailing bits that do not fill a whole byte are dropped

Round-trip law: base32_to_bytes(bytes_to_base32(b)) == b for every b.
The reverse does not hold in general because encoding re-derives the pad
bits from the byte count.
"""

import base64

from totp_client.config import BASE32_ALPHABET

ALPHABET = BASE32_ALPHABET
_LOOKUP = {char: index for index, char in enumerate(ALPHABET)}


def bytes_to_base32(data: bytes) -> str:
    """
    Encode raw bytes to an unpadded Base32 string.

    The bit stream (MSB first) is right-padded with zero bits up to a
    multiple of 5; each 5-bit group becomes one alphabet character.

    Arguments:
        data: bytes / bytearray / memoryview

    Returns:
        str: upper-case Base32 without '=' (empty input -> "")
    """
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=")


def base32_to_bytes(text: str) -> bytes:
    """
    Decode a Base32 string to bytes, skipping anything not in the alphabet.

    Arguments:
        text: Base32 secret, possibly lower-case or grouped with spaces

    Returns:
        bytes: floor(valid_chars * 5 / 8) bytes
    """
    out = bytearray()
    buffer = 0
    bits = 0
    for char in text.upper():
        value = _LOOKUP.get(char)
        if value is None:
            continue
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            # keep only the bits not yet emitted
            buffer &= (1 << bits) - 1
    return bytes(out)
