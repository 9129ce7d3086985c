"""Shared-secret generation from the operating system CSPRNG."""

import secrets

from totp_client.base32 import bytes_to_base32
from totp_client.config import SECRET_BYTES
from totp_client.validation import require_positive_int


def generate_secret_bytes(length: int = SECRET_BYTES) -> bytes:
    """
    Return ``length`` cryptographically secure random bytes.

    The length is validated before any entropy is read.

    Raises:
        InvalidParameterError: if length is not a positive integer
    """
    require_positive_int("length", length)
    return secrets.token_bytes(length)


def generate_secret(length: int = SECRET_BYTES) -> str:
    """
    Generate a new Base32 secret (no padding).

    With the default 20 bytes the result is always 32 characters.
    """
    return bytes_to_base32(generate_secret_bytes(length))
