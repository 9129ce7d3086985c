"""
totp_client package
===================

Client-side TOTP (RFC 6238) toolkit for authenticator enrollment:
secret generation, Base32 codec, otpauth:// URIs and code generation.

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- TOTP (Time-based One-Time Password):
  code = Truncate(HMAC-SHA1(key=secret, msg=counter)) mod 10^digits
  counter = floor(unix_time / period), period = 30s by default.

- Dynamic Truncation (RFC 4226 §5.3):
  take 4 bytes of the HMAC at offset (last byte & 0x0F), clear the top bit.

──────────────────────────────────────────────
Layers (each only uses the ones above it)
──────────────────────────────────────────────
1. secret_source  -> CSPRNG bytes / new Base32 secrets
2. base32         -> RFC 4648 alphabet, no padding, lenient decode
3. engine         -> counter, keyed hash, truncation, code rendering
4. provisioning   -> otpauth:// URI and grouped secret for display

The caller owns persistence of the secret; this package stores nothing.

──────────────────────────────────────────────
Quick example
──────────────────────────────────────────────
>>> from totp_client import generate_secret, build_uri, generate_code
>>> secret = generate_secret()
>>> uri = build_uri(secret=secret, issuer="KinCode", account="alice")
>>> code = generate_code(secret)
"""

from totp_client.base32 import ALPHABET, base32_to_bytes, bytes_to_base32
from totp_client.engine import (
    counter_message,
    dynamic_truncate,
    format_code,
    generate_code,
    generate_code_async,
    get_remaining_seconds,
    time_counter,
    verify_code,
)
from totp_client.exceptions import InvalidParameterError, KeyedHashError, TOTPError
from totp_client.hashing import HASH_ALGORITHMS, HashResult, keyed_hash
from totp_client.provisioning import ProvisioningRecord, build_uri, format_secret
from totp_client.secret_source import generate_secret, generate_secret_bytes

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "HASH_ALGORITHMS",
    "HashResult",
    "InvalidParameterError",
    "KeyedHashError",
    "ProvisioningRecord",
    "TOTPError",
    "base32_to_bytes",
    "build_uri",
    "bytes_to_base32",
    "counter_message",
    "dynamic_truncate",
    "format_code",
    "format_secret",
    "generate_code",
    "generate_code_async",
    "generate_secret",
    "generate_secret_bytes",
    "get_remaining_seconds",
    "keyed_hash",
    "time_counter",
    "verify_code",
]
