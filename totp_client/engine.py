"""
engine.py — TOTP code derivation (RFC 6238 on top of RFC 4226 truncation).

Steps for one code:
1. counter = floor(timestamp_ms / 1000 / period)
2. key = Base32-decode(secret)
3. message = 8-byte big-endian counter (high 4 bytes zero, low 4 bytes =
   counter's low 32 bits)
4. digest = HMAC-SHA1(key, message)
5. dynamic truncation -> 31-bit integer
6. value % 10^digits, zero-padded to ``digits`` characters

Every function is stateless. The only clock read happens when a caller
omits the timestamp.
"""

import asyncio
import hmac
import math
import struct
import time

from totp_client.base32 import base32_to_bytes
from totp_client.config import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD
from totp_client.hashing import keyed_hash
from totp_client.validation import (
    require_non_negative_int,
    require_positive_int,
    require_timestamp,
)


# --- RFC helpers -----------------------------------------------------------
def now_ms() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def time_counter(timestamp_ms: float, period: int = DEFAULT_PERIOD) -> int:
    """
    Number of whole periods elapsed since the Unix epoch.

    floor(floor(ms / 1000) / period) == floor(ms / 1000 / period), so the
    integer form is used to avoid float rounding on large timestamps.

    Raises:
        InvalidParameterError: negative timestamp or non-positive period
    """
    require_timestamp("timestamp_ms", timestamp_ms)
    require_positive_int("period", period)
    return int(timestamp_ms // 1000) // period


def counter_message(counter: int) -> bytes:
    """
    Pack the counter the way RFC 4226 feeds it to HMAC.

    Example: counter_message(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'
    """
    return struct.pack(">II", 0, counter & 0xFFFFFFFF)


def dynamic_truncate(digest: bytes) -> int:
    """
    RFC 4226 §5.3 dynamic truncation.

    - offset = last byte & 0x0F
    - read 4 bytes from offset big-endian, clearing the top bit of the first

    Arguments:
        digest: HMAC digest (SHA-1 -> 20 bytes, so offset <= 15 stays in range)
    """
    offset = digest[-1] & 0x0F
    return (
        ((digest[offset] & 0x7F) << 24)
        | ((digest[offset + 1] & 0xFF) << 16)
        | ((digest[offset + 2] & 0xFF) << 8)
        | (digest[offset + 3] & 0xFF)
    )


def format_code(value: int, digits: int = DEFAULT_DIGITS) -> str:
    """value mod 10^digits, left-padded with zeros to exactly ``digits`` chars."""
    return str(value % (10 ** digits)).zfill(digits)


def _prepare(secret: str, timestamp_ms, period: int, digits: int) -> tuple[bytes, bytes]:
    require_positive_int("digits", digits)
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    counter = time_counter(timestamp_ms, period)
    return base32_to_bytes(secret), counter_message(counter)


# --- TOTP --------------------------------------------------------------------
def generate_code(
    secret: str,
    timestamp_ms: float = None,
    period: int = DEFAULT_PERIOD,
    digits: int = DEFAULT_DIGITS,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Generate the TOTP code for ``secret`` at ``timestamp_ms``.

    Arguments:
        secret: Base32 secret (decoded leniently, see base32.py)
        timestamp_ms: Unix time in milliseconds (None -> now)
        period: time step in seconds
        digits: code length
        algorithm: keyed-hash algorithm name

    Returns:
        str: zero-padded decimal code of length ``digits``

    Raises:
        InvalidParameterError: bad period / digits / timestamp
        KeyedHashError: the keyed hash failed; never retried
    """
    key, message = _prepare(secret, timestamp_ms, period, digits)
    digest = keyed_hash(key, message, algorithm).unwrap()
    return format_code(dynamic_truncate(digest), digits)


async def generate_code_async(
    secret: str,
    timestamp_ms: float = None,
    period: int = DEFAULT_PERIOD,
    digits: int = DEFAULT_DIGITS,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Same contract as ``generate_code``; the keyed hash runs in a worker
    thread and is the only await point.

    The timestamp is captured before suspending, so the code always belongs
    to the period in effect when the call was made.
    """
    key, message = _prepare(secret, timestamp_ms, period, digits)
    result = await asyncio.to_thread(keyed_hash, key, message, algorithm)
    return format_code(dynamic_truncate(result.unwrap()), digits)


def get_remaining_seconds(period: int = DEFAULT_PERIOD, now: float = None) -> int:
    """
    Seconds until the current code expires, in [1, period].

    For UI countdowns only; not part of the code derivation.

    Arguments:
        period: time step in seconds
        now: Unix time in seconds (None -> time.time())
    """
    require_positive_int("period", period)
    if now is None:
        now = time.time()
    require_timestamp("now", now)
    return period - (math.floor(now) % period)


def verify_code(
    secret: str,
    code: str,
    timestamp_ms: float = None,
    period: int = DEFAULT_PERIOD,
    digits: int = DEFAULT_DIGITS,
    window: int = 1,
    algorithm: str = DEFAULT_ALGORITHM,
) -> bool:
    """
    Check a user-entered code locally against the secret.

    Counters from ``counter - window`` to ``counter + window`` are accepted
    (negative counters skipped). Comparison uses hmac.compare_digest.
    Nothing is recorded, so the same code verifies again within its window.

    Returns:
        bool: True if ``code`` matches one of the candidate counters
    """
    require_non_negative_int("window", window)
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    key, _ = _prepare(secret, timestamp_ms, period, digits)

    candidate = str(code).replace(" ", "")
    if len(candidate) != digits or not candidate.isascii() or not candidate.isdigit():
        return False

    counter = time_counter(timestamp_ms, period)
    for step in range(counter - window, counter + window + 1):
        if step < 0:
            continue
        digest = keyed_hash(key, counter_message(step), algorithm).unwrap()
        expected = format_code(dynamic_truncate(digest), digits)
        if hmac.compare_digest(expected, candidate):
            return True
    return False
