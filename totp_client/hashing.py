"""
hashing.py — the keyed-hash boundary used by the OTP engine.

``keyed_hash`` never raises for primitive failures: it returns a
``HashResult`` holding either the digest or the error. The engine decides
at this boundary whether to raise, so failures surface to the caller as a
single ``KeyedHashError`` and never from inside unrelated code.

Algorithms are looked up by the name advertised in otpauth:// URIs
("SHA1"). Only SHA-1 is registered.
"""

import hashlib
import hmac
from dataclasses import dataclass
from types import MappingProxyType

from totp_client.config import DEFAULT_ALGORITHM
from totp_client.exceptions import KeyedHashError

HASH_ALGORITHMS = MappingProxyType({
    "SHA1": hashlib.sha1,
})


@dataclass(frozen=True)
class HashResult:
    digest: bytes | None = None
    error: KeyedHashError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes:
        """Return the digest or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.digest


def normalize_algorithm(name: str) -> str:
    """'sha-1', 'Sha1' and 'SHA1' all map to 'SHA1'."""
    return name.upper().replace("-", "")


def keyed_hash(key: bytes, message: bytes, algorithm: str = DEFAULT_ALGORITHM) -> HashResult:
    """
    HMAC(key, message) with the named algorithm.

    Arguments:
        key: raw key bytes (decoded secret)
        message: data to authenticate (8-byte counter for TOTP)
        algorithm: URI algorithm name, e.g. "SHA1"

    Returns:
        HashResult: digest on success; error of kind "unsupported_algorithm"
        or "invalid_key" otherwise
    """
    factory = HASH_ALGORITHMS.get(normalize_algorithm(algorithm))
    if factory is None:
        return HashResult(error=KeyedHashError(
            f"Unsupported algorithm: {algorithm}", kind="unsupported_algorithm"))
    if not key:
        # an empty secret decodes to no key material at all
        return HashResult(error=KeyedHashError(
            "Secret decodes to an empty key", kind="invalid_key"))
    try:
        digest = hmac.new(bytes(key), message, factory).digest()
    except (TypeError, ValueError) as e:
        return HashResult(error=KeyedHashError(f"Invalid key material: {e}", kind="invalid_key"))
    return HashResult(digest=digest)
