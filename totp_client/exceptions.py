class TOTPError(Exception):
    """Base error for totp_client."""
    pass

class InvalidParameterError(TOTPError, ValueError):
    """A length, period, digits, window or timestamp argument is out of range."""
    pass

class KeyedHashError(TOTPError):
    """The keyed-hash primitive could not produce a digest.

    ``kind`` is a short machine-readable tag: ``"unsupported_algorithm"`` or
    ``"invalid_key"``.
    """

    def __init__(self, message: str, kind: str = "hash_failure"):
        super().__init__(message)
        self.kind = kind
