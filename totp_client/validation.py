"""Precondition checks run before any entropy is consumed or any hash computed."""

import math

from totp_client.exceptions import InvalidParameterError


def require_positive_int(name: str, value) -> int:
    """
    Return ``value`` if it is an int greater than zero.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        InvalidParameterError: for anything else
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")
    return value


def require_non_negative_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidParameterError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def require_timestamp(name: str, value) -> float:
    """Accept finite int or float Unix timestamps that are not negative."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    if value < 0:
        raise InvalidParameterError(f"{name} must not be negative, got {value!r}")
    return value
