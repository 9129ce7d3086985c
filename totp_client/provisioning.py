"""
provisioning.py — otpauth:// URIs and display helpers for enrollment.

URI layout (Key Uri Format used by Google Authenticator and compatible apps):

    otpauth://totp/<issuer>:<account>?secret=...&issuer=...&algorithm=...&digits=...&period=...

The label parts are percent-encoded like JavaScript's encodeURIComponent,
while the query string uses form encoding (spaces become '+'). Apps accept
both; the mismatch is the usual convention, not a bug.
"""

from dataclasses import dataclass
from urllib.parse import quote, urlencode

from totp_client.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    URI_SCHEME,
    URI_TYPE,
)
from totp_client.validation import require_positive_int

# encodeURIComponent leaves these unescaped besides alphanumerics
_LABEL_SAFE = "-_.!~*'()"


def encode_label_part(value: str) -> str:
    return quote(value, safe=_LABEL_SAFE)


@dataclass(frozen=True)
class ProvisioningRecord:
    """Parameters rendered into one provisioning URI; never persisted."""

    secret: str
    account: str
    issuer: str = ""
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self):
        require_positive_int("digits", self.digits)
        require_positive_int("period", self.period)

    @property
    def label(self) -> str:
        account = encode_label_part(self.account)
        if self.issuer:
            return f"{encode_label_part(self.issuer)}:{account}"
        return account

    @property
    def query(self) -> str:
        return urlencode([
            ("secret", self.secret),
            ("issuer", self.issuer),
            ("algorithm", self.algorithm),
            ("digits", str(self.digits)),
            ("period", str(self.period)),
        ])

    def to_uri(self) -> str:
        return f"{URI_SCHEME}://{URI_TYPE}/{self.label}?{self.query}"


def build_uri(
    *,
    secret: str,
    account: str,
    issuer: str = "",
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Build an otpauth://totp/ URI for authenticator apps.

    Arguments:
        secret: Base32 secret
        account: account label (e.g. 'alice@example.com')
        issuer: service name; when empty the label is the account alone
        digits: code length
        period: time step in seconds
        algorithm: advertised algorithm name

    Returns:
        str: the URI (pure string assembly, no I/O)

    Raises:
        InvalidParameterError: non-positive digits or period
    """
    return ProvisioningRecord(
        secret=secret,
        account=account,
        issuer=issuer,
        digits=digits,
        period=period,
        algorithm=algorithm,
    ).to_uri()


def format_secret(secret: str, group: int = 4) -> str:
    """
    Group an unformatted Base32 secret for display: 'JBSW Y3DP EHPK 3PXP'.

    Characters are grouped exactly as given; existing spaces are not
    removed, so pass the raw secret, not an already formatted one.
    """
    require_positive_int("group", group)
    if not secret:
        return secret
    return " ".join(secret[i:i + group] for i in range(0, len(secret), group))
