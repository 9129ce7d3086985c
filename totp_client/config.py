"""
config.py — default parameters shared by every layer of totp_client.

The values follow the de-facto authenticator profile: SHA-1, 30 second
time step, 6 digits, 160-bit secret. Callers override them per call;
nothing here is mutated at runtime.
"""

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # standard: 6 digits
DEFAULT_PERIOD = 30         # TOTP step (seconds)
DEFAULT_ALGORITHM = "SHA1"  # advertised in otpauth:// URIs
SECRET_BYTES = 20           # 160-bit secret (common practice)

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
URI_SCHEME = "otpauth"
URI_TYPE = "totp"
