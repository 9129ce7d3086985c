"""
TOTP WEB ROUTES - FLASK BLUEPRINT

Stateless JSON helpers for the enrollment page plus the container health
check. Nothing is stored and nothing is verified server-side: secrets are
handed back to the browser, which owns them from then on.

eg..:
curl http://localhost:8080/health
curl -X POST http://localhost:8080/api/secret -H "Content-Type: application/json" -d '{"issuer": "KinCode", "account": "alice"}'
curl -X POST http://localhost:8080/api/uri -H "Content-Type: application/json" -d '{"secret": "JBSWY3DPEHPK3PXP", "account": "alice"}'
curl "http://localhost:8080/api/remaining?period=30"
"""

import logging

from flask import Blueprint, current_app, jsonify, request, send_from_directory

from totp_client import build_uri, format_secret, generate_secret, get_remaining_seconds
from totp_client.config import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD
from totp_client.exceptions import InvalidParameterError
from totp_client.hashing import HASH_ALGORITHMS, normalize_algorithm
from totp_client.validation import require_positive_int

logger = logging.getLogger(__name__)

totp_bp = Blueprint('totp', __name__)


def _int_param(source, name: str, default: int):
    """Accept ints or digit strings from JSON bodies and query strings."""
    value = source.get(name, default)
    if isinstance(value, str):
        text = value.strip()
        # int() refuses superscripts and other non-decimal digit characters
        if not (text.isascii() and text.isdecimal()):
            raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")
        value = int(text)
    return require_positive_int(name, value)


def _str_param(source, name: str) -> str:
    value = source.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidParameterError(f"{name} must be a string, got {value!r}")
    return value


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def index():
    """Serve the enrollment page from the configured static directory."""
    return send_from_directory(current_app.config["STATIC_DIR"], "index.html")


@totp_bp.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"})


@totp_bp.route('/api/secret', methods=['POST'])
def create_secret():
    """
    Generate a fresh secret.

    Input (JSON body, all optional):
      {"issuer": "KinCode", "account": "alice", "digits": 6, "period": 30}

    Output:
      {"secret": "...", "formatted": "XXXX XXXX ...", "uri": "otpauth://..."}
      "uri" is only present when an account is given.
    """
    data = _json_body()
    digits = _int_param(data, 'digits', DEFAULT_DIGITS)
    period = _int_param(data, 'period', DEFAULT_PERIOD)
    issuer = _str_param(data, 'issuer') or current_app.config["DEFAULT_ISSUER"]
    account = _str_param(data, 'account')

    secret = generate_secret()
    body = {"secret": secret, "formatted": format_secret(secret)}
    if account:
        body["uri"] = build_uri(
            secret=secret, issuer=issuer, account=account,
            digits=digits, period=period,
        )
    logger.info("Generated secret digits=%d period=%d uri=%s", digits, period, "uri" in body)
    return jsonify(body)


@totp_bp.route('/api/uri', methods=['POST'])
def create_uri():
    """
    Build the otpauth URI for an existing secret.

    Input (JSON body):
      {"secret": "JBSWY3DPEHPK3PXP", "account": "alice",   # required
       "issuer": "KinCode", "digits": 6, "period": 30, "algorithm": "SHA1"}
    """
    data = _json_body()
    secret = _str_param(data, 'secret')
    account = _str_param(data, 'account')
    if not secret or not account:
        return jsonify({"error": "secret and account are required"}), 400

    algorithm = str(data.get('algorithm', DEFAULT_ALGORITHM))
    # only advertise algorithms the client can actually compute codes for
    if normalize_algorithm(algorithm) not in HASH_ALGORITHMS:
        raise InvalidParameterError(f"Unsupported algorithm: {algorithm}")

    uri = build_uri(
        secret=secret,
        account=account,
        issuer=_str_param(data, 'issuer') or current_app.config["DEFAULT_ISSUER"],
        digits=_int_param(data, 'digits', DEFAULT_DIGITS),
        period=_int_param(data, 'period', DEFAULT_PERIOD),
        algorithm=algorithm,
    )
    return jsonify({"uri": uri})


@totp_bp.route('/api/remaining', methods=['GET'])
def remaining():
    """Seconds left in the current period, for the page countdown."""
    period = _int_param(request.args, 'period', DEFAULT_PERIOD)
    return jsonify({"remaining": get_remaining_seconds(period), "period": period})


def handle_invalid_parameter(error):
    logger.debug("Rejected request: %s", error)
    return jsonify({"error": str(error)}), 400


ERROR_HANDLERS = {
    InvalidParameterError: handle_invalid_parameter,
}
