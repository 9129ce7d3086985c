"""Flask settings read from TOTP_WEB_* environment variables."""

import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> dict:
    """
    Build the Flask config mapping from the environment.

    TOTP_WEB_HOST / TOTP_WEB_PORT: bind address (default 0.0.0.0:8080)
    TOTP_WEB_DEBUG: Flask debug mode
    TOTP_WEB_STATIC_DIR: directory holding index.html and page assets;
        unset means no page is served, only the JSON API
    TOTP_WEB_CORS_ORIGINS: comma separated origins, '*' allows all
    TOTP_WEB_DEFAULT_ISSUER: issuer used when a request omits one
    """
    origins = os.environ.get("TOTP_WEB_CORS_ORIGINS", "*")
    return {
        "HOST": os.environ.get("TOTP_WEB_HOST", DEFAULT_HOST),
        "PORT": int(os.environ.get("TOTP_WEB_PORT", DEFAULT_PORT)),
        "DEBUG": _env_bool("TOTP_WEB_DEBUG"),
        "STATIC_DIR": os.environ.get("TOTP_WEB_STATIC_DIR") or None,
        "CORS_ORIGINS": [o.strip() for o in origins.split(",") if o.strip()] or ["*"],
        "DEFAULT_ISSUER": os.environ.get("TOTP_WEB_DEFAULT_ISSUER", ""),
    }
