"""Shared fixtures."""

import pytest

from totp_web import create_app

# ASCII "12345678901234567890", the RFC 6238 SHA-1 test key
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def rfc_secret():
    return RFC_SECRET


@pytest.fixture
def app(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>enroll</body></html>")
    app = create_app({
        "TESTING": True,
        "STATIC_DIR": str(tmp_path),
        "DEFAULT_ISSUER": "",
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
