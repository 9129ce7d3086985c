"""Tests for otpauth:// URIs and secret display formatting."""

import dataclasses
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from totp_client.exceptions import InvalidParameterError
from totp_client.provisioning import ProvisioningRecord, build_uri, format_secret


def test_build_uri_basic():
    uri = build_uri(secret="JBSWY3DPEHPK3PXP", issuer="KinCode", account="Alice")
    assert uri.startswith("otpauth://totp/")
    assert "secret=JBSWY3DPEHPK3PXP" in uri
    assert "issuer=KinCode" in uri
    assert uri == (
        "otpauth://totp/KinCode:Alice"
        "?secret=JBSWY3DPEHPK3PXP&issuer=KinCode&algorithm=SHA1&digits=6&period=30"
    )


def test_build_uri_custom_parameters():
    uri = build_uri(
        secret="JBSWY3DPEHPK3PXP", issuer="KinCode", account="Alice",
        digits=8, period=60, algorithm="SHA1",
    )
    query = parse_qs(urlsplit(uri).query)
    assert query["digits"] == ["8"]
    assert query["period"] == ["60"]
    assert query["algorithm"] == ["SHA1"]


def test_label_without_issuer():
    uri = build_uri(secret="JBSWY3DPEHPK3PXP", issuer="", account="alice")
    assert uri.startswith("otpauth://totp/alice?")
    assert "issuer=&" in uri


def test_issuer_defaults_to_empty():
    assert build_uri(secret="JBSWY3DPEHPK3PXP", account="alice").startswith("otpauth://totp/alice?")


def test_label_parts_percent_encoded_independently():
    uri = build_uri(secret="JBSWY3DPEHPK3PXP", issuer="Kin Code", account="alice@example.com")
    label = uri[len("otpauth://totp/"):uri.index("?")]
    assert label == "Kin%20Code:alice%40example.com"


def test_colon_inside_parts_is_escaped():
    uri = build_uri(secret="S", issuer="a:b", account="c:d")
    label = uri[len("otpauth://totp/"):uri.index("?")]
    assert label == "a%3Ab:c%3Ad"
    issuer, account = label.split(":")
    assert unquote(issuer) == "a:b"
    assert unquote(account) == "c:d"


def test_label_keeps_encode_uri_component_unreserved_characters():
    uri = build_uri(secret="S", account="a-b_c.d!e~f*g'h(i)")
    assert uri.startswith("otpauth://totp/a-b_c.d!e~f*g'h(i)?")


def test_non_ascii_label_is_utf8_encoded():
    uri = build_uri(secret="S", issuer="Zoë", account="アリス")
    label = uri[len("otpauth://totp/"):uri.index("?")]
    assert label == "Zo%C3%AB:%E3%82%A2%E3%83%AA%E3%82%B9"


def test_query_uses_form_encoding():
    uri = build_uri(secret="JBSWY3DPEHPK3PXP", issuer="Kin Code & Co", account="alice")
    assert "issuer=Kin+Code+%26+Co" in uri
    assert parse_qs(urlsplit(uri).query)["issuer"] == ["Kin Code & Co"]


def test_query_parameter_order():
    uri = build_uri(secret="JBSWY3DPEHPK3PXP", issuer="KinCode", account="Alice")
    keys = [pair.split("=")[0] for pair in urlsplit(uri).query.split("&")]
    assert keys == ["secret", "issuer", "algorithm", "digits", "period"]


@pytest.mark.parametrize("kwargs", [{"digits": 0}, {"period": 0}, {"period": -1}])
def test_build_uri_rejects_bad_numbers(kwargs):
    with pytest.raises(InvalidParameterError):
        build_uri(secret="JBSWY3DPEHPK3PXP", account="alice", **kwargs)


def test_record_matches_build_uri():
    record = ProvisioningRecord(secret="JBSWY3DPEHPK3PXP", account="Alice", issuer="KinCode")
    assert record.to_uri() == build_uri(secret="JBSWY3DPEHPK3PXP", issuer="KinCode", account="Alice")
    assert record.label == "KinCode:Alice"


def test_record_is_immutable():
    record = ProvisioningRecord(secret="JBSWY3DPEHPK3PXP", account="Alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.secret = "OTHER"


# --- format_secret ---------------------------------------------------------
def test_format_secret_groups_of_four():
    assert format_secret("JBSWY3DPEHPK3PXP") == "JBSW Y3DP EHPK 3PXP"
    assert format_secret("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ") == (
        "GEZD GNBV GY3T QOJQ GEZD GNBV GY3T QOJQ"
    )


def test_format_secret_partial_last_group():
    assert format_secret("ABCDEF") == "ABCD EF"
    assert format_secret("ABC") == "ABC"


def test_format_secret_empty():
    assert format_secret("") == ""


def test_format_secret_defined_over_unformatted_string():
    formatted = "JBSW Y3DP EHPK 3PXP"
    assert format_secret(formatted.replace(" ", "")) == formatted
    # grouping an already grouped string counts the spaces as characters
    assert format_secret(formatted) != formatted
    assert format_secret("JBSW Y3DP") == "JBSW  Y3D P"
