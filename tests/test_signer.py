from __future__ import annotations

from datetime import datetime, timezone
import hashlib
import hmac
import re

import pytest

from solapi_messaging import ConfigurationError
from solapi_messaging.transport import Credentials, RequestSigner

HEADER_RE = re.compile(
    r"^HMAC-SHA256 apiKey=(?P<key>[^,]+), date=(?P<date>[^,]+), salt=(?P<salt>[0-9a-f]+), signature=(?P<sig>[0-9a-f]{64})$"
)


def _signer() -> RequestSigner:
    return RequestSigner(Credentials(api_key="KEY123", api_secret="SECRET456"))


def test_authorization_header_layout_and_signature() -> None:
    now = datetime(2024, 3, 5, 1, 2, 3, 456000, tzinfo=timezone.utc)
    header = _signer().auth_headers(now)["Authorization"]
    match = HEADER_RE.match(header)
    assert match is not None
    assert match["key"] == "KEY123"
    assert match["date"] == "2024-03-05T01:02:03.456+00:00"
    assert len(match["salt"]) == 64
    expected = hmac.new(b"SECRET456", (match["date"] + match["salt"]).encode(), hashlib.sha256).hexdigest()
    assert match["sig"] == expected
    assert "SECRET456" not in header


def test_same_instant_yields_different_salt_and_signature() -> None:
    signer = _signer()
    now = datetime(2024, 3, 5, tzinfo=timezone.utc)
    first = HEADER_RE.match(signer.authorization(now))
    second = HEADER_RE.match(signer.authorization(now))
    assert first["date"] == second["date"]
    assert first["salt"] != second["salt"]
    assert first["sig"] != second["sig"]


def test_sign_is_deterministic_for_fixed_inputs() -> None:
    signer = _signer()
    assert signer.sign("2024-01-01T00:00:00.000+00:00", "ab") == signer.sign("2024-01-01T00:00:00.000+00:00", "ab")
    assert signer.sign("2024-01-01T00:00:00.000+00:00", "ab") != signer.sign("2024-01-01T00:00:00.000+00:00", "ac")


def test_naive_now_is_treated_as_utc() -> None:
    assert RequestSigner.timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000+00:00"


def test_credentials_hide_secret_and_require_both_parts() -> None:
    creds = Credentials(api_key="KEY123", api_secret="SECRET456")
    assert "SECRET456" not in repr(creds)
    with pytest.raises(ConfigurationError):
        Credentials(api_key="KEY123", api_secret="")
    with pytest.raises(ConfigurationError):
        Credentials(api_key="", api_secret="SECRET456")
