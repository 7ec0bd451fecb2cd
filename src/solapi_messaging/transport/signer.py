"""HMAC-SHA256 request signing for the SOLAPI Authorization header."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import hashlib
import hmac
import secrets

from solapi_messaging.errors import ConfigurationError

SIGNATURE_SCHEME = "HMAC-SHA256"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Credentials:
    """API key pair owned by one service instance."""

    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_secret:
            raise ConfigurationError("api_key and api_secret are required")


class RequestSigner:
    """Builds per-request Authorization headers: key, date, salt and signature."""

    def __init__(self, credentials: Credentials) -> None:
        if "sha256" not in hashlib.algorithms_available:
            raise ConfigurationError("sha256 hash primitive is unavailable")
        self.credentials = credentials

    @staticmethod
    def salt() -> str:
        return secrets.token_hex(32)

    @staticmethod
    def timestamp(now: datetime | None = None) -> str:
        moment = now or _now_utc()
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")

    def sign(self, date: str, salt: str) -> str:
        message = f"{date}{salt}".encode("utf-8")
        return hmac.new(self.credentials.api_secret.encode("utf-8"), message, hashlib.sha256).hexdigest()

    def authorization(self, now: datetime | None = None) -> str:
        date = self.timestamp(now)
        salt = self.salt()
        signature = self.sign(date, salt)
        return (
            f"{SIGNATURE_SCHEME} apiKey={self.credentials.api_key}, "
            f"date={date}, salt={salt}, signature={signature}"
        )

    def auth_headers(self, now: datetime | None = None) -> dict[str, str]:
        return {"Authorization": self.authorization(now)}
