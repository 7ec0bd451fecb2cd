"""Client configuration objects and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError
from .time_utils import validate_timezone

DEFAULT_BASE_URL = "https://api.solapi.com"


@dataclass(slots=True)
class ClientConfig:
    api_key: str
    api_secret: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None
    timezone: str = "UTC"
    allow_duplicates: bool = False
    app_id: str | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.timezone = validate_timezone(self.timezone)

    def to_dict(self, include_secret: bool = False) -> dict[str, Any]:
        data = {
            "api_key": self.api_key,
            "base_url": self.base_url,
            "timeout_seconds": self.timeout_seconds,
            "timezone": self.timezone,
            "allow_duplicates": self.allow_duplicates,
            "app_id": self.app_id,
            "log_level": self.log_level,
        }
        if include_secret:
            data["api_secret"] = self.api_secret
        return data

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "ClientConfig":
        api_key = payload.get("api_key")
        api_secret = payload.get("api_secret")
        if not api_key or not api_secret:
            raise ConfigurationError("config requires api_key and api_secret")
        timeout = payload.get("timeout_seconds")
        return ClientConfig(
            api_key=str(api_key),
            api_secret=str(api_secret),
            base_url=str(payload.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
            timeout_seconds=float(timeout) if timeout is not None else None,
            timezone=payload.get("timezone") or "UTC",
            allow_duplicates=bool(payload.get("allow_duplicates", False)),
            app_id=payload.get("app_id"),
            log_level=payload.get("log_level", "WARNING"),
        )


def load_config(path: str | Path) -> ClientConfig:
    """Load client configuration from YAML."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"{file_path} must contain a mapping")
    return ClientConfig.from_dict(payload)


def save_config(config: ClientConfig, path: str | Path, include_secret: bool = False) -> None:
    """Persist client configuration to YAML. The secret is omitted unless asked for."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(config.to_dict(include_secret=include_secret), handle, sort_keys=False)
