"""
Exception hierarchy for the SOLAPI client.

All client exceptions inherit from SolapiError so callers can catch
broadly or narrowly. Each carries a `details` dict for diagnostics.
"""

from __future__ import annotations

from typing import Any


class SolapiError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(SolapiError):
    """Client is misconfigured or the runtime lacks a required primitive."""


class ValidationError(SolapiError, ValueError):
    """Input rejected client-side before transmission."""


class InvalidDateError(ValidationError):
    """A date value could not be parsed under any accepted format."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid date value: {value!r}", details={"value": repr(value)})


class HttpError(SolapiError):
    """Server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: str | None = None,
        error_message: str | None = None,
        body: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.body = body
        super().__init__(message, **kwargs)


class NetworkError(SolapiError):
    """Request never produced an HTTP response (DNS, refused, timeout)."""


class ParseError(SolapiError):
    """Response body does not match the expected shape."""


class MessageNotAcceptedError(SolapiError):
    """Transport succeeded but the server accepted none of the batch."""

    def __init__(self, failed_messages: list[Any]) -> None:
        self.failed_messages = list(failed_messages)
        super().__init__(
            f"No message was accepted ({len(self.failed_messages)} failed)",
            details={"failed_count": len(self.failed_messages)},
        )
