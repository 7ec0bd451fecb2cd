"""Authenticated JSON transport over urllib."""

from __future__ import annotations

import base64
from collections.abc import Mapping
import http.client
import json
import logging
from typing import Any, Callable, TypeVar
import urllib.error
import urllib.request

from solapi_messaging.errors import HttpError, MessageNotAcceptedError, NetworkError, ParseError
from solapi_messaging.models.requests import RequestConfig
from solapi_messaging.models.responses import DetailGroupMessageResponse

from .signer import Credentials, RequestSigner

logger = logging.getLogger(__name__)

T = TypeVar("T")

# raised by urlopen or response.read() outside the URLError hierarchy
TRANSPORT_ERRORS = (TimeoutError, ConnectionError, http.client.HTTPException)


def encode_body(value: Any) -> Any:
    """Return a JSON-ready copy of value with bytes replaced by base64 text."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Mapping):
        return {key: encode_body(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_body(item) for item in value]
    return value


def _error_fields(text: str) -> tuple[str | None, str | None]:
    try:
        payload = json.loads(text)
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    return payload.get("errorCode"), payload.get("errorMessage")


def ensure_messages_accepted(response: DetailGroupMessageResponse) -> DetailGroupMessageResponse:
    """Raise MessageNotAcceptedError when every message in the batch was rejected."""
    count = response.group_info.count
    if response.failed_message_list and count.total == count.registered_failed:
        raise MessageNotAcceptedError(response.failed_message_list)
    return response


class AuthenticatedFetcher:
    """Signs, sends and decodes one request per call. No retries, no caching."""

    def __init__(
        self,
        credentials: Credentials,
        timeout_seconds: float | None = None,
        opener: Callable[..., Any] | None = None,
    ) -> None:
        self.signer = RequestSigner(credentials)
        self.timeout_seconds = timeout_seconds
        self.opener = opener or urllib.request.urlopen

    def _raise_http_error(self, config: RequestConfig, status: int, text: str) -> None:
        error_code, error_message = _error_fields(text)
        raise HttpError(
            f"HTTP {status} on {config.method} {config.url}: {error_code or ''} {error_message or text[:200]}".strip(),
            status_code=status,
            error_code=error_code,
            error_message=error_message,
            body=text,
        )

    def fetch(self, config: RequestConfig, body: Mapping[str, Any] | None = None) -> dict[str, Any]:
        headers = {"Content-Type": "application/json", **self.signer.auth_headers()}
        data = json.dumps(encode_body(body)).encode("utf-8") if body is not None else None
        request = urllib.request.Request(
            url=config.url,
            data=data,
            method=config.method.upper(),
            headers=headers,
        )
        kwargs: dict[str, Any] = {}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = self.timeout_seconds

        logger.debug("%s %s", config.method.upper(), config.url)
        try:
            with self.opener(request, **kwargs) as response:
                status = int(getattr(response, "status", 200))
                raw = response.read()
        except urllib.error.HTTPError as exc:
            text = exc.read().decode("utf-8", errors="replace") if exc.fp is not None else ""
            logger.debug("%s %s -> %s", config.method.upper(), config.url, exc.code)
            self._raise_http_error(config, exc.code, text)
        except urllib.error.URLError as exc:
            raise NetworkError(
                f"{config.method.upper()} {config.url} failed: {exc.reason}",
                details={"url": config.url},
            ) from exc
        except TRANSPORT_ERRORS as exc:
            raise NetworkError(
                f"{config.method.upper()} {config.url} failed: {exc!r}",
                details={"url": config.url},
            ) from exc

        logger.debug("%s %s -> %s", config.method.upper(), config.url, status)
        if not 200 <= status < 300:
            self._raise_http_error(config, status, raw.decode("utf-8", errors="replace"))
        if not raw.strip():
            return {}
        try:
            payload = json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            # UnicodeDecodeError is a ValueError
            body = raw[:500].decode("utf-8", errors="replace")
            raise ParseError(f"Response from {config.url} is not JSON", details={"body": body}) from exc
        if not isinstance(payload, dict):
            body = raw[:500].decode("utf-8", errors="replace")
            raise ParseError(f"Response from {config.url} is not a JSON object", details={"body": body})
        return payload

    def fetch_as(
        self,
        config: RequestConfig,
        parser: Callable[[dict[str, Any]], T],
        body: Mapping[str, Any] | None = None,
    ) -> T:
        return parser(self.fetch(config, body))
