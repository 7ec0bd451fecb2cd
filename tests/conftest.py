from __future__ import annotations

import io
import json
from typing import Any
import urllib.error
import urllib.request

import pytest

from solapi_messaging.transport import AuthenticatedFetcher, Credentials


class FakeResponse:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


class FakeOpener:
    """Stands in for urllib.request.urlopen; replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: list[urllib.request.Request] = []
        self.kwargs: list[dict[str, Any]] = []
        self._queue: list[tuple[int, bytes] | Exception] = []

    def reply(self, payload: Any = None, status: int = 200) -> "FakeOpener":
        if isinstance(payload, bytes):
            body = payload
        elif isinstance(payload, str):
            body = payload.encode("utf-8")
        elif payload is None:
            body = b""
        else:
            body = json.dumps(payload).encode("utf-8")
        self._queue.append((status, body))
        return self

    def fail(self, exc: Exception) -> "FakeOpener":
        self._queue.append(exc)
        return self

    def __call__(self, request: urllib.request.Request, **kwargs: Any) -> FakeResponse:
        self.requests.append(request)
        self.kwargs.append(kwargs)
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        status, body = item
        if status >= 400:
            raise urllib.error.HTTPError(request.full_url, status, "error", hdrs=None, fp=io.BytesIO(body))
        return FakeResponse(status, body)

    def body(self, index: int = -1) -> Any:
        data = self.requests[index].data
        return json.loads(data) if data else None

    def methods(self) -> list[str]:
        return [r.get_method() for r in self.requests]

    def urls(self) -> list[str]:
        return [r.full_url for r in self.requests]


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()


@pytest.fixture
def fetcher(opener: FakeOpener) -> AuthenticatedFetcher:
    return AuthenticatedFetcher(Credentials(api_key="KEY123", api_secret="SECRET456"), opener=opener)
