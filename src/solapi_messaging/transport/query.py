"""Query-string construction for GET endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import urllib.parse


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """
    Encode a flat mapping as a query string.

    None values are dropped entirely. List/tuple values become repeated
    same-named parameters. Key order follows the mapping. Spaces are
    encoded as %20.
    """
    if not params:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _scalar(item)) for item in value if item is not None)
            continue
        pairs.append((key, _scalar(value)))
    return urllib.parse.urlencode(pairs, quote_via=urllib.parse.quote)


def build_query_url(base_url: str, params: Mapping[str, Any] | None = None) -> str:
    """Append encoded params to base_url, returning it unchanged when empty."""
    query = encode_query(params)
    if not query:
        return base_url
    separator = "&" if urllib.parse.urlparse(base_url).query else "?"
    return f"{base_url}{separator}{query}"
