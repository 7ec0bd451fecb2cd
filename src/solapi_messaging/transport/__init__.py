"""Signing, query encoding and HTTP transport."""

from .fetcher import AuthenticatedFetcher, encode_body, ensure_messages_accepted
from .query import build_query_url, encode_query
from .signer import Credentials, RequestSigner

__all__ = [
    "AuthenticatedFetcher",
    "Credentials",
    "RequestSigner",
    "build_query_url",
    "encode_body",
    "encode_query",
    "ensure_messages_accepted",
]
