from __future__ import annotations

from solapi_messaging.transport import build_query_url, encode_query


def test_absent_values_are_omitted() -> None:
    assert encode_query({"a": 1, "b": None, "c": "x"}) == "a=1&c=x"


def test_key_order_follows_mapping() -> None:
    assert encode_query({"z": 1, "a": 2, "m": 3}) == "z=1&a=2&m=3"


def test_values_are_percent_encoded() -> None:
    query = encode_query({"startDate": "2024-03-05T10:15:30+09:00", "to": "010 1234"})
    assert query == "startDate=2024-03-05T10%3A15%3A30%2B09%3A00&to=010%201234"


def test_lists_become_repeated_parameters() -> None:
    assert encode_query({"messageIds": ["M1", "M2"], "limit": 5}) == "messageIds=M1&messageIds=M2&limit=5"


def test_booleans_are_lowercase() -> None:
    assert encode_query({"flag": True, "other": False}) == "flag=true&other=false"


def test_build_query_url_handles_empty_and_existing_query() -> None:
    base = "https://api.solapi.com/messages/v4/list"
    assert build_query_url(base, None) == base
    assert build_query_url(base, {"a": None}) == base
    assert build_query_url(base, {"limit": 10}) == f"{base}?limit=10"
    assert build_query_url(f"{base}?x=1", {"limit": 10}) == f"{base}?x=1&limit=10"


def test_input_mapping_is_not_mutated() -> None:
    params = {"a": 1, "b": None, "ids": ["x"]}
    encode_query(params)
    assert params == {"a": 1, "b": None, "ids": ["x"]}
