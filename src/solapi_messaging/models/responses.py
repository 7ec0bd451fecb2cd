"""Typed response shapes parsed from API JSON bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from solapi_messaging.errors import InvalidDateError, ParseError
from solapi_messaging.time_utils import normalize_date

GroupId = str


def _require(payload: Any, key: str, shape: str) -> Any:
    if not isinstance(payload, dict):
        raise ParseError(f"{shape}: expected object, got {type(payload).__name__}")
    if key not in payload or payload[key] is None:
        raise ParseError(f"{shape}: missing required field '{key}'", details={"field": key})
    return payload[key]


def _optional_date(payload: dict[str, Any], key: str) -> pd.Timestamp | None:
    raw = payload.get(key)
    if raw in (None, ""):
        return None
    try:
        return normalize_date(raw)
    except InvalidDateError as exc:
        raise ParseError(f"unparseable date in field '{key}': {raw!r}") from exc


def _int(payload: dict[str, Any], key: str) -> int:
    try:
        return int(payload.get(key) or 0)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"field '{key}' is not an integer: {payload.get(key)!r}") from exc


@dataclass(slots=True)
class Count:
    total: int = 0
    sent_total: int = 0
    sent_failed: int = 0
    sent_success: int = 0
    sent_pending: int = 0
    sent_replacement: int = 0
    refund: int = 0
    registered_failed: int = 0
    registered_success: int = 0

    @staticmethod
    def from_dict(payload: dict[str, Any] | None) -> "Count":
        data = payload or {}
        return Count(
            total=_int(data, "total"),
            sent_total=_int(data, "sentTotal"),
            sent_failed=_int(data, "sentFailed"),
            sent_success=_int(data, "sentSuccess"),
            sent_pending=_int(data, "sentPending"),
            sent_replacement=_int(data, "sentReplacement"),
            refund=_int(data, "refund"),
            registered_failed=_int(data, "registeredFailed"),
            registered_success=_int(data, "registeredSuccess"),
        )


@dataclass(slots=True)
class GroupMessageResponse:
    """Group summary returned by most group endpoints."""

    group_id: GroupId
    status: str | None = None
    count: Count = field(default_factory=Count)
    scheduled_date: pd.Timestamp | None = None
    date_sent: pd.Timestamp | None = None
    date_completed: pd.Timestamp | None = None
    date_created: pd.Timestamp | None = None
    date_updated: pd.Timestamp | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "GroupMessageResponse":
        group_id = _require(payload, "groupId", "GroupMessageResponse")
        return GroupMessageResponse(
            group_id=str(group_id),
            status=payload.get("status"),
            count=Count.from_dict(payload.get("count")),
            scheduled_date=_optional_date(payload, "scheduledDate"),
            date_sent=_optional_date(payload, "dateSent"),
            date_completed=_optional_date(payload, "dateCompleted"),
            date_created=_optional_date(payload, "dateCreated"),
            date_updated=_optional_date(payload, "dateUpdated"),
            raw=payload,
        )


@dataclass(slots=True)
class FailedMessage:
    to: str | None = None
    from_: str | None = None
    type: str | None = None
    status_message: str | None = None
    status_code: str | None = None
    country: str | None = None
    message_id: str | None = None
    account_id: str | None = None
    custom_fields: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "FailedMessage":
        if not isinstance(payload, dict):
            raise ParseError("FailedMessage: expected object")
        return FailedMessage(
            to=payload.get("to"),
            from_=payload.get("from"),
            type=payload.get("type"),
            status_message=payload.get("statusMessage"),
            status_code=payload.get("statusCode"),
            country=payload.get("country"),
            message_id=payload.get("messageId"),
            account_id=payload.get("accountId"),
            custom_fields=dict(payload.get("customFields") or {}),
        )


@dataclass(slots=True)
class DetailGroupMessageResponse:
    """Result of the detailed batch send, including rejected messages."""

    group_info: GroupMessageResponse
    failed_message_list: list[FailedMessage] = field(default_factory=list)
    message_list: list[dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "DetailGroupMessageResponse":
        group_info = _require(payload, "groupInfo", "DetailGroupMessageResponse")
        return DetailGroupMessageResponse(
            group_info=GroupMessageResponse.from_dict(group_info),
            failed_message_list=[FailedMessage.from_dict(row) for row in payload.get("failedMessageList") or []],
            message_list=list(payload.get("messageList") or []),
        )


@dataclass(slots=True)
class SingleMessageSentResponse:
    group_id: GroupId
    message_id: str
    to: str | None = None
    from_: str | None = None
    type: str | None = None
    status_code: str | None = None
    status_message: str | None = None
    country: str | None = None
    account_id: str | None = None

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "SingleMessageSentResponse":
        return SingleMessageSentResponse(
            group_id=str(_require(payload, "groupId", "SingleMessageSentResponse")),
            message_id=str(_require(payload, "messageId", "SingleMessageSentResponse")),
            to=payload.get("to"),
            from_=payload.get("from"),
            type=payload.get("type"),
            status_code=payload.get("statusCode"),
            status_message=payload.get("statusMessage"),
            country=payload.get("country"),
            account_id=payload.get("accountId"),
        )


@dataclass(slots=True)
class AddMessageResponse:
    error_count: int = 0
    result_list: list[dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "AddMessageResponse":
        _require(payload, "errorCount", "AddMessageResponse")
        return AddMessageResponse(
            error_count=_int(payload, "errorCount"),
            result_list=list(payload.get("resultList") or []),
        )


@dataclass(slots=True)
class RemoveGroupMessagesResponse:
    group_id: GroupId
    error_count: int = 0
    result_list: list[dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "RemoveGroupMessagesResponse":
        return RemoveGroupMessagesResponse(
            group_id=str(_require(payload, "groupId", "RemoveGroupMessagesResponse")),
            error_count=_int(payload, "errorCount"),
            result_list=list(payload.get("resultList") or []),
        )


@dataclass(slots=True)
class GetGroupsResponse:
    group_list: dict[GroupId, GroupMessageResponse]
    start_key: str | None = None
    next_key: str | None = None
    limit: int | None = None

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "GetGroupsResponse":
        groups = _require(payload, "groupList", "GetGroupsResponse")
        if not isinstance(groups, dict):
            raise ParseError("GetGroupsResponse: 'groupList' must be an object")
        return GetGroupsResponse(
            group_list={key: GroupMessageResponse.from_dict(value) for key, value in groups.items()},
            start_key=payload.get("startKey"),
            next_key=payload.get("nextKey"),
            limit=payload.get("limit"),
        )


@dataclass(slots=True)
class GetMessagesResponse:
    message_list: dict[str, dict[str, Any]]
    start_key: str | None = None
    next_key: str | None = None
    limit: int | None = None

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "GetMessagesResponse":
        messages = _require(payload, "messageList", "GetMessagesResponse")
        if not isinstance(messages, dict):
            raise ParseError("GetMessagesResponse: 'messageList' must be an object")
        return GetMessagesResponse(
            message_list=dict(messages),
            start_key=payload.get("startKey"),
            next_key=payload.get("nextKey"),
            limit=payload.get("limit"),
        )


@dataclass(slots=True)
class GetStatisticsResponse:
    balance: float = 0.0
    point: float = 0.0
    month_period: list[dict[str, Any]] = field(default_factory=list)
    day_period: list[dict[str, Any]] = field(default_factory=list)
    total: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "GetStatisticsResponse":
        if not isinstance(payload, dict):
            raise ParseError("GetStatisticsResponse: expected object")
        try:
            balance = float(payload.get("balance") or 0.0)
            point = float(payload.get("point") or 0.0)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"GetStatisticsResponse: non-numeric amount in {payload!r}") from exc
        return GetStatisticsResponse(
            balance=balance,
            point=point,
            month_period=list(payload.get("monthPeriod") or []),
            day_period=list(payload.get("dayPeriod") or []),
            total=dict(payload.get("total") or {}),
            raw=payload,
        )


@dataclass(slots=True)
class GetBalanceResponse:
    balance: float
    point: float

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "GetBalanceResponse":
        try:
            return GetBalanceResponse(
                balance=float(_require(payload, "balance", "GetBalanceResponse")),
                point=float(_require(payload, "point", "GetBalanceResponse")),
            )
        except (TypeError, ValueError) as exc:
            raise ParseError(f"GetBalanceResponse: non-numeric amount in {payload!r}") from exc


@dataclass(slots=True)
class FileUploadResponse:
    file_id: str
    type: str | None = None
    name: str | None = None
    link: str | None = None
    url: str | None = None
    date_created: pd.Timestamp | None = None

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "FileUploadResponse":
        return FileUploadResponse(
            file_id=str(_require(payload, "fileId", "FileUploadResponse")),
            type=payload.get("type"),
            name=payload.get("name"),
            link=payload.get("link"),
            url=payload.get("url"),
            date_created=_optional_date(payload, "dateCreated"),
        )
