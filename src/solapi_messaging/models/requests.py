"""Typed request shapes, one per endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any

from solapi_messaging.agent import DEFAULT_AGENT, Agent
from solapi_messaging.time_utils import DEFAULT_TIMEZONE, format_iso

from .message import Message, MessageType

DateLike = str | int | date


def _iso_or_none(value: DateLike | None, tz: str) -> str | None:
    return format_iso(value, tz) if value is not None else None


def _without_none(payload: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in payload.items() if v is not None}


class FileType(StrEnum):
    KAKAO = "KAKAO"
    MMS = "MMS"
    DOCUMENT = "DOCUMENT"
    RCS = "RCS"


@dataclass(frozen=True, slots=True)
class RequestConfig:
    method: str
    url: str


@dataclass(frozen=True, slots=True)
class MessageRequestOptions:
    """Fields shared by every send request."""

    agent: Agent = DEFAULT_AGENT
    allow_duplicates: bool = False
    app_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "agent": self.agent.to_dict(),
            "allowDuplicates": self.allow_duplicates,
        }
        if self.app_id is not None:
            payload["appId"] = self.app_id
        return payload


@dataclass(frozen=True, slots=True)
class SingleMessageSendingRequest:
    message: Message
    options: MessageRequestOptions = field(default_factory=MessageRequestOptions)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message.to_dict(), **self.options.to_dict()}


@dataclass(frozen=True, slots=True)
class MultipleMessageSendingRequest:
    messages: tuple[Message, ...]
    options: MessageRequestOptions = field(default_factory=MessageRequestOptions)

    def to_dict(self) -> dict[str, Any]:
        return {"messages": [m.to_dict() for m in self.messages], **self.options.to_dict()}


@dataclass(frozen=True, slots=True)
class MultipleDetailMessageSendingRequest:
    """Batch send with per-message failure detail, optionally scheduled."""

    messages: tuple[Message, ...]
    options: MessageRequestOptions = field(default_factory=MessageRequestOptions)
    scheduled_date: DateLike | None = None

    def to_dict(self, tz: str = DEFAULT_TIMEZONE) -> dict[str, Any]:
        payload = {"messages": [m.to_dict() for m in self.messages], **self.options.to_dict()}
        if self.scheduled_date is not None:
            payload["scheduledDate"] = format_iso(self.scheduled_date, tz)
        return payload


@dataclass(frozen=True, slots=True)
class CreateGroupRequest:
    agent: Agent = DEFAULT_AGENT
    allow_duplicates: bool = False
    app_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {**self.agent.to_dict(), "allowDuplicates": self.allow_duplicates}
        if self.app_id is not None:
            payload["appId"] = self.app_id
        return payload


@dataclass(frozen=True, slots=True)
class GroupMessageAddRequest:
    messages: tuple[Message, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"messages": [m.to_dict() for m in self.messages]}


@dataclass(frozen=True, slots=True)
class ScheduledDateSendingRequest:
    scheduled_date: DateLike

    def to_dict(self, tz: str = DEFAULT_TIMEZONE) -> dict[str, Any]:
        return {"scheduledDate": format_iso(self.scheduled_date, tz)}


@dataclass(frozen=True, slots=True)
class RemoveMessageIdsToGroupRequest:
    message_ids: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"messageIds": list(self.message_ids)}


@dataclass(frozen=True, slots=True)
class GetGroupMessagesRequest:
    start_key: str | None = None
    limit: int | None = None

    def to_query(self, tz: str = DEFAULT_TIMEZONE) -> dict[str, Any]:
        return _without_none({"startKey": self.start_key, "limit": self.limit})


@dataclass(frozen=True, slots=True)
class GetGroupsRequest:
    start_key: str | None = None
    limit: int | None = None
    start_date: DateLike | None = None
    end_date: DateLike | None = None

    def to_query(self, tz: str = DEFAULT_TIMEZONE) -> dict[str, Any]:
        return _without_none(
            {
                "startKey": self.start_key,
                "limit": self.limit,
                "startDate": _iso_or_none(self.start_date, tz),
                "endDate": _iso_or_none(self.end_date, tz),
            }
        )


@dataclass(frozen=True, slots=True)
class GetMessagesRequest:
    """Filters for the message list endpoint."""

    start_key: str | None = None
    limit: int | None = None
    date_type: str | None = None
    start_date: DateLike | None = None
    end_date: DateLike | None = None
    message_id: str | None = None
    message_ids: tuple[str, ...] | None = None
    group_id: str | None = None
    to: str | None = None
    from_: str | None = None
    type: MessageType | None = None
    status_code: str | None = None
    date_created: DateLike | None = None
    date_updated: DateLike | None = None

    def to_query(self, tz: str = DEFAULT_TIMEZONE) -> dict[str, Any]:
        return _without_none(
            {
                "startKey": self.start_key,
                "limit": self.limit,
                "dateType": self.date_type,
                "startDate": _iso_or_none(self.start_date, tz),
                "endDate": _iso_or_none(self.end_date, tz),
                "messageId": self.message_id,
                "messageIds": list(self.message_ids) if self.message_ids else None,
                "groupId": self.group_id,
                "to": self.to,
                "from": self.from_,
                "type": str(self.type) if self.type is not None else None,
                "statusCode": self.status_code,
                "dateCreated": _iso_or_none(self.date_created, tz),
                "dateUpdated": _iso_or_none(self.date_updated, tz),
            }
        )


@dataclass(frozen=True, slots=True)
class GetStatisticsRequest:
    start_date: DateLike | None = None
    end_date: DateLike | None = None
    master_account_id: str | None = None

    def to_query(self, tz: str = DEFAULT_TIMEZONE) -> dict[str, Any]:
        return _without_none(
            {
                "startDate": _iso_or_none(self.start_date, tz),
                "endDate": _iso_or_none(self.end_date, tz),
                "masterAccountId": self.master_account_id,
            }
        )


@dataclass(frozen=True, slots=True)
class FileUploadRequest:
    """Raw file bytes; the fetcher base64-encodes them on the wire."""

    file: bytes = field(repr=False)
    type: FileType
    name: str | None = None
    link: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "file": self.file,
                "type": str(self.type),
                "name": self.name,
                "link": self.link,
            }
        )
