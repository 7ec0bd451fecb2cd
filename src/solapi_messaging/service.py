"""SOLAPI message service: one method per API operation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import urllib.error
import urllib.parse
import urllib.request
import warnings

from .agent import DEFAULT_AGENT, Agent
from .config import DEFAULT_BASE_URL, ClientConfig
from .errors import NetworkError, ValidationError
from .models.message import Message
from .models.requests import (
    CreateGroupRequest,
    DateLike,
    FileType,
    FileUploadRequest,
    GetGroupMessagesRequest,
    GetGroupsRequest,
    GetMessagesRequest,
    GetStatisticsRequest,
    GroupMessageAddRequest,
    MessageRequestOptions,
    MultipleDetailMessageSendingRequest,
    MultipleMessageSendingRequest,
    RemoveMessageIdsToGroupRequest,
    RequestConfig,
    ScheduledDateSendingRequest,
    SingleMessageSendingRequest,
)
from .models.responses import (
    AddMessageResponse,
    DetailGroupMessageResponse,
    FileUploadResponse,
    GetBalanceResponse,
    GetGroupsResponse,
    GetMessagesResponse,
    GetStatisticsResponse,
    GroupId,
    GroupMessageResponse,
    RemoveGroupMessagesResponse,
    SingleMessageSentResponse,
)
from .transport.fetcher import TRANSPORT_ERRORS, AuthenticatedFetcher, ensure_messages_accepted
from .transport.query import build_query_url
from .transport.signer import Credentials
from .time_utils import format_iso, validate_timezone


def _as_messages(messages: Message | Sequence[Message]) -> tuple[Message, ...]:
    batch = (messages,) if isinstance(messages, Message) else tuple(messages)
    if not batch:
        raise ValidationError("at least one message is required")
    return batch


class SolapiMessageService:
    """
    Client for the SOLAPI messaging API.

    Every method performs a single signed HTTP round trip, except the
    *_future helpers which create a group, add messages and schedule it
    as three sequential calls. If a later step fails the group is left
    as-is on the server.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float | None = None,
        timezone: str = "UTC",
        agent: Agent = DEFAULT_AGENT,
        fetcher: AuthenticatedFetcher | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timezone = validate_timezone(timezone)
        self.agent = agent
        self.fetcher = fetcher or AuthenticatedFetcher(
            Credentials(api_key=api_key, api_secret=api_secret),
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, fetcher: AuthenticatedFetcher | None = None) -> "SolapiMessageService":
        return cls(
            config.api_key,
            config.api_secret,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            timezone=config.timezone,
            fetcher=fetcher,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _group_url(self, group_id: GroupId, suffix: str = "") -> str:
        if not group_id:
            raise ValidationError("group_id is required")
        return self._url(f"/messages/v4/groups/{urllib.parse.quote(str(group_id), safe='')}{suffix}")

    def _options(self, allow_duplicates: bool, app_id: str | None) -> MessageRequestOptions:
        return MessageRequestOptions(agent=self.agent, allow_duplicates=allow_duplicates, app_id=app_id or None)

    # -- sending -----------------------------------------------------------

    def send(
        self,
        messages: Message | Sequence[Message],
        scheduled_date: DateLike | None = None,
        allow_duplicates: bool = False,
        app_id: str | None = None,
    ) -> DetailGroupMessageResponse:
        """
        Send up to 10,000 messages in one request.

        Partial failures are reported in `failed_message_list`; raises
        MessageNotAcceptedError when every message was rejected.
        """
        request = MultipleDetailMessageSendingRequest(
            messages=_as_messages(messages),
            options=self._options(allow_duplicates, app_id),
            scheduled_date=scheduled_date,
        )
        response = self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._url("/messages/v4/send-many/detail")),
            DetailGroupMessageResponse.from_dict,
            request.to_dict(self.timezone),
        )
        return ensure_messages_accepted(response)

    def send_one(self, message: Message, app_id: str | None = None) -> SingleMessageSentResponse:
        request = SingleMessageSendingRequest(message=message, options=self._options(False, app_id))
        return self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._url("/messages/v4/send")),
            SingleMessageSentResponse.from_dict,
            request.to_dict(),
        )

    def send_one_future(self, message: Message, scheduled_date: DateLike) -> GroupMessageResponse:
        """Schedule one message: create group, add the message, reserve."""
        scheduled = format_iso(scheduled_date, self.timezone)
        group_id = self.create_group()
        self.add_messages_to_group(group_id, [message])
        return self.reserve_group(group_id, scheduled)

    def send_many(
        self,
        messages: Sequence[Message],
        allow_duplicates: bool = False,
        app_id: str | None = None,
    ) -> GroupMessageResponse:
        """Deprecated: use send()."""
        warnings.warn("send_many is deprecated; use send()", DeprecationWarning, stacklevel=2)
        request = MultipleMessageSendingRequest(
            messages=_as_messages(messages),
            options=self._options(allow_duplicates, app_id),
        )
        return self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._url("/messages/v4/send-many")),
            GroupMessageResponse.from_dict,
            request.to_dict(),
        )

    def send_many_future(
        self,
        messages: Sequence[Message],
        scheduled_date: DateLike,
        allow_duplicates: bool = False,
        app_id: str | None = None,
    ) -> GroupMessageResponse:
        """Deprecated: use send() with scheduled_date."""
        warnings.warn("send_many_future is deprecated; use send(scheduled_date=...)", DeprecationWarning, stacklevel=2)
        batch = _as_messages(messages)
        scheduled = format_iso(scheduled_date, self.timezone)
        group_id = self.create_group(allow_duplicates, app_id)
        self.add_messages_to_group(group_id, batch)
        return self.reserve_group(group_id, scheduled)

    # -- groups ------------------------------------------------------------

    def create_group(self, allow_duplicates: bool = False, app_id: str | None = None) -> GroupId:
        request = CreateGroupRequest(agent=self.agent, allow_duplicates=allow_duplicates, app_id=app_id or None)
        response = self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._url("/messages/v4/groups")),
            GroupMessageResponse.from_dict,
            request.to_dict(),
        )
        return response.group_id

    def add_messages_to_group(self, group_id: GroupId, messages: Sequence[Message]) -> AddMessageResponse:
        request = GroupMessageAddRequest(messages=_as_messages(messages))
        return self.fetcher.fetch_as(
            RequestConfig(method="PUT", url=self._group_url(group_id, "/messages")),
            AddMessageResponse.from_dict,
            request.to_dict(),
        )

    def send_group(self, group_id: GroupId) -> GroupMessageResponse:
        return self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._group_url(group_id, "/send")),
            GroupMessageResponse.from_dict,
        )

    def reserve_group(self, group_id: GroupId, scheduled_date: DateLike) -> GroupMessageResponse:
        request = ScheduledDateSendingRequest(scheduled_date=scheduled_date)
        return self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._group_url(group_id, "/schedule")),
            GroupMessageResponse.from_dict,
            request.to_dict(self.timezone),
        )

    def get_groups(self, request: GetGroupsRequest | None = None) -> GetGroupsResponse:
        query = request.to_query(self.timezone) if request else None
        return self.fetcher.fetch_as(
            RequestConfig(method="GET", url=build_query_url(self._url("/messages/v4/groups"), query)),
            GetGroupsResponse.from_dict,
        )

    def get_group_messages(
        self,
        group_id: GroupId,
        request: GetGroupMessagesRequest | None = None,
    ) -> GetMessagesResponse:
        query = request.to_query(self.timezone) if request else None
        return self.fetcher.fetch_as(
            RequestConfig(method="GET", url=build_query_url(self._group_url(group_id, "/messages"), query)),
            GetMessagesResponse.from_dict,
        )

    def remove_group_messages(self, group_id: GroupId, message_ids: Sequence[str]) -> RemoveGroupMessagesResponse:
        if isinstance(message_ids, str) or not message_ids:
            raise ValidationError("message_ids must be a non-empty list of ids")
        request = RemoveMessageIdsToGroupRequest(message_ids=tuple(message_ids))
        return self.fetcher.fetch_as(
            RequestConfig(method="DELETE", url=self._group_url(group_id, "/messages")),
            RemoveGroupMessagesResponse.from_dict,
            request.to_dict(),
        )

    def remove_reservation_to_group(self, group_id: GroupId) -> GroupMessageResponse:
        """Cancel a scheduled group; its messages are marked failed."""
        return self.fetcher.fetch_as(
            RequestConfig(method="DELETE", url=self._group_url(group_id, "/schedule")),
            GroupMessageResponse.from_dict,
        )

    def remove_group(self, group_id: GroupId) -> GroupMessageResponse:
        return self.fetcher.fetch_as(
            RequestConfig(method="DELETE", url=self._group_url(group_id)),
            GroupMessageResponse.from_dict,
        )

    # -- lookups -----------------------------------------------------------

    def get_messages(self, request: GetMessagesRequest | None = None) -> GetMessagesResponse:
        query = request.to_query(self.timezone) if request else None
        return self.fetcher.fetch_as(
            RequestConfig(method="GET", url=build_query_url(self._url("/messages/v4/list"), query)),
            GetMessagesResponse.from_dict,
        )

    def get_statistics(self, request: GetStatisticsRequest | None = None) -> GetStatisticsResponse:
        query = request.to_query(self.timezone) if request else None
        return self.fetcher.fetch_as(
            RequestConfig(method="GET", url=build_query_url(self._url("/messages/v4/statistics"), query)),
            GetStatisticsResponse.from_dict,
        )

    def get_balance(self) -> GetBalanceResponse:
        return self.fetcher.fetch_as(
            RequestConfig(method="GET", url=self._url("/cash/v1/balance")),
            GetBalanceResponse.from_dict,
        )

    # -- storage -----------------------------------------------------------

    def _read_source(self, source: str | Path | bytes) -> bytes:
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)
        text = str(source)
        if text.startswith(("http://", "https://")):
            try:
                with self.fetcher.opener(urllib.request.Request(text)) as response:
                    return response.read()
            except urllib.error.URLError as exc:
                raise NetworkError(f"could not download {text}: {exc.reason}", details={"url": text}) from exc
            except TRANSPORT_ERRORS as exc:
                raise NetworkError(f"could not download {text}: {exc!r}", details={"url": text}) from exc
        try:
            return Path(text).read_bytes()
        except OSError as exc:
            raise ValidationError(f"could not read file {text}: {exc}") from exc

    def upload_file(
        self,
        source: str | Path | bytes,
        file_type: FileType | str,
        name: str | None = None,
        link: str | None = None,
    ) -> FileUploadResponse:
        """
        Upload a file as base64 for later use in messages.

        `source` is a local path, an http(s) URL or raw bytes. Size limits
        are enforced by the server: 500KB for KAKAO, 200KB for MMS, 2MB for
        DOCUMENT.
        """
        try:
            kind = FileType(str(file_type))
        except ValueError as exc:
            raise ValidationError(f"unsupported file type: {file_type!r}") from exc
        request = FileUploadRequest(file=self._read_source(source), type=kind, name=name, link=link)
        return self.fetcher.fetch_as(
            RequestConfig(method="POST", url=self._url("/storage/v1/files")),
            FileUploadResponse.from_dict,
            request.to_dict(),
        )
