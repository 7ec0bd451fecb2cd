"""Message, request and response models."""

from .message import KakaoOption, Message, MessageType
from .requests import (
    CreateGroupRequest,
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
from .responses import (
    AddMessageResponse,
    Count,
    DetailGroupMessageResponse,
    FailedMessage,
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

__all__ = [
    "AddMessageResponse",
    "Count",
    "CreateGroupRequest",
    "DetailGroupMessageResponse",
    "FailedMessage",
    "FileType",
    "FileUploadRequest",
    "FileUploadResponse",
    "GetBalanceResponse",
    "GetGroupMessagesRequest",
    "GetGroupsRequest",
    "GetGroupsResponse",
    "GetMessagesRequest",
    "GetMessagesResponse",
    "GetStatisticsRequest",
    "GetStatisticsResponse",
    "GroupId",
    "GroupMessageAddRequest",
    "GroupMessageResponse",
    "KakaoOption",
    "Message",
    "MessageRequestOptions",
    "MessageType",
    "MultipleDetailMessageSendingRequest",
    "MultipleMessageSendingRequest",
    "RemoveGroupMessagesResponse",
    "RemoveMessageIdsToGroupRequest",
    "RequestConfig",
    "ScheduledDateSendingRequest",
    "SingleMessageSendingRequest",
    "SingleMessageSentResponse",
]
