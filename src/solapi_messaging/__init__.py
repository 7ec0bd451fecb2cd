"""Client library for the SOLAPI messaging HTTP API."""

import logging

from .agent import DEFAULT_AGENT, Agent
from .config import DEFAULT_BASE_URL, ClientConfig, load_config, save_config
from .errors import (
    ConfigurationError,
    HttpError,
    InvalidDateError,
    MessageNotAcceptedError,
    NetworkError,
    ParseError,
    SolapiError,
    ValidationError,
)
from .models import FileType, GetGroupsRequest, GetMessagesRequest, GetStatisticsRequest, KakaoOption, Message, MessageType
from .service import SolapiMessageService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Agent",
    "ClientConfig",
    "ConfigurationError",
    "DEFAULT_AGENT",
    "DEFAULT_BASE_URL",
    "FileType",
    "GetGroupsRequest",
    "GetMessagesRequest",
    "GetStatisticsRequest",
    "HttpError",
    "InvalidDateError",
    "KakaoOption",
    "Message",
    "MessageNotAcceptedError",
    "MessageType",
    "NetworkError",
    "ParseError",
    "SolapiError",
    "SolapiMessageService",
    "ValidationError",
    "load_config",
    "save_config",
]
