from __future__ import annotations

import pandas as pd
import pytest

from solapi_messaging import Agent, KakaoOption, Message, MessageType, ParseError
from solapi_messaging.models import (
    CreateGroupRequest,
    FileType,
    FileUploadRequest,
    GetGroupsResponse,
    GetMessagesRequest,
    GroupMessageResponse,
    MessageRequestOptions,
    SingleMessageSendingRequest,
)

AGENT = Agent(sdk_version="python/test", os_platform="linux | 3.12.0")


def test_message_uses_wire_names_and_omits_absent_fields() -> None:
    message = Message(
        to=["01000000001", "01000000002"],
        from_="029302266",
        type=MessageType.ATA,
        kakao_options=KakaoOption(pf_id="PF1", template_id="T1", variables={"#{name}": "Kim"}),
        custom_fields={"ref": "42"},
    )
    assert message.to_dict() == {
        "to": ["01000000001", "01000000002"],
        "from": "029302266",
        "type": "ATA",
        "kakaoOptions": {"pfId": "PF1", "disableSms": False, "templateId": "T1", "variables": {"#{name}": "Kim"}},
        "customFields": {"ref": "42"},
    }


def test_shared_options_are_composed_into_send_requests() -> None:
    request = SingleMessageSendingRequest(
        message=Message(to="01000000000", text="hi"),
        options=MessageRequestOptions(agent=AGENT),
    )
    assert request.to_dict() == {
        "message": {"to": "01000000000", "text": "hi"},
        "agent": {"sdkVersion": "python/test", "osPlatform": "linux | 3.12.0"},
        "allowDuplicates": False,
    }
    with_app = MessageRequestOptions(agent=AGENT, allow_duplicates=True, app_id="APP1").to_dict()
    assert with_app["appId"] == "APP1"


def test_create_group_flattens_agent() -> None:
    assert CreateGroupRequest(agent=AGENT, app_id="APP1").to_dict() == {
        "sdkVersion": "python/test",
        "osPlatform": "linux | 3.12.0",
        "allowDuplicates": False,
        "appId": "APP1",
    }


def test_requests_are_immutable() -> None:
    request = GetMessagesRequest(limit=10)
    with pytest.raises(AttributeError):
        request.limit = 20


def test_get_messages_request_normalizes_dates() -> None:
    query = GetMessagesRequest(start_date="2024-01-01", date_created=1704067200).to_query()
    assert query == {
        "startDate": "2024-01-01T00:00:00+00:00",
        "dateCreated": "2024-01-01T00:00:00+00:00",
    }


def test_file_upload_request_keeps_raw_bytes_and_type_tag() -> None:
    payload = FileUploadRequest(file=b"abc", type=FileType.RCS).to_dict()
    assert payload == {"file": b"abc", "type": "RCS"}
    assert "abc" not in repr(FileUploadRequest(file=b"abc", type=FileType.RCS))


def test_group_response_parses_dates_and_counts() -> None:
    group = GroupMessageResponse.from_dict(
        {
            "groupId": "G1",
            "status": "COMPLETE",
            "count": {"total": "4", "registeredFailed": 1, "sentSuccess": 3},
            "dateCreated": "2024-03-05T01:02:03.000Z",
        }
    )
    assert group.count.total == 4
    assert group.count.sent_success == 3
    assert group.date_created == pd.Timestamp("2024-03-05T01:02:03", tz="UTC")
    assert group.raw["status"] == "COMPLETE"


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "PENDING"},
        {"groupId": "G1", "dateCreated": "garbage"},
        {"groupId": "G1", "count": {"total": "many"}},
        ["G1"],
    ],
)
def test_group_response_shape_errors(payload) -> None:
    with pytest.raises(ParseError):
        GroupMessageResponse.from_dict(payload)


def test_group_list_must_be_mapping() -> None:
    with pytest.raises(ParseError):
        GetGroupsResponse.from_dict({"groupList": []})
