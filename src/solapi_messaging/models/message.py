"""Outgoing message model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class MessageType(StrEnum):
    SMS = "SMS"
    LMS = "LMS"
    MMS = "MMS"
    ATA = "ATA"  # kakao alimtalk
    CTA = "CTA"  # kakao friendtalk
    CTI = "CTI"  # kakao friendtalk with image
    NSA = "NSA"  # naver smart alert
    RCS_SMS = "RCS_SMS"
    RCS_LMS = "RCS_LMS"
    RCS_MMS = "RCS_MMS"
    RCS_TPL = "RCS_TPL"
    RCS_ITPL = "RCS_ITPL"
    RCS_LTPL = "RCS_LTPL"
    FAX = "FAX"
    VOICE = "VOICE"


@dataclass(frozen=True, slots=True)
class KakaoOption:
    """Kakao alimtalk/friendtalk options."""

    pf_id: str
    template_id: str | None = None
    variables: dict[str, str] | None = None
    disable_sms: bool = False
    image_id: str | None = None
    buttons: list[dict[str, Any]] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"pfId": self.pf_id, "disableSms": self.disable_sms}
        if self.template_id is not None:
            payload["templateId"] = self.template_id
        if self.variables is not None:
            payload["variables"] = dict(self.variables)
        if self.image_id is not None:
            payload["imageId"] = self.image_id
        if self.buttons is not None:
            payload["buttons"] = [dict(button) for button in self.buttons]
        return payload


@dataclass(frozen=True, slots=True)
class Message:
    """One message. `from_` is the registered sender number."""

    to: str | list[str]
    from_: str | None = None
    text: str | None = None
    type: MessageType | None = None
    subject: str | None = None
    image_id: str | None = None
    country: str | None = None
    auto_type_detect: bool | None = None
    kakao_options: KakaoOption | None = None
    custom_fields: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "to": list(self.to) if isinstance(self.to, (list, tuple)) else self.to,
            "from": self.from_,
            "text": self.text,
            "type": str(self.type) if self.type is not None else None,
            "subject": self.subject,
            "imageId": self.image_id,
            "country": self.country,
            "autoTypeDetect": self.auto_type_detect,
            "kakaoOptions": self.kakao_options.to_dict() if self.kakao_options else None,
            "customFields": dict(self.custom_fields) if self.custom_fields else None,
        }
        return {k: v for k, v in payload.items() if v is not None}
