"""Client agent descriptor sent with message bodies."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import metadata
import platform
import sys

SDK_NAME = "solapi-messaging"
FALLBACK_VERSION = "0.4.0"


def _sdk_version() -> str:
    try:
        return f"python/{metadata.version(SDK_NAME)}"
    except metadata.PackageNotFoundError:
        return f"python/{FALLBACK_VERSION}"


@dataclass(frozen=True, slots=True)
class Agent:
    """Client version and host platform string."""

    sdk_version: str
    os_platform: str

    @staticmethod
    def detect() -> "Agent":
        return Agent(
            sdk_version=_sdk_version(),
            os_platform=f"{sys.platform} | {platform.python_version()}",
        )

    def to_dict(self) -> dict[str, str]:
        return {"sdkVersion": self.sdk_version, "osPlatform": self.os_platform}


DEFAULT_AGENT = Agent.detect()
