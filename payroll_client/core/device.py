import re
from enum import Enum
from typing import Optional


class DeviceType(str, Enum):
    """Coarse device classification attached to signatures."""

    ANDROID = "Android"
    IOS = "iOS"
    WINDOWS = "Windows"
    MAC = "Mac"
    UNKNOWN = "unknown"


# Checked in order, first match wins
DEVICE_PATTERNS = [
    (re.compile(r"Android", re.IGNORECASE), DeviceType.ANDROID),
    (re.compile(r"iPhone|iPad|iPod", re.IGNORECASE), DeviceType.IOS),
    (re.compile(r"Windows", re.IGNORECASE), DeviceType.WINDOWS),
    (re.compile(r"Mac", re.IGNORECASE), DeviceType.MAC),
]


def classify_device(user_agent: Optional[str]) -> DeviceType:
    """Classify a user-agent string. Best-effort metadata, not a security check."""
    if not user_agent:
        return DeviceType.UNKNOWN

    for pattern, device in DEVICE_PATTERNS:
        if pattern.search(user_agent):
            return device

    return DeviceType.UNKNOWN
