"""Inbound port — platform-agnostic message event."""

from dataclasses import dataclass
from typing import Optional

# Slack channel_type values
CHANNEL_TYPE_DIRECT = "im"
CHANNEL_TYPE_GROUP_DIRECT = "mpim"
CHANNEL_TYPE_CHANNEL = "channel"
CHANNEL_TYPE_PRIVATE_CHANNEL = "group"

SUBTYPE_BOT_MESSAGE = "bot_message"


@dataclass(frozen=True)
class InboundEvent:
    """One message delivered by the event source."""

    channel_id: str
    channel_type: str
    sender_id: str
    timestamp: str
    text: str
    bot_id: Optional[str] = None
    subtype: Optional[str] = None

    @property
    def dedup_key(self) -> str:
        return f"{self.channel_id}:{self.timestamp}"

    @property
    def is_automated(self) -> bool:
        # User subtypes (file_share, thread_broadcast) still count as human
        return bool(self.bot_id) or self.subtype == SUBTYPE_BOT_MESSAGE
