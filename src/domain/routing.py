"""Routing policy — decides whether an inbound event is processed and
which identity acknowledges it.

Handles:
- Own/automated messages: always rejected, before any other rule
- Direct messages: processed; delegated identity when the sender is not the owner
- Group DMs: processed with the primary identity
- The configured allowed channel: processed with the primary identity
"""

from typing import Optional

from src.domain.models import AckIdentity, RoutingDecision
from src.ports.inbound import (
    CHANNEL_TYPE_DIRECT,
    CHANNEL_TYPE_GROUP_DIRECT,
    InboundEvent,
)


def _reject(reason: str) -> RoutingDecision:
    return RoutingDecision(should_process=False, reason=reason)


class RoutingPolicy:
    def __init__(
        self,
        bot_user_id: Optional[str] = None,
        owner_user_id: Optional[str] = None,
        allowed_channel_id: Optional[str] = None,
    ):
        self.bot_user_id = bot_user_id or ""
        self.owner_user_id = owner_user_id or ""
        self.allowed_channel_id = allowed_channel_id or ""

    def decide(self, event: InboundEvent) -> RoutingDecision:
        if not event.channel_id or not event.timestamp or not event.sender_id:
            return _reject("missing_fields")
        if self.bot_user_id and event.sender_id == self.bot_user_id:
            return _reject("own_message")
        if event.is_automated:
            return _reject("automated")

        if event.channel_type == CHANNEL_TYPE_DIRECT:
            if self.owner_user_id and event.sender_id != self.owner_user_id:
                return RoutingDecision(True, AckIdentity.DELEGATED, "direct_message")
            return RoutingDecision(True, AckIdentity.PRIMARY, "direct_message")

        if event.channel_type == CHANNEL_TYPE_GROUP_DIRECT:
            return RoutingDecision(True, AckIdentity.PRIMARY, "group_direct_message")

        if self.allowed_channel_id and event.channel_id == self.allowed_channel_id:
            return RoutingDecision(True, AckIdentity.PRIMARY, "allowed_channel")

        return _reject("not_routed")

    def summary(self) -> dict:
        """Routing configuration without secrets (for /status)."""
        return {
            "bot_user_id": self.bot_user_id or None,
            "owner_configured": bool(self.owner_user_id),
            "allowed_channel_id": self.allowed_channel_id or None,
        }
