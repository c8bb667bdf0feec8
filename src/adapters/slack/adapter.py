"""Slack adapter — bridges slack_bolt's AsyncApp to MessageProcessor.

Converts Slack `message` events to InboundEvent and delegates to the
processor. Runs over Socket Mode, so no public request URL is needed.
"""

import sys
from typing import Any, Dict, Optional

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from src.domain.processor import MessageProcessor
from src.ports.inbound import InboundEvent


def _log(msg: str):
    print(msg, file=sys.stderr)


def to_inbound(event: Dict[str, Any]) -> InboundEvent:
    """Convert a raw Slack message event to InboundEvent.

    Missing fields become empty strings; routing rejects such events.
    """
    return InboundEvent(
        channel_id=str(event.get("channel") or ""),
        channel_type=str(event.get("channel_type") or ""),
        sender_id=str(event.get("user") or ""),
        timestamp=str(event.get("ts") or ""),
        text=str(event.get("text") or ""),
        bot_id=event.get("bot_id") or None,
        subtype=event.get("subtype") or None,
    )


class SlackBotAdapter:
    """Thin Slack adapter that delegates to MessageProcessor."""

    def __init__(
        self,
        processor: MessageProcessor,
        app: AsyncApp,
        app_token: str,
    ):
        self.processor = processor
        self._app_token = app_token
        self.app = app
        self.app.event("message")(self.on_message)
        self._handler: Optional[AsyncSocketModeHandler] = None

    async def resolve_bot_user_id(self) -> str:
        """Look up the bot's own user id so its messages are never processed."""
        resp = await self.app.client.auth_test()
        user_id = resp.get("user_id") or ""
        self.processor.routing.bot_user_id = user_id
        _log(f"[slack] connected as {user_id}")
        return user_id

    async def on_message(self, event: Dict[str, Any]):
        """Listener for every `message` event."""
        if not isinstance(event, dict):
            return
        inbound = to_inbound(event)
        try:
            await self.processor.handle(inbound)
        except Exception as e:
            _log(f"[slack] error handling {inbound.dedup_key}: {e}")

    async def start(self):
        self._handler = AsyncSocketModeHandler(self.app, self._app_token)
        await self._handler.start_async()

    async def close(self):
        if self._handler is not None:
            await self._handler.close_async()
