"""Tests for Slack adapter — event conversion, listener and reactions."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from slack_sdk.errors import SlackApiError

from src.adapters.slack.adapter import SlackBotAdapter, to_inbound
from src.adapters.slack.reactions import SlackReactionAdapter
from src.domain.models import AckResult
from src.ports.inbound import InboundEvent
from src.ports.outbound import ReactionPort


class TestToInbound:
    def test_dm_event(self):
        event = {
            "type": "message",
            "channel": "D123",
            "channel_type": "im",
            "user": "U1",
            "ts": "1700000000.000100",
            "text": "https://github.com/a/b/pull/1",
        }
        inbound = to_inbound(event)
        assert inbound == InboundEvent(
            channel_id="D123",
            channel_type="im",
            sender_id="U1",
            timestamp="1700000000.000100",
            text="https://github.com/a/b/pull/1",
        )
        assert inbound.dedup_key == "D123:1700000000.000100"
        assert inbound.is_automated is False

    def test_bot_message(self):
        inbound = to_inbound({"channel": "C1", "ts": "1.0", "bot_id": "B1", "subtype": "bot_message"})
        assert inbound.bot_id == "B1"
        assert inbound.subtype == "bot_message"
        assert inbound.is_automated is True

    def test_bot_message_subtype_without_bot_id(self):
        inbound = to_inbound({"channel": "C1", "ts": "1.0", "subtype": "bot_message"})
        assert inbound.is_automated is True

    @pytest.mark.parametrize("subtype", ["file_share", "thread_broadcast"])
    def test_user_subtypes_not_automated(self, subtype):
        inbound = to_inbound({"channel": "D1", "user": "U1", "ts": "1.0", "text": "hi", "subtype": subtype})
        assert inbound.subtype == subtype
        assert inbound.is_automated is False

    def test_missing_fields_become_empty(self):
        inbound = to_inbound({"subtype": "message_changed"})
        assert inbound.channel_id == ""
        assert inbound.sender_id == ""
        assert inbound.text == ""


@pytest.fixture
def app():
    app = MagicMock()
    app.client.auth_test = AsyncMock(return_value={"ok": True, "user_id": "UBOT"})
    return app


@pytest.fixture
def processor():
    proc = MagicMock()
    proc.handle = AsyncMock(return_value=[])
    proc.routing.bot_user_id = ""
    return proc


class TestSlackBotAdapter:
    def test_registers_message_listener(self, app, processor):
        adapter = SlackBotAdapter(processor, app_token="xapp-1", app=app)
        app.event.assert_called_once_with("message")
        app.event.return_value.assert_called_once_with(adapter.on_message)

    @pytest.mark.asyncio
    async def test_resolve_bot_user_id(self, app, processor):
        adapter = SlackBotAdapter(processor, app_token="xapp-1", app=app)
        user_id = await adapter.resolve_bot_user_id()
        assert user_id == "UBOT"
        assert processor.routing.bot_user_id == "UBOT"

    @pytest.mark.asyncio
    async def test_on_message_delegates(self, app, processor):
        adapter = SlackBotAdapter(processor, app_token="xapp-1", app=app)
        await adapter.on_message({"channel": "D1", "channel_type": "im", "user": "U1", "ts": "1.0", "text": "x"})
        processor.handle.assert_awaited_once()
        inbound = processor.handle.await_args.args[0]
        assert inbound.channel_id == "D1"

    @pytest.mark.asyncio
    async def test_on_message_swallows_errors(self, app, processor):
        processor.handle = AsyncMock(side_effect=RuntimeError("unexpected"))
        adapter = SlackBotAdapter(processor, app_token="xapp-1", app=app)
        # Should not raise
        await adapter.on_message({"channel": "D1", "ts": "1.0"})

    @pytest.mark.asyncio
    async def test_close_without_start(self, app, processor):
        adapter = SlackBotAdapter(processor, app_token="xapp-1", app=app)
        await adapter.close()


class TestSlackReactionAdapter:
    def test_conforms_to_port(self):
        assert isinstance(SlackReactionAdapter(MagicMock()), ReactionPort)

    @pytest.mark.asyncio
    async def test_success(self):
        client = MagicMock()
        client.reactions_add = AsyncMock(return_value={"ok": True})
        result = await SlackReactionAdapter(client).add_reaction("C1", "1.0", "white_check_mark")
        assert result == AckResult(delivered=True)
        client.reactions_add.assert_awaited_once_with(channel="C1", timestamp="1.0", name="white_check_mark")

    @pytest.mark.asyncio
    async def test_slack_api_error(self):
        client = MagicMock()
        client.reactions_add = AsyncMock(
            side_effect=SlackApiError("already reacted", {"ok": False, "error": "already_reacted"})
        )
        result = await SlackReactionAdapter(client, label="user").add_reaction("C1", "1.0", "x")
        assert result.delivered is False
        assert result.error == "user: already_reacted"

    @pytest.mark.asyncio
    async def test_unexpected_error(self):
        client = MagicMock()
        client.reactions_add = AsyncMock(side_effect=TimeoutError("slow"))
        result = await SlackReactionAdapter(client).add_reaction("C1", "1.0", "x")
        assert result.delivered is False
        assert "slow" in result.error
