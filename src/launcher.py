"""Launcher for the Slack PR auto-approve bot."""

import asyncio
import sys
from typing import Optional

import uvicorn
from slack_bolt.async_app import AsyncApp
from slack_sdk.web.async_client import AsyncWebClient

from src.adapters.github.client import GitHubReviewClient
from src.adapters.slack.adapter import SlackBotAdapter
from src.adapters.slack.reactions import SlackReactionAdapter
from src.adapters.web.health import create_app
from src.config import AppConfig
from src.domain.acknowledgement import AcknowledgementDispatcher
from src.domain.dedup import SeenCache
from src.domain.processor import MessageProcessor
from src.domain.routing import RoutingPolicy


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_processor(config: AppConfig, primary_client: AsyncWebClient) -> MessageProcessor:
    """Wire domain objects to their Slack/GitHub adapters."""
    delegated = None
    if config.slack.user_token:
        delegated = SlackReactionAdapter(AsyncWebClient(token=config.slack.user_token), label="user")
        _log("[launcher] delegated user token loaded")

    dispatcher = AcknowledgementDispatcher(
        primary=SlackReactionAdapter(primary_client, label="bot"),
        delegated=delegated,
    )
    routing = RoutingPolicy(
        owner_user_id=config.routing.owner_user_id,
        allowed_channel_id=config.routing.allowed_channel_id,
    )
    reviewer = GitHubReviewClient(token=config.github.token, api_base=config.github.api_base)
    return MessageProcessor(
        routing=routing,
        reviewer=reviewer,
        dispatcher=dispatcher,
        seen=SeenCache(),
        pacing_delay=config.pacing_delay_seconds,
        host=config.github.web_host,
    )


def build_bot(config: AppConfig) -> SlackBotAdapter:
    app = AsyncApp(token=config.slack.bot_token, signing_secret=config.slack.signing_secret)
    processor = build_processor(config, app.client)
    return SlackBotAdapter(processor, app=app, app_token=config.slack.app_token)


async def launch(config: Optional[AppConfig] = None):
    """Start the Socket Mode listener and the health server."""
    config = config or AppConfig.from_env()

    missing = config.missing_required()
    if missing:
        _log(f"[launcher] missing required configuration: {', '.join(missing)}")
        return

    bot = build_bot(config)
    await bot.resolve_bot_user_id()

    server = uvicorn.Server(
        uvicorn.Config(create_app(bot.processor), host="0.0.0.0", port=config.port, log_level="warning")
    )

    _log("Slack PR Auto-Approve Bot is running!")
    if config.routing.allowed_channel_id:
        _log(f"Accepting PRs from: direct messages, group DMs, and channel {config.routing.allowed_channel_id}")
    else:
        _log("Accepting PRs from: ANYONE who DMs the bot (direct or group DM)")
    _log(f"Health endpoint on port {config.port}")

    try:
        await asyncio.gather(bot.start(), server.serve())
    finally:
        await bot.close()


def main():
    asyncio.run(launch())


if __name__ == "__main__":
    main()
