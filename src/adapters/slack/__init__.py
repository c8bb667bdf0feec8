"""Slack adapters — event listener and reaction poster."""

from src.adapters.slack.adapter import SlackBotAdapter, to_inbound
from src.adapters.slack.reactions import SlackReactionAdapter

__all__ = ["SlackBotAdapter", "SlackReactionAdapter", "to_inbound"]
