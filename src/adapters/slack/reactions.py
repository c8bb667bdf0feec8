"""ReactionPort implementation using slack_sdk's AsyncWebClient."""

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from src.domain.models import AckResult


class SlackReactionAdapter:
    """Posts reactions with one Slack credential (bot or user token)."""

    def __init__(self, client: AsyncWebClient, label: str = "bot"):
        self._client = client
        self.label = label

    async def add_reaction(self, channel_id: str, timestamp: str, name: str) -> AckResult:
        try:
            await self._client.reactions_add(channel=channel_id, timestamp=timestamp, name=name)
            return AckResult(delivered=True)
        except SlackApiError as e:
            error_code = e.response.get("error", "") if e.response is not None else ""
            return AckResult(delivered=False, error=f"{self.label}: {error_code or e}")
        except Exception as e:
            return AckResult(delivered=False, error=f"{self.label}: {e}")
