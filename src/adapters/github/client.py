"""GitHub pull-request review client using aiohttp."""

import sys
from typing import Optional

import aiohttp

from src.config import CONFIG
from src.domain.models import ProcessingOutcome, ReviewRequestRef

GITHUB_API_VERSION = "2022-11-28"


def _log(msg: str):
    print(msg, file=sys.stderr)


class GitHubReviewClient:
    """Async GitHub client that submits an APPROVE review with no body."""

    def __init__(self, token: Optional[str] = None, api_base: Optional[str] = None):
        self._token = token if token is not None else CONFIG["github_token"]
        self.api_base = (api_base or CONFIG["github_api_base"]).rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self._token)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def reviews_url(self, ref: ReviewRequestRef) -> str:
        return f"{self.api_base}/repos/{ref.owner}/{ref.repo}/pulls/{ref.pull_number}/reviews"

    async def _create_review(self, ref: ReviewRequestRef) -> dict:
        async with aiohttp.ClientSession(headers=self._headers()) as session:
            async with session.post(self.reviews_url(ref), json={"event": "APPROVE"}) as resp:
                try:
                    data = await resp.json(content_type=None)
                except ValueError:
                    data = None
                if resp.status >= 400:
                    message = data.get("message") if isinstance(data, dict) else None
                    raise RuntimeError(message or f"HTTP {resp.status}")
                return data if isinstance(data, dict) else {}

    async def approve(self, ref: ReviewRequestRef) -> ProcessingOutcome:
        if not self.is_configured:
            return ProcessingOutcome(success=False, error="GitHub token not configured")
        try:
            await self._create_review(ref)
            return ProcessingOutcome(success=True)
        except Exception as e:
            _log(f"[github] failed to approve {ref}: {e}")
            return ProcessingOutcome(success=False, error=str(e))
