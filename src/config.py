"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_GITHUB_API_BASE = "https://api.github.com"
DEFAULT_GITHUB_WEB_HOST = "github.com"
DEFAULT_APPROVAL_DELAY_SECONDS = 1.0


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if value < 0:
        _stderr_print(f"Negative {name}={raw!r}, falling back to {default}")
        return default
    return value


CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    # Slack
    "slack_bot_token": os.getenv("SLACK_BOT_TOKEN", ""),
    "slack_signing_secret": os.getenv("SLACK_SIGNING_SECRET", ""),
    "slack_app_token": os.getenv("SLACK_APP_TOKEN", ""),
    # Delegated identity — user token used to react in the owner's DMs
    "slack_user_token": os.getenv("SLACK_USER_TOKEN", ""),
    # GitHub
    "github_token": os.getenv("GITHUB_TOKEN", ""),
    "github_api_base": os.getenv("GITHUB_API_BASE", DEFAULT_GITHUB_API_BASE).rstrip("/"),
    "github_web_host": os.getenv("GITHUB_WEB_HOST", DEFAULT_GITHUB_WEB_HOST).strip(),
    # Routing
    "owner_user_id": os.getenv("SLACK_OWNER_USER_ID", "").strip(),
    "allowed_channel_id": os.getenv("ALLOWED_CHANNEL_ID", "").strip(),
    # Pacing before every approval call (GitHub abuse limits)
    "approval_delay_seconds": _float_env("APPROVAL_DELAY_SECONDS", DEFAULT_APPROVAL_DELAY_SECONDS),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class SlackConfig:
    bot_token: str = ""
    signing_secret: str = ""
    app_token: str = ""
    user_token: str = ""


@dataclass
class GitHubConfig:
    token: str = ""
    api_base: str = DEFAULT_GITHUB_API_BASE
    web_host: str = DEFAULT_GITHUB_WEB_HOST


@dataclass
class RoutingConfig:
    owner_user_id: str = ""
    allowed_channel_id: str = ""


@dataclass
class AppConfig:
    """Typed configuration built from CONFIG."""

    port: int = 3000
    pacing_delay_seconds: float = DEFAULT_APPROVAL_DELAY_SECONDS
    slack: SlackConfig = field(default_factory=SlackConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    routing: RoutingConfig = field(default_factory=RoutingConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            pacing_delay_seconds=CONFIG["approval_delay_seconds"],
            slack=SlackConfig(
                bot_token=CONFIG["slack_bot_token"],
                signing_secret=CONFIG["slack_signing_secret"],
                app_token=CONFIG["slack_app_token"],
                user_token=CONFIG["slack_user_token"],
            ),
            github=GitHubConfig(
                token=CONFIG["github_token"],
                api_base=CONFIG["github_api_base"],
                web_host=CONFIG["github_web_host"],
            ),
            routing=RoutingConfig(
                owner_user_id=CONFIG["owner_user_id"],
                allowed_channel_id=CONFIG["allowed_channel_id"],
            ),
        )

    def missing_required(self) -> List[str]:
        """Names of required environment variables that are not set."""
        required = [
            ("SLACK_BOT_TOKEN", self.slack.bot_token),
            ("SLACK_SIGNING_SECRET", self.slack.signing_secret),
            ("SLACK_APP_TOKEN", self.slack.app_token),
            ("GITHUB_TOKEN", self.github.token),
        ]
        return [name for name, value in required if not value]
