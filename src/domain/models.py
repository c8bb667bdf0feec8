"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ReviewRequestRef:
    """A pull request identified by owner, repository and number."""

    owner: str
    repo: str
    pull_number: int
    url: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}#{self.pull_number}"


@dataclass
class ProcessingOutcome:
    """Result of one approval call."""

    success: bool
    error: Optional[str] = None


@dataclass
class AckResult:
    """Outcome of a best-effort acknowledgement. Never raised, only returned."""

    delivered: bool
    error: Optional[str] = None


class AckIdentity(str, Enum):
    PRIMARY = "primary"
    DELEGATED = "delegated"


@dataclass(frozen=True)
class RoutingDecision:
    should_process: bool
    identity: AckIdentity = AckIdentity.PRIMARY
    reason: str = ""


@dataclass
class ProcessorStats:
    """Counters exposed on /status."""

    events_seen: int = 0
    duplicates: int = 0
    approvals_ok: int = 0
    approvals_failed: int = 0
    acks_failed: int = 0
