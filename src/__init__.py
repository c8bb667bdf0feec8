"""Slack PR Auto-Approve Bot package."""

from src.config import CONFIG, AppConfig, __version__
from src.domain.models import AckIdentity, ProcessingOutcome, ReviewRequestRef, RoutingDecision
from src.domain.dedup import SeenCache
from src.domain.pr_parser import extract_review_requests
from src.domain.routing import RoutingPolicy
from src.domain.processor import MessageProcessor
from src.ports.inbound import InboundEvent

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "AckIdentity",
    "ProcessingOutcome",
    "ReviewRequestRef",
    "RoutingDecision",
    "SeenCache",
    "extract_review_requests",
    "RoutingPolicy",
    "MessageProcessor",
    "InboundEvent",
]
