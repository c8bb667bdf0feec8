"""Domain layer — pure Python, no framework dependencies."""

from src.domain.models import (
    AckIdentity,
    AckResult,
    ProcessingOutcome,
    ProcessorStats,
    ReviewRequestRef,
    RoutingDecision,
)
from src.domain.pr_parser import extract_pr_urls, extract_review_requests, parse_pr_url
from src.domain.dedup import SeenCache
from src.domain.routing import RoutingPolicy
from src.domain.acknowledgement import AcknowledgementDispatcher
from src.domain.processor import MessageProcessor

__all__ = [
    "AckIdentity",
    "AckResult",
    "ProcessingOutcome",
    "ProcessorStats",
    "ReviewRequestRef",
    "RoutingDecision",
    "extract_pr_urls",
    "extract_review_requests",
    "parse_pr_url",
    "SeenCache",
    "RoutingPolicy",
    "AcknowledgementDispatcher",
    "MessageProcessor",
]
