"""Port interfaces (Hexagonal Architecture)."""

from src.ports.inbound import InboundEvent
from src.ports.outbound import AckResult, ReactionPort, ReviewPort, SleepFn

__all__ = [
    "InboundEvent",
    "AckResult",
    "ReactionPort",
    "ReviewPort",
    "SleepFn",
]
