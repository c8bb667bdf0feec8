"""Outbound ports — interfaces for external system adapters."""

from typing import Awaitable, Callable, Protocol, runtime_checkable

from src.domain.models import AckResult, ProcessingOutcome, ReviewRequestRef


@runtime_checkable
class ReviewPort(Protocol):
    """Interface for the code-review approval backend."""

    async def approve(self, ref: ReviewRequestRef) -> ProcessingOutcome: ...


@runtime_checkable
class ReactionPort(Protocol):
    """Interface for posting a reaction onto a message.

    Implementations must return an AckResult instead of raising.
    """

    async def add_reaction(self, channel_id: str, timestamp: str, name: str) -> AckResult: ...


# asyncio.sleep-compatible callable, injected so tests can fast-forward pacing
SleepFn = Callable[[float], Awaitable[None]]
