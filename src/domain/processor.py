"""MessageProcessor — per-event orchestration, no framework dependencies.

routing → dedup → PR extraction → for each PR: pace, approve, acknowledge.
"""

import asyncio
import sys
from typing import List, Optional

from src.domain.acknowledgement import AcknowledgementDispatcher
from src.domain.dedup import SeenCache
from src.domain.models import AckIdentity, ProcessingOutcome, ProcessorStats, ReviewRequestRef
from src.domain.pr_parser import DEFAULT_HOST, extract_review_requests
from src.domain.routing import RoutingPolicy
from src.ports.inbound import InboundEvent
from src.ports.outbound import ReviewPort, SleepFn

DEFAULT_PACING_DELAY = 1.0


def _log(msg: str):
    print(msg, file=sys.stderr)


class MessageProcessor:
    """Pure processing logic — testable with fake ports and a fake sleep."""

    def __init__(
        self,
        routing: RoutingPolicy,
        reviewer: ReviewPort,
        dispatcher: AcknowledgementDispatcher,
        seen: Optional[SeenCache] = None,
        pacing_delay: float = DEFAULT_PACING_DELAY,
        sleep: Optional[SleepFn] = None,
        host: str = DEFAULT_HOST,
    ):
        self.routing = routing
        self.reviewer = reviewer
        self.dispatcher = dispatcher
        self.seen = seen if seen is not None else SeenCache()
        self.pacing_delay = pacing_delay
        self._sleep: SleepFn = sleep or asyncio.sleep
        self.host = host
        self.stats = ProcessorStats()

    async def handle(self, event: InboundEvent) -> List[ProcessingOutcome]:
        """Process one inbound event. Never raises for per-PR failures."""
        decision = self.routing.decide(event)
        if not decision.should_process:
            return []

        self.stats.events_seen += 1
        # Mark before any remote call so a redelivery in flight is dropped
        if not self.seen.check_and_mark(event.dedup_key):
            self.stats.duplicates += 1
            _log(f"[processor] duplicate event {event.dedup_key}, skipping")
            return []

        refs = self._unique(extract_review_requests(event.text, self.host))
        if not refs:
            return []

        outcomes = []
        for ref in refs:
            _log(f"[processor] processing PR from user {event.sender_id}: {ref}")
            outcome = await self._process_ref(event, ref, decision.identity)
            outcomes.append(outcome)
        return outcomes

    async def _process_ref(
        self,
        event: InboundEvent,
        ref: ReviewRequestRef,
        identity: AckIdentity,
    ) -> ProcessingOutcome:
        await self._sleep(self.pacing_delay)

        try:
            outcome = await self.reviewer.approve(ref)
        except Exception as e:
            outcome = ProcessingOutcome(success=False, error=str(e))

        if outcome.success:
            self.stats.approvals_ok += 1
            _log(f"[processor] approved {ref}")
        else:
            self.stats.approvals_failed += 1
            _log(f"[processor] failed to approve {ref}: {outcome.error}")

        ack = await self.dispatcher.acknowledge(event.channel_id, event.timestamp, outcome, identity)
        if not ack.delivered:
            self.stats.acks_failed += 1
        return outcome

    @staticmethod
    def _unique(refs: List[ReviewRequestRef]) -> List[ReviewRequestRef]:
        seen = set()
        out = []
        for ref in refs:
            if ref not in seen:
                seen.add(ref)
                out.append(ref)
        return out
