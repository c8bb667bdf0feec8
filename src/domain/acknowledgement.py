"""Acknowledgement dispatch — reacts to the source message with the outcome."""

import sys
from typing import Dict, Optional

from src.domain.models import AckIdentity, AckResult, ProcessingOutcome
from src.ports.outbound import ReactionPort

REACTION_SUCCESS = "white_check_mark"
REACTION_FAILURE = "x"


def _log(msg: str):
    print(msg, file=sys.stderr)


def reaction_for(outcome: ProcessingOutcome) -> str:
    return REACTION_SUCCESS if outcome.success else REACTION_FAILURE


class AcknowledgementDispatcher:
    """Best-effort reaction poster. `acknowledge` always returns an AckResult."""

    def __init__(self, primary: ReactionPort, delegated: Optional[ReactionPort] = None):
        self._ports: Dict[AckIdentity, ReactionPort] = {AckIdentity.PRIMARY: primary}
        if delegated is not None:
            self._ports[AckIdentity.DELEGATED] = delegated

    @property
    def has_delegated(self) -> bool:
        return AckIdentity.DELEGATED in self._ports

    def _port_for(self, identity: AckIdentity) -> ReactionPort:
        port = self._ports.get(identity)
        if port is None:
            _log(f"[ack] no {identity.value} credential configured, using primary")
            port = self._ports[AckIdentity.PRIMARY]
        return port

    async def acknowledge(
        self,
        channel_id: str,
        timestamp: str,
        outcome: ProcessingOutcome,
        identity: AckIdentity = AckIdentity.PRIMARY,
    ) -> AckResult:
        name = reaction_for(outcome)
        port = self._port_for(identity)
        try:
            result = await port.add_reaction(channel_id, timestamp, name)
        except Exception as e:
            result = AckResult(delivered=False, error=str(e))
        if not result.delivered:
            _log(f"[ack] :{name}: on {channel_id}/{timestamp} not delivered: {result.error}")
        return result
