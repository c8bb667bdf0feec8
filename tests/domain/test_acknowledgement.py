"""Tests for AcknowledgementDispatcher."""

from unittest.mock import AsyncMock

import pytest

from src.domain.acknowledgement import (
    REACTION_FAILURE,
    REACTION_SUCCESS,
    AcknowledgementDispatcher,
    reaction_for,
)
from src.domain.models import AckIdentity, AckResult, ProcessingOutcome


def _port(result=None, side_effect=None):
    port = AsyncMock()
    port.add_reaction = AsyncMock(return_value=result or AckResult(delivered=True), side_effect=side_effect)
    return port


class TestReactionFor:
    def test_success(self):
        assert reaction_for(ProcessingOutcome(success=True)) == REACTION_SUCCESS == "white_check_mark"

    def test_failure(self):
        assert reaction_for(ProcessingOutcome(success=False, error="e")) == REACTION_FAILURE == "x"


class TestAcknowledge:
    @pytest.mark.asyncio
    async def test_primary(self):
        primary = _port()
        d = AcknowledgementDispatcher(primary=primary)
        result = await d.acknowledge("C1", "1.0", ProcessingOutcome(success=True))
        assert result.delivered is True
        primary.add_reaction.assert_awaited_once_with("C1", "1.0", "white_check_mark")

    @pytest.mark.asyncio
    async def test_delegated(self):
        primary, delegated = _port(), _port()
        d = AcknowledgementDispatcher(primary=primary, delegated=delegated)
        await d.acknowledge("D1", "2.0", ProcessingOutcome(success=False), AckIdentity.DELEGATED)
        delegated.add_reaction.assert_awaited_once_with("D1", "2.0", "x")
        primary.add_reaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delegated_missing_falls_back(self):
        primary = _port()
        d = AcknowledgementDispatcher(primary=primary)
        assert d.has_delegated is False
        await d.acknowledge("D1", "2.0", ProcessingOutcome(success=True), AckIdentity.DELEGATED)
        primary.add_reaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_port_exception_swallowed(self):
        primary = _port(side_effect=RuntimeError("network down"))
        d = AcknowledgementDispatcher(primary=primary)
        result = await d.acknowledge("C1", "1.0", ProcessingOutcome(success=True))
        assert result.delivered is False
        assert "network down" in result.error

    @pytest.mark.asyncio
    async def test_undelivered_result_passed_through(self):
        primary = _port(result=AckResult(delivered=False, error="already_reacted"))
        d = AcknowledgementDispatcher(primary=primary)
        result = await d.acknowledge("C1", "1.0", ProcessingOutcome(success=True))
        assert result == AckResult(delivered=False, error="already_reacted")
