"""Health and status routes."""

from dataclasses import asdict
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from pydantic import BaseModel

from src.config import __version__
from src.domain.processor import MessageProcessor

health_router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str


class StatusResponse(BaseModel):
    version: str
    stats: Dict[str, int]
    seen_cache_size: int
    seen_cache_capacity: int
    routing: Dict[str, Any]
    delegated_identity: bool


def _processor(request: Request) -> Optional[MessageProcessor]:
    return getattr(request.app.state, "processor", None)


@health_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")


@health_router.get("/status", response_model=StatusResponse)
async def status(request: Request):
    processor = _processor(request)
    if processor is None:
        return StatusResponse(
            version=__version__,
            stats={},
            seen_cache_size=0,
            seen_cache_capacity=0,
            routing={},
            delegated_identity=False,
        )
    return StatusResponse(
        version=__version__,
        stats=asdict(processor.stats),
        seen_cache_size=len(processor.seen),
        seen_cache_capacity=processor.seen.capacity,
        routing=processor.routing.summary(),
        delegated_identity=processor.dispatcher.has_delegated,
    )


def create_app(processor: Optional[MessageProcessor] = None) -> FastAPI:
    app = FastAPI(title="PR Auto-Approve Bot")
    app.state.processor = processor
    app.include_router(health_router)
    return app
