"""Web adapter — health/status HTTP surface."""

from src.adapters.web.health import create_app, health_router

__all__ = ["create_app", "health_router"]
