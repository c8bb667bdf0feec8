"""GitHub adapters."""

from src.adapters.github.client import GitHubReviewClient

__all__ = ["GitHubReviewClient"]
