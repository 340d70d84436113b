"""In-memory adapters for testing."""

from .comment import InMemoryCommentGateway

__all__ = ["InMemoryCommentGateway"]
