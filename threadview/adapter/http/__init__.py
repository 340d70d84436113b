"""HTTP comment service adapter."""

from .client import HttpCommentGateway

__all__ = ["HttpCommentGateway"]
