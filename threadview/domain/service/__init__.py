"""Domain services."""

from .base import Service
from .comment_store import CommentStore
from .tree_renderer import render, render_pages, render_view

__all__ = [
    "CommentStore",
    "Service",
    "render",
    "render_pages",
    "render_view",
]
