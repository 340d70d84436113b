"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from threadview.domain.model import Comment
from threadview.domain.value import CommentId

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_comment(
    comment_id: int,
    content: str | None = None,
    parent_id: int | None = None,
    children: list[Comment] | None = None,
) -> Comment:
    """Helper function to build comments for tests.

    created_at is derived from the id so ids double as creation order.

    Args:
        comment_id: Comment id
        content: Comment text (defaults to "comment {id}")
        parent_id: Parent comment id, None for a root
        children: Already built replies

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(comment_id),
        content=content if content is not None else f"comment {comment_id}",
        created_at=BASE_TIME + timedelta(minutes=comment_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        children=children or [],
    )
