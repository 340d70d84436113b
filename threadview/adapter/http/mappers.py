"""Mappers for converting between wire payloads and domain models."""

from threadview.adapter.http.schema import CommentListPayload, CommentPayload
from threadview.domain.model import Comment, CommentPage
from threadview.domain.value import CommentId


def payload_to_comment(payload: CommentPayload, with_children: bool = True) -> Comment:
    """Convert a comment payload to a domain Comment.

    Args:
        payload: Parsed comment JSON
        with_children: Convert nested replies recursively; when False the
            comment is returned unexpanded even if the body nests replies

    Returns:
        Comment domain model
    """
    children = (payload.children or []) if with_children else []
    return Comment(
        id=CommentId(payload.id),
        content=payload.content,
        created_at=payload.created_at,
        parent_id=CommentId(payload.parent_id) if payload.parent_id else None,
        children=[payload_to_comment(child) for child in children],
    )


def payload_to_page(payload: CommentListPayload, requested_page: int) -> CommentPage:
    """Convert a root listing payload to a CommentPage.

    Root pages never carry expanded replies; those are fetched per comment.

    Args:
        payload: Parsed GET /comments body
        requested_page: Page that was asked for, used when the body omits it

    Returns:
        CommentPage domain model
    """
    comments = [
        payload_to_comment(c, with_children=False) for c in payload.comments or []
    ]
    return CommentPage(
        comments=comments,
        total_pages=max(payload.pages, 0),
        page=payload.page if payload.page and payload.page > 0 else requested_page,
    )


def payload_to_children(payload: CommentListPayload) -> list[Comment]:
    """Convert a subtree listing payload to its reply forest."""
    return [payload_to_comment(c) for c in payload.comments or []]
