"""Comment entity.

Comments form a tree through parent_id. The client only ever sees a slice of
that tree: either one page of root comments (children not expanded) or the
full subtree below one comment, with children nested inline.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadview.domain.model.common import DomainModel
from threadview.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity.

    All fields are assigned by the server and never change; there is no edit
    operation. children is populated only when replies were explicitly fetched.
    """

    id: CommentId = Field(gt=0)
    content: str
    created_at: datetime
    parent_id: Optional[CommentId] = None
    children: list["Comment"] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of root comments as returned by the service."""

    comments: list[Comment] = Field(default_factory=list)
    total_pages: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
