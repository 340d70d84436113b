"""Domain model entities for the comment tree client."""

from threadview.domain.model.comment import Comment, CommentPage
from threadview.domain.model.fragment import (
    Action,
    ActionKind,
    CommentBlock,
    PageSelector,
    Placeholder,
    TreeFragment,
    ViewFragment,
)

__all__ = [
    "Comment",
    "CommentPage",
    "Action",
    "ActionKind",
    "CommentBlock",
    "PageSelector",
    "Placeholder",
    "TreeFragment",
    "ViewFragment",
]
