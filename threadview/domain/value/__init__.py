"""Domain value objects for the comment tree client."""

from threadview.domain.value.identifiers import CommentId
from threadview.domain.value.types import ViewKind, ViewState

__all__ = [
    # Identifiers
    "CommentId",
    # Types
    "ViewKind",
    "ViewState",
]
