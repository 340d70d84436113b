"""Comment gateway interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threadview.domain.model.comment import Comment, CommentPage
from threadview.domain.value import CommentId

# Root listings are fixed to 10 comments per page, oldest first
PAGE_SIZE = 10
SORT_ORDER = "asc"


class CommentGateway(ABC):
    """Gateway to the comment service.

    Defines the contract for the four comment service round trips.
    Implementations live in the adapter layer; nothing else knows the wire
    format.

    Implementations raise TransportError when the service is unreachable and
    ApiError when it answers with a non-success status.
    """

    @abstractmethod
    async def list_root_page(self, page: int, search: str = "") -> CommentPage:
        """List one page of root comments.

        Args:
            page: 1-based page number
            search: Substring filter on content ("" for none)

        Returns:
            Root comments (children not expanded) and the total page count
        """
        pass

    @abstractmethod
    async def list_children(self, parent_id: CommentId) -> list[Comment]:
        """List the full reply subtree below a comment.

        Args:
            parent_id: Comment whose replies to fetch

        Returns:
            Direct replies, each with its own replies nested inline
        """
        pass

    @abstractmethod
    async def create(
        self, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Create a comment.

        Args:
            content: Non-empty, trimmed text
            parent_id: Comment to reply to (None for a root comment)

        Returns:
            The created comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment; the service cascades to all descendants.

        Args:
            comment_id: Comment to delete

        Returns:
            Number of comments the service removed
        """
        pass
