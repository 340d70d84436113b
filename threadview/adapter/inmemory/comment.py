"""In-memory comment gateway for testing.

Mirrors the comment service semantics: ascending creation order, fixed page
size, case-insensitive substring search on root comments, nested subtrees and
cascading deletes.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Optional

from threadview.adapter.error import ApiError
from threadview.domain.gateway import PAGE_SIZE, CommentGateway
from threadview.domain.model import Comment, CommentPage
from threadview.domain.value import CommentId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCommentGateway(CommentGateway):
    """In-memory implementation of CommentGateway for testing."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1
        self._clock = clock
        # Every round trip, in call order: (operation, *arguments)
        self.calls: list[tuple[Any, ...]] = []

    async def list_root_page(self, page: int, search: str = "") -> CommentPage:
        """List one page of root comments, children not expanded."""
        self.calls.append(("list_root_page", page, search))
        page = max(page, 1)

        roots = [c for c in self._ordered() if c.parent_id is None]
        if search:
            needle = search.strip().lower()
            roots = [c for c in roots if needle in c.content.lower()]

        total = len(roots)
        offset = (page - 1) * PAGE_SIZE
        return CommentPage(
            comments=roots[offset : offset + PAGE_SIZE],
            total_pages=(total + PAGE_SIZE - 1) // PAGE_SIZE,
            page=page,
        )

    async def list_children(self, parent_id: CommentId) -> list[Comment]:
        """List the full reply subtree below a comment."""
        self.calls.append(("list_children", parent_id))
        return self._subtree(parent_id)

    async def create(
        self, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Create a comment."""
        self.calls.append(("create", content, parent_id))
        if not content:
            raise ApiError(400, "Bad Request")
        if parent_id is not None and parent_id not in self._comments:
            raise ApiError(400, "Bad Request")

        comment = Comment(
            id=CommentId(self._next_id),
            content=content,
            created_at=self._clock(),
            parent_id=parent_id,
        )
        self._comments[comment.id] = comment
        self._next_id += 1
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and all of its descendants."""
        self.calls.append(("delete", comment_id))
        if comment_id not in self._comments:
            raise ApiError(404, "Not Found")

        doomed = [comment_id]
        index = 0
        while index < len(doomed):
            current = doomed[index]
            doomed.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )
            index += 1

        for doomed_id in doomed:
            del self._comments[doomed_id]
        return len(doomed)

    def _ordered(self) -> list[Comment]:
        # Ids are assigned in creation order and break timestamp ties
        return sorted(self._comments.values(), key=lambda c: (c.created_at, c.id))

    def _subtree(self, parent_id: CommentId) -> list[Comment]:
        return [
            c.model_copy(update={"children": self._subtree(c.id)})
            for c in self._ordered()
            if c.parent_id == parent_id
        ]
