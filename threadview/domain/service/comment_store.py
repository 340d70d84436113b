"""Client-side comment store."""

import logfire

from threadview.domain.model import Comment
from threadview.domain.value import CommentId, ViewKind, ViewState

from .base import Service


class CommentStore(Service):
    """Holds the forest currently displayed and the widget's view state.

    The forest is either one page of root comments or the subtree below one
    comment, never both; set_forest replaces it wholesale. Callers only hand
    it fully parsed gateway output, so nothing is validated here.
    """

    def __init__(self) -> None:
        self._forest: list[Comment] = []
        self._view_kind = ViewKind.ROOT_PAGE
        self._total_pages = 0
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def view_kind(self) -> ViewKind:
        return self._view_kind

    @property
    def total_pages(self) -> int:
        return self._total_pages

    def get_forest(self) -> list[Comment]:
        """Return the forest currently held."""
        return self._forest

    def set_forest(
        self,
        forest: list[Comment],
        view_kind: ViewKind,
        *,
        page: int | None = None,
        parent_id: CommentId | None = None,
        total_pages: int = 0,
    ) -> None:
        """Replace the held forest and record which view it represents.

        Args:
            forest: Comments in display order
            view_kind: ROOT_PAGE or SUBTREE
            page: Root page shown (ROOT_PAGE only, keeps the current page if None)
            parent_id: Comment the subtree hangs from (required for SUBTREE)
            total_pages: Page count reported with a root page

        Raises:
            ValueError: If a subtree is stored without its parent id
        """
        if view_kind is ViewKind.SUBTREE:
            if parent_id is None:
                raise ValueError("Subtree view requires a parent comment id")
            self._state = self._state.model_copy(
                update={"current_parent_id": parent_id}
            )
            self._total_pages = 0
        else:
            self._state = self._state.model_copy(
                update={
                    "current_parent_id": None,
                    "page": page if page is not None else self._state.page,
                }
            )
            self._total_pages = total_pages

        self._forest = list(forest)
        self._view_kind = view_kind
        logfire.debug(
            "Forest replaced",
            view_kind=view_kind.value,
            roots=len(self._forest),
            parent_id=parent_id,
        )

    def get_reply_target(self) -> CommentId | None:
        """Return the comment the next created comment will reply to."""
        return self._state.reply_target_id

    def set_reply_target(self, comment_id: CommentId | None) -> None:
        """Set (or clear with None) the pending reply target."""
        self._state = self._state.model_copy(update={"reply_target_id": comment_id})

    def set_search_query(self, query: str) -> None:
        """Set the root page filter; the query is stored trimmed."""
        self._state = self._state.model_copy(update={"search_query": query.strip()})
