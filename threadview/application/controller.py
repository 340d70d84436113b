"""Comment tree view controller.

Turns user intents into gateway round trips, store updates and re-renders.
Each intent is guarded on its own: failures end up in the error slot and the
store is only touched after a fully parsed success.

Loads are tagged with an increasing sequence number. When several loads are
in flight, only the most recently issued one may update the store; earlier
responses that arrive late are dropped.
"""

import itertools

import logfire

from threadview.adapter.error import AdapterError
from threadview.application.display import DisplaySurface
from threadview.domain.error import DomainError, ValidationError
from threadview.domain.gateway import CommentGateway
from threadview.domain.service import CommentStore, render_view
from threadview.domain.value import CommentId, ViewKind


class CommentTreeController:
    """Controller for one comment tree widget."""

    def __init__(
        self,
        gateway: CommentGateway,
        store: CommentStore,
        surface: DisplaySurface,
    ) -> None:
        """Initialize comment tree controller.

        Args:
            gateway: Comment service gateway
            store: Store owned by this widget
            surface: Display host to write into
        """
        self.gateway = gateway
        self.store = store
        self.surface = surface
        self._load_sequence = itertools.count(1)
        self._latest_load = 0

    async def load_root_page(self, page: int = 1) -> bool:
        """Load a root page with the active search filter.

        Returns:
            True if the page was stored and shown
        """
        self.surface.clear_error()
        try:
            _require_positive(page, "Page number")
        except ValidationError as e:
            self._fail("Failed to load comments", e)
            return False

        sequence = self._begin_load()
        query = self.store.state.search_query
        with logfire.span(
            "controller.load_root_page", page=page, search=query or None
        ):
            try:
                result = await self.gateway.list_root_page(page, query)
            except AdapterError as e:
                if not self._is_current(sequence):
                    return False
                self._fail("Failed to load comments", e)
                return False

            if not self._is_current(sequence):
                return False

            self.store.set_forest(
                result.comments,
                ViewKind.ROOT_PAGE,
                page=page,
                total_pages=result.total_pages,
            )
            self._show()
            return True

    async def select_page(self, page: int) -> bool:
        """Page navigation; ignored while a subtree is displayed."""
        if self.store.state.viewing_subtree:
            logfire.info(
                "Page navigation ignored in subtree view",
                page=page,
                parent_id=self.store.state.current_parent_id,
            )
            return False
        return await self.load_root_page(page)

    async def expand_replies(self, comment_id: CommentId) -> bool:
        """Replace the view with the full subtree below a comment.

        Returns:
            True if the subtree was stored and shown
        """
        self.surface.clear_error()
        try:
            _require_positive(comment_id, "Comment id")
        except ValidationError as e:
            self._fail("Failed to load replies", e)
            return False

        sequence = self._begin_load()
        with logfire.span("controller.expand_replies", comment_id=comment_id):
            try:
                children = await self.gateway.list_children(comment_id)
            except AdapterError as e:
                if not self._is_current(sequence):
                    return False
                self._fail("Failed to load replies", e)
                return False

            if not self._is_current(sequence):
                return False

            self.store.set_forest(children, ViewKind.SUBTREE, parent_id=comment_id)
            self._show()
            return True

    async def reload(self) -> bool:
        """Reload the current view: root page 1, or the displayed subtree."""
        parent_id = self.store.state.current_parent_id
        if parent_id is None:
            return await self.load_root_page(1)
        return await self.expand_replies(parent_id)

    async def create_comment(self, content: str) -> bool:
        """Create a comment under the pending reply target (or as a root).

        Whitespace-only content is rejected before any request is made. On
        success the inputs and the reply target are cleared and the current
        view is reloaded.

        Returns:
            True if the comment was created
        """
        self.surface.clear_error()
        text = content.strip()
        if not text:
            error = ValidationError("Enter comment text")
            self._fail("Failed to create comment", error)
            return False

        parent_id = self.store.get_reply_target()
        with logfire.span("controller.create_comment", parent_id=parent_id):
            try:
                created = await self.gateway.create(text, parent_id)
            except AdapterError as e:
                self._fail("Failed to create comment", e)
                return False

            logfire.info("Comment created", comment_id=created.id, parent_id=parent_id)
            self.store.set_reply_target(None)
            self.surface.clear_inputs()
            self.surface.show_reply_target(None)

        await self.reload()
        return True

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment (and its replies) after the user confirms.

        Declining aborts silently: no request, no error.

        Returns:
            True if the comment was deleted
        """
        prompt = f"Delete comment #{comment_id} and all replies?"
        if not await self.surface.confirm(prompt):
            logfire.info("Delete cancelled", comment_id=comment_id)
            return False

        self.surface.clear_error()
        with logfire.span("controller.delete_comment", comment_id=comment_id):
            try:
                deleted = await self.gateway.delete(comment_id)
            except AdapterError as e:
                self._fail("Failed to delete comment", e)
                return False
            logfire.info("Comment deleted", comment_id=comment_id, deleted=deleted)

        await self.reload()
        return True

    async def search(self, query: str) -> bool:
        """Filter root comments; always switches to root page 1."""
        self.store.set_search_query(query)
        logfire.info("Search updated", search=self.store.state.search_query or None)
        return await self.load_root_page(1)

    def mark_reply_target(self, comment_id: CommentId) -> None:
        """Make a comment the parent of the next created comment."""
        self.store.set_reply_target(comment_id)
        self.surface.show_reply_target(comment_id)
        self.surface.acknowledge(f"Replying to comment #{comment_id}")

    def describe_reply_target(self) -> CommentId | None:
        """Tell the user where the next comment will go."""
        target = self.store.get_reply_target()
        if target is None:
            self.surface.acknowledge(
                "No reply target: pick a comment to reply to first"
            )
        else:
            self.surface.acknowledge(f"Next comment will reply to #{target}")
        return target

    def _begin_load(self) -> int:
        self._latest_load = next(self._load_sequence)
        return self._latest_load

    def _is_current(self, sequence: int) -> bool:
        if sequence == self._latest_load:
            return True
        logfire.info(
            "Stale response discarded", sequence=sequence, latest=self._latest_load
        )
        return False

    def _show(self) -> None:
        state = self.store.state
        self.surface.show_view(
            render_view(
                self.store.get_forest(),
                self.store.view_kind,
                total_pages=self.store.total_pages,
                page=state.page,
                parent_id=state.current_parent_id,
                search_query=state.search_query,
            )
        )

    def _fail(self, action: str, error: AdapterError | DomainError) -> None:
        logfire.warn(
            "{action}",
            action=action,
            error=str(error),
            error_type=type(error).__name__,
        )
        self.surface.show_error(f"{action}: {error}")


def _require_positive(value: int, name: str) -> None:
    if value < 1:
        raise ValidationError(f"{name} must be a positive integer")
