"""Display surface contract.

The display host owns the actual output: a terminal, a web page, a test
recorder. The controller only writes into these slots and never reads layout
back from them.
"""

from abc import ABC, abstractmethod

from threadview.domain.model import ViewFragment
from threadview.domain.value import CommentId


class DisplaySurface(ABC):
    """Slots a comment tree widget writes into."""

    @abstractmethod
    def show_view(self, view: ViewFragment) -> None:
        """Replace the tree container with a rendered view."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Replace the error slot with a single message."""
        pass

    @abstractmethod
    def clear_error(self) -> None:
        pass

    @abstractmethod
    def clear_inputs(self) -> None:
        """Empty the new-comment and reply-target inputs."""
        pass

    @abstractmethod
    def show_reply_target(self, comment_id: CommentId | None) -> None:
        """Reflect the pending reply target in its field."""
        pass

    @abstractmethod
    def acknowledge(self, message: str) -> None:
        """Show a short, non-error notice to the user."""
        pass

    @abstractmethod
    async def confirm(self, prompt: str) -> bool:
        """Ask the user to confirm without blocking the event loop.

        Returns:
            True if the user accepted
        """
        pass
