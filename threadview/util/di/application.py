"""Application layer DI providers."""

from dishka import Scope, from_context, provide

from threadview.application import CommentTreeController, DisplaySurface
from threadview.domain.gateway import CommentGateway
from threadview.domain.service import CommentStore
from threadview.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    The display surface belongs to the host and arrives as container context.
    """

    surface = from_context(provides=DisplaySurface, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_comment_tree_controller(
        self,
        gateway: CommentGateway,
        store: CommentStore,
        surface: DisplaySurface,
    ) -> CommentTreeController:
        """Provide the comment tree controller."""
        return CommentTreeController(gateway=gateway, store=store, surface=surface)
