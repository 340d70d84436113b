"""Domain layer DI providers."""

from dishka import Scope, provide

from threadview.domain.service import CommentStore
from threadview.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    One container backs one widget, so the store lives for the whole APP scope.
    """

    scope = Scope.APP

    @provide
    def get_comment_store(self) -> CommentStore:
        """Provide the widget's comment store."""
        return CommentStore()
