"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from threadview.config import CommentServiceSettings, Settings
from threadview.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are passed in as container context so the CLI can apply its
    overrides on top of the environment and .env file.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_comment_service_settings(
        self, settings: Settings
    ) -> CommentServiceSettings:
        """Provide comment service settings."""
        return settings.comment_service
