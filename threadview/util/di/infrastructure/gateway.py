"""Comment gateway infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from threadview.adapter.http import HttpCommentGateway
from threadview.config import CommentServiceSettings
from threadview.domain.gateway import CommentGateway
from threadview.util.di.base import ProviderBase
from threadview.util.error import ConfigurationError


class GatewayProvider(ProviderBase):
    """Comment gateway component base."""

    __mock_component__ = "gateway"


class ProdGatewayProvider(GatewayProvider):
    """Production gateway provider talking HTTP to the comment service."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: CommentServiceSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared httpx client, closed with the container.

        Raises:
            ConfigurationError: If the configured timeout is not positive
        """
        client_kwargs = {"base_url": settings.base_url}
        if settings.timeout is not None:
            if settings.timeout <= 0:
                raise ConfigurationError("Comment service timeout must be positive")
            client_kwargs["timeout"] = settings.timeout

        async with httpx.AsyncClient(**client_kwargs) as client:
            logfire.info("Comment service client opened", base_url=settings.base_url)
            yield client

    @provide(scope=Scope.APP)
    def get_comment_gateway(self, client: httpx.AsyncClient) -> CommentGateway:
        """Provide HTTP comment gateway."""
        return HttpCommentGateway(client)
