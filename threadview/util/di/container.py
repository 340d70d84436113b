"""Dependency injection container."""

from typing import Optional

from dishka import AsyncContainer, make_async_container

from threadview.application import DisplaySurface
from threadview.config import Settings
from threadview.util.di import PROVIDERS, get_provider


def create_container(
    surface: DisplaySurface, settings: Optional[Settings] = None
) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        surface: Display host the controller writes into
        settings: Client settings (loaded from the environment if omitted)

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances,
        context={
            Settings: settings or Settings(),
            DisplaySurface: surface,
        },
    )
