"""Test harness for controller-level tests.

Unit tests run against the in-memory comment gateway. E2E tests can unmock
the gateway and point COMMENT_SERVICE__BASE_URL at a running service.
"""

import pytest_asyncio

from threadview.util.di import Component
from tests.di import build_test_container
from tests.fakes import RecordingDisplaySurface


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Records display output in a RecordingDisplaySurface
    - Yields the container for component access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_load(unit_env):
            controller = await unit_env.get(CommentTreeController)
            surface = await unit_env.get(DisplaySurface)
            await controller.load_root_page(1)
            assert surface.last_view is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(
            RecordingDisplaySurface(), unmock=unmock or set()
        )
        try:
            yield container
        finally:
            await container.close()

    return _test_environment
