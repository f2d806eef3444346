"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is reachable at DATABASE__URL.
"""

import httpx
import pytest_asyncio

from debatify.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_vote(unit_env):
            service = await unit_env.get(EngagementService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for an HTTP client fixture backed by a test container.

    Yields ``(client, container)``; the container is the APP-scoped one, so
    tests can reach shared mocks such as ``MockEmailSender``.
    """

    @pytest_asyncio.fixture
    async def _client():
        from debatify.interface.api.app import create_app

        container = build_test_container(unmock=unmock or set())
        app = create_app(container)

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            yield client, container

        await container.close()

    return _client
