"""Pytest fixtures backed by the DI container.

Every fixture yields a request-scoped container: services and repositories
resolved from it during one test share the same in-memory store (or the
same database session when persistence is unmocked).
"""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture that yields a fresh request container per test.

    Declare it at module level under the name tests ask for:

        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_subscribe(unit_env):
            service = await unit_env.get(MembershipService)

    Pass ``unmock={"persistence"}`` to run against PostgreSQL at
    ``DATABASE__URL`` with migrations applied.
    """

    @pytest_asyncio.fixture
    async def env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return env
