"""Unit tests for the admin bootstrap on login."""

import pytest

from forum.config import AuthSettings
from forum.domain.repository import PrincipalRepository
from forum.domain.service import BootstrapService
from forum.domain.value import ExternalIdentity, GlobalRank
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def identity(user_id: str, name: str = "someone", avatar: str | None = None):
    return ExternalIdentity(provider_user_id=user_id, display_name=name, avatar_url=avatar)


class TestBootstrap:
    """Tests for BootstrapService.bootstrap."""

    @pytest.mark.asyncio
    async def test_first_login_becomes_admin(self, unit_env):
        service = await unit_env.get(BootstrapService)

        first = await service.bootstrap(identity("u1", "first"))
        second = await service.bootstrap(identity("u2", "second"))

        assert first.rank is GlobalRank.ADMIN
        assert second.rank is GlobalRank.MEMBER

    @pytest.mark.asyncio
    async def test_relogin_never_lowers_rank(self, unit_env):
        service = await unit_env.get(BootstrapService)

        await service.bootstrap(identity("u1"))
        await service.bootstrap(identity("u2"))
        again = await service.bootstrap(identity("u1"))

        assert again.rank is GlobalRank.ADMIN

    @pytest.mark.asyncio
    async def test_relogin_refreshes_profile(self, unit_env):
        service = await unit_env.get(BootstrapService)

        first = await service.bootstrap(identity("u1", "old name", "https://a/1.png"))
        again = await service.bootstrap(identity("u1", "new name", None))

        assert again.id == first.id
        assert again.display_name == "new name"
        assert again.avatar_url is None

    @pytest.mark.asyncio
    async def test_designated_admin_elevated_even_when_admin_exists(self, unit_env):
        repo = await unit_env.get(PrincipalRepository)
        service = BootstrapService(
            principal_repository=repo,
            auth_settings=AuthSettings(designated_admin_id="boss"),
        )

        first = await service.bootstrap(identity("u1"))
        member = await service.bootstrap(identity("u2"))
        boss = await service.bootstrap(identity("boss"))

        assert first.rank is GlobalRank.ADMIN
        assert member.rank is GlobalRank.MEMBER
        assert boss.rank is GlobalRank.ADMIN
        assert await repo.count_with_rank_at_least(GlobalRank.ADMIN) == 2

    @pytest.mark.asyncio
    async def test_designated_admin_does_not_block_first_login(self, unit_env):
        """With a designated id configured, the first login still becomes admin."""
        repo = await unit_env.get(PrincipalRepository)
        service = BootstrapService(
            principal_repository=repo,
            auth_settings=AuthSettings(designated_admin_id="boss"),
        )

        first = await service.bootstrap(identity("u1"))

        assert first.rank is GlobalRank.ADMIN
