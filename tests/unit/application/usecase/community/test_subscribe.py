"""Unit tests for subscribe / unsubscribe use cases."""

from uuid import uuid4

import pytest

from forum.application.usecase.community import (
    SubscribeUseCase,
    SubscriptionRequest,
    UnsubscribeUseCase,
)
from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.service import MembershipService
from forum.domain.value import CommunityRank, LedgerOutcome
from tests.conftest import seed_community, seed_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestSubscription:
    """Tests for SubscribeUseCase and UnsubscribeUseCase."""

    @pytest.mark.asyncio
    async def test_subscribe_then_unsubscribe(self, unit_env):
        subscribe = await unit_env.get(SubscribeUseCase)
        unsubscribe = await unit_env.get(UnsubscribeUseCase)
        community = await seed_community(unit_env)
        member = await seed_principal(unit_env)
        request = SubscriptionRequest(
            community_id=str(community.id), actor_id=str(member.id)
        )

        subscribed = await subscribe.execute(request)
        left = await unsubscribe.execute(request)
        again = await unsubscribe.execute(request)

        assert subscribed.outcome is LedgerOutcome.APPLIED
        assert left.outcome is LedgerOutcome.APPLIED
        assert not left.forfeited_rank
        assert again.outcome is LedgerOutcome.UNCHANGED

    @pytest.mark.asyncio
    async def test_admin_unsubscribing_forfeits_rank(self, unit_env):
        unsubscribe = await unit_env.get(UnsubscribeUseCase)
        memberships = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        admin = await seed_principal(unit_env)
        await memberships.grant_community_admin(community.id, admin.id)

        result = await unsubscribe.execute(
            SubscriptionRequest(community_id=str(community.id), actor_id=str(admin.id))
        )

        assert result.forfeited_rank
        assert await memberships.get_rank(community.id, admin.id) is CommunityRank.NONE

    @pytest.mark.asyncio
    async def test_anonymous_cannot_subscribe(self, unit_env):
        subscribe = await unit_env.get(SubscribeUseCase)
        community = await seed_community(unit_env)

        with pytest.raises(ForbiddenError):
            await subscribe.execute(SubscriptionRequest(community_id=str(community.id)))

    @pytest.mark.asyncio
    async def test_unknown_actor(self, unit_env):
        subscribe = await unit_env.get(SubscribeUseCase)
        community = await seed_community(unit_env)

        with pytest.raises(NotFoundError):
            await subscribe.execute(
                SubscriptionRequest(
                    community_id=str(community.id), actor_id=str(uuid4())
                )
            )
