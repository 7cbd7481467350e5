"""Unit tests for MembershipService (the membership ledger)."""

from uuid import uuid4

import pytest

from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.repository import MembershipRepository, PrincipalRepository
from forum.domain.service import MembershipService
from forum.domain.value import (
    CommunityId,
    CommunityRank,
    GlobalRank,
    LedgerOutcome,
    PrincipalId,
)
from tests.conftest import seed_community, seed_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestSubscribe:
    """Tests for subscribe."""

    @pytest.mark.asyncio
    async def test_subscribe_creates_subscriber_row(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)

        outcome = await service.subscribe(community.id, principal.id)

        assert outcome is LedgerOutcome.APPLIED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.SUBSCRIBER
        assert await service.is_subscribed(community.id, principal.id)

    @pytest.mark.asyncio
    async def test_subscribe_twice_is_idempotent(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)

        await service.subscribe(community.id, principal.id)
        outcome = await service.subscribe(community.id, principal.id)

        assert outcome is LedgerOutcome.UNCHANGED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.SUBSCRIBER

    @pytest.mark.asyncio
    async def test_subscribe_never_lowers_owner(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)
        await service.grant_community_owner(community.id, principal.id)

        outcome = await service.subscribe(community.id, principal.id)

        assert outcome is LedgerOutcome.UNCHANGED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.OWNER

    @pytest.mark.asyncio
    async def test_subscribe_to_unapproved_community_is_rejected(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env, approved=False)
        principal = await seed_principal(unit_env)

        with pytest.raises(ValidationError):
            await service.subscribe(community.id, principal.id)

        assert await service.get_rank(community.id, principal.id) is CommunityRank.NONE

    @pytest.mark.asyncio
    async def test_subscribe_to_missing_community(self, unit_env):
        service = await unit_env.get(MembershipService)
        principal = await seed_principal(unit_env)

        with pytest.raises(NotFoundError):
            await service.subscribe(CommunityId(uuid4()), principal.id)


class TestGrants:
    """Tests for admin and owner grants."""

    @pytest.mark.asyncio
    async def test_grant_admin_to_subscriber(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)
        await service.subscribe(community.id, principal.id)

        outcome = await service.grant_community_admin(community.id, principal.id)

        assert outcome is LedgerOutcome.APPLIED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.ADMIN

    @pytest.mark.asyncio
    async def test_grant_admin_never_lowers_owner(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)
        await service.grant_community_owner(community.id, principal.id)

        outcome = await service.grant_community_admin(community.id, principal.id)

        assert outcome is LedgerOutcome.UNCHANGED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.OWNER

    @pytest.mark.asyncio
    async def test_grant_owner_without_prior_membership(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)

        outcome = await service.grant_community_owner(community.id, principal.id)

        assert outcome is LedgerOutcome.APPLIED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.OWNER

    @pytest.mark.asyncio
    async def test_grant_to_unknown_principal(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)

        with pytest.raises(NotFoundError):
            await service.grant_community_admin(community.id, PrincipalId(uuid4()))


class TestDemoteAdmin:
    """Tests for demote_admin."""

    @pytest.mark.asyncio
    async def test_owner_demotes_admin(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        owner = await seed_principal(unit_env, "owner")
        admin = await seed_principal(unit_env, "admin")
        await service.grant_community_owner(community.id, owner.id)
        await service.grant_community_admin(community.id, admin.id)

        outcome = await service.demote_admin(community.id, admin.id, owner)

        assert outcome is LedgerOutcome.APPLIED
        assert await service.get_rank(community.id, admin.id) is CommunityRank.SUBSCRIBER

    @pytest.mark.asyncio
    async def test_owner_is_never_demoted(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        site_admin = await seed_principal(unit_env, "root", rank=GlobalRank.ADMIN)
        owner = await seed_principal(unit_env, "owner")
        await service.grant_community_owner(community.id, owner.id)

        outcome = await service.demote_admin(community.id, owner.id, site_admin)

        assert outcome is LedgerOutcome.UNCHANGED
        assert await service.get_rank(community.id, owner.id) is CommunityRank.OWNER

    @pytest.mark.asyncio
    async def test_demoting_subscriber_is_noop(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        site_admin = await seed_principal(unit_env, "root", rank=GlobalRank.ADMIN)
        member = await seed_principal(unit_env, "member")
        await service.subscribe(community.id, member.id)

        outcome = await service.demote_admin(community.id, member.id, site_admin)

        assert outcome is LedgerOutcome.UNCHANGED
        assert await service.get_rank(community.id, member.id) is CommunityRank.SUBSCRIBER

    @pytest.mark.asyncio
    async def test_community_admin_cannot_demote(self, unit_env):
        """Only owners and global admins manage members; nothing is written."""
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        admin_a = await seed_principal(unit_env, "a")
        admin_b = await seed_principal(unit_env, "b")
        await service.grant_community_admin(community.id, admin_a.id)
        await service.grant_community_admin(community.id, admin_b.id)

        with pytest.raises(ForbiddenError):
            await service.demote_admin(community.id, admin_b.id, admin_a)

        assert await service.get_rank(community.id, admin_b.id) is CommunityRank.ADMIN

    @pytest.mark.asyncio
    async def test_anonymous_cannot_demote(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        admin = await seed_principal(unit_env)
        await service.grant_community_admin(community.id, admin.id)

        with pytest.raises(ForbiddenError):
            await service.demote_admin(community.id, admin.id, None)


class TestUnsubscribe:
    """Tests for unsubscribe and forfeits_rank."""

    @pytest.mark.asyncio
    async def test_unsubscribe_drops_elevated_rank(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)
        await service.grant_community_admin(community.id, principal.id)

        assert await service.forfeits_rank(community.id, principal.id)
        outcome = await service.unsubscribe(community.id, principal.id)

        assert outcome is LedgerOutcome.APPLIED
        assert await service.get_rank(community.id, principal.id) is CommunityRank.NONE
        assert not await service.forfeits_rank(community.id, principal.id)

    @pytest.mark.asyncio
    async def test_subscriber_does_not_forfeit(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)
        await service.subscribe(community.id, principal.id)

        assert not await service.forfeits_rank(community.id, principal.id)

    @pytest.mark.asyncio
    async def test_unsubscribe_without_row(self, unit_env):
        service = await unit_env.get(MembershipService)

        outcome = await service.unsubscribe(CommunityId(uuid4()), PrincipalId(uuid4()))

        assert outcome is LedgerOutcome.UNCHANGED


class TestSetGlobalAdmin:
    """Tests for set_global_admin."""

    @pytest.mark.asyncio
    async def test_set_global_admin(self, unit_env):
        service = await unit_env.get(MembershipService)
        principals = await unit_env.get(PrincipalRepository)
        principal = await seed_principal(unit_env)

        outcome = await service.set_global_admin(principal.id)
        again = await service.set_global_admin(principal.id)

        stored = await principals.find_by_id(principal.id)
        assert outcome is LedgerOutcome.APPLIED
        assert again is LedgerOutcome.UNCHANGED
        assert stored.rank is GlobalRank.ADMIN

    @pytest.mark.asyncio
    async def test_global_rank_is_independent_of_community_rank(self, unit_env):
        service = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        principal = await seed_principal(unit_env)
        await service.subscribe(community.id, principal.id)

        await service.set_global_admin(principal.id)

        assert await service.get_rank(community.id, principal.id) is CommunityRank.SUBSCRIBER

    @pytest.mark.asyncio
    async def test_unknown_principal(self, unit_env):
        service = await unit_env.get(MembershipService)

        with pytest.raises(NotFoundError):
            await service.set_global_admin(PrincipalId(uuid4()))


class TestRoster:
    """Tests for the community roster."""

    @pytest.mark.asyncio
    async def test_roster_groups_and_sorts_by_name(self, unit_env):
        service = await unit_env.get(MembershipService)
        memberships = await unit_env.get(MembershipRepository)
        community = await seed_community(unit_env)
        zed = await seed_principal(unit_env, "zed")
        amy = await seed_principal(unit_env, "Amy")
        bob = await seed_principal(unit_env, "bob")
        owner = await seed_principal(unit_env, "owner")
        mod = await seed_principal(unit_env, "mod")
        for member in (zed, amy, bob):
            await service.subscribe(community.id, member.id)
        await service.grant_community_owner(community.id, owner.id)
        await service.grant_community_admin(community.id, mod.id)

        roster = await service.roster(community.id)

        assert [p.display_name for p in roster.owners] == ["owner"]
        assert [p.display_name for p in roster.admins] == ["mod"]
        assert [p.display_name for p in roster.members] == ["Amy", "bob", "zed"]
        assert len(await memberships.find_by_community(community.id)) == 5
