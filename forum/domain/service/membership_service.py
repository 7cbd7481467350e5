"""Membership ledger domain service.

Every mutation maps onto exactly one atomic storage primitive (insert or
max-merge, insert or overwrite, conditional update, delete), so repeated
or concurrent calls never leave a partially applied rank behind.
"""

from dataclasses import dataclass, field

import logfire

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import Principal
from forum.domain.repository import MembershipRepository, PrincipalRepository
from forum.domain.value import (
    CommunityId,
    CommunityRank,
    GlobalRank,
    LedgerOutcome,
    PrincipalId,
)

from .base import Service
from .community_service import CommunityService
from .permission_service import PermissionService


def _outcome(changed: bool) -> LedgerOutcome:
    return LedgerOutcome.APPLIED if changed else LedgerOutcome.UNCHANGED


@dataclass
class CommunityRoster:
    """Members of a community grouped by role."""

    owners: list[Principal] = field(default_factory=list)
    admins: list[Principal] = field(default_factory=list)
    members: list[Principal] = field(default_factory=list)


class MembershipService(Service):
    """Domain service for per-community ranks and global admin assignment."""

    def __init__(
        self,
        membership_repository: MembershipRepository,
        principal_repository: PrincipalRepository,
        community_service: CommunityService,
        permission_service: PermissionService,
    ) -> None:
        """Initialize membership service.

        Args:
            membership_repository: Membership repository
            principal_repository: Principal repository
            community_service: Community lookups and approval checks
            permission_service: Capability evaluation
        """
        self.membership_repository = membership_repository
        self.principal_repository = principal_repository
        self.community_service = community_service
        self.permission_service = permission_service

    async def _require_principal(self, principal_id: PrincipalId) -> Principal:
        principal = await self.principal_repository.find_by_id(principal_id)
        if not principal:
            logfire.warn("Principal not found", principal_id=str(principal_id))
            raise NotFoundError("Principal", str(principal_id))
        return principal

    async def get_rank(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> CommunityRank:
        """Current rank of a principal in a community (NONE without a row)."""
        membership = await self.membership_repository.find(community_id, principal_id)
        return membership.rank if membership else CommunityRank.NONE

    async def is_subscribed(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> bool:
        """Whether the principal holds at least subscriber rank."""
        rank = await self.get_rank(community_id, principal_id)
        return rank >= CommunityRank.SUBSCRIBER

    async def forfeits_rank(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> bool:
        """Whether unsubscribing would drop an elevated community rank."""
        rank = await self.get_rank(community_id, principal_id)
        return rank >= CommunityRank.ADMIN

    async def subscribe(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> LedgerOutcome:
        """Ensure the principal holds at least subscriber rank.

        Never lowers an existing higher rank.

        Raises:
            NotFoundError: If the community does not exist
            ValidationError: If the community is not approved
        """
        with logfire.span(
            "membership_service.subscribe",
            community_id=str(community_id),
            principal_id=str(principal_id),
        ):
            await self.community_service.get_open_community(community_id)
            changed = await self.membership_repository.merge_rank(
                community_id, principal_id, CommunityRank.SUBSCRIBER
            )
            logfire.info("Subscribed", changed=changed)
            return _outcome(changed)

    async def unsubscribe(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> LedgerOutcome:
        """Remove the membership row entirely.

        This drops any elevated rank along with the subscription; see
        ``forfeits_rank`` to warn the principal first.
        """
        with logfire.span(
            "membership_service.unsubscribe",
            community_id=str(community_id),
            principal_id=str(principal_id),
        ):
            removed = await self.membership_repository.delete(community_id, principal_id)
            logfire.info("Unsubscribed", removed=removed)
            return _outcome(removed)

    async def grant_community_admin(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> LedgerOutcome:
        """Ensure the principal holds at least community admin rank.

        Raises:
            NotFoundError: If the community or principal does not exist
        """
        with logfire.span(
            "membership_service.grant_community_admin",
            community_id=str(community_id),
            principal_id=str(principal_id),
        ):
            await self.community_service.get_by_id(community_id)
            await self._require_principal(principal_id)
            changed = await self.membership_repository.merge_rank(
                community_id, principal_id, CommunityRank.ADMIN
            )
            logfire.info("Community admin granted", changed=changed)
            return _outcome(changed)

    async def grant_community_owner(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> LedgerOutcome:
        """Set the principal's community rank to owner, unconditionally.

        Raises:
            NotFoundError: If the community or principal does not exist
        """
        with logfire.span(
            "membership_service.grant_community_owner",
            community_id=str(community_id),
            principal_id=str(principal_id),
        ):
            await self.community_service.get_by_id(community_id)
            await self._require_principal(principal_id)
            changed = await self.membership_repository.overwrite_rank(
                community_id, principal_id, CommunityRank.OWNER
            )
            logfire.info("Community owner granted", changed=changed)
            return _outcome(changed)

    async def demote_admin(
        self,
        community_id: CommunityId,
        target_id: PrincipalId,
        actor: Principal | None,
    ) -> LedgerOutcome:
        """Demote a community admin back to subscriber.

        Only a row currently at admin rank is touched: owners cannot be
        demoted through this path and lower ranks are left alone.

        Raises:
            NotFoundError: If the community does not exist
            ForbiddenError: If the actor cannot manage members here
        """
        with logfire.span(
            "membership_service.demote_admin",
            community_id=str(community_id),
            target_id=str(target_id),
            actor_id=str(actor.id) if actor else None,
        ):
            await self.community_service.get_by_id(community_id)
            caps = await self.permission_service.capabilities(
                actor, community_id, content_owner_id=None
            )
            if not caps.can_manage_members:
                logfire.warn(
                    "Demotion rejected - cannot manage members",
                    actor_id=str(actor.id) if actor else None,
                )
                raise ForbiddenError(
                    "demote admin in",
                    "community",
                    str(community_id),
                    str(actor.id) if actor else None,
                )

            changed = await self.membership_repository.replace_rank_if(
                community_id,
                target_id,
                expected=CommunityRank.ADMIN,
                rank=CommunityRank.SUBSCRIBER,
            )
            logfire.info("Community admin demoted", changed=changed)
            return _outcome(changed)

    async def set_global_admin(self, principal_id: PrincipalId) -> LedgerOutcome:
        """Set a principal's global rank to admin, unconditionally.

        Independent of any community rank.

        Raises:
            NotFoundError: If the principal does not exist
        """
        with logfire.span(
            "membership_service.set_global_admin", principal_id=str(principal_id)
        ):
            await self._require_principal(principal_id)
            changed = await self.principal_repository.set_rank(
                principal_id, GlobalRank.ADMIN
            )
            logfire.info("Global admin set", changed=changed)
            return _outcome(changed)

    async def roster(self, community_id: CommunityId) -> CommunityRoster:
        """Members of a community grouped into owners, admins and subscribers.

        Each group is sorted by display name.
        """
        with logfire.span("membership_service.roster", community_id=str(community_id)):
            memberships = await self.membership_repository.find_by_community(
                community_id
            )
            principals = await self.principal_repository.find_by_ids(
                [m.principal_id for m in memberships]
            )
            by_id = {p.id: p for p in principals}

            roster = CommunityRoster()
            for membership in memberships:
                principal = by_id.get(membership.principal_id)
                if principal is None:
                    continue
                if membership.rank >= CommunityRank.OWNER:
                    roster.owners.append(principal)
                elif membership.rank >= CommunityRank.ADMIN:
                    roster.admins.append(principal)
                elif membership.rank >= CommunityRank.SUBSCRIBER:
                    roster.members.append(principal)

            for group in (roster.owners, roster.admins, roster.members):
                group.sort(key=lambda p: p.display_name.lower())

            logfire.info(
                "Roster built",
                owners=len(roster.owners),
                admins=len(roster.admins),
                members=len(roster.members),
            )
            return roster
