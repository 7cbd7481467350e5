"""Get community use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.community.common import CommunityItem, MemberItem
from forum.domain.service import (
    CommunityService,
    MembershipService,
    PermissionService,
    PrincipalService,
)
from forum.domain.value import CommunityId, CommunityRank


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: str  # UUID string
    actor_id: str | None = None  # Viewer, None for anonymous


class GetCommunityResponse(BaseModel):
    """Community page: details, roster and the viewer's standing."""

    community: CommunityItem
    owners: list[MemberItem]
    admins: list[MemberItem]
    members: list[MemberItem]
    viewer_rank: str
    is_subscribed: bool
    can_manage_members: bool
    unsubscribe_forfeits_rank: bool  # Show a warning before unsubscribing


class GetCommunityUseCase(BaseUseCase):
    """Use case for viewing an approved community."""

    def __init__(
        self,
        community_service: CommunityService,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize get community use case.

        Args:
            community_service: Community domain service
            membership_service: Membership ledger domain service
            permission_service: Permission domain service
            principal_service: Principal domain service
        """
        self.community_service = community_service
        self.membership_service = membership_service
        self.permission_service = permission_service
        self.principal_service = principal_service

    async def execute(self, request: GetCommunityRequest) -> GetCommunityResponse:
        """Execute get community flow.

        Raises:
            NotFoundError: If the community is missing or unapproved
        """
        community_id = CommunityId(UUID(request.community_id))
        community = await self.community_service.get_visible_community(community_id)
        viewer = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )

        roster = await self.membership_service.roster(community_id)
        rank = await self.permission_service.get_community_rank(viewer, community_id)
        caps = await self.permission_service.capabilities(
            viewer, community_id, content_owner_id=None
        )

        return GetCommunityResponse(
            community=CommunityItem.from_community(community),
            owners=[MemberItem.from_principal(p) for p in roster.owners],
            admins=[MemberItem.from_principal(p) for p in roster.admins],
            members=[MemberItem.from_principal(p) for p in roster.members],
            viewer_rank=rank.name,
            is_subscribed=rank >= CommunityRank.SUBSCRIBER,
            can_manage_members=caps.can_manage_members,
            unsubscribe_forfeits_rank=rank >= CommunityRank.ADMIN,
        )
