"""List communities use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.community.common import CommunityItem
from forum.domain.service import CommunityService, PermissionService, PrincipalService


class ListCommunitiesRequest(BaseModel):
    """List communities request."""

    include_unapproved: bool = False  # Admin view of pending suggestions
    actor_id: str | None = None


class ListCommunitiesResponse(BaseModel):
    """List communities response."""

    communities: list[CommunityItem]
    total: int


class ListCommunitiesUseCase(BaseUseCase):
    """Use case for browsing communities alphabetically."""

    def __init__(
        self,
        community_service: CommunityService,
        principal_service: PrincipalService,
        permission_service: PermissionService,
    ) -> None:
        """Initialize list communities use case.

        Args:
            community_service: Community domain service
            principal_service: Principal domain service
            permission_service: Permission domain service
        """
        self.community_service = community_service
        self.principal_service = principal_service
        self.permission_service = permission_service

    async def execute(self, request: ListCommunitiesRequest) -> ListCommunitiesResponse:
        """List communities.

        Raises:
            ForbiddenError: If unapproved communities are requested by a
                non-admin
        """
        if request.include_unapproved:
            actor = await self.principal_service.resolve_actor(
                actor_id_from(request.actor_id)
            )
            self.permission_service.require_global_admin(
                actor, "list unapproved", "community", "*"
            )

        communities = await self.community_service.list_communities(
            include_unapproved=request.include_unapproved
        )
        items = [CommunityItem.from_community(c) for c in communities]
        return ListCommunitiesResponse(communities=items, total=len(items))
