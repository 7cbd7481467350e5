"""Approve community use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import CommunityService, PrincipalService
from forum.domain.value import CommunityId


class ApproveCommunityRequest(BaseModel):
    """Approve community request."""

    community_id: str  # UUID string
    actor_id: str | None = None


class ApproveCommunityResponse(BaseModel):
    """Approve community response."""

    community_id: str
    approved: bool  # False when the community was already approved


class ApproveCommunityUseCase(BaseUseCase):
    """Use case for a global admin approving a suggested community."""

    def __init__(
        self,
        community_service: CommunityService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize approve community use case.

        Args:
            community_service: Community domain service
            principal_service: Principal domain service
        """
        self.community_service = community_service
        self.principal_service = principal_service

    async def execute(self, request: ApproveCommunityRequest) -> ApproveCommunityResponse:
        """Approve the community.

        Raises:
            ForbiddenError: If the actor is not a global admin
            NotFoundError: If the community does not exist
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        changed = await self.community_service.approve_community(
            CommunityId(UUID(request.community_id)), actor
        )
        return ApproveCommunityResponse(
            community_id=request.community_id, approved=changed
        )
