"""Suggest community use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.community.common import CommunityItem
from forum.domain.service import CommunityService, PrincipalService


class SuggestCommunityRequest(BaseModel):
    """Suggest community request."""

    name: str
    description: str = ""
    actor_id: str | None = None  # Principal ID of the authenticated caller


class SuggestCommunityUseCase(BaseUseCase):
    """Use case for suggesting a new community, pending admin approval."""

    def __init__(
        self,
        community_service: CommunityService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize suggest community use case.

        Args:
            community_service: Community domain service
            principal_service: Principal domain service
        """
        self.community_service = community_service
        self.principal_service = principal_service

    async def execute(self, request: SuggestCommunityRequest) -> CommunityItem:
        """Store the suggestion as an unapproved community."""
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        community = await self.community_service.suggest_community(
            request.name, request.description, actor
        )
        return CommunityItem.from_community(community)
