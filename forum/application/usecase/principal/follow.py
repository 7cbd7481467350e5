"""Follow / unfollow use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import FollowService, PrincipalService
from forum.domain.value import LedgerOutcome, PrincipalId


class FollowRequest(BaseModel):
    """Follow or unfollow a principal on behalf of the caller."""

    target_id: str  # UUID string
    actor_id: str | None = None


class FollowResponse(BaseModel):
    """Follow ledger outcome."""

    outcome: LedgerOutcome


class _FollowUseCase(BaseUseCase):
    def __init__(
        self, follow_service: FollowService, principal_service: PrincipalService
    ) -> None:
        """Initialize follow use case.

        Args:
            follow_service: Follow domain service
            principal_service: Principal domain service
        """
        self.follow_service = follow_service
        self.principal_service = principal_service


class FollowUseCase(_FollowUseCase):
    """Use case for following another principal."""

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Follow the target; following twice changes nothing.

        Raises:
            ForbiddenError: If the caller is anonymous
            ValidationError: If the caller targets itself
            NotFoundError: If the target does not exist
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        outcome = await self.follow_service.follow(
            actor, PrincipalId(UUID(request.target_id))
        )
        return FollowResponse(outcome=outcome)


class UnfollowUseCase(_FollowUseCase):
    """Use case for unfollowing a principal."""

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Unfollow the target.

        Raises:
            ForbiddenError: If the caller is anonymous
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        outcome = await self.follow_service.unfollow(
            actor, PrincipalId(UUID(request.target_id))
        )
        return FollowResponse(outcome=outcome)
