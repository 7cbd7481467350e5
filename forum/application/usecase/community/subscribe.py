"""Subscribe / unsubscribe use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.error import ForbiddenError
from forum.domain.service import MembershipService, PrincipalService
from forum.domain.value import CommunityId, LedgerOutcome


class SubscriptionRequest(BaseModel):
    """Subscribe or unsubscribe request for the calling principal."""

    community_id: str  # UUID string
    actor_id: str | None = None


class SubscribeResponse(BaseModel):
    """Subscribe response."""

    outcome: LedgerOutcome


class UnsubscribeResponse(BaseModel):
    """Unsubscribe response."""

    outcome: LedgerOutcome
    forfeited_rank: bool  # An admin or owner rank was dropped with the row


class _SubscriptionUseCase(BaseUseCase):
    def __init__(
        self,
        membership_service: MembershipService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize subscription use case.

        Args:
            membership_service: Membership ledger domain service
            principal_service: Principal domain service
        """
        self.membership_service = membership_service
        self.principal_service = principal_service

    async def _actor_id(self, request: SubscriptionRequest, action: str):
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        if actor is None:
            logfire.warn("Anonymous subscription change rejected", action=action)
            raise ForbiddenError(action, "community", request.community_id, None)
        return actor.id


class SubscribeUseCase(_SubscriptionUseCase):
    """Use case for subscribing the caller to a community."""

    async def execute(self, request: SubscriptionRequest) -> SubscribeResponse:
        """Subscribe; an existing higher rank is kept.

        Raises:
            ForbiddenError: If the caller is anonymous
            NotFoundError: If the community does not exist
            ValidationError: If the community is not approved
        """
        principal_id = await self._actor_id(request, "subscribe to")
        outcome = await self.membership_service.subscribe(
            CommunityId(UUID(request.community_id)), principal_id
        )
        return SubscribeResponse(outcome=outcome)


class UnsubscribeUseCase(_SubscriptionUseCase):
    """Use case for unsubscribing the caller from a community."""

    async def execute(self, request: SubscriptionRequest) -> UnsubscribeResponse:
        """Unsubscribe, dropping any elevated community rank.

        Raises:
            ForbiddenError: If the caller is anonymous
        """
        principal_id = await self._actor_id(request, "unsubscribe from")
        community_id = CommunityId(UUID(request.community_id))

        forfeits = await self.membership_service.forfeits_rank(
            community_id, principal_id
        )
        outcome = await self.membership_service.unsubscribe(community_id, principal_id)
        if forfeits and outcome is LedgerOutcome.APPLIED:
            logfire.info(
                "Elevated rank forfeited by unsubscribing",
                community_id=request.community_id,
                principal_id=str(principal_id),
            )
        return UnsubscribeResponse(
            outcome=outcome,
            forfeited_rank=forfeits and outcome is LedgerOutcome.APPLIED,
        )
