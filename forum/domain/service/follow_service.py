"""Follow domain service."""

import logfire

from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.model import Principal
from forum.domain.repository import FollowRepository, PrincipalRepository
from forum.domain.value import LedgerOutcome, PrincipalId

from .base import Service


class FollowService(Service):
    """Domain service for principals following each other.

    Following only shapes the "following" feed; it grants nothing.
    """

    def __init__(
        self,
        follow_repository: FollowRepository,
        principal_repository: PrincipalRepository,
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow ledger repository
            principal_repository: Principal repository
        """
        self.follow_repository = follow_repository
        self.principal_repository = principal_repository

    def _require_actor(
        self, actor: Principal | None, action: str, target_id: PrincipalId
    ) -> Principal:
        if actor is None:
            raise ForbiddenError(action, "principal", str(target_id), None)
        return actor

    async def follow(
        self, actor: Principal | None, target_id: PrincipalId
    ) -> LedgerOutcome:
        """Start following a principal.

        Raises:
            ForbiddenError: If the actor is anonymous
            ValidationError: If the actor targets itself
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "follow_service.follow",
            actor_id=str(actor.id) if actor else None,
            target_id=str(target_id),
        ):
            actor = self._require_actor(actor, "follow", target_id)
            if actor.id == target_id:
                raise ValidationError("Principals cannot follow themselves")
            if not await self.principal_repository.find_by_id(target_id):
                raise NotFoundError("Principal", str(target_id))

            added = await self.follow_repository.add(actor.id, target_id)
            logfire.info("Followed", changed=added)
            return LedgerOutcome.APPLIED if added else LedgerOutcome.UNCHANGED

    async def unfollow(
        self, actor: Principal | None, target_id: PrincipalId
    ) -> LedgerOutcome:
        """Stop following a principal; not following already is a no-op.

        Raises:
            ForbiddenError: If the actor is anonymous
        """
        with logfire.span(
            "follow_service.unfollow",
            actor_id=str(actor.id) if actor else None,
            target_id=str(target_id),
        ):
            actor = self._require_actor(actor, "unfollow", target_id)
            removed = await self.follow_repository.remove(actor.id, target_id)
            logfire.info("Unfollowed", changed=removed)
            return LedgerOutcome.APPLIED if removed else LedgerOutcome.UNCHANGED

    async def is_following(
        self, viewer: Principal | None, target_id: PrincipalId
    ) -> bool:
        """Whether the viewer follows the target (never for anonymous viewers)."""
        if viewer is None:
            return False
        return await self.follow_repository.exists(viewer.id, target_id)

    async def followee_ids(self, principal_id: PrincipalId) -> list[PrincipalId]:
        """Principals followed by ``principal_id``."""
        return await self.follow_repository.find_followee_ids(principal_id)
