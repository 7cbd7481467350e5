"""Role hierarchy: effective capabilities of a principal at a scope."""

from uuid import UUID

import logfire

from forum.domain.error import ForbiddenError
from forum.domain.model import Principal
from forum.domain.repository import MembershipRepository
from forum.domain.value import (
    Capabilities,
    CommunityId,
    CommunityRank,
    GlobalRank,
    PrincipalId,
)

from .base import Service


def capabilities(
    principal: Principal | None,
    community_rank: CommunityRank,
    content_owner_id: PrincipalId | None,
) -> Capabilities:
    """Compute what ``principal`` may do with a piece of content.

    Pure function of the principal's stored ranks. Global and community
    ranks are checked against their own thresholds only.

    Args:
        principal: Acting principal, None for an anonymous visitor
        community_rank: Principal's rank in the content's community
        content_owner_id: Author of the content (None when there is none)

    Returns:
        Capability set
    """
    if principal is None:
        # No identity: no ownership and rank 0 in every scope
        return Capabilities(
            can_edit_own_content=False,
            can_delete=False,
            can_manage_members=False,
        )

    is_owner = content_owner_id is not None and principal.id == content_owner_id
    is_global_admin = principal.rank >= GlobalRank.ADMIN
    is_community_admin = community_rank >= CommunityRank.ADMIN
    is_community_owner = community_rank >= CommunityRank.OWNER

    return Capabilities(
        can_edit_own_content=is_owner,
        can_delete=is_owner or is_global_admin or is_community_admin,
        can_manage_members=is_community_owner or is_global_admin,
    )


class PermissionService(Service):
    """Domain service evaluating capabilities against the live ledger.

    Ranks can change between requests, so nothing here is cached: every
    call reads the membership row again.
    """

    def __init__(self, membership_repository: MembershipRepository) -> None:
        """Initialize permission service.

        Args:
            membership_repository: Membership repository
        """
        self.membership_repository = membership_repository

    async def get_community_rank(
        self, principal: Principal | None, community_id: CommunityId
    ) -> CommunityRank:
        """Current community rank of ``principal`` (NONE without a row)."""
        if principal is None:
            return CommunityRank.NONE
        membership = await self.membership_repository.find(community_id, principal.id)
        return membership.rank if membership else CommunityRank.NONE

    async def capabilities(
        self,
        principal: Principal | None,
        community_id: CommunityId,
        content_owner_id: PrincipalId | None,
    ) -> Capabilities:
        """Evaluate capabilities of ``principal`` in ``community_id``.

        Args:
            principal: Acting principal, None for anonymous
            community_id: Scope to evaluate
            content_owner_id: Author of the content being acted on

        Returns:
            Capability set
        """
        with logfire.span(
            "permission_service.capabilities",
            principal_id=str(principal.id) if principal else None,
            community_id=str(community_id),
        ):
            community_rank = await self.get_community_rank(principal, community_id)
            result = capabilities(principal, community_rank, content_owner_id)
            logfire.debug(
                "Capabilities evaluated",
                global_rank=principal.rank.name if principal else GlobalRank.ANONYMOUS.name,
                community_rank=community_rank.name,
                can_delete=result.can_delete,
                can_manage_members=result.can_manage_members,
            )
            return result

    def require_global_admin(
        self,
        principal: Principal | None,
        action: str,
        resource: str,
        resource_id: UUID | str,
    ) -> None:
        """Raise ForbiddenError unless ``principal`` is a global admin.

        Raises:
            ForbiddenError: If the principal is anonymous or below global admin
        """
        if principal is not None and principal.rank >= GlobalRank.ADMIN:
            return
        logfire.warn(
            "Global admin required",
            action=action,
            resource=resource,
            principal_id=str(principal.id) if principal else None,
        )
        raise ForbiddenError(
            action,
            resource,
            str(resource_id),
            str(principal.id) if principal else None,
        )
