"""Community role management use cases.

Admin and owner grants are site-administration actions reserved for global
admins. Demotion is open to anyone who can manage members of the community.
"""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.community.common import LedgerResponse
from forum.domain.service import MembershipService, PermissionService, PrincipalService
from forum.domain.value import CommunityId, PrincipalId


class CommunityRoleRequest(BaseModel):
    """Change the community rank of a target principal."""

    community_id: str  # UUID string
    target_id: str  # Principal whose rank changes
    actor_id: str | None = None


class _RoleUseCase(BaseUseCase):
    def __init__(
        self,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize role use case.

        Args:
            membership_service: Membership ledger domain service
            permission_service: Permission domain service
            principal_service: Principal domain service
        """
        self.membership_service = membership_service
        self.permission_service = permission_service
        self.principal_service = principal_service


class GrantCommunityAdminUseCase(_RoleUseCase):
    """Use case for raising a principal to community admin."""

    async def execute(self, request: CommunityRoleRequest) -> LedgerResponse:
        """Grant community admin; an owner stays owner.

        Raises:
            ForbiddenError: If the actor is not a global admin
            NotFoundError: If the community or target does not exist
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        self.permission_service.require_global_admin(
            actor, "grant admin in", "community", request.community_id
        )
        outcome = await self.membership_service.grant_community_admin(
            CommunityId(UUID(request.community_id)),
            PrincipalId(UUID(request.target_id)),
        )
        return LedgerResponse(outcome=outcome)


class GrantCommunityOwnerUseCase(_RoleUseCase):
    """Use case for making a principal owner of a community."""

    async def execute(self, request: CommunityRoleRequest) -> LedgerResponse:
        """Grant community owner.

        Raises:
            ForbiddenError: If the actor is not a global admin
            NotFoundError: If the community or target does not exist
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        self.permission_service.require_global_admin(
            actor, "grant owner in", "community", request.community_id
        )
        outcome = await self.membership_service.grant_community_owner(
            CommunityId(UUID(request.community_id)),
            PrincipalId(UUID(request.target_id)),
        )
        return LedgerResponse(outcome=outcome)


class DemoteAdminUseCase(_RoleUseCase):
    """Use case for demoting a community admin to subscriber."""

    async def execute(self, request: CommunityRoleRequest) -> LedgerResponse:
        """Demote the target if it is currently a community admin.

        Raises:
            ForbiddenError: If the actor cannot manage members
            NotFoundError: If the community does not exist
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        outcome = await self.membership_service.demote_admin(
            CommunityId(UUID(request.community_id)),
            PrincipalId(UUID(request.target_id)),
            actor,
        )
        return LedgerResponse(outcome=outcome)


class SetGlobalAdminRequest(BaseModel):
    """Set global admin request."""

    target_id: str  # UUID string
    actor_id: str | None = None


class SetGlobalAdminUseCase(_RoleUseCase):
    """Use case for a global admin promoting another principal site-wide."""

    async def execute(self, request: SetGlobalAdminRequest) -> LedgerResponse:
        """Set the target's global rank to admin.

        Raises:
            ForbiddenError: If the actor is not a global admin
            NotFoundError: If the target does not exist
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        self.permission_service.require_global_admin(
            actor, "promote", "principal", request.target_id
        )
        outcome = await self.membership_service.set_global_admin(
            PrincipalId(UUID(request.target_id))
        )
        return LedgerResponse(outcome=outcome)
