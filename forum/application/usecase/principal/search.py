"""Admin principal search use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.model import Principal
from forum.domain.service import PermissionService, PrincipalService
from forum.domain.value import GlobalRank


class PrincipalItem(BaseModel):
    """Principal listed in search results."""

    principal_id: str
    external_id: str
    display_name: str
    rank: GlobalRank

    @classmethod
    def from_principal(cls, principal: Principal) -> "PrincipalItem":
        return cls(
            principal_id=str(principal.id),
            external_id=principal.external_id,
            display_name=principal.display_name,
            rank=principal.rank,
        )


class SearchPrincipalsRequest(BaseModel):
    """Search principals by partial display name."""

    query: str = ""
    limit: int = Field(default=20, ge=1, le=20)
    actor_id: str | None = None


class SearchPrincipalsResponse(BaseModel):
    """Search principals response."""

    principals: list[PrincipalItem]
    total: int


class SearchPrincipalsUseCase(BaseUseCase):
    """Use case for global admins picking principals to promote."""

    def __init__(
        self,
        principal_service: PrincipalService,
        permission_service: PermissionService,
    ) -> None:
        """Initialize search principals use case.

        Args:
            principal_service: Principal domain service
            permission_service: Permission domain service
        """
        self.principal_service = principal_service
        self.permission_service = permission_service

    async def execute(self, request: SearchPrincipalsRequest) -> SearchPrincipalsResponse:
        """Execute principal search.

        Raises:
            ForbiddenError: If the actor is not a global admin
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        self.permission_service.require_global_admin(
            actor, "search", "principals", request.query
        )
        principals = await self.principal_service.search_by_name(
            request.query, limit=request.limit
        )
        items = [PrincipalItem.from_principal(p) for p in principals]
        return SearchPrincipalsResponse(principals=items, total=len(items))
