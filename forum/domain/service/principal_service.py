"""Principal domain service."""

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Principal
from forum.domain.repository import PrincipalRepository
from forum.domain.value import PrincipalId

from .base import Service


class PrincipalService(Service):
    """Domain service for principal lookups."""

    def __init__(self, principal_repository: PrincipalRepository) -> None:
        """Initialize principal service.

        Args:
            principal_repository: Principal repository
        """
        self.principal_repository = principal_repository

    async def get_by_id(self, principal_id: PrincipalId) -> Principal:
        """Get principal by ID.

        Raises:
            NotFoundError: If principal not found
        """
        principal = await self.principal_repository.find_by_id(principal_id)
        if not principal:
            logfire.warn("Principal not found", principal_id=str(principal_id))
            raise NotFoundError("Principal", str(principal_id))
        return principal

    async def resolve_actor(self, principal_id: PrincipalId | None) -> Principal | None:
        """Resolve the acting principal of a request.

        Anonymous requests (no id) resolve to None.

        Raises:
            NotFoundError: If an id is given but no principal has it
        """
        if principal_id is None:
            return None
        return await self.get_by_id(principal_id)

    async def get_by_external_id(self, external_id: str) -> Principal | None:
        """Get principal by identity provider id, None when unknown."""
        return await self.principal_repository.find_by_external_id(external_id)

    async def search_by_name(self, query: str, limit: int = 20) -> list[Principal]:
        """Find principals by partial display name, ignoring case.

        A blank query matches nobody rather than everybody.
        """
        query = query.strip()
        if not query:
            return []
        return await self.principal_repository.search_by_name(query, limit=limit)
