"""In-memory principal repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence
from uuid import uuid4

from forum.domain.model.principal import Principal
from forum.domain.repository.principal import PrincipalRepository
from forum.domain.value import ExternalIdentity, GlobalRank, PrincipalId


class InMemoryPrincipalRepository(PrincipalRepository):
    """In-memory implementation of PrincipalRepository for testing."""

    def __init__(self) -> None:
        self._principals: dict[PrincipalId, Principal] = {}

    async def find_by_id(self, principal_id: PrincipalId) -> Optional[Principal]:
        """Find a principal by ID."""
        return self._principals.get(principal_id)

    async def find_by_external_id(self, external_id: str) -> Optional[Principal]:
        """Find a principal by identity provider user id."""
        for principal in self._principals.values():
            if principal.external_id == external_id:
                return principal
        return None

    async def find_by_ids(self, principal_ids: Sequence[PrincipalId]) -> list[Principal]:
        """Find all principals with the given IDs."""
        return [self._principals[pid] for pid in principal_ids if pid in self._principals]

    async def count_with_rank_at_least(self, rank: GlobalRank) -> int:
        """Count principals whose global rank is at least ``rank``."""
        return sum(1 for p in self._principals.values() if p.rank >= rank)

    async def upsert_identity(
        self, identity: ExternalIdentity, rank: GlobalRank
    ) -> Principal:
        """Insert or refresh a principal keyed by external id."""
        now = datetime.now(timezone.utc)
        existing = await self.find_by_external_id(identity.provider_user_id)
        if existing:
            principal = existing.model_copy(
                update={
                    "display_name": identity.display_name,
                    "avatar_url": identity.avatar_url,
                    "rank": max(existing.rank, rank),
                    "updated_at": now,
                }
            )
        else:
            principal = Principal(
                id=PrincipalId(uuid4()),
                external_id=identity.provider_user_id,
                display_name=identity.display_name,
                avatar_url=identity.avatar_url,
                rank=rank,
                created_at=now,
                updated_at=now,
            )
        self._principals[principal.id] = principal
        return principal

    async def set_rank(self, principal_id: PrincipalId, rank: GlobalRank) -> bool:
        """Overwrite a principal's global rank."""
        principal = self._principals.get(principal_id)
        if not principal or principal.rank == rank:
            return False
        self._principals[principal_id] = principal.model_copy(
            update={"rank": rank, "updated_at": datetime.now(timezone.utc)}
        )
        return True

    async def search_by_name(self, query: str, limit: int = 20) -> list[Principal]:
        """Case-insensitive substring search on display names."""
        needle = query.casefold()
        matches = [
            p for p in self._principals.values() if needle in p.display_name.casefold()
        ]
        matches.sort(key=lambda p: p.display_name)
        return matches[:limit]

    async def save(self, principal: Principal) -> Principal:
        """Store a principal directly (test seeding only)."""
        self._principals[principal.id] = principal
        return principal
