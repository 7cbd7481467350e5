"""In-memory membership repository for testing."""

from typing import Optional

from forum.domain.model.membership import Membership
from forum.domain.repository.membership import MembershipRepository
from forum.domain.value import CommunityId, CommunityRank, PrincipalId


class InMemoryMembershipRepository(MembershipRepository):
    """In-memory implementation of MembershipRepository for testing.

    Rows are keyed by (community, principal), mirroring the unique
    constraint of the real table.
    """

    def __init__(self) -> None:
        self._memberships: dict[tuple[CommunityId, PrincipalId], Membership] = {}

    async def find(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> Optional[Membership]:
        """Find the membership row for a principal in a community."""
        return self._memberships.get((community_id, principal_id))

    async def find_by_community(self, community_id: CommunityId) -> list[Membership]:
        """Find all membership rows of a community, highest rank first."""
        rows = [m for m in self._memberships.values() if m.community_id == community_id]
        return sorted(rows, key=lambda m: m.rank.value, reverse=True)

    async def find_by_principal(self, principal_id: PrincipalId) -> list[Membership]:
        """Find every membership row held by a principal."""
        return [m for m in self._memberships.values() if m.principal_id == principal_id]

    def _store(
        self, community_id: CommunityId, principal_id: PrincipalId, rank: CommunityRank
    ) -> None:
        self._memberships[(community_id, principal_id)] = Membership(
            community_id=community_id, principal_id=principal_id, rank=rank
        )

    async def merge_rank(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        rank: CommunityRank,
    ) -> bool:
        """Insert a row or raise the stored rank (monotonic max)."""
        existing = self._memberships.get((community_id, principal_id))
        if existing and existing.rank >= rank:
            return False
        self._store(community_id, principal_id, rank)
        return True

    async def overwrite_rank(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        rank: CommunityRank,
    ) -> bool:
        """Insert a row or overwrite the stored rank."""
        existing = self._memberships.get((community_id, principal_id))
        if existing and existing.rank == rank:
            return False
        self._store(community_id, principal_id, rank)
        return True

    async def replace_rank_if(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        expected: CommunityRank,
        rank: CommunityRank,
    ) -> bool:
        """Set the rank only when the stored rank equals ``expected``."""
        existing = self._memberships.get((community_id, principal_id))
        if not existing or existing.rank != expected:
            return False
        self._store(community_id, principal_id, rank)
        return True

    async def delete(self, community_id: CommunityId, principal_id: PrincipalId) -> bool:
        """Delete a membership row regardless of its rank."""
        return self._memberships.pop((community_id, principal_id), None) is not None

    async def delete_by_community(self, community_id: CommunityId) -> int:
        """Delete every membership row of a community."""
        keys = [k for k in self._memberships if k[0] == community_id]
        for key in keys:
            del self._memberships[key]
        return len(keys)
