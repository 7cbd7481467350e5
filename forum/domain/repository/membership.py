"""Membership repository interface.

Every mutation here must be a single atomic statement against the store.
These primitives, together with the (community, principal) uniqueness
constraint, are the only concurrency control the ledger relies on.
"""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.membership import Membership
from forum.domain.value import CommunityId, CommunityRank, PrincipalId


class MembershipRepository(ABC):
    """Repository for Membership rows."""

    @abstractmethod
    async def find(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> Optional[Membership]:
        """Find the membership row for a principal in a community.

        Args:
            community_id: Community ID
            principal_id: Principal ID

        Returns:
            The membership if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_community(self, community_id: CommunityId) -> list[Membership]:
        """Find all membership rows of a community, highest rank first.

        Args:
            community_id: Community ID

        Returns:
            List of memberships
        """
        pass

    @abstractmethod
    async def find_by_principal(self, principal_id: PrincipalId) -> list[Membership]:
        """Find every membership row held by a principal.

        Args:
            principal_id: Principal ID

        Returns:
            List of memberships, one per community
        """
        pass

    @abstractmethod
    async def merge_rank(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        rank: CommunityRank,
    ) -> bool:
        """Insert a row or raise the stored rank to ``rank`` (monotonic max).

        Args:
            community_id: Community ID
            principal_id: Principal ID
            rank: Minimum rank to ensure

        Returns:
            True if a row was inserted or raised, False if the stored rank
            was already at least ``rank``
        """
        pass

    @abstractmethod
    async def overwrite_rank(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        rank: CommunityRank,
    ) -> bool:
        """Insert a row or unconditionally overwrite the stored rank.

        Args:
            community_id: Community ID
            principal_id: Principal ID
            rank: Rank to store

        Returns:
            True if the stored rank changed
        """
        pass

    @abstractmethod
    async def replace_rank_if(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        expected: CommunityRank,
        rank: CommunityRank,
    ) -> bool:
        """Set the rank only when the stored rank equals ``expected``.

        Args:
            community_id: Community ID
            principal_id: Principal ID
            expected: Rank the row must currently hold
            rank: Replacement rank

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def delete(self, community_id: CommunityId, principal_id: PrincipalId) -> bool:
        """Delete a membership row regardless of its rank.

        Args:
            community_id: Community ID
            principal_id: Principal ID

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    async def delete_by_community(self, community_id: CommunityId) -> int:
        """Delete every membership row of a community.

        Args:
            community_id: Community ID

        Returns:
            Number of rows removed
        """
        pass
