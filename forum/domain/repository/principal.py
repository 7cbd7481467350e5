"""Principal repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.principal import Principal
from forum.domain.value import ExternalIdentity, GlobalRank, PrincipalId


class PrincipalRepository(ABC):
    """Repository for Principal aggregate.

    Defines the contract for principal persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, principal_id: PrincipalId) -> Optional[Principal]:
        """Find a principal by ID.

        Args:
            principal_id: The principal's unique identifier

        Returns:
            The principal if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[Principal]:
        """Find a principal by the identity provider's stable id.

        Args:
            external_id: Provider user id

        Returns:
            The principal if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, principal_ids: Sequence[PrincipalId]) -> list[Principal]:
        """Find several principals in a single query.

        Args:
            principal_ids: IDs to look up

        Returns:
            Principals found (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def count_with_rank_at_least(self, rank: GlobalRank) -> int:
        """Count principals whose global rank is at least ``rank``.

        Args:
            rank: Minimum global rank

        Returns:
            Number of matching principals
        """
        pass

    @abstractmethod
    async def upsert_identity(
        self, identity: ExternalIdentity, rank: GlobalRank
    ) -> Principal:
        """Atomically insert a principal or refresh an existing one.

        Keyed by external id. Display name and avatar are overwritten; the
        rank is merged with the stored one by monotonic max, so an existing
        higher rank is never lowered.

        Args:
            identity: Verified external identity
            rank: Rank to write for a new principal / merge into an existing one

        Returns:
            The stored principal with its resolved rank
        """
        pass

    @abstractmethod
    async def set_rank(self, principal_id: PrincipalId, rank: GlobalRank) -> bool:
        """Unconditionally overwrite a principal's global rank.

        Args:
            principal_id: Principal to update
            rank: New global rank

        Returns:
            True if the stored rank changed, False otherwise
        """
        pass

    @abstractmethod
    async def search_by_name(self, query: str, limit: int = 20) -> list[Principal]:
        """Find principals whose display name contains ``query``.

        Matching ignores case; results are ordered by display name.

        Args:
            query: Non-empty substring to look for
            limit: Maximum number of principals to return

        Returns:
            Matching principals
        """
        pass
