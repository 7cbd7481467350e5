"""Follow repository interface.

The follow ledger holds one row per (follower, followee) pair. Adding an
existing pair or removing a missing one changes nothing, and each call
reports whether a row was touched.
"""

from abc import ABC, abstractmethod

from forum.domain.value import PrincipalId


class FollowRepository(ABC):
    """Storage of who follows whom."""

    @abstractmethod
    async def add(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Insert a follow row unless it already exists.

        Returns:
            True if a row was inserted
        """
        pass

    @abstractmethod
    async def remove(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Delete a follow row.

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    async def exists(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Whether ``follower_id`` follows ``followee_id``."""
        pass

    @abstractmethod
    async def find_followee_ids(self, follower_id: PrincipalId) -> list[PrincipalId]:
        """Principals followed by ``follower_id``."""
        pass
