"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.community import Community
from forum.domain.value import CommunityId


class CommunityRepository(ABC):
    """Repository for Community entity."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID.

        Args:
            community_id: The community's unique identifier

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, include_unapproved: bool = False) -> list[Community]:
        """Find communities ordered by name.

        Args:
            include_unapproved: Whether to include communities pending approval

        Returns:
            Communities sorted alphabetically
        """
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Save a community (create or update).

        Args:
            community: The community to save

        Returns:
            The saved community
        """
        pass

    @abstractmethod
    async def set_approved(self, community_id: CommunityId) -> bool:
        """Mark a community as approved.

        Args:
            community_id: Community to approve

        Returns:
            True if the flag changed, False if already approved or missing
        """
        pass

    @abstractmethod
    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community (hard delete).

        Args:
            community_id: Community to delete

        Returns:
            True if a row was removed
        """
        pass
