"""In-memory community repository for testing."""

from typing import Optional

from forum.domain.model.community import Community
from forum.domain.repository.community import CommunityRepository
from forum.domain.value import CommunityId


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._communities: dict[CommunityId, Community] = {}

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        return self._communities.get(community_id)

    async def find_all(self, include_unapproved: bool = False) -> list[Community]:
        """Find communities ordered by name."""
        communities = [
            c
            for c in self._communities.values()
            if include_unapproved or c.approved
        ]
        return sorted(communities, key=lambda c: (c.name, str(c.id)))

    async def save(self, community: Community) -> Community:
        """Save or update a community."""
        self._communities[community.id] = community
        return community

    async def set_approved(self, community_id: CommunityId) -> bool:
        """Approve a pending community."""
        community = self._communities.get(community_id)
        if not community or community.approved:
            return False
        self._communities[community_id] = community.model_copy(update={"approved": True})
        return True

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community."""
        return self._communities.pop(community_id, None) is not None
