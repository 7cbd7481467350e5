"""In-memory follow repository for testing."""

from forum.domain.repository.follow import FollowRepository
from forum.domain.value import PrincipalId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._pairs: set[tuple[PrincipalId, PrincipalId]] = set()

    async def add(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Insert a follow row unless it already exists."""
        pair = (follower_id, followee_id)
        if pair in self._pairs:
            return False
        self._pairs.add(pair)
        return True

    async def remove(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Delete a follow row."""
        pair = (follower_id, followee_id)
        if pair not in self._pairs:
            return False
        self._pairs.discard(pair)
        return True

    async def exists(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Whether the follow row exists."""
        return (follower_id, followee_id) in self._pairs

    async def find_followee_ids(self, follower_id: PrincipalId) -> list[PrincipalId]:
        """Principals followed by ``follower_id``."""
        return [followee for follower, followee in self._pairs if follower == follower_id]
