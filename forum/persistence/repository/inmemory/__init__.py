"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .community import InMemoryCommunityRepository
from .follow import InMemoryFollowRepository
from .membership import InMemoryMembershipRepository
from .post import InMemoryPostRepository
from .principal import InMemoryPrincipalRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommunityRepository",
    "InMemoryFollowRepository",
    "InMemoryMembershipRepository",
    "InMemoryPostRepository",
    "InMemoryPrincipalRepository",
]
