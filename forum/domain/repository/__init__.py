"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.community import CommunityRepository
from forum.domain.repository.follow import FollowRepository
from forum.domain.repository.membership import MembershipRepository
from forum.domain.repository.post import PostRepository
from forum.domain.repository.principal import PrincipalRepository

__all__ = [
    "PrincipalRepository",
    "CommunityRepository",
    "MembershipRepository",
    "PostRepository",
    "CommentRepository",
    "FollowRepository",
]
