"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.community import PostgresCommunityRepository
from forum.persistence.repository.follow import PostgresFollowRepository
from forum.persistence.repository.membership import PostgresMembershipRepository
from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.principal import PostgresPrincipalRepository

__all__ = [
    "PostgresPrincipalRepository",
    "PostgresCommunityRepository",
    "PostgresMembershipRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresFollowRepository",
]
