"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.community import Community
from forum.domain.model.membership import Membership
from forum.domain.model.post import Post
from forum.domain.model.principal import Principal

__all__ = [
    "Principal",
    "Community",
    "Membership",
    "Post",
    "Comment",
]
