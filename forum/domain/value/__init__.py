"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    CommunityId,
    PostId,
    PrincipalId,
)
from forum.domain.value.types import (
    DELETED_COMMENT_BODY,
    Capabilities,
    CommunityRank,
    DeletionOutcome,
    ExternalIdentity,
    FeedView,
    GlobalRank,
    LedgerOutcome,
)

__all__ = [
    # Identifiers
    "PrincipalId",
    "CommunityId",
    "PostId",
    "CommentId",
    # Types
    "DELETED_COMMENT_BODY",
    "Capabilities",
    "CommunityRank",
    "DeletionOutcome",
    "ExternalIdentity",
    "FeedView",
    "GlobalRank",
    "LedgerOutcome",
]
