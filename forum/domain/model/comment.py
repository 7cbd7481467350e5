"""Comment entity.

Comments are threaded replies on posts with unlimited depth. The tree is
not stored; it is rebuilt from parent ids by the comment tree builder.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import DELETED_COMMENT_BODY, CommentId, PostId, PrincipalId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - has_descendants: Set once the first reply is attached, never cleared
    """

    id: CommentId
    post_id: PostId
    author_id: PrincipalId
    body: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    has_descendants: bool = False
    edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_deleted(self) -> bool:
        """Whether this comment was soft-deleted."""
        return self.body == DELETED_COMMENT_BODY
