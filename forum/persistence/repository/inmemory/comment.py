"""In-memory comment repository for testing."""

from datetime import datetime
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post, ordered by (created_at, id)."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: (c.created_at, c.id))

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies of a comment."""
        return sum(1 for c in self._comments.values() if c.parent_id == comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def mark_has_descendants(self, comment_id: CommentId) -> None:
        """Set the has-descendants flag."""
        comment = self._comments.get(comment_id)
        if comment and not comment.has_descendants:
            self._comments[comment_id] = comment.model_copy(
                update={"has_descendants": True}
            )

    async def update_body(
        self, comment_id: CommentId, body: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the body and set the edited flag."""
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(
            update={"body": body, "edited": True, "edited_at": edited_at}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        ids = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for cid in ids:
            del self._comments[cid]
        return len(ids)
