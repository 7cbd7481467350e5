"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post as a flat list.

        Rows come back ordered by (created_at, id); threading is left to
        the comment tree builder.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments
        """
        pass

    @abstractmethod
    async def count_children(self, comment_id: CommentId) -> int:
        """Count comments whose parent is ``comment_id``.

        Args:
            comment_id: The parent comment ID

        Returns:
            Number of direct replies
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def mark_has_descendants(self, comment_id: CommentId) -> None:
        """Set the has-descendants flag. The flag is never cleared.

        Args:
            comment_id: The comment that received a reply
        """
        pass

    @abstractmethod
    async def update_body(
        self, comment_id: CommentId, body: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the body and set the edited flag.

        Args:
            comment_id: Comment ID
            body: New body (or the deleted sentinel)
            edited_at: Edit timestamp

        Returns:
            Updated comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of rows removed
        """
        pass
