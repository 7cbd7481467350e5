"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from forum.domain.model.post import Post
from forum.domain.value import CommunityId, PostId, PrincipalId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_community(
        self,
        community_id: CommunityId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts of a community, newest first.

        Args:
            community_id: The community ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        limit: int = 50,
        offset: int = 0,
        community_ids: Optional[Sequence[CommunityId]] = None,
        author_ids: Optional[Sequence[PrincipalId]] = None,
    ) -> List[Post]:
        """Find posts across communities, newest first.

        A filter left as None matches everything; an empty filter matches
        nothing.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip
            community_ids: Only posts in these communities
            author_ids: Only posts by these principals

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, title: str, body: str, edited_at: datetime
    ) -> Optional[Post]:
        """Replace title and body and set the edited flag.

        Args:
            post_id: ID of the post to update
            title: New title
            body: New body
            edited_at: Edit timestamp

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a row was removed
        """
        pass
