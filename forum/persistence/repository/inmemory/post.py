"""In-memory post repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import CommunityId, PostId, PrincipalId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_community(
        self,
        community_id: CommunityId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts of a community, newest first."""
        posts = [p for p in self._posts.values() if p.community_id == community_id]
        posts.sort(key=lambda p: (p.created_at, str(p.id)), reverse=True)
        return posts[offset : offset + limit]

    async def find_recent(
        self,
        limit: int = 50,
        offset: int = 0,
        community_ids: Optional[Sequence[CommunityId]] = None,
        author_ids: Optional[Sequence[PrincipalId]] = None,
    ) -> List[Post]:
        """Find posts across communities, newest first."""
        posts = list(self._posts.values())
        if community_ids is not None:
            wanted = set(community_ids)
            posts = [p for p in posts if p.community_id in wanted]
        if author_ids is not None:
            authors = set(author_ids)
            posts = [p for p in posts if p.author_id in authors]
        posts.sort(key=lambda p: (p.created_at, str(p.id)), reverse=True)
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def update_content(
        self, post_id: PostId, title: str, body: str, edited_at: datetime
    ) -> Optional[Post]:
        """Replace title and body and set the edited flag."""
        post = self._posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(
            update={"title": title, "body": body, "edited": True, "edited_at": edited_at}
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
