"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import CommunityId, PostId, PrincipalId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_community(
        self,
        community_id: CommunityId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts of a community, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.community_id == community_id)
            .order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def find_recent(
        self,
        limit: int = 50,
        offset: int = 0,
        community_ids: Optional[Sequence[CommunityId]] = None,
        author_ids: Optional[Sequence[PrincipalId]] = None,
    ) -> List[Post]:
        """Find posts across communities, newest first."""
        stmt = select(posts_table)
        if community_ids is not None:
            if not community_ids:
                return []
            stmt = stmt.where(posts_table.c.community_id.in_(list(community_ids)))
        if author_ids is not None:
            if not author_ids:
                return []
            stmt = stmt.where(posts_table.c.author_id.in_(list(author_ids)))
        stmt = (
            stmt.order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)
        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update_content(
        self, post_id: PostId, title: str, body: str, edited_at: datetime
    ) -> Optional[Post]:
        """Replace title and body and set the edited flag."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(title=title, body=body, edited=True, edited_at=edited_at)
            .returning(*posts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_post(dict(row)) if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
