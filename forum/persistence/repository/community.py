"""PostgreSQL implementation of Community repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Community
from forum.domain.repository import CommunityRepository
from forum.domain.value import CommunityId
from forum.persistence.mappers import community_to_dict, row_to_community
from forum.persistence.tables import communities_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_community(dict(row)) if row else None

    async def find_all(self, include_unapproved: bool = False) -> list[Community]:
        """Find communities ordered by name.

        Args:
            include_unapproved: Whether pending suggestions are included

        Returns:
            List of communities
        """
        stmt = select(communities_table).order_by(
            communities_table.c.name, communities_table.c.id
        )
        if not include_unapproved:
            stmt = stmt.where(communities_table.c.approved.is_(True))
        result = await self.session.execute(stmt)
        return [row_to_community(dict(row)) for row in result.mappings().all()]

    async def save(self, community: Community) -> Community:
        """Save a community (create or update)."""
        existing = await self.find_by_id(community.id)
        community_dict = community_to_dict(community)

        if existing:
            stmt = (
                communities_table.update()
                .where(communities_table.c.id == community.id)
                .values(**community_dict)
            )
        else:
            stmt = communities_table.insert().values(**community_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return community

    async def set_approved(self, community_id: CommunityId) -> bool:
        """Approve a pending community.

        Returns:
            True if the community was pending
        """
        stmt = (
            communities_table.update()
            .where(communities_table.c.id == community_id)
            .where(communities_table.c.approved.is_(False))
            .values(approved=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community row."""
        stmt = communities_table.delete().where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
