"""PostgreSQL implementation of Follow repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import Insert, insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import FollowRepository
from forum.domain.value import PrincipalId
from forum.persistence.tables import followers_table


def add_follow_statement(follower_id: PrincipalId, followee_id: PrincipalId) -> Insert:
    """Insert a follow pair; an existing pair makes it touch no row."""
    return (
        insert(followers_table)
        .values(follower_id=follower_id, followee_id=followee_id)
        .on_conflict_do_nothing(
            index_elements=[followers_table.c.follower_id, followers_table.c.followee_id]
        )
    )


def _pair(follower_id: PrincipalId, followee_id: PrincipalId):
    return (followers_table.c.follower_id == follower_id) & (
        followers_table.c.followee_id == followee_id
    )


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _execute(self, stmt) -> int:
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def add(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Insert a follow row unless it already exists."""
        return await self._execute(add_follow_statement(follower_id, followee_id)) > 0

    async def remove(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Delete a follow row."""
        stmt = followers_table.delete().where(_pair(follower_id, followee_id))
        return await self._execute(stmt) > 0

    async def exists(self, follower_id: PrincipalId, followee_id: PrincipalId) -> bool:
        """Whether the follow row exists."""
        stmt = (
            select(followers_table.c.follower_id)
            .where(_pair(follower_id, followee_id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_followee_ids(self, follower_id: PrincipalId) -> list[PrincipalId]:
        """Principals followed by ``follower_id``."""
        stmt = select(followers_table.c.followee_id).where(
            followers_table.c.follower_id == follower_id
        )
        result = await self.session.execute(stmt)
        return [PrincipalId(value) for value in result.scalars().all()]
