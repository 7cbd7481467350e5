"""PostgreSQL implementation of Membership repository.

Each mutation is one statement relying on the (community_id, principal_id)
unique constraint; none of them reads before writing.
"""

from typing import Optional

from sqlalchemy import Delete, Update, func, select
from sqlalchemy.dialects.postgresql import Insert, insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Membership
from forum.domain.repository import MembershipRepository
from forum.domain.value import CommunityId, CommunityRank, PrincipalId
from forum.persistence.mappers import row_to_membership
from forum.persistence.tables import memberships_table

_KEY = [memberships_table.c.community_id, memberships_table.c.principal_id]


def merge_rank_statement(
    community_id: CommunityId, principal_id: PrincipalId, rank: CommunityRank
) -> Insert:
    """Insert or raise the rank with GREATEST; lower ranks never win.

    The WHERE guard makes the statement touch no row when the stored rank
    is already high enough, so the row count reports the outcome.
    """
    stmt = insert(memberships_table).values(
        community_id=community_id,
        principal_id=principal_id,
        rank=rank.to_storage(),
    )
    return stmt.on_conflict_do_update(
        index_elements=_KEY,
        set_={"rank": func.greatest(memberships_table.c.rank, stmt.excluded.rank)},
        where=memberships_table.c.rank < stmt.excluded.rank,
    )


def overwrite_rank_statement(
    community_id: CommunityId, principal_id: PrincipalId, rank: CommunityRank
) -> Insert:
    """Insert or unconditionally overwrite the rank."""
    stmt = insert(memberships_table).values(
        community_id=community_id,
        principal_id=principal_id,
        rank=rank.to_storage(),
    )
    return stmt.on_conflict_do_update(
        index_elements=_KEY,
        set_={"rank": stmt.excluded.rank},
        where=memberships_table.c.rank != stmt.excluded.rank,
    )


def replace_rank_if_statement(
    community_id: CommunityId,
    principal_id: PrincipalId,
    expected: CommunityRank,
    rank: CommunityRank,
) -> Update:
    """Conditional update: only a row currently at ``expected`` changes."""
    return (
        memberships_table.update()
        .where(memberships_table.c.community_id == community_id)
        .where(memberships_table.c.principal_id == principal_id)
        .where(memberships_table.c.rank == expected.to_storage())
        .values(rank=rank.to_storage())
    )


def delete_statement(community_id: CommunityId, principal_id: PrincipalId) -> Delete:
    return (
        memberships_table.delete()
        .where(memberships_table.c.community_id == community_id)
        .where(memberships_table.c.principal_id == principal_id)
    )


class PostgresMembershipRepository(MembershipRepository):
    """PostgreSQL implementation of MembershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, community_id: CommunityId, principal_id: PrincipalId
    ) -> Optional[Membership]:
        """Find the membership row for a principal in a community."""
        stmt = (
            select(memberships_table)
            .where(memberships_table.c.community_id == community_id)
            .where(memberships_table.c.principal_id == principal_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_membership(dict(row)) if row else None

    async def find_by_community(self, community_id: CommunityId) -> list[Membership]:
        """Find all membership rows of a community, highest rank first."""
        stmt = (
            select(memberships_table)
            .where(memberships_table.c.community_id == community_id)
            .order_by(memberships_table.c.rank.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_membership(dict(row)) for row in result.mappings().all()]

    async def find_by_principal(self, principal_id: PrincipalId) -> list[Membership]:
        """Find every membership row held by a principal."""
        stmt = select(memberships_table).where(
            memberships_table.c.principal_id == principal_id
        )
        result = await self.session.execute(stmt)
        return [row_to_membership(dict(row)) for row in result.mappings().all()]

    async def _execute(self, stmt) -> int:
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def merge_rank(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        rank: CommunityRank,
    ) -> bool:
        """Insert a row or raise the stored rank (monotonic max)."""
        stmt = merge_rank_statement(community_id, principal_id, rank)
        return await self._execute(stmt) > 0

    async def overwrite_rank(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        rank: CommunityRank,
    ) -> bool:
        """Insert a row or overwrite the stored rank."""
        stmt = overwrite_rank_statement(community_id, principal_id, rank)
        return await self._execute(stmt) > 0

    async def replace_rank_if(
        self,
        community_id: CommunityId,
        principal_id: PrincipalId,
        expected: CommunityRank,
        rank: CommunityRank,
    ) -> bool:
        """Set the rank only when the stored rank equals ``expected``."""
        stmt = replace_rank_if_statement(community_id, principal_id, expected, rank)
        return await self._execute(stmt) > 0

    async def delete(self, community_id: CommunityId, principal_id: PrincipalId) -> bool:
        """Delete a membership row regardless of its rank."""
        return await self._execute(delete_statement(community_id, principal_id)) > 0

    async def delete_by_community(self, community_id: CommunityId) -> int:
        """Delete every membership row of a community."""
        stmt = memberships_table.delete().where(
            memberships_table.c.community_id == community_id
        )
        return await self._execute(stmt)
