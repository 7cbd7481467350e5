"""PostgreSQL implementation of Principal repository."""

from typing import Optional, Sequence
from uuid import uuid4

from sqlalchemy import Select, Update, func, select
from sqlalchemy.dialects.postgresql import Insert, insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Principal
from forum.domain.repository import PrincipalRepository
from forum.domain.value import ExternalIdentity, GlobalRank, PrincipalId
from forum.persistence.mappers import row_to_principal
from forum.persistence.tables import principals_table


def upsert_identity_statement(identity: ExternalIdentity, rank: GlobalRank) -> Insert:
    """Build the login upsert keyed by external id.

    Name and avatar are overwritten, the rank is merged with GREATEST so an
    existing higher rank survives.
    """
    stmt = insert(principals_table).values(
        id=uuid4(),
        external_id=identity.provider_user_id,
        display_name=identity.display_name,
        avatar_url=identity.avatar_url,
        rank=rank.to_storage(),
    )
    return stmt.on_conflict_do_update(
        index_elements=[principals_table.c.external_id],
        set_={
            "display_name": stmt.excluded.display_name,
            "avatar_url": stmt.excluded.avatar_url,
            "rank": func.greatest(principals_table.c.rank, stmt.excluded.rank),
            "updated_at": func.now(),
        },
    ).returning(*principals_table.c)


def set_rank_statement(principal_id: PrincipalId, rank: GlobalRank) -> Update:
    """Build the unconditional rank overwrite (no-op when already equal)."""
    return (
        principals_table.update()
        .where(principals_table.c.id == principal_id)
        .where(principals_table.c.rank != rank.to_storage())
        .values(rank=rank.to_storage(), updated_at=func.now())
    )


def _escape_like(value: str) -> str:
    # Wildcards typed by the user match literally
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_by_name_statement(query: str, limit: int) -> Select:
    """Case-insensitive substring match on display names, sorted by name."""
    pattern = "%" + _escape_like(query) + "%"
    return (
        select(principals_table)
        .where(principals_table.c.display_name.ilike(pattern, escape="\\"))
        .order_by(principals_table.c.display_name.asc())
        .limit(limit)
    )


class PostgresPrincipalRepository(PrincipalRepository):
    """PostgreSQL implementation of PrincipalRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, principal_id: PrincipalId) -> Optional[Principal]:
        """Find a principal by ID.

        Args:
            principal_id: Principal ID to look up

        Returns:
            Principal if found, None otherwise
        """
        stmt = select(principals_table).where(principals_table.c.id == principal_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_principal(dict(row)) if row else None

    async def find_by_external_id(self, external_id: str) -> Optional[Principal]:
        """Find a principal by identity provider user id.

        Args:
            external_id: Provider user id

        Returns:
            Principal if found, None otherwise
        """
        stmt = select(principals_table).where(
            principals_table.c.external_id == external_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_principal(dict(row)) if row else None

    async def find_by_ids(self, principal_ids: Sequence[PrincipalId]) -> list[Principal]:
        """Find all principals with the given IDs (unknown IDs are skipped)."""
        if not principal_ids:
            return []
        stmt = select(principals_table).where(
            principals_table.c.id.in_(list(principal_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_principal(dict(row)) for row in result.mappings().all()]

    async def count_with_rank_at_least(self, rank: GlobalRank) -> int:
        """Count principals whose global rank is at least ``rank``."""
        stmt = (
            select(func.count())
            .select_from(principals_table)
            .where(principals_table.c.rank >= rank.to_storage())
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def upsert_identity(
        self, identity: ExternalIdentity, rank: GlobalRank
    ) -> Principal:
        """Atomically insert or refresh a principal keyed by external id.

        Args:
            identity: Verified external identity
            rank: Rank merged into the stored one by monotonic max

        Returns:
            Stored principal
        """
        result = await self.session.execute(upsert_identity_statement(identity, rank))
        row = result.mappings().one()
        await self.session.flush()
        return row_to_principal(dict(row))

    async def set_rank(self, principal_id: PrincipalId, rank: GlobalRank) -> bool:
        """Overwrite a principal's global rank.

        Returns:
            True if the stored rank changed
        """
        result = await self.session.execute(set_rank_statement(principal_id, rank))
        await self.session.flush()
        return result.rowcount > 0

    async def search_by_name(self, query: str, limit: int = 20) -> list[Principal]:
        """Case-insensitive substring search on display names."""
        result = await self.session.execute(search_by_name_statement(query, limit))
        return [row_to_principal(dict(row)) for row in result.mappings().all()]
