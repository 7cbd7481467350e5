"""PostgreSQL persistence component.

One engine per process, one session per request scope. Repositories are
bound to their domain interfaces so services never see SQLAlchemy.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    CommentRepository,
    CommunityRepository,
    FollowRepository,
    MembershipRepository,
    PostRepository,
    PrincipalRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresCommunityRepository,
    PostgresFollowRepository,
    PostgresMembershipRepository,
    PostgresPostRepository,
    PostgresPrincipalRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable storage component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over PostgreSQL via asyncpg."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Unit-of-work session for one request.

        Commits when the request scope closes cleanly; any exception rolls
        back every ledger write made during the request.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request rolled back", error=str(e), error_type=type(e).__name__
                )
                raise
            await session.commit()

    principals = provide(
        PostgresPrincipalRepository, provides=PrincipalRepository, scope=Scope.REQUEST
    )
    communities = provide(
        PostgresCommunityRepository, provides=CommunityRepository, scope=Scope.REQUEST
    )
    memberships = provide(
        PostgresMembershipRepository, provides=MembershipRepository, scope=Scope.REQUEST
    )
    posts = provide(PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST)
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    follows = provide(
        PostgresFollowRepository, provides=FollowRepository, scope=Scope.REQUEST
    )
