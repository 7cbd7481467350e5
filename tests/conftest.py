"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
from dishka import AsyncContainer

from forum.domain.model import Comment, Community, Post, Principal
from forum.domain.repository import (
    CommunityRepository,
    PostRepository,
    PrincipalRepository,
)
from forum.domain.value import (
    CommentId,
    CommunityId,
    ExternalIdentity,
    GlobalRank,
    PostId,
    PrincipalId,
)

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_principal(
    display_name: str = "alice",
    rank: GlobalRank = GlobalRank.MEMBER,
) -> Principal:
    """Build a principal without storing it."""
    return Principal(
        id=PrincipalId(uuid4()),
        external_id=f"ext-{display_name}-{uuid4().hex[:8]}",
        display_name=display_name,
        rank=rank,
    )


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    minutes: int = 0,
    comment_id: CommentId | None = None,
    body: str = "comment",
) -> Comment:
    """Build a comment created ``minutes`` after a fixed base time."""
    return Comment(
        id=comment_id or CommentId(uuid4()),
        post_id=post_id,
        author_id=PrincipalId(uuid4()),
        body=body,
        parent_id=parent_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


async def seed_principal(
    env: AsyncContainer,
    display_name: str = "alice",
    rank: GlobalRank = GlobalRank.MEMBER,
) -> Principal:
    """Store a principal through the login upsert."""
    repo = await env.get(PrincipalRepository)
    identity = ExternalIdentity(
        provider_user_id=f"ext-{display_name}-{uuid4().hex[:8]}",
        display_name=display_name,
    )
    return await repo.upsert_identity(identity, rank)


async def seed_community(
    env: AsyncContainer, name: str = "science", approved: bool = True
) -> Community:
    """Store a community."""
    repo = await env.get(CommunityRepository)
    community = Community(id=CommunityId(uuid4()), name=name, approved=approved)
    return await repo.save(community)


async def seed_post(
    env: AsyncContainer,
    community_id: CommunityId,
    author_id: PrincipalId,
    minutes: int | None = None,
) -> Post:
    """Store a post, created ``minutes`` after the base time when given."""
    repo = await env.get(PostRepository)
    post = Post(
        id=PostId(uuid4()),
        community_id=community_id,
        author_id=author_id,
        title="A post",
        body="Post body",
    )
    if minutes is not None:
        post = post.model_copy(
            update={"created_at": BASE_TIME + timedelta(minutes=minutes)}
        )
    return await repo.save(post)
