"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.repository import CommentRepository
from forum.domain.service import (
    CommentService,
    FollowService,
    MembershipService,
    PostService,
)
from forum.domain.value import FeedView, GlobalRank
from tests.conftest import seed_community, seed_post, seed_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for post creation."""

    @pytest.mark.asyncio
    async def test_create_trims_title(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env)

        post = await service.create_post(community.id, author, "  Title  ", "Body")

        assert post.title == "Title"
        assert post.author_id == author.id
        assert post.community_id == community.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("title", "body"),
        [("", "Body"), ("   ", "Body"), ("x" * 201, "Body"), ("Title", "")],
    )
    async def test_invalid_input(self, unit_env, title, body):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env)

        with pytest.raises(ValidationError):
            await service.create_post(community.id, author, title, body)

    @pytest.mark.asyncio
    async def test_unapproved_community(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env, approved=False)
        author = await seed_principal(unit_env)

        with pytest.raises(ValidationError):
            await service.create_post(community.id, author, "Title", "Body")

    @pytest.mark.asyncio
    async def test_anonymous_cannot_post(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)

        with pytest.raises(ForbiddenError):
            await service.create_post(community.id, None, "Title", "Body")


class TestEditPost:
    """Tests for post editing."""

    @pytest.mark.asyncio
    async def test_author_edits(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env)
        post = await service.create_post(community.id, author, "Title", "Body")

        edited = await service.edit_post(post.id, author, "New", "New body")

        assert edited.title == "New"
        assert edited.body == "New body"
        assert edited.edited

    @pytest.mark.asyncio
    async def test_other_principal_cannot_edit(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env, "author")
        admin = await seed_principal(unit_env, "root", rank=GlobalRank.ADMIN)
        post = await service.create_post(community.id, author, "Title", "Body")

        with pytest.raises(ForbiddenError):
            await service.edit_post(post.id, admin, "New", "New body")


class TestDeletePost:
    """Tests for post deletion."""

    @pytest.mark.asyncio
    async def test_delete_removes_comments(self, unit_env):
        service = await unit_env.get(PostService)
        comments = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env)
        post = await service.create_post(community.id, author, "Title", "Body")
        top = await comments.create_comment(post.id, author, "top")
        await comments.create_comment(post.id, author, "reply", top.id)

        await service.delete_post(post.id, author)

        with pytest.raises(NotFoundError):
            await service.get_by_id(post.id)
        assert await comment_repo.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_community_admin_can_delete(self, unit_env):
        service = await unit_env.get(PostService)
        memberships = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env, "author")
        moderator = await seed_principal(unit_env, "moderator")
        await memberships.grant_community_admin(community.id, moderator.id)
        post = await service.create_post(community.id, author, "Title", "Body")

        await service.delete_post(post.id, moderator)

        with pytest.raises(NotFoundError):
            await service.get_by_id(post.id)

    @pytest.mark.asyncio
    async def test_subscriber_cannot_delete(self, unit_env):
        service = await unit_env.get(PostService)
        memberships = await unit_env.get(MembershipService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env, "author")
        reader = await seed_principal(unit_env, "reader")
        await memberships.subscribe(community.id, reader.id)
        post = await service.create_post(community.id, author, "Title", "Body")

        with pytest.raises(ForbiddenError):
            await service.delete_post(post.id, reader)

        assert await service.get_by_id(post.id) == post


class TestListPosts:
    """Tests for listing posts."""

    @pytest.mark.asyncio
    async def test_lists_only_that_community(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env, "a")
        other = await seed_community(unit_env, "b")
        author = await seed_principal(unit_env)
        mine = await service.create_post(community.id, author, "Mine", "Body")
        await service.create_post(other.id, author, "Theirs", "Body")

        posts = await service.list_posts(community.id)

        assert [p.id for p in posts] == [mine.id]

    @pytest.mark.asyncio
    async def test_unapproved_community_is_hidden(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env, approved=False)

        with pytest.raises(NotFoundError):
            await service.list_posts(community.id)

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(uuid4())


class TestFeed:
    """Tests for the front page views."""

    @pytest.mark.asyncio
    async def test_latest_is_newest_first_across_communities(self, unit_env):
        service = await unit_env.get(PostService)
        science = await seed_community(unit_env, "science")
        music = await seed_community(unit_env, "music")
        author = await seed_principal(unit_env)
        old = await seed_post(unit_env, science.id, author.id, minutes=1)
        new = await seed_post(unit_env, music.id, author.id, minutes=2)

        posts = await service.list_feed(author, FeedView.LATEST)

        assert [p.id for p in posts] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_latest_is_capped_at_fifty(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env)
        for minutes in range(55):
            await seed_post(unit_env, community.id, author.id, minutes=minutes)

        posts = await service.list_feed(None, FeedView.LATEST)

        assert len(posts) == 50
        assert posts[0].created_at > posts[-1].created_at

    @pytest.mark.asyncio
    async def test_subscribed_shows_only_member_communities(self, unit_env):
        service = await unit_env.get(PostService)
        memberships = await unit_env.get(MembershipService)
        science = await seed_community(unit_env, "science")
        music = await seed_community(unit_env, "music")
        moderated = await seed_community(unit_env, "moderated")
        reader = await seed_principal(unit_env, "reader")
        author = await seed_principal(unit_env, "author")
        await memberships.subscribe(science.id, reader.id)
        await memberships.grant_community_admin(moderated.id, reader.id)
        subscribed = await seed_post(unit_env, science.id, author.id, minutes=1)
        await seed_post(unit_env, music.id, author.id, minutes=2)
        administered = await seed_post(unit_env, moderated.id, author.id, minutes=3)

        posts = await service.list_feed(reader, FeedView.SUBSCRIBED)

        assert [p.id for p in posts] == [administered.id, subscribed.id]

    @pytest.mark.asyncio
    async def test_following_shows_only_followed_authors(self, unit_env):
        service = await unit_env.get(PostService)
        follows = await unit_env.get(FollowService)
        community = await seed_community(unit_env)
        reader = await seed_principal(unit_env, "reader")
        followed = await seed_principal(unit_env, "followed")
        stranger = await seed_principal(unit_env, "stranger")
        await follows.follow(reader, followed.id)
        wanted = await seed_post(unit_env, community.id, followed.id, minutes=1)
        await seed_post(unit_env, community.id, stranger.id, minutes=2)

        posts = await service.list_feed(reader, FeedView.FOLLOWING)

        assert [p.id for p in posts] == [wanted.id]

    @pytest.mark.asyncio
    async def test_empty_views(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        reader = await seed_principal(unit_env, "reader")
        await seed_post(unit_env, community.id, reader.id)

        assert await service.list_feed(reader, FeedView.SUBSCRIBED) == []
        assert await service.list_feed(reader, FeedView.FOLLOWING) == []

    @pytest.mark.asyncio
    async def test_anonymous_viewer_gets_latest(self, unit_env):
        service = await unit_env.get(PostService)
        community = await seed_community(unit_env)
        author = await seed_principal(unit_env)
        post = await seed_post(unit_env, community.id, author.id)

        posts = await service.list_feed(None, FeedView.FOLLOWING)

        assert [p.id for p in posts] == [post.id]


class TestListByAuthor:
    """Tests for listing one principal's posts."""

    @pytest.mark.asyncio
    async def test_lists_author_posts_newest_first(self, unit_env):
        service = await unit_env.get(PostService)
        science = await seed_community(unit_env, "science")
        music = await seed_community(unit_env, "music")
        author = await seed_principal(unit_env, "author")
        other = await seed_principal(unit_env, "other")
        first = await seed_post(unit_env, science.id, author.id, minutes=1)
        second = await seed_post(unit_env, music.id, author.id, minutes=2)
        await seed_post(unit_env, science.id, other.id, minutes=3)

        posts = await service.list_by_author(author.id)

        assert [p.id for p in posts] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_author_without_posts(self, unit_env):
        service = await unit_env.get(PostService)
        author = await seed_principal(unit_env)

        assert await service.list_by_author(author.id) == []
