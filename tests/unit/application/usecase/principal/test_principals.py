"""Unit tests for follow, search, feed and author page use cases."""

import pytest

from forum.application.usecase.post import (
    GetFeedRequest,
    GetFeedUseCase,
    ListAuthorPostsRequest,
    ListAuthorPostsUseCase,
)
from forum.application.usecase.principal import (
    FollowRequest,
    FollowUseCase,
    SearchPrincipalsRequest,
    SearchPrincipalsUseCase,
    UnfollowUseCase,
)
from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.value import FeedView, GlobalRank, LedgerOutcome
from tests.conftest import seed_community, seed_post, seed_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestFollowUseCases:
    """Tests for FollowUseCase and UnfollowUseCase."""

    @pytest.mark.asyncio
    async def test_follow_and_unfollow(self, unit_env):
        alice = await seed_principal(unit_env, "alice")
        bob = await seed_principal(unit_env, "bob")
        follow = await unit_env.get(FollowUseCase)
        unfollow = await unit_env.get(UnfollowUseCase)
        request = FollowRequest(target_id=str(bob.id), actor_id=str(alice.id))

        followed = await follow.execute(request)
        unfollowed = await unfollow.execute(request)

        assert followed.outcome is LedgerOutcome.APPLIED
        assert unfollowed.outcome is LedgerOutcome.APPLIED

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, unit_env):
        alice = await seed_principal(unit_env)
        follow = await unit_env.get(FollowUseCase)

        with pytest.raises(ValidationError):
            await follow.execute(
                FollowRequest(target_id=str(alice.id), actor_id=str(alice.id))
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        bob = await seed_principal(unit_env, "bob")
        follow = await unit_env.get(FollowUseCase)

        with pytest.raises(ForbiddenError):
            await follow.execute(FollowRequest(target_id=str(bob.id)))


class TestSearchPrincipals:
    """Tests for SearchPrincipalsUseCase."""

    @pytest.mark.asyncio
    async def test_admin_searches(self, unit_env):
        admin = await seed_principal(unit_env, "admin", GlobalRank.ADMIN)
        carol = await seed_principal(unit_env, "carol")
        use_case = await unit_env.get(SearchPrincipalsUseCase)

        response = await use_case.execute(
            SearchPrincipalsRequest(query="car", actor_id=str(admin.id))
        )

        assert response.total == 1
        assert response.principals[0].principal_id == str(carol.id)
        assert response.principals[0].rank is GlobalRank.MEMBER

    @pytest.mark.asyncio
    async def test_member_cannot_search(self, unit_env):
        member = await seed_principal(unit_env, "member")
        use_case = await unit_env.get(SearchPrincipalsUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                SearchPrincipalsRequest(query="mem", actor_id=str(member.id))
            )

    @pytest.mark.asyncio
    async def test_empty_query(self, unit_env):
        admin = await seed_principal(unit_env, "admin", GlobalRank.ADMIN)
        use_case = await unit_env.get(SearchPrincipalsUseCase)

        response = await use_case.execute(SearchPrincipalsRequest(actor_id=str(admin.id)))

        assert response.principals == []


class TestFeedAndAuthorPage:
    """Tests for GetFeedUseCase and ListAuthorPostsUseCase."""

    @pytest.mark.asyncio
    async def test_following_feed_after_follow(self, unit_env):
        # Arrange
        community = await seed_community(unit_env)
        reader = await seed_principal(unit_env, "reader")
        writer = await seed_principal(unit_env, "writer")
        post = await seed_post(unit_env, community.id, writer.id, minutes=1)
        await seed_post(unit_env, community.id, reader.id, minutes=2)
        follow = await unit_env.get(FollowUseCase)
        feed = await unit_env.get(GetFeedUseCase)

        # Act
        await follow.execute(
            FollowRequest(target_id=str(writer.id), actor_id=str(reader.id))
        )
        response = await feed.execute(
            GetFeedRequest(view="Following", actor_id=str(reader.id))
        )

        # Assert
        assert response.view is FeedView.FOLLOWING
        assert [p.post_id for p in response.posts] == [str(post.id)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("view", [None, "", "popular"])
    async def test_unknown_view_is_latest(self, unit_env, view):
        feed = await unit_env.get(GetFeedUseCase)

        response = await feed.execute(GetFeedRequest(view=view))

        assert response.view is FeedView.LATEST
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_author_page(self, unit_env):
        community = await seed_community(unit_env)
        reader = await seed_principal(unit_env, "reader")
        writer = await seed_principal(unit_env, "writer")
        post = await seed_post(unit_env, community.id, writer.id)
        follow = await unit_env.get(FollowUseCase)
        page = await unit_env.get(ListAuthorPostsUseCase)
        await follow.execute(
            FollowRequest(target_id=str(writer.id), actor_id=str(reader.id))
        )

        as_reader = await page.execute(
            ListAuthorPostsRequest(author_id=str(writer.id), actor_id=str(reader.id))
        )
        as_anonymous = await page.execute(ListAuthorPostsRequest(author_id=str(writer.id)))

        assert as_reader.display_name == "writer"
        assert as_reader.following
        assert not as_anonymous.following
        assert [p.post_id for p in as_reader.posts] == [str(post.id)]

    @pytest.mark.asyncio
    async def test_missing_author(self, unit_env):
        page = await unit_env.get(ListAuthorPostsUseCase)

        with pytest.raises(NotFoundError):
            await page.execute(
                ListAuthorPostsRequest(author_id="00000000-0000-0000-0000-000000000001")
            )
