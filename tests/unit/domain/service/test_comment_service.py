"""Unit tests for CommentService, including the deletion policy."""

from uuid import uuid4

import pytest

from forum.domain.error import (
    ContentDeletedException,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from forum.domain.repository import CommentRepository
from forum.domain.service import BootstrapService, CommentService, MembershipService
from forum.domain.value import (
    DELETED_COMMENT_BODY,
    CommentId,
    CommunityRank,
    DeletionOutcome,
    ExternalIdentity,
    GlobalRank,
    LedgerOutcome,
)
from tests.conftest import seed_community, seed_post, seed_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def seed_thread(env):
    """Approved community, an author and a post by that author."""
    community = await seed_community(env)
    author = await seed_principal(env, "author")
    post = await seed_post(env, community.id, author.id)
    return community, author, post


class TestCreateComment:
    """Tests for comment creation."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)

        comment = await service.create_comment(post.id, author, "hello")

        assert comment.parent_id is None
        assert comment.author_id == author.id
        assert not comment.has_descendants

    @pytest.mark.asyncio
    async def test_reply_marks_parent(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        parent = await service.create_comment(post.id, author, "parent")

        reply = await service.create_comment(post.id, author, "reply", parent.id)

        stored_parent = await service.get_by_id(parent.id)
        assert reply.parent_id == parent.id
        assert stored_parent.has_descendants

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)

        with pytest.raises(ValidationError):
            await service.create_comment(post.id, author, "reply", CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post(self, unit_env):
        service = await unit_env.get(CommentService)
        community, author, post = await seed_thread(unit_env)
        other_post = await seed_post(unit_env, community.id, author.id)
        elsewhere = await service.create_comment(other_post.id, author, "elsewhere")

        with pytest.raises(ValidationError):
            await service.create_comment(post.id, author, "reply", elsewhere.id)

    @pytest.mark.asyncio
    async def test_comment_on_unapproved_community(self, unit_env):
        service = await unit_env.get(CommentService)
        community = await seed_community(unit_env, approved=False)
        author = await seed_principal(unit_env)
        post = await seed_post(unit_env, community.id, author.id)

        with pytest.raises(ValidationError):
            await service.create_comment(post.id, author, "hello")

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        service = await unit_env.get(CommentService)
        author = await seed_principal(unit_env)

        with pytest.raises(NotFoundError):
            await service.create_comment(uuid4(), author, "hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   ", DELETED_COMMENT_BODY, "x" * 10001])
    async def test_invalid_body(self, unit_env, body):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)

        with pytest.raises(ValidationError):
            await service.create_comment(post.id, author, body)

    @pytest.mark.asyncio
    async def test_anonymous_cannot_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        _, _, post = await seed_thread(unit_env)

        with pytest.raises(ForbiddenError):
            await service.create_comment(post.id, None, "hello")


class TestEditComment:
    """Tests for comment editing."""

    @pytest.mark.asyncio
    async def test_author_edits(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        comment = await service.create_comment(post.id, author, "before")

        edited = await service.edit_comment(comment.id, author, "after")

        assert edited.body == "after"
        assert edited.edited
        assert edited.edited_at is not None

    @pytest.mark.asyncio
    async def test_global_admin_cannot_edit_others(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        admin = await seed_principal(unit_env, "root", rank=GlobalRank.ADMIN)
        comment = await service.create_comment(post.id, author, "before")

        with pytest.raises(ForbiddenError):
            await service.edit_comment(comment.id, admin, "after")

        assert (await service.get_by_id(comment.id)).body == "before"

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        parent = await service.create_comment(post.id, author, "parent")
        await service.create_comment(post.id, author, "reply", parent.id)
        await service.delete_comment(parent.id, author)

        with pytest.raises(ContentDeletedException):
            await service.edit_comment(parent.id, author, "resurrected")


class TestDeleteComment:
    """Tests for the deletion policy."""

    @pytest.mark.asyncio
    async def test_leaf_is_hard_deleted(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        comment = await service.create_comment(post.id, author, "leaf")

        outcome = await service.delete_comment(comment.id, author)

        assert outcome is DeletionOutcome.HARD_DELETED
        with pytest.raises(NotFoundError):
            await service.get_by_id(comment.id)

    @pytest.mark.asyncio
    async def test_comment_with_reply_is_soft_deleted(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        parent = await service.create_comment(post.id, author, "parent")
        reply = await service.create_comment(post.id, author, "reply", parent.id)

        outcome = await service.delete_comment(parent.id, author)

        stored = await service.get_by_id(parent.id)
        assert outcome is DeletionOutcome.SOFT_DELETED
        assert stored.body == DELETED_COMMENT_BODY
        assert stored.is_deleted
        assert stored.edited
        assert stored.author_id == author.id
        assert stored.created_at == parent.created_at
        assert (await service.get_by_id(reply.id)).parent_id == parent.id

    @pytest.mark.asyncio
    async def test_soft_delete_sticks_after_replies_are_gone(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        parent = await service.create_comment(post.id, author, "parent")
        reply = await service.create_comment(post.id, author, "reply", parent.id)

        assert await service.delete_comment(reply.id, author) is DeletionOutcome.HARD_DELETED
        outcome = await service.delete_comment(parent.id, author)

        assert outcome is DeletionOutcome.SOFT_DELETED
        assert (await service.get_by_id(parent.id)).is_deleted

    @pytest.mark.asyncio
    async def test_live_child_without_flag_forces_soft_delete(self, unit_env):
        """A reply stored without the parent flag still protects the subtree."""
        service = await unit_env.get(CommentService)
        comments = await unit_env.get(CommentRepository)
        _, author, post = await seed_thread(unit_env)
        parent = await service.create_comment(post.id, author, "parent")
        reply = await service.create_comment(post.id, author, "reply", parent.id)
        await comments.save(parent.model_copy(update={"has_descendants": False}))

        outcome = await service.delete_comment(parent.id, author)

        assert outcome is DeletionOutcome.SOFT_DELETED
        assert await comments.find_by_id(reply.id) is not None

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        stranger = await seed_principal(unit_env, "stranger")
        comment = await service.create_comment(post.id, author, "mine")

        with pytest.raises(ForbiddenError):
            await service.delete_comment(comment.id, stranger)
        with pytest.raises(ForbiddenError):
            await service.delete_comment(comment.id, None)

        assert (await service.get_by_id(comment.id)).body == "mine"

    @pytest.mark.asyncio
    async def test_community_admin_can_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        memberships = await unit_env.get(MembershipService)
        community, author, post = await seed_thread(unit_env)
        moderator = await seed_principal(unit_env, "moderator")
        await memberships.grant_community_admin(community.id, moderator.id)
        comment = await service.create_comment(post.id, author, "spam")

        outcome = await service.delete_comment(comment.id, moderator)

        assert outcome is DeletionOutcome.HARD_DELETED

    @pytest.mark.asyncio
    async def test_admin_of_other_community_cannot_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        memberships = await unit_env.get(MembershipService)
        _, author, post = await seed_thread(unit_env)
        other = await seed_community(unit_env, "other")
        moderator = await seed_principal(unit_env, "moderator")
        await memberships.grant_community_admin(other.id, moderator.id)
        comment = await service.create_comment(post.id, author, "spam")

        with pytest.raises(ForbiddenError):
            await service.delete_comment(comment.id, moderator)

    @pytest.mark.asyncio
    async def test_global_admin_can_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        admin = await seed_principal(unit_env, "root", rank=GlobalRank.ADMIN)
        comment = await service.create_comment(post.id, author, "spam")

        assert await service.delete_comment(comment.id, admin) is DeletionOutcome.HARD_DELETED

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        author = await seed_principal(unit_env)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(uuid4()), author)


class TestThread:
    """End-to-end thread scenario."""

    @pytest.mark.asyncio
    async def test_thread_after_mixed_deletions(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, post = await seed_thread(unit_env)
        first = await service.create_comment(post.id, author, "first")
        reply = await service.create_comment(post.id, author, "reply", first.id)
        nested = await service.create_comment(post.id, author, "nested", reply.id)
        second = await service.create_comment(post.id, author, "second")

        await service.delete_comment(reply.id, author)
        await service.delete_comment(second.id, author)
        tree = await service.get_thread(post.id)

        assert [(c.id, depth) for c, depth in tree] == [
            (first.id, 0),
            (reply.id, 1),
            (nested.id, 2),
        ]
        assert tree.get(reply.id).is_deleted

    @pytest.mark.asyncio
    async def test_thread_for_missing_post(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.get_thread(uuid4())

    @pytest.mark.asyncio
    async def test_owner_moderates_reply_chain(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        memberships = await unit_env.get(MembershipService)
        bootstrap = await unit_env.get(BootstrapService)
        community = await seed_community(unit_env)
        await seed_principal(unit_env, "site-admin", GlobalRank.ADMIN)
        owner = await seed_principal(unit_env, "owner")
        member = await seed_principal(unit_env, "member")
        assert (
            await memberships.grant_community_owner(community.id, owner.id)
            is LedgerOutcome.APPLIED
        )
        await memberships.subscribe(community.id, member.id)
        post = await seed_post(unit_env, community.id, member.id)
        x = await service.create_comment(post.id, member, "X")
        visitor = await bootstrap.bootstrap(
            ExternalIdentity(provider_user_id="ext-visitor", display_name="visitor")
        )
        y = await service.create_comment(post.id, visitor, "Y", x.id)
        assert (await service.get_by_id(x.id)).has_descendants

        # Act
        first = await service.delete_comment(x.id, owner)
        tree_after_first = await service.get_thread(post.id)
        second = await service.delete_comment(y.id, owner)
        tree = await service.get_thread(post.id)

        # Assert
        assert visitor.rank is GlobalRank.MEMBER
        assert await memberships.get_rank(community.id, member.id) is CommunityRank.SUBSCRIBER
        assert first is DeletionOutcome.SOFT_DELETED
        assert [(c.id, depth) for c, depth in tree_after_first] == [(x.id, 0), (y.id, 1)]
        assert second is DeletionOutcome.HARD_DELETED
        assert [(c.body, depth) for c, depth in tree] == [(DELETED_COMMENT_BODY, 0)]
        assert [c.id for c, _ in tree] == [x.id]
