"""Post domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from forum.config import ContentSettings
from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import Post, Principal
from forum.domain.repository import (
    CommentRepository,
    MembershipRepository,
    PostRepository,
)
from forum.domain.value import CommunityId, FeedView, PostId, PrincipalId

from .base import Service, require_text
from .community_service import CommunityService
from .follow_service import FollowService
from .permission_service import PermissionService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        membership_repository: MembershipRepository,
        community_service: CommunityService,
        follow_service: FollowService,
        permission_service: PermissionService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
            membership_repository: Membership ledger, for the subscribed feed
            community_service: Community lookups and approval checks
            follow_service: Follow ledger, for the following feed
            permission_service: Capability evaluation
            content_settings: Content limits
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.membership_repository = membership_repository
        self.community_service = community_service
        self.follow_service = follow_service
        self.permission_service = permission_service
        self.content_settings = content_settings

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(
        self, community_id: CommunityId, limit: int = 50, offset: int = 0
    ) -> list[Post]:
        """List posts of a visible community, newest first.

        Raises:
            NotFoundError: If the community is missing or unapproved
        """
        await self.community_service.get_visible_community(community_id)
        return await self.post_repository.find_by_community(
            community_id, limit=limit, offset=offset
        )

    async def list_feed(
        self, viewer: Principal | None, view: FeedView, limit: int = 50
    ) -> list[Post]:
        """Front page posts across communities, newest first.

        Anonymous viewers have no subscriptions or follows, so every view
        shows them the latest posts.
        """
        if viewer is None or view is FeedView.LATEST:
            return await self.post_repository.find_recent(limit=limit)

        if view is FeedView.SUBSCRIBED:
            memberships = await self.membership_repository.find_by_principal(viewer.id)
            return await self.post_repository.find_recent(
                limit=limit, community_ids=[m.community_id for m in memberships]
            )

        followees = await self.follow_service.followee_ids(viewer.id)
        return await self.post_repository.find_recent(limit=limit, author_ids=followees)

    async def list_by_author(
        self, author_id: PrincipalId, limit: int = 50, offset: int = 0
    ) -> list[Post]:
        """Posts written by one principal, newest first."""
        return await self.post_repository.find_recent(
            limit=limit, offset=offset, author_ids=[author_id]
        )

    def _validate(self, title: str, body: str) -> tuple[str, str]:
        title = require_text(
            title.strip(), "Title", self.content_settings.title_max_length
        )
        body = require_text(body, "Body", self.content_settings.body_max_length)
        return title, body

    async def create_post(
        self,
        community_id: CommunityId,
        author: Principal | None,
        title: str,
        body: str,
    ) -> Post:
        """Create a post in an approved community.

        Args:
            community_id: Target community
            author: Authoring principal (anonymous visitors cannot post)
            title: Post title, trimmed
            body: Post body

        Returns:
            Created post

        Raises:
            ForbiddenError: If the author is anonymous
            NotFoundError: If the community does not exist
            ValidationError: If the community is unapproved or input is invalid
        """
        with logfire.span(
            "post_service.create_post",
            community_id=str(community_id),
            author_id=str(author.id) if author else None,
        ):
            if author is None:
                raise ForbiddenError("post in", "community", str(community_id), None)
            await self.community_service.get_open_community(community_id)
            title, body = self._validate(title, body)

            post = Post(
                id=PostId(uuid4()),
                community_id=community_id,
                author_id=author.id,
                title=title,
                body=body,
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                community_id=str(community_id),
                author_id=str(author.id),
            )
            return saved

    async def edit_post(
        self, post_id: PostId, actor: Principal | None, title: str, body: str
    ) -> Post:
        """Replace title and body of a post (author only).

        Raises:
            NotFoundError: If post not found
            ForbiddenError: If actor is not the author
            ValidationError: If input is invalid
        """
        with logfire.span(
            "post_service.edit_post",
            post_id=str(post_id),
            actor_id=str(actor.id) if actor else None,
        ):
            post = await self.get_by_id(post_id)
            caps = await self.permission_service.capabilities(
                actor, post.community_id, post.author_id
            )
            if not caps.can_edit_own_content:
                logfire.warn(
                    "Post edit rejected - not the author",
                    post_id=str(post_id),
                    actor_id=str(actor.id) if actor else None,
                )
                raise ForbiddenError(
                    "edit", "post", str(post_id), str(actor.id) if actor else None
                )
            title, body = self._validate(title, body)

            updated = await self.post_repository.update_content(
                post_id, title, body, datetime.now(timezone.utc)
            )
            if not updated:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post edited", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, actor: Principal | None) -> None:
        """Delete a post and all of its comments.

        Allowed for the author, global admins and admins of the post's
        community.

        Raises:
            NotFoundError: If post not found
            ForbiddenError: If actor may not delete the post
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            actor_id=str(actor.id) if actor else None,
        ):
            post = await self.get_by_id(post_id)
            caps = await self.permission_service.capabilities(
                actor, post.community_id, post.author_id
            )
            if not caps.can_delete:
                logfire.warn(
                    "Post delete rejected",
                    post_id=str(post_id),
                    actor_id=str(actor.id) if actor else None,
                )
                raise ForbiddenError(
                    "delete", "post", str(post_id), str(actor.id) if actor else None
                )

            removed = await self.comment_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted", post_id=str(post_id), comments_removed=removed
            )
