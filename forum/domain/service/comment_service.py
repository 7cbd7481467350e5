"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from forum.config import ContentSettings
from forum.domain.error import (
    ContentDeletedException,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from forum.domain.model import Comment, Principal
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    DELETED_COMMENT_BODY,
    CommentId,
    DeletionOutcome,
    PostId,
)

from .base import Service, require_text
from .comment_tree import CommentTree, build_tree
from .community_service import CommunityService
from .permission_service import PermissionService
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations.

    Owns the deletion policy: a comment with replies is soft-deleted so the
    thread below it stays attached; a leaf comment is removed outright.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        community_service: CommunityService,
        permission_service: PermissionService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post lookups
            community_service: Community approval checks
            permission_service: Capability evaluation
            content_settings: Content limits
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.community_service = community_service
        self.permission_service = permission_service
        self.content_settings = content_settings

    def _validate_body(self, body: str) -> str:
        body = require_text(body, "Body", self.content_settings.body_max_length)
        if body.strip() == DELETED_COMMENT_BODY:
            raise ValidationError("Body is reserved")
        return body

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def create_comment(
        self,
        post_id: PostId,
        author: Principal | None,
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The parent's has-descendants flag is set after the reply is stored.

        Args:
            post_id: Post ID
            author: Authoring principal (anonymous visitors cannot comment)
            body: Comment body
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ForbiddenError: If the author is anonymous
            NotFoundError: If the post does not exist
            ValidationError: If the body is invalid, the community is not
                approved, or the parent is missing or on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author.id) if author else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if author is None:
                raise ForbiddenError("comment on", "post", str(post_id), None)
            post = await self.post_service.get_by_id(post_id)
            await self.community_service.get_open_community(post.community_id)
            body = self._validate_body(body)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.post_id != post_id:
                    logfire.warn(
                        "Invalid reply target",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise ValidationError(f"Invalid parent comment: {parent_id}")

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author.id,
                body=body,
                parent_id=parent_id,
            )
            saved = await self.comment_repository.save(comment)
            if parent_id is not None:
                await self.comment_repository.mark_has_descendants(parent_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def edit_comment(
        self, comment_id: CommentId, actor: Principal | None, body: str
    ) -> Comment:
        """Replace the body of a comment (author only).

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If actor is not the author
            ContentDeletedException: If the comment was soft-deleted
            ValidationError: If the body is invalid
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id) if actor else None,
        ):
            comment = await self.get_by_id(comment_id)
            post = await self.post_service.get_by_id(comment.post_id)
            caps = await self.permission_service.capabilities(
                actor, post.community_id, comment.author_id
            )
            if not caps.can_edit_own_content:
                logfire.warn(
                    "Comment edit rejected - not the author",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id) if actor else None,
                )
                raise ForbiddenError(
                    "edit", "comment", str(comment_id), str(actor.id) if actor else None
                )
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))
            body = self._validate_body(body)

            updated = await self.comment_repository.update_body(
                comment_id, body, datetime.now(timezone.utc)
            )
            if not updated:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment edited", comment_id=str(comment_id))
            return updated

    async def delete_comment(
        self, comment_id: CommentId, actor: Principal | None
    ) -> DeletionOutcome:
        """Delete a comment according to the deletion policy.

        Steps:
        1. Load the comment
        2. Check the actor may delete it (author, global admin or admin of
           the post's community); nothing is written before this passes
        3. If it has ever had a reply, or has a live reply now, overwrite
           the body with the deleted sentinel
        4. Otherwise remove the row

        The check and the mutation are separate statements; a reply landing
        in between can be orphaned by a hard delete.

        Args:
            comment_id: Comment to delete
            actor: Acting principal

        Returns:
            Which kind of deletion was applied

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If actor may not delete the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id) if actor else None,
        ):
            comment = await self.get_by_id(comment_id)
            post = await self.post_service.get_by_id(comment.post_id)
            caps = await self.permission_service.capabilities(
                actor, post.community_id, comment.author_id
            )
            if not caps.can_delete:
                logfire.warn(
                    "Comment delete rejected",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id) if actor else None,
                )
                raise ForbiddenError(
                    "delete", "comment", str(comment_id), str(actor.id) if actor else None
                )

            has_subtree = comment.has_descendants
            if not has_subtree:
                has_subtree = await self.comment_repository.count_children(comment_id) > 0

            if has_subtree:
                await self.comment_repository.update_body(
                    comment_id, DELETED_COMMENT_BODY, datetime.now(timezone.utc)
                )
                outcome = DeletionOutcome.SOFT_DELETED
            else:
                await self.comment_repository.delete(comment_id)
                outcome = DeletionOutcome.HARD_DELETED

            logfire.info(
                "Comment deleted", comment_id=str(comment_id), outcome=outcome.value
            )
            return outcome

    async def get_thread(self, post_id: PostId) -> CommentTree:
        """Get every comment of a post as a tree.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("comment_service.get_thread", post_id=str(post_id)):
            await self.post_service.get_by_id(post_id)
            comments = await self.comment_repository.find_by_post(post_id)
            tree = build_tree(comments)
            logfire.info("Thread built", post_id=str(post_id), count=len(tree))
            return tree
