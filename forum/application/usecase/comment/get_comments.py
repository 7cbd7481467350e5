"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import (
    CommentService,
    CommunityService,
    PermissionService,
    PostService,
    PrincipalService,
    capabilities,
)
from forum.domain.value import Capabilities, PostId


class CommentItem(BaseModel):
    """Comment item in response, in display order."""

    comment_id: str
    post_id: str
    author_id: str
    body: str
    parent_id: str | None
    depth: int
    deleted: bool
    edited: bool
    edited_at: datetime | None
    created_at: datetime
    capabilities: Capabilities


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    actor_id: str | None = None  # Viewer, None for anonymous


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting all comments of a post in thread order."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        community_service: CommunityService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            community_service: Community domain service
            permission_service: Permission domain service
            principal_service: Principal domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.community_service = community_service
        self.permission_service = permission_service
        self.principal_service = principal_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments come back in pre-order with their depth, each carrying
        what the viewer may do with it.

        Raises:
            NotFoundError: If the post is missing or its community is hidden
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_by_id(post_id)
        await self.community_service.get_visible_community(post.community_id)
        viewer = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        # One rank lookup for the whole thread; only ownership varies per comment
        community_rank = await self.permission_service.get_community_rank(
            viewer, post.community_id
        )

        tree = await self.comment_service.get_thread(post_id)
        items = [
            CommentItem(
                comment_id=str(comment.id),
                post_id=str(comment.post_id),
                author_id=str(comment.author_id),
                body=comment.body,
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                depth=depth,
                deleted=comment.is_deleted,
                edited=comment.edited,
                edited_at=comment.edited_at,
                created_at=comment.created_at,
                capabilities=capabilities(viewer, community_rank, comment.author_id),
            )
            for comment, depth in tree
        ]

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=items,
            total=len(items),
        )
