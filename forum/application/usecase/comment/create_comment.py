"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import CommentService, PrincipalService
from forum.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    body: str
    author_id: str | None = None  # Principal ID from authenticated caller
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    body: str
    parent_id: str | None
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            principal_service: Principal domain service
        """
        self.comment_service = comment_service
        self.principal_service = principal_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            ForbiddenError: If the caller is anonymous
            NotFoundError: If the post does not exist
            ValidationError: If the body or reply target is invalid
        """
        author = await self.principal_service.resolve_actor(
            actor_id_from(request.author_id)
        )
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author=author,
            body=request.body,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
