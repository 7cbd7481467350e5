"""Update comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import CommentService, PrincipalService
from forum.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    body: str
    actor_id: str | None = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment_id: str
    body: str
    edited_at: datetime | None


class UpdateCommentUseCase(BaseUseCase):
    """Use case for an author editing their comment."""

    def __init__(
        self,
        comment_service: CommentService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            principal_service: Principal domain service
        """
        self.comment_service = comment_service
        self.principal_service = principal_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is not the author
            ContentDeletedException: If the comment was deleted
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        comment = await self.comment_service.edit_comment(
            CommentId(UUID(request.comment_id)), actor, request.body
        )
        return UpdateCommentResponse(
            comment_id=str(comment.id),
            body=comment.body,
            edited_at=comment.edited_at,
        )
