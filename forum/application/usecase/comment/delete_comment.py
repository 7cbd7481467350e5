"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import CommentService, PrincipalService
from forum.domain.value import CommentId, DeletionOutcome


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor_id: str | None = None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    outcome: DeletionOutcome


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment under the deletion policy."""

    def __init__(
        self,
        comment_service: CommentService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            principal_service: Principal domain service
        """
        self.comment_service = comment_service
        self.principal_service = principal_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller may not delete the comment
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        outcome = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), actor
        )
        return DeleteCommentResponse(comment_id=request.comment_id, outcome=outcome)
