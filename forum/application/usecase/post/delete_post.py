"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.domain.service import PostService, PrincipalService
from forum.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    actor_id: str | None = None


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its comments."""

    def __init__(
        self,
        post_service: PostService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            principal_service: Principal domain service
        """
        self.post_service = post_service
        self.principal_service = principal_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller may not delete the post
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        await self.post_service.delete_post(PostId(UUID(request.post_id)), actor)
