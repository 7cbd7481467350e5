"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.post.common import PostItem
from forum.domain.service import PostService, PrincipalService
from forum.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    title: str
    body: str
    actor_id: str | None = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for an author editing their post."""

    def __init__(
        self,
        post_service: PostService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            principal_service: Principal domain service
        """
        self.post_service = post_service
        self.principal_service = principal_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller is not the author
            ValidationError: If input is invalid
        """
        actor = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        post = await self.post_service.edit_post(
            PostId(UUID(request.post_id)), actor, request.title, request.body
        )
        return PostItem.from_post(post)
