"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.post.common import PostItem
from forum.domain.service import PostService, PrincipalService
from forum.domain.value import CommunityId


class CreatePostRequest(BaseModel):
    """Create post request."""

    community_id: str  # UUID string
    title: str
    body: str
    author_id: str | None = None  # Principal ID from authenticated caller


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post in an approved community."""

    def __init__(
        self,
        post_service: PostService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            principal_service: Principal domain service
        """
        self.post_service = post_service
        self.principal_service = principal_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Raises:
            ForbiddenError: If the caller is anonymous
            NotFoundError: If the community does not exist
            ValidationError: If the community is unapproved or input is invalid
        """
        author = await self.principal_service.resolve_actor(
            actor_id_from(request.author_id)
        )
        post = await self.post_service.create_post(
            community_id=CommunityId(UUID(request.community_id)),
            author=author,
            title=request.title,
            body=request.body,
        )
        return PostItem.from_post(post)
