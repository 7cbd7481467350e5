"""Author page use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.post.common import PostItem
from forum.domain.service import FollowService, PostService, PrincipalService
from forum.domain.value import PrincipalId


class ListAuthorPostsRequest(BaseModel):
    """List the posts of one principal."""

    author_id: str  # UUID string
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    actor_id: str | None = None  # Viewer, None for anonymous


class ListAuthorPostsResponse(BaseModel):
    """Author page response."""

    author_id: str
    display_name: str
    avatar_url: str | None
    following: bool  # Whether the viewer follows the author
    posts: list[PostItem]
    total: int


class ListAuthorPostsUseCase(BaseUseCase):
    """Use case for a principal's page: who they are and what they posted."""

    def __init__(
        self,
        post_service: PostService,
        principal_service: PrincipalService,
        follow_service: FollowService,
    ) -> None:
        """Initialize list author posts use case.

        Args:
            post_service: Post domain service
            principal_service: Principal domain service
            follow_service: Follow domain service
        """
        self.post_service = post_service
        self.principal_service = principal_service
        self.follow_service = follow_service

    async def execute(self, request: ListAuthorPostsRequest) -> ListAuthorPostsResponse:
        """Execute list author posts flow.

        Raises:
            NotFoundError: If the author does not exist
        """
        author = await self.principal_service.get_by_id(
            PrincipalId(UUID(request.author_id))
        )
        viewer = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        posts = await self.post_service.list_by_author(
            author.id, limit=request.limit, offset=request.offset
        )
        items = [PostItem.from_post(p) for p in posts]
        return ListAuthorPostsResponse(
            author_id=str(author.id),
            display_name=author.display_name,
            avatar_url=author.avatar_url,
            following=await self.follow_service.is_following(viewer, author.id),
            posts=items,
            total=len(items),
        )
