"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.post.common import PostItem
from forum.domain.service import PostService
from forum.domain.value import CommunityId


class ListPostsRequest(BaseModel):
    """List posts request."""

    community_id: str  # UUID string
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int


class ListPostsUseCase(BaseUseCase):
    """Use case for listing the posts of a community, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            NotFoundError: If the community is missing or unapproved
        """
        posts = await self.post_service.list_posts(
            CommunityId(UUID(request.community_id)),
            limit=request.limit,
            offset=request.offset,
        )
        items = [PostItem.from_post(p) for p in posts]
        return ListPostsResponse(posts=items, total=len(items))
