"""Front page feed use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.post.common import PostItem
from forum.domain.service import PostService, PrincipalService
from forum.domain.value import FeedView


class GetFeedRequest(BaseModel):
    """Get feed request."""

    view: str | None = None  # latest, subscribed or following; anything else is latest
    actor_id: str | None = None


class GetFeedResponse(BaseModel):
    """Get feed response."""

    view: FeedView
    posts: list[PostItem]
    total: int


class GetFeedUseCase(BaseUseCase):
    """Use case for the front page: the 50 newest posts of one view."""

    def __init__(
        self, post_service: PostService, principal_service: PrincipalService
    ) -> None:
        """Initialize get feed use case.

        Args:
            post_service: Post domain service
            principal_service: Principal domain service
        """
        self.post_service = post_service
        self.principal_service = principal_service

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Execute get feed flow."""
        view = FeedView.from_query(request.view)
        viewer = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        posts = await self.post_service.list_feed(viewer, view)
        items = [PostItem.from_post(p) for p in posts]
        return GetFeedResponse(view=view, posts=items, total=len(items))
