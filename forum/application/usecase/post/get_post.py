"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, actor_id_from
from forum.application.usecase.post.common import PostItem
from forum.domain.service import (
    CommunityService,
    PermissionService,
    PostService,
    PrincipalService,
)
from forum.domain.value import Capabilities, PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    actor_id: str | None = None  # Viewer, None for anonymous


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem
    capabilities: Capabilities


class GetPostUseCase(BaseUseCase):
    """Use case for viewing a single post."""

    def __init__(
        self,
        post_service: PostService,
        community_service: CommunityService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            community_service: Community domain service
            permission_service: Permission domain service
            principal_service: Principal domain service
        """
        self.post_service = post_service
        self.community_service = community_service
        self.permission_service = permission_service
        self.principal_service = principal_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post is missing or its community is hidden
        """
        post = await self.post_service.get_by_id(PostId(UUID(request.post_id)))
        await self.community_service.get_visible_community(post.community_id)
        viewer = await self.principal_service.resolve_actor(
            actor_id_from(request.actor_id)
        )
        caps = await self.permission_service.capabilities(
            viewer, post.community_id, post.author_id
        )
        return GetPostResponse(post=PostItem.from_post(post), capabilities=caps)
