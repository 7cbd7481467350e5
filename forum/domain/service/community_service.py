"""Community domain service."""

from uuid import uuid4

import logfire

from forum.config import ContentSettings
from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.model import Community, Principal
from forum.domain.repository import (
    CommentRepository,
    CommunityRepository,
    MembershipRepository,
    PostRepository,
)
from forum.domain.value import CommunityId

from .base import Service, require_text
from .permission_service import PermissionService


class CommunityService(Service):
    """Domain service for community lifecycle.

    Members suggest communities; global admins approve or delete them.
    """

    def __init__(
        self,
        community_repository: CommunityRepository,
        membership_repository: MembershipRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        permission_service: PermissionService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
            membership_repository: Membership repository
            post_repository: Post repository
            comment_repository: Comment repository
            permission_service: Capability evaluation
            content_settings: Content limits
        """
        self.community_repository = community_repository
        self.membership_repository = membership_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.permission_service = permission_service
        self.content_settings = content_settings

    async def get_by_id(self, community_id: CommunityId) -> Community:
        """Get a community regardless of approval.

        Raises:
            NotFoundError: If community not found
        """
        community = await self.community_repository.find_by_id(community_id)
        if not community:
            logfire.warn("Community not found", community_id=str(community_id))
            raise NotFoundError("Community", str(community_id))
        return community

    async def get_visible_community(self, community_id: CommunityId) -> Community:
        """Get a community as ordinary browsing sees it.

        Raises:
            NotFoundError: If community not found or not yet approved
        """
        community = await self.community_repository.find_by_id(community_id)
        if not community or not community.approved:
            raise NotFoundError("Community", str(community_id))
        return community

    async def get_open_community(self, community_id: CommunityId) -> Community:
        """Get a community that may receive new content.

        Raises:
            NotFoundError: If community not found
            ValidationError: If the community is not approved
        """
        community = await self.get_by_id(community_id)
        if not community.approved:
            logfire.warn(
                "Rejected action on unapproved community",
                community_id=str(community_id),
            )
            raise ValidationError(f"Community {community_id} is not approved")
        return community

    async def list_communities(self, include_unapproved: bool = False) -> list[Community]:
        """List communities alphabetically."""
        return await self.community_repository.find_all(
            include_unapproved=include_unapproved
        )

    async def suggest_community(
        self, name: str, description: str, actor: Principal | None
    ) -> Community:
        """Store a suggested community, pending approval.

        Args:
            name: Community name
            description: Optional description
            actor: Suggesting principal (anonymous visitors cannot suggest)

        Returns:
            The stored (unapproved) community

        Raises:
            ForbiddenError: If the actor is anonymous
            ValidationError: If the name is blank or either field is too long
        """
        with logfire.span("community_service.suggest_community", name=name):
            if actor is None:
                raise ForbiddenError("suggest", "community", name, None)
            name = require_text(
                name.strip(), "Name", self.content_settings.community_name_max_length
            )
            description = description.strip()
            if len(description) > self.content_settings.community_description_max_length:
                raise ValidationError(
                    "Description must be at most "
                    f"{self.content_settings.community_description_max_length} characters"
                )

            community = Community(
                id=CommunityId(uuid4()),
                name=name,
                description=description,
                approved=False,
            )
            saved = await self.community_repository.save(community)
            logfire.info("Community suggested", community_id=str(saved.id), name=name)
            return saved

    async def approve_community(
        self, community_id: CommunityId, actor: Principal | None
    ) -> bool:
        """Approve a suggested community (global admins only).

        Returns:
            True if the community was pending and is now approved
        """
        with logfire.span(
            "community_service.approve_community", community_id=str(community_id)
        ):
            self.permission_service.require_global_admin(
                actor, "approve", "community", community_id
            )
            await self.get_by_id(community_id)
            changed = await self.community_repository.set_approved(community_id)
            logfire.info(
                "Community approved", community_id=str(community_id), changed=changed
            )
            return changed

    async def delete_community(
        self, community_id: CommunityId, actor: Principal | None
    ) -> None:
        """Delete a community with its posts, comments and memberships.

        Raises:
            ForbiddenError: If actor is not a global admin
            NotFoundError: If community not found
        """
        with logfire.span(
            "community_service.delete_community", community_id=str(community_id)
        ):
            self.permission_service.require_global_admin(
                actor, "delete", "community", community_id
            )
            await self.get_by_id(community_id)

            while True:
                posts = await self.post_repository.find_by_community(
                    community_id, limit=100
                )
                if not posts:
                    break
                for post in posts:
                    await self.comment_repository.delete_by_post(post.id)
                    await self.post_repository.delete(post.id)

            removed = await self.membership_repository.delete_by_community(community_id)
            await self.community_repository.delete(community_id)
            logfire.info(
                "Community deleted",
                community_id=str(community_id),
                memberships_removed=removed,
            )
