"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, ContentSettings
from forum.domain.repository import (
    CommentRepository,
    CommunityRepository,
    FollowRepository,
    MembershipRepository,
    PostRepository,
    PrincipalRepository,
)
from forum.domain.service import (
    BootstrapService,
    CommentService,
    CommunityService,
    FollowService,
    MembershipService,
    PermissionService,
    PostService,
    PrincipalService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_permission_service(
        self, membership_repository: MembershipRepository
    ) -> PermissionService:
        """Provide permission domain service."""
        return PermissionService(membership_repository=membership_repository)

    @provide
    def get_principal_service(
        self, principal_repository: PrincipalRepository
    ) -> PrincipalService:
        """Provide principal domain service."""
        return PrincipalService(principal_repository=principal_repository)

    @provide
    def get_follow_service(
        self,
        follow_repository: FollowRepository,
        principal_repository: PrincipalRepository,
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository,
            principal_repository=principal_repository,
        )

    @provide
    def get_bootstrap_service(
        self, principal_repository: PrincipalRepository, auth_settings: AuthSettings
    ) -> BootstrapService:
        """Provide admin bootstrap domain service."""
        return BootstrapService(
            principal_repository=principal_repository, auth_settings=auth_settings
        )

    @provide
    def get_community_service(
        self,
        community_repository: CommunityRepository,
        membership_repository: MembershipRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        permission_service: PermissionService,
        content_settings: ContentSettings,
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(
            community_repository=community_repository,
            membership_repository=membership_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            permission_service=permission_service,
            content_settings=content_settings,
        )

    @provide
    def get_membership_service(
        self,
        membership_repository: MembershipRepository,
        principal_repository: PrincipalRepository,
        community_service: CommunityService,
        permission_service: PermissionService,
    ) -> MembershipService:
        """Provide membership ledger domain service."""
        return MembershipService(
            membership_repository=membership_repository,
            principal_repository=principal_repository,
            community_service=community_service,
            permission_service=permission_service,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        membership_repository: MembershipRepository,
        community_service: CommunityService,
        follow_service: FollowService,
        permission_service: PermissionService,
        content_settings: ContentSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            membership_repository=membership_repository,
            community_service=community_service,
            follow_service=follow_service,
            permission_service=permission_service,
            content_settings=content_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        community_service: CommunityService,
        permission_service: PermissionService,
        content_settings: ContentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            community_service=community_service,
            permission_service=permission_service,
            content_settings=content_settings,
        )
