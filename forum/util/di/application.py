"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.auth import LoginUseCase
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.community import (
    ApproveCommunityUseCase,
    DeleteCommunityUseCase,
    DemoteAdminUseCase,
    GetCommunityUseCase,
    GrantCommunityAdminUseCase,
    GrantCommunityOwnerUseCase,
    ListCommunitiesUseCase,
    SetGlobalAdminUseCase,
    SubscribeUseCase,
    SuggestCommunityUseCase,
    UnsubscribeUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetFeedUseCase,
    GetPostUseCase,
    ListAuthorPostsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from forum.application.usecase.principal import (
    FollowUseCase,
    SearchPrincipalsUseCase,
    UnfollowUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, bootstrap_service: BootstrapService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(bootstrap_service=bootstrap_service)

    # Community use cases
    @provide(scope=Scope.REQUEST)
    def get_suggest_community_use_case(
        self, community_service: CommunityService, principal_service: PrincipalService
    ) -> SuggestCommunityUseCase:
        """Provide suggest community use case."""
        return SuggestCommunityUseCase(
            community_service=community_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_approve_community_use_case(
        self, community_service: CommunityService, principal_service: PrincipalService
    ) -> ApproveCommunityUseCase:
        """Provide approve community use case."""
        return ApproveCommunityUseCase(
            community_service=community_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_community_use_case(
        self, community_service: CommunityService, principal_service: PrincipalService
    ) -> DeleteCommunityUseCase:
        """Provide delete community use case."""
        return DeleteCommunityUseCase(
            community_service=community_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_communities_use_case(
        self,
        community_service: CommunityService,
        principal_service: PrincipalService,
        permission_service: PermissionService,
    ) -> ListCommunitiesUseCase:
        """Provide list communities use case."""
        return ListCommunitiesUseCase(
            community_service=community_service,
            principal_service=principal_service,
            permission_service=permission_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_community_use_case(
        self,
        community_service: CommunityService,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(
            community_service=community_service,
            membership_service=membership_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )

    # Membership ledger use cases
    @provide(scope=Scope.REQUEST)
    def get_subscribe_use_case(
        self, membership_service: MembershipService, principal_service: PrincipalService
    ) -> SubscribeUseCase:
        """Provide subscribe use case."""
        return SubscribeUseCase(
            membership_service=membership_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_unsubscribe_use_case(
        self, membership_service: MembershipService, principal_service: PrincipalService
    ) -> UnsubscribeUseCase:
        """Provide unsubscribe use case."""
        return UnsubscribeUseCase(
            membership_service=membership_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_grant_community_admin_use_case(
        self,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> GrantCommunityAdminUseCase:
        """Provide grant community admin use case."""
        return GrantCommunityAdminUseCase(
            membership_service=membership_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_grant_community_owner_use_case(
        self,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> GrantCommunityOwnerUseCase:
        """Provide grant community owner use case."""
        return GrantCommunityOwnerUseCase(
            membership_service=membership_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_demote_admin_use_case(
        self,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> DemoteAdminUseCase:
        """Provide demote admin use case."""
        return DemoteAdminUseCase(
            membership_service=membership_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_set_global_admin_use_case(
        self,
        membership_service: MembershipService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> SetGlobalAdminUseCase:
        """Provide set global admin use case."""
        return SetGlobalAdminUseCase(
            membership_service=membership_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, principal_service: PrincipalService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, principal_service: PrincipalService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, principal_service: PrincipalService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        community_service: CommunityService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            community_service=community_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self, post_service: PostService, principal_service: PrincipalService
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(
            post_service=post_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_author_posts_use_case(
        self,
        post_service: PostService,
        principal_service: PrincipalService,
        follow_service: FollowService,
    ) -> ListAuthorPostsUseCase:
        """Provide list author posts use case."""
        return ListAuthorPostsUseCase(
            post_service=post_service,
            principal_service=principal_service,
            follow_service=follow_service,
        )

    # Principal use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_use_case(
        self, follow_service: FollowService, principal_service: PrincipalService
    ) -> FollowUseCase:
        """Provide follow use case."""
        return FollowUseCase(
            follow_service=follow_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_unfollow_use_case(
        self, follow_service: FollowService, principal_service: PrincipalService
    ) -> UnfollowUseCase:
        """Provide unfollow use case."""
        return UnfollowUseCase(
            follow_service=follow_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_search_principals_use_case(
        self,
        principal_service: PrincipalService,
        permission_service: PermissionService,
    ) -> SearchPrincipalsUseCase:
        """Provide search principals use case."""
        return SearchPrincipalsUseCase(
            principal_service=principal_service,
            permission_service=permission_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, principal_service: PrincipalService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, principal_service: PrincipalService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, principal_service: PrincipalService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, principal_service=principal_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        community_service: CommunityService,
        permission_service: PermissionService,
        principal_service: PrincipalService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            community_service=community_service,
            permission_service=permission_service,
            principal_service=principal_service,
        )
