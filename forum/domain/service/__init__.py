"""Domain services."""

from .bootstrap_service import BootstrapService
from .comment_service import CommentService
from .comment_tree import CommentTree, build_tree
from .community_service import CommunityService
from .follow_service import FollowService
from .membership_service import CommunityRoster, MembershipService
from .permission_service import PermissionService, capabilities
from .post_service import PostService
from .principal_service import PrincipalService

__all__ = [
    "BootstrapService",
    "CommentService",
    "CommentTree",
    "CommunityRoster",
    "CommunityService",
    "FollowService",
    "MembershipService",
    "PermissionService",
    "PostService",
    "PrincipalService",
    "build_tree",
    "capabilities",
]
