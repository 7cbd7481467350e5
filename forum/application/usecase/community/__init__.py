"""Community use cases."""

from .approve_community import (
    ApproveCommunityRequest,
    ApproveCommunityResponse,
    ApproveCommunityUseCase,
)
from .common import CommunityItem, LedgerResponse, MemberItem
from .delete_community import DeleteCommunityRequest, DeleteCommunityUseCase
from .get_community import (
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
)
from .list_communities import (
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
)
from .roles import (
    CommunityRoleRequest,
    DemoteAdminUseCase,
    GrantCommunityAdminUseCase,
    GrantCommunityOwnerUseCase,
    SetGlobalAdminRequest,
    SetGlobalAdminUseCase,
)
from .subscribe import (
    SubscribeResponse,
    SubscribeUseCase,
    SubscriptionRequest,
    UnsubscribeResponse,
    UnsubscribeUseCase,
)
from .suggest_community import SuggestCommunityRequest, SuggestCommunityUseCase

__all__ = [
    "ApproveCommunityRequest",
    "ApproveCommunityResponse",
    "ApproveCommunityUseCase",
    "CommunityItem",
    "CommunityRoleRequest",
    "DeleteCommunityRequest",
    "DeleteCommunityUseCase",
    "DemoteAdminUseCase",
    "GetCommunityRequest",
    "GetCommunityResponse",
    "GetCommunityUseCase",
    "GrantCommunityAdminUseCase",
    "GrantCommunityOwnerUseCase",
    "LedgerResponse",
    "ListCommunitiesRequest",
    "ListCommunitiesResponse",
    "ListCommunitiesUseCase",
    "MemberItem",
    "SetGlobalAdminRequest",
    "SetGlobalAdminUseCase",
    "SubscribeResponse",
    "SubscribeUseCase",
    "SubscriptionRequest",
    "SuggestCommunityRequest",
    "SuggestCommunityUseCase",
    "UnsubscribeResponse",
    "UnsubscribeUseCase",
]
