"""Shared response models for community use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Community, Principal
from forum.domain.value import LedgerOutcome


class CommunityItem(BaseModel):
    """Community item in responses."""

    community_id: str
    name: str
    description: str
    approved: bool
    created_at: datetime

    @classmethod
    def from_community(cls, community: Community) -> "CommunityItem":
        return cls(
            community_id=str(community.id),
            name=community.name,
            description=community.description,
            approved=community.approved,
            created_at=community.created_at,
        )


class MemberItem(BaseModel):
    """Principal listed in a community roster."""

    principal_id: str
    display_name: str
    avatar_url: str | None

    @classmethod
    def from_principal(cls, principal: Principal) -> "MemberItem":
        return cls(
            principal_id=str(principal.id),
            display_name=principal.display_name,
            avatar_url=principal.avatar_url,
        )


class LedgerResponse(BaseModel):
    """Outcome of a membership ledger mutation."""

    outcome: LedgerOutcome
