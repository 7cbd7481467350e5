"""Membership entity: one principal's rank inside one community."""

from forum.domain.model.common import DomainModel
from forum.domain.value import CommunityId, CommunityRank, PrincipalId


class Membership(DomainModel):
    """Membership row, unique per (community, principal).

    A missing row is equivalent to CommunityRank.NONE.
    """

    community_id: CommunityId
    principal_id: PrincipalId
    rank: CommunityRank = CommunityRank.SUBSCRIBER
