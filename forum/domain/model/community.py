"""Community entity.

A community (a "topic") groups posts. Communities are suggested by members
and only become visible once a global admin approves them.
"""

from datetime import datetime, timezone

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommunityId


class Community(DomainModel):
    """Community entity.

    Unapproved communities are hidden from ordinary browsing and cannot
    receive new posts, comments or subscriptions.
    """

    id: CommunityId
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=1000)
    approved: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
