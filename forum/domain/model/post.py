"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommunityId, PostId, PrincipalId


class Post(DomainModel):
    """Post aggregate root.

    Posts belong to exactly one community and own a forest of comments.
    """

    id: PostId
    community_id: CommunityId
    author_id: PrincipalId
    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1)
    edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
