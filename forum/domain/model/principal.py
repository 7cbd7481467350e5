"""Principal aggregate root.

Principals are authenticated participants, created on their first
successful login through the external identity provider.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import GlobalRank, PrincipalId


class Principal(DomainModel):
    """Principal aggregate root.

    The global rank is only ever raised automatically (on login); it is
    never lowered by any automatic path.
    """

    id: PrincipalId
    external_id: str = Field(min_length=1, max_length=255)  # Stable provider id
    display_name: str = Field(min_length=1, max_length=255)
    avatar_url: Optional[str] = None
    rank: GlobalRank = GlobalRank.MEMBER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_global_admin(self) -> bool:
        return self.rank >= GlobalRank.ADMIN
